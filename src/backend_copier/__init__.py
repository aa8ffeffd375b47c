"""Backend copier package."""

from backend_copier.types import CopyLayout, CopyResult
from backend_copier.config import resolve_layout
from backend_copier.copier import copy_prebuilt_backend
from backend_copier.errors import (
    CopierError,
    SourceMissingError,
    CopyIncompleteError,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "CopyLayout",
    "CopyResult",

    # Operations
    "resolve_layout",
    "copy_prebuilt_backend",

    # Error types
    "CopierError",
    "SourceMissingError",
    "CopyIncompleteError",
]
