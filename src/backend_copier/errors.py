"""Error handling for the backend copier."""
from pathlib import Path
from typing import Any, Dict, Optional

from backend_copier.logging import get_logger

EXIT_FAILURE = 1


def log_error(error: Exception, logger=None) -> None:
    """Log an error with its structured details."""
    logger = logger or get_logger(__name__)

    error_info: Dict[str, Any] = {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
    if isinstance(error, CopierError):
        error_info["exit_code"] = error.exit_code
        error_info.update(error.details)

    logger.error("Backend copy failed", **error_info)


class CopierError(Exception):
    """Base error class for the backend copier."""

    def __init__(
        self,
        message: str,
        exit_code: int = EXIT_FAILURE,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.details = details or {}


class SourceMissingError(CopierError):
    """Prebuilt executable not found in the build output."""

    def __init__(self, path: Path):
        super().__init__(
            f"Pre-built onedir executable not found at: {path}",
            details={"path": str(path)},
        )
        self.path = path


class CopyIncompleteError(CopierError):
    """Executable missing from the destination after the copy."""

    def __init__(self, path: Path):
        super().__init__(
            f"Backend executable missing after copy: {path}",
            details={"path": str(path)},
        )
        self.path = path
