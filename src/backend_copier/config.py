"""Path and logging configuration resolved from the environment."""
import os
import platform
from pathlib import Path
from typing import Mapping, Optional

from backend_copier.constants import (
    BACKEND_DIR_NAME,
    DIST_DIR_NAME,
    ENV_DEST_DIR,
    ENV_DIST_DIR,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_ROOT,
    FRONTEND_DIR_NAME,
    ONEDIR_NAME,
)
from backend_copier.types import CopyLayout


def _resolve(root: Path, value: Optional[str], default: Path) -> Path:
    if not value:
        return default
    path = Path(value)
    return path if path.is_absolute() else root / path


def get_project_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Project root holding dist/ and frontend/."""
    environ = os.environ if environ is None else environ
    root = environ.get(ENV_ROOT)
    return Path(root).resolve() if root else Path.cwd()


def resolve_layout(
    root: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    system: Optional[str] = None,
) -> CopyLayout:
    """Build the copy layout for a project root.

    Defaults mirror the build layout: ``<root>/dist/main`` is copied into
    ``<root>/frontend/backend``. The dist and destination directories can
    be overridden through the environment; relative overrides resolve
    against the root.
    """
    environ = os.environ if environ is None else environ
    if root is None:
        root = get_project_root(environ)

    dist_dir = _resolve(root, environ.get(ENV_DIST_DIR), root / DIST_DIR_NAME)
    dest_dir = _resolve(
        root,
        environ.get(ENV_DEST_DIR),
        root / FRONTEND_DIR_NAME / BACKEND_DIR_NAME,
    )

    return CopyLayout(
        source_dist_dir=dist_dir,
        source_onedir=dist_dir / ONEDIR_NAME,
        dest_dir=dest_dir,
        system=system or platform.system(),
    )


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_LOG_LEVEL, "INFO").upper()


def get_log_format(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_LOG_FORMAT, "console").lower()
