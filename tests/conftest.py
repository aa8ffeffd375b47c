import logging
import platform
from pathlib import Path

import pytest
import structlog

from backend_copier.config import resolve_layout
from backend_copier.platforms import get_executable_name
from backend_copier.types import CopyLayout

EXECUTABLE_BYTES = b"\x7fELF" + b"\x00" * 4096


def make_onedir_build(root: Path, system: str, with_config: bool = True) -> Path:
    """Lay out a fake onedir build under root/dist"""
    onedir = root / "dist" / "main"
    internal = onedir / "_internal"
    (internal / "lib").mkdir(parents=True)

    (onedir / get_executable_name(system)).write_bytes(EXECUTABLE_BYTES)
    (internal / "base_library.zip").write_bytes(b"PK\x05\x06" + b"\x00" * 18)
    (internal / "lib" / "libpython.so").write_bytes(b"\x00" * 128)

    if with_config:
        config = root / "dist" / "config"
        config.mkdir()
        (config / "settings.yaml").write_text("server:\n  port: 8080\n")
        (config / "logging.yaml").write_text("version: 1\n")
    return onedir


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog and root logger state between tests"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def system() -> str:
    return platform.system()


@pytest.fixture
def project_root(tmp_path: Path, system: str) -> Path:
    """Project root with a complete onedir build and config"""
    make_onedir_build(tmp_path, system)
    return tmp_path


@pytest.fixture
def layout(project_root: Path, system: str) -> CopyLayout:
    return resolve_layout(project_root, environ={}, system=system)


def tree_names(path: Path) -> set[str]:
    """Relative names of everything below path"""
    return {str(p.relative_to(path)) for p in path.rglob("*")}
