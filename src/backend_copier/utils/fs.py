import shutil
import subprocess
from pathlib import Path
from typing import List

from backend_copier.constants import BYTES_PER_MB
from backend_copier.logging import get_logger

logger = get_logger(__name__)


def reset_directory(path: Path) -> None:
    """Remove a directory tree if present and recreate it empty."""
    if path.is_symlink() or path.is_file():
        logger.info("Removing existing destination entry", path=str(path))
        path.unlink()
    elif path.exists():
        logger.info("Cleaning up existing directory", path=str(path))
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)


def copy_entries(src_dir: Path, dest_dir: Path) -> List[str]:
    """Copy every immediate entry of src_dir into dest_dir, recursively.

    Existing destination entries are overwritten. Returns the copied names.
    """
    names = sorted(entry.name for entry in src_dir.iterdir())
    for name in names:
        src = src_dir / name
        dest = dest_dir / name
        if src.is_dir() and not src.is_symlink():
            shutil.copytree(src, dest, symlinks=True, dirs_exist_ok=True)
        else:
            if dest.is_symlink() or dest.is_file():
                dest.unlink()
            shutil.copy2(src, dest, follow_symlinks=False)
        logger.debug("Copied entry", source=str(src), destination=str(dest))
    return names


def copy_flat_files(src_dir: Path, dest_dir: Path) -> List[str]:
    """Copy the files directly inside src_dir into dest_dir.

    Subdirectories are not descended into.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)

    copied = []
    for item in sorted(src_dir.iterdir()):
        if not item.is_file():
            logger.warning("Skipping non-file config entry", path=str(item))
            continue
        shutil.copyfile(item, dest_dir / item.name)
        copied.append(item.name)
    return copied


def make_executable(path: Path) -> None:
    """Mark a file executable with the system chmod command."""
    logger.debug("Setting executable bit", path=str(path))
    subprocess.run(["chmod", "+x", str(path)], check=True)


def format_size_mb(size_bytes: int) -> str:
    """Byte count in MiB, two decimals."""
    return f"{size_bytes / BYTES_PER_MB:.2f}"
