"""Copy a prebuilt onedir backend into the packaging directory."""

from backend_copier.errors import CopyIncompleteError, SourceMissingError
from backend_copier.logging import get_logger
from backend_copier.platforms import needs_executable_bit
from backend_copier.types import CopyLayout, CopyResult
from backend_copier.utils.fs import (
    copy_entries,
    copy_flat_files,
    format_size_mb,
    make_executable,
    reset_directory,
)

logger = get_logger(__name__)


def copy_config_files(layout: CopyLayout) -> list[str] | None:
    """Copy config files flat into the destination config directory.

    Returns None when the build produced no config directory.
    """
    if not layout.source_config_dir.exists():
        logger.warning("No config files found", path=str(layout.source_config_dir))
        return None

    copied = copy_flat_files(layout.source_config_dir, layout.dest_config_dir)
    logger.info(f"Copied {len(copied)} config files", count=len(copied))
    return copied


def copy_prebuilt_backend(layout: CopyLayout) -> CopyResult:
    """Reset the destination and copy the onedir build and config into it.

    Raises SourceMissingError when the build output has no executable and
    CopyIncompleteError when the executable did not arrive. Any other
    filesystem or chmod failure propagates unchanged.
    """
    logger.info("Copying pre-built backend executable", destination=str(layout.dest_dir))

    reset_directory(layout.dest_dir)

    if not layout.source_executable.exists():
        raise SourceMissingError(layout.source_executable)

    logger.info("Detected onedir backend build", path=str(layout.source_onedir))
    entries = copy_entries(layout.source_onedir, layout.dest_dir)

    if not layout.dest_executable.exists():
        raise CopyIncompleteError(layout.dest_executable)

    if needs_executable_bit(layout.system):
        make_executable(layout.dest_executable)

    size_bytes = layout.dest_executable.stat().st_size
    size_mb = format_size_mb(size_bytes)
    logger.info(f"Copied executable ({size_mb} MB)", size_mb=size_mb)

    config_files = copy_config_files(layout)

    logger.info("Backend ready for packaging", destination=str(layout.dest_dir))
    return CopyResult(
        executable=layout.dest_executable,
        size_bytes=size_bytes,
        entries=entries,
        config_files=config_files,
    )
