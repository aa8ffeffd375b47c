"""Platform detection and mapping."""
import platform
from typing import NamedTuple, Optional


class PlatformMapping(NamedTuple):
    """Platform-specific values."""
    executable_name: str
    needs_chmod: bool


WINDOWS = "Windows"

POSIX_MAPPING = PlatformMapping(executable_name="main", needs_chmod=True)

# Keyed by platform.system()
PLATFORM_MAPPINGS = {
    "Linux": POSIX_MAPPING,
    "Darwin": POSIX_MAPPING,
    WINDOWS: PlatformMapping(
        executable_name="main.exe",  # PyInstaller appends .exe on Windows
        needs_chmod=False,
    ),
}


def get_platform_mapping(system: Optional[str] = None) -> PlatformMapping:
    """Get the mapping for a system, defaulting to the host.

    Systems without an explicit entry are treated as POSIX.
    """
    if system is None:
        system = platform.system()
    return PLATFORM_MAPPINGS.get(system, POSIX_MAPPING)


def get_executable_name(system: Optional[str] = None) -> str:
    """Get the backend executable file name for a system."""
    return get_platform_mapping(system).executable_name


def needs_executable_bit(system: Optional[str] = None) -> bool:
    """Check if the copied executable needs chmod +x."""
    return get_platform_mapping(system).needs_chmod


def is_windows(system: Optional[str] = None) -> bool:
    if system is None:
        system = platform.system()
    return system == WINDOWS
