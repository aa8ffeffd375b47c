"""Command line entry point."""
import sys

from backend_copier.config import (
    get_log_format,
    get_log_level,
    get_project_root,
    resolve_layout,
)
from backend_copier.constants import BUILD_COMMAND
from backend_copier.copier import copy_prebuilt_backend
from backend_copier.errors import CopierError, SourceMissingError, log_error
from backend_copier.logging import configure_logging, get_logger

logger = get_logger(__name__)


def print_build_guidance(root) -> None:
    print("", file=sys.stderr)
    print(
        f"Please build the backend first by running `{BUILD_COMMAND}` "
        "in the project root directory:",
        file=sys.stderr,
    )
    print(f"   cd {root}", file=sys.stderr)
    print(f"   {BUILD_COMMAND}", file=sys.stderr)
    print("", file=sys.stderr)


def main() -> None:
    """Copy the prebuilt backend into the frontend packaging directory."""
    configure_logging(get_log_level(), get_log_format())

    root = get_project_root()
    layout = resolve_layout(root)

    try:
        copy_prebuilt_backend(layout)
    except CopierError as e:
        log_error(e, logger)
        if isinstance(e, SourceMissingError):
            print_build_guidance(root)
        sys.exit(e.exit_code)
