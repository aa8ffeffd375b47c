"""Core type definitions"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from backend_copier.constants import CONFIG_DIR_NAME
from backend_copier.platforms import get_executable_name


@dataclass(frozen=True)
class CopyLayout:
    """Source and destination paths for one copy run"""
    source_dist_dir: Path
    source_onedir: Path
    dest_dir: Path
    system: str

    @property
    def executable_name(self) -> str:
        return get_executable_name(self.system)

    @property
    def source_executable(self) -> Path:
        return self.source_onedir / self.executable_name

    @property
    def dest_executable(self) -> Path:
        return self.dest_dir / self.executable_name

    @property
    def source_config_dir(self) -> Path:
        return self.source_dist_dir / CONFIG_DIR_NAME

    @property
    def dest_config_dir(self) -> Path:
        return self.dest_dir / CONFIG_DIR_NAME


@dataclass(frozen=True)
class CopyResult:
    """Outcome of a successful copy run"""
    executable: Path
    size_bytes: int
    entries: List[str]
    config_files: Optional[List[str]] = None

    @property
    def config_copied(self) -> bool:
        return self.config_files is not None
