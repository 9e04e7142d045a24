"""
sub-renamer - Subtitle Renamer

A CLI tool for renaming subtitles after the video of the same episode.
"""
from .models import ClassifiedFile, RenameOperation, RenameSummary
from .errors import (
    RenamerError,
    ConfigError,
    MissingPatternError,
    InvalidPatternError,
    DirectoryNotFoundError,
    ScanError
)
from .config import RenamerConfig, build_config, parse_extensions
from .classifier import classify_files, extract_episode_id
from .planner import plan_renames
from .executor import execute_renames
from .renamer import SubtitleRenamer, VERSION

__version__ = VERSION
__all__ = [
    "ClassifiedFile",
    "RenameOperation",
    "RenameSummary",
    "RenamerError",
    "ConfigError",
    "MissingPatternError",
    "InvalidPatternError",
    "DirectoryNotFoundError",
    "ScanError",
    "RenamerConfig",
    "build_config",
    "parse_extensions",
    "classify_files",
    "extract_episode_id",
    "plan_renames",
    "execute_renames",
    "SubtitleRenamer",
]
