"""Data models for the subrenamer package."""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ClassifiedFile:
    """A subtitle or video file with its extracted episode identifier."""
    path: Path
    episode_id: str
    extension: str


@dataclass(frozen=True)
class RenameOperation:
    """A planned subtitle rename."""
    source: Path
    destination: Path
    episode_id: str


@dataclass
class RenameSummary:
    """Counters for an executed (or simulated) batch of renames."""
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    dry_run: bool = False

    @property
    def total(self) -> int:
        return self.succeeded + self.failed + self.skipped
