"""Exception hierarchy for sub-renamer."""
from pathlib import Path


class RenamerError(Exception):
    """Base error for sub-renamer."""


class ConfigError(RenamerError):
    """Raised when the run configuration cannot be built."""


class MissingPatternError(ConfigError):
    """Raised when neither a subtitle nor a video pattern was given."""

    def __init__(self):
        super().__init__(
            "At least one regex is required (--srt-regex or --mkv-regex)"
        )


class InvalidPatternError(ConfigError):
    """Raised when an episode pattern does not compile."""

    def __init__(self, role: str, pattern: str, reason: str = ""):
        self.role = role
        self.pattern = pattern
        message = f"Invalid {role} regex: {pattern}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class DirectoryNotFoundError(ConfigError, FileNotFoundError):
    """Raised when the target directory does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory does not exist: {path}")


class ScanError(RenamerError):
    """Raised when the target directory itself cannot be listed."""
