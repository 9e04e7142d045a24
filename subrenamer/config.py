"""Run configuration: pattern fallback, extension lists and env defaults."""
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import DirectoryNotFoundError, InvalidPatternError, MissingPatternError

log = logging.getLogger(__name__)

DEFAULT_SUBTITLE_EXTENSIONS = "srt"
DEFAULT_VIDEO_EXTENSIONS = "mkv"

# Environment variables that provide CLI defaults
ENV_SUBTITLE_REGEX = "SUBRENAMER_SRT_REGEX"
ENV_VIDEO_REGEX = "SUBRENAMER_VIDEO_REGEX"
ENV_SUBTITLE_EXT = "SUBRENAMER_SRT_EXT"
ENV_VIDEO_EXT = "SUBRENAMER_VIDEO_EXT"


@dataclass(frozen=True)
class RenamerConfig:
    """Validated settings for a single run. Built once, never mutated."""
    subtitle_pattern: re.Pattern
    video_pattern: re.Pattern
    subtitle_extensions: frozenset[str]
    video_extensions: frozenset[str]
    directory: Path
    recursive: bool = False
    dry_run: bool = False
    quiet: bool = False
    verbose: bool = False


def parse_extensions(text: str) -> frozenset[str]:
    """
    Parse a comma-separated extension list.

    "mkv, MP4 ,.avi" becomes {"mkv", "mp4", "avi"}. Empty tokens are dropped.

    Args:
        text: Comma-separated extensions

    Returns:
        Set of lowercase extensions without the leading dot
    """
    extensions = set()
    for token in text.split(","):
        token = token.strip().lower()
        if token.startswith("."):
            token = token[1:]
        if token:
            extensions.add(token)
    return frozenset(extensions)


def _compile(role: str, pattern: str) -> re.Pattern:
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(role, pattern, str(e)) from e
    if compiled.groups < 1:
        log.warning(
            "%s regex %r has no capture group; no %s file will match",
            role, pattern, role
        )
    return compiled


def build_config(
    subtitle_regex: str | None,
    video_regex: str | None,
    subtitle_ext: str = DEFAULT_SUBTITLE_EXTENSIONS,
    video_ext: str = DEFAULT_VIDEO_EXTENSIONS,
    directory: str | Path = ".",
    recursive: bool = False,
    dry_run: bool = False,
    quiet: bool = False,
    verbose: bool = False
) -> RenamerConfig:
    """
    Validate raw settings and build the run configuration.

    When only one pattern is given (the other is None) it is used for both
    subtitles and videos. An empty pattern counts as given.

    Raises:
        MissingPatternError: If neither pattern is given.
        InvalidPatternError: If an effective pattern does not compile.
        DirectoryNotFoundError: If the directory does not exist.
    """
    if subtitle_regex is None and video_regex is None:
        raise MissingPatternError()

    subtitle_source = video_regex if subtitle_regex is None else subtitle_regex
    video_source = subtitle_regex if video_regex is None else video_regex

    subtitle_pattern = _compile("subtitle", subtitle_source)
    video_pattern = _compile("video", video_source)

    directory = Path(directory)
    if not directory.exists():
        raise DirectoryNotFoundError(directory)

    return RenamerConfig(
        subtitle_pattern=subtitle_pattern,
        video_pattern=video_pattern,
        subtitle_extensions=parse_extensions(subtitle_ext),
        video_extensions=parse_extensions(video_ext),
        directory=directory,
        recursive=recursive,
        dry_run=dry_run,
        quiet=quiet,
        verbose=verbose
    )


def load_env_defaults() -> dict[str, str | None]:
    """
    Load CLI defaults from the environment.

    Priority:
    1. Variables already set in the environment
    2. .env file in current directory
    3. .env file in user home directory

    Returns:
        Dict with srt_regex, mkv_regex, srt_ext and video_ext keys
    """
    for env_path in (Path.cwd() / ".env", Path.home() / ".env"):
        if env_path.is_file():
            load_dotenv(env_path, override=False)

    return {
        "srt_regex": os.environ.get(ENV_SUBTITLE_REGEX) or None,
        "mkv_regex": os.environ.get(ENV_VIDEO_REGEX) or None,
        "srt_ext": os.environ.get(ENV_SUBTITLE_EXT) or DEFAULT_SUBTITLE_EXTENSIONS,
        "video_ext": os.environ.get(ENV_VIDEO_EXT) or DEFAULT_VIDEO_EXTENSIONS,
    }
