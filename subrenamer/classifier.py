"""Classifier module for sorting files into subtitles and videos."""
import logging
import re
from pathlib import Path

from .config import RenamerConfig
from .models import ClassifiedFile
from .report import Reporter

log = logging.getLogger(__name__)


def file_extension(path: Path) -> str:
    """Return the lowercase final extension without the dot ("" if none)."""
    return path.suffix.lower().lstrip(".")


def extract_episode_id(filename: str, pattern: re.Pattern) -> str | None:
    """
    Extract the episode identifier from a file name.

    Only the first capture group is used, e.g. S(\\d{2})E(\\d{2}) on
    "Show.S01E05.mkv" yields "01".

    Args:
        filename: Base name of the file (not the full path)
        pattern: Compiled episode pattern

    Returns:
        Text of the first capture group, or None if there is no match,
        no capture group, or the group matched nothing
    """
    if pattern.groups < 1:
        return None
    match = pattern.search(filename)
    if not match:
        return None
    return match.group(1) or None


def classify_files(
    paths: list[Path],
    config: RenamerConfig,
    reporter: Reporter
) -> tuple[list[ClassifiedFile], list[ClassifiedFile]]:
    """
    Split files into subtitles and videos and extract their identifiers.

    Subtitle extensions are checked first, so an extension configured for
    both roles is treated as a subtitle. Files with an unknown extension or
    without an identifier are dropped.

    Args:
        paths: Candidate file paths
        config: Run configuration
        reporter: Output for the verbose file counts

    Returns:
        Tuple of (subtitles, videos), each in input order
    """
    subtitles = []
    videos = []

    for path in paths:
        extension = file_extension(path)

        if extension in config.subtitle_extensions:
            pattern, bucket, role = config.subtitle_pattern, subtitles, "subtitle"
        elif extension in config.video_extensions:
            pattern, bucket, role = config.video_pattern, videos, "video"
        else:
            log.debug("Dropped %s: extension %r not configured", path.name, extension)
            continue

        episode_id = extract_episode_id(path.name, pattern)
        if episode_id is None:
            log.debug("Dropped %s %s: no episode id", role, path.name)
            continue

        bucket.append(ClassifiedFile(path=path, episode_id=episode_id, extension=extension))

    reporter.verbose(f"Found {len(subtitles)} subtitle(s) and {len(videos)} video(s)")

    return subtitles, videos
