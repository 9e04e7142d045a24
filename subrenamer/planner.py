"""Planner module: pair subtitles with videos and compute new names."""
import logging
from pathlib import Path

from .models import ClassifiedFile, RenameOperation
from .report import Reporter

log = logging.getLogger(__name__)


def build_video_index(videos: list[ClassifiedFile]) -> dict[str, ClassifiedFile]:
    """
    Map episode ids to videos.

    When two videos share an id the later one wins.
    """
    index: dict[str, ClassifiedFile] = {}
    for video in videos:
        previous = index.get(video.episode_id)
        if previous is not None:
            log.debug(
                "Episode %s: %s replaces %s",
                video.episode_id, video.path.name, previous.path.name
            )
        index[video.episode_id] = video
    return index


def subtitle_destination(subtitle: ClassifiedFile, video: ClassifiedFile) -> Path:
    """Return the subtitle path renamed after the video, keeping its own extension."""
    return subtitle.path.parent / f"{video.path.stem}.{subtitle.extension}"


def plan_renames(
    subtitles: list[ClassifiedFile],
    videos: list[ClassifiedFile],
    reporter: Reporter
) -> list[RenameOperation]:
    """
    Plan the renames for all subtitles. No filesystem access.

    Args:
        subtitles: Classified subtitles
        videos: Classified videos
        reporter: Output for unmatched subtitles

    Returns:
        Rename operations in subtitle order
    """
    index = build_video_index(videos)
    operations = []

    for subtitle in subtitles:
        video = index.get(subtitle.episode_id)
        if video is None:
            reporter.warn(
                f"No video found for episode '{subtitle.episode_id}' "
                f"(subtitle: {subtitle.path.name})"
            )
            continue

        destination = subtitle_destination(subtitle, video)

        # Already named after its video
        if destination == subtitle.path:
            continue

        operations.append(RenameOperation(
            source=subtitle.path,
            destination=destination,
            episode_id=subtitle.episode_id
        ))

    return operations
