#!/usr/bin/env python3
"""
sub-renamer - Subtitle Renamer

A CLI tool that renames subtitle files after the video of the same episode.
"""
import argparse
import sys
from pathlib import Path

from .classifier import classify_files
from .config import RenamerConfig, build_config, load_env_defaults
from .errors import ConfigError, ScanError
from .executor import execute_renames
from .logging_utils import setup_logging
from .models import RenameSummary
from .planner import plan_renames
from .report import Reporter
from .scanner import find_files

VERSION = "1.0.0"

USAGE_EXAMPLES = r"""
Examples:
  # Same regex for subtitles and videos:
  sub-renamer --srt-regex 'S(\d{2})E(\d{2})' --mkv-regex 'S(\d{2})E(\d{2})'

  # Several extensions, recursive:
  sub-renamer --srt-regex 'S(\d{2})E(\d{2})' --srt-ext srt,ass,vtt --video-ext mkv,mp4,avi --recursive

  # Dry run (nothing is renamed):
  sub-renamer --srt-regex 'S(\d{2})E(\d{2})' --dry-run

  # Specific directory:
  sub-renamer --srt-regex 'S(\d{2})E(\d{2})' --directory /path/to/episodes
"""


class SubtitleRenamer:
    """Runs scan -> classify -> plan -> execute for one configuration."""

    def __init__(self, config: RenamerConfig, reporter: Reporter | None = None):
        self.config = config
        self.reporter = reporter or Reporter(quiet=config.quiet, verbose=config.verbose)

    def run(self) -> RenameSummary:
        """
        Rename every matched subtitle in the configured directory.

        Raises:
            ScanError: If the directory cannot be listed.
        """
        files = find_files(self.config.directory, self.config.recursive, self.reporter)
        subtitles, videos = classify_files(files, self.config, self.reporter)
        operations = plan_renames(subtitles, videos, self.reporter)
        return execute_renames(operations, self.config, self.reporter)


def build_parser(defaults: dict[str, str | None]) -> argparse.ArgumentParser:
    """Create the argument parser. ``defaults`` come from the environment."""
    parser = argparse.ArgumentParser(
        prog="sub-renamer",
        description="Rename subtitles to match the video file of the same episode.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--srt-regex",
        default=defaults["srt_regex"],
        metavar="REGEX",
        help="Regex whose first group is the episode id in subtitle names "
             "(e.g. 'S(\\d{2})E(\\d{2})')"
    )
    parser.add_argument(
        "--mkv-regex",
        default=defaults["mkv_regex"],
        metavar="REGEX",
        help="Regex whose first group is the episode id in video names "
             "(defaults to --srt-regex)"
    )
    parser.add_argument(
        "--srt-ext",
        default=defaults["srt_ext"],
        help="Comma-separated subtitle extensions (default: srt)"
    )
    parser.add_argument(
        "--video-ext",
        default=defaults["video_ext"],
        help="Comma-separated video extensions (default: mkv)"
    )
    parser.add_argument(
        "--directory", "-d",
        type=Path,
        default=Path("."),
        help="Directory to search (default: current directory)"
    )
    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Search subdirectories too"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be renamed without actually renaming"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors (dry-run lines are still shown)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser(load_env_defaults())
    parsed_args = parser.parse_args(args)

    setup_logging(parsed_args.verbose)

    if parsed_args.srt_regex is None and parsed_args.mkv_regex is None:
        print("Error: at least one regex is required (--srt-regex or --mkv-regex).",
              file=sys.stderr)
        print(USAGE_EXAMPLES, file=sys.stderr)
        return 1

    reporter = Reporter(quiet=parsed_args.quiet, verbose=parsed_args.verbose)

    try:
        config = build_config(
            parsed_args.srt_regex,
            parsed_args.mkv_regex,
            subtitle_ext=parsed_args.srt_ext,
            video_ext=parsed_args.video_ext,
            directory=parsed_args.directory,
            recursive=parsed_args.recursive,
            dry_run=parsed_args.dry_run,
            quiet=parsed_args.quiet,
            verbose=parsed_args.verbose
        )
        SubtitleRenamer(config, reporter).run()
    except (ConfigError, ScanError) as e:
        reporter.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
