"""Executor module: apply or simulate planned renames."""
import logging
from pathlib import Path

from .config import RenamerConfig
from .models import RenameOperation, RenameSummary
from .report import Reporter

log = logging.getLogger(__name__)


def rename_file(source: Path, destination: Path) -> None:
    """
    Rename a file.

    Raises:
        OSError: If the filesystem refuses the rename.
    """
    source.rename(destination)


def print_summary(summary: RenameSummary, reporter: Reporter) -> None:
    """Print the end-of-run counters."""
    reporter.info("")
    reporter.info("-" * 50)
    if summary.dry_run:
        reporter.info(f"Would rename: {summary.succeeded}")
    else:
        reporter.info(f"Renamed: {summary.succeeded}")
    if summary.failed:
        reporter.info(f"Errors: {summary.failed}")
    if summary.dry_run:
        reporter.info("[DRY RUN - no files were renamed]")


def execute_renames(
    operations: list[RenameOperation],
    config: RenamerConfig,
    reporter: Reporter
) -> RenameSummary:
    """
    Apply the rename operations one after another.

    An existing destination skips that operation. A failed rename is
    reported and counted; the remaining operations still run.

    Args:
        operations: Planned operations
        config: Run configuration (dry_run is honored)
        reporter: Output for progress, conflicts and errors

    Returns:
        RenameSummary with the counters
    """
    summary = RenameSummary(dry_run=config.dry_run)

    if not operations:
        reporter.info("No files to rename.")
        return summary

    for op in operations:
        old_name = op.source.name
        new_name = op.destination.name

        try:
            conflict = op.destination.exists() and op.source != op.destination
        except OSError as e:
            reporter.error(f"Could not check {new_name}: {e}")
            summary.failed += 1
            continue

        if conflict:
            reporter.warn(
                f"Destination already exists: {new_name} (episode: {op.episode_id})"
            )
            summary.skipped += 1
            continue

        if config.dry_run:
            reporter.notice(f"[DRY RUN] {old_name} -> {new_name}")
            summary.succeeded += 1
            continue

        try:
            rename_file(op.source, op.destination)
        except OSError as e:
            log.debug("Rename of %s failed", op.source, exc_info=True)
            reporter.error(f"Could not rename {old_name}: {e}")
            summary.failed += 1
            continue

        reporter.info(f"Renamed: {old_name} -> {new_name}")
        summary.succeeded += 1

    print_summary(summary, reporter)
    return summary
