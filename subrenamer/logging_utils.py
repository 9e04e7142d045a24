"""Logging setup for the command-line entry point."""
import logging
import os

_CONFIGURED = False


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging once.

    ``LOG_LEVEL`` in the environment overrides the level picked from
    ``verbose`` (DEBUG when set, WARNING otherwise).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    default = "DEBUG" if verbose else "WARNING"
    level_name = (os.getenv("LOG_LEVEL") or default).upper()
    level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    _CONFIGURED = True
