"""Console output for a rename run."""
import sys


class Reporter:
    """Print status lines according to the quiet/verbose flags.

    Errors and dry-run notices are printed regardless of ``quiet``.
    """

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self.quiet = quiet
        self.verbose_enabled = verbose

    def info(self, message: str) -> None:
        if not self.quiet:
            print(message)

    def warn(self, message: str) -> None:
        if not self.quiet:
            print(f"[WARN] {message}")

    def scan_warning(self, message: str) -> None:
        """Non-fatal access problem while listing files."""
        if not self.quiet:
            print(f"[WARN] {message}", file=sys.stderr)

    def notice(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(f"[ERROR] {message}", file=sys.stderr)

    def verbose(self, message: str) -> None:
        if self.verbose_enabled:
            print(message)
