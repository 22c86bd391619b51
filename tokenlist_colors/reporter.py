"""Console progress output and logging setup."""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO

from colorama import Fore, Style

if TYPE_CHECKING:
    from tokenlist_colors.driver import BatchSummary, TokenOutcome

LOG_FORMAT = "%(levelname)s: %(message)s"


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelname)
        return f"{color}{message}{Style.RESET_ALL}" if color else message


def setup_logging(quiet: bool, verbose: bool, stream: Optional[TextIO] = None) -> None:
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ColoredFormatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)


class Reporter:
    """Receives batch progress; the base class stays silent."""

    def started(self, total: int) -> None:
        pass

    def token_started(self, symbol: str, position: int, total: int) -> None:
        pass

    def token_finished(self, outcome: "TokenOutcome") -> None:
        pass

    def completed(self, summary: "BatchSummary", dry_run: bool = False) -> None:
        pass

    def failed(self, message: str) -> None:
        pass


class ConsoleReporter(Reporter):
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout

    def _write(self, color: str, text: str, end: str = "\n") -> None:
        self.stream.write(f"{color}{text}{Style.RESET_ALL}{end}")
        self.stream.flush()

    def started(self, total: int) -> None:
        self._write(Fore.BLUE, f"Processing tokens... ({total} total)")

    def token_started(self, symbol: str, position: int, total: int) -> None:
        self._write(Fore.YELLOW, f"Processing {symbol} ({position}/{total})... ", end="")

    def token_finished(self, outcome: "TokenOutcome") -> None:
        if outcome.status == "extracted":
            self._write(Fore.GREEN, "Done!")
        else:
            self._write(Fore.RED, f"Failed, using fallback colors ({outcome.reason})")

    def completed(self, summary: "BatchSummary", dry_run: bool = False) -> None:
        counts = f"{summary.extracted} extracted, {summary.fallback} fallback, {summary.skipped} skipped"
        if dry_run:
            self._write(Fore.GREEN, f"\nDry run finished, nothing written ({counts})")
        else:
            self._write(Fore.GREEN, f"\nTokenlist processing completed successfully! ({counts})")

    def failed(self, message: str) -> None:
        self._write(Fore.RED, f"Error: {message}")
