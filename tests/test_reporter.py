import io
import logging

from colorama import Fore, Style

from tokenlist_colors.driver import BatchSummary, TokenOutcome
from tokenlist_colors.reporter import ColoredFormatter, ConsoleReporter, setup_logging


def test_progress_line_and_result_share_a_line():
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    reporter.token_started("RED", 2, 5)
    reporter.token_finished(TokenOutcome(1, "RED", "extracted"))
    text = out.getvalue()
    assert f"{Fore.YELLOW}Processing RED (2/5)... {Style.RESET_ALL}{Fore.GREEN}Done!" in text
    assert text.count("\n") == 1


def test_fallback_is_reported_in_red_with_reason():
    out = io.StringIO()
    ConsoleReporter(out).token_finished(TokenOutcome(0, "X", "fallback", reason="download failed"))
    assert f"{Fore.RED}Failed, using fallback colors (download failed)" in out.getvalue()


def test_completed_counts_and_dry_run():
    summary = BatchSummary(
        [TokenOutcome(0, "A", "extracted"), TokenOutcome(1, "B", "fallback"), TokenOutcome(2, "C", "skipped")]
    )
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    reporter.completed(summary)
    reporter.completed(summary, dry_run=True)
    text = out.getvalue()
    assert "Tokenlist processing completed successfully! (1 extracted, 1 fallback, 1 skipped)" in text
    assert "Dry run finished, nothing written" in text


def test_failed_message():
    out = io.StringIO()
    ConsoleReporter(out).failed("boom")
    assert f"{Fore.RED}Error: boom" in out.getvalue()


def test_colored_formatter():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "bad %s", ("logo",), None)
    text = ColoredFormatter("%(levelname)s: %(message)s").format(record)
    assert text == f"{Fore.RED}ERROR: bad logo{Style.RESET_ALL}"


def test_setup_logging_levels():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    stream = io.StringIO()
    try:
        setup_logging(quiet=True, verbose=False, stream=stream)
        assert root.level == logging.WARNING
        setup_logging(quiet=False, verbose=True, stream=stream)
        assert root.level == logging.DEBUG
        logging.getLogger("tokenlist_colors.test").debug("hello")
        assert "DEBUG: hello" in stream.getvalue()
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
