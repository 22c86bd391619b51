"""Sequential batch: fetch each logo, extract colors, merge, then write outputs."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol

from tokenlist_colors.colors import ColorSet
from tokenlist_colors.config import Settings
from tokenlist_colors.extractor import extract_colors
from tokenlist_colors.fetcher import ImageFetcher
from tokenlist_colors.merger import merge_colors
from tokenlist_colors.preview import write_preview
from tokenlist_colors.reporter import ConsoleReporter, Reporter
from tokenlist_colors.tokenlist import TokenListError, has_logo, load_tokenlist, write_tokenlist

logger = logging.getLogger(__name__)

SKIPPED = "skipped"
EXTRACTED = "extracted"
FALLBACK = "fallback"


class Fetcher(Protocol):
    def fetch(self, url: str) -> Optional[bytes]:
        ...


@dataclass
class TokenOutcome:
    index: int
    symbol: str
    status: str
    colors: Optional[ColorSet] = None
    reason: Optional[str] = None


@dataclass
class BatchSummary:
    outcomes: List[TokenOutcome] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def extracted(self) -> int:
        return self._count(EXTRACTED)

    @property
    def fallback(self) -> int:
        return self._count(FALLBACK)

    @property
    def skipped(self) -> int:
        return self._count(SKIPPED)


def process_token(index: int, symbol: str, token: Any, fetcher: Fetcher, logo_field: str) -> TokenOutcome:
    """Fetch and analyze one logo; a bad logo yields fallback colors, not an exception."""
    image_bytes = fetcher.fetch(token[logo_field])
    extraction = extract_colors(image_bytes)
    reason = "download failed" if image_bytes is None else extraction.error
    return TokenOutcome(
        index=index,
        symbol=symbol,
        status=EXTRACTED if extraction.ok else FALLBACK,
        colors=extraction.colors,
        reason=reason,
    )


def process_tokens(
    tokens: List[Any],
    fetcher: Fetcher,
    reporter: Optional[Reporter] = None,
    logo_field: str = "logoURI",
    symbol_field: str = "symbol",
) -> BatchSummary:
    reporter = reporter or Reporter()
    summary = BatchSummary()
    total = len(tokens)
    reporter.started(total)
    for i, token in enumerate(tokens):
        symbol = str(token.get(symbol_field, "")) if isinstance(token, dict) else ""
        if not has_logo(token, logo_field):
            logger.debug("Skipping token %d (%s): no %s", i + 1, symbol or "?", logo_field)
            summary.outcomes.append(TokenOutcome(i, symbol, SKIPPED))
            continue
        reporter.token_started(symbol, i + 1, total)
        outcome = process_token(i, symbol, token, fetcher, logo_field)
        tokens[i] = merge_colors(token, outcome.colors, logo_field)
        summary.outcomes.append(outcome)
        reporter.token_finished(outcome)
    return summary


def run(settings: Settings, fetcher: Optional[Fetcher] = None, reporter: Optional[Reporter] = None) -> int:
    reporter = reporter or ConsoleReporter()
    try:
        tokenlist = load_tokenlist(settings.input_path, settings.tokens_key)
    except TokenListError as exc:
        logger.debug("Aborting run", exc_info=True)
        reporter.failed(str(exc))
        return 1

    owned = None
    if fetcher is None:
        fetcher = owned = ImageFetcher(timeout=settings.timeout, max_bytes=settings.max_bytes, user_agent=settings.user_agent)
    tokens = tokenlist[settings.tokens_key]
    try:
        summary = process_tokens(tokens, fetcher, reporter, settings.logo_field, settings.symbol_field)
    finally:
        if owned is not None:
            owned.close()

    if settings.dry_run:
        reporter.completed(summary, dry_run=True)
        return 0
    try:
        # preview first: a failed write leaves the token list untouched
        write_preview(settings.preview_path, tokens, settings.logo_field, settings.symbol_field)
        write_tokenlist(settings.input_path, tokenlist)
    except OSError as exc:
        reporter.failed(f"Cannot write outputs: {exc}")
        return 1
    logger.info("Wrote %s and %s", settings.input_path, settings.preview_path)
    reporter.completed(summary)
    return 0
