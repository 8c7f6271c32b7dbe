from typing import Iterator, List, Optional

import structlog

from betwixt.locate import locator_for
from betwixt.models import Match

logger = structlog.get_logger(__name__)


def iter_matches(
    text: str,
    opening: str,
    closing: str,
    case_insensitive: bool = False,
    limit: Optional[int] = None,
) -> Iterator[Match]:
    """
    Yields non-overlapping (opening, closing) delimiter pairs from left to right.

    Each closing span is the first occurrence of ``closing`` at or after the end
    of its opening span. Scanning resumes after the closing span, so the
    interior of a match is never searched for a new opening delimiter.
    A dangling opening delimiter ends the scan.
    """
    if not opening or not closing:
        logger.debug("Empty delimiter, nothing to scan")
        return

    if limit is not None and limit <= 0:
        return

    locate = locator_for(case_insensitive)
    cursor = 0
    found = 0

    while cursor <= len(text):
        opening_span = locate(text, opening, cursor)
        if opening_span is None:
            return

        closing_span = locate(text, closing, opening_span.end)
        if closing_span is None:
            logger.debug(f"Dangling opening delimiter at {opening_span.start}")
            return

        yield Match(opening_span, closing_span)
        found += 1
        if limit is not None and found >= limit:
            return

        cursor = closing_span.end


def scan(
    text: str,
    opening: str,
    closing: str,
    case_insensitive: bool = False,
    limit: Optional[int] = None,
) -> List[Match]:
    matches = list(iter_matches(text, opening, closing, case_insensitive, limit))
    logger.debug(f"Found {len(matches)} delimited span(s)")
    return matches
