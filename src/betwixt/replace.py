from typing import Optional

import structlog

from betwixt.assemble import assemble
from betwixt.models import DelimiterMode, MatchInfo, ReplaceRequest, ReplaceResult
from betwixt.scan import scan

logger = structlog.get_logger(__name__)


def replace_between(
    source: str,
    opening: str,
    closing: str,
    replacement: str,
    case_insensitive: bool = False,
    *,
    preserve_delimiters: bool = True,
    limit: Optional[int] = None,
) -> str:
    """
    Replaces the text between every ``opening``/``closing`` delimiter pair.

    Each match runs from an occurrence of ``opening`` to the nearest following
    ``closing``; matches never overlap and ``replacement`` is never rescanned.
    With ``case_insensitive`` the delimiters are compared under full Unicode
    case folding, but the delimiter text written to the output is the text
    found in ``source``.

    Empty delimiters, absent delimiters and a dangling ``opening`` all leave
    ``source`` unchanged. This function does not raise.
    """
    if not opening or not closing:
        return source

    matches = scan(source, opening, closing, case_insensitive, limit)
    return assemble(source, matches, replacement, preserve_delimiters)


def replace_between_detailed(request: ReplaceRequest) -> ReplaceResult:
    """
    Same as ``replace_between`` but also reports where each match was found.
    Offsets refer to ``request.source``.
    """
    if not request.opening or not request.closing:
        logger.debug("Skipping replacement: empty delimiter")
        return ReplaceResult(output=request.source)

    matches = scan(
        request.source,
        request.opening,
        request.closing,
        request.case_insensitive,
        request.limit,
    )
    output = assemble(
        request.source,
        matches,
        request.replacement,
        preserve_delimiters=request.mode == DelimiterMode.PRESERVE,
    )

    return ReplaceResult(
        output=output,
        matches=[MatchInfo.from_match(request.source, m) for m in matches],
    )
