"""
Span locators: find the next occurrence of a delimiter at or after a cursor.

Two flavours share one contract, ``(text, pattern, start) -> Optional[Span]``:

- ``find_literal`` compares codepoint for codepoint.
- ``find_folded`` compares under full Unicode case folding. Folding is not
  one-to-one ("ß" folds to "ss", "İ" to "i" + U+0307), so a pattern and the
  text it matches can differ in length. For each candidate start we grow a
  window one codepoint at a time and compare its folded form against the
  folded pattern.
"""

from typing import Callable, Optional

from betwixt.models import Span

Locator = Callable[[str, str, int], Optional[Span]]


def find_literal(text: str, pattern: str, start: int = 0) -> Optional[Span]:
    if not pattern:
        return None

    idx = text.find(pattern, max(start, 0))
    if idx == -1:
        return None
    return Span(idx, idx + len(pattern))


def _match_folded_at(text: str, target: str, pos: int) -> Optional[Span]:
    """
    Grows a window from ``pos`` until its fold equals ``target``.
    Stops early once the window's fold is no longer a prefix of ``target``.
    """
    # Every codepoint folds to at least one codepoint, so the window never
    # needs to be wider than the folded pattern.
    limit = min(len(text), pos + len(target))
    folded = ""

    for end in range(pos, limit):
        folded += text[end].casefold()
        if folded == target:
            return Span(pos, end + 1)
        if not target.startswith(folded):
            return None

    return None


def find_folded(text: str, pattern: str, start: int = 0) -> Optional[Span]:
    if not pattern:
        return None

    target = pattern.casefold()
    if not target:
        return None

    for pos in range(max(start, 0), len(text)):
        span = _match_folded_at(text, target, pos)
        if span is not None:
            return span

    return None


def locator_for(case_insensitive: bool) -> Locator:
    return find_folded if case_insensitive else find_literal
