from typing import List

from betwixt.models import Match


def assemble(
    text: str,
    matches: List[Match],
    replacement: str,
    preserve_delimiters: bool = True,
) -> str:
    """
    Rebuilds ``text`` with every matched span substituted by ``replacement``.

    With ``preserve_delimiters`` the delimiters are copied from the source
    (keeping their original casing) and only the interior is replaced.
    Otherwise the whole opening...closing extent is replaced.
    Returns ``text`` itself when there is nothing to replace.
    """
    if not matches:
        return text

    parts = []
    cursor = 0

    for match in matches:
        parts.append(text[cursor : match.start])

        if preserve_delimiters:
            parts.append(text[match.opening.start : match.opening.end])
            parts.append(replacement)
            parts.append(text[match.closing.start : match.closing.end])
        else:
            parts.append(replacement)

        cursor = match.end

    parts.append(text[cursor:])
    return "".join(parts)
