# FILE: src/betwixt/markup.py

from typing import List

from betwixt.models import Match


def _build_critic_markup(old_text: str, new_text: str) -> str:
    """
    Generates CriticMarkup string for a single substitution.
    """
    has_old = bool(old_text)
    has_new = bool(new_text)

    if old_text == new_text:
        return old_text
    if has_old and not has_new:
        return f"{{--{old_text}--}}"
    if not has_old and has_new:
        return f"{{++{new_text}++}}"
    return f"{{--{old_text}--}}{{++{new_text}++}}"


def preview_replacements(
    text: str,
    matches: List[Match],
    replacement: str,
    preserve_delimiters: bool = True,
) -> str:
    """
    Renders the substitutions ``assemble`` would make as CriticMarkup.

    Preserved delimiters stay outside the markup so only the interior shows up
    as changed:

        "a [old] b"  ->  "a [{--old--}{++new++}] b"
    """
    if not matches:
        return text

    parts = []
    cursor = 0

    for match in matches:
        parts.append(text[cursor : match.start])

        if preserve_delimiters:
            parts.append(text[match.opening.start : match.opening.end])
            parts.append(_build_critic_markup(text[match.opening.end : match.closing.start], replacement))
            parts.append(text[match.closing.start : match.closing.end])
        else:
            parts.append(_build_critic_markup(text[match.start : match.end], replacement))

        cursor = match.end

    parts.append(text[cursor:])
    return "".join(parts)
