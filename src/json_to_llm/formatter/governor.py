"""Global character budget for rendered output."""

from __future__ import annotations


def truncation_footer(max_chars: int) -> str:
    return f"\n[Output truncated at {max_chars} chars]"


def apply_char_budget(text: str, max_chars: int | None) -> str:
    """Cut text to fit a character budget, appending a footer when cut.

    The cut is purely positional and may split a token or line. With no
    budget the text is returned unchanged, whatever its size.

    Args:
        text: Fully rendered output.
        max_chars: Maximum output length, or None for no limit.

    Returns:
        The text itself, or its prefix followed by the truncation footer.
    """
    if max_chars is None or len(text) <= max_chars:
        return text

    footer = truncation_footer(max_chars)
    keep = max(0, max_chars - len(footer))
    return text[:keep] + footer
