"""Text processing utilities."""

import re

_OPENING_FENCE = re.compile(r"^```[A-Za-z]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```$")


def strip_code_fence(text: str) -> str:
    """
    Remove a single leading and a single trailing markdown code fence.

    Completion services often wrap their answer in a fenced block
    (```graphql ... ```); anything inside the fence is left untouched.

    Args:
        text: Input text

    Returns:
        Text without the outer fence markers
    """
    cleaned = _OPENING_FENCE.sub("", text, count=1)
    return _CLOSING_FENCE.sub("", cleaned, count=1)


def truncate(text: str, limit: int, marker: str = "...") -> str:
    """Return the first ``limit`` characters of ``text``, marked when cut."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}{marker}"
