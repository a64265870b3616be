"""Shared checks for degenerate filler content."""

GENERIC_PHRASES = (
    "concept a",
    "concept b",
    "option 1",
    "option 2",
    "option 3",
    "option 4",
)


def contains_placeholder(text: str) -> bool:
    """True if text contains a generic placeholder phrase (case-insensitive)."""
    lowered = text.lower()
    return any(phrase in lowered for phrase in GENERIC_PHRASES)
