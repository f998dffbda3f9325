"""
Text helpers for configuration lines.
"""

from typing import Tuple

from .errors import GrammarError


def fold_lower(s: str) -> str:
    """Return a lower-cased copy of s."""
    if not s:
        return s
    return s.lower()


def is_blank(s: str) -> bool:
    """True if s is empty or contains only whitespace."""
    return not s or s.isspace()


def split_trim(s: str, delimiter: str) -> Tuple[str, str]:
    """
    Split s at the first delimiter and strip both sides.

    Args:
        s: Text to split
        delimiter: Separator character

    Returns:
        Tuple of (left, right), both stripped of surrounding whitespace

    Raises:
        GrammarError: If the delimiter is absent or either side is empty

    Examples:
        "ch1.r1 = 100" split on "=" -> ("ch1.r1", "100")
        "ch1.r1 =" split on "=" -> GrammarError
    """
    left, sep, right = s.partition(delimiter)
    if not sep:
        raise GrammarError(f"missing '{delimiter}' in '{s.strip()}'")

    left = left.strip()
    right = right.strip()
    if not left:
        raise GrammarError(f"nothing before '{delimiter}' in '{s.strip()}'")
    if not right:
        raise GrammarError(f"nothing after '{delimiter}' in '{s.strip()}'")

    return left, right
