"""
Input parsing and validation utilities.

Functions for normalizing MCP tool inputs, which arrive as an untyped
argument bag and may carry loosely typed values (numbers as strings,
a single string where a list is expected).
"""
from typing import Any


def is_blank(x: Any) -> bool:
    """True for None and whitespace-only strings."""
    return x is None or (isinstance(x, str) and not x.strip())


def coerce_str(x: Any) -> str | None:
    """
    Extract a string.

    Args:
        x: Input value

    Returns:
        The string exactly as given, or None if x is not a string
    """
    if isinstance(x, str):
        return x
    return None


def coerce_number(x: Any) -> int | float | None:
    """
    Extract a number.

    Handles:
    - int/float (bool is rejected)
    - numeric strings ("2", "2.5")
    Whole floats are returned as int.

    Returns:
        Number, or None if x is not numeric
    """
    if isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x
    if isinstance(x, float):
        return int(x) if x.is_integer() else x
    if isinstance(x, str):
        s = x.strip()
        if not s:
            return None
        try:
            f = float(s)
        except ValueError:
            return None
        return int(f) if f.is_integer() else f
    return None


def as_str_list(x: Any) -> list[str] | None:
    """
    Convert input to a list of strings.

    Handles:
    - Single string -> list with one element
    - List/tuple of strings -> same strings in order (blank items dropped)

    Returns:
        List of strings, or None if x (or any item) is not a string
    """
    if isinstance(x, str):
        return [] if is_blank(x) else [x]
    if isinstance(x, (list, tuple)):
        out = []
        for v in x:
            if not isinstance(v, str):
                return None
            if not is_blank(v):
                out.append(v)
        return out
    return None
