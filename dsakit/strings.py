"""String routines: binary addition and bracket matching."""

from __future__ import annotations

from itertools import zip_longest

_OPENERS = "({["
_MATCHING = {")": "(", "}": "{", "]": "["}


def _bit(char: str) -> int:
    if char not in ("0", "1"):
        raise ValueError(f"not a binary digit: {char!r}")
    return int(char)


def add_binary(a: str, b: str) -> str:
    """Add two binary strings; leading zeros of the longer operand are kept."""
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += _bit(x) + _bit(y)
        digits.append("01"[carry % 2])
        carry //= 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def is_valid_parentheses(s: str) -> bool:
    """Check that brackets in ``s`` are balanced and properly nested.

    Any character that is not an opening bracket closes the innermost open
    bracket; only the three closing brackets are checked against it.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _MATCHING.get(char)
        if expected is not None and top != expected:
            return False
    return not stack