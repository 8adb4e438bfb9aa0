"""Small contest problems: dominoes, parity ordering, team votes, watermelon."""

from __future__ import annotations

from collections.abc import Iterable


def domino_piling(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an m by n board."""
    return (m * n) // 2


def even_odd_position(n: int, k: int) -> int:
    """Return the k-th number when 1..n is listed odds first, then evens."""
    odd_count = (n + 1) // 2
    if k <= odd_count:
        return 2 * k - 1
    return 2 * (k - odd_count)


def team_solutions(problems: Iterable[Iterable[int]]) -> int:
    """Count problems on which at least two of three friends are sure."""
    return sum(1 for votes in problems if sum(votes) >= 2)


def watermelon(w: int) -> bool:
    """Tell whether weight ``w`` splits into two positive even parts."""
    return w > 2 and w % 2 == 0