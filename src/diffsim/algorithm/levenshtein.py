"""Levenshtein edit distance and the normalised similarity score built on it.

The DP recurrence is the classic one with unit costs::

    T[i][0] = i,  T[0][j] = j
    T[i][j] = T[i-1][j-1]                                   if a[i-1] == b[j-1]
            = 1 + min(T[i-1][j], T[i][j-1], T[i-1][j-1])   otherwise

Each row is computed with numpy.  The left-neighbour dependency
``T[i][j] <= T[i][j-1] + 1`` is resolved in one pass: with
``c[j] = min(T[i-1][j] + 1, T[i-1][j-1] + cost[j])`` and ``c[0] = i``,
``T[i][j] = j + min(c[k] - k for k <= j)``, i.e. a running minimum.
``edit_distance`` keeps only one row at a time; ``edit_distance_table`` keeps
all of them and yields exactly the same final cell.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

__all__ = ["edit_distance", "edit_distance_table", "similarity_ratio"]


def _round_half_up(x: float, precision: int) -> float:
    # Ties at the exact binary value round away from zero, not to even.
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP))


def _code_points(s: str) -> np.ndarray:
    return np.fromiter(map(ord, s), dtype=np.int64, count=len(s))


def _next_row(
    prev_row: np.ndarray, i: int, ch: int, b_codes: np.ndarray, offsets: np.ndarray
) -> np.ndarray:
    candidates = np.empty_like(prev_row)
    candidates[0] = i
    candidates[1:] = np.minimum(prev_row[1:] + 1, prev_row[:-1] + (b_codes != ch))
    return np.minimum.accumulate(candidates - offsets) + offsets


def edit_distance_table(a: str, b: str) -> np.ndarray:
    """Build the full ``(len(a)+1) x (len(b)+1)`` Levenshtein table.

    Cell ``[i, j]`` is the edit distance between ``a[:i]`` and ``b[:j]``.

    Args:
        a: First string (rows).
        b: Second string (columns).

    Returns:
        2-D int64 numpy array.
    """
    m, n = len(a), len(b)
    b_codes = _code_points(b)
    offsets = np.arange(n + 1, dtype=np.int64)
    table = np.empty((m + 1, n + 1), dtype=np.int64)
    table[0] = offsets
    for i, ch in enumerate(a, start=1):
        table[i] = _next_row(table[i - 1], i, ord(ch), b_codes, offsets)
    return table


def edit_distance(a: str, b: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Rolling-row variant of ``edit_distance_table``.  The longer string is
    vectorised across the row so the Python-level loop runs over the shorter
    one.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character insertions, deletions or
        substitutions turning ``a`` into ``b``.
    """
    if a == b:
        return 0
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return len(b)

    b_codes = _code_points(b)
    offsets = np.arange(len(b) + 1, dtype=np.int64)
    row = offsets.copy()
    for i, ch in enumerate(a, start=1):
        row = _next_row(row, i, ord(ch), b_codes, offsets)
    return int(row[-1])


def similarity_ratio(a: str, b: str, precision: int = 4) -> float:
    """Normalised similarity in [0, 1] derived from the edit distance.

    ``1.0`` when the strings are equal (two empty strings included), ``0.0``
    when exactly one is empty, otherwise ``1 - distance / max(len(a), len(b))``
    rounded half-up to ``precision`` places, capped just below ``1.0`` so that
    only equal strings score 1.0.

    Args:
        a:         First string.
        b:         Second string.
        precision: Decimal places to round to.

    Returns:
        The similarity score.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    distance = edit_distance(a, b)
    score = _round_half_up(1.0 - distance / max(len(a), len(b)), precision)
    # Unequal strings never round up to a perfect score.
    return min(score, _round_half_up(1.0 - 10.0**-precision, precision))
