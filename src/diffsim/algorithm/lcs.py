"""Line-level LCS alignment and edit-script reconstruction.

``lcs_table`` fills the ``(m+1) x (n+1)`` longest-common-subsequence table::

    T[0][*] = T[*][0] = 0
    T[i][j] = T[i-1][j-1] + 1              if old[i-1] == new[j-1]
            = max(T[i-1][j], T[i][j-1])    otherwise

Lines are interned to integer ids so each row is one numpy comparison.  A row
is ``running_max(max(T[i-1][j], T[i-1][j-1] + eq[j]))``: LCS rows are
non-decreasing and adjacent cells differ by at most one, so this equals the
recurrence above cell for cell.

``edit_script`` walks the table back from ``(m, n)``.  On a score tie it
prefers ADDED over REMOVED (``T[i][j-1] >= T[i-1][j]``); other minimal scripts
exist, and output compatibility depends on this exact choice.
"""

from __future__ import annotations

import numpy as np

from diffsim.result import DiffStats, EditKind, EditOperation, LineDiffResult

__all__ = ["diff_lines", "edit_script", "lcs_table", "summarize"]


def _intern(
    old_lines: list[str], new_lines: list[str]
) -> tuple[np.ndarray, np.ndarray]:
    ids: dict[str, int] = {}
    old_ids = np.fromiter(
        (ids.setdefault(line, len(ids)) for line in old_lines),
        dtype=np.int64,
        count=len(old_lines),
    )
    new_ids = np.fromiter(
        (ids.setdefault(line, len(ids)) for line in new_lines),
        dtype=np.int64,
        count=len(new_lines),
    )
    return old_ids, new_ids


def lcs_table(old_lines: list[str], new_lines: list[str]) -> np.ndarray:
    """Build the LCS length table for two line sequences.

    Args:
        old_lines: Lines of the old text (rows).
        new_lines: Lines of the new text (columns).

    Returns:
        2-D int64 numpy array where ``[i, j]`` is the LCS length of
        ``old_lines[:i]`` and ``new_lines[:j]``.
    """
    m, n = len(old_lines), len(new_lines)
    old_ids, new_ids = _intern(old_lines, new_lines)
    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    for i in range(1, m + 1):
        prev = table[i - 1]
        candidates = np.maximum(prev[1:], prev[:-1] + (new_ids == old_ids[i - 1]))
        table[i, 1:] = np.maximum.accumulate(candidates)
    return table


def edit_script(
    old_lines: list[str],
    new_lines: list[str],
    table: np.ndarray,
) -> list[EditOperation]:
    """Backtrack an LCS table into a left-to-right edit script.

    Iterative, so input size is bounded by memory rather than recursion depth.

    Args:
        old_lines: Lines of the old text.
        new_lines: Lines of the new text.
        table:     The table ``lcs_table(old_lines, new_lines)`` returned.

    Returns:
        Edit operations in order.  EQUAL and REMOVED carry 1-based old line
        numbers, ADDED carries 1-based new line numbers.
    """
    # Plain nested lists: scalar indexing is faster than on an ndarray.
    cells: list[list[int]] = table.tolist()
    i, j = len(old_lines), len(new_lines)
    ops: list[EditOperation] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
            ops.append(EditOperation(EditKind.EQUAL, old_lines[i - 1], i))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or cells[i][j - 1] >= cells[i - 1][j]):
            ops.append(EditOperation(EditKind.ADDED, new_lines[j - 1], j))
            j -= 1
        else:
            ops.append(EditOperation(EditKind.REMOVED, old_lines[i - 1], i))
            i -= 1

    ops.reverse()
    return ops


def summarize(ops: list[EditOperation], old_line_count: int) -> DiffStats:
    """Tally an edit script; ``total`` is the old line count plus additions."""
    added = removed = unchanged = 0
    for op in ops:
        if op.kind == EditKind.ADDED:
            added += 1
        elif op.kind == EditKind.REMOVED:
            removed += 1
        else:
            unchanged += 1
    return DiffStats(
        added=added,
        removed=removed,
        unchanged=unchanged,
        total=old_line_count + added,
    )


def diff_lines(old_lines: list[str], new_lines: list[str]) -> LineDiffResult:
    """Align two line sequences and return the full script with its stats."""
    table = lcs_table(old_lines, new_lines)
    ops = edit_script(old_lines, new_lines, table)
    return LineDiffResult(changes=tuple(ops), stats=summarize(ops, len(old_lines)))
