"""algorithm subpackage: the three comparison engines.

- Levenshtein edit distance and similarity (``levenshtein``)
- LCS line alignment and edit-script backtracking (``lcs``)
- Recursive structural tree diff (``structural``)

Example::

    from diffsim.algorithm import diff_lines, similarity_ratio

    similarity_ratio("kitten", "sitting")                # 0.5714
    diff_lines(["a", "b"], ["a", "b", "c"]).stats.added  # 1
"""

from __future__ import annotations

from diffsim.algorithm.lcs import diff_lines, edit_script, lcs_table
from diffsim.algorithm.levenshtein import (
    edit_distance,
    edit_distance_table,
    similarity_ratio,
)
from diffsim.algorithm.structural import StructuralDiffer

__all__ = [
    "StructuralDiffer",
    "diff_lines",
    "edit_distance",
    "edit_distance_table",
    "edit_script",
    "lcs_table",
    "similarity_ratio",
]
