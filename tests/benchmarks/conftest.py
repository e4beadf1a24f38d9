"""Deterministic input generators for performance benchmarks.

All generators produce fixed, reproducible inputs. No random values.
Three tiers per operation: small, medium and large.

Line and character inputs are sized with the O(m*n) alignment tables in
mind: the large tiers allocate a few million cells.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_lines(count: int, prefix: str = "line") -> list[str]:
    """Generate distinct, deterministic text lines."""
    return [f"{prefix} {i}: the quick brown fox {i % 7}" for i in range(count)]


def _edited_text(count: int) -> tuple[str, str]:
    """Generate a text pair where every 10th line is rewritten."""
    old = generate_lines(count)
    new = [
        line.upper() if i % 10 == 0 else line for i, line in enumerate(old)
    ]
    return "\n".join(old), "\n".join(new)


def _edited_string(length: int) -> tuple[str, str]:
    """Generate a string pair differing in every 13th character."""
    base = "".join(chr(ord("a") + i % 26) for i in range(length))
    edited = "".join(
        "#" if i % 13 == 0 else ch for i, ch in enumerate(base)
    )
    return base, edited


def _make_tree(sections: int, leaves: int, tag: str) -> dict[str, Any]:
    """Generate a nested object of ``sections`` x ``leaves`` scalar leaves."""
    return {
        f"section_{i}": {
            "items": [{"id": j, "value": f"{tag}_{i}_{j}"} for j in range(leaves)],
            "meta": {"index": i, "enabled": i % 2 == 0, "note": None},
        }
        for i in range(sections)
    }


# --- Fixtures for each size tier ---


@pytest.fixture
def strings_100() -> tuple[str, str]:
    """100-character string pair."""
    return _edited_string(100)


@pytest.fixture
def strings_1000() -> tuple[str, str]:
    """1,000-character string pair."""
    return _edited_string(1000)


@pytest.fixture
def text_100_lines() -> tuple[str, str]:
    """100-line text pair with every 10th line rewritten."""
    return _edited_text(100)


@pytest.fixture
def text_1000_lines() -> tuple[str, str]:
    """1,000-line text pair with every 10th line rewritten."""
    return _edited_text(1000)


@pytest.fixture
def trees_100_leaves() -> tuple[dict[str, Any], dict[str, Any]]:
    """Nested tree pair with ~100 leaves (5 sections x 10 items)."""
    return _make_tree(5, 10, "a"), _make_tree(5, 10, "b")


@pytest.fixture
def trees_5000_leaves() -> tuple[dict[str, Any], dict[str, Any]]:
    """Nested tree pair with ~5,000 leaves (50 sections x 50 items)."""
    return _make_tree(50, 50, "a"), _make_tree(50, 50, "b")
