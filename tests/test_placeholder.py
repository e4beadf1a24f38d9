"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import diffsim

    assert diffsim.__version__ is not None
    assert diffsim.__version__ == "0.1.0"


def test_all_exports() -> None:
    """__all__ lists the documented public API."""
    import diffsim

    expected = {
        "ChangeType",
        "DiffConfig",
        "DiffError",
        "DiffStats",
        "Differ",
        "EditKind",
        "EditOperation",
        "LineDiffResult",
        "ParseError",
        "TreeChange",
        "is_identical",
        "line_diff",
        "similarity",
        "structural_diff",
    }
    assert set(diffsim.__all__) == expected
    for name in expected:
        assert hasattr(diffsim, name)
