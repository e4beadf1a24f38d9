"""Tests for the Differ orchestrator.

Covers config defaulting, argument validation ordering, debug logging, and
that one Differ instance gives identical results across repeated calls.
"""

from __future__ import annotations

import logging

import pytest

from diffsim import DiffConfig, Differ, ParseError


@pytest.fixture
def differ() -> Differ:
    return Differ()


class TestConstruction:
    def test_default_config(self, differ: Differ) -> None:
        assert differ.config == DiffConfig()

    def test_custom_config_kept(self) -> None:
        config = DiffConfig(precision=2)
        assert Differ(config=config).config is config


class TestValidation:
    def test_similarity_rejects_int(self, differ: Differ) -> None:
        with pytest.raises(TypeError, match="a must be str, got int"):
            differ.similarity(1, "x")  # type: ignore[arg-type]

    def test_line_diff_rejects_none(self, differ: Differ) -> None:
        with pytest.raises(TypeError, match="old_text must be str, got NoneType"):
            differ.line_diff(None, "x")  # type: ignore[arg-type]

    def test_parse_error_reports_first_argument(self, differ: Differ) -> None:
        with pytest.raises(ParseError) as exc_info:
            differ.structural_diff("[1, 2", "also bad")
        assert exc_info.value.argument == "a"
        assert exc_info.value.lineno == 1

    def test_parse_error_chains_decode_error(self, differ: Differ) -> None:
        with pytest.raises(ParseError) as exc_info:
            differ.structural_diff("{}", "{")
        assert exc_info.value.__cause__ is not None

    def test_non_string_key_raises_type_error(self, differ: Differ) -> None:
        with pytest.raises(TypeError, match="keys must be str"):
            differ.structural_diff({1: "a"}, {})


class TestLogging:
    def test_line_diff_logs_table_size(
        self, differ: Differ, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="diffsim"):
            differ.line_diff("a\nb", "a\nb\nc")
        messages = [r.getMessage() for r in caplog.records]
        assert "line_diff: alignment table 3 x 4" in messages
        assert "line_diff: 1 added, 0 removed, 2 unchanged" in messages

    def test_structural_diff_logs_change_count(
        self, differ: Differ, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="diffsim"):
            differ.structural_diff({"a": 1}, {"a": 2, "b": 3})
        assert "structural_diff: 2 changes" in [r.getMessage() for r in caplog.records]

    def test_nothing_logged_above_debug(
        self, differ: Differ, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="diffsim"):
            differ.similarity("kitten", "sitting")
            differ.line_diff("a", "b")
            differ.structural_diff([1], [2])
        assert caplog.records == []


class TestRepeatability:
    def test_same_instance_same_results(self, differ: Differ) -> None:
        old, new = "x\ny\nz", "y\nx\nz\nw"
        assert differ.line_diff(old, new) == differ.line_diff(old, new)

    def test_similarity_repeatable(self, differ: Differ) -> None:
        assert differ.similarity("abcdef", "azced") == differ.similarity(
            "abcdef", "azced"
        )
