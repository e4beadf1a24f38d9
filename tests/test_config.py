"""Tests for the DiffConfig frozen dataclass.

Covers:
- Default values
- Immutability (FrozenInstanceError on assignment)
- Validation of every field in __post_init__
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from diffsim.config import DiffConfig


class TestDefaults:
    def test_line_separator(self) -> None:
        assert DiffConfig().line_separator == "\n"

    def test_precision(self) -> None:
        assert DiffConfig().precision == 4

    def test_path_separator(self) -> None:
        assert DiffConfig().path_separator == "."

    def test_root_path(self) -> None:
        assert DiffConfig().root_path == "$"

    def test_equal_configs_compare_equal(self) -> None:
        assert DiffConfig() == DiffConfig()


class TestImmutability:
    def test_cannot_set_precision(self) -> None:
        config = DiffConfig()
        with pytest.raises(FrozenInstanceError):
            config.precision = 2  # type: ignore[misc]

    def test_is_hashable(self) -> None:
        assert hash(DiffConfig()) == hash(DiffConfig())


class TestValidation:
    def test_empty_line_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="line_separator"):
            DiffConfig(line_separator="")

    def test_multi_char_line_separator_accepted(self) -> None:
        assert DiffConfig(line_separator="\r\n").line_separator == "\r\n"

    @pytest.mark.parametrize("precision", [-1, 16])
    def test_precision_out_of_range_rejected(self, precision: int) -> None:
        with pytest.raises(ValueError, match="precision"):
            DiffConfig(precision=precision)

    @pytest.mark.parametrize("precision", [0, 15])
    def test_precision_bounds_accepted(self, precision: int) -> None:
        assert DiffConfig(precision=precision).precision == precision

    def test_bool_precision_rejected(self) -> None:
        with pytest.raises(ValueError, match="precision"):
            DiffConfig(precision=True)

    def test_float_precision_rejected(self) -> None:
        with pytest.raises(ValueError, match="precision"):
            DiffConfig(precision=2.0)  # type: ignore[arg-type]

    @pytest.mark.parametrize("separator", ["", "::", "\\"])
    def test_bad_path_separator_rejected(self, separator: str) -> None:
        with pytest.raises(ValueError, match="path_separator"):
            DiffConfig(path_separator=separator)

    def test_slash_path_separator_accepted(self) -> None:
        assert DiffConfig(path_separator="/").path_separator == "/"

    def test_empty_root_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="root_path"):
            DiffConfig(root_path="")
