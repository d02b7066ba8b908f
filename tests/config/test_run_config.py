"""Tests for mars_rover.config.types dataclasses."""

from __future__ import annotations

from pathlib import Path

import pytest

from mars_rover.config.types import RunConfig, RunResult
from mars_rover.domain.orientation import Orientation
from mars_rover.domain.snapshot import RoverSnapshot


class TestRunConfig:
    def test_defaults(self) -> None:
        config = RunConfig(x=0, y=0, direction="N")
        assert (config.width, config.height) == (10, 10)
        assert config.commands == ""
        assert config.trace_path is None
        assert config.plot_path is None

    def test_lowercase_inputs_accepted(self) -> None:
        RunConfig(x=1, y=1, direction="e", commands="fblr")

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"direction": "Q"}, "Direction must be one of"),
            ({"commands": "FFX"}, "may contain only F, B, L, R"),
            ({"width": 0}, "at least 1"),
            ({"height": -3}, "at least 1"),
            ({"width": 101}, "maximum is 100"),
            ({"height": 150}, "maximum is 100"),
            ({"x": 10}, r"Initial X must be within grid bounds \(0 to 9\)"),
            ({"y": -1}, r"Initial Y must be within grid bounds \(0 to 9\)"),
        ],
    )
    def test_rejects_invalid_values(self, kwargs: dict[str, object], message: str) -> None:
        base: dict[str, object] = {"x": 0, "y": 0, "direction": "N"}
        base.update(kwargs)
        with pytest.raises(ValueError, match=message):
            RunConfig(**base)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"commands": "\ufb00"}, "may contain only F, B, L, R"),
            ({"direction": "\u017f"}, "Direction must be one of"),
        ],
    )
    def test_rejects_non_ascii_lookalikes(self, kwargs: dict[str, object], message: str) -> None:
        base: dict[str, object] = {"x": 0, "y": 0, "direction": "N"}
        base.update(kwargs)
        with pytest.raises(ValueError, match=message):
            RunConfig(**base)  # type: ignore[arg-type]

    def test_max_grid_accepted(self) -> None:
        config = RunConfig(x=99, y=99, direction="S", width=100, height=100)
        assert config.width == 100

    def test_is_frozen(self) -> None:
        config = RunConfig(x=0, y=0, direction="N")
        with pytest.raises(AttributeError):
            config.x = 1  # type: ignore[misc]


class TestRunResult:
    def test_summary(self, tmp_path: Path) -> None:
        result = RunResult(
            final=RoverSnapshot(3, 4, Orientation.WEST),
            steps=7,
            blocked_moves=2,
            trace_path=tmp_path / "trace.parquet",
        )
        summary = result.to_summary()
        assert summary["final_position"] == "3,4,W"
        assert summary["orientation"] == "W"
        assert summary["steps"] == 7
        assert summary["blocked_moves"] == 2
        assert summary["trace_path"] == str(tmp_path / "trace.parquet")
        assert summary["plot_path"] is None
