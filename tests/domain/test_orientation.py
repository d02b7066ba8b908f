"""Tests for mars_rover.domain.orientation module."""

from __future__ import annotations

import pytest

from mars_rover.domain.errors import InvalidCommandChars, InvalidOrientation
from mars_rover.domain.orientation import Command, Orientation, parse_commands


class TestOrientationParsing:
    @pytest.mark.parametrize("raw", ["N", "n", "E", "e", "S", "s", "W", "w"])
    def test_letters_are_case_insensitive(self, raw: str) -> None:
        assert Orientation.from_letter(raw).value == raw.upper()

    def test_member_passes_through(self) -> None:
        assert Orientation.from_letter(Orientation.WEST) is Orientation.WEST

    @pytest.mark.parametrize("raw", ["A", "", "NE", "north", " N"])
    def test_invalid_letter_raises(self, raw: str) -> None:
        with pytest.raises(InvalidOrientation, match="Must be one of: N, S, E, W"):
            Orientation.from_letter(raw)

    def test_non_string_raises(self) -> None:
        with pytest.raises(InvalidOrientation):
            Orientation.from_letter(3)

    def test_non_ascii_letter_raises(self) -> None:
        # U+017F LATIN SMALL LETTER LONG S uppercases to "S"
        with pytest.raises(InvalidOrientation):
            Orientation.from_letter("\u017f")


class TestOrientationTurns:
    def test_clockwise_order(self) -> None:
        assert Orientation.NORTH.clockwise() is Orientation.EAST
        assert Orientation.EAST.clockwise() is Orientation.SOUTH
        assert Orientation.SOUTH.clockwise() is Orientation.WEST
        assert Orientation.WEST.clockwise() is Orientation.NORTH

    def test_counter_clockwise_order(self) -> None:
        assert Orientation.NORTH.counter_clockwise() is Orientation.WEST
        assert Orientation.WEST.counter_clockwise() is Orientation.SOUTH
        assert Orientation.SOUTH.counter_clockwise() is Orientation.EAST
        assert Orientation.EAST.counter_clockwise() is Orientation.NORTH

    @pytest.mark.parametrize("start", list(Orientation))
    def test_four_turns_return_to_start(self, start: Orientation) -> None:
        cw = ccw = start
        for _ in range(4):
            cw = cw.clockwise()
            ccw = ccw.counter_clockwise()
        assert cw is start
        assert ccw is start

    @pytest.mark.parametrize("start", list(Orientation))
    def test_turns_are_inverse(self, start: Orientation) -> None:
        assert start.clockwise().counter_clockwise() is start
        assert start.counter_clockwise().clockwise() is start

    def test_step_vectors(self) -> None:
        assert Orientation.NORTH.step == (0, 1)
        assert Orientation.EAST.step == (1, 0)
        assert Orientation.SOUTH.step == (0, -1)
        assert Orientation.WEST.step == (-1, 0)


class TestParseCommands:
    def test_empty_string(self) -> None:
        assert parse_commands("") == ()

    def test_mixed_case(self) -> None:
        assert parse_commands("fBlR") == (
            Command.FORWARD,
            Command.BACKWARD,
            Command.LEFT,
            Command.RIGHT,
        )

    def test_invalid_characters_collected(self) -> None:
        with pytest.raises(InvalidCommandChars) as excinfo:
            parse_commands("FXFZ F")
        assert excinfo.value.invalid == " XZ"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Only F,B,L,R allowed"):
            parse_commands("Q")

    def test_ligature_is_not_case_folded(self) -> None:
        # U+FB00 LATIN SMALL LIGATURE FF uppercases to "FF"
        with pytest.raises(InvalidCommandChars) as excinfo:
            parse_commands("F\ufb00")
        assert excinfo.value.invalid == "\ufb00"
