"""Tests for seed patterns and pattern placement."""

import pytest
import numpy as np

from pixelife.core.board import Board
from pixelife.patterns.seeds import (
    SEEDS, block, blinker, demo_seed, get_seed, glider, parse_pattern, place
)


class TestParsePattern:

    def test_parse(self):
        pattern = parse_pattern([".X", "X."])
        assert pattern.dtype == bool
        assert np.array_equal(pattern, [[False, True], [True, False]])

    def test_custom_alive_character(self):
        pattern = parse_pattern(["o#", "##"], alive="o")
        assert pattern.sum() == 1

    def test_ragged_rejected(self):
        with pytest.raises(ValueError, match="same length"):
            parse_pattern(["XX", "X"])

    @pytest.mark.parametrize("lines", [[], [""]])
    def test_empty_rejected(self, lines):
        with pytest.raises(ValueError, match="at least one row"):
            parse_pattern(lines)


class TestPlace:

    def test_place_pattern(self):
        cells = place(block(), 4, 5, 1, 2)
        assert cells.shape == (4, 5)
        assert cells.sum() == 4
        assert cells[1:3, 2:4].all()

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 4), (-1, 0), (0, -1)])
    def test_pattern_must_fit(self, row, col):
        with pytest.raises(ValueError, match="does not fit"):
            place(block(), 4, 5, row, col)


class TestNamedSeeds:

    def test_classic_patterns(self):
        assert block().sum() == 4
        assert blinker().shape == (1, 3)
        assert glider().sum() == 5

    def test_demo_seed(self):
        seed = demo_seed()
        assert seed.shape == (19, 19)
        assert seed.sum() == 39
        # Column of three in the top-left corner
        assert seed[1:4, 2].all()

    def test_registry(self):
        assert sorted(SEEDS) == ["blinker", "block", "demo", "glider"]
        for name in SEEDS:
            board = Board(get_seed(name))
            board.advance()
            assert board.generation == 1

    def test_padded_seeds_keep_pattern(self):
        assert get_seed("blinker").shape == (7, 9)
        assert get_seed("block").sum() == 4
        assert get_seed("glider").shape == (19, 19)

    def test_unknown_seed(self):
        with pytest.raises(KeyError, match="Unknown seed 'spaceship'"):
            get_seed("spaceship")

    def test_seeds_are_fresh_arrays(self):
        first = get_seed("demo")
        first[:] = False
        assert get_seed("demo").sum() == 39
