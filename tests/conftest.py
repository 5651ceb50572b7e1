"""
Shared pytest fixtures for the Hex tests.
"""

import numpy as np
import pytest

from engine import HexBoard


@pytest.fixture
def make_board():
    """Builds a board of `size` with a list of (side, (row, col)) moves applied."""
    def _make(size, moves=()):
        board = HexBoard(size)
        for side, (r, c) in moves:
            assert board.apply_move(r, c, side)
        return board
    return _make


@pytest.fixture
def random_fill():
    """Fills a fresh board with alternating random stones, P1 first."""
    def _fill(size, seed, first=1, second=2):
        rng = np.random.default_rng(seed)
        board = HexBoard(size)
        order = rng.permutation(size * size)
        board.fill(order, first, second)
        return board
    return _fill
