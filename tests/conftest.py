import numpy as np
import pytest

from dicewars.game import Board, Player


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def players():
    return [Player("red"), Player("blue")]


@pytest.fixture
def arranged_board(players, rng):
    """Build a victim-free board, then overwrite owners and dice cell by cell.

    ``layout`` is a list of rows, each cell an ``(owner_index, dice)`` pair,
    with ``None`` as owner index for an unowned cell.
    """

    def build(layout, max_dice=8):
        board = Board(players, len(layout), len(layout[0]), 0, max_dice, rng=rng)
        for row, cells in enumerate(layout):
            for col, (owner_index, dice) in enumerate(cells):
                territory = board.get_territory(row, col)
                territory.owner = None if owner_index is None else players[owner_index]
                territory.dice = dice
        return board

    return build
