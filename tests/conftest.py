"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Player

EMPTY_LAYOUT = "/".join(["." * 8] * 8)


@pytest.fixture
def empty_board() -> Board:
    """8x8 board without any pieces, blue to move"""
    return Board.from_layout(EMPTY_LAYOUT)


@pytest.fixture
def board_with_pieces() -> Callable[..., Board]:
    """
    Call the inner function with a mapping of (row, col) -> layout code, and optionally the player to move.
    Everything else on the 8x8 board is empty.
    """

    def _create_board(
        pieces: dict[tuple[int, int], str], player: Player = Player.BLUE
    ) -> Board:
        rows = [["."] * 8 for _ in range(8)]
        for (row, col), code in pieces.items():
            rows[row][col] = code
        layout = "/".join("".join(row) for row in rows)
        return Board.from_layout(layout, player=player)

    return _create_board
