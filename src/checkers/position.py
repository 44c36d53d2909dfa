"""
A position (square) on the board

(placed in its own module as every other module needs to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Standard checkers is played on an 8x8 board. Kept as a constant in case we want to try 10x10 draughts later
BOARD_SIZE = 8


@dataclass(frozen=True)
class Position:
    """0-indexed (row, col). Row 0 is the blue side of the board."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def is_within_bounds(self, size: int = BOARD_SIZE) -> bool:
        return (0 <= self.row < size) and (0 <= self.col < size)

    def is_playable(self) -> bool:
        """Pieces only ever stand on the dark squares"""
        return (self.row + self.col) % 2 == 0
