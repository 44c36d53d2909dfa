"""
Geometry of checkers moves

Key idea: use a strategy table that defines the diagonal directions available to each cell state.

These functions do NOT look at the board. They only enumerate the positions a piece could geometrically reach.
Legality (is the destination empty? is the jumped piece an enemy?) is checked later by the Cell.
"""

from dataclasses import dataclass

from src.checkers.pieces import CellState
from src.checkers.position import BOARD_SIZE, Position

Vector = tuple[int, int]

# Blue starts on the low rows and moves up the board, red starts on the high rows and moves down.
BLUE_FORWARD: list[Vector] = [(1, -1), (1, 1)]
RED_FORWARD: list[Vector] = [(-1, -1), (-1, 1)]
ALL_DIAGONALS: list[Vector] = BLUE_FORWARD + RED_FORWARD


@dataclass(frozen=True)
class CaptureCandidate:
    """The square of the piece that gets jumped over and the square the jumping piece lands on"""

    enemy_position: Position
    landing_position: Position


# -- STRATEGY PATTERN: MOVEMENT DIRECTIONS ---
MOVEMENT_DIRECTIONS: dict[CellState, list[Vector]] = {
    CellState.EMPTY: [],
    CellState.BLUE_MAN: BLUE_FORWARD,
    CellState.RED_MAN: RED_FORWARD,
    CellState.BLUE_KING: ALL_DIAGONALS,
    CellState.RED_KING: ALL_DIAGONALS,
}


def possible_normal_positions(
    state: CellState, origin: Position, size: int = BOARD_SIZE
) -> list[Position]:
    """A single diagonal step in every direction the piece is allowed to move"""
    positions: list[Position] = []
    for d_row, d_col in MOVEMENT_DIRECTIONS[state]:
        target = origin.offset(d_row, d_col)
        if target.is_within_bounds(size):
            positions.append(target)
    return positions


def possible_capture_positions(
    state: CellState, origin: Position, size: int = BOARD_SIZE
) -> list[CaptureCandidate]:
    """
    Jumps
    -----

    For every direction the piece may move in, the piece to capture stands one step away,
    and the landing square is the next one along the same diagonal.
    Both have to be on the board.
    """
    candidates: list[CaptureCandidate] = []
    for d_row, d_col in MOVEMENT_DIRECTIONS[state]:
        enemy = origin.offset(d_row, d_col)
        landing = origin.offset(2 * d_row, 2 * d_col)
        if enemy.is_within_bounds(size) and landing.is_within_bounds(size):
            candidates.append(CaptureCandidate(enemy, landing))
    return candidates
