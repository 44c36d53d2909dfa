"""
A single square of the board.

The cell combines the geometric candidates of src/checkers/movements.py with the live occupancy of the board
to find legal moves, and executes a move by updating itself, the target cell (and the jumped cell when capturing).
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from src.checkers.history import CapturedPiece, HistoryEntry
from src.checkers.movements import (
    CaptureCandidate,
    possible_capture_positions,
    possible_normal_positions,
)
from src.checkers.pieces import CellState, Player, promote
from src.checkers.position import Position


class Board(Protocol):
    """Just the parts of the board a cell needs. (The cell does not own the board, the board owns the cell.)"""

    size: int
    player: Player
    number_of_moves: int

    def get_cell(self, position: Position) -> Cell: ...
    def add_history(self, entry: HistoryEntry) -> None: ...
    def change_turn(self) -> None: ...
    def update_cells(self) -> None: ...


class Cell:
    def __init__(self, row: int, col: int, state: CellState, board: Board) -> None:
        self.row = row
        self.col = col
        self.state = state
        self.board = board

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, state={self.state.name})"

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    # -- MOVEMENTS ---
    def possible_movements(self) -> list[Position]:
        """
        Positions to highlight for this cell
        ----

        If this piece can capture, it has to: only the landing squares are returned.
        NOTE: this is decided per cell. Another piece of the same player may still make a normal move.
        """
        capture_movements = self.possible_capture_movements()
        if capture_movements:
            return [candidate.landing_position for candidate in capture_movements]
        return self.possible_normal_movements()

    def possible_normal_movements(self) -> list[Position]:
        """Single diagonal steps onto an empty square"""
        # Not the current player's piece (or no piece at all)? It cannot move.
        if not self.is_turn():
            return []

        candidates = possible_normal_positions(self.state, self.position, self.board.size)
        return [
            position for position in candidates if self.board.get_cell(position).is_empty()
        ]

    def possible_capture_movements(self) -> list[CaptureCandidate]:
        """Jumps over an enemy piece onto the empty square right behind it"""
        if not self.is_turn():
            return []

        candidates = possible_capture_positions(self.state, self.position, self.board.size)
        return [
            candidate
            for candidate in candidates
            if self.board.get_cell(candidate.landing_position).is_empty()
            and self.is_enemy(self.board.get_cell(candidate.enemy_position))
        ]

    # -- STATUS ---
    def is_turn(self) -> bool:
        return self.state.owner is not None and self.state.owner == self.board.player

    def is_empty(self) -> bool:
        return self.state == CellState.EMPTY

    def is_blue(self) -> bool:
        return self.state.owner == Player.BLUE

    def is_red(self) -> bool:
        return self.state.owner == Player.RED

    def is_enemy(self, other: Cell) -> bool:
        """Empty cells are nobody's enemy"""
        if other.is_blue():
            return self.is_red()
        if other.is_red():
            return self.is_blue()
        return False

    def is_king(self) -> bool:
        return self.state.is_king

    def is_playable(self) -> bool:
        return self.position.is_playable()

    # -- ACTIONS ---
    def move(self, to_position: Position) -> bool:
        """
        Attempt to move the piece on this cell
        -----

        1. Normal move? --> move the piece
        2. Capture move? --> move the piece and remove the jumped enemy piece
        3. Neither? --> nothing changes, return False

        After a successful move:
        * a history entry is recorded (with the piece state from before the move)
        * the move counter goes up when red moved
        * the turn passes to the opponent
        * the board checks for pieces to promote
        """
        # Legal moves are recomputed here, so nobody can sneak a move past the rules
        if to_position in self.possible_normal_movements():
            self._record(to_position, captured=())
            self._relocate(to_position)
            self._finish_turn()
            return True

        capture = next(
            (
                candidate
                for candidate in self.possible_capture_movements()
                if candidate.landing_position == to_position
            ),
            None,
        )
        if capture is not None:
            enemy_cell = self.board.get_cell(capture.enemy_position)
            self._record(
                to_position,
                captured=(CapturedPiece(capture.enemy_position, enemy_cell.state),),
            )
            self._relocate(to_position)
            enemy_cell.state = CellState.EMPTY
            self._finish_turn()
            return True

        logger.debug(f"Rejected move {self.position} -> {to_position} ({self.state.name})")
        return False

    def promote_if_eligible(self) -> None:
        """A man that reached the far side of the board becomes a king. Red goes to row 0, blue goes to the last row."""
        if self.is_blue() and self.row != self.board.size - 1:
            return
        if self.is_red() and self.row != 0:
            return
        promoted = promote(self.state)
        if promoted != self.state:
            logger.info(f"{self.state.name} promoted to {promoted.name} on {self.position}")
            self.state = promoted

    # -- PRIVATE HELPERS ---
    def _record(self, to_position: Position, captured: tuple[CapturedPiece, ...]) -> None:
        """Snapshot of the move BEFORE any cell gets updated"""
        self.board.add_history(
            HistoryEntry(
                player=self.board.player,
                state=self.state,
                from_position=self.position,
                to_position=to_position,
                captured=captured,
            )
        )

    def _relocate(self, to_position: Position) -> None:
        self.board.get_cell(to_position).state = self.state
        self.state = CellState.EMPTY

    def _finish_turn(self) -> None:
        if self.board.player == Player.RED:
            self.board.number_of_moves += 1
        self.board.change_turn()
        self.board.update_cells()
