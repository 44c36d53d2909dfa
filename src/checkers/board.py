"""The Game board owns all cells, whose turn it is, the move counter and the history of moves"""

from typing import Iterator, Optional, Self

from loguru import logger

from src.checkers.cell import Cell
from src.checkers.history import HistoryEntry
from src.checkers.pieces import CellState, Player
from src.checkers.position import BOARD_SIZE, Position
from src.core.exceptions import LayoutError, OutOfBoundsError
from src.core.models import GameModel

# Number of rows filled with men for each player at the start of the game
STARTING_ROWS = 3


def starting_layout(size: int = BOARD_SIZE) -> str:
    """
    Layout string of the standard opening position

    Blue men on the dark squares of the first rows, red men on the dark squares of the last rows, empty in between.
    ex) 8x8:
    b.b.b.b./.b.b.b.b/b.b.b.b./......../......../.r.r.r.r/r.r.r.r./.r.r.r.r
    """
    rows: list[str] = []
    for row in range(size):
        if row < STARTING_ROWS:
            code = CellState.BLUE_MAN.to_code()
        elif row >= size - STARTING_ROWS:
            code = CellState.RED_MAN.to_code()
        else:
            code = CellState.EMPTY.to_code()

        rows.append(
            "".join(
                code if Position(row, col).is_playable() else CellState.EMPTY.to_code()
                for col in range(size)
            )
        )
    return "/".join(rows)


class Board:
    def __init__(
        self,
        states: list[list[CellState]],
        player: Player = Player.BLUE,
        number_of_moves: int = 0,
        history: Optional[list[HistoryEntry]] = None,
    ) -> None:
        self.size = len(states)
        # Cells are looked up by (row, col) after a bounds check against size, so every row must be full
        for row_idx, row_states in enumerate(states):
            if len(row_states) != self.size:
                raise LayoutError(
                    f"Row {row_idx} has {len(row_states)} cells, expected {self.size}"
                )
        self.grid: list[list[Cell]] = [
            [Cell(row, col, state, self) for col, state in enumerate(row_states)]
            for row, row_states in enumerate(states)
        ]
        self.player = player
        self.number_of_moves = number_of_moves
        self.history: list[HistoryEntry] = history if history is not None else []

    # -- CREATION LOGIC ---
    @classmethod
    def new(cls, size: int = BOARD_SIZE) -> Self:
        """Fresh game: opening layout, blue to move"""
        return cls.from_layout(starting_layout(size))

    @classmethod
    def from_layout(
        cls, layout: str, player: Player = Player.BLUE, number_of_moves: int = 0
    ) -> Self:
        """
        Construct a board from a layout string.

        Rows are separated by slashes, starting at row 0. Every character is one cell:
        '.' empty, 'b' blue man, 'B' blue king, 'r' red man, 'R' red king.
        The board must be square.
        """
        rows = layout.split("/")
        size = len(rows)
        states: list[list[CellState]] = []
        for row_idx, row in enumerate(rows):
            if len(row) != size:
                raise LayoutError(
                    f"Row {row_idx} has {len(row)} cells, expected {size}: {layout!r}"
                )
            try:
                states.append([CellState.from_code(character) for character in row])
            except KeyError as e:
                raise LayoutError(f"Unknown cell code {e} in layout {layout!r}") from e
        return cls(states, player=player, number_of_moves=number_of_moves)

    def to_layout(self) -> str:
        return "/".join(
            "".join(cell.state.to_code() for cell in row) for row in self.grid
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild the board from the snapshot the Service layer keeps"""
        board = cls.from_layout(
            model.layout,
            player=Player[model.player.upper()],
            number_of_moves=model.number_of_moves,
        )
        board.history = [HistoryEntry.from_model(entry) for entry in model.history]
        return board

    def to_model(self) -> GameModel:
        return GameModel(
            layout=self.to_layout(),
            player=self.player.name.lower(),
            number_of_moves=self.number_of_moves,
            history=[entry.to_model() for entry in self.history],
        )

    # -- QUERIES ---
    def get_cell(self, position: Position) -> Cell:
        # Out of bounds is a programming error: never hand out a wrong cell (negative indices would wrap around)
        if not position.is_within_bounds(self.size):
            raise OutOfBoundsError(
                f"{position} is outside of the {self.size}x{self.size} board"
            )
        return self.grid[position.row][position.col]

    def cells(self) -> Iterator[Cell]:
        for row in self.grid:
            yield from row

    def is_available_to_move(self, position: Position) -> bool:
        """Can the piece on this position be picked up by the current player?"""
        cell = self.get_cell(position)
        return cell.is_turn() and len(cell.possible_movements()) > 0

    def movable_positions(self) -> list[Position]:
        return [
            cell.position
            for cell in self.cells()
            if self.is_available_to_move(cell.position)
        ]

    def count_pieces(self) -> dict[Player, int]:
        """Number of pieces left on the board for each player"""
        return {
            player: sum(1 for cell in self.cells() if cell.state.owner == player)
            for player in Player
        }

    # -- ACTIONS ---
    def move_checker(self, from_position: Position, to_position: Position) -> bool:
        """Entry point for the caller: move the piece standing on from_position"""
        return self.get_cell(from_position).move(to_position)

    def change_turn(self) -> None:
        self.player = self.player.opponent

    def add_history(self, entry: HistoryEntry) -> None:
        logger.debug(
            f"{entry.player.name} moved {entry.state.name} {entry.from_position} -> {entry.to_position}"
            + (f", captured {entry.captured[0].state.name}" if entry.is_capture else "")
        )
        self.history.append(entry)

    def update_cells(self) -> None:
        """Promotion sweep over the entire board"""
        for cell in self.cells():
            cell.promote_if_eligible()
