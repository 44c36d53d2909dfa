"""Records of executed moves. Only used for display / record keeping, the rules never read them."""

from dataclasses import dataclass, field
from typing import Self

from src.checkers.pieces import CellState, Player
from src.checkers.position import Position
from src.core.models import CapturedPieceModel, HistoryEntryModel


@dataclass(frozen=True)
class CapturedPiece:
    position: Position
    state: CellState


@dataclass(frozen=True)
class HistoryEntry:
    """
    What happened in a single move
    ----

    * player: who made the move
    * state: the moving piece BEFORE the move (so a man that got promoted on arrival is still recorded as a man)
    * captured: zero or one pieces that were jumped over
    """

    player: Player
    state: CellState
    from_position: Position
    to_position: Position
    captured: tuple[CapturedPiece, ...] = field(default_factory=tuple)

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    @classmethod
    def from_model(cls, model: HistoryEntryModel) -> Self:
        return cls(
            player=Player[model.player.upper()],
            state=CellState.from_code(model.state),
            from_position=Position(model.from_row, model.from_col),
            to_position=Position(model.to_row, model.to_col),
            captured=tuple(
                CapturedPiece(Position(c.row, c.col), CellState.from_code(c.state))
                for c in model.captured
            ),
        )

    def to_model(self) -> HistoryEntryModel:
        return HistoryEntryModel(
            player=self.player.name.lower(),
            state=self.state.to_code(),
            from_row=self.from_position.row,
            from_col=self.from_position.col,
            to_row=self.to_position.row,
            to_col=self.to_position.col,
            captured=[
                CapturedPieceModel(c.position.row, c.position.col, c.state.to_code())
                for c in self.captured
            ],
        )
