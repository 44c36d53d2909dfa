"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.checkers.position import BOARD_SIZE
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceKind


# --- REQUEST MODELS ---
class PositionModel(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Coordinate {value} is not on the board (0-{BOARD_SIZE - 1})."
            )
        return value


class GameRequest(BaseModel):
    game_id: UUID


class HighlightRequest(BaseModel):
    game_id: UUID
    position: PositionModel


class MoveRequest(BaseModel):
    game_id: UUID
    from_position: PositionModel
    to_position: PositionModel


# --- RESPONSE MODELS ---
class CellView(BaseModel):
    """What the presentation layer needs to draw a single cell"""

    position: PositionModel
    color: Optional[Color]
    kind: Optional[PieceKind]
    is_available_to_move: bool
    is_highlighted: bool


class CapturedPieceView(BaseModel):
    position: PositionModel
    color: Color
    kind: PieceKind


class HistoryEntryView(BaseModel):
    player: Color
    kind: PieceKind
    from_position: PositionModel
    to_position: PositionModel
    captured: list[CapturedPieceView]


class BoardResponse(BaseModel):
    game_id: UUID
    player: Color
    number_of_moves: int
    layout: str
    cells: list[list[CellView]]
    history: list[HistoryEntryView]


class HighlightResponse(BaseModel):
    game_id: UUID
    position: PositionModel
    highlighted_positions: list[PositionModel]
