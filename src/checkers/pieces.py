"""Defines the state a cell can be in, and the players"""

from enum import Enum, auto
from typing import Self

from src.core.shared_types import Color, PieceKind


class Player(Enum):
    BLUE = auto()
    RED = auto()

    @property
    def opponent(self) -> Self:
        return Player.RED if self == Player.BLUE else Player.BLUE

    @property
    def color(self) -> Color:
        return Color[self.name]


class CellState(Enum):
    EMPTY = auto()
    BLUE_MAN = auto()
    BLUE_KING = auto()
    RED_MAN = auto()
    RED_KING = auto()

    @property
    def owner(self) -> Player | None:
        return STATE_OWNER.get(self)

    @property
    def is_king(self) -> bool:
        return self in (CellState.BLUE_KING, CellState.RED_KING)

    @property
    def kind(self) -> PieceKind | None:
        if self == CellState.EMPTY:
            return None
        return PieceKind.KING if self.is_king else PieceKind.MAN

    @classmethod
    def from_code(cls, character: str) -> Self:
        return CODE_TO_STATE[character]

    def to_code(self) -> str:
        return STATE_TO_CODE[self]


STATE_OWNER: dict[CellState, Player] = {
    CellState.BLUE_MAN: Player.BLUE,
    CellState.BLUE_KING: Player.BLUE,
    CellState.RED_MAN: Player.RED,
    CellState.RED_KING: Player.RED,
}

# Layout codes: lower case for men, upper case for kings (same idea as FEN)
CODE_TO_STATE: dict[str, CellState] = {
    ".": CellState.EMPTY,
    "b": CellState.BLUE_MAN,
    "B": CellState.BLUE_KING,
    "r": CellState.RED_MAN,
    "R": CellState.RED_KING,
}

STATE_TO_CODE: dict[CellState, str] = {value: key for key, value in CODE_TO_STATE.items()}

PROMOTIONS: dict[CellState, CellState] = {
    CellState.BLUE_MAN: CellState.BLUE_KING,
    CellState.RED_MAN: CellState.RED_KING,
}


def promote(state: CellState) -> CellState:
    """A man becomes a king of the same color. Anything else stays as it is (kings are never demoted)."""
    return PROMOTIONS.get(state, state)
