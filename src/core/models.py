"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The API layer (higher) and the domain layer (lower) both convert to/from these models,
so neither has to know about the other's representation.
"""

from dataclasses import dataclass, field

# Type aliases to make the models easier to read
PlayerName = str
LayoutString = str


@dataclass(frozen=True)
class CapturedPieceModel:
    row: int
    col: int
    state: str


@dataclass(frozen=True)
class HistoryEntryModel:
    """Transport-safe representation of a single executed move."""

    player: PlayerName
    state: str
    from_row: int
    from_col: int
    to_row: int
    to_col: int
    captured: list[CapturedPieceModel] = field(default_factory=list)


@dataclass
class GameModel:
    """Transport-safe snapshot of a checkers game used between Service and Domain layers."""

    layout: LayoutString
    player: PlayerName
    number_of_moves: int
    history: list[HistoryEntryModel]
