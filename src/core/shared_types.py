"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    """Colors as they travel across the service / API boundary."""

    BLUE = "blue"
    RED = "red"


class PieceKind(StrEnum):
    MAN = "man"
    KING = "king"
