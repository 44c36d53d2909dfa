"""
Exceptions raised across layers.

NOTE: the rules engine does not raise for illegal play (it answers with empty move sets / False).
These are for contract violations and for the service boundary.
"""


class GameError(Exception):
    """Base class for everything raised by this project"""


class OutOfBoundsError(GameError, IndexError):
    """A grid lookup was made outside of the board. Caller error."""


class LayoutError(GameError, ValueError):
    """A board layout string could not be parsed."""


class IllegalMoveError(GameError):
    """Raised by the service when the board rejected a requested move."""


class RepositoryError(GameError):
    """Game could not be found / stored."""


class InvalidRequestError(GameError):
    """Request data could not be interpreted."""
