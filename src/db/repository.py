"""Protocol repository + an implementation that keeps games in memory (games are not persisted)"""

from typing import Protocol
from uuid import UUID, uuid4

from loguru import logger

from src.core.models import GameModel


class GameRepository(Protocol):
    """Storage orchestration"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...


class InMemoryGameRepository:
    """Games stored in a dictionary for the lifetime of the process"""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def get_game(self, game_id: UUID) -> GameModel | None:
        return self._games.get(game_id)

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        new_id = uuid4()
        self._games[new_id] = game
        logger.debug(f"Created game {new_id}")
        return game, new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        game = self._games.pop(game_id, None)
        if game is not None:
            logger.debug(f"Deleted game {game_id}")
        return game
