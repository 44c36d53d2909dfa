"""Unit tests for src/services/checkers_service.py"""

from typing import Generator
from unittest.mock import patch
from uuid import UUID, uuid4

import pytest

from src.api.models import PositionModel
from src.checkers.board import Board
from src.core.exceptions import GameError, IllegalMoveError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, PieceKind
from src.services.checkers_service import (
    BoardResponse,
    CheckersService,
    GameRequest,
    HighlightRequest,
    HighlightResponse,
    MoveRequest,
)

STARTING_LAYOUT = "b.b.b.b./.b.b.b.b/b.b.b.b./......../......../.r.r.r.r/r.r.r.r./.r.r.r.r"


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        game_id = uuid4()
        self._games[game_id] = game
        return game, game_id

    def get_game(self, game_id: UUID) -> GameModel | None:
        return self._games.get(game_id)

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        return self._games.pop(game_id, None)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository) -> CheckersService:
    return CheckersService(mock_repository)


def move_request(game_id: UUID, from_rc: tuple[int, int], to_rc: tuple[int, int]) -> MoveRequest:
    return MoveRequest(
        game_id=game_id,
        from_position=PositionModel(row=from_rc[0], col=from_rc[1]),
        to_position=PositionModel(row=to_rc[0], col=to_rc[1]),
    )


# --- SERVICE - CREATE GAME ----
def test_service_configures_logging(mock_repository: MockRepository) -> None:
    with patch("src.services.checkers_service.configure_logging") as configure:
        CheckersService(mock_repository)
    configure.assert_called_once_with()


def test_create_game(service: CheckersService, mock_repository: MockRepository) -> None:
    response = service.create_game()

    # Check response structure
    assert isinstance(response, BoardResponse)
    assert isinstance(response.game_id, UUID)

    # Check response data
    assert response.layout == STARTING_LAYOUT
    assert response.player == Color.BLUE
    assert response.number_of_moves == 0
    assert response.history == []
    assert len(response.cells) == 8
    assert all(len(row) == 8 for row in response.cells)

    # Check stored data
    stored_game = mock_repository.get_game(response.game_id)
    assert stored_game is not None
    assert stored_game.layout == STARTING_LAYOUT
    assert stored_game.player == "blue"


def test_read_model_of_cells(service: CheckersService) -> None:
    response = service.create_game()

    blue = response.cells[2][2]
    assert blue.color == Color.BLUE
    assert blue.kind == PieceKind.MAN
    assert blue.is_available_to_move

    back_row = response.cells[0][0]
    assert back_row.color == Color.BLUE
    assert not back_row.is_available_to_move

    red = response.cells[5][1]
    assert red.color == Color.RED
    assert not red.is_available_to_move

    empty = response.cells[4][4]
    assert empty.color is None
    assert empty.kind is None
    assert not empty.is_available_to_move


# --- SERVICE - GET BOARD ----
def test_get_board(service: CheckersService) -> None:
    created = service.create_game()
    response = service.get_board(GameRequest(game_id=created.game_id))
    assert response == created


def test_get_unknown_game(service: CheckersService) -> None:
    """Ensure exception is raised when trying to look up a game with an unknown ID."""
    with pytest.raises(RepositoryError):
        _ = service.get_board(GameRequest(game_id=uuid4()))


# --- SERVICE - HIGHLIGHT ----
def test_highlight_positions(service: CheckersService) -> None:
    created = service.create_game()
    request = HighlightRequest(game_id=created.game_id, position=PositionModel(row=2, col=2))
    response = service.highlight_positions(request)

    assert isinstance(response, HighlightResponse)
    assert set((p.row, p.col) for p in response.highlighted_positions) == {(3, 1), (3, 3)}

    # the read model now shows them as highlighted
    board = service.get_board(GameRequest(game_id=created.game_id))
    assert board.cells[3][1].is_highlighted
    assert board.cells[3][3].is_highlighted
    assert not board.cells[3][5].is_highlighted


def test_highlight_opponent_piece(service: CheckersService) -> None:
    """Hovering over red on blue's turn highlights nothing"""
    created = service.create_game()
    request = HighlightRequest(game_id=created.game_id, position=PositionModel(row=5, col=1))
    assert service.highlight_positions(request).highlighted_positions == []


# --- SERVICE - MOVE ----
def test_move_checker(service: CheckersService, mock_repository: MockRepository) -> None:
    created = service.create_game()
    service.highlight_positions(
        HighlightRequest(game_id=created.game_id, position=PositionModel(row=2, col=2))
    )

    response = service.move_checker(move_request(created.game_id, (2, 2), (3, 3)))

    assert response.player == Color.RED
    assert response.cells[2][2].color is None
    assert response.cells[3][3].color == Color.BLUE
    assert len(response.history) == 1
    assert response.history[0].player == Color.BLUE
    assert response.history[0].captured == []
    # highlights are cleared after a move
    assert not any(cell.is_highlighted for row in response.cells for cell in row)

    # Check stored data
    stored_game = mock_repository.get_game(created.game_id)
    assert stored_game is not None
    assert stored_game.player == "red"
    assert len(stored_game.history) == 1


def test_capture_shows_up_in_history(service: CheckersService) -> None:
    created = service.create_game()
    for from_rc, to_rc in [((2, 2), (3, 3)), ((5, 5), (4, 4)), ((2, 4), (3, 5))]:
        service.move_checker(move_request(created.game_id, from_rc, to_rc))

    response = service.move_checker(move_request(created.game_id, (4, 4), (2, 2)))

    assert response.number_of_moves == 2
    captured = response.history[-1].captured
    assert len(captured) == 1
    assert captured[0].position == PositionModel(row=3, col=3)
    assert captured[0].color == Color.BLUE
    assert captured[0].kind == PieceKind.MAN


def test_illegal_move(service: CheckersService, mock_repository: MockRepository) -> None:
    """The board rejects the move: service raises, and nothing gets stored"""
    created = service.create_game()
    stored_before = mock_repository.get_game(created.game_id)

    with pytest.raises(IllegalMoveError):
        service.move_checker(move_request(created.game_id, (2, 2), (4, 4)))

    assert mock_repository.get_game(created.game_id) == stored_before


def test_move_out_of_turn(service: CheckersService) -> None:
    created = service.create_game()
    with pytest.raises(GameError):
        service.move_checker(move_request(created.game_id, (5, 1), (4, 0)))


def test_move_in_unknown_game(service: CheckersService) -> None:
    with pytest.raises(RepositoryError):
        service.move_checker(move_request(uuid4(), (2, 2), (3, 3)))


def test_promotion_in_read_model(service: CheckersService, mock_repository: MockRepository) -> None:
    """Start from a stored position where blue is one step away from the last row"""
    layout = "/".join(["........"] * 6 + ["..b.....", "........"])
    _, game_id = mock_repository.create_game(Board.from_layout(layout).to_model())

    response = service.move_checker(move_request(game_id, (6, 2), (7, 3)))

    assert response.cells[7][3].kind == PieceKind.KING
    assert response.history[-1].kind == PieceKind.MAN


# --- SERVICE - DELETE ----
def test_delete_game(service: CheckersService, mock_repository: MockRepository) -> None:
    created = service.create_game()
    service.delete_game(GameRequest(game_id=created.game_id))
    assert mock_repository.get_game(created.game_id) is None

    with pytest.raises(RepositoryError):
        service.delete_game(GameRequest(game_id=created.game_id))
