"""Orchestration of communication from the presentation layer to the rules engine and the game storage (and the reverse direction)."""

from uuid import UUID

from loguru import logger

from src.api.models import (
    BoardResponse,
    CapturedPieceView,
    CellView,
    GameRequest,
    HighlightRequest,
    HighlightResponse,
    HistoryEntryView,
    MoveRequest,
    PositionModel,
)
from src.checkers.board import Board
from src.checkers.cell import Cell
from src.checkers.history import HistoryEntry
from src.checkers.position import Position
from src.core.config import configure_logging
from src.core.exceptions import IllegalMoveError, RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository


class CheckersService:
    """
    Orchestration of layers for a checkers game.

    Besides the stored games, the service remembers which positions are highlighted for each game
    (the destinations of the cell the user last hovered over).
    """

    def __init__(self, repository: GameRepository) -> None:
        configure_logging()
        self.repo = repository
        self.highlighted: dict[UUID, list[Position]] = {}

    # -- Routes logic ---
    def create_game(self) -> BoardResponse:
        """Start a new game in the opening position"""
        board = Board.new()
        stored_game, game_id = self.repo.create_game(board.to_model())
        logger.info(f"New game {game_id}")
        return self._create_board_response(game_id, Board.from_model(stored_game))

    def get_board(self, request: GameRequest) -> BoardResponse:
        """Current state of the game, as needed for rendering"""
        board = self._fetch_board(request.game_id)
        return self._create_board_response(request.game_id, board)

    def highlight_positions(self, request: HighlightRequest) -> HighlightResponse:
        """The destinations available to the piece on the requested position (empty if it cannot move)"""
        board = self._fetch_board(request.game_id)
        position = _to_position(request.position)
        destinations = board.get_cell(position).possible_movements()
        self.highlighted[request.game_id] = destinations
        return HighlightResponse(
            game_id=request.game_id,
            position=request.position,
            highlighted_positions=[_to_position_model(p) for p in destinations],
        )

    def move_checker(self, request: MoveRequest) -> BoardResponse:
        """Attempt to move a piece. The board decides whether the move is legal."""
        board = self._fetch_board(request.game_id)
        from_position = _to_position(request.from_position)
        to_position = _to_position(request.to_position)

        # Whatever the outcome, the previous highlights are stale now
        self.highlighted.pop(request.game_id, None)

        if not board.move_checker(from_position, to_position):
            raise IllegalMoveError(
                f"Move not allowed: {from_position} -> {to_position} ({board.player.name} to move)"
            )

        self.repo.update_game(request.game_id, board.to_model())
        return self._create_board_response(request.game_id, board)

    def delete_game(self, request: GameRequest) -> None:
        """Handle a request to delete a game."""
        self.highlighted.pop(request.game_id, None)
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")

    # -- Internal helpers --
    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    def _fetch_board(self, game_id: UUID) -> Board:
        return Board.from_model(self._fetch_game(game_id))

    def _create_board_response(self, game_id: UUID, board: Board) -> BoardResponse:
        """Derive the read model from the board. Nothing in here is stored separately."""
        highlighted = self.highlighted.get(game_id, [])
        return BoardResponse(
            game_id=game_id,
            player=board.player.color,
            number_of_moves=board.number_of_moves,
            layout=board.to_layout(),
            cells=[
                [_cell_view(board, cell, cell.position in highlighted) for cell in row]
                for row in board.grid
            ],
            history=[_history_view(entry) for entry in board.history],
        )


def _to_position(model: PositionModel) -> Position:
    return Position(model.row, model.col)


def _to_position_model(position: Position) -> PositionModel:
    return PositionModel(row=position.row, col=position.col)


def _cell_view(board: Board, cell: Cell, is_highlighted: bool) -> CellView:
    owner = cell.state.owner
    return CellView(
        position=_to_position_model(cell.position),
        color=owner.color if owner is not None else None,
        kind=cell.state.kind,
        is_available_to_move=board.is_available_to_move(cell.position),
        is_highlighted=is_highlighted,
    )


def _history_view(entry: HistoryEntry) -> HistoryEntryView:
    return HistoryEntryView(
        player=entry.player.color,
        kind=entry.state.kind,
        from_position=_to_position_model(entry.from_position),
        to_position=_to_position_model(entry.to_position),
        captured=[
            CapturedPieceView(
                position=_to_position_model(captured.position),
                color=captured.state.owner.color,
                kind=captured.state.kind,
            )
            for captured in entry.captured
        ],
    )
