"""Session rules: starting a game and applying one move to a stored state.

The caller owns persistence; these functions only build the next state.
"""

import numpy as np
from uuid6 import uuid7

from game2048.domain.board_rules import (
    WINNING_TILE,
    RandomSource,
    has_tile,
    is_move_possible,
    new_board,
    resolve_move,
    spawn_tile,
)
from game2048.exceptions import InvalidArgumentError
from game2048.models.dc_models import MoveDirectionModel
from game2048.models.schema_models import GameStateSchema


def parse_direction(value) -> MoveDirectionModel:
    """Accept a MoveDirectionModel or its exact name ("UP", "DOWN", "LEFT", "RIGHT")."""
    if isinstance(value, MoveDirectionModel):
        return value
    try:
        return MoveDirectionModel(value)
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid direction: {value!r}. Expected one of UP, DOWN, LEFT, RIGHT."
        ) from None


def start_game(board_size: int, rng: RandomSource) -> GameStateSchema:
    """Build a fresh game: two tiles, score 0, not won, not over.

    Raises:
        InvalidArgumentError: board_size is not a positive integer
    """
    if isinstance(board_size, bool) or not isinstance(board_size, int) or board_size <= 0:
        raise InvalidArgumentError("Board size must be positive.")

    return GameStateSchema(
        game_id=uuid7(),
        board=new_board(board_size, rng).tolist(),
        score=0,
        game_over=False,
        won=False,
    )


def play_move(
    state: GameStateSchema, direction: MoveDirectionModel, rng: RandomSource
) -> GameStateSchema:
    """Apply one move to ``state``.

    A finished game and a move that changes nothing both return ``state``
    itself: no score, no spawn, no flag update. Otherwise the merge score is
    added, one tile is spawned, ``won`` latches once a 2048 tile is on the
    board (play continues after winning), and ``game_over`` is set when the
    post-spawn board has no possible move.

    Args:
        state (GameStateSchema): Current state of the game
        direction (MoveDirectionModel): Direction of the move
        rng (RandomSource): Source for the spawned tile

    Returns:
        GameStateSchema: The state after the move
    """
    if state.game_over:
        return state

    outcome = resolve_move(np.array(state.board, dtype=np.int64), direction)
    if not outcome.board_changed:
        return state

    board = spawn_tile(outcome.board, rng)
    return state.model_copy(
        update={
            "board": board.tolist(),
            "score": state.score + outcome.score_gained,
            "won": state.won or has_tile(board, WINNING_TILE),
            "game_over": not is_move_possible(board),
        }
    )
