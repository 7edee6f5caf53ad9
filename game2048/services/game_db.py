"""DB service layer for game use cases.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session/transaction boundaries.
- Use CRUD helpers that do NOT commit inside session.begin().
"""

import logging
from uuid import UUID

from game2048.crud import CreateData, ReadData, UpdateData
from game2048.db import Session
from game2048.domain.board_rules import RandomSource
from game2048.domain.game_rules import parse_direction, play_move, start_game
from game2048.exceptions import GameNotFoundError
from game2048.game_lock_manager import GameLockManager
from game2048.models.dc_models import MoveDirectionModel
from game2048.models.schema_models import GameStateSchema

game_lock_manager = GameLockManager()


async def new_game(board_size: int, rng: RandomSource) -> GameStateSchema:
    """Start a game and store it.

    Raises:
        InvalidArgumentError: board_size is not positive
    """
    game_state = start_game(board_size, rng)
    async with Session() as session:
        async with session.begin():
            await CreateData.add_game_state(game_state, session)
    logging.info(f"Created game {game_state.game_id} ({board_size}x{board_size})")
    return game_state


async def read_game(game_id: UUID) -> GameStateSchema:
    """Raises GameNotFoundError when no game has this id."""
    async with Session() as session:
        game_state = await ReadData.read_game_state(game_id, session)
    if game_state is None:
        raise GameNotFoundError(game_id)
    return game_state


async def apply_move(
    game_id: UUID, direction: MoveDirectionModel | str, rng: RandomSource
) -> GameStateSchema:
    """Read, move and write one game in a single transaction.

    Moves of the same game are serialized: in-process by a per-game lock and
    across processes by SELECT ... FOR UPDATE.

    Raises:
        InvalidArgumentError: direction is not UP, DOWN, LEFT or RIGHT
        GameNotFoundError: no game has this id
        CorruptBoardError: the stored board cannot be parsed
    """
    direction = parse_direction(direction)

    lock = await game_lock_manager.get_lock(game_id)
    try:
        async with lock:
            async with Session() as session:
                async with session.begin():
                    game_state = await ReadData.read_game_state(game_id, session, for_update=True)
                    if game_state is None:
                        raise GameNotFoundError(game_id)

                    next_state = play_move(game_state, direction, rng)
                    if next_state is not game_state:
                        await UpdateData.update_game_state(next_state, session)
    finally:
        await game_lock_manager.release_lock(game_id)

    if next_state is game_state:
        logging.info(f"Move {direction.value} left game {game_id} unchanged")
    else:
        logging.info(
            f"Move {direction.value} on game {game_id}: score={next_state.score} "
            f"won={next_state.won} game_over={next_state.game_over}"
        )
    return next_state
