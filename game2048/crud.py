from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from uuid import UUID
import logging

from game2048.converter import DataConverter
from game2048.exceptions import GameNotFoundError
from game2048.models.schema_models import GameStateSchema
from game2048.models.schemas import GameState

data_converter = DataConverter()


# These helpers never commit: the caller owns the transaction (session.begin()).


class CreateData:
    @staticmethod
    async def add_game_state(game_state: GameStateSchema, session: AsyncSession) -> None:
        """Add a new game_state row to the current transaction

        Args:
            game_state (GameStateSchema): The freshly started game
        """
        try:
            new_game_state = GameState(
                game_id=game_state.game_id,
                board=data_converter.board_to_text(game_state.board),
                board_size=game_state.board_size,
                score=game_state.score,
                game_over=game_state.game_over,
                won=game_state.won,
            )
            session.add(new_game_state)
            await session.flush()
        except SQLAlchemyError as e:
            logging.error(f"Failed to create game state {game_state.game_id}: {e}")
            raise


class ReadData:
    @staticmethod
    async def read_game_state(
        game_id: UUID, session: AsyncSession, for_update: bool = False
    ) -> GameStateSchema | None:
        """Read game state data from database

        Args:
            game_id (UUID): To identify the game
            for_update (bool): Lock the row until the transaction ends

        Returns:
            GameStateSchema | None: The game state, or None when no such game exists
        """
        try:
            stmt = select(GameState).where(GameState.game_id == game_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await session.execute(stmt)
            result = result.scalars().first()
        except SQLAlchemyError as e:
            logging.error(f"Failed to read game state {game_id}: {e}")
            raise

        if result is None:
            return None
        return data_converter.convert_table_to_schema(result)


class UpdateData:
    @staticmethod
    async def update_game_state(game_state: GameStateSchema, session: AsyncSession) -> None:
        """Write board, score and flags of a game read earlier in the same transaction

        The row comes from the session identity map, so no second SELECT is sent.

        Args:
            game_state (GameStateSchema): The state after the move

        Raises:
            GameNotFoundError: The game does not exist
        """
        try:
            result = await session.get(GameState, game_state.game_id)
            if result is None:
                raise GameNotFoundError(game_state.game_id)

            result.board = data_converter.board_to_text(game_state.board)
            result.score = game_state.score
            result.game_over = game_state.game_over
            result.won = game_state.won
            await session.flush()
        except SQLAlchemyError as e:
            logging.error(f"Failed to update game state {game_state.game_id}: {e}")
            raise
