import logging
import random
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from game2048.converter import DataConverter
from game2048.load_secrets import default_board_size
from game2048.models.dc_models import GameStateModel
from game2048.services import game_db

game_router = APIRouter(prefix="/api/games")
data_converter = DataConverter()
rng = random.Random()


def get_rng() -> random.Random:
    """Random source for spawned tiles. Tests override this dependency."""
    return rng


class GameAPI:
    @staticmethod
    @game_router.post("", response_model=GameStateModel)
    async def start_new_game(
        board_size: int = Query(default_board_size, alias="boardSize"),
        tile_rng: random.Random = Depends(get_rng),
    ):
        # Non-positive sizes are rejected by the service layer (400).
        game_state = await game_db.new_game(board_size, tile_rng)
        return data_converter.convert_schema_to_statemodel(game_state)

    @staticmethod
    @game_router.get("/{game_id}", response_model=GameStateModel)
    async def get_game_state(game_id: UUID):
        game_state = await game_db.read_game(game_id)
        return data_converter.convert_schema_to_statemodel(game_state)

    @staticmethod
    @game_router.post("/{game_id}/move", response_model=GameStateModel)
    async def move(
        game_id: UUID,
        direction: str,
        tile_rng: random.Random = Depends(get_rng),
    ):
        logging.debug(f"move request: game_id={game_id} direction={direction}")
        game_state = await game_db.apply_move(game_id, direction, tile_rng)
        return data_converter.convert_schema_to_statemodel(game_state)
