from pydantic import BaseModel, Field
from enum import Enum
from uuid import UUID
from datetime import datetime
from typing import List


class MoveDirectionModel(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class GameStateModel(BaseModel):
    """Game state as sent to the client."""
    id: UUID
    board: List[List[int]]
    score: int
    game_over: bool = Field(alias="gameOver")
    won: bool

    class Config:
        populate_by_name = True


class ErrorResponseModel(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
