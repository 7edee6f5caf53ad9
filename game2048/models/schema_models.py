from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import datetime


class GameStateSchema(BaseModel):
    game_id: UUID
    board: List[List[int]]
    score: int
    game_over: bool
    won: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @property
    def board_size(self) -> int:
        return len(self.board)
