from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import Boolean, DateTime, Integer, TEXT, Uuid
from uuid6 import uuid7
from datetime import datetime


class Base(DeclarativeBase):
    pass


class GameState(Base):
    __tablename__ = "game_state"
    game_id = Column(Uuid, primary_key=True, default=uuid7)
    # Rows joined by ";" and cells by ",", see DataConverter.board_to_text
    board = Column(TEXT, nullable=False)
    board_size = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False, default=0)
    game_over = Column(Boolean, nullable=False, default=False)
    won = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)
