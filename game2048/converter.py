import re
from typing import List

from game2048.exceptions import CorruptBoardError
from game2048.models.dc_models import GameStateModel
from game2048.models.schema_models import GameStateSchema
from game2048.models.schemas import GameState

ROW_SEPARATOR = ";"
COLUMN_SEPARATOR = ","
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
# Stored cells are 32-bit signed integers
CELL_MIN = -(2**31)
CELL_MAX = 2**31 - 1


class DataConverter:
    """This class is used to convert game data between different formats."""

    def board_to_text(self, board: List[List[int]]) -> str:
        """Convert the board to the text stored in the game_state.board column

        Args:
            board (List[List[int]]): The board, one list per row

        Returns:
            str: Rows joined by ";" and cells joined by ",", e.g. "2,0;0,4"
        """
        return ROW_SEPARATOR.join(
            COLUMN_SEPARATOR.join(str(int(cell)) for cell in row) for row in board
        )

    def text_to_board(self, text: str) -> List[List[int]]:
        """Convert the stored text back to a board

        Args:
            text (str): Text written by board_to_text

        Raises:
            CorruptBoardError: The text is empty, holds a non-integer or out-of-range cell, or is not square

        Returns:
            List[List[int]]: The board, one list per row
        """
        if text is None or not text.strip():
            raise CorruptBoardError("Stored board is empty.")

        board = []
        for row_text in text.split(ROW_SEPARATOR):
            row = []
            for field in row_text.split(COLUMN_SEPARATOR):
                if not INTEGER_LITERAL.fullmatch(field):
                    raise CorruptBoardError(
                        f"Failed to convert stored data to board. Invalid number format: {field!r}"
                    )
                value = int(field)
                if not CELL_MIN <= value <= CELL_MAX:
                    raise CorruptBoardError(
                        f"Failed to convert stored data to board. Number out of range: {field!r}"
                    )
                row.append(value)
            board.append(row)

        if any(len(row) != len(board) for row in board):
            raise CorruptBoardError("Failed to convert stored data to board. Board is not square.")
        return board

    def convert_table_to_schema(self, game_state: GameState) -> GameStateSchema:
        """Convert a game_state row to the GameStateSchema used by the service layer"""
        return GameStateSchema(
            game_id=game_state.game_id,
            board=self.text_to_board(game_state.board),
            score=game_state.score,
            game_over=game_state.game_over,
            won=game_state.won,
            created_at=game_state.created_at,
            updated_at=game_state.updated_at,
        )

    def convert_schema_to_statemodel(self, game_state: GameStateSchema) -> GameStateModel:
        """Convert the GameStateSchema to the GameStateModel to send client"""
        return GameStateModel(
            id=game_state.game_id,
            board=game_state.board,
            score=game_state.score,
            game_over=game_state.game_over,
            won=game_state.won,
        )
