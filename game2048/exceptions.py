"""Typed failures raised by the game service.

The HTTP layer maps them to status codes in ``game2048.main``.
"""


class GameServiceError(Exception):
    pass


class InvalidArgumentError(GameServiceError, ValueError):
    """Bad client input: non-positive board size, unknown direction."""


class GameNotFoundError(GameServiceError, LookupError):
    def __init__(self, game_id):
        super().__init__(f"Game with ID {game_id} not found.")
        self.game_id = game_id


class CorruptBoardError(GameServiceError):
    """The stored board text could not be turned back into a board."""
