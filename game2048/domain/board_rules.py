"""Board rules that are independent from HTTP and DB.

Every direction is resolved by one "slide left" routine. The board is
re-oriented with two self-inverse transforms (transpose, reverse_rows)
before the slide and put back afterwards.

Rule of thumb:
- OK: numpy array math, merge rules, spawn policy driven by an injected rng.
- Not OK: touching DB sessions, FastAPI, logging, the global random module.
"""

from typing import NamedTuple, Protocol

import numpy as np

from game2048.models.dc_models import MoveDirectionModel

WINNING_TILE = 2048
FOUR_TILE_PROBABILITY = 0.1


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def random(self) -> float: ...


class MoveOutcome(NamedTuple):
    board: np.ndarray
    score_gained: int
    board_changed: bool


# ==============================================================================
# ==== Orientation =============================================================
# ==============================================================================


def transpose(board: np.ndarray) -> np.ndarray:
    """Swap board[r][c] with board[c][r]. Applying it twice is a no-op."""
    return board.T.copy()


def reverse_rows(board: np.ndarray) -> np.ndarray:
    """Mirror every row end-to-end. Applying it twice is a no-op."""
    return board[:, ::-1].copy()


def _to_left(board: np.ndarray, direction: MoveDirectionModel) -> np.ndarray:
    if direction == MoveDirectionModel.RIGHT:
        return reverse_rows(board)
    if direction == MoveDirectionModel.UP:
        return transpose(board)
    if direction == MoveDirectionModel.DOWN:
        return reverse_rows(transpose(board))
    return board.copy()


def _from_left(board: np.ndarray, direction: MoveDirectionModel) -> np.ndarray:
    if direction == MoveDirectionModel.RIGHT:
        return reverse_rows(board)
    if direction == MoveDirectionModel.UP:
        return transpose(board)
    if direction == MoveDirectionModel.DOWN:
        return transpose(reverse_rows(board))
    return board


# ==============================================================================
# ==== Move engine =============================================================
# ==============================================================================


def slide_row_left(row: np.ndarray) -> tuple[np.ndarray, int]:
    """Slide one row to the left and merge equal neighbours.

    A tile merges at most once per move: ``[2, 2, 4]`` becomes ``[4, 4, 0]``,
    not ``[8, 0, 0]``.

    Args:
        row (np.ndarray): One row of the board, 0 for empty cells

    Returns:
        tuple[np.ndarray, int]: The new row and the sum of the merged tiles
    """
    tiles = [int(value) for value in row if value != 0]
    merged = []
    score = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged.append(tiles[i] * 2)
            score += tiles[i] * 2
            i += 2
        else:
            merged.append(tiles[i])
            i += 1

    new_row = np.zeros_like(row)
    new_row[: len(merged)] = merged
    return new_row, score


def slide_left(board: np.ndarray) -> tuple[np.ndarray, int]:
    """Apply slide_row_left to every row. Returns the new board and the move score."""
    new_board = np.zeros_like(board)
    score = 0
    for r in range(board.shape[0]):
        new_board[r], row_score = slide_row_left(board[r])
        score += row_score
    return new_board, score


def resolve_move(board: np.ndarray, direction: MoveDirectionModel) -> MoveOutcome:
    """Compute the board that results from moving in ``direction``.

    The input board is left untouched. No tile is spawned here.

    Args:
        board (np.ndarray): Square board
        direction (MoveDirectionModel): UP, DOWN, LEFT or RIGHT

    Returns:
        MoveOutcome: Resulting board, score gained by merges, and whether any cell changed
    """
    slid, score = slide_left(_to_left(board, direction))
    new_board = _from_left(slid, direction)
    return MoveOutcome(
        board=new_board,
        score_gained=score,
        board_changed=not np.array_equal(board, new_board),
    )


def is_move_possible(board: np.ndarray) -> bool:
    """True if there is an empty cell or two equal neighbours in a row or column."""
    if (board == 0).any():
        return True
    if (board[:, :-1] == board[:, 1:]).any():
        return True
    return bool((board[:-1, :] == board[1:, :]).any())


def has_tile(board: np.ndarray, value: int) -> bool:
    return bool((board == value).any())


# ==============================================================================
# ==== Tile spawner ============================================================
# ==============================================================================


def spawn_tile(board: np.ndarray, rng: RandomSource) -> np.ndarray:
    """Place a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell.

    The board is modified in place and returned. A full board is left as is.
    """
    empty_cells = [(int(r), int(c)) for r, c in np.argwhere(board == 0)]
    if not empty_cells:
        return board

    r, c = empty_cells[rng.randrange(len(empty_cells))]
    board[r, c] = 4 if rng.random() < FOUR_TILE_PROBABILITY else 2
    return board


def new_board(size: int, rng: RandomSource) -> np.ndarray:
    """Empty ``size`` x ``size`` board with the two starting tiles."""
    board = np.zeros((size, size), dtype=np.int64)
    spawn_tile(board, rng)
    spawn_tile(board, rng)
    return board
