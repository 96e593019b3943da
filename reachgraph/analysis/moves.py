"""
Single-step move enumeration on character grids.

Boards may be given as a sequence of strings, a sequence of character
sequences, or a 2-D numpy array of single characters (str dtype, or bytes
dtype which is decoded as ASCII). The board is assumed rectangular and the
current position in bounds.
"""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from ..config import BLOCKED_CELL

logger = logging.getLogger(__name__)

Board = Union[np.ndarray, Sequence[str], Sequence[Sequence[str]]]


def _cell_text(cell) -> str:
    if isinstance(cell, bytes):
        return cell.decode("ascii")
    return cell


def _as_grid(board: Board) -> np.ndarray:
    if isinstance(board, np.ndarray):
        if board.dtype.kind == "S":
            return np.char.decode(board, "ascii")
        return board
    return np.array([list(row) for row in board], dtype=str)


def passable_mask(board: Board, blocked: str = BLOCKED_CELL) -> np.ndarray:
    """
    Boolean grid that is True wherever a cell can be moved onto.

    Args:
        board: Rectangular grid of single characters
        blocked: Character marking an impassable cell

    Returns:
        2-D boolean array with the board's shape
    """
    return _as_grid(board) != blocked


def next_moves(board: Board, current: Sequence[int], directions: Iterable[Sequence[int]],
               blocked: str = BLOCKED_CELL) -> List[Tuple[int, int]]:
    """
    Positions reachable from ``current`` with one step in any of ``directions``.

    A step is kept when it stays on the board and does not land on a blocked
    cell.

    Example:
        board:
            [' ', ' ', 'X'],
            ['X', ' ', ' '],
            [' ', ' ', ' ']
        current: (1, 2)
        directions: (0, 1) right, (-1, 0) up, (1, 0) down, (1, -1) down/left

        Right leaves the board and up lands on an X, so the result is
        [(2, 2), (2, 1)].

    Args:
        board: Rectangular grid where ``blocked`` marks impassable cells
        current: (row, column) starting position
        directions: (row, column) offsets, assumed distinct
        blocked: Character marking an impassable cell

    Returns:
        List of (row, column) positions in no particular order
    """
    row, column = current
    row_count = len(board)

    moves: List[Tuple[int, int]] = []
    for d_row, d_column in directions:
        new_row = row + d_row
        new_column = column + d_column

        if not 0 <= new_row < row_count:
            continue
        cells = board[new_row]
        if 0 <= new_column < len(cells) and _cell_text(cells[new_column]) != blocked:
            moves.append((int(new_row), int(new_column)))

    logger.debug(f"{len(moves)} moves available from ({row}, {column})")
    return moves
