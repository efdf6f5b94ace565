"""
board grid, cell/player values and win detection
"""
from enum import Enum

BOARD_SIZE = 3  # fixed 3x3 grid

# rows, cols, then both diagonals; order decides which line gets reported
WIN_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Cell(Enum):
    EMPTY = ''
    X = 'X'
    O = 'O'


class Player(Enum):
    """
    the two sides, X always opens a round
    """
    X = 'X'
    O = 'O'

    @property
    def other(self):
        return Player.O if self is Player.X else Player.X

    @property
    def cell(self):
        return Cell(self.value)


def in_range(row, col):
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """
    3x3 grid of cells, written only by the game logic
    """
    def __init__(self):
        self.grid = [[Cell.EMPTY for _ in range(BOARD_SIZE)]
                     for _ in range(BOARD_SIZE)]

    def cell(self, row, col):
        return self.grid[row][col]

    def is_empty(self, row, col):
        return self.grid[row][col] is Cell.EMPTY

    def place(self, row, col, player):
        self.grid[row][col] = player.cell

    def clear(self, row, col):
        self.grid[row][col] = Cell.EMPTY

    def is_full(self):
        # every cell taken
        return all(c is not Cell.EMPTY for line in self.grid for c in line)

    def snapshot(self):
        """
        immutable copy for renderers
        """
        return tuple(tuple(line) for line in self.grid)


def find_winning_line(board):
    """
    scan the 8 lines in order, first complete one wins
    returns: (player, line) or (None, None)
    """
    for line in WIN_LINES:
        a, b, c = (board.cell(r, col) for r, col in line)
        if a is not Cell.EMPTY and a is b is c:
            return Player(a.value), line
    return None, None
