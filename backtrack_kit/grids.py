"""Grid and graph search problems: queens, mazes, sudoku, word search, colouring."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import product

__all__ = [
    "solve_n_queens",
    "find_maze_paths",
    "solve_sudoku",
    "word_exists",
    "graph_coloring",
]

_EMPTY = "."
_DIGITS = "123456789"

# Moves tried in this order: down, right, up, left.
_MAZE_MOVES = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens on an n by n board.

    Each board is a list of rows drawn with 'Q' for a queen and '.' for an
    empty square. Queens are placed row by row, trying columns left to right.
    """
    if n < 0:
        raise ValueError("n must not be negative")

    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placed: list[int] = []

    def draw() -> list[str]:
        return ["." * col + "Q" + "." * (n - col - 1) for col in placed]

    def search(row: int) -> Iterator[list[str]]:
        if row == n:
            yield draw()
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placed.append(col)
            yield from search(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    return list(search(0))


def find_maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path through a square maze from top-left to bottom-right.

    Cells holding 0 are walls. A path never visits a cell twice and is spelled
    with the letters D, R, U and L; paths are listed in the order those moves
    are tried.
    """
    size = len(maze)
    if any(len(row) != size for row in maze):
        raise ValueError("maze must be square")

    visited: set[tuple[int, int]] = set()

    def search(row: int, col: int, path: str) -> Iterator[str]:
        if not (0 <= row < size and 0 <= col < size):
            return
        if maze[row][col] == 0 or (row, col) in visited:
            return
        if row == size - 1 and col == size - 1:
            yield path
            return
        visited.add((row, col))
        for letter, d_row, d_col in _MAZE_MOVES:
            yield from search(row + d_row, col + d_col, path + letter)
        visited.discard((row, col))

    return list(search(0, 0, ""))


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9 by 9 sudoku board.

    Empty cells are written '.'. Cells are filled in reading order with the
    smallest digit that fits. Raises ValueError when the board is malformed or
    its empty cells cannot all be filled.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9 by 9")
    for cell in (cell for row in grid for cell in row):
        if cell != _EMPTY and cell not in _DIGITS:
            raise ValueError(f"invalid cell value: {cell!r}")

    def fits(row: int, col: int, digit: str) -> bool:
        box_row, box_col = 3 * (row // 3), 3 * (col // 3)
        for i in range(9):
            if grid[i][col] == digit or grid[row][i] == digit:
                return False
            if grid[box_row + i // 3][box_col + i % 3] == digit:
                return False
        return True

    def fill() -> bool:
        for row, col in product(range(9), repeat=2):
            if grid[row][col] != _EMPTY:
                continue
            for digit in _DIGITS:
                if fits(row, col, digit):
                    grid[row][col] = digit
                    if fill():
                        return True
                    grid[row][col] = _EMPTY
            return False
        return True

    if not fill():
        raise ValueError("sudoku has no solution")
    return grid


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether word can be traced through horizontally or vertically
    adjacent cells of board, using no cell twice."""
    if not word or not board:
        return False
    rows = len(board)
    visited: set[tuple[int, int]] = set()

    def search(row: int, col: int, position: int) -> bool:
        if position == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < len(board[row])):
            return False
        if (row, col) in visited or board[row][col] != word[position]:
            return False
        visited.add((row, col))
        found = any(
            search(row + d_row, col + d_col, position + 1)
            for d_row, d_col in ((0, 1), (0, -1), (1, 0), (-1, 0))
        )
        visited.discard((row, col))
        return found

    return any(
        search(row, col, 0)
        for row in range(rows)
        for col in range(len(board[row]))
        if board[row][col] == word[0]
    )


def graph_coloring(vertex_count: int, edges: Iterable[tuple[int, int]], colors: int) -> bool:
    """Tell whether the graph's vertices can be given at most `colors` colours
    so that no edge joins two vertices of the same colour."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    neighbours: list[list[int]] = [[] for _ in range(vertex_count)]
    for first, second in edges:
        if not (0 <= first < vertex_count and 0 <= second < vertex_count):
            raise ValueError(f"edge ({first}, {second}) names a missing vertex")
        neighbours[first].append(second)
        neighbours[second].append(first)

    assigned = [0] * vertex_count

    def colour_from(vertex: int) -> bool:
        if vertex == vertex_count:
            return True
        for colour in range(1, colors + 1):
            if any(assigned[other] == colour for other in neighbours[vertex]):
                continue
            assigned[vertex] = colour
            if colour_from(vertex + 1):
                return True
            assigned[vertex] = 0
        return False

    return colour_from(0)