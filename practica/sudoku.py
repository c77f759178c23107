"""Sudoku solving by exact cover with dancing links."""

from __future__ import annotations

CELLS = 81
NO_SOLUTION = "NoSolution"

_ROW_BASE = 100
_COL_BASE = 200
_BOX_BASE = 300


class _Node:
    """A node of the toroidal linked matrix; column headers are nodes too."""

    __slots__ = ("left", "right", "up", "down", "col", "name", "size")

    def __init__(self, name=0):
        self.left = self
        self.right = self
        self.up = self
        self.down = self
        self.col = self
        self.name = name
        self.size = 0


def _walk(start, direction):
    node = getattr(start, direction)
    while node is not start:
        yield node
        node = getattr(node, direction)


def _row_col(row, val):
    return _ROW_BASE + row * 10 + val


def _col_col(col, val):
    return _COL_BASE + col * 10 + val


def _box_col(box, val):
    return _BOX_BASE + box * 10 + val


def _put_left(old, new):
    new.left = old.left
    new.right = old
    old.left.right = new
    old.left = new


def _put_up(old, new):
    new.up = old.up
    new.down = old
    old.up.down = new
    old.up = new
    old.size += 1
    new.col = old


def _cover(column):
    column.right.left = column.left
    column.left.right = column.right
    for row in _walk(column, "down"):
        for node in _walk(row, "right"):
            node.down.up = node.up
            node.up.down = node.down
            node.col.size -= 1


def _uncover(column):
    for row in _walk(column, "up"):
        for node in _walk(row, "left"):
            node.col.size += 1
            node.down.up = node
            node.up.down = node
    column.right.left = column
    column.left.right = column


class SudokuSolver:
    """Solves a board of 81 digits, 0 marking an empty cell.

    After a successful :meth:`solve` the solution is in :attr:`board`.
    """

    def __init__(self, board):
        self.board = list(board)
        if len(self.board) != CELLS:
            raise ValueError(f"a board has {CELLS} cells, got {len(self.board)}")
        if any(not 0 <= value <= 9 for value in self.board):
            raise ValueError("cell values must be between 0 and 9")

        self._root = _Node()
        self._columns: dict[int, _Node] = {}
        self._stack: list[_Node] = []

        rows = [[False] * 10 for _ in range(9)]
        cols = [[False] * 10 for _ in range(9)]
        boxes = [[False] * 10 for _ in range(9)]
        for index, value in enumerate(self.board):
            row, col = divmod(index, 9)
            box = row // 3 * 3 + col // 3
            rows[row][value] = True
            cols[col][value] = True
            boxes[box][value] = True

        for index, value in enumerate(self.board):
            if value == 0:
                self._append_column(index)

        for i in range(9):
            for v in range(1, 10):
                if not rows[i][v]:
                    self._append_column(_row_col(i, v))
                if not cols[i][v]:
                    self._append_column(_col_col(i, v))
                if not boxes[i][v]:
                    self._append_column(_box_col(i, v))

        for index, value in enumerate(self.board):
            if value != 0:
                continue
            row, col = divmod(index, 9)
            box = row // 3 * 3 + col // 3
            for v in range(1, 10):
                if rows[row][v] or cols[col][v] or boxes[box][v]:
                    continue
                cell_node = self._new_row(index)
                for name in (_row_col(row, v), _col_col(col, v), _box_col(box, v)):
                    _put_left(cell_node, self._new_row(name))

    def _append_column(self, name):
        column = _Node(name)
        _put_left(self._root, column)
        self._columns[name] = column

    def _new_row(self, name):
        node = _Node(name)
        _put_up(self._columns[name], node)
        return node

    def _min_column(self):
        best = self._root.right
        min_size = best.size
        if min_size > 1:
            for column in _walk(best, "right"):
                if column is self._root:
                    break
                if column.size < min_size:
                    best = column
                    min_size = column.size
                    if min_size <= 1:
                        break
        return best

    def _record_solution(self):
        for start in self._stack:
            cell = val = -1
            node = start
            while cell == -1 or val == -1:
                if node.name < _ROW_BASE:
                    cell = node.name
                else:
                    val = node.name % 10
                node = node.right
            self.board[cell] = val

    def solve(self):
        """Search for a solution; return True and fill :attr:`board` if found."""
        if self._root.left is self._root:
            self._record_solution()
            return True

        column = self._min_column()
        _cover(column)
        for row in _walk(column, "down"):
            self._stack.append(row)
            for node in _walk(row, "right"):
                _cover(node.col)
            if self.solve():
                return True
            self._stack.pop()
            for node in _walk(row, "left"):
                _uncover(node.col)
        _uncover(column)
        return False


def solve_sudoku(puzzle):
    """Solve an 81-character puzzle string, returning the solution or ``NoSolution``."""
    if len(puzzle) != CELLS:
        raise ValueError(f"a puzzle has {CELLS} characters, got {len(puzzle)}")
    if any(ch not in "0123456789" for ch in puzzle):
        return NO_SOLUTION
    solver = SudokuSolver(int(ch) for ch in puzzle)
    if not solver.solve():
        return NO_SOLUTION
    return "".join(str(value) for value in solver.board)