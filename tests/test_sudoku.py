import pytest

from practica.sudoku import NO_SOLUTION, SudokuSolver, solve_sudoku

PUZZLE = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"
SOLUTION = "693784512487512936125963874932651487568247391741398625319475268856129743274836159"


def _is_valid_grid(grid):
    groups = []
    for i in range(9):
        groups.append([grid[i * 9 + j] for j in range(9)])
        groups.append([grid[j * 9 + i] for j in range(9)])
        r, c = i // 3 * 3, i % 3 * 3
        groups.append([grid[(r + dr) * 9 + c + dc] for dr in range(3) for dc in range(3)])
    return all(sorted(group) == list(range(1, 10)) for group in groups)


def test_known_puzzle():
    assert solve_sudoku(PUZZLE) == SOLUTION


def test_solution_keeps_givens_and_is_valid():
    result = solve_sudoku(PUZZLE)
    assert all(p == "0" or p == s for p, s in zip(PUZZLE, result))
    assert _is_valid_grid([int(ch) for ch in result])


def test_solved_puzzle_is_returned_unchanged():
    assert solve_sudoku(SOLUTION) == SOLUTION


def test_empty_board_solved_by_solver():
    solver = SudokuSolver([0] * 81)
    assert solver.solve() is True
    assert _is_valid_grid(solver.board)


def test_unsolvable_puzzle():
    puzzle = "012345678" + "9" + "0" * 71
    assert solve_sudoku(puzzle) == NO_SOLUTION


def test_solver_reports_failure():
    solver = SudokuSolver([int(ch) for ch in "012345678" + "9" + "0" * 71])
    assert solver.solve() is False
    assert solver.board[0] == 0


def test_non_digit_gives_no_solution():
    assert solve_sudoku("x" + PUZZLE[1:]) == NO_SOLUTION


@pytest.mark.parametrize("puzzle", ["", "123", PUZZLE + "0"])
def test_wrong_length_raises(puzzle):
    with pytest.raises(ValueError):
        solve_sudoku(puzzle)


def test_solver_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        SudokuSolver([10] + [0] * 80)