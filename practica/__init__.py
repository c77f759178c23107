"""Small self-contained exercises: containers, text queries, sorting, trees, a sudoku solver, asyncio TCP servers and LTE signal helpers."""

__version__ = "0.1.0"