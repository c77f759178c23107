"""Index the lines of a text by word and report where a word occurs."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class QueryResult:
    """The answer to a query: the word, its line numbers and the text."""

    sought: str
    lines: tuple[int, ...]
    file: tuple[str, ...]


class TextQuery:
    """An index from each word to the zero-based lines it appears on."""

    def __init__(self, lines):
        self._file = tuple(line.rstrip("\n") for line in lines)
        index: defaultdict[str, set[int]] = defaultdict(set)
        for number, text in enumerate(self._file):
            for word in text.split():
                index[word].add(number)
        self._index = {word: tuple(sorted(found)) for word, found in index.items()}

    def query(self, sought):
        """Return the lines on which ``sought`` appears."""
        return QueryResult(sought, self._index.get(sought, ()), self._file)


def format_result(result):
    """Render a result as a header line followed by each matching line."""
    count = len(result.lines)
    header = f"{result.sought} occurs {count} {'time' if count == 1 else 'times'}"
    body = [f"\t(line {number + 1}) {result.file[number]}" for number in result.lines]
    return "\n".join([header, *body]) + "\n"


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Answer word queries from standard input until ``q`` or end of input."""
    parser = argparse.ArgumentParser(description="Look up words in a text file.")
    parser.add_argument("file", nargs="?", default="test.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8") as handle:
            tq = TextQuery(handle)
    except OSError:
        tq = TextQuery([])
    words = _tokens(sys.stdin)
    while True:
        print("enter word lookfor")
        sought = next(words, None)
        if sought is None or sought == "q":
            break
        print(format_result(tq.query(sought)), end="")
        print()
    return 0