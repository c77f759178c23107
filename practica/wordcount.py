"""Count words read from input, skipping a set of common words."""

import argparse
import sys
from collections import Counter
from itertools import takewhile

DEFAULT_EXCLUDE = frozenset({"the", "but", "and", "or"})
END_MARK = "-1"


def count_words(words, exclude=DEFAULT_EXCLUDE):
    """Count words up to the end mark, ignoring excluded ones; keys come sorted."""
    counts = Counter(
        word for word in takewhile(lambda w: w != END_MARK, words) if word not in exclude
    )
    return dict(sorted(counts.items()))


def format_counts(counts):
    """Render each count as a line such as ``word occurs 2 times``."""
    return [
        f"{word} occurs {count} {'times' if count > 1 else 'time'}"
        for word, count in sorted(counts.items())
    ]


def word_lengths(words):
    """Pair each word with its length."""
    return [(word, len(word)) for word in words]


def main(argv=None):
    """Read whitespace-separated words from standard input and print their counts."""
    parser = argparse.ArgumentParser(description="Count words read from standard input.")
    parser.parse_args(argv)
    words = (word for line in sys.stdin for word in line.split())
    for line in format_counts(count_words(words)):
        print(line)
    return 0