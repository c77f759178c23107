from dataclasses import dataclass, field

import pytest

from practica.sorting import insertion_sort, merge_sort

INTS = [12, 0, 11, 3, 6, 2, 1, 5]
DOUBLES = [3.14, 1.68, 0.0, 1.12, 1.44, 2.25, 10.10, 6.28]


@dataclass
class Keyed:
    key: int
    tag: str = field(compare=False)

    def __lt__(self, other):
        return self.key < other.key


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort])
@pytest.mark.parametrize("data", [INTS, DOUBLES, [], [4], [2, 2, 1, 1]])
def test_sorts_like_builtin(sort, data):
    assert sort(data) == sorted(data)


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort])
def test_input_left_unchanged(sort):
    data = list(INTS)
    sort(data)
    assert data == INTS


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort])
def test_sort_is_stable(sort):
    data = [Keyed(2, "a"), Keyed(1, "b"), Keyed(2, "c"), Keyed(1, "d"), Keyed(2, "e")]
    tags = [item.tag for item in sort(data)]
    assert tags == [item.tag for item in sorted(data, key=lambda k: k.key)]