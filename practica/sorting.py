"""Insertion sort and stable merge sort."""


def insertion_sort(items):
    """Return a sorted copy of ``items`` using insertion sort."""
    result = list(items)
    for j in range(1, len(result)):
        key = result[j]
        i = j - 1
        while i >= 0 and key < result[i]:
            result[i + 1] = result[i]
            i -= 1
        result[i + 1] = key
    return result


def merge_sort(items):
    """Return a stably sorted copy of ``items`` using merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = len(result) // 2
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged