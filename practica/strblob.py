"""A list of strings with checked access to its ends."""


class StrBlob:
    """A sequence of strings whose end accessors raise on an empty blob."""

    def __init__(self, items=()):
        self._data = list(items)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def append(self, item):
        """Add a string at the end."""
        self._data.append(item)

    def pop(self):
        """Remove and return the last string."""
        self._check("pop on empty StrBlob")
        return self._data.pop()

    def front(self):
        """Return the first string."""
        self._check("front on empty StrBlob")
        return self._data[0]

    def back(self):
        """Return the last string."""
        self._check("back on empty StrBlob")
        return self._data[-1]

    def _check(self, message):
        if not self._data:
            raise IndexError(message)