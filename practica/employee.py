"""An employee record that reads from and writes to a line of text."""

from dataclasses import dataclass


@dataclass
class Employee:
    """Employee number, name and salary."""

    number: int = 0
    name: str = ""
    salary: float = 0.0

    @classmethod
    def parse(cls, text):
        """Read ``number name salary``; malformed input gives a blank employee."""
        fields = text.split()
        if len(fields) < 3:
            return cls()
        try:
            return cls(int(fields[0]), fields[1], float(fields[2]))
        except ValueError:
            return cls()

    def __str__(self):
        return f"{self.number} {self.name} {self.salary:g}"