"""Connections that are closed automatically when a session ends."""

from __future__ import annotations

import argparse
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass(frozen=True)
class Destination:
    """Where a connection goes."""

    info: str = "unknown"


@dataclass
class Connection:
    """An open connection and its sequence number."""

    info: str
    number: int
    open: bool = True


def disconnect(connection):
    """Close a connection and return a report of it."""
    connection.open = False
    return "\n".join(
        [
            f"connection info: {connection.info}",
            f"connection no: {connection.number}",
            "disconnect!",
        ]
    )


class Connector:
    """Opens connections, numbering them from 1."""

    def __init__(self):
        self._count = 0

    def connect(self, destination):
        """Open a new connection to ``destination``."""
        self._count += 1
        return Connection(destination.info, self._count)

    @contextmanager
    def session(self, destination):
        """Yield a connection that is disconnected, and reported, on exit."""
        connection = self.connect(destination)
        try:
            yield connection
        finally:
            print(disconnect(connection))


def main(argv=None):
    """Open and close one connection."""
    parser = argparse.ArgumentParser(description="Open and close a connection.")
    parser.add_argument("destination", nargs="?", default="http connection")
    args = parser.parse_args(argv)
    connector = Connector()
    with connector.session(Destination(args.destination)):
        print("leave f")
    print("leave main")
    return 0