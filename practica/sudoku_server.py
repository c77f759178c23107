"""A TCP service answering ``[id:]puzzle`` lines with solved sudokus."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import os
from typing import NamedTuple

from practica.sudoku import CELLS, solve_sudoku

log = logging.getLogger(__name__)

CRLF = b"\r\n"
MAX_PENDING = 100
BAD_REQUEST = b"Bad Request!\r\n"
ID_TOO_LONG = b"Id too long!\r\n"


class BadRequest(ValueError):
    """A request whose puzzle does not have the right length."""


class DataOutcome(NamedTuple):
    """What came of a buffer of received bytes."""

    replies: list[bytes]
    rest: bytes
    close: bool


def process_request(request):
    """Answer one request line (without CRLF), reply ending in CRLF."""
    id_, colon, puzzle = request.partition(":")
    if not colon:
        id_, puzzle = "", request
    if len(puzzle) != CELLS:
        raise BadRequest(f"puzzle must have {CELLS} characters")
    result = solve_sudoku(puzzle)
    return f"{id_}:{result}\r\n" if id_ else f"{result}\r\n"


def handle_data(buffer):
    """Consume complete requests from ``buffer``, as received so far."""
    replies = []
    close = False
    while len(buffer) >= CELLS + 2:
        end = buffer.find(CRLF)
        if end >= 0:
            request = buffer[:end].decode("latin-1")
            buffer = buffer[end + 2 :]
            try:
                replies.append(process_request(request).encode("latin-1"))
            except BadRequest:
                replies.append(BAD_REQUEST)
                close = True
                break
        elif len(buffer) > MAX_PENDING:
            replies.append(ID_TOO_LONG)
            close = True
            break
        else:
            break
    return DataOutcome(replies, buffer, close)


class SudokuServer:
    """Listens for connections and solves the puzzles they send."""

    def __init__(self, host="0.0.0.0", port=9981):
        self.host = host
        self.port = port
        self._server: asyncio.AbstractServer | None = None
        self._tasks: set[asyncio.Task] = set()

    async def start(self):
        """Begin listening."""
        self._server = await asyncio.start_server(self._handle, self.host, self.port)

    @property
    def listening_port(self):
        """The port actually bound, once started."""
        if self._server is None:
            raise RuntimeError("server not started")
        return self._server.sockets[0].getsockname()[1]

    async def serve_forever(self):
        if self._server is None:
            await self.start()
        await self._server.serve_forever()

    async def close(self):
        """Stop listening and drop open connections."""
        if self._server is None:
            return
        self._server.close()
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        await self._server.wait_closed()
        self._server = None

    async def _handle(self, reader, writer):
        task = asyncio.current_task()
        self._tasks.add(task)
        peer = writer.get_extra_info("peername")
        log.debug("%s is UP", peer)
        buffer = b""
        try:
            while True:
                chunk = await reader.read(65536)
                if not chunk:
                    break
                buffer += chunk
                outcome = handle_data(buffer)
                buffer = outcome.rest
                for reply in outcome.replies:
                    writer.write(reply)
                await writer.drain()
                if outcome.close:
                    break
        except ConnectionError:
            pass
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError, asyncio.CancelledError):
                await writer.wait_closed()
            log.debug("%s is DOWN", peer)
            self._tasks.discard(task)


async def _serve(server):
    try:
        await server.serve_forever()
    finally:
        await server.close()


def main(argv=None):
    """Run the sudoku service until interrupted."""
    parser = argparse.ArgumentParser(description="Solve sudoku puzzles over TCP.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=9981)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    log.info("pid = %d", os.getpid())
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_serve(SudokuServer(args.host, args.port)))
    return 0