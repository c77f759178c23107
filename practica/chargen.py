"""A character generator service that streams a fixed pattern without end."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import os
import socket
import time
from datetime import datetime

log = logging.getLogger(__name__)

FIRST_CHAR = 33
END_CHAR = 127
LINE_WIDTH = 72
REPORT_INTERVAL = 3.0


def build_message():
    """The rotating block of printable-character lines sent to each client."""
    line = "".join(chr(code) for code in range(FIRST_CHAR, END_CHAR)) * 2
    return "".join(
        line[start : start + LINE_WIDTH] + "\n" for start in range(END_CHAR - FIRST_CHAR)
    )


class ChargenServer:
    """Sends the message again each time the previous copy is written out."""

    def __init__(self, host="0.0.0.0", port=2019, print_throughput=False):
        self.host = host
        self.port = port
        self.print_throughput = print_throughput
        self.message = build_message().encode("ascii")
        self._transferred = 0
        self._start_time = time.monotonic()
        self._server: asyncio.AbstractServer | None = None
        self._tasks: set[asyncio.Task] = set()
        self._reporter: asyncio.Task | None = None

    async def start(self):
        """Begin listening and, if asked, reporting throughput."""
        self._server = await asyncio.start_server(self._handle, self.host, self.port)
        if self.print_throughput:
            self._reporter = asyncio.create_task(self._report())

    @property
    def listening_port(self):
        """The port actually bound, once started."""
        if self._server is None:
            raise RuntimeError("server not started")
        return self._server.sockets[0].getsockname()[1]

    def throughput(self):
        """MiB per second sent since the last call, then start a new interval."""
        end = time.monotonic()
        elapsed = end - self._start_time
        rate = self._transferred / elapsed / 1024 / 1024 if elapsed > 0 else 0.0
        self._transferred = 0
        self._start_time = end
        return rate

    async def serve_forever(self):
        if self._server is None:
            await self.start()
        await self._server.serve_forever()

    async def close(self):
        """Stop listening, reporting and sending."""
        if self._reporter is not None:
            self._reporter.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._reporter
            self._reporter = None
        if self._server is None:
            return
        self._server.close()
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        await self._server.wait_closed()
        self._server = None

    async def _report(self):
        while True:
            await asyncio.sleep(REPORT_INTERVAL)
            print(f"{self.throughput():4.3f} MiB/s")

    async def _send(self, writer):
        with contextlib.suppress(ConnectionError):
            while True:
                writer.write(self.message)
                await writer.drain()
                self._transferred += len(self.message)

    async def _handle(self, reader, writer):
        task = asyncio.current_task()
        self._tasks.add(task)
        peer = writer.get_extra_info("peername")
        local = writer.get_extra_info("sockname")
        log.info("ChargenServer - %s -> %s is UP", peer, local)
        sock = writer.get_extra_info("socket")
        if sock is not None:
            with contextlib.suppress(OSError):
                sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        sender = asyncio.create_task(self._send(writer))
        try:
            while True:
                data = await reader.read(65536)
                if not data:
                    break
                log.info(
                    "%s discards %d bytes received at %s",
                    peer,
                    len(data),
                    datetime.now().isoformat(),
                )
        except ConnectionError:
            pass
        finally:
            sender.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sender
            writer.close()
            with contextlib.suppress(ConnectionError, asyncio.CancelledError):
                await writer.wait_closed()
            log.info("ChargenServer - %s -> %s is DOWN", peer, local)
            self._tasks.discard(task)


async def _serve(server):
    try:
        await server.serve_forever()
    finally:
        await server.close()


def main(argv=None):
    """Run the character generator until interrupted."""
    parser = argparse.ArgumentParser(description="Stream characters over TCP.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=2019)
    parser.add_argument("--quiet", action="store_true", help="do not report throughput")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    log.info("pid = %d", os.getpid())
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_serve(ChargenServer(args.host, args.port, not args.quiet)))
    return 0