"""A TCP service that sends back whatever it receives."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import os
from datetime import datetime

log = logging.getLogger(__name__)


class EchoServer:
    """Echoes every received chunk back to its sender."""

    def __init__(self, host="0.0.0.0", port=2007):
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
        local = writer.get_extra_info("sockname")
        log.info("EchoServer - %s -> %s is UP", peer, local)
        try:
            while True:
                data = await reader.read(65536)
                if not data:
                    break
                log.info(
                    "%s echo %d bytes, data received at %s",
                    peer,
                    len(data),
                    datetime.now().isoformat(),
                )
                writer.write(data)
                await writer.drain()
        except ConnectionError:
            pass
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError, asyncio.CancelledError):
                await writer.wait_closed()
            log.info("EchoServer - %s -> %s is DOWN", peer, local)
            self._tasks.discard(task)


async def _serve(server):
    try:
        await server.serve_forever()
    finally:
        await server.close()


def main(argv=None):
    """Run the echo service until interrupted."""
    parser = argparse.ArgumentParser(description="Echo received bytes over TCP.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=2007)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    log.info("pid = %d", os.getpid())
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_serve(EchoServer(args.host, args.port)))
    return 0