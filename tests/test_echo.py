import asyncio

import pytest

from practica.echo import EchoServer


@pytest.mark.asyncio
async def test_echo_round_trip():
    server = EchoServer("127.0.0.1", 0)
    await server.start()
    try:
        reader, writer = await asyncio.open_connection("127.0.0.1", server.listening_port)
        payload = b"hello world\n"
        writer.write(payload)
        await writer.drain()
        assert await asyncio.wait_for(reader.readexactly(len(payload)), 10) == payload
        writer.close()
        await writer.wait_closed()
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_echo_several_messages_in_order():
    server = EchoServer("127.0.0.1", 0)
    await server.start()
    try:
        reader, writer = await asyncio.open_connection("127.0.0.1", server.listening_port)
        messages = [b"one", b"two", b"three"]
        received = b""
        for message in messages:
            writer.write(message)
            await writer.drain()
            received += await asyncio.wait_for(reader.readexactly(len(message)), 10)
        assert received == b"".join(messages)
        writer.close()
        await writer.wait_closed()
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_eof_closes_connection():
    server = EchoServer("127.0.0.1", 0)
    await server.start()
    try:
        reader, writer = await asyncio.open_connection("127.0.0.1", server.listening_port)
        writer.write(b"bye")
        writer.write_eof()
        assert await asyncio.wait_for(reader.read(), 10) == b"bye"
        writer.close()
        await writer.wait_closed()
    finally:
        await server.close()


def test_port_before_start_raises():
    with pytest.raises(RuntimeError):
        EchoServer("127.0.0.1", 0).listening_port