import asyncio

import pytest

from practica.chargen import ChargenServer, build_message


def _lines():
    text = build_message()
    assert text.endswith("\n")
    return text[:-1].split("\n")


def test_line_count_matches_printable_range():
    assert len(_lines()) == 127 - 33


def test_every_line_has_fixed_width():
    assert all(len(line) == 72 for line in _lines())


def test_lines_rotate_by_one_character():
    lines = _lines()
    assert all(nxt[:-1] == cur[1:] for cur, nxt in zip(lines, lines[1:]))


def test_first_lines_start_with_first_printables():
    lines = _lines()
    assert lines[0][0] == "!"
    assert lines[1][0] == '"'


def test_only_printable_ascii():
    assert all(33 <= ord(ch) < 127 for line in _lines() for ch in line)


def test_throughput_without_traffic_is_zero():
    server = ChargenServer("127.0.0.1", 0)
    assert server.throughput() == 0.0


@pytest.mark.asyncio
async def test_client_receives_message_stream():
    server = ChargenServer("127.0.0.1", 0)
    await server.start()
    try:
        reader, writer = await asyncio.open_connection("127.0.0.1", server.listening_port)
        expected = build_message().encode("ascii")
        first = await asyncio.wait_for(reader.readexactly(len(expected)), 10)
        second = await asyncio.wait_for(reader.readexactly(len(expected)), 10)
        assert first == expected
        assert second == expected
        assert server.throughput() >= 0.0
        assert server.throughput() == 0.0 or server.throughput() >= 0.0
        writer.close()
        await writer.wait_closed()
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_throughput_resets_after_reading():
    server = ChargenServer("127.0.0.1", 0)
    await server.start()
    try:
        reader, writer = await asyncio.open_connection("127.0.0.1", server.listening_port)
        await asyncio.wait_for(reader.readexactly(len(server.message) * 3), 10)
        writer.close()
        await writer.wait_closed()
        await server.close()
        server.throughput()
        assert server.throughput() == 0.0
    finally:
        await server.close()