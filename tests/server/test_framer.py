"""Tests for MessageFramer."""

from __future__ import annotations

import pytest

from mcp_gitlab.server.framer import MessageFramer

STREAM = (
    '{"id":1,"method":"initialize"}\n'
    "\n"
    '{"id":2,"method":"tools/list"}\r\n'
    "   \n"
    '{"id":3,"method":"ping","params":{"note":"café ☃"}}\n'
    '{"id":4,'
)


def _feed_all(framer: MessageFramer, chunks: list[str]) -> list[str]:
    lines: list[str] = []
    for chunk in chunks:
        lines.extend(framer.feed(chunk))
    return lines


class TestFeed:
    def test_single_line(self) -> None:
        framer = MessageFramer()
        assert list(framer.feed('{"id":1}\n')) == ['{"id":1}']
        assert framer.pending == ""

    def test_partial_line_is_buffered(self) -> None:
        framer = MessageFramer()
        assert list(framer.feed('{"id":')) == []
        assert framer.pending == '{"id":'
        assert list(framer.feed("1}\n")) == ['{"id":1}']
        assert framer.pending == ""

    def test_multiple_lines_in_one_chunk(self) -> None:
        framer = MessageFramer()
        assert list(framer.feed("a\nb\nc")) == ["a", "b"]
        assert framer.pending == "c"

    def test_blank_lines_dropped(self) -> None:
        framer = MessageFramer()
        assert list(framer.feed("\n  \n\t\nx\n\n")) == ["x"]

    def test_crlf_terminator(self) -> None:
        framer = MessageFramer()
        assert list(framer.feed("a\r")) == []
        assert list(framer.feed("\nb\r\n")) == ["a", "b"]

    def test_chunk_buffered_even_if_not_iterated(self) -> None:
        framer = MessageFramer()
        framer.feed("abc")
        assert list(framer.feed("\n")) == ["abc"]

    def test_processed_lines_not_retained(self) -> None:
        framer = MessageFramer()
        lines = framer.feed("first\nsecond\nthi")
        assert next(lines) == "first"
        assert framer.pending == "second\nthi"
        assert list(lines) == ["second"]
        assert framer.pending == "thi"


class TestChunkBoundaryIndependence:
    @pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 16, 64])
    def test_fixed_size_chunks(self, size: int) -> None:
        expected = _feed_all(MessageFramer(), [STREAM])
        chunks = [STREAM[i : i + size] for i in range(0, len(STREAM), size)]
        assert _feed_all(MessageFramer(), chunks) == expected

    def test_every_two_way_split(self) -> None:
        expected = _feed_all(MessageFramer(), [STREAM])
        for cut in range(len(STREAM) + 1):
            framer = MessageFramer()
            assert _feed_all(framer, [STREAM[:cut], STREAM[cut:]]) == expected
            assert framer.pending == '{"id":4,'

    def test_expected_lines(self) -> None:
        lines = _feed_all(MessageFramer(), [STREAM])
        assert len(lines) == 3
        assert lines[1] == '{"id":2,"method":"tools/list"}'


class TestFlush:
    def test_flush_returns_tail(self) -> None:
        framer = MessageFramer()
        list(framer.feed('x\n{"id":9}'))
        assert framer.flush() == '{"id":9}'
        assert framer.pending == ""

    def test_flush_blank_tail(self) -> None:
        framer = MessageFramer()
        list(framer.feed("x\n   "))
        assert framer.flush() is None

    def test_flush_empty(self) -> None:
        assert MessageFramer().flush() is None
