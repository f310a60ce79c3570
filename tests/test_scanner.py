"""Tests for the style text scanner."""

import pytest

from render_engine.css.errors import CSSParseError, ErrorKind
from render_engine.css.scanner import Scanner


class TestScanner:
    def test_consume_whitespace(self):
        scanner = Scanner("   Hello World!")
        assert scanner.consume_whitespace() == "   "
        assert scanner.pos == 3

    def test_consume_while_stops_at_eof(self):
        scanner = Scanner("Hello World")
        assert scanner.consume_while(lambda c: c != ' ') == "Hello"
        scanner.consume_char()
        assert scanner.consume_while(lambda c: c != ' ') == "World"
        assert scanner.eof()

    def test_consume_char_handles_multibyte(self):
        scanner = Scanner("aä")
        assert scanner.consume_char() == "a"
        assert scanner.consume_char() == "ä"
        assert scanner.eof()

    def test_next_char_does_not_advance(self):
        scanner = Scanner("{}")
        assert scanner.next_char() == "{"
        assert scanner.next_char() == "{"
        assert scanner.pos == 0

    def test_starts_with(self):
        scanner = Scanner("10px")
        scanner.consume_while(str.isdigit)
        assert scanner.starts_with("px")
        assert not scanner.starts_with("%")

    def test_next_char_at_eof(self):
        scanner = Scanner("")
        with pytest.raises(CSSParseError) as excinfo:
            scanner.next_char()
        assert excinfo.value.kind is ErrorKind.UNEXPECTED_EOF
        assert excinfo.value.position == 0

    def test_expect(self):
        scanner = Scanner("{x")
        assert scanner.expect("{") == "{"
        with pytest.raises(CSSParseError) as excinfo:
            scanner.expect("}")
        assert excinfo.value.kind is ErrorKind.UNEXPECTED_CHARACTER
        assert excinfo.value.position == 1
