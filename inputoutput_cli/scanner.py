from __future__ import annotations

import re
from typing import TextIO

from .cli_shared import InputExhaustedError, ParseError, ScannerClosedError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_BOOL_VALUES = {"true": True, "false": False}


class Scanner:
    """Blocking line/token reader over a single text stream.

    Lines are pulled from the stream only when the buffered remainder of the
    current line cannot satisfy a read, so prompts written between reads
    interleave with input the way an interactive user sees them.
    """

    def __init__(self, source: TextIO) -> None:
        self._source = source
        self._pending = ""
        self._closed = False

    def __enter__(self) -> Scanner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending = ""
        self._source.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ScannerClosedError("scanner is closed")

    def _fill(self) -> bool:
        line = self._source.readline()
        if not line:
            return False
        self._pending += line
        return True

    def next_line(self) -> str:
        self._ensure_open()
        if not self._pending and not self._fill():
            raise InputExhaustedError(expected="a line")
        line, sep, rest = self._pending.partition("\n")
        self._pending = rest
        if sep and line.endswith("\r"):
            line = line[:-1]
        return line

    def _peek_token(self, expected: str) -> tuple[str, int]:
        self._ensure_open()
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                token = stripped.split(None, 1)[0]
                # A token running to the end of the buffer may continue in the
                # stream when the last line had no terminator.
                if len(token) == len(stripped) and self._fill():
                    continue
                return token, len(token)
            self._pending = ""
            if not self._fill():
                raise InputExhaustedError(expected=expected)

    def _consume(self, length: int) -> None:
        self._pending = self._pending[length:]

    def next_token(self) -> str:
        token, length = self._peek_token("a token")
        self._consume(length)
        return token

    def next_int(self) -> int:
        token, length = self._peek_token("an integer")
        if not _INT_RE.fullmatch(token):
            raise ParseError(expected="an integer", token=token)
        try:
            value = int(token)
        except ValueError as e:
            # Beyond the interpreter's int string conversion limit.
            raise ParseError(expected="an integer", token=token) from e
        self._consume(length)
        return value

    def next_float(self) -> float:
        token, length = self._peek_token("a floating-point number")
        try:
            if "_" in token:
                raise ValueError(token)
            value = float(token)
        except ValueError as e:
            raise ParseError(expected="a floating-point number", token=token) from e
        self._consume(length)
        return value

    def next_bool(self) -> bool:
        token, length = self._peek_token("true or false")
        value = _BOOL_VALUES.get(token.lower())
        if value is None:
            raise ParseError(expected="true or false", token=token)
        self._consume(length)
        return value
