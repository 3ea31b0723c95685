# scanner/sources.py

import io
import os
from typing import TextIO

from scanner.errors import StreamExhausted

DEFAULT_ENCODING = "utf-8"


def open_source(source, encoding: str | None = None) -> TextIO:
    """
    Normalizes the supported source kinds into one text stream:
      - str: the text itself (not a path)
      - os.PathLike: file opened for reading
      - bytes / bytearray: decoded with `encoding`
    Undecodable bytes become U+FFFD instead of failing the read.
      - text stream (sys.stdin, StringIO, open(..., "r")): used as is
      - anything else with read(): binary stream wrapped for decoding
    """
    enc = encoding or DEFAULT_ENCODING
    if isinstance(source, str):
        return io.StringIO(source, newline="")
    if isinstance(source, os.PathLike):
        return open(source, "r", encoding=enc, errors="replace", newline="")
    if isinstance(source, (bytes, bytearray)):
        return io.TextIOWrapper(io.BytesIO(bytes(source)), encoding=enc, errors="replace", newline="")
    if isinstance(source, io.TextIOBase):
        return source
    if hasattr(source, "read"):
        # TextIOWrapper wants a buffered reader; raw streams/sockets get one
        if not hasattr(source, "read1"):
            raw = source if isinstance(source, io.RawIOBase) else _ReadOnly(source)
            source = io.BufferedReader(raw)
        return io.TextIOWrapper(source, encoding=enc, errors="replace", newline="")
    raise TypeError(f"Unsupported input source: {type(source).__name__}")


class _ReadOnly(io.RawIOBase):
    # Adapts any object with read(n) -> bytes (pipes, socket makefile)
    def __init__(self, inner):
        self._inner = inner

    def readable(self):
        return True

    def readinto(self, b):
        data = self._inner.read(len(b))
        if not data:
            return 0
        n = len(data)
        b[:n] = data
        return n

    def close(self):
        if not self.closed:
            close = getattr(self._inner, "close", None)
            if close is not None:
                close()
        super().close()


class LineSource:
    """Line-oriented reader over one owned text stream."""

    def __init__(self, source, encoding: str | None = None):
        self._stream = open_source(source, encoding)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_line(self) -> str:
        if self._closed:
            raise StreamExhausted("Input source is closed.")
        try:
            line = self._stream.readline()
        except ValueError as e:
            # only I/O on a stream closed behind our back means "no more lines"
            if not self._stream.closed:
                raise
            raise StreamExhausted(str(e)) from e
        if line == "":
            raise StreamExhausted("No more input lines.")
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n") or line.endswith("\r"):
            return line[:-1]
        return line

    def close(self):
        self._closed = True
        self._stream.close()
