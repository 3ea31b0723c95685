# scanner/reader.py

import os
import re
import sys
from typing import Iterable

from scanner.errors import InvalidArgument, StreamExhausted
from scanner.io_adapter import IOAdapter
from scanner.messages import MessageProvider, get_messages
from scanner.session import ReaderSession
from scanner.sources import LineSource
from utils.structured_logger import log_event
from io_adapters.console_adapter import ConsoleAdapter

# Base-10 integer: optional sign, digits only, no surrounding whitespace
INT_PATTERN = re.compile(r"[+-]?\d+")

# Decimal float, NaN or Infinity, optional f/d suffix; surrounding whitespace is trimmed
FLOAT_PATTERN = re.compile(r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?)")

UNBOUNDED_LEN = sys.maxsize


class ValidatedReader:
    """
    Prompts on an IO adapter and reads lines from an owned input source until
    the answer satisfies the requested constraint.

    Every rejected attempt prints exactly one localized message and asks
    again. There is no retry limit and no timeout: an ask call returns a valid
    value or raises StreamExhausted once the source runs out of lines.
    """

    def __init__(self, source, messages: MessageProvider | None = None, encoding: str | None = None,
                 io_adapter: IOAdapter | None = None, log_events: bool = False, reader_id: str | None = None):
        self._source = LineSource(source, encoding)
        self._messages = messages or get_messages()
        self._io = io_adapter or ConsoleAdapter()
        self._log_events = log_events
        self.session = ReaderSession(reader_id)

    @classmethod
    def from_config(cls, source, config, io_adapter: IOAdapter | None = None):
        return cls(
            source,
            messages=get_messages(config.locale),
            encoding=config.encoding,
            io_adapter=io_adapter,
            log_events=config.log_events,
        )

    @property
    def messages(self) -> MessageProvider:
        return self._messages

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        self._source.close()
        self.session.closed = True
        self.session.add_history("reader_closed")
        self._log("reader_closed")

    # ******* Bookkeeping ********

    def _log(self, step: str, value=None, message: str | None = None, extra: dict | None = None):
        if self._log_events:
            log_event(self.session.reader_id, step, value=value, message=message, extra=extra)

    def _reject(self, value, reason: str, message: str):
        self._io.prompt(message)
        self.session.add_history("prompt_rejected", input_data=value, output_data=message, extra={"reason": reason})
        self._log("prompt_rejected", value=value, message=message, extra={"reason": reason})

    def _accept(self, kind: str, value):
        self.session.add_history("value_accepted", output_data=value, extra={"kind": kind})
        self._log("value_accepted", value=value, extra={"kind": kind})
        return value

    # ******* String ********

    def read_line(self, prompt: str) -> str:
        """Shows `prompt` and returns the next raw line (may be empty)."""
        self._io.ask(prompt)
        try:
            return self._source.next_line()
        except StreamExhausted as e:
            self.session.add_history("stream_exhausted", extra={"prompt": prompt})
            self._log("stream_exhausted", message=str(e), extra={"prompt": prompt})
            raise

    def _next_string(self, prompt: str, min_len: int, max_len: int) -> str:
        # Inverted bounds are not swapped here, unlike the numeric ranges.
        while True:
            value = self.read_line(prompt)
            if len(value) < min_len:
                self._reject(value, "too_short", self._messages.min_len_string(min_len))
            elif len(value) > max_len:
                self._reject(value, "too_long", self._messages.max_len_string(max_len))
            else:
                return value

    def read_string(self, prompt: str, min_len: int, max_len: int) -> str:
        return self._accept("string", self._next_string(prompt, min_len, max_len))

    def read_string_from_set(self, prompt: str, options: Iterable[str]) -> str:
        options = [str(o) for o in options]
        if not options:
            message = self._messages.no_options()
            self.session.add_history("invalid_argument", output_data=message)
            self._log("invalid_argument", message=message, extra={"prompt": prompt})
            raise InvalidArgument(message)

        question = f"{prompt} [{', '.join(options)}] "
        while True:
            value = self.read_line(question)
            if value in options:
                return self._accept("option", value)
            self._reject(value, "invalid_option", self._messages.invalid_option())

    def read_existing_filename(self, prompt: str) -> str:
        while True:
            value = self._next_string(prompt, 1, UNBOUNDED_LEN)
            if os.path.exists(value):
                return self._accept("filename", value)
            self._reject(value, "file_not_found", self._messages.file_not_found())

    # ******* Integer ********

    def _next_int(self, prompt: str) -> int:
        while True:
            raw = self.read_line(prompt)
            if INT_PATTERN.fullmatch(raw):
                return int(raw)
            self._reject(raw, "not_int", self._messages.not_int())

    def read_int(self, prompt: str) -> int:
        return self._accept("int", self._next_int(prompt))

    def read_natural(self, prompt: str) -> int:
        """Integer >= 0."""
        while True:
            n = self._next_int(prompt)
            if n >= 0:
                return self._accept("natural", n)
            self._reject(n, "not_natural", self._messages.not_natural())

    def read_int_in_range(self, prompt: str, min_value: int, max_value: int) -> int:
        if min_value > max_value:
            min_value, max_value = max_value, min_value

        while True:
            n = self._next_int(prompt)
            if min_value <= n <= max_value:
                return self._accept("int_in_range", n)
            self._reject(n, "int_not_in_range", self._messages.int_not_in_range(min_value, max_value))

    # ******* Float ********

    def _next_float(self, prompt: str) -> float:
        while True:
            raw = self.read_line(prompt)
            text = raw.strip()
            if FLOAT_PATTERN.fullmatch(text):
                return float(text.rstrip("fFdD"))
            self._reject(raw, "not_float", self._messages.not_float())

    def read_float(self, prompt: str) -> float:
        return self._accept("float", self._next_float(prompt))

    def read_float_in_range(self, prompt: str, min_value: float, max_value: float) -> float:
        if min_value > max_value:
            min_value, max_value = max_value, min_value

        while True:
            n = self._next_float(prompt)
            # NaN fails both comparisons and is rejected
            if min_value <= n <= max_value:
                return self._accept("float_in_range", n)
            self._reject(n, "float_not_in_range", self._messages.float_not_in_range(min_value, max_value))
