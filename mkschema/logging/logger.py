from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Dict, Iterator, TextIO

from .entry import Entry
from .log_level import LogLevel

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {message}"


class LoggerContext:
    __slots__ = ("template", "level", "stream", "context")

    def __init__(
        self,
        template: str,
        level: LogLevel,
        stream: TextIO,
        context: Dict[str, Any] | None = None,
    ):
        self.template = template
        self.level = level
        self.stream = stream
        self.context = context

    def log(self, entry: Entry):
        if not entry.level >= self.level:
            return

        self.stream.write(entry.to_template(self.template, context=self.context))
        self.stream.write("\n")


class Logger:
    def __init__(
        self,
        level: LogLevel | str = LogLevel.INFO,
        stream: TextIO | None = None,
    ):
        if isinstance(level, str):
            level = LogLevel(level.lower())

        self.level = level
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the swapped stderr.
        if self._stream is None:
            return sys.stderr

        return self._stream

    @contextmanager
    def context(
        self,
        template: str = DEFAULT_TEMPLATE,
        **context: Any,
    ) -> Iterator[LoggerContext]:
        ctx = LoggerContext(
            template,
            self.level,
            self.stream,
            context=context or None,
        )

        try:
            yield ctx

        finally:
            self.stream.flush()
