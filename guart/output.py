"""Sinks that rendered terminal text is written to."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Output(ABC):
    """A destination for text and escape sequences."""

    @abstractmethod
    def write(self, data: str) -> Output:
        """Write ``data`` and return ``self`` so calls can be chained."""

    def flush(self) -> None:
        """Push buffered data to its destination; nothing to do by default."""


class StreamOutput(Output):
    """Writes to a text stream, standard output unless another is given."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, data: str) -> StreamOutput:
        self._stream.write(data)
        return self

    def flush(self) -> None:
        self._stream.flush()