"""Raw keyboard input from a terminal."""

from __future__ import annotations

import os
import select
import sys
import termios

_IFLAG, _OFLAG, _CFLAG, _LFLAG, _ISPEED, _OSPEED, _CC = range(7)

_ESC = 27


def _ends_sequence(code: int) -> bool:
    char = chr(code)
    return ("A" <= char <= "Z") or ("a" <= char <= "z") or char == "~"


class TerminalInput:
    """Puts a terminal in raw mode and reads keys, escape sequences included."""

    def __init__(self, fd: int | None = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._original: list | None = None
        self._initialized = False

    @property
    def fd(self) -> int:
        return self._fd

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Switch the terminal to raw mode; raise ``OSError`` if it is not a terminal."""
        try:
            original = termios.tcgetattr(self._fd)
        except termios.error as exc:
            raise OSError(f"cannot read terminal attributes of descriptor {self._fd}") from exc
        self._original = original

        raw = list(original)
        raw[_CC] = list(original[_CC])
        raw[_LFLAG] &= ~(
            termios.ICANON
            | termios.ECHO
            | termios.ECHOE
            | termios.ECHOK
            | termios.ECHONL
            | termios.ICRNL
            | termios.ISIG
            | termios.IEXTEN
        )
        raw[_IFLAG] &= ~(
            termios.IXON | termios.IXOFF | termios.IXANY | termios.INPCK | termios.ISTRIP
        )
        raw[_OFLAG] &= ~termios.OPOST
        raw[_CFLAG] |= termios.CS8
        raw[_CC][termios.VMIN] = 0
        raw[_CC][termios.VTIME] = 1

        try:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise OSError(f"cannot set terminal attributes of descriptor {self._fd}") from exc
        self._initialized = True

    def restore(self) -> None:
        """Put back the attributes the terminal had before ``initialize``."""
        if self._initialized and self._original is not None:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, self._original)
            self._initialized = False

    def get_char(self) -> int | None:
        """Read one byte; ``None`` when nothing arrived."""
        try:
            data = os.read(self._fd, 1)
        except (BlockingIOError, InterruptedError):
            return None
        return data[0] if data else None

    def is_input_available(self) -> bool:
        """Whether a read would return at once."""
        readable, _, _ = select.select([self._fd], [], [], 0)
        return bool(readable)

    def get_special_key(self) -> str:
        """Read one key: a single character or a whole escape sequence; ``""`` if none."""
        code = self.get_char()
        if code is None:
            return ""
        sequence = chr(code)
        if code != _ESC:
            return sequence
        while self.is_input_available():
            code = self.get_char()
            if code is None:
                break
            sequence += chr(code)
            if _ends_sequence(code):
                break
        return sequence

    def __enter__(self) -> TerminalInput:
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()