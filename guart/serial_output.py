"""Rendering to a serial port."""

from __future__ import annotations

import os
import termios

from guart.output import Output

_IFLAG, _OFLAG, _CFLAG, _LFLAG, _ISPEED, _OSPEED, _CC = range(7)


class SerialOutput(Output):
    """An output writing to a serial device at 115200 baud, 8N1, raw."""

    def __init__(self, path: str) -> None:
        self._path = path
        try:
            self._fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
        except OSError as exc:
            raise OSError(f"Error opening serial port: {path}") from exc
        try:
            self._configure()
        except BaseException:
            os.close(self._fd)
            self._fd = -1
            raise

    def _configure(self) -> None:
        try:
            tty = termios.tcgetattr(self._fd)
        except termios.error as exc:
            raise OSError("Error getting terminal attributes") from exc

        tty[_CC] = list(tty[_CC])
        tty[_CFLAG] &= ~termios.PARENB
        tty[_CFLAG] &= ~termios.CSTOPB
        tty[_CFLAG] &= ~termios.CSIZE
        tty[_CFLAG] |= termios.CS8
        tty[_CFLAG] &= ~getattr(termios, "CRTSCTS", 0)
        tty[_CFLAG] |= termios.CREAD | termios.CLOCAL

        tty[_LFLAG] &= ~(
            termios.ICANON | termios.ECHO | termios.ECHOE | termios.ECHONL | termios.ISIG
        )
        tty[_IFLAG] &= ~(termios.IXON | termios.IXOFF | termios.IXANY)
        tty[_IFLAG] &= ~(
            termios.IGNBRK
            | termios.BRKINT
            | termios.PARMRK
            | termios.ISTRIP
            | termios.INLCR
            | termios.IGNCR
            | termios.ICRNL
        )
        tty[_OFLAG] &= ~(termios.OPOST | termios.ONLCR)

        tty[_CC][termios.VTIME] = 1
        tty[_CC][termios.VMIN] = 0
        tty[_ISPEED] = termios.B115200
        tty[_OSPEED] = termios.B115200

        try:
            termios.tcsetattr(self._fd, termios.TCSANOW, tty)
        except termios.error as exc:
            raise OSError("Error setting terminal attributes") from exc

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._fd < 0

    def _require_open(self) -> int:
        if self._fd < 0:
            raise ValueError("I/O operation on closed serial port")
        return self._fd

    def write(self, data: str) -> SerialOutput:
        fd = self._require_open()
        payload = memoryview(data.encode("utf-8"))
        while payload:
            written = os.write(fd, payload)
            payload = payload[written:]
        return self

    def flush(self) -> None:
        """Wait until everything written has been transmitted."""
        termios.tcdrain(self._require_open())

    def close(self) -> None:
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> SerialOutput:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()