"""Non-blocking byte channels: an in-memory loopback and a serial port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

import serial

BAUD = 115200


class ChannelClosedError(OSError):
    """Raised on use of a closed channel."""


class Channel(ABC):
    """A byte channel whose reads and writes never wait."""

    @abstractmethod
    def write(self, data):
        """Send bytes; return how many were sent."""

    @abstractmethod
    def read(self, size):
        """Return up to size bytes that have arrived, possibly none."""

    @abstractmethod
    def close(self):
        """Release the channel."""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class LoopbackChannel(Channel):
    """In-memory channel; alone it echoes, paired it delivers to its peer."""

    def __init__(self):
        self._inbox = deque()
        self._peer = self
        self._closed = False

    def _ensure_open(self):
        if self._closed:
            raise ChannelClosedError("channel is closed")

    def write(self, data):
        self._ensure_open()
        data = bytes(data)
        if not self._peer._closed:
            self._peer._inbox.extend(data)
        return len(data)

    def read(self, size):
        self._ensure_open()
        if size < 0:
            raise ValueError("size must not be negative")
        count = min(size, len(self._inbox))
        return bytes(self._inbox.popleft() for _ in range(count))

    def close(self):
        self._closed = True
        self._inbox.clear()


def loopback_pair():
    """Return two loopback channels connected to each other."""
    a, b = LoopbackChannel(), LoopbackChannel()
    a._peer, b._peer = b, a
    return a, b


class SerialChannel(Channel):
    """Serial port at 8 data bits, no parity, one stop bit, non-blocking reads."""

    def __init__(self, port, baudrate=BAUD):
        self._port = serial.serial_for_url(
            port,
            baudrate=baudrate,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            rtscts=False,
            timeout=0,
        )

    def write(self, data):
        if not self._port.is_open:
            raise ChannelClosedError("channel is closed")
        return self._port.write(bytes(data)) or 0

    def read(self, size):
        if not self._port.is_open:
            raise ChannelClosedError("channel is closed")
        if size < 0:
            raise ValueError("size must not be negative")
        return self._port.read(size)

    def close(self):
        if self._port.is_open:
            self._port.close()