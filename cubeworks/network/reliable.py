"""Messages resent until confirmed or timed out."""

from __future__ import annotations

import math
import time
from typing import Callable, Protocol

from cubeworks.network.messages import (
    NETWORK_RELIABLE_RETRY_TIME,
    NETWORK_TIMEOUT,
    Packet,
)


class DatagramSender(Protocol):
    """Anything with the ``sendto`` of a UDP socket."""

    def sendto(self, data: bytes, address: tuple[str, int]) -> int: ...


class ReliableMsg:
    """A packet for one address, resent periodically until it times out."""

    __slots__ = ("packet", "address", "port", "_clock", "_first_try", "_last_try")

    def __init__(
        self,
        packet: Packet,
        address: str,
        port: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.packet = Packet(packet.data())
        self.address = address
        self.port = port
        self._clock = clock
        self._first_try = clock()
        self._last_try = -math.inf

    def try_send(self, sock: DatagramSender) -> bool:
        """Send if the retry interval has passed; return False once timed out."""
        now = self._clock()
        if now - self._first_try > NETWORK_TIMEOUT:
            return False
        if now - self._last_try > NETWORK_RELIABLE_RETRY_TIME:
            self._last_try = now
            sock.sendto(self.packet.data(), (self.address, self.port))
        return True