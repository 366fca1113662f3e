"""A known peer: its id, address and the time it was last heard from."""

from __future__ import annotations

import time
from typing import Callable

from cubeworks.network.messages import NETWORK_TIMEOUT, Packet
from cubeworks.network.reliable import DatagramSender


class UDPConnection:
    """A peer identified by id, reachable at ``ip``:``port``."""

    __slots__ = ("_id", "_ip", "_port", "_clock", "_last_msg")

    def __init__(
        self,
        conn_id: int,
        ip: str,
        port: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._id = conn_id
        self._ip = ip
        self._port = port
        self._clock = clock
        self._last_msg = clock()

    @property
    def conn_id(self) -> int:
        """The peer's id."""
        return self._id

    @property
    def ip(self) -> str:
        """The peer's address."""
        return self._ip

    @property
    def port(self) -> int:
        """The peer's port."""
        return self._port

    def timeout(self) -> bool:
        """Return True if nothing was heard from the peer for too long."""
        return self._clock() - self._last_msg > NETWORK_TIMEOUT

    def same(self, ip: str, port: int) -> bool:
        """Return True if the peer is at ``ip``:``port``."""
        return self._ip == ip and self._port == port

    def update(self) -> None:
        """Record that the peer was just heard from."""
        self._last_msg = self._clock()

    def send(self, sock: DatagramSender, packet: Packet) -> None:
        """Send ``packet`` to the peer through ``sock``."""
        sock.sendto(packet.data(), (self._ip, self._port))