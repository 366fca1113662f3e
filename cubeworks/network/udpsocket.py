"""A non-blocking UDP endpoint with peer ids, reliable delivery and timeouts."""

from __future__ import annotations

import socket
import time
from typing import Callable, Optional

from cubeworks.network.connection import UDPConnection
from cubeworks.network.messages import (
    NETWORK_MAX_CLIENTS,
    NETWORK_TIMEOUT,
    NETWORK_VERSION,
    MsgType,
    Packet,
    PacketError,
)
from cubeworks.network.reliable import ReliableMsg

_MAX_DATAGRAM = 65536

TimeoutCallback = Callable[[int], bool]


class UDPSocket:
    """Sends and receives framed packets to and from known peers.

    Every datagram starts with a header: sender id (uint16), a reliable flag
    (bool) and a message id (uint16), followed by the message type.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._sock: Optional[socket.socket] = None
        self._own_id = 0
        self._server_id = 0
        self._next_rely_msg_id = 0
        self._connections: dict[int, UDPConnection] = {}
        self._rely_packets: dict[int, ReliableMsg] = {}
        self._confirm_times: dict[int, float] = {}
        self._timeout_callback: Optional[TimeoutCallback] = None

    def __contains__(self, conn_id: object) -> bool:
        return conn_id in self._connections

    @property
    def port(self) -> Optional[int]:
        """The local port, or None when not bound."""
        if self._sock is None:
            return None
        return self._sock.getsockname()[1]

    def bind(self, port: int) -> bool:
        """Bind to ``port`` (0 for any); return whether it succeeded."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind(("", port))
        except OSError:
            sock.close()
            return False
        sock.setblocking(False)
        if self._sock is not None:
            self._sock.close()
        self._sock = sock
        return True

    def unbind(self) -> None:
        """Tell every peer we are leaving, forget all state and close."""
        packet = Packet().write_msg_type(MsgType.DISCONNECT).write_uint16(self._own_id)
        for conn_id in list(self._connections):
            self.send(packet, conn_id)
            del self._connections[conn_id]
        self._rely_packets.clear()
        self._confirm_times.clear()
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        self.set_id(0)

    def set_timeout_callback(self, callback: Optional[TimeoutCallback]) -> None:
        """Set the function called with a peer id when that peer times out.

        If it returns False, the current update stops.
        """
        self._timeout_callback = callback

    def add_connection(self, conn_id: int, ip: str, port: int) -> None:
        """Register a peer, unless one with that id is already known."""
        self._connections.setdefault(conn_id, UDPConnection(conn_id, ip, port, self._clock))

    def remove_connection(self, conn_id: int) -> None:
        """Forget a peer."""
        self._connections.pop(conn_id, None)

    def set_id(self, own_id: int) -> None:
        """Set this endpoint's own id."""
        self._own_id = own_id

    def own_id(self) -> int:
        """Return this endpoint's own id (0 before one is assigned)."""
        return self._own_id

    def server_id(self) -> int:
        """Return the id the server is known by."""
        return self._server_id

    def _sendto(self, data: bytes, ip: str, port: int) -> None:
        if self._sock is None:
            return
        try:
            self._sock.sendto(data, (ip, port))
        except OSError:
            pass

    def send_to(self, packet: Packet, ip: str, port: int) -> None:
        """Send ``packet`` once to an address."""
        final = Packet()
        final.write_uint16(self._own_id).write_bool(False).write_uint16(self._server_id)
        final.append(packet.data())
        self._sendto(final.data(), ip, port)

    def send(self, packet: Packet, conn_id: int) -> None:
        """Send ``packet`` once to a known peer; unknown ids are ignored."""
        conn = self._connections.get(conn_id)
        if conn is not None:
            self.send_to(packet, conn.ip, conn.port)

    def send_rely_to(self, packet: Packet, ip: str, port: int) -> None:
        """Queue ``packet`` for resending to an address until confirmed."""
        msg_id = self._next_rely_msg_id
        final = Packet()
        final.write_uint16(self._own_id).write_bool(True).write_uint16(msg_id)
        final.append(packet.data())
        self._rely_packets[msg_id] = ReliableMsg(final, ip, port, self._clock)
        self._next_rely_msg_id = (msg_id + 1) & 0xFFFF

    def send_rely(self, packet: Packet, conn_id: int) -> None:
        """Queue ``packet`` reliably for a known peer; unknown ids are ignored."""
        conn = self._connections.get(conn_id)
        if conn is not None:
            self.send_rely_to(packet, conn.ip, conn.port)

    def update(self) -> None:
        """Drop timed-out peers, resend reliable packets, prune confirmations."""
        for conn_id, conn in list(self._connections.items()):
            if not conn.timeout():
                continue
            if self._timeout_callback is not None and not self._timeout_callback(conn_id):
                return
            self._connections.pop(conn_id, None)

        if self._sock is not None:
            for msg_id, msg in list(self._rely_packets.items()):
                if not msg.try_send(self._sock):
                    del self._rely_packets[msg_id]

        now = self._clock()
        self._confirm_times = {
            key: stamp
            for key, stamp in self._confirm_times.items()
            if now - stamp <= NETWORK_TIMEOUT
        }

    def receive(self) -> tuple[MsgType, Packet, int]:
        """Receive one datagram.

        Returns the message type, the packet positioned after the type, and the
        sender's id. ``EMPTY`` means nothing was waiting (or only a
        confirmation); ``ERROR`` means the datagram was rejected.
        """
        if self._sock is None:
            return MsgType.EMPTY, Packet(), 0
        try:
            data, (ip, port) = self._sock.recvfrom(_MAX_DATAGRAM)[:2]
        except OSError:
            return MsgType.EMPTY, Packet(), 0

        packet = Packet(data)
        try:
            sender_id = packet.read_uint16()
            reply = packet.read_bool()
            msg_id = packet.read_uint16()
            msg_type = packet.read_msg_type()
        except PacketError:
            return MsgType.ERROR, packet, 0

        conn = self._connections.get(sender_id)
        if conn is not None:
            conn.update()

        if msg_type is MsgType.CONFIRM:
            self._rely_packets.pop(msg_id, None)
            return MsgType.EMPTY, packet, sender_id

        if msg_type is MsgType.CONNECT:
            try:
                version = packet.read_uint32()
            except PacketError:
                return MsgType.ERROR, packet, sender_id
            if version != NETWORK_VERSION:
                return MsgType.ERROR, packet, sender_id
            for candidate in range(NETWORK_MAX_CLIENTS, 0, -1):
                existing = self._connections.get(candidate)
                if existing is None:
                    sender_id = candidate
                elif existing.same(ip, port):
                    return MsgType.ERROR, packet, sender_id
            self.add_connection(sender_id, ip, port)

        conn = self._connections.get(sender_id)
        if conn is None or not conn.same(ip, port) or (reply and self._confirmed(msg_id, sender_id)):
            return MsgType.ERROR, packet, sender_id
        return msg_type, packet, sender_id

    def _confirmed(self, msg_id: int, sender_id: int) -> bool:
        """Confirm a reliable message; return True if it was seen before."""
        confirm = Packet()
        confirm.write_uint16(self._own_id).write_bool(False).write_uint16(msg_id)
        confirm.write_msg_type(MsgType.CONFIRM)
        conn = self._connections[sender_id]
        self._sendto(confirm.data(), conn.ip, conn.port)

        confirm_id = (sender_id << 16) | msg_id
        repeat = confirm_id in self._confirm_times
        self._confirm_times[confirm_id] = self._clock()
        return repeat