from cubeworks.network.messages import (
    NETWORK_RELIABLE_RETRY_TIME,
    NETWORK_TIMEOUT,
    MsgType,
    Packet,
)
from cubeworks.network.reliable import ReliableMsg


class FakeNow:
    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def __call__(self) -> float:
        return self.value


class RecordingSocket:
    def __init__(self) -> None:
        self.sent: list[tuple[bytes, tuple[str, int]]] = []

    def sendto(self, data: bytes, address: tuple[str, int]) -> int:
        self.sent.append((data, address))
        return len(data)


def make_msg(now):
    packet = Packet().write_uint16(3).write_msg_type(MsgType.INIT)
    return ReliableMsg(packet, "127.0.0.1", 5555, clock=now), packet


def test_first_try_sends_immediately():
    now = FakeNow(10.0)
    msg, packet = make_msg(now)
    sock = RecordingSocket()
    assert msg.try_send(sock) is True
    assert sock.sent == [(packet.data(), ("127.0.0.1", 5555))]


def test_no_resend_within_retry_interval():
    now = FakeNow(10.0)
    msg, _ = make_msg(now)
    sock = RecordingSocket()
    msg.try_send(sock)
    now.value += NETWORK_RELIABLE_RETRY_TIME / 2
    assert msg.try_send(sock) is True
    assert len(sock.sent) == 1


def test_resend_after_retry_interval():
    now = FakeNow(10.0)
    msg, _ = make_msg(now)
    sock = RecordingSocket()
    msg.try_send(sock)
    now.value += NETWORK_RELIABLE_RETRY_TIME * 2
    assert msg.try_send(sock) is True
    assert len(sock.sent) == 2


def test_gives_up_after_timeout():
    now = FakeNow(10.0)
    msg, _ = make_msg(now)
    sock = RecordingSocket()
    now.value += NETWORK_TIMEOUT + 1
    assert msg.try_send(sock) is False
    assert sock.sent == []


def test_packet_is_copied():
    now = FakeNow()
    packet = Packet().write_uint16(1)
    msg = ReliableMsg(packet, "127.0.0.1", 1, clock=now)
    packet.write_uint16(2)
    sock = RecordingSocket()
    msg.try_send(sock)
    assert sock.sent[0][0] == Packet().write_uint16(1).data()