import time

import pytest

from cubeworks.network.messages import (
    NETWORK_MAX_CLIENTS,
    NETWORK_RELIABLE_RETRY_TIME,
    NETWORK_TIMEOUT,
    NETWORK_VERSION,
    MsgType,
    Packet,
)
from cubeworks.network.udpsocket import UDPSocket


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def _wait():
    time.sleep(0.05)


@pytest.fixture
def pair():
    a, b = UDPSocket(), UDPSocket()
    assert a.bind(0) and b.bind(0)
    yield a, b
    a.unbind()
    b.unbind()


def test_receive_empty_when_nothing_waiting(pair):
    a, _ = pair
    msg_type, _packet, _sender = a.receive()
    assert msg_type is MsgType.EMPTY


def test_connect_with_wrong_version_is_error(pair):
    a, b = pair
    b.add_connection(0, "127.0.0.1", a.port)
    b.send(Packet().write_msg_type(MsgType.CONNECT).write_uint32(NETWORK_VERSION + 1), 0)
    _wait()
    msg_type, _packet, _sender = a.receive()
    assert msg_type is MsgType.ERROR


def test_unknown_sender_is_error(pair):
    a, b = pair
    b.add_connection(0, "127.0.0.1", a.port)
    b.send(Packet().write_msg_type(MsgType.CUSTOM), 0)
    _wait()
    assert a.receive()[0] is MsgType.ERROR


def test_reliable_message_delivered_once_and_confirmed():
    clock = FakeClock()
    a, b = UDPSocket(), UDPSocket(clock)
    assert a.bind(0) and b.bind(0)
    try:
        a.add_connection(5, "127.0.0.1", b.port)
        b.set_id(5)
        b.add_connection(0, "127.0.0.1", a.port)
        b.send_rely(Packet().write_msg_type(MsgType.CUSTOM).write_uint16(7), 0)
        b.update()
        clock.now += NETWORK_RELIABLE_RETRY_TIME * 2
        b.update()
        _wait()
        msg_type, packet, sender = a.receive()
        assert (msg_type, sender) == (MsgType.CUSTOM, 5)
        assert packet.read_uint16() == 7
        assert a.receive()[0] is MsgType.ERROR  # duplicate
        _wait()
        assert b.receive()[0] is MsgType.EMPTY  # confirmation consumed
    finally:
        a.unbind()
        b.unbind()


def test_timeout_calls_callback_and_drops_connection():
    clock = FakeClock()
    sock = UDPSocket(clock)
    seen = []
    sock.set_timeout_callback(lambda cid: seen.append(cid) or True)
    sock.add_connection(3, "127.0.0.1", 9)
    clock.now += NETWORK_TIMEOUT + 1
    sock.update()
    assert seen == [3]
    assert 3 not in sock


def test_timeout_callback_false_keeps_connection():
    clock = FakeClock()
    sock = UDPSocket(clock)
    sock.set_timeout_callback(lambda cid: False)
    sock.add_connection(3, "127.0.0.1", 9)
    clock.now += NETWORK_TIMEOUT + 1
    sock.update()
    assert 3 in sock


def test_unbind_resets_state():
    sock = UDPSocket()
    assert sock.bind(0)
    sock.set_id(4)
    sock.add_connection(1, "127.0.0.1", 9)
    sock.unbind()
    assert sock.own_id() == 0
    assert 1 not in sock
    assert sock.port is None


def test_server_id_is_zero_and_remove_connection():
    sock = UDPSocket()
    assert sock.server_id() == 0
    sock.add_connection(2, "127.0.0.1", 9)
    sock.remove_connection(2)
    assert 2 not in sock