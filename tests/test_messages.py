import pytest

from cubeworks.network.messages import MsgType, Packet, PacketError


def test_uint16_is_big_endian_on_the_wire():
    assert Packet().write_uint16(0x0102).data() == b"\x01\x02"


def test_uint32_is_big_endian_on_the_wire():
    assert Packet().write_uint32(0x01020304).data() == b"\x01\x02\x03\x04"


def test_bool_is_one_byte():
    assert Packet().write_bool(True).write_bool(False).data() == b"\x01\x00"


def test_msg_type_values_follow_declaration_order():
    assert [t.name for t in sorted(MsgType)] == [
        "EMPTY", "ERROR", "CONFIRM", "CONNECT", "DISCONNECT",
        "INIT", "SERVER_UPDATE", "CLIENT_UPDATE", "NEW_CLIENT", "CUSTOM",
    ]
    assert Packet().write_msg_type(MsgType.CONNECT).data() == b"\x00\x03"


def test_header_round_trip():
    packet = (
        Packet()
        .write_uint16(12)
        .write_bool(True)
        .write_uint16(65535)
        .write_msg_type(MsgType.CONFIRM)
        .write_uint32(4000000000)
    )
    reader = Packet(packet.data())
    assert reader.read_uint16() == 12
    assert reader.read_bool() is True
    assert reader.read_uint16() == 65535
    assert reader.read_msg_type() is MsgType.CONFIRM
    assert reader.read_uint32() == 4000000000


@pytest.mark.parametrize("msg_type", list(MsgType))
def test_every_msg_type_round_trips(msg_type):
    packet = Packet(Packet().write_msg_type(msg_type).data())
    assert packet.read_msg_type() is msg_type


def test_append_concatenates_payload():
    header = Packet().write_uint16(1)
    body = Packet().write_uint16(2).write_bool(True)
    header.append(body.data())
    assert header.data() == Packet().write_uint16(1).write_uint16(2).write_bool(True).data()
    assert len(header) == len(body) + 2


def test_reading_past_end_raises():
    packet = Packet(b"\x00")
    with pytest.raises(PacketError):
        packet.read_uint16()


def test_failed_read_keeps_position():
    packet = Packet(b"\x07")
    with pytest.raises(PacketError):
        packet.read_uint32()
    assert packet.read_bool() is True


def test_unknown_msg_type_raises():
    packet = Packet().write_uint16(500)
    with pytest.raises(PacketError):
        Packet(packet.data()).read_msg_type()


@pytest.mark.parametrize("value", [-1, 65536])
def test_out_of_range_uint16_raises(value):
    with pytest.raises(PacketError):
        Packet().write_uint16(value)


def test_bytes_matches_data():
    packet = Packet().write_uint32(9)
    assert bytes(packet) == packet.data()