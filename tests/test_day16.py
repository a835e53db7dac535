import pytest

from advent2021.day16 import (
    MalformedPacket,
    Packet,
    PacketType,
    parse_packet,
    part1,
    part2,
)


def test_literal_packet_parsing():
    expected = Packet(6, PacketType.LITERAL, value=2021)
    assert parse_packet("D2FE28") == expected


def test_operator_type0_packet_parsing():
    expected = Packet(
        1,
        PacketType.LESS_THAN,
        sub_packets=(
            Packet(6, PacketType.LITERAL, value=10),
            Packet(2, PacketType.LITERAL, value=20),
        ),
    )
    assert parse_packet("38006F45291200") == expected


def test_operator_type1_packet_parsing():
    expected = Packet(
        7,
        PacketType.MAX,
        sub_packets=(
            Packet(2, PacketType.LITERAL, value=1),
            Packet(4, PacketType.LITERAL, value=2),
            Packet(1, PacketType.LITERAL, value=3),
        ),
    )
    assert parse_packet("EE00D40C823060") == expected


@pytest.mark.parametrize(
    "hex_text, expected",
    [
        ("8A004A801A8002F478", 16),
        ("620080001611562C8802118E34", 12),
        ("C0015000016115A2E0802F182340", 23),
        ("A0016C880162017C3686B18A3D4780", 31),
    ],
)
def test_part1_sample_inputs(hex_text, expected):
    assert part1(parse_packet(hex_text)) == expected


@pytest.mark.parametrize(
    "hex_text, expected",
    [
        ("C200B40A82", 3),
        ("04005AC33890", 54),
        ("880086C3E88112", 7),
        ("CE00C43D881120", 9),
        ("D8005AC2A8F0", 1),
        ("F600BC2D8F", 0),
        ("9C005AC2F8F0", 0),
        ("9C0141080250320F1802104A08", 1),
    ],
)
def test_part2_sample_inputs(hex_text, expected):
    assert part2(parse_packet(hex_text)) == expected


def test_literal_evaluates_to_its_value():
    assert parse_packet("D2FE28").evaluate() == 2021


def test_version_sum_of_literal_is_its_version():
    assert parse_packet("D2FE28").version_sum() == 6


def test_lowercase_hex_is_accepted():
    assert parse_packet("d2fe28") == parse_packet("D2FE28")


@pytest.mark.parametrize("hex_text", ["ZZ", "D2F", "D2 FE28", ""])
def test_invalid_hex_is_rejected(hex_text):
    with pytest.raises(MalformedPacket):
        parse_packet(hex_text)


def test_truncated_packet_is_rejected():
    with pytest.raises(MalformedPacket):
        parse_packet("D2")


def test_malformed_packet_is_value_error():
    with pytest.raises(ValueError):
        parse_packet("XY")