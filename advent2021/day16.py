"""Decoding of the BITS transmission packet format."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from enum import IntEnum

_HEADER_BITS = 6
_LITERAL_GROUP_BITS = 4
_SUB_PACKET_COUNT_BITS = 11
_SUB_PACKET_LENGTH_BITS = 15


class MalformedPacket(ValueError):
    """Raised when a transmission cannot be decoded into a packet."""


class PacketType(IntEnum):
    SUM = 0
    PRODUCT = 1
    MIN = 2
    MAX = 3
    LITERAL = 4
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL = 7


@dataclass(frozen=True)
class Packet:
    """A decoded packet: a literal value or an operator over sub-packets."""

    version: int
    type_id: PacketType
    value: int | None = None
    sub_packets: tuple[Packet, ...] = ()

    @property
    def is_literal(self) -> bool:
        return self.value is not None

    def version_sum(self) -> int:
        """Sum of the versions of this packet and all nested packets."""
        return self.version + sum(p.version_sum() for p in self.sub_packets)

    def evaluate(self) -> int:
        """The value of the expression this packet represents."""
        if self.value is not None:
            return self.value
        values = [p.evaluate() for p in self.sub_packets]
        match self.type_id:
            case PacketType.SUM:
                return sum(values)
            case PacketType.PRODUCT:
                return math.prod(values)
            case PacketType.MIN | PacketType.MAX:
                if not values:
                    raise MalformedPacket("min/max packet has no operands")
                return min(values) if self.type_id is PacketType.MIN else max(values)
            case PacketType.GREATER_THAN | PacketType.LESS_THAN | PacketType.EQUAL:
                if len(values) < 2:
                    raise MalformedPacket("comparison packet needs two operands")
                first, second = values[0], values[1]
                if self.type_id is PacketType.GREATER_THAN:
                    return int(first > second)
                if self.type_id is PacketType.LESS_THAN:
                    return int(first < second)
                return int(first == second)
            case _:
                raise MalformedPacket(f"unexpected packet type {self.type_id!r}")


class _BitReader:
    def __init__(self, bits: str) -> None:
        self._bits = bits
        self.position = 0

    def read(self, count: int) -> int:
        end = self.position + count
        if end > len(self._bits):
            raise MalformedPacket("transmission ended in the middle of a packet")
        chunk = self._bits[self.position:end]
        self.position = end
        return int(chunk, 2) if chunk else 0

    def read_flag(self) -> bool:
        return self.read(1) == 1


def _read_packet(reader: _BitReader) -> Packet:
    version = reader.read(3)
    type_id = PacketType(reader.read(3))

    if type_id is PacketType.LITERAL:
        value = 0
        while True:
            more = reader.read_flag()
            value = value << _LITERAL_GROUP_BITS | reader.read(_LITERAL_GROUP_BITS)
            if not more:
                break
        return Packet(version, type_id, value=value)

    if reader.read_flag():
        count = reader.read(_SUB_PACKET_COUNT_BITS)
        sub_packets = tuple(_read_packet(reader) for _ in range(count))
    else:
        length = reader.read(_SUB_PACKET_LENGTH_BITS)
        end = reader.position + length
        collected = []
        while reader.position < end:
            collected.append(_read_packet(reader))
        if reader.position > end:
            raise MalformedPacket("sub-packets exceed their declared length")
        sub_packets = tuple(collected)
    return Packet(version, type_id, sub_packets=sub_packets)


def parse_packet(hex_text: str) -> Packet:
    """Decode the outermost packet of a hexadecimal transmission."""
    if len(hex_text) % 2 or not all(c in string.hexdigits for c in hex_text):
        raise MalformedPacket(f"invalid hexadecimal transmission: {hex_text!r}")
    data = bytes.fromhex(hex_text)
    bits = "".join(f"{byte:08b}" for byte in data)
    if len(bits) < _HEADER_BITS:
        raise MalformedPacket("transmission too short for a packet header")
    return _read_packet(_BitReader(bits))


def part1(packet: Packet) -> int:
    return packet.version_sum()


def part2(packet: Packet) -> int:
    return packet.evaluate()