# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import os
import struct
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from pinger import packet


def _fold(data):
    if len(data) % 2:
        data += b"\x00"
    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return total


def test_default_packet_layout():
    pkt = packet.build_icmp_packet()
    assert len(pkt) == 12
    assert pkt[0] == 8
    assert pkt[1] == 0
    assert pkt[4:8] == b"\x00\x00\x00\x00"
    assert pkt[8:] == b"Ping"


def test_default_packet_checksum_value():
    # words 0x0800 + 0x5069 + 0x6e67 = 0xc6d0, complement 0x392f
    assert packet.build_icmp_packet()[2:4] == b"\x39\x2f"


def test_checksum_known_vector():
    # RFC 1071 section 3 example, sum 0xddf2 before complement
    data = bytes.fromhex("0001f203f4f5f6f7")
    assert packet.checksum(data) == struct.pack("!H", ~0xDDF2 & 0xFFFF)


def test_checksum_pads_odd_length():
    assert packet.checksum(b"\x01") == packet.checksum(b"\x01\x00")


def test_checksum_empty_buffer():
    assert packet.checksum(b"") == b"\xff\xff"


def test_checksum_folds_carries():
    assert packet.checksum(b"\xff\xff\xff\xff\x00\x02") == b"\xff\xfd"


@pytest.mark.parametrize(
    "payload",
    [b"", b"P", b"Ping", b"\xff" * 7, bytes(range(256)), b"abc" * 333],
)
def test_finished_packet_folds_to_zero(payload):
    pkt = packet.build_icmp_packet(identifier=0x1234, sequence=7, payload=payload)
    assert _fold(pkt) % 0xFFFF == 0
    assert packet.checksum(pkt) == b"\x00\x00"
    assert packet.verify_checksum(pkt)


def test_identifier_and_sequence_are_big_endian():
    pkt = packet.build_icmp_packet(identifier=0x0102, sequence=0x0304)
    assert pkt[4:8] == b"\x01\x02\x03\x04"


def test_corrupted_packet_fails_verification():
    pkt = bytearray(packet.build_icmp_packet())
    pkt[-1] ^= 0x01
    assert not packet.verify_checksum(bytes(pkt))
