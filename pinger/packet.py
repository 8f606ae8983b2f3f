# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""ICMP echo request framing (RFC 792) and the Internet checksum (RFC 1071).

Packet layout:
- type (1 byte, 8 = echo request)
- code (1 byte, 0)
- checksum (2 bytes, big-endian)
- identifier (2 bytes)
- sequence (2 bytes)
- payload (variable, default b"Ping")
"""

import struct

ICMP_ECHO_REQUEST = 8
ICMP_CODE = 0
DEFAULT_PAYLOAD = b"Ping"

_HEADER = struct.Struct("!BBHHH")


def _word_sum(data):
    if len(data) % 2:
        data += b"\x00"
    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return total


def checksum(data):
    """Return the 2-byte big-endian Internet checksum of data."""
    return struct.pack("!H", ~_word_sum(bytes(data)) & 0xFFFF)


def verify_checksum(packet):
    return checksum(packet) == b"\x00\x00"


def build_icmp_packet(identifier=0, sequence=0, payload=DEFAULT_PAYLOAD):
    header = _HEADER.pack(ICMP_ECHO_REQUEST, ICMP_CODE, 0, identifier, sequence)
    csum = checksum(header + payload)
    return header[:2] + csum + header[4:] + payload
