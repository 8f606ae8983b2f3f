# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Raw socket ICMP probe.

Opening a SOCK_RAW socket needs root (or CAP_NET_RAW) on most systems. When
the socket cannot be created the probe reports Unreachable with a
"permission denied" or "socket unavailable" reason instead of raising.
"""

import logging
import socket

from .result import (
    NO_RESPONSE,
    PERMISSION_DENIED,
    SOCKET_UNAVAILABLE,
    Latency,
    Unreachable,
)
from .util import elapsed_ms, now

log = logging.getLogger(__name__)

ICMP_PROTOCOL = 1
READ_BYTES = 255


def _open_socket():
    return socket.socket(socket.AF_INET, socket.SOCK_RAW, ICMP_PROTOCOL)


def probe_raw(host, timeout, packet, ttl=None):
    try:
        sock = _open_socket()
    except PermissionError as exc:
        log.debug("raw socket denied: %s", exc)
        return Unreachable(PERMISSION_DENIED)
    except OSError as exc:
        log.debug("raw socket unavailable: %s", exc)
        return Unreachable(SOCKET_UNAVAILABLE)

    with sock:
        try:
            sock.settimeout(float(timeout))
            if ttl is not None:
                sock.setsockopt(socket.IPPROTO_IP, socket.IP_TTL, int(ttl))
        except OSError as exc:
            log.debug("raw socket options rejected: %s", exc)
            return Unreachable(SOCKET_UNAVAILABLE)

        try:
            sock.connect((host, 0))
        except OSError as exc:
            # the send below decides reachability
            log.debug("raw connect to %s failed: %s", host, exc)

        start = now()
        try:
            sock.send(packet)
            data = sock.recv(READ_BYTES)
        except OSError as exc:
            log.debug("no icmp reply from %s: %s", host, exc)
            return Unreachable(NO_RESPONSE)
        if not data:
            return Unreachable(NO_RESPONSE)
        return Latency(elapsed_ms(start))
