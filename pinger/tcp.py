# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""TCP connect probe.

The connect time stands in for latency. An accepted handshake does not prove
the service behind the port is healthy (a firewall or proxy may accept on the
host's behalf), so this method is fast but may report false positives.
"""

import logging
import socket

from .result import CONNECT_FAILED, Latency, Unreachable
from .util import elapsed_ms, now

log = logging.getLogger(__name__)


def probe_tcp(host, port, timeout):
    start = now()
    try:
        with socket.create_connection((host, int(port)), timeout=float(timeout)):
            latency = elapsed_ms(start)
    except (OSError, ValueError) as exc:
        # idna encoding of a malformed name raises UnicodeError
        log.debug("tcp connect to %s:%s failed: %s", host, port, exc)
        return Unreachable(CONNECT_FAILED)
    return Latency(latency)
