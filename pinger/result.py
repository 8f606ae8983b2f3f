# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Probe outcomes.

A probe either measured a round trip (`Latency`) or did not (`Unreachable`).
A dead host is an ordinary outcome, so neither variant is an exception.
`output` holds the captured system ping text for exec probes.
"""

from dataclasses import dataclass
from typing import Optional

NO_RESPONSE = "no response"
PERMISSION_DENIED = "permission denied"
SOCKET_UNAVAILABLE = "socket unavailable"
CONNECT_FAILED = "connect failed"
COMMAND_FAILED = "command failed"
NO_TIME_LINE = "no time in output"


@dataclass(frozen=True)
class Latency:
    ms: float
    output: Optional[str] = None

    reachable = True

    def __bool__(self):
        return True

    def __str__(self):
        return f"{self.ms} ms"


@dataclass(frozen=True)
class Unreachable:
    reason: str = NO_RESPONSE
    output: Optional[str] = None

    reachable = False

    def __bool__(self):
        return False

    def __str__(self):
        return f"unreachable ({self.reason})"
