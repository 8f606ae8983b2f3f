# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Single-host reachability and latency probes.

Example:
ping = Ping("127.0.0.1", timeout=2)
result = ping.probe("tcp")
if result:
    print(result.ms)
"""

from .errors import ConfigError, InvalidInput, PingError, UnsupportedMethod
from .ping import Method, Ping
from .result import Latency, Unreachable

__all__ = [
    "ConfigError",
    "InvalidInput",
    "Latency",
    "Method",
    "Ping",
    "PingError",
    "Unreachable",
    "UnsupportedMethod",
]
