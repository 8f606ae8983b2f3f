# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Ping facade.

Holds one target (host, ttl, timeout, port) and probes it with one of three
methods:
- exec (default): the system ping command. Robust, reports real ICMP times.
- tcp (alias fsockopen): a TCP connect to `port` (default 80). Fast, but a
  connection may succeed even when the service is not really there.
- raw (alias socket): an ICMP echo over a raw socket. Needs root; without it
  the result is Unreachable("permission denied").

TTL by convention: 0 same host, 1 same subnet, 32 same site, 64 same region,
128 same continent, 255 unrestricted. The tcp method ignores it.

An instance is not safe to share between threads while it is reconfigured.
"""

import enum
import logging

from . import command, raw, tcp
from .errors import InvalidInput, UnsupportedMethod
from .packet import DEFAULT_PAYLOAD, build_icmp_packet

log = logging.getLogger(__name__)

DEFAULT_TTL = 255
DEFAULT_TIMEOUT = 3
DEFAULT_PORT = 80


class Method(enum.Enum):
    EXEC = "exec"
    TCP = "tcp"
    RAW = "raw"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedMethod(f"unsupported ping method: {value!r}") from None


_ALIASES = {"fsockopen": "tcp", "socket": "raw"}


class Ping:
    def __init__(
        self, host="", ttl=DEFAULT_TTL, timeout=DEFAULT_TIMEOUT, port=DEFAULT_PORT
    ):
        self.configure(host, ttl, timeout, port)
        self.payload = DEFAULT_PAYLOAD
        self._command_output = None

    def configure(
        self, host, ttl=DEFAULT_TTL, timeout=DEFAULT_TIMEOUT, port=DEFAULT_PORT
    ):
        self.host = host
        self.ttl = ttl
        self.timeout = timeout
        self.port = port
        return self

    @property
    def host(self):
        return self._host

    @host.setter
    def host(self, value):
        self._host = value

    @property
    def ttl(self):
        return self._ttl

    @ttl.setter
    def ttl(self, value):
        self._ttl = int(value)

    @property
    def timeout(self):
        """Seconds to wait for the ping command, connect or raw reply."""
        return self._timeout

    @timeout.setter
    def timeout(self, value):
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidInput(f"timeout must be a number: {value!r}") from None
        if value <= 0:
            raise InvalidInput(f"timeout must be positive: {value!r}")
        self._timeout = value

    @property
    def port(self):
        """Port for the tcp method only."""
        return self._port

    @port.setter
    def port(self, value):
        self._port = int(value)

    @property
    def command_output(self):
        """Output of the last exec probe, None before the first one."""
        return self._command_output

    @property
    def ip_address(self):
        """First IPv4 address in the last exec output, i.e. what ping contacted."""
        return command.extract_ip_address(self._command_output)

    def probe(self, method=Method.EXEC):
        if not self.host:
            raise InvalidInput("host name not supplied")
        method = Method.parse(method)
        log.debug("probing %s via %s", self.host, method.value)
        if method is Method.EXEC:
            result = command.probe_exec(self.host, self.ttl, self.timeout)
            self._command_output = result.output
            return result
        if method is Method.TCP:
            return tcp.probe_tcp(self.host, self.port, self.timeout)
        packet = build_icmp_packet(payload=self.payload)
        return raw.probe_raw(self.host, self.timeout, packet, ttl=self.ttl)

    def __call__(self, host, ttl=DEFAULT_TTL, timeout=DEFAULT_TIMEOUT, method=Method.TCP):
        self.host = host
        self.ttl = ttl
        self.timeout = timeout
        return self.probe(method)

    def __repr__(self):
        return (
            f"Ping(host={self.host!r}, ttl={self.ttl}, "
            f"timeout={self.timeout}, port={self.port})"
        )
