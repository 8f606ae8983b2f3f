# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Latency via the system ping command.

The command always runs from an argument list, never through a shell, and
the host is checked by sanitize_host before it lands in that list.

Flags per platform (exactly one echo request):
- Windows: -n 1 (count), -i (ttl), -w (timeout, milliseconds)
- macOS/BSD: -n (numeric), -c 1 (count), -m (ttl), -t (timeout, seconds)
- Linux: -n (numeric), -c 1 (count), -t (ttl), -W (timeout, seconds)

Only the English "time=" / "time<" reply form is recognised. Without a shell
the console code page cannot be switched to 437 first, so a localized Windows
ping (e.g. "Zeit=12ms") parses as Unreachable.
"""

import logging
import re
import subprocess
import sys

from .errors import InvalidInput
from .result import COMMAND_FAILED, NO_TIME_LINE, Latency, Unreachable
from .util import PRECISION, whole_seconds

log = logging.getLogger(__name__)

WINDOWS = "windows"
BSD = "bsd"
LINUX = "linux"

# Windows: "time<1ms" / "time=12ms", unix: "time=0.045 ms"
_TIME_RE = re.compile(r"time[<=](?P<time>[.0-9]+)(?:|\s)ms")
_IPV4_RE = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}")
_UNSAFE_HOST_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def platform_family(platform=None):
    platform = (platform or sys.platform).lower()
    if platform.startswith(("win", "cygwin")):
        return WINDOWS
    if platform.startswith("darwin") or "bsd" in platform or platform.startswith(
        "dragonfly"
    ):
        return BSD
    return LINUX


def sanitize_host(host):
    if not host:
        raise InvalidInput("host name not supplied")
    host = str(host)
    if host.startswith("-"):
        raise InvalidInput(f"host may not start with '-': {host!r}")
    if _UNSAFE_HOST_RE.search(host):
        raise InvalidInput(f"host contains whitespace or control characters: {host!r}")
    return host


def build_ping_args(platform, host, ttl, timeout):
    host = sanitize_host(host)
    family = platform_family(platform)
    if family == WINDOWS:
        wait_ms = int(float(timeout) * 1000)
        return ["ping", "-n", "1", "-i", str(int(ttl)), "-w", str(wait_ms), host]
    seconds = str(whole_seconds(timeout))
    if family == BSD:
        return ["ping", "-n", "-c", "1", "-m", str(int(ttl)), "-t", seconds, host]
    return ["ping", "-n", "-c", "1", "-t", str(int(ttl)), "-W", seconds, host]


def parse_latency(output):
    """Find the reply time in ping output.

    Blank lines are dropped so the first reply line sits at index 1 on every
    platform; it is searched together with the line after it.
    """
    lines = [line.rstrip() for line in (output or "").splitlines()]
    lines = [line for line in lines if line]
    if len(lines) < 2:
        return Unreachable(NO_TIME_LINE, output)
    match = _TIME_RE.search("".join(lines[1:3]))
    if not match:
        return Unreachable(NO_TIME_LINE, output)
    try:
        value = float(match.group("time"))
    except ValueError:
        return Unreachable(NO_TIME_LINE, output)
    if value <= 0:
        return Unreachable(NO_TIME_LINE, output)
    return Latency(round(value, PRECISION), output)


def extract_ip_address(output):
    if not output:
        return None
    match = _IPV4_RE.search(output)
    if not match:
        return None
    return match.group(0)


def probe_exec(host, ttl, timeout, platform=None):
    args = build_ping_args(platform, host, ttl, timeout)
    log.debug("running %s", args)
    try:
        result = subprocess.run(
            args,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        log.debug("ping command failed: %s", exc)
        return Unreachable(COMMAND_FAILED, str(exc))
    return parse_latency(result.stdout or "")
