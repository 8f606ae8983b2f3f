# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.


class PingError(Exception):
    pass


class InvalidInput(PingError, ValueError):
    """Host missing or unsafe to hand to the system ping."""


class UnsupportedMethod(PingError, ValueError):
    """Probe method name not recognised."""


class ConfigError(PingError):
    pass
