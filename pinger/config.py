# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""YAML configuration for the pinger command.

Config keys:
- host (str, required unless given on the command line)
- ttl (int, optional, default 255)
- timeout (float, optional, seconds, default 3)
- port (int, optional, tcp method only, default 80)
- method (str, optional, exec | tcp | raw, default exec)
- payload (str, optional, raw method ICMP payload, default "Ping")
- command (str, optional, run after a successful probe)
- fail_command (str, optional, run after a failed probe)

Example config.yaml:
host: 127.0.0.1
method: tcp
port: 22
timeout: 2
fail_command: notify-send "ssh down"
"""

import yaml

from .errors import ConfigError
from .ping import DEFAULT_PORT, DEFAULT_TIMEOUT, DEFAULT_TTL, Method, Ping

DEFAULTS = {
    "host": "",
    "ttl": DEFAULT_TTL,
    "timeout": DEFAULT_TIMEOUT,
    "port": DEFAULT_PORT,
    "method": Method.EXEC.value,
    "payload": None,
    "command": None,
    "fail_command": None,
}


def read_config(path):
    """Read the YAML mapping as written, without applying defaults or checks."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"failed to read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid yaml: {exc}") from exc
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    return data


def load_config(path):
    return normalize_config(read_config(path))


def normalize_config(data):
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(map(str, unknown))}")

    cfg = dict(DEFAULTS)
    cfg.update({k: v for k, v in data.items() if v is not None})
    try:
        cfg["host"] = str(cfg["host"]) if cfg["host"] else ""
        cfg["ttl"] = int(cfg["ttl"])
        cfg["timeout"] = float(cfg["timeout"])
        cfg["port"] = int(cfg["port"])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid config value: {exc}") from exc
    cfg["method"] = Method.parse(cfg["method"]).value
    return cfg


def build_ping(cfg):
    ping = Ping(cfg["host"], cfg["ttl"], cfg["timeout"], cfg["port"])
    if cfg.get("payload"):
        ping.payload = str(cfg["payload"]).encode("utf-8")
    return ping
