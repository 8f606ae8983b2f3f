# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import argparse
import logging
import os
import shlex
import subprocess
import sys

from .config import build_ping, normalize_config, read_config
from .errors import PingError
from .ping import Method


def run_command(command):
    if not command:
        return True
    try:
        args = shlex.split(command)
        result = subprocess.run(args, check=False)
        return result.returncode == 0
    except (OSError, ValueError):
        return False


def run_probe(cfg):
    try:
        ping = build_ping(cfg)
        result = ping.probe(cfg["method"])
    except PingError as exc:
        print(f"[fail] {cfg.get('host') or '(no host)'}: {exc}")
        return 1

    host = ping.host
    if result:
        line = f"[ok] {host}: {result.ms} ms via {cfg['method']}"
        if cfg["method"] == Method.EXEC.value and ping.ip_address:
            line += f" ({ping.ip_address})"
        print(line)
        if not run_command(cfg.get("command")):
            print(f"[fail] {host}: command failed")
            return 1
        return 0

    print(f"[fail] {host}: {result}")
    fail_command = cfg.get("fail_command")
    if fail_command and not run_command(fail_command):
        print(f"[fail] {host}: fail command failed")
    return 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Probe one host once")
    parser.add_argument("host", nargs="?", help="host name or IPv4 address")
    parser.add_argument(
        "-c",
        "--config",
        help="path to config YAML (default: config.yaml if present)",
    )
    parser.add_argument(
        "-m",
        "--method",
        help="exec, tcp (fsockopen) or raw (socket) (default: exec)",
    )
    parser.add_argument("--ttl", type=int, help="time to live in hops")
    parser.add_argument("--timeout", type=float, help="timeout in seconds")
    parser.add_argument("--port", type=int, help="port for the tcp method")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s"
        )

    path = args.config
    if path is None and os.path.exists("config.yaml"):
        path = "config.yaml"
    try:
        cfg = read_config(path) if path else {}
        overrides = {
            "host": args.host,
            "method": args.method,
            "ttl": args.ttl,
            "timeout": args.timeout,
            "port": args.port,
        }
        cfg.update({k: v for k, v in overrides.items() if v is not None})
        cfg = normalize_config(cfg)
    except PingError as exc:
        print(exc)
        return 1

    return run_probe(cfg)


if __name__ == "__main__":
    sys.exit(main())
