#!/usr/bin/env python3
"""
EthRPC Command Line
ethrpc/cli.py - Call a single JSON-RPC method and print the result
"""

import sys
import json
import argparse
from typing import Any, List, Optional

from dotenv import load_dotenv

from . import setup_logging
from .client import EthRPCClient
from .config import ClientConfig
from .errors import EthRPCError, describe_error


def parse_param(raw: str) -> Any:
    """Treat an argument as JSON when it parses, otherwise as a string"""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def positive_seconds(raw: str) -> float:
    """argparse type for timeouts"""
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {raw!r}")
    return value


def build_parser(config: ClientConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ethereum JSON-RPC client")
    parser.add_argument("--url", default=config.url, help=f"Node RPC URL (default: {config.url})")
    parser.add_argument("--timeout", type=positive_seconds, default=config.timeout, help="Request timeout in seconds")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    parser.add_argument("method", help="RPC method name, e.g. eth_blockNumber")
    parser.add_argument("params", nargs="*", help="Positional params (JSON values or plain strings)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2

    args = build_parser(config).parse_args(argv)
    config.url = args.url
    config.timeout = args.timeout
    config.log_level = args.log_level

    try:
        setup_logging(config.logging_level)
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2

    params = [parse_param(raw) for raw in args.params]

    with EthRPCClient.from_config(config) as client:
        try:
            result = client.call_method(None, args.method, *params)
        except EthRPCError as e:
            print(f"❌ {describe_error(e, args.method)}", file=sys.stderr)
            return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
