#!/usr/bin/env python3
"""
EthRPC Configuration
ethrpc/config.py - Client settings read from the environment
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

DEFAULT_RPC_URL = 'http://127.0.0.1:8545'
DEFAULT_LOG_LEVEL = 'INFO'


@dataclass
class ClientConfig:
    """Connection settings for EthRPCClient"""
    url: str = DEFAULT_RPC_URL
    timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Read ETH_RPC_URL, ETH_RPC_TIMEOUT and ETH_RPC_LOG_LEVEL"""
        timeout = None
        raw_timeout = os.getenv('ETH_RPC_TIMEOUT')
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"ETH_RPC_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
            if timeout <= 0:
                raise ValueError(f"ETH_RPC_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(
            url=os.getenv('ETH_RPC_URL', DEFAULT_RPC_URL),
            timeout=timeout,
            log_level=os.getenv('ETH_RPC_LOG_LEVEL', DEFAULT_LOG_LEVEL)
        )
