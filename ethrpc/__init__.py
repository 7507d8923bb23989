#!/usr/bin/env python3
"""
EthRPC Package
ethrpc/__init__.py - Package initialization and public API
"""

__version__ = "1.0.0"
__author__ = "EthRPC Team"
__description__ = "A JSON-RPC 2.0 client for Ethereum nodes"

import logging

# Core invocation
from .client import EthRPCClient
from .request import Request, Response, RequestSequencer, JSONRPC_VERSION
from .codec import decode_result, encode_params

# Errors
from .errors import (
    EthRPCError,
    EncodingError,
    TransportError,
    DecodingError,
    ProtocolMismatchError,
    RemoteError
)

# Values and records
from .hexutil import Quantity, HexBytes, Hash, Address, ZERO_ADDRESS
from .types import (
    EstimateGasRequest,
    TransactionRequest,
    TransactionReceipt,
    Log,
    ESTIMATE_TRANSACTION_GAS_REQUEST,
    ESTIMATE_CONTRACT_GAS_REQUEST
)

# Configuration
from .config import ClientConfig

__all__ = [
    # Version info
    '__version__',
    '__author__',
    '__description__',

    # Core
    'EthRPCClient',
    'Request',
    'Response',
    'RequestSequencer',
    'JSONRPC_VERSION',
    'decode_result',
    'encode_params',

    # Errors
    'EthRPCError',
    'EncodingError',
    'TransportError',
    'DecodingError',
    'ProtocolMismatchError',
    'RemoteError',

    # Values
    'Quantity',
    'HexBytes',
    'Hash',
    'Address',
    'ZERO_ADDRESS',
    'EstimateGasRequest',
    'TransactionRequest',
    'TransactionReceipt',
    'Log',
    'ESTIMATE_TRANSACTION_GAS_REQUEST',
    'ESTIMATE_CONTRACT_GAS_REQUEST',

    # Configuration
    'ClientConfig',
    'setup_logging'
]

# Package loggers configured by setup_logging
LOGGERS = [
    'EthRPCClient',
    'EthRPCStubNode'
]


def setup_logging(level=logging.INFO, format_string=None):
    """Setup logging configuration for EthRPC"""
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    for logger_name in LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
