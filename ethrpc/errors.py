#!/usr/bin/env python3
"""
EthRPC Errors
ethrpc/errors.py - Exception taxonomy for JSON-RPC calls
"""

from typing import Any, Dict, Optional


class EthRPCError(Exception):
    """Base class for every failure raised by an RPC call"""


class EncodingError(EthRPCError):
    """Request could not be serialized"""


class TransportError(EthRPCError):
    """HTTP exchange failed or the response body could not be read"""


class DecodingError(EthRPCError):
    """Response body or result did not match the expected shape"""


class ProtocolMismatchError(EthRPCError):
    """Response id or protocol version does not match the request"""

    def __init__(self, message: str = "RPC specification error"):
        super().__init__(message)


class RemoteError(EthRPCError):
    """Error object reported by the server, passed through unchanged"""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> 'RemoteError':
        """Build from a decoded JSON-RPC error object"""
        if not isinstance(obj, dict):
            raise ValueError(f"error member must be an object, got {type(obj).__name__}")

        code = obj.get('code', 0)
        if code is None:
            code = 0
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"error code must be an integer, got {code!r}")

        message = obj.get('message', '')
        if message is None:
            message = ''
        if not isinstance(message, str):
            raise ValueError(f"error message must be a string, got {message!r}")

        return cls(code, message, obj.get('data'))

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code, 'message': self.message, 'data': self.data}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"RemoteError(code={self.code}, message={self.message!r}, data={self.data!r})"


def describe_error(error: EthRPCError, method: Optional[str] = None) -> str:
    """One-line description for command-line output"""
    prefix = f"{method}: " if method else ""
    if isinstance(error, RemoteError):
        return f"{prefix}RPC Error {error.code}: {error.message}"
    return f"{prefix}{type(error).__name__}: {error}"
