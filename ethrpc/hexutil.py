#!/usr/bin/env python3
"""
EthRPC Hex Encodings
ethrpc/hexutil.py - Ethereum 0x-prefixed quantity and byte-string values

Nodes exchange integers as "QUANTITY" strings (minimal 0x hex) and binary
data as "DATA" strings (0x hex, two digits per byte). The classes here
subclass int and bytes, so decoded values behave like plain Python values
while remembering how to encode themselves back to JSON.
"""

import re
from typing import Any, Optional

_HEX_DIGITS = re.compile(r'[0-9a-fA-F]*')

# Quantities are capped at 256 bits like the node-side big integer type
MAX_QUANTITY_DIGITS = 64


def has_hex_prefix(value: str) -> bool:
    return len(value) >= 2 and value[0] == '0' and value[1] in 'xX'


def _require_string(value: Any, kind: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{kind} must be a JSON string, got {type(value).__name__}")
    if not has_hex_prefix(value):
        raise ValueError(f"{kind} {value!r} is missing the 0x prefix")
    return value[2:]


class Quantity(int):
    """Unsigned integer carried as a 0x-prefixed hex string"""

    def __new__(cls, value: int = 0):
        return super().__new__(cls, value)

    @classmethod
    def from_json(cls, value: Any) -> 'Quantity':
        digits = _require_string(value, "quantity")

        if not digits:
            raise ValueError("quantity '0x' has no digits")
        if len(digits) > 1 and digits[0] == '0':
            raise ValueError(f"quantity {value!r} has leading zero digits")
        if len(digits) > MAX_QUANTITY_DIGITS:
            raise ValueError(f"quantity {value!r} exceeds 256 bits")
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"quantity {value!r} contains invalid hex digits")

        return cls(int(digits, 16))

    def to_json(self) -> str:
        if self < 0:
            raise ValueError(f"negative quantity {int(self)} cannot be encoded")
        return hex(int(self))

    def __repr__(self) -> str:
        return f"Quantity({int(self)})"


class HexBytes(bytes):
    """Byte string carried as a 0x-prefixed hex string"""

    # Required length in bytes, None for variable length data
    LENGTH: Optional[int] = None

    def __new__(cls, value: bytes = b''):
        if cls.LENGTH is not None and len(value) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} needs {cls.LENGTH} bytes, got {len(value)}")
        return super().__new__(cls, value)

    @classmethod
    def from_json(cls, value: Any) -> 'HexBytes':
        digits = _require_string(value, cls.__name__)

        if len(digits) % 2:
            raise ValueError(f"{cls.__name__} {value!r} has an odd number of hex digits")
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"{cls.__name__} {value!r} contains invalid hex digits")

        return cls(bytes.fromhex(digits))

    def to_json(self) -> str:
        return '0x' + self.hex()

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()!r})"


class Hash(HexBytes):
    """32-byte hash (block, transaction, keccak digest)"""

    LENGTH = 32


class Address(HexBytes):
    """20-byte account address"""

    LENGTH = 20


ZERO_ADDRESS = Address(bytes(20))
