#!/usr/bin/env python3
"""
EthRPC Codec
ethrpc/codec.py - Parameter encoding and result decoding
"""

import json
from typing import Any, Dict, List, Sequence, Union, get_args, get_origin

_PLAIN_TYPES = (str, dict, list)


def encode_value(value: Any) -> Any:
    """Convert a parameter into plain JSON values.

    Objects exposing ``to_json()`` (quantities, hex data, request records)
    are converted first; containers are walked recursively.
    """
    to_json = getattr(value, 'to_json', None)
    if callable(to_json):
        return encode_value(to_json())
    if isinstance(value, dict):
        return {key: encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    return value


def encode_params(params: Sequence[Any]) -> List[Any]:
    return [encode_value(param) for param in params]


def dumps(payload: Dict[str, Any]) -> bytes:
    """Serialize an envelope to compact UTF-8 JSON.

    Raises TypeError or ValueError for values JSON cannot represent,
    including NaN and infinities.
    """
    return json.dumps(payload, separators=(',', ':'), allow_nan=False).encode('utf-8')


def decode_result(result_type: Any, value: Any) -> Any:
    """Decode a parsed JSON value into ``result_type``.

    ``None`` or ``typing.Any`` return the parsed value as is. A JSON null
    decodes to None for every target. Raises ValueError when the value does
    not fit the target and TypeError when the target itself is unsupported.
    """
    if value is None:
        return None
    if result_type is None or result_type is Any:
        return value

    origin = get_origin(result_type)
    if origin is Union:
        members = [arg for arg in get_args(result_type) if arg is not type(None)]
        if len(members) != 1:
            raise TypeError(f"unsupported result type {result_type!r}")
        return decode_result(members[0], value)

    if origin is list:
        if not isinstance(value, list):
            raise ValueError(f"expected a JSON array, got {type(value).__name__}")
        args = get_args(result_type)
        item_type = args[0] if args else Any
        return [decode_result(item_type, item) for item in value]

    if origin is dict:
        if not isinstance(value, dict):
            raise ValueError(f"expected a JSON object, got {type(value).__name__}")
        return value

    from_json = getattr(result_type, 'from_json', None)
    if callable(from_json):
        return from_json(value)

    if result_type is bool:
        if not isinstance(value, bool):
            raise ValueError(f"expected a JSON boolean, got {value!r}")
        return value

    if result_type is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected a JSON integer, got {value!r}")
        return value

    if result_type is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a JSON number, got {value!r}")
        return float(value)

    if result_type in _PLAIN_TYPES:
        if not isinstance(value, result_type):
            raise ValueError(f"expected {result_type.__name__}, got {type(value).__name__}")
        return value

    raise TypeError(f"unsupported result type {result_type!r}")
