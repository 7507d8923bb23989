#!/usr/bin/env python3
"""
EthRPC Envelopes
ethrpc/request.py - JSON-RPC 2.0 request/response envelopes and id sequencing
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .errors import RemoteError

JSONRPC_VERSION = "2.0"

# Marks a response that carries no "result" member at all
MISSING = object()


@dataclass
class Request:
    """Outgoing JSON-RPC request envelope"""
    method: str
    id: int
    params: List[Any] = field(default_factory=list)
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            'jsonrpc': self.jsonrpc,
            'method': self.method,
            'id': self.id,
            'params': self.params
        }


@dataclass
class Response:
    """Incoming JSON-RPC response envelope.

    ``result`` keeps the raw parsed JSON; it is only decoded into the
    caller's type after the envelope has been validated.
    """
    jsonrpc: str
    id: Optional[int]
    result: Any = MISSING
    error: Optional[RemoteError] = None

    @property
    def has_result(self) -> bool:
        return self.result is not MISSING

    @classmethod
    def from_json(cls, obj: Any) -> 'Response':
        """Validate member types of a parsed response body"""
        if not isinstance(obj, dict):
            raise ValueError(f"response must be a JSON object, got {type(obj).__name__}")

        jsonrpc = obj.get('jsonrpc')
        if jsonrpc is None:
            jsonrpc = ''
        if not isinstance(jsonrpc, str):
            raise ValueError(f"jsonrpc member must be a string, got {jsonrpc!r}")

        response_id = obj.get('id')
        if response_id is not None and (isinstance(response_id, bool) or not isinstance(response_id, int)):
            raise ValueError(f"id member must be an integer, got {response_id!r}")

        error = None
        if obj.get('error') is not None:
            error = RemoteError.from_json(obj['error'])

        return cls(
            jsonrpc=jsonrpc,
            id=response_id,
            result=obj.get('result', MISSING),
            error=error
        )


class RequestSequencer:
    """Issues request envelopes with unique, increasing ids.

    The counter is bumped under a lock before each envelope is built, so
    with the default initial value of 0 the first id issued is 1.
    Ids are consumed whether or not the request is ever sent.
    """

    def __init__(self, initial: int = 0):
        self._counter = initial
        self._lock = threading.Lock()

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._counter

    def next(self, method: str, params: Sequence[Any] = ()) -> Request:
        with self._lock:
            self._counter += 1
            request_id = self._counter

        return Request(method=method, id=request_id, params=list(params))
