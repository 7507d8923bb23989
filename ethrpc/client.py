#!/usr/bin/env python3
"""
EthRPC Client
ethrpc/client.py - Client for Ethereum JSON-RPC calls
"""

import json
import logging
import requests
from typing import Any, Dict, List, Optional

from .codec import decode_result, dumps, encode_params
from .config import ClientConfig
from .errors import DecodingError, EncodingError, ProtocolMismatchError, TransportError
from .hexutil import Address, Hash, HexBytes, Quantity
from .request import JSONRPC_VERSION, RequestSequencer, Response
from .types import EstimateGasRequest, TransactionReceipt, TransactionRequest

JSON_HEADERS = {'Content-Type': 'application/json'}


class EthRPCClient:
    """Client for an Ethereum node's JSON-RPC API.

    ``http_client`` is any object with a requests-style
    ``post(url, data=..., headers=...)``. When omitted the client creates
    and owns a ``requests.Session``. One client may be shared between
    threads; only request id allocation is serialized.
    """

    def __init__(self, url: str, http_client: Any = None, timeout: Optional[float] = None):
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be a positive number of seconds, got {timeout!r}")

        self.url = url
        self.timeout = timeout
        self._owns_http_client = http_client is None
        self.http_client = http_client if http_client is not None else requests.Session()
        self.sequencer = RequestSequencer()
        self.logger = logging.getLogger("EthRPCClient")

    @classmethod
    def from_config(cls, config: ClientConfig, http_client: Any = None) -> 'EthRPCClient':
        return cls(config.url, http_client=http_client, timeout=config.timeout)

    def close(self):
        """Close the HTTP session if this client created it"""
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> 'EthRPCClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def call_method(self, result_type: Any, method: str, *params: Any) -> Any:
        """Make one JSON-RPC call and decode its result into ``result_type``.

        Raises EncodingError, TransportError, DecodingError,
        ProtocolMismatchError or the server's RemoteError.
        """
        request = self.sequencer.next(method, params)
        self.logger.debug(f"Calling {method} (id={request.id})")

        try:
            request.params = encode_params(request.params)
            payload = dumps(request.to_dict())
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot encode {method} request: {e}") from e

        body = self._post(method, payload)

        try:
            response = Response.from_json(json.loads(body))
        except (ValueError, RecursionError) as e:
            self.logger.warning(f"Invalid JSON-RPC response to {method}: {e}")
            raise DecodingError(f"Invalid JSON-RPC response: {e}") from e

        if response.error is not None:
            self.logger.debug(f"{method} returned RPC error {response.error.code}: {response.error.message}")
            raise response.error

        if response.id != request.id or response.jsonrpc != JSONRPC_VERSION:
            self.logger.warning(
                f"{method} response framing mismatch: sent id={request.id}, "
                f"got id={response.id} jsonrpc={response.jsonrpc!r}"
            )
            raise ProtocolMismatchError()

        if not response.has_result:
            raise DecodingError(f"{method} response carries neither result nor error")

        try:
            return decode_result(result_type, response.result)
        except (ValueError, RecursionError) as e:
            self.logger.warning(f"Cannot decode {method} result: {e}")
            raise DecodingError(f"Cannot decode {method} result: {e}") from e

    def _post(self, method: str, payload: bytes) -> bytes:
        """POST the payload and read the whole response body"""
        kwargs: Dict[str, Any] = {'data': payload, 'headers': JSON_HEADERS}
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout

        response = None
        try:
            response = self.http_client.post(self.url, **kwargs)
            return response.content
        except (requests.exceptions.RequestException, OSError) as e:
            self.logger.warning(f"{method} request to {self.url} failed: {e}")
            raise TransportError(f"Request failed: {e}") from e
        finally:
            if response is not None:
                response.close()

    # Web3 / Net Methods
    def web3_client_version(self) -> str:
        """Get the node client version string"""
        return self.call_method(str, 'web3_clientVersion')

    def web3_sha3(self, data: str) -> Hash:
        """Keccak-256 of the given hex data"""
        return self.call_method(Hash, 'web3_sha3', data)

    def net_version(self) -> str:
        """Get the network id"""
        return self.call_method(str, 'net_version')

    def net_listening(self) -> bool:
        return self.call_method(bool, 'net_listening')

    def net_peer_count(self) -> Quantity:
        return self.call_method(Quantity, 'net_peerCount')

    # Node State Methods
    def eth_protocol_version(self) -> str:
        return self.call_method(str, 'eth_protocolVersion')

    def eth_syncing(self) -> bool:
        return self.call_method(bool, 'eth_syncing')

    def eth_mining(self) -> bool:
        return self.call_method(bool, 'eth_mining')

    def eth_coinbase(self) -> Address:
        return self.call_method(Address, 'eth_coinbase')

    def eth_accounts(self) -> List[Address]:
        """Get addresses owned by the node"""
        return self.call_method(List[Address], 'eth_accounts')

    def eth_hashrate(self) -> Quantity:
        return self.call_method(Quantity, 'eth_hashrate')

    def eth_gas_price(self) -> Quantity:
        """Get the current gas price in wei"""
        return self.call_method(Quantity, 'eth_gasPrice')

    def eth_block_number(self) -> Quantity:
        """Get the number of the most recent block"""
        return self.call_method(Quantity, 'eth_blockNumber')

    # Mining Methods
    def eth_submit_hashrate(self, hashrate: Hash, id: Hash) -> bool:
        return self.call_method(bool, 'eth_submitHashrate', hashrate, id)

    def eth_get_work(self) -> List[str]:
        return self.call_method(List[str], 'eth_getWork')

    def eth_submit_work(self, nonce: bytes, header: Hash, mix: Hash) -> bool:
        """Submit a proof-of-work solution (8-byte nonce)"""
        if len(nonce) != 8:
            raise ValueError(f"nonce must be 8 bytes, got {len(nonce)}")
        return self.call_method(bool, 'eth_submitWork', HexBytes(nonce), header, mix)

    # Account / State Methods
    def eth_estimate_gas(self, req: EstimateGasRequest) -> Quantity:
        return self.call_method(Quantity, 'eth_estimateGas', req)

    def eth_get_balance(self, addr: str, block: str) -> Quantity:
        """Get account balance in wei at the given block"""
        return self.call_method(Quantity, 'eth_getBalance', addr, block)

    def eth_sign(self, addr: str, msg: str) -> HexBytes:
        return self.call_method(HexBytes, 'eth_sign', addr, msg)

    def eth_get_code(self, addr: str, block: str) -> HexBytes:
        return self.call_method(HexBytes, 'eth_getCode', addr, block)

    def eth_get_storage_at(self, addr: str, pos: str, block: str) -> HexBytes:
        return self.call_method(HexBytes, 'eth_getStorageAt', addr, pos, block)

    def eth_get_transaction_count(self, addr: str, block: str) -> Quantity:
        """Get the number of transactions sent from an address"""
        return self.call_method(Quantity, 'eth_getTransactionCount', addr, block)

    # Block Methods
    def eth_get_block_by_number(self, number: str, full: bool) -> Optional[Dict[str, Any]]:
        """Get block by number, None when unknown"""
        return self.call_method(dict, 'eth_getBlockByNumber', number, full)

    def eth_get_block_by_hash(self, hash: str, full: bool) -> Optional[Dict[str, Any]]:
        return self.call_method(dict, 'eth_getBlockByHash', hash, full)

    def eth_get_uncle_count_by_number(self, block: int) -> Quantity:
        return self.call_method(Quantity, 'eth_getUncleCountByNumber', Quantity(block))

    def eth_get_uncle_count_by_hash(self, hash: Hash) -> Quantity:
        return self.call_method(Quantity, 'eth_getUncleCountByHash', hash)

    def eth_get_block_transaction_count_by_number(self, block: str) -> Quantity:
        return self.call_method(Quantity, 'eth_getBlockTransactionCountByNumber', block)

    def eth_get_block_transaction_count_by_hash(self, hash: str) -> Quantity:
        return self.call_method(Quantity, 'eth_getBlockTransactionCountByHash', hash)

    # Transaction Methods
    def eth_get_transaction_by_block_number_and_index(self, blk: str, idx: str) -> Optional[Dict[str, Any]]:
        return self.call_method(dict, 'eth_getTransactionByBlockNumberAndIndex', blk, idx)

    def eth_get_transaction_by_block_hash_and_index(self, blk: str, idx: str) -> Optional[Dict[str, Any]]:
        return self.call_method(dict, 'eth_getTransactionByBlockHashAndIndex', blk, idx)

    def eth_get_transaction_by_hash(self, txn: str) -> Optional[Dict[str, Any]]:
        """Get transaction by hash, None when unknown"""
        return self.call_method(dict, 'eth_getTransactionByHash', txn)

    def eth_get_transaction_receipt(self, txn: str) -> Optional[TransactionReceipt]:
        """Get the receipt of a mined transaction, None while pending"""
        return self.call_method(TransactionReceipt, 'eth_getTransactionReceipt', txn)

    def eth_send_transaction(self, req: TransactionRequest) -> Hash:
        """Send a transaction signed by the node"""
        return self.call_method(Hash, 'eth_sendTransaction', req)

    def eth_send_raw_transaction(self, raw: str) -> Hash:
        return self.call_method(Hash, 'eth_sendRawTransaction', raw)

    def eth_call(self, req: TransactionRequest, block: str = 'latest') -> HexBytes:
        """Execute a message call without creating a transaction"""
        return self.call_method(HexBytes, 'eth_call', req, block)

    # Compiler Methods
    def eth_get_compilers(self) -> List[str]:
        return self.call_method(List[str], 'eth_getCompilers')

    def eth_compile_solidity(self, code: str) -> HexBytes:
        return self.call_method(HexBytes, 'eth_compileSolidity', code)

    def eth_compile_lll(self, code: str) -> HexBytes:
        return self.call_method(HexBytes, 'eth_compileLLL', code)

    def eth_compile_serpent(self, code: str) -> HexBytes:
        return self.call_method(HexBytes, 'eth_compileSerpent', code)
