#!/usr/bin/env python3
"""
EthRPC Records
ethrpc/types.py - Request objects and decoded node records
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .hexutil import Address, Hash, HexBytes, Quantity, ZERO_ADDRESS


def _quantity(value: Optional[int]) -> Optional[str]:
    if value is None:
        return None
    return Quantity(value).to_json()


def _optional(decoder, obj: Dict[str, Any], key: str):
    value = obj.get(key)
    if value is None:
        return None
    return decoder(value)


@dataclass
class EstimateGasRequest:
    """Call object for eth_estimateGas"""
    to: str = ""

    def to_json(self) -> Dict[str, Any]:
        payload = {}
        if self.to:
            payload['to'] = str(self.to)
        return payload


ESTIMATE_TRANSACTION_GAS_REQUEST = EstimateGasRequest(to=str(ZERO_ADDRESS))
ESTIMATE_CONTRACT_GAS_REQUEST = EstimateGasRequest(to="")


@dataclass
class TransactionRequest:
    """Transaction object for eth_sendTransaction and eth_call.

    ``to`` and ``value`` are always sent (null when unset, as for contract
    creation); the remaining fields are left out when unset.
    """
    from_address: Optional[Union[Address, str]] = None
    to: Optional[Union[Address, str]] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    value: Optional[int] = None
    data: Optional[Union[HexBytes, bytes]] = None
    nonce: Optional[int] = None

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}

        if self.from_address is not None:
            payload['from'] = str(self.from_address)
        payload['to'] = str(self.to) if self.to is not None else None
        if self.gas is not None:
            payload['gas'] = _quantity(self.gas)
        if self.gas_price is not None:
            payload['gasPrice'] = _quantity(self.gas_price)
        payload['value'] = _quantity(self.value)
        if self.data:
            payload['data'] = HexBytes(self.data).to_json()
        if self.nonce is not None:
            payload['nonce'] = _quantity(self.nonce)

        return payload


@dataclass
class Log:
    """Event log entry of a transaction receipt"""
    log_index: Optional[int] = None
    block_number: Optional[int] = None
    block_hash: Optional[Hash] = None
    transaction_hash: Optional[Hash] = None
    transaction_index: Optional[int] = None
    address: Optional[Address] = None
    data: Optional[HexBytes] = None
    topics: List[HexBytes] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Any) -> 'Log':
        if not isinstance(obj, dict):
            raise ValueError(f"log must be a JSON object, got {type(obj).__name__}")

        topics = obj.get('topics') or []
        if not isinstance(topics, list):
            raise ValueError("log topics must be a JSON array")

        return cls(
            log_index=_optional(Quantity.from_json, obj, 'logIndex'),
            block_number=_optional(Quantity.from_json, obj, 'blockNumber'),
            block_hash=_optional(Hash.from_json, obj, 'blockHash'),
            transaction_hash=_optional(Hash.from_json, obj, 'transactionHash'),
            transaction_index=_optional(Quantity.from_json, obj, 'transactionIndex'),
            address=_optional(Address.from_json, obj, 'address'),
            data=_optional(HexBytes.from_json, obj, 'data'),
            topics=[HexBytes.from_json(topic) for topic in topics]
        )


@dataclass
class TransactionReceipt:
    """Receipt returned by eth_getTransactionReceipt"""
    transaction_hash: Optional[Hash] = None
    transaction_index: Optional[int] = None
    block_hash: Optional[Hash] = None
    block_number: Optional[int] = None
    from_address: Optional[Address] = None
    to: Optional[Address] = None
    contract_address: Optional[Address] = None
    cumulative_gas_used: Optional[int] = None
    gas_used: Optional[int] = None
    logs: List[Log] = field(default_factory=list)
    logs_bloom: Optional[HexBytes] = None
    root: Optional[Hash] = None
    status: Optional[int] = None

    @property
    def succeeded(self) -> Optional[bool]:
        """Post-Byzantium status flag, None for root-based receipts"""
        if self.status is None:
            return None
        return self.status == 1

    @classmethod
    def from_json(cls, obj: Any) -> 'TransactionReceipt':
        if not isinstance(obj, dict):
            raise ValueError(f"receipt must be a JSON object, got {type(obj).__name__}")

        logs = obj.get('logs') or []
        if not isinstance(logs, list):
            raise ValueError("receipt logs must be a JSON array")

        return cls(
            transaction_hash=_optional(Hash.from_json, obj, 'transactionHash'),
            transaction_index=_optional(Quantity.from_json, obj, 'transactionIndex'),
            block_hash=_optional(Hash.from_json, obj, 'blockHash'),
            block_number=_optional(Quantity.from_json, obj, 'blockNumber'),
            from_address=_optional(Address.from_json, obj, 'from'),
            to=_optional(Address.from_json, obj, 'to'),
            contract_address=_optional(Address.from_json, obj, 'contractAddress'),
            cumulative_gas_used=_optional(Quantity.from_json, obj, 'cumulativeGasUsed'),
            gas_used=_optional(Quantity.from_json, obj, 'gasUsed'),
            logs=[Log.from_json(entry) for entry in logs],
            logs_bloom=_optional(HexBytes.from_json, obj, 'logsBloom'),
            root=_optional(Hash.from_json, obj, 'root'),
            status=_optional(Quantity.from_json, obj, 'status')
        )
