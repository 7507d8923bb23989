#!/usr/bin/env python3
"""
EthRPC Value Tests
tests/test_values.py - Hex encodings, result decoding and record types
"""

import sys
import os
import unittest
from typing import Any, Dict, List, Optional, Union

# Add parent directory to path to import ethrpc
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ethrpc import (
    Quantity,
    HexBytes,
    Hash,
    Address,
    ZERO_ADDRESS,
    TransactionRequest,
    TransactionReceipt,
    Log,
    decode_result,
    encode_params
)


class TestQuantity(unittest.TestCase):
    """Test suite for 0x quantities"""

    def test_decode(self):
        """Test valid quantities"""
        self.assertEqual(Quantity.from_json('0x0'), 0)
        self.assertEqual(Quantity.from_json('0x10'), 16)
        self.assertEqual(Quantity.from_json('0xFF'), 255)
        self.assertEqual(Quantity.from_json('0x' + 'f' * 64), 2 ** 256 - 1)

    def test_reject_malformed(self):
        """Test malformed quantities raise ValueError"""
        for raw in ['0x', '0x01', '10', 'ff', '0xzz', '0x1_0', '0x1\n', '0x' + '1' * 65, 16, None, True]:
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    Quantity.from_json(raw)

    def test_encode(self):
        """Test minimal hex encoding"""
        self.assertEqual(Quantity(0).to_json(), '0x0')
        self.assertEqual(Quantity(21000).to_json(), '0x5208')

        with self.assertRaises(ValueError):
            Quantity(-5).to_json()

    def test_behaves_like_int(self):
        """Test decoded quantities are plain ints for arithmetic"""
        value = Quantity.from_json('0x2')
        self.assertEqual(value * 3, 6)
        self.assertIsInstance(value, int)


class TestHexBytes(unittest.TestCase):
    """Test suite for 0x data, hashes and addresses"""

    def test_decode(self):
        """Test valid data strings"""
        self.assertEqual(HexBytes.from_json('0x'), b'')
        self.assertEqual(HexBytes.from_json('0x00ff'), b'\x00\xff')
        self.assertEqual(HexBytes.from_json('0XABcd'), b'\xab\xcd')

    def test_reject_malformed(self):
        """Test odd length, missing prefix and bad digits"""
        for raw in ['0x123', 'abcd', '0xgg', '0x12 34', '0x1\n', 1234, None]:
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    HexBytes.from_json(raw)

    def test_fixed_lengths(self):
        """Test Hash and Address enforce their length"""
        self.assertEqual(len(Hash.from_json('0x' + 'ab' * 32)), 32)
        self.assertEqual(len(Address.from_json('0x' + 'ab' * 20)), 20)

        with self.assertRaises(ValueError):
            Hash.from_json('0x' + 'ab' * 20)
        with self.assertRaises(ValueError):
            Address.from_json('0x' + 'ab' * 32)
        with self.assertRaises(ValueError):
            Address(b'\x01')

    def test_string_forms(self):
        """Test str and JSON forms are 0x hex"""
        address = Address(b'\xaa' * 20)
        self.assertEqual(str(address), '0x' + 'aa' * 20)
        self.assertEqual(address.to_json(), str(address))
        self.assertEqual(str(ZERO_ADDRESS), '0x' + '00' * 20)
        self.assertEqual(repr(HexBytes(b'\x01')), "HexBytes('0x01')")


class TestDecodeResult(unittest.TestCase):
    """Test suite for decoding results into caller types"""

    def test_plain_types(self):
        """Test JSON scalar and container targets"""
        self.assertEqual(decode_result(str, '3'), '3')
        self.assertIs(decode_result(bool, False), False)
        self.assertEqual(decode_result(int, 7), 7)
        self.assertEqual(decode_result(float, 7), 7.0)
        self.assertEqual(decode_result(dict, {'a': 1}), {'a': 1})
        self.assertEqual(decode_result(list, [1]), [1])

    def test_type_mismatches(self):
        """Test mismatched JSON types raise ValueError"""
        cases = [(str, 3), (bool, 1), (int, True), (int, 1.5), (float, 'x'), (dict, []), (list, {})]
        for result_type, value in cases:
            with self.subTest(result_type=result_type, value=value):
                with self.assertRaises(ValueError):
                    decode_result(result_type, value)

    def test_raw_targets(self):
        """Test None and Any pass the parsed value through"""
        value = {'nested': [1, 'two']}
        self.assertIs(decode_result(None, value), value)
        self.assertIs(decode_result(Any, value), value)

    def test_null_decodes_to_none(self):
        """Test null results are None whatever the target"""
        for result_type in [str, bool, Quantity, Hash, List[str], TransactionReceipt]:
            with self.subTest(result_type=result_type):
                self.assertIsNone(decode_result(result_type, None))

    def test_generic_targets(self):
        """Test List, Dict and Optional targets"""
        self.assertEqual(decode_result(List[Quantity], ['0x1', '0x2']), [1, 2])
        self.assertEqual(decode_result(Optional[Quantity], '0x3'), 3)
        self.assertEqual(decode_result(Dict[str, Any], {'k': 'v'}), {'k': 'v'})

        with self.assertRaises(ValueError):
            decode_result(List[str], 'not a list')
        with self.assertRaises(ValueError):
            decode_result(List[Address], ['0x12'])

    def test_unsupported_target(self):
        """Test unsupported targets raise TypeError"""
        with self.assertRaises(TypeError):
            decode_result(set, [1])
        with self.assertRaises(TypeError):
            decode_result(Union[int, str], 1)


class TestEncodeParams(unittest.TestCase):
    """Test suite for parameter conversion"""

    def test_nested_values(self):
        """Test to_json hooks apply inside containers"""
        params = encode_params([
            Quantity(255),
            [Hash(bytes(32))],
            {'value': Quantity(1), 'flag': True},
            ('latest', None)
        ])

        self.assertEqual(params, [
            '0xff',
            ['0x' + '00' * 32],
            {'value': '0x1', 'flag': True},
            ['latest', None]
        ])

    def test_plain_values_unchanged(self):
        """Test JSON values pass through"""
        self.assertEqual(encode_params(['0xabc', 'latest', 1, False]), ['0xabc', 'latest', 1, False])


class TestRecords(unittest.TestCase):
    """Test suite for request objects and receipts"""

    def test_contract_creation_request(self):
        """Test to and value are present as null when unset"""
        req = TransactionRequest(from_address='0x' + '11' * 20, data=b'\x60\x60')

        self.assertEqual(req.to_json(), {
            'from': '0x' + '11' * 20,
            'to': None,
            'value': None,
            'data': '0x6060'
        })

    def test_gas_price_encoding(self):
        """Test quantities in transaction requests"""
        req = TransactionRequest(to=ZERO_ADDRESS, gas_price=10 ** 9, value=0)

        payload = req.to_json()
        self.assertEqual(payload['gasPrice'], '0x3b9aca00')
        self.assertEqual(payload['value'], '0x0')
        self.assertEqual(payload['to'], '0x' + '00' * 20)

    def test_receipt_from_json(self):
        """Test full receipt decoding"""
        receipt = TransactionReceipt.from_json({
            'transactionHash': '0x' + '01' * 32,
            'transactionIndex': '0x0',
            'blockHash': '0x' + '02' * 32,
            'blockNumber': '0x1b4',
            'from': '0x' + '03' * 20,
            'to': None,
            'contractAddress': '0x' + '04' * 20,
            'cumulativeGasUsed': '0x33bc',
            'gasUsed': '0x4dc',
            'logsBloom': '0x' + '00' * 256,
            'status': '0x0',
            'logs': [{
                'logIndex': '0x1',
                'blockNumber': '0x1b4',
                'address': '0x' + '05' * 20,
                'data': '0x',
                'topics': ['0x' + '06' * 32]
            }]
        })

        self.assertEqual(receipt.block_number, 436)
        self.assertIsNone(receipt.to)
        self.assertEqual(str(receipt.contract_address), '0x' + '04' * 20)
        self.assertEqual(len(receipt.logs_bloom), 256)
        self.assertFalse(receipt.succeeded)
        self.assertIsInstance(receipt.logs[0], Log)
        self.assertEqual(receipt.logs[0].log_index, 1)
        self.assertEqual(receipt.logs[0].topics, [b'\x06' * 32])

    def test_receipt_rejects_bad_fields(self):
        """Test malformed receipt members raise ValueError"""
        with self.assertRaises(ValueError):
            TransactionReceipt.from_json({'blockNumber': 436})
        with self.assertRaises(ValueError):
            TransactionReceipt.from_json({'logs': 'none'})
        with self.assertRaises(ValueError):
            TransactionReceipt.from_json('receipt')

    def test_root_receipt_status(self):
        """Test receipts without status report unknown success"""
        receipt = TransactionReceipt.from_json({'root': '0x' + '07' * 32})
        self.assertIsNone(receipt.succeeded)


if __name__ == '__main__':
    unittest.main()
