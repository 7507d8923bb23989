#!/usr/bin/env python3
"""
EthRPC Stub Node
ethrpc/stub_node.py - Minimal JSON-RPC 2.0 server answering canned Ethereum calls

Used for local development and end-to-end tests of the client. Handlers
receive the request params and return a JSON-serializable result; raising
StubRPCError produces a JSON-RPC error response instead.
"""

import json
import argparse
import time
import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from flask import Flask, request, jsonify
from werkzeug.serving import make_server

from . import __version__, setup_logging

Handler = Callable[[List[Any]], Any]


class StubRPCError(Exception):
    """Raised by a handler to answer with a JSON-RPC error object"""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


class StubNodeServer:
    """JSON-RPC server with a pluggable method table"""

    def __init__(self, host: str = "127.0.0.1", port: int = 8545,
                 handlers: Optional[Dict[str, Handler]] = None):
        self.host = host
        self.port = port

        # Canned chain state served by the default handlers
        self.network_id = "1337"
        self.block_number = 0
        self.accounts = ['0x' + '11' * 20, '0x' + '22' * 20]
        self.balances: Dict[str, int] = {self.accounts[0]: 10 ** 18}

        self.received: List[Dict[str, Any]] = []
        self._received_lock = threading.Lock()

        self._server = None
        self._thread: Optional[threading.Thread] = None

        self.app = Flask(__name__)
        self.logger = logging.getLogger("EthRPCStubNode")

        self._setup_routes()

        # RPC method mapping
        self.rpc_methods: Dict[str, Handler] = {
            'web3_clientVersion': self._client_version,
            'net_version': self._net_version,
            'net_listening': self._net_listening,
            'eth_blockNumber': self._block_number,
            'eth_chainId': self._chain_id,
            'eth_accounts': self._accounts,
            'eth_getBalance': self._get_balance,
            'stub_echo': self._echo,
        }
        if handlers:
            self.rpc_methods.update(handlers)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/rpc"

    def register(self, method: str, handler: Handler):
        """Add or replace the handler for a method"""
        self.rpc_methods[method] = handler

    def received_ids(self) -> List[Any]:
        with self._received_lock:
            return [envelope.get('id') for envelope in self.received]

    def _setup_routes(self):
        """Setup Flask routes"""

        @self.app.route('/rpc', methods=['POST'])
        def handle_rpc():
            return self._handle_rpc_request()

        @self.app.route('/', methods=['POST'])
        def handle_root_rpc():
            return self._handle_rpc_request()

        @self.app.route('/health', methods=['GET'])
        def health_check():
            return jsonify({
                'status': 'healthy',
                'service': 'EthRPC Stub Node',
                'version': __version__,
                'methods': sorted(self.rpc_methods),
                'timestamp': time.time()
            })

    def _handle_rpc_request(self):
        """Handle JSON-RPC requests"""
        try:
            request_data = json.loads(request.get_data())
        except ValueError:
            return self._create_error_response(None, -32700, "Parse error")

        if not isinstance(request_data, dict):
            return self._create_error_response(None, -32600, "Invalid Request")

        with self._received_lock:
            self.received.append(request_data)

        # Validate JSON-RPC format
        if not all(key in request_data for key in ['jsonrpc', 'method', 'id']):
            return self._create_error_response(
                request_data.get('id'), -32600, "Invalid Request"
            )

        method = request_data['method']
        params = request_data.get('params', [])
        request_id = request_data['id']

        if not isinstance(params, list):
            return self._create_error_response(request_id, -32602, "Invalid params")

        handler = self.rpc_methods.get(method)
        if handler is None:
            return self._create_error_response(request_id, -32601, "Method not found")

        try:
            result = handler(params)
        except StubRPCError as e:
            return self._create_error_response(request_id, e.code, e.message, e.data)
        except Exception as e:
            self.logger.error(f"RPC method error in {method}: {e}")
            return self._create_error_response(request_id, -32603, str(e))

        return self._create_success_response(request_id, result)

    def _create_success_response(self, request_id: Any, result: Any):
        return jsonify({
            'jsonrpc': '2.0',
            'id': request_id,
            'result': result
        })

    def _create_error_response(self, request_id: Any, code: int, message: str, data: Any = None):
        error = {'code': code, 'message': message}
        if data is not None:
            error['data'] = data
        return jsonify({
            'jsonrpc': '2.0',
            'id': request_id,
            'error': error
        })

    # Default RPC methods
    def _client_version(self, params: List) -> str:
        return f"EthRPCStubNode/v{__version__}/python"

    def _net_version(self, params: List) -> str:
        return self.network_id

    def _net_listening(self, params: List) -> bool:
        return True

    def _block_number(self, params: List) -> str:
        return hex(self.block_number)

    def _chain_id(self, params: List) -> str:
        return hex(int(self.network_id))

    def _accounts(self, params: List) -> List[str]:
        return list(self.accounts)

    def _get_balance(self, params: List) -> str:
        if len(params) < 1:
            raise StubRPCError(-32602, "missing address parameter")

        address = params[0]
        if not isinstance(address, str) or not address.startswith('0x') or len(address) != 42:
            raise StubRPCError(-32000, "invalid address")

        return hex(self.balances.get(address.lower(), 0))

    def _echo(self, params: List) -> List[Any]:
        return params

    def start_background(self) -> 'StubNodeServer':
        """Serve on a daemon thread; port 0 binds a free port"""
        self._server = make_server(self.host, self.port, self.app, threaded=True)
        self.port = self._server.server_port

        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

        self.logger.info(f"Stub node listening on {self.url}")
        return self

    def shutdown(self):
        """Stop a server started with start_background"""
        if self._server is None:
            return

        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join(timeout=5)

        self._server = None
        self._thread = None
        self.logger.info("Stub node stopped")

    def start(self):
        """Serve in the foreground until interrupted"""
        print("🚀 Starting EthRPC Stub Node")
        print("=" * 60)
        print(f"🌐 RPC URL: {self.url}")
        print(f"🏥 Health Check: http://{self.host}:{self.port}/health")
        print(f"📋 Methods: {', '.join(sorted(self.rpc_methods))}")
        print("=" * 60)
        print("Press Ctrl+C to stop the server")
        print()

        self.app.run(host=self.host, port=self.port, debug=False)


def main():
    parser = argparse.ArgumentParser(description="EthRPC Stub Node")
    parser.add_argument("--host", default="127.0.0.1", help="Host address")
    parser.add_argument("--port", type=int, default=8545, help="Port number")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()

    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO))

    server = StubNodeServer(args.host, args.port)

    try:
        server.start()
    except KeyboardInterrupt:
        print("\n🛑 Shutting down stub node...")


if __name__ == "__main__":
    main()
