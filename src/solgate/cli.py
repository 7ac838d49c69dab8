# src/solgate/cli.py
import argparse
import asyncio
import sys
from typing import List, Optional

import uvicorn

from .api.routes.blocks import parse_slot
from .api.server import create_app
from .config import GatewayConfig, load_config
from .exceptions import GatewayError
from .rpc.client import RPCClient
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

class CLI:
    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 1

        try:
            config = self.load_config(args)
            setup_logging(config.log_level)
            return args.func(args, config) or 0
        except GatewayError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='solgate: HTTP gateway for a Solana RPC node')
        parser.add_argument('--config', help='Path to a YAML config file')
        parser.add_argument('--rpc-url', dest='rpc_endpoint', help='Solana JSON-RPC endpoint')
        parser.add_argument('--timeout', dest='rpc_timeout', type=float, help='RPC timeout in seconds')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        serve = subparsers.add_parser('serve', help='Run the HTTP gateway')
        serve.add_argument('--host', help='Listen host')
        serve.add_argument('--port', type=int, help='Listen port')
        serve.set_defaults(func=self.serve)

        slot = subparsers.add_parser('slot', help='Print the latest slot')
        slot.set_defaults(func=self.latest_slot)

        block = subparsers.add_parser('block', help='Print the details of a block')
        block.add_argument('slot', help='Slot number')
        block.set_defaults(func=self.block_details)

        return parser

    def load_config(self, args) -> GatewayConfig:
        config = load_config(args.config)
        return config.with_overrides(
            rpc_endpoint=args.rpc_endpoint,
            rpc_timeout=args.rpc_timeout,
            host=getattr(args, 'host', None),
            port=getattr(args, 'port', None),
        )

    def serve(self, args, config: GatewayConfig):
        app = create_app(config=config)
        logger.info(f"Starting Solana gateway on {config.host}:{config.port} (rpc={config.rpc_endpoint})")
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())

    def latest_slot(self, args, config: GatewayConfig):
        client = RPCClient.from_config(config)
        print(asyncio.run(client.get_latest_slot()))

    def block_details(self, args, config: GatewayConfig):
        slot = parse_slot(args.slot)
        client = RPCClient.from_config(config)
        payload = asyncio.run(client.get_block_details(slot))
        print(payload.decode())

def main(argv: Optional[List[str]] = None) -> int:
    return CLI().main(sys.argv[1:] if argv is None else argv)
