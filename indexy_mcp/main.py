"""
Indexy MCP Server - Main Entry Point

Startup order matters: configuration is validated and the wallet is loaded
before the stdio loop accepts any tool call. Any failure here is fatal and
exits with status 1.
"""

import argparse
import asyncio
import sys
from typing import Mapping, Optional

from .api import IndexyClient
from .auth import create_auth
from .config import Config
from .errors import ConfigError
from .mcp import run_mcp_server


def startup(config: Config):
    """Validate config and build the auth strategy (loads the wallet)"""
    auth = create_auth(config)
    print(f"🔑 Auth mode: {auth.mode.value}", file=sys.stderr)
    return auth


async def serve(config: Config):
    auth = startup(config)
    async with IndexyClient.from_config(config, auth) as client:
        print(f"🚀 Indexy MCP server started ({config.API_URL})", file=sys.stderr)
        await run_mcp_server(client)


def main(argv: Optional[list] = None, env: Optional[Mapping[str, str]] = None):
    parser = argparse.ArgumentParser(description="Indexy Agent API MCP server")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate configuration and wallet, then exit without serving",
    )
    args = parser.parse_args(argv)

    try:
        config = Config.from_env() if env is None else Config(env)
        if args.check:
            auth = startup(config)
            if auth.wallet is not None:
                print(f"✅ Configuration OK - wallet {auth.wallet.address}", file=sys.stderr)
            else:
                print("✅ Configuration OK", file=sys.stderr)
            return
        asyncio.run(serve(config))
    except ConfigError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n🛑 Shutting down...", file=sys.stderr)


if __name__ == "__main__":
    main()
