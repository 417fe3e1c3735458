"""Main CLI entry point for crossbridge."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..config import BridgeConfig, Network
from ..exceptions import BridgeError
from .inspect import inspect_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the crossbridge CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="crossbridge: Cross-chain bridge messages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  crossbridge --inspect msg.json                   Validate a message and show its sign bytes
  crossbridge --inspect msg.json --network testnet Render addresses with the testnet prefix
  crossbridge --version                            Show version

The message file holds a JSON envelope: {"type": "crossBind", "value": {...}}
        """,
    )

    parser.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Decode and validate a message envelope and print its sign bytes",
    )

    parser.add_argument(
        "--network",
        choices=[n.name.lower() for n in Network],
        default=None,
        help="Network for native address prefixes (default: $CROSSBRIDGE_NETWORK or mainnet)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"crossbridge {__version__}",
    )

    args = parser.parse_args(argv)

    # Handle --inspect
    if args.inspect:
        file_path = Path(args.inspect)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            network = (
                Network.from_name(args.network)
                if args.network
                else BridgeConfig.from_env().network
            )
            valid = inspect_file(file_path, network)
        except (BridgeError, ValueError) as e:
            print(f"Error inspecting file: {e}", file=sys.stderr)
            return 1

        return 0 if valid else 2

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
