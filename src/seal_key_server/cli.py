"""CLI subcommands for key server operations.

Provides command-line interface for:
- Network inspection (show, check)
- Starting the service (run)
"""

import argparse
import json
import sys

from pydantic import ValidationError

from seal_key_server.blockchain.networks import Network
from seal_key_server.config import KeyServerConfig
from seal_key_server.errors import NetworkConfigError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="seal-key-server",
        description="Seal key server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Network subcommand
    network_parser = subparsers.add_parser("network", help="Network operations")
    network_sub = network_parser.add_subparsers(dest="network_command")

    show_parser = network_sub.add_parser("show", help="Show the resolved network")
    check_parser = network_sub.add_parser(
        "check", help="Check that the network is fully configured for serving"
    )
    for sub in (show_parser, check_parser):
        sub.add_argument(
            "--network",
            dest="network",
            default=None,
            help="Network to resolve (default: NETWORK environment variable)",
        )

    # Run subcommand (start service)
    subparsers.add_parser("run", help="Start the key server")

    return parser


class CLIContext:
    """Shared context for CLI commands."""

    def __init__(self, config: KeyServerConfig, json_output: bool = False):
        self.config = config
        self.json_output = json_output

    def resolve(self, selector: str | None) -> Network:
        """Resolve the network, preferring an explicit selector over config."""
        return Network.from_str(
            self.config.network if selector is None else selector, self.config
        )

    def output(self, data: dict) -> None:
        """Output data in the appropriate format."""
        if self.json_output:
            print(json.dumps(data, indent=2))
        else:
            self._print_formatted(data)

    def _print_formatted(self, data: dict, indent: int = 0) -> None:
        """Print data in human-readable format."""
        prefix = "  " * indent
        for key, value in data.items():
            if isinstance(value, dict):
                print(f"{prefix}{key}:")
                self._print_formatted(value, indent + 1)
            else:
                print(f"{prefix}{key}: {value}")


def _error(ctx: CLIContext, e: NetworkConfigError) -> int:
    ctx.output({"error": str(e), "kind": e.kind})
    return 1


# Network commands


def cmd_network_show(ctx: CLIContext, selector: str | None = None) -> int:
    """Show the resolved network."""
    try:
        network = ctx.resolve(selector)
    except NetworkConfigError as e:
        return _error(ctx, e)

    ctx.output(network.to_dict())
    return 0


def cmd_network_check(ctx: CLIContext, selector: str | None = None) -> int:
    """Check that the network resolves and has a usable endpoint."""
    try:
        network = ctx.resolve(selector)
        node_url = network.node_url()
    except NetworkConfigError as e:
        return _error(ctx, e)

    result = network.to_dict()
    result["node_url"] = node_url
    result["status"] = "ok"
    if network.seal_package_defaulted:
        result["warning"] = "SEAL_PACKAGE not set; trusting the mainnet seal package"
    ctx.output(result)
    return 0


def run_cli(args: argparse.Namespace) -> int:
    """Run CLI command based on parsed arguments.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code: 0 for success, positive for error, -1 signals caller
        to show help (no CLI command specified).
    """
    try:
        config = KeyServerConfig()
    except ValidationError as e:
        if args.json:
            print(json.dumps({"error": f"Configuration error: {e}"}))
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    ctx = CLIContext(config, json_output=args.json)

    if args.command == "network":
        if args.network_command == "show":
            return cmd_network_show(ctx, args.network)
        elif args.network_command == "check":
            return cmd_network_check(ctx, args.network)
        else:
            print("Usage: seal-key-server network [show|check]", file=sys.stderr)
            return 1

    return -1
