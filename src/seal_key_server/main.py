#!/usr/bin/env python3
"""Seal key server.

Entry point for the key server process.
"""

import asyncio
import signal
import sys

from pydantic import ValidationError

from seal_key_server.blockchain.networks import Network
from seal_key_server.cli import create_parser, run_cli
from seal_key_server.config import KeyServerConfig
from seal_key_server.errors import NetworkConfigError
from seal_key_server.observability.health import HealthServer
from seal_key_server.observability.logging import configure_logging, get_logger, set_network
from seal_key_server.observability.metrics import NETWORK_INFO

logger = get_logger(__name__)


def parse_args():
    """Parse command line arguments."""
    return create_parser().parse_args()


def load_config() -> KeyServerConfig:
    """Load configuration from the environment, exiting on invalid values."""
    try:
        return KeyServerConfig()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)


def resolve_startup_network(config: KeyServerConfig) -> Network:
    """Resolve the network the server will trust, exiting on any error.

    The node URL is queried here as well, so a custom network without an
    endpoint refuses to start rather than failing on first use.

    Parameters
    ----------
    config : KeyServerConfig
        The loaded configuration.

    Returns
    -------
    Network
        The resolved network.
    """
    try:
        network = Network.from_str(config.network, config)
        node_url = network.node_url()
    except NetworkConfigError as e:
        logger.error(
            "network configuration error",
            error=str(e),
            kind=e.kind,
            selector=config.network,
        )
        sys.exit(1)

    seal_package_id = network.seal_package_id().to_hex()
    set_network(network.name)
    NETWORK_INFO.info(
        {"network": network.name, "node_url": node_url, "seal_package_id": seal_package_id}
    )

    logger.info("network resolved", node_url=node_url, seal_package_id=seal_package_id)
    if network.seal_package_defaulted:
        logger.warning("SEAL_PACKAGE not set; trusting the mainnet seal package")

    return network


async def run_service() -> None:
    """Run the key server (long-running mode).

    Resolves the network and starts the HealthServer, then waits for a
    shutdown signal.
    """
    config = load_config()
    configure_logging(level=config.log_level, log_format=config.log_format)

    logger.info("key server starting")
    network = resolve_startup_network(config)

    shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def on_shutdown_signal(sig_name: str) -> None:
        logger.info("received signal, initiating shutdown", signal=sig_name)
        shutdown_event.set()

    loop.add_signal_handler(signal.SIGTERM, lambda: on_shutdown_signal("SIGTERM"))
    loop.add_signal_handler(signal.SIGINT, lambda: on_shutdown_signal("SIGINT"))

    health_server = HealthServer(network, port=config.metrics_port)
    await health_server.start()
    logger.info("health server listening", port=config.metrics_port)

    logger.info("key server ready")

    await shutdown_event.wait()

    logger.info("key server shutting down")
    await health_server.stop()
    logger.info("key server shutdown complete")


async def main() -> None:
    """Main entry point for the key server."""
    args = parse_args()

    if args.command and args.command != "run":
        exit_code = run_cli(args)
        if exit_code >= 0:
            sys.exit(exit_code)
        create_parser().print_help()
        sys.exit(0)

    await run_service()


def cli() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
