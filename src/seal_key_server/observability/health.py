"""Health and trust boundary endpoints for the key server.

Endpoints:
- /health: Liveness probe (200 if process is alive)
- /network: The resolved network and trusted seal package
- /metrics: Prometheus metrics endpoint
"""

import logging
from typing import TYPE_CHECKING

from aiohttp import web
from prometheus_client import REGISTRY, generate_latest

if TYPE_CHECKING:
    from seal_key_server.blockchain.networks import Network

logger = logging.getLogger(__name__)


class HealthServer:
    """HTTP server for health, network and metrics endpoints.

    Parameters
    ----------
    network : Network
        The resolved network reported on /network.
    host : str
        Host to bind to.
    port : int
        Port to bind to.
    """

    # Bind all interfaces so probes and scrapers can reach the container.
    def __init__(self, network: "Network", host: str = "0.0.0.0", port: int = 9184):  # noqa: S104
        self._network = network
        self._host = host
        self._port = port
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None

    def create_app(self) -> web.Application:
        """Build the aiohttp application with all routes registered."""
        app = web.Application()
        app.router.add_get("/health", self._handle_health)
        app.router.add_get("/network", self._handle_network)
        app.router.add_get("/metrics", self._handle_metrics)
        return app

    async def start(self) -> None:
        """Start the health server."""
        self._runner = web.AppRunner(self.create_app())
        await self._runner.setup()
        self._site = web.TCPSite(self._runner, self._host, self._port)
        await self._site.start()

        logger.info(
            "Health server started",
            extra={"host": self._host, "port": self._port},
        )

    async def stop(self) -> None:
        """Stop the health server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._site = None
            logger.info("Health server stopped")

    async def _handle_health(self, _request: web.Request) -> web.Response:
        """Handle /health endpoint (liveness probe)."""
        return web.json_response({"status": "ok"})

    async def _handle_network(self, _request: web.Request) -> web.Response:
        """Handle /network endpoint."""
        return web.json_response(self._network.to_dict())

    async def _handle_metrics(self, _request: web.Request) -> web.Response:
        """Handle /metrics endpoint (Prometheus)."""
        metrics = generate_latest(REGISTRY)
        return web.Response(
            body=metrics,
            content_type="text/plain",
            charset="utf-8",
        )
