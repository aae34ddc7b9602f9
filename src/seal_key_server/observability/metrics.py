"""Prometheus metrics for the key server.

Metrics:
- seal_key_server_network_resolutions_total: Counter of network resolutions by network and outcome
- seal_key_server_network: Info about the network the server trusts
"""

from prometheus_client import Counter, Info

# Counters
NETWORK_RESOLUTIONS = Counter(
    "seal_key_server_network_resolutions_total",
    "Total number of network resolutions",
    ["network", "outcome"],
)

# Info
NETWORK_INFO = Info(
    "seal_key_server_network",
    "Resolved network and trusted seal package",
)
