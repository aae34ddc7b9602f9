"""Sui network and seal package resolution."""

from .networks import Custom, Devnet, Mainnet, Network, Testnet, resolve_network
from .object_id import ObjectID
from .packages import SealPackage

__all__ = [
    "Custom",
    "Devnet",
    "Mainnet",
    "Network",
    "ObjectID",
    "SealPackage",
    "Testnet",
    "resolve_network",
]
