"""Network resolution for the Seal key server.

The network decides two things for the lifetime of the process: the Sui full
node the server talks to, and the seal package it trusts to authorize
decryption requests. Values are resolved once at startup from plain
configuration values and are immutable afterwards.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from seal_key_server.blockchain.object_id import ObjectID
from seal_key_server.blockchain.packages import SealPackage
from seal_key_server.errors import (
    MissingCustomEndpoint,
    MissingRequiredIdentifier,
    NetworkConfigError,
    UnknownNetworkSelector,
)
from seal_key_server.observability.metrics import NETWORK_RESOLUTIONS

if TYPE_CHECKING:
    from seal_key_server.config import KeyServerConfig

logger = logging.getLogger(__name__)

DEVNET_NODE_URL = "https://fullnode.devnet.sui.io:443"
TESTNET_NODE_URL = "https://fullnode.testnet.sui.io:443"
MAINNET_NODE_URL = "https://fullnode.mainnet.sui.io:443"

NETWORK_NAMES = ("devnet", "testnet", "mainnet", "custom")


class Network(ABC):
    """A resolved Sui network and the seal package trusted on it."""

    name: ClassVar[str]

    @abstractmethod
    def node_url(self) -> str:
        """Get the full node endpoint for this network.

        Returns
        -------
        str
            The full node RPC URL.

        Raises
        ------
        MissingCustomEndpoint
            If this is a custom network without a configured endpoint.
        """
        ...

    @abstractmethod
    def seal_package_id(self) -> ObjectID:
        """Get the id of the seal package trusted on this network.

        Returns
        -------
        ObjectID
            The trusted package id.
        """
        ...

    @property
    def seal_package_defaulted(self) -> bool:
        """Whether the trusted package was inferred rather than configured."""
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "network": self.name,
            "node_url": self.node_url(),
            "seal_package_id": self.seal_package_id().to_hex(),
            "seal_package_defaulted": self.seal_package_defaulted,
        }

    @classmethod
    def from_str(cls, selector: str, config: "KeyServerConfig") -> "Network":
        """Resolve a network selector using values from a loaded config.

        Parameters
        ----------
        selector : str
            The network name (case-insensitive).
        config : KeyServerConfig
            Configuration holding the seal package and node URL overrides.

        Returns
        -------
        Network
            The resolved network.
        """
        return resolve_network(
            selector,
            seal_package=config.seal_package,
            node_url=config.node_url,
            use_default_mainnet_for_mvr=config.use_default_mainnet_for_mvr,
        )


@dataclass(frozen=True)
class Devnet(Network):
    """Sui devnet. The seal package changes often, so it has no default."""

    name: ClassVar[str] = "devnet"

    seal_package: SealPackage

    def __post_init__(self):
        if not isinstance(self.seal_package, SealPackage):
            raise MissingRequiredIdentifier(self.name)

    def node_url(self) -> str:
        return DEVNET_NODE_URL

    def seal_package_id(self) -> ObjectID:
        return self.seal_package.package_id()


@dataclass(frozen=True)
class Testnet(Network):
    """Sui testnet with the published testnet seal package."""

    name: ClassVar[str] = "testnet"

    def node_url(self) -> str:
        return TESTNET_NODE_URL

    def seal_package_id(self) -> ObjectID:
        return SealPackage.testnet().package_id()


@dataclass(frozen=True)
class Mainnet(Network):
    """Sui mainnet with the published mainnet seal package."""

    name: ClassVar[str] = "mainnet"

    def node_url(self) -> str:
        return MAINNET_NODE_URL

    def seal_package_id(self) -> ObjectID:
        return SealPackage.mainnet().package_id()


@dataclass(frozen=True)
class Custom(Network):
    """A custom deployment target.

    Attributes
    ----------
    node_url_override : str | None
        The full node endpoint. Required once the endpoint is queried.
    use_default_mainnet_for_mvr : bool | None
        Carried for MVR name resolution; unused by the key server itself.
    seal_package : SealPackage | None
        The trusted package. Falls back to the mainnet package when unset.
    """

    name: ClassVar[str] = "custom"

    node_url_override: str | None = None
    use_default_mainnet_for_mvr: bool | None = None
    seal_package: SealPackage | None = None

    def node_url(self) -> str:
        if self.node_url_override is None:
            raise MissingCustomEndpoint()
        return self.node_url_override

    def seal_package_id(self) -> ObjectID:
        # Unset package trusts the mainnet deployment
        package = self.seal_package or SealPackage.mainnet()
        return package.package_id()

    @property
    def seal_package_defaulted(self) -> bool:
        return self.seal_package is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "network": self.name,
            "node_url": self.node_url_override,
            "seal_package_id": self.seal_package_id().to_hex(),
            "seal_package_defaulted": self.seal_package_defaulted,
            "use_default_mainnet_for_mvr": self.use_default_mainnet_for_mvr,
        }


def _parse_seal_package(value: str) -> SealPackage:
    return SealPackage.custom(ObjectID.from_str(value))


def _resolve(
    selector: str,
    seal_package: str | None,
    node_url: str | None,
    use_default_mainnet_for_mvr: bool | None,
) -> Network:
    name = selector.lower()
    if name == "devnet":
        if seal_package is None:
            raise MissingRequiredIdentifier("devnet")
        return Devnet(seal_package=_parse_seal_package(seal_package))
    elif name == "testnet":
        return Testnet()
    elif name == "mainnet":
        return Mainnet()
    elif name == "custom":
        return Custom(
            node_url_override=node_url,
            use_default_mainnet_for_mvr=use_default_mainnet_for_mvr,
            seal_package=_parse_seal_package(seal_package) if seal_package is not None else None,
        )
    raise UnknownNetworkSelector(selector)


def resolve_network(
    selector: str,
    *,
    seal_package: str | None = None,
    node_url: str | None = None,
    use_default_mainnet_for_mvr: bool | None = None,
) -> Network:
    """Resolve a network selector into a network.

    Does not read the environment; callers pass the configured values.

    Parameters
    ----------
    selector : str
        One of devnet, testnet, mainnet or custom (case-insensitive).
    seal_package : str | None
        Seal package object id. Required for devnet, optional for custom,
        ignored otherwise.
    node_url : str | None
        Full node endpoint for custom networks.
    use_default_mainnet_for_mvr : bool | None
        MVR flag carried on custom networks.

    Returns
    -------
    Network
        The resolved network.

    Raises
    ------
    UnknownNetworkSelector
        If the selector is not a known network name.
    MissingRequiredIdentifier
        If devnet is selected without a seal package.
    InvalidIdentifierFormat
        If a seal package is given but is not a valid object id.
    """
    try:
        network = _resolve(selector, seal_package, node_url, use_default_mainnet_for_mvr)
    except NetworkConfigError as e:
        # Keep label cardinality bounded for arbitrary selectors
        label = selector.lower() if selector.lower() in NETWORK_NAMES else "unknown"
        NETWORK_RESOLUTIONS.labels(network=label, outcome=e.kind).inc()
        raise

    NETWORK_RESOLUTIONS.labels(network=network.name, outcome="ok").inc()
    logger.debug("Resolved network %s", network.name)
    return network
