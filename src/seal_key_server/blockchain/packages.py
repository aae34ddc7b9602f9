"""Seal package deployments trusted by the key server."""

from dataclasses import dataclass
from enum import Enum

from seal_key_server.blockchain.object_id import ObjectID

# Published seal package ids
TESTNET_PACKAGE_ID = ObjectID.from_str(
    "0x4016869413374eaa71df2a043d1660ed7bc927ab7962831f8b07efbc7efdb2c3"
)
MAINNET_PACKAGE_ID = ObjectID.from_str(
    "0xa212c4c6c7183b911d0be8768f4cb1df7a383025b5d0ba0c014009f0f30f5f8d"
)


class SealPackageKind(str, Enum):
    """Named seal package deployments."""

    TESTNET = "testnet"
    MAINNET = "mainnet"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SealPackage:
    """An on-chain seal package deployment.

    Use the ``testnet()``, ``mainnet()`` and ``custom()`` constructors rather
    than building instances directly.

    Attributes
    ----------
    kind : SealPackageKind
        Which deployment this is.
    object_id : ObjectID | None
        The package id for custom deployments, None for the published ones.
    """

    kind: SealPackageKind
    object_id: ObjectID | None = None

    def __post_init__(self):
        if (self.kind == SealPackageKind.CUSTOM) != (self.object_id is not None):
            raise ValueError("Only custom seal packages carry an object id")

    @classmethod
    def testnet(cls) -> "SealPackage":
        return cls(SealPackageKind.TESTNET)

    @classmethod
    def mainnet(cls) -> "SealPackage":
        return cls(SealPackageKind.MAINNET)

    @classmethod
    def custom(cls, object_id: ObjectID) -> "SealPackage":
        return cls(SealPackageKind.CUSTOM, object_id)

    def package_id(self) -> ObjectID:
        """Get the on-chain id of the package.

        Returns
        -------
        ObjectID
            The package object id.
        """
        if self.kind == SealPackageKind.TESTNET:
            return TESTNET_PACKAGE_ID
        if self.kind == SealPackageKind.MAINNET:
            return MAINNET_PACKAGE_ID
        return self.object_id
