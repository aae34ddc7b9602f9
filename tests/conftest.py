"""Pytest configuration and fixtures for key server tests."""

import os
from dataclasses import dataclass
from typing import ClassVar

import pytest

from seal_key_server.blockchain.networks import Network
from seal_key_server.blockchain.object_id import ObjectID
from seal_key_server.blockchain.packages import SealPackage

DEVNET_PACKAGE = "0x" + "ab" * 32


@dataclass(frozen=True)
class TestCluster(Network):
    """Local test cluster network. Only constructed by tests."""

    __test__ = False

    name: ClassVar[str] = "testcluster"

    seal_package: SealPackage

    def node_url(self) -> str:
        # Available from the cluster handle itself, not from configuration
        raise NotImplementedError("TestCluster has no configured node URL")

    def seal_package_id(self) -> ObjectID:
        return self.seal_package.package_id()

    def to_dict(self) -> dict:
        return {
            "network": self.name,
            "node_url": None,
            "seal_package_id": self.seal_package_id().to_hex(),
            "seal_package_defaulted": False,
        }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear key server environment variables before each test."""
    env_names = ("NETWORK", "SEAL_PACKAGE", "NODE_URL", "USE_DEFAULT_MAINNET_FOR_MVR")
    for key in list(os.environ.keys()):
        if key in env_names or key.startswith("KEY_SERVER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def devnet_package():
    """A valid devnet seal package id."""
    return DEVNET_PACKAGE


@pytest.fixture
def test_cluster():
    """A TestCluster network bound to a fixed package."""
    return TestCluster(seal_package=SealPackage.custom(ObjectID.from_str("0x" + "cd" * 32)))
