"""Configuration errors raised while resolving the key server network.

Every error here is an operator or deployment defect. Nothing in the package
recovers from them; the startup routine logs the error and exits.
"""


class NetworkConfigError(Exception):
    """Base class for network resolution errors.

    Attributes
    ----------
    kind : str
        Stable tag identifying the error, suitable for logs and JSON output.
    """

    kind = "network_config_error"


class UnknownNetworkSelector(NetworkConfigError):
    """The network selector is not one of devnet, testnet, mainnet, custom."""

    kind = "unknown_network_selector"

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Unknown network: {selector}")


class MissingRequiredIdentifier(NetworkConfigError):
    """A network that requires a seal package id was resolved without one."""

    kind = "missing_required_identifier"

    def __init__(self, network: str, variable: str = "SEAL_PACKAGE"):
        self.network = network
        self.variable = variable
        super().__init__(f"{variable} must be set for the {network} network")


class InvalidIdentifierFormat(NetworkConfigError, ValueError):
    """An object identifier string is present but cannot be parsed."""

    kind = "invalid_identifier_format"

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid object id {value!r}: {reason}")


class MissingCustomEndpoint(NetworkConfigError):
    """The node URL of a custom network was requested but never configured."""

    kind = "missing_custom_endpoint"

    def __init__(self, variable: str = "NODE_URL"):
        self.variable = variable
        super().__init__(f"Custom network must have node_url set ({variable})")
