"""Sui object identifiers."""

import string
from dataclasses import dataclass

from seal_key_server.errors import InvalidIdentifierFormat

OBJECT_ID_LENGTH = 32

_HEX_LENGTH = OBJECT_ID_LENGTH * 2
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class ObjectID:
    """A 32-byte Sui object identifier.

    Attributes
    ----------
    value : bytes
        The raw identifier bytes.
    """

    value: bytes

    def __post_init__(self):
        if len(self.value) != OBJECT_ID_LENGTH:
            raise InvalidIdentifierFormat(
                self.value.hex(), f"expected {OBJECT_ID_LENGTH} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_str(cls, s: str) -> "ObjectID":
        """Parse an object id from its hex representation.

        Accepts a ``0x`` literal with up to 64 hex digits (short literals such
        as ``0x2`` are left-padded), or exactly 64 hex digits without prefix.

        Parameters
        ----------
        s : str
            The string to parse.

        Returns
        -------
        ObjectID
            The parsed identifier.

        Raises
        ------
        InvalidIdentifierFormat
            If the string is not a valid object id.
        """
        if s.startswith("0x"):
            digits = s[2:]
            if not digits:
                raise InvalidIdentifierFormat(s, "no hex digits after 0x prefix")
            if len(digits) > _HEX_LENGTH:
                raise InvalidIdentifierFormat(s, f"more than {_HEX_LENGTH} hex digits")
            digits = digits.rjust(_HEX_LENGTH, "0")
        else:
            digits = s
            if len(digits) != _HEX_LENGTH:
                raise InvalidIdentifierFormat(
                    s, f"expected {_HEX_LENGTH} hex digits or a 0x-prefixed literal"
                )

        if not all(c in _HEX_DIGITS for c in digits):
            raise InvalidIdentifierFormat(s, "contains non-hex characters")

        return cls(bytes.fromhex(digits))

    def to_hex(self) -> str:
        """Return the canonical ``0x``-prefixed lowercase hex form."""
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.to_hex()
