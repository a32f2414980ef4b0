"""Ethereum account addresses with EIP-55 checksum casing."""

from __future__ import annotations

from .hexdata import keccak256, validate_hex


def to_checksum_address(address: str) -> str:
    """Convert an address to its EIP-55 mixed-case form."""
    address = address.lower().replace("0x", "", 1)
    digest = keccak256(address.encode()).hex()

    chars = []
    for index, char in enumerate(address):
        if char > "9" and int(digest[index], 16) >= 8:
            chars.append(char.upper())
        else:
            chars.append(char)
    return "0x" + "".join(chars)


class Address(str):
    """A 20-byte account address, held in checksummed form."""

    def __new__(cls, value: str) -> "Address":
        if not isinstance(value, str) or len(value) != 42 or not value.startswith("0x"):
            raise ValueError(f"invalid address: {value}")
        return super().__new__(cls, to_checksum_address(value))

    def __repr__(self) -> str:
        return f"Address({str.__repr__(self)})"

    def to_bytes(self) -> bytes:
        """Decode the address into its 20 raw bytes."""
        return bytes.fromhex(self[2:])

    def rlp(self) -> str:
        """Return the address as a lower-cased RLP string item."""
        return self.lower()

    def to_json(self) -> str:
        """Return the lower-cased form used in JSON-RPC payloads."""
        return self.lower()

    @classmethod
    def from_json(cls, value: str) -> "Address":
        """Build an address from a decoded JSON string, validating the hex."""
        return cls(validate_hex(value, 20, "data"))