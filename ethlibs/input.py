"""Transaction input data."""

from __future__ import annotations

from typing import Any

from .hexdata import Data4, validate_hex


class Input(str):
    """A 0x-prefixed transaction input payload."""

    def __new__(cls, value: str) -> "Input":
        if not isinstance(value, str) or not value.startswith("0x"):
            raise ValueError(f"invalid input: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Input({str.__repr__(self)})"

    @classmethod
    def from_json(cls, value: Any) -> "Input":
        """Build an input from a decoded JSON string, validating the hex."""
        return cls(validate_hex(value, None, "data"))

    def to_bytes(self) -> bytes:
        """Decode the payload into raw bytes."""
        return bytes.fromhex(self[2:])

    def rlp(self) -> str:
        """Return the payload as a lower-cased RLP string item."""
        return self.lower()

    def function_selector(self) -> Data4 | None:
        """Return the leading four-byte selector, or None if too short."""
        if len(self) >= 10:
            return Data4(self[:10])
        return None