"""Hex-encoded unsigned integer quantities."""

from __future__ import annotations

import string
from typing import Any

from .hexdata import validate_hex

_HEX_DIGITS = frozenset(string.hexdigits)


class Quantity:
    """A non-negative integer written as a 0x-prefixed hex string."""

    __slots__ = ("_value", "_text")

    def __init__(self, value: str = "0x0") -> None:
        if not isinstance(value, str):
            raise TypeError("quantity values must be strings")
        if not value.startswith("0x"):
            raise ValueError("quantity values must start with 0x")
        if value == "0x":
            raise ValueError("quantity values must include at least one digit")

        digits = value[2:]
        bad = next((c for c in digits if c not in _HEX_DIGITS), None)
        if bad is not None:
            raise ValueError(f"invalid hex character {bad!r} in quantity {value}")

        text = value
        if value.startswith("0x0") and value != "0x0":
            # A leading zero is tolerated on input, as RLP-derived values carry one.
            text = value.replace("0x0", "0x", 1)

        self._text = text
        self._value = int(digits, 16)

    @classmethod
    def from_int(cls, value: int) -> "Quantity":
        """Build a quantity from a non-negative integer."""
        if value < 0:
            raise ValueError("quantity values cannot be negative")
        return cls(f"0x{value:x}")

    @classmethod
    def from_rlp(cls, value: Any) -> "Quantity":
        """Build a quantity from an RLP string item."""
        if isinstance(value, list):
            raise ValueError("cannot convert RLP list to Quantity")
        if value in ("0x", "0x00"):
            return cls("0x0")
        if value.startswith("0x0"):
            return cls(value.replace("0x0", "0x", 1))
        return cls(value)

    @classmethod
    def from_json(cls, value: Any) -> "Quantity":
        """Build a quantity from a decoded JSON string."""
        return cls(validate_hex(value, None, "quantity"))

    def to_json(self) -> str:
        """Return the string used in JSON-RPC payloads."""
        return self._text

    def rlp(self) -> str:
        """Return the minimal big-endian byte encoding as an RLP string item."""
        if self._value == 0:
            return "0x"
        length = (self._value.bit_length() + 7) // 8
        return "0x" + self._value.to_bytes(length, "big").hex()

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Quantity({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Quantity):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)