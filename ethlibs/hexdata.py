"""Hex-encoded binary data values of fixed or arbitrary length."""

from __future__ import annotations

import string
from typing import ClassVar, Iterable

from Crypto.Hash import keccak

_HEX_DIGITS = frozenset(string.hexdigits)


def keccak256(data: bytes) -> bytes:
    """Return the legacy Keccak-256 digest of ``data``."""
    hasher = keccak.new(digest_bits=256)
    hasher.update(bytes(data))
    return hasher.digest()


def validate_hex(value: str, size: int | None, kind: str) -> str:
    """Check that ``value`` is a 0x-prefixed hex string of ``size`` bytes.

    A ``size`` of ``None`` accepts any length. Returns ``value`` unchanged.
    """
    if not isinstance(value, str):
        raise TypeError(f"{kind} values must be strings, got {type(value).__name__}")
    if not value.startswith("0x"):
        raise ValueError(f"{kind} types must start with 0x")

    if size is not None:
        data_size = (len(value) - 2) // 2
        if data_size != size:
            raise ValueError(
                f"{kind} type size mismatch, expected {size} got {data_size}"
            )

    for index, char in enumerate(value[2:], start=2):
        if char not in _HEX_DIGITS:
            raise ValueError(
                f"invalid hex string, invalid character '{char}' at index {index}"
            )

    return value


class Data(str):
    """A 0x-prefixed hex string of arbitrary length."""

    size: ClassVar[int | None] = None

    def __new__(cls, value: str) -> "Data":
        return super().__new__(cls, validate_hex(value, cls.size, "data"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    def to_bytes(self) -> bytes:
        """Decode the hex digits into raw bytes."""
        return bytes.fromhex(self[2:])

    def hash(self) -> "Data32":
        """Return the Keccak-256 hash of the decoded bytes."""
        return Data32("0x" + keccak256(self.to_bytes()).hex())

    def rlp(self) -> str:
        """Return the value as an RLP string item."""
        return str(self)


class Data4(Data):
    """Four bytes of hex data, such as a function selector."""

    size = 4


class Data8(Data):
    """Eight bytes of hex data, such as a block nonce."""

    size = 8


class Data20(Data):
    """Twenty bytes of hex data."""

    size = 20


class Data32(Data):
    """Thirty-two bytes of hex data, such as a hash or a log topic."""

    size = 32


class Data256(Data):
    """Two hundred fifty-six bytes of hex data, such as a logs bloom."""

    size = 256


Hash = Data32
Topic = Data32


def hashes_rlp(hashes: Iterable[Data32]) -> list[str]:
    """Return a sequence of hashes as an RLP list of string items."""
    return [str(h) for h in hashes]