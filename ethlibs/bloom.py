"""The 2048-bit logs bloom filter used in block headers and receipts."""

from __future__ import annotations

from typing import Iterable, Protocol

from .address import Address
from .hexdata import Data32, Data256, keccak256


class _LogLike(Protocol):
    address: Address
    topics: Iterable[Data32]


def _bloom_bits(data: bytes) -> list[int]:
    digest = keccak256(data)
    return [((digest[i] << 8) + digest[i + 1]) & 2047 for i in (0, 2, 4)]


class Bloom:
    """A logs bloom filter that values can be added to and tested against."""

    def __init__(self) -> None:
        self._bits = bytearray(256)

    def value(self) -> Data256:
        """Return the filter as 256 bytes of hex data."""
        return Data256("0x" + self._bits.hex())

    def add_log(self, log: _LogLike) -> None:
        """Add a log's address and each of its topics."""
        self.add_address(log.address)
        for topic in log.topics:
            self.add_data32(topic)

    def add_address(self, address: Address) -> None:
        self.add_bytes(address.to_bytes())

    def add_data32(self, data: Data32) -> None:
        self.add_bytes(data.to_bytes())

    def add_bytes(self, data: bytes) -> None:
        for pos in _bloom_bits(data):
            self._bits[255 - (pos >> 3)] |= 1 << (pos & 7)

    def matches_log(self, log: _LogLike) -> bool:
        """Return True if the log's address and all its topics may be present."""
        if not self.matches_address(log.address):
            return False
        return all(self.matches_data32(topic) for topic in log.topics)

    def matches_address(self, address: Address) -> bool:
        return self.matches_bytes(address.to_bytes())

    def matches_data32(self, data: Data32) -> bool:
        return self.matches_bytes(data.to_bytes())

    def matches_bytes(self, data: bytes) -> bool:
        return all(
            self._bits[255 - (pos >> 3)] & (1 << (pos & 7)) for pos in _bloom_bits(data)
        )