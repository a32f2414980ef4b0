"""Block numbers and named block tags used as JSON-RPC block parameters."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .quantity import Quantity


class Tag(str, Enum):
    """A named position in the chain."""

    LATEST = "latest"
    """The head block."""
    EARLIEST = "earliest"
    """The genesis block."""
    SAFE = "safe"
    """Lags the head by around four seconds and is less likely to reorg."""
    FINALIZED = "finalized"
    """Lags by one or two epochs; reorgs only through a hard fork."""
    PENDING = "pending"
    """Pending state and transactions."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> "Tag":
        raise ValueError(f"invalid tag name {value}")


class BlockNumberOrTag:
    """Either a hex block number or one of the named tags."""

    __slots__ = ("_number", "_tag")

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("block number or tag must be a string")
        if value in Tag._value2member_map_:
            self._tag: Tag | None = Tag(value)
            self._number: Quantity | None = None
        else:
            self._tag = None
            self._number = Quantity(value)

    @property
    def tag(self) -> Tag | None:
        """The tag, or None when this is a block number."""
        return self._tag

    @property
    def quantity(self) -> Quantity | None:
        """The block number, or None when this is a tag."""
        return self._number

    def to_json(self) -> str:
        """Return the string used in JSON-RPC payloads."""
        if self._tag is not None:
            return self._tag.value
        return self._number.to_json()

    @classmethod
    def from_json(cls, value: Any) -> "BlockNumberOrTag":
        """Build from a decoded JSON string."""
        return cls(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BlockNumberOrTag):
            return self._tag == other._tag and self._number == other._number
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._tag, self._number))

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"BlockNumberOrTag({self.to_json()!r})"