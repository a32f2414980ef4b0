"""Event logs emitted by contract execution."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from .address import Address
from .hexdata import Data, Data32
from .quantity import Quantity

_T = TypeVar("_T")


def _optional(data: Mapping[str, Any], key: str, parse: Callable[[Any], _T]) -> _T | None:
    value = data.get(key)
    if value is None:
        return None
    try:
        return parse(value)
    except (TypeError, ValueError) as err:
        raise ValueError(f"invalid {key}: {err}") from err


def _json_or_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, Quantity):
        return value.to_json()
    return str(value)


@dataclass
class Log:
    """A single log entry as returned by JSON-RPC log queries."""

    removed: bool = False
    log_index: Quantity | None = None
    tx_index: Quantity | None = None
    tx_hash: Data32 | None = None
    block_hash: Data32 | None = None
    block_number: Quantity | None = None
    address: Address | None = None
    data: Data | None = None
    topics: list[Data32] | None = None
    tx_log_index: Quantity | None = None
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the log."""
        result: dict[str, Any] = {
            "removed": self.removed,
            "logIndex": _json_or_none(self.log_index),
            "transactionIndex": _json_or_none(self.tx_index),
            "transactionHash": _json_or_none(self.tx_hash),
            "blockHash": _json_or_none(self.block_hash),
            "blockNumber": _json_or_none(self.block_number),
            "address": self.address.to_json() if self.address is not None else "",
            "data": str(self.data) if self.data is not None else "",
            "topics": None if self.topics is None else [str(t) for t in self.topics],
        }
        if self.tx_log_index is not None:
            result["transactionLogIndex"] = self.tx_log_index.to_json()
        if self.type is not None:
            result["type"] = self.type
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Log":
        """Build a log from a decoded JSON object."""
        if not isinstance(data, Mapping):
            raise ValueError("log must be a JSON object")

        removed = data.get("removed", False)
        if removed is None:
            removed = False
        if not isinstance(removed, bool):
            raise ValueError("invalid removed: must be a boolean")

        log_type = data.get("type")
        if log_type is not None and not isinstance(log_type, str):
            raise ValueError("invalid type: must be a string")

        return cls(
            removed=removed,
            log_index=_optional(data, "logIndex", Quantity.from_json),
            tx_index=_optional(data, "transactionIndex", Quantity.from_json),
            tx_hash=_optional(data, "transactionHash", Data32),
            block_hash=_optional(data, "blockHash", Data32),
            block_number=_optional(data, "blockNumber", Quantity.from_json),
            address=_optional(data, "address", Address.from_json),
            data=_optional(data, "data", Data),
            topics=_optional(data, "topics", lambda items: [Data32(t) for t in items]),
            tx_log_index=_optional(data, "transactionLogIndex", Quantity.from_json),
            type=log_type,
        )