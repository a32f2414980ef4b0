"""Payloads of newHeads subscription notifications."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .address import Address
from .hexdata import Data, Data8, Data32, Data256
from .quantity import Quantity


class Flavor(str, Enum):
    """The client style a header came from, which decides how it is re-encoded."""

    UNKNOWN = "parity-unknown"
    GETH = "geth"
    PARITY_ETHHASH = "parity-ethhash"
    PARITY_AURA = "parity-aura"
    PARITY_CLIQUE = "parity-clique"


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _data_list(value: Any) -> list[Data]:
    if not isinstance(value, list):
        raise TypeError("expected an array of data values")
    return [Data(item) for item in value]


# JSON key -> (attribute, parser, encoding kind)
_SPEC: dict[str, tuple[str, Callable[[Any], Any], str]] = {
    "number": ("number", Quantity.from_json, "quantity"),
    "hash": ("hash", Data32, "text"),
    "parentHash": ("parent_hash", Data32, "text"),
    "sha3Uncles": ("sha3_uncles", Data32, "text"),
    "logsBloom": ("logs_bloom", Data256, "text"),
    "transactionsRoot": ("transactions_root", Data32, "text"),
    "stateRoot": ("state_root", Data32, "text"),
    "receiptsRoot": ("receipts_root", Data32, "text"),
    "miner": ("miner", Address.from_json, "address"),
    "author": ("author", Address.from_json, "address"),
    "difficulty": ("difficulty", Quantity.from_json, "quantity"),
    "extraData": ("extra_data", Data, "text"),
    "size": ("size", Quantity.from_json, "opt_quantity"),
    "gasLimit": ("gas_limit", Quantity.from_json, "quantity"),
    "gasUsed": ("gas_used", Quantity.from_json, "quantity"),
    "timestamp": ("timestamp", Quantity.from_json, "quantity"),
    "baseFeePerGas": ("base_fee_per_gas", Quantity.from_json, "opt_quantity"),
    "withdrawalsRoot": ("withdrawals_root", Data32, "opt_text"),
    "parentBeaconBlockRoot": ("parent_beacon_block_root", Data32, "opt_text"),
    "excessBlobGas": ("excess_blob_gas", Quantity.from_json, "opt_quantity"),
    "blobGasUsed": ("blob_gas_used", Quantity.from_json, "opt_quantity"),
    "nonce": ("nonce", Data8, "opt_text"),
    "mixHash": ("mix_hash", Data, "opt_text"),
    "step": ("step", _string, "opt_text"),
    "signature": ("signature", _string, "opt_text"),
    "sealFields": ("seal_fields", _data_list, "seal"),
}

_HEAD = [
    ("number", False),
    ("hash", False),
    ("parentHash", False),
    ("sha3Uncles", False),
    ("logsBloom", False),
    ("transactionsRoot", False),
    ("stateRoot", False),
    ("receiptsRoot", False),
    ("miner", False),
]

_EIP_FIELDS = [
    ("baseFeePerGas", True),
    ("withdrawalsRoot", True),
    ("parentBeaconBlockRoot", True),
    ("excessBlobGas", True),
    ("blobGasUsed", True),
]

_PARITY_BODY = [
    ("author", True),
    ("difficulty", False),
    ("extraData", False),
    ("size", False),
    ("gasLimit", False),
    ("gasUsed", False),
    ("timestamp", False),
]

# Each layout lists (key, omit when empty) in output order.
_LAYOUTS: dict[Flavor, list[tuple[str, bool]]] = {
    Flavor.GETH: _HEAD
    + [
        ("difficulty", False),
        ("extraData", False),
        ("gasLimit", False),
        ("gasUsed", False),
        ("timestamp", False),
    ]
    + _EIP_FIELDS
    + [("nonce", False), ("mixHash", False)],
    Flavor.PARITY_AURA: _HEAD
    + _PARITY_BODY
    + [("sealFields", True), ("step", True), ("signature", True)],
    Flavor.PARITY_CLIQUE: _HEAD + _PARITY_BODY + [("sealFields", True)],
    Flavor.PARITY_ETHHASH: _HEAD
    + _PARITY_BODY
    + [("nonce", False), ("mixHash", False), ("sealFields", True)],
    Flavor.UNKNOWN: _HEAD
    + [
        ("author", True),
        ("difficulty", False),
        ("extraData", False),
        ("size", True),
        ("gasLimit", False),
        ("gasUsed", False),
        ("timestamp", False),
    ]
    + _EIP_FIELDS
    + [
        ("nonce", False),
        ("mixHash", False),
        ("step", True),
        ("signature", True),
        ("sealFields", True),
    ],
}


@dataclass
class NewHeadsResult:
    """The header carried in a newHeads notification.

    It resembles a block but has no total difficulty, transactions or uncles.
    ``flavor`` records which client style it was decoded from.
    """

    number: Quantity | None = None
    hash: Data32 | None = None
    parent_hash: Data32 | None = None
    sha3_uncles: Data32 | None = None
    logs_bloom: Data256 | None = None
    transactions_root: Data32 | None = None
    state_root: Data32 | None = None
    receipts_root: Data32 | None = None
    miner: Address | None = None
    author: Address | None = None
    difficulty: Quantity | None = None
    extra_data: Data | None = None
    size: Quantity | None = None
    gas_limit: Quantity | None = None
    gas_used: Quantity | None = None
    timestamp: Quantity | None = None
    base_fee_per_gas: Quantity | None = None
    withdrawals_root: Data32 | None = None
    parent_beacon_block_root: Data32 | None = None
    excess_blob_gas: Quantity | None = None
    blob_gas_used: Quantity | None = None
    nonce: Data8 | None = None
    mix_hash: Data | None = None
    step: str | None = None
    signature: str | None = None
    seal_fields: list[Data] | None = None
    flavor: Flavor = field(default=Flavor.UNKNOWN, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NewHeadsResult":
        """Build a header from a decoded JSON object and detect its flavor."""
        if not isinstance(data, Mapping):
            raise ValueError("newHeads result must be a JSON object")

        values: dict[str, Any] = {}
        for key, (attr, parse, _kind) in _SPEC.items():
            raw = data.get(key)
            if raw is None:
                continue
            try:
                values[attr] = parse(raw)
            except (TypeError, ValueError) as err:
                raise ValueError(f"invalid {key}: {err}") from err

        result = cls(**values)
        result.flavor = result._detect_flavor()
        return result

    def _detect_flavor(self) -> Flavor:
        if self.seal_fields is None:
            return Flavor.GETH
        if self.mix_hash is not None:
            return Flavor.PARITY_ETHHASH
        if self.step is not None and self.signature is not None:
            return Flavor.PARITY_AURA
        return Flavor.PARITY_CLIQUE

    def _encode(self, key: str) -> Any:
        attr, _parse, kind = _SPEC[key]
        value = getattr(self, attr)
        if kind == "quantity":
            return value.to_json() if value is not None else "0x0"
        if kind == "text":
            return str(value) if value is not None else ""
        if kind == "address":
            return value.to_json() if value is not None else ""
        if kind == "opt_quantity":
            return None if value is None else value.to_json()
        if kind == "opt_text":
            return None if value is None else str(value)
        return None if value is None else [str(item) for item in value]

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, laid out as the original client would."""
        flavor = self.flavor
        if flavor in (Flavor.PARITY_AURA, Flavor.PARITY_CLIQUE, Flavor.PARITY_ETHHASH):
            if self.size is None:
                raise ValueError(f"size is required to encode a {flavor.value} header")

        result: dict[str, Any] = {}
        for key, omit_empty in _LAYOUTS[flavor]:
            value = self._encode(key)
            if omit_empty and (value is None or (key == "author" and value == "")):
                continue
            result[key] = value
        return result


@dataclass
class NewHeadsNotificationParams:
    """The params of a newHeads subscription notification."""

    subscription: str
    result: NewHeadsResult

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NewHeadsNotificationParams":
        """Build notification params from a decoded JSON object."""
        if not isinstance(data, Mapping):
            raise ValueError("notification params must be a JSON object")
        subscription = data.get("subscription") or ""
        if not isinstance(subscription, str):
            raise ValueError("invalid subscription: must be a string")
        result = data.get("result")
        return cls(
            subscription=subscription,
            result=NewHeadsResult.from_dict(result if result is not None else {}),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the params."""
        return {"subscription": self.subscription, "result": self.result.to_dict()}