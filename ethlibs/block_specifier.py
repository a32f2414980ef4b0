"""Block specifiers accepted by JSON-RPC methods (EIP-1898)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .block_number import BlockNumberOrTag, Tag
from .hexdata import Data32
from .quantity import Quantity


@dataclass
class BlockSpecifier:
    """A block chosen by number, tag or hash.

    ``raw`` selects the plain-string JSON form over the EIP-1898 object form.
    """

    number: Quantity | None = None
    tag: Tag | None = None
    hash: Data32 | None = None
    require_canonical: bool = False
    raw: bool = False

    @classmethod
    def from_string(cls, value: str) -> "BlockSpecifier":
        """Parse a block hash, a tag or a hex block number."""
        try:
            return cls(hash=Data32(value), require_canonical=False)
        except ValueError:
            pass
        parsed = BlockNumberOrTag(value)
        return cls(number=parsed.quantity, tag=parsed.tag)

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> "BlockSpecifier":
        """Parse an EIP-1898 object with ``blockHash`` or ``blockNumber``."""
        if "blockHash" in value:
            spec = cls(hash=Data32(value["blockHash"]))
            if "requireCanonical" in value:
                canonical = value["requireCanonical"]
                if not isinstance(canonical, bool):
                    raise ValueError('"requireCanonical" must be a boolean value')
                spec.require_canonical = canonical
            return spec
        if "blockNumber" in value:
            return cls(number=Quantity(value["blockNumber"]))
        raise ValueError('expected either a "blockHash" or a "blockNumber" value')

    @classmethod
    def parse(cls, value: Any) -> "BlockSpecifier":
        """Parse a string or a mapping in any form EIP-1898 allows."""
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise TypeError(
            "the input value must be an EIP-1898 compatible object (string or map)"
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> "BlockSpecifier":
        """Parse a JSON document holding a block specifier."""
        return cls.parse(json.loads(text))

    def to_json(self) -> str | dict[str, Any]:
        """Return the JSON-ready value of this specifier."""
        if self.tag is not None:
            return self.tag.value
        if self.hash is not None:
            if self.raw:
                return str(self.hash)
            return {"blockHash": str(self.hash), "requireCanonical": self.require_canonical}
        if self.number is not None:
            if self.raw:
                return str(self.number)
            return {"blockNumber": str(self.number)}
        raise ValueError("cannot marshal an empty block specifier")