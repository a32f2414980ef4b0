"""EIP-2930 access lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .address import Address
from .hexdata import Data32


@dataclass
class AccessListEntry:
    """An address together with the storage slots it touches."""

    address: Address
    storage_keys: list[Data32] = field(default_factory=list)


class AccessList(list):
    """A list of access list entries."""

    def rlp(self) -> list[Any]:
        """Return the list as nested RLP items: ``[[address, [keys...]], ...]``."""
        return [
            [entry.address.rlp(), [key.rlp() for key in entry.storage_keys]]
            for entry in self
        ]

    @classmethod
    def from_rlp(cls, value: list[Any]) -> "AccessList":
        """Decode nested RLP items into an access list."""
        entries = cls()
        for index, item in enumerate(value):
            if not isinstance(item, list) or not 1 <= len(item) <= 2:
                raise ValueError(f"invalid access list entry {index}")
            try:
                address = Address(item[0])
            except (TypeError, ValueError) as err:
                raise ValueError(
                    f"invalid access list entry address {index}: {err}"
                ) from err

            keys: list[Data32] = []
            if len(item) == 2:
                raw_keys = item[1] if isinstance(item[1], list) else []
                for key_index, key in enumerate(raw_keys):
                    try:
                        keys.append(Data32(key))
                    except (TypeError, ValueError) as err:
                        raise ValueError(
                            f"invalid access list entry {index} storage key "
                            f"{key_index}: {err}"
                        ) from err
            entries.append(AccessListEntry(address=address, storage_keys=keys))
        return entries