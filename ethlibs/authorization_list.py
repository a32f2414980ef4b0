"""EIP-7702 set-code authorization lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .address import Address
from .quantity import Quantity


@dataclass
class SetCodeAuthorization:
    """A signed authorization to set an account's code."""

    chain_id: Quantity
    address: Address
    nonce: Quantity
    v: Quantity
    r: Quantity
    s: Quantity


def _quantity(item: Any, index: int, what: str) -> Quantity:
    try:
        return Quantity.from_rlp(item)
    except (TypeError, ValueError) as err:
        raise ValueError(f"invalid authorization {index} {what}: {err}") from err


class AuthorizationList(list):
    """A list of set-code authorizations."""

    def rlp(self) -> list[Any]:
        """Return the list as nested RLP items."""
        return [
            [
                auth.chain_id.rlp(),
                auth.address.rlp(),
                auth.nonce.rlp(),
                auth.v.rlp(),
                auth.r.rlp(),
                auth.s.rlp(),
            ]
            for auth in self
        ]

    @classmethod
    def from_rlp(cls, value: list[Any]) -> "AuthorizationList":
        """Decode nested RLP items into an authorization list."""
        result = cls()
        for index, item in enumerate(value):
            if not isinstance(item, list) or len(item) < 6:
                raise ValueError("invalid authorization")

            chain_id = _quantity(item[0], index, "chain ID")
            try:
                address = Address(item[1])
            except (TypeError, ValueError) as err:
                raise ValueError(f"invalid authorization {index} address: {err}") from err

            result.append(
                SetCodeAuthorization(
                    chain_id=chain_id,
                    address=address,
                    nonce=_quantity(item[2], index, "nonce"),
                    v=_quantity(item[3], index, "V"),
                    r=_quantity(item[4], index, "R"),
                    s=_quantity(item[5], index, "S"),
                )
            )
        return result