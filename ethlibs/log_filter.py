"""Log filters as passed to eth_getLogs and eth_newFilter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .address import Address
from .block_number import BlockNumberOrTag
from .hexdata import Data32
from .logs import Log

_MAX_TOPIC_SLOTS = 4


def _parse_addresses(value: Any) -> list[Address] | None:
    if value is None:
        return None
    if isinstance(value, str) and value != "":
        return [Address(value)]
    if isinstance(value, list):
        return [Address.from_json(item) for item in value]
    raise ValueError("address must be a string or an array of strings")


def _parse_topic_slot(value: Any) -> list[Data32]:
    if value is None:
        return []
    if isinstance(value, str):
        return [Data32(value)]
    if isinstance(value, list):
        return [Data32(item) for item in value]
    raise ValueError("topic entries must be a string, an array or null")


def _parse_topics(value: Any) -> list[list[Data32]] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError("topics must be an array")

    slots = [_parse_topic_slot(item) for item in value]
    # Trailing wildcard slots carry no meaning and are dropped.
    while slots and not slots[-1]:
        slots.pop()

    if not slots:
        return None
    if len(slots) > _MAX_TOPIC_SLOTS:
        raise ValueError("only up to four topic slots may be specified")
    return slots


@dataclass
class LogFilter:
    """Criteria that select logs by block, address and topics.

    An empty topic slot matches anything in that position.
    """

    from_block: BlockNumberOrTag | None = None
    to_block: BlockNumberOrTag | None = None
    block_hash: Data32 | None = None
    address: list[Address] | None = None
    topics: list[list[Data32]] | None = None

    def matches(self, log: Log) -> bool:
        """Return True if the log satisfies every criterion of the filter.

        Tags in ``from_block`` and ``to_block`` are ignored; callers should
        replace them with concrete block numbers first.
        """
        return self._matches_block(log) and self._matches_address(log) and self._matches_topics(log)

    def _matches_block(self, log: Log) -> bool:
        if self.block_hash is not None and (
            log.block_hash is None or str(self.block_hash) != str(log.block_hash)
        ):
            return False

        number = int(log.block_number) if log.block_number is not None else 0
        if self.from_block is not None:
            start = self.from_block.quantity
            if start is not None and number < int(start):
                return False
        if self.to_block is not None:
            end = self.to_block.quantity
            if end is not None and number > int(end):
                return False
        return True

    def _matches_address(self, log: Log) -> bool:
        if not self.address:
            return True
        return any(str(candidate) == str(log.address) for candidate in self.address)

    def _matches_topics(self, log: Log) -> bool:
        if not self.topics:
            return True
        log_topics = log.topics or []
        for position, slot in enumerate(self.topics):
            if not slot:
                continue
            if len(log_topics) <= position:
                return False
            if not any(str(t) == str(log_topics[position]) for t in slot):
                return False
        return True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogFilter":
        """Build a filter from a decoded JSON object.

        ``address`` may be a single string or an array; each ``topics`` entry
        may be a topic, an array of alternatives, or null.
        """
        if not isinstance(data, Mapping):
            raise ValueError("log filter must be a JSON object")

        def block(key: str) -> BlockNumberOrTag | None:
            value = data.get(key)
            return None if value is None else BlockNumberOrTag.from_json(value)

        try:
            block_hash = data.get("blockHash")
            return cls(
                from_block=block("fromBlock"),
                to_block=block("toBlock"),
                block_hash=None if block_hash is None else Data32(block_hash),
                address=_parse_addresses(data.get("address")),
                topics=_parse_topics(data.get("topics")),
            )
        except TypeError as err:
            raise ValueError(str(err)) from err