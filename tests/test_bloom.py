from dataclasses import dataclass, field

from ethlibs.address import Address
from ethlibs.bloom import Bloom
from ethlibs.hexdata import Data32, Data256

ADDR1 = Address("0x1111111111111111111111111111111111111111")
ADDR2 = Address("0x2222222222222222222222222222222222222222")
TOPIC1 = Data32("0x" + "aa" * 32)
TOPIC2 = Data32("0x" + "bb" * 32)


@dataclass
class _Log:
    address: Address
    topics: list = field(default_factory=list)


def _bit_count(bloom):
    return sum(bin(b).count("1") for b in bloom.value().to_bytes())


def test_empty_bloom_is_all_zero():
    bloom = Bloom()
    assert bloom.value() == Data256("0x" + "00" * 256)


def test_added_address_matches():
    bloom = Bloom()
    bloom.add_address(ADDR1)
    assert bloom.matches_address(ADDR1)
    assert not bloom.matches_address(ADDR2)


def test_single_item_sets_at_most_three_bits():
    bloom = Bloom()
    bloom.add_bytes(b"payload")
    assert 1 <= _bit_count(bloom) <= 3
    assert bloom.matches_bytes(b"payload")


def test_adding_twice_is_idempotent():
    bloom = Bloom()
    bloom.add_data32(TOPIC1)
    first = bloom.value()
    bloom.add_data32(TOPIC1)
    assert bloom.value() == first
    assert bloom.matches_data32(TOPIC1)


def test_log_matching():
    bloom = Bloom()
    bloom.add_log(_Log(ADDR1, [TOPIC1]))
    assert bloom.matches_log(_Log(ADDR1, [TOPIC1]))
    assert bloom.matches_log(_Log(ADDR1, []))
    assert not bloom.matches_log(_Log(ADDR1, [TOPIC1, TOPIC2]))
    assert not bloom.matches_log(_Log(ADDR2, [TOPIC1]))


def test_union_of_items():
    combined = Bloom()
    combined.add_address(ADDR1)
    combined.add_data32(TOPIC2)

    only_address = Bloom()
    only_address.add_address(ADDR1)

    combined_bytes = combined.value().to_bytes()
    address_bytes = only_address.value().to_bytes()
    assert all(c & a == a for c, a in zip(combined_bytes, address_bytes))
    assert len(combined.value()) == 2 + 512