import json

import pytest

from ethlibs.hexdata import (
    Data,
    Data4,
    Data8,
    Data20,
    Data32,
    Data256,
    Hash,
    Topic,
    hashes_rlp,
    keccak256,
    validate_hex,
)


def test_constructors_keep_value():
    assert Data("0x") == "0x"
    assert Data8("0x0011223344556677") == "0x0011223344556677"
    topic = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    assert Topic(topic) == topic


@pytest.mark.parametrize(
    "cls, value",
    [
        (Data256, "0x"),
        (Data256, "0x00"),
        (Data, "0xfoodbarr"),
        (Data, "badf00d"),
    ],
)
def test_invalid_values_raise(cls, value):
    with pytest.raises(ValueError):
        cls(value)


def test_empty_data_hash():
    d = Data("0x")
    assert str(d) == "0x"
    assert d.hash() == "0xc5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_data8_hash():
    d = Data8("0x1122334455667788")
    assert d.hash() == "0x1360118a9c9fd897720cf4e26de80683f402dd7c28e000aa98ea51b85c60161c"


def test_data20_hash():
    d = Data20("0x1122334455667788990011223344556677889900")
    assert d.hash() == "0x0a2fb1c97af2de8f8ac02909daafec285f8ebc8817cb7dc7c606ea892eece1be"


def test_data32_hash_and_aliases():
    value = "0x1122334455667788990011223344556677889900112233445566778899001122"
    d = Data32(value)
    assert d.hash() == "0xf88d9246fe5c20db67700433fa1048f8dcd2204cd4ab5c52f36f1d027e51505c"
    assert Hash(str(d)) == value
    assert Topic(str(d)) == value
    assert isinstance(d.hash(), Data32)


def test_data256_hash():
    d = Data256("0x" + "00" * 256)
    assert d.hash() == "0xd397b3b043d87fcd6fad1291ff0bfd16401c274896d8c63a923727f077b8e0b5"


def test_size_mismatch_message():
    with pytest.raises(ValueError, match="expected 4 got 2"):
        Data4("0x1234")


def test_invalid_character_message():
    with pytest.raises(ValueError, match="invalid character 'z' at index 3"):
        validate_hex("0x1z", None, "data")


def test_validate_hex_rejects_non_string():
    with pytest.raises(TypeError):
        validate_hex(1234, None, "data")


def test_to_bytes():
    assert Data("0x1234").to_bytes() == b"\x12\x34"
    assert Data("0x").to_bytes() == b""


def test_rlp_is_string_item():
    assert Data("0xABcd").rlp() == "0xABcd"
    assert Data4("0x2fbbe334").rlp() == "0x2fbbe334"


def test_hashes_rlp():
    a = Data32("0x" + "aa" * 32)
    b = Data32("0x" + "bb" * 32)
    assert hashes_rlp([a, b]) == ["0x" + "aa" * 32, "0x" + "bb" * 32]
    assert hashes_rlp([]) == []


def test_keccak256_empty():
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_json_in_simple_mapping():
    encoded = json.dumps({"data": Data("0x1234")}, separators=(",", ":"))
    assert encoded == '{"data":"0x1234"}'


def test_json_in_nested_structure_round_trip():
    raw = '{"value":"0x1234","pointer":"0x1234","nested":{"value":"0x1234","pointer":"0x1234"}}'
    decoded = json.loads(raw)
    rebuilt = {
        "value": Data(decoded["value"]),
        "pointer": Data(decoded["pointer"]),
        "nested": {k: Data(v) for k, v in decoded["nested"].items()},
    }
    assert json.loads(json.dumps(rebuilt)) == json.loads(raw)