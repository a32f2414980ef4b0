import copy

import pytest

from ethlibs.new_heads import Flavor, NewHeadsNotificationParams, NewHeadsResult
from ethlibs.quantity import Quantity


def _geth_payload():
    return {
        "number": "0x1b4",
        "hash": "0x" + "11" * 32,
        "parentHash": "0x" + "22" * 32,
        "sha3Uncles": "0x" + "33" * 32,
        "logsBloom": "0x" + "00" * 256,
        "transactionsRoot": "0x" + "44" * 32,
        "stateRoot": "0x" + "55" * 32,
        "receiptsRoot": "0x" + "66" * 32,
        "miner": "0x" + "ab" * 20,
        "difficulty": "0x4ea3f27bc",
        "extraData": "0x476574682f76312e302e302f6c696e75782f676f312e342e32",
        "gasLimit": "0x1388",
        "gasUsed": "0x0",
        "timestamp": "0x55ba467c",
        "nonce": "0x689056015818adbe",
        "mixHash": "0x" + "77" * 32,
    }


def _parity_common():
    payload = _geth_payload()
    del payload["nonce"]
    del payload["mixHash"]
    payload["author"] = "0x" + "ab" * 20
    payload["size"] = "0x220"
    return payload


def test_geth_round_trip():
    payload = _geth_payload()
    result = NewHeadsResult.from_dict(payload)
    assert result.flavor is Flavor.GETH
    assert result.to_dict() == payload
    assert list(result.to_dict()) == list(payload)


def test_geth_drops_size_and_author():
    payload = _geth_payload()
    payload["size"] = "0x220"
    payload["author"] = "0x" + "ab" * 20
    out = NewHeadsResult.from_dict(payload).to_dict()
    assert "size" not in out
    assert "author" not in out
    assert out["number"] == "0x1b4"


def test_geth_keeps_eip_fields():
    payload = _geth_payload()
    payload["baseFeePerGas"] = "0x7"
    payload["withdrawalsRoot"] = "0x" + "88" * 32
    out = NewHeadsResult.from_dict(payload).to_dict()
    assert out["baseFeePerGas"] == "0x7"
    assert out["withdrawalsRoot"] == "0x" + "88" * 32
    assert "parentBeaconBlockRoot" not in out


def test_geth_emits_null_nonce_and_mix_hash():
    payload = _geth_payload()
    del payload["nonce"]
    del payload["mixHash"]
    out = NewHeadsResult.from_dict(payload).to_dict()
    assert out["nonce"] is None
    assert out["mixHash"] is None


def test_aura_round_trip():
    payload = _parity_common()
    payload["sealFields"] = ["0x84" + "00" * 4, "0xb841" + "00" * 65]
    payload["step"] = "123"
    payload["signature"] = "abcd"
    result = NewHeadsResult.from_dict(payload)
    assert result.flavor is Flavor.PARITY_AURA
    out = result.to_dict()
    assert out == payload
    assert list(out)[-3:] == ["sealFields", "step", "signature"]


def test_clique_flavor_and_encoding():
    payload = _parity_common()
    payload["sealFields"] = []
    result = NewHeadsResult.from_dict(payload)
    assert result.flavor is Flavor.PARITY_CLIQUE
    out = result.to_dict()
    assert out == payload
    assert "nonce" not in out


def test_ethhash_flavor_and_encoding():
    payload = _parity_common()
    payload["nonce"] = "0x689056015818adbe"
    payload["mixHash"] = "0x" + "77" * 32
    payload["sealFields"] = ["0x" + "77" * 32]
    result = NewHeadsResult.from_dict(payload)
    assert result.flavor is Flavor.PARITY_ETHHASH
    assert result.to_dict() == payload


def test_parity_flavor_requires_size():
    payload = _parity_common()
    del payload["size"]
    payload["sealFields"] = []
    result = NewHeadsResult.from_dict(payload)
    assert result.flavor is Flavor.PARITY_CLIQUE
    with pytest.raises(ValueError):
        result.to_dict()


def test_miner_is_checksummed_in_memory_and_lowered_out():
    payload = _geth_payload()
    payload["miner"] = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
    result = NewHeadsResult.from_dict(payload)
    assert str(result.miner) == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
    assert result.to_dict()["miner"] == "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"


def test_quantities_are_parsed():
    result = NewHeadsResult.from_dict(_geth_payload())
    assert result.number == Quantity("0x1b4")
    assert int(result.gas_limit) == 0x1388


@pytest.mark.parametrize(
    "key, bad",
    [
        ("hash", "0x1234"),
        ("number", "1234"),
        ("miner", "0xinvalid"),
        ("logsBloom", "0x00"),
        ("step", 12),
    ],
)
def test_invalid_fields_raise(key, bad):
    payload = _geth_payload()
    payload[key] = bad
    with pytest.raises(ValueError):
        NewHeadsResult.from_dict(payload)


def test_non_mapping_raises():
    with pytest.raises(ValueError):
        NewHeadsResult.from_dict(["not", "an", "object"])


def test_unknown_flavor_emits_full_layout():
    result = NewHeadsResult(number=Quantity("0x1"), size=Quantity("0x2"), step="7")
    out = result.to_dict()
    assert out["number"] == "0x1"
    assert out["size"] == "0x2"
    assert out["step"] == "7"
    assert out["hash"] == ""
    assert out["difficulty"] == "0x0"
    assert "signature" not in out
    assert "sealFields" not in out


def test_reparsing_output_gives_equal_result():
    payload = _parity_common()
    payload["sealFields"] = ["0x01"]
    first = NewHeadsResult.from_dict(payload)
    second = NewHeadsResult.from_dict(first.to_dict())
    assert first == second
    assert second.flavor is first.flavor


def test_notification_params_round_trip():
    params = {"subscription": "0x9ce59a13059e417087c02d3236a0b1cc", "result": _geth_payload()}
    parsed = NewHeadsNotificationParams.from_dict(copy.deepcopy(params))
    assert parsed.subscription == "0x9ce59a13059e417087c02d3236a0b1cc"
    assert parsed.result.flavor is Flavor.GETH
    assert parsed.to_dict() == params


def test_notification_params_bad_result_raises():
    params = {"subscription": "0x01", "result": {"hash": "0xzz"}}
    with pytest.raises(ValueError):
        NewHeadsNotificationParams.from_dict(params)