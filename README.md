# ethlibs

Typed values for talking to Ethereum nodes over JSON-RPC. Each type checks
its input when it is built, turns itself into the JSON value a node expects
and, where the protocol needs it, into RLP items.

## Installation

```
pip install ethlibs
```

The only runtime dependency is `pycryptodome`, used for Keccak-256.
To run the tests, install the `test` extra and run `pytest`.

## Modules

- `ethlibs.hexdata`: `Data`, `Data4`, `Data8`, `Data20`, `Data32` and
  `Data256`, `0x`-prefixed hex strings (subclasses of `str`); all but `Data`
  have a fixed byte length. Each has `to_bytes()`, `hash()` (Keccak-256,
  returned as `Data32`) and `rlp()`. `Hash` and `Topic` are aliases of
  `Data32`. The module also provides `keccak256(data)`,
  `validate_hex(value, size, kind)` and `hashes_rlp(hashes)`.
- `ethlibs.address`: `Address`, which stores the EIP-55 checksummed form and
  writes lower case to JSON and RLP, plus `to_checksum_address(address)`.
- `ethlibs.quantity`: `Quantity`, an unsigned integer in hex form. Build one
  from a string, or with `from_int`, `from_rlp` or `from_json`; read it back
  with `int()`, `str()`, `to_json()` or `rlp()`.
- `ethlibs.input`: `Input`, transaction call data, with `to_bytes()`,
  `rlp()` and `function_selector()`.
- `ethlibs.block_number`: the `Tag` enum (`latest`, `earliest`, `safe`,
  `finalized`, `pending`) and `BlockNumberOrTag`.
- `ethlibs.block_specifier`: `BlockSpecifier`, for EIP-1898 block parameters
  given as a block hash, a tag, a hex number or an object.
- `ethlibs.access_list`: `AccessList` and `AccessListEntry` (EIP-2930).
- `ethlibs.authorization_list`: `AuthorizationList` and
  `SetCodeAuthorization` (EIP-7702).
- `ethlibs.bloom`: `Bloom`, the 2048-bit logs bloom filter.
- `ethlibs.logs`: `Log`, with `from_dict` and `to_dict`.
- `ethlibs.log_filter`: `LogFilter`, which parses `eth_getLogs` filter
  objects and matches them against logs.
- `ethlibs.signature`: `Signature`, `ec_sign` and `ec_recover` for secp256k1
  signing and sender recovery, with EIP-155 and EIP-2718 forms of V.
- `ethlibs.new_heads`: `NewHeadsResult`, `NewHeadsNotificationParams` and
  the `Flavor` enum, for `newHeads` subscription payloads.

Malformed values raise `ValueError`; values of the wrong type (for example a
number where a hex string is expected) raise `TypeError`.

## Examples

Addresses are kept in checksummed form:

```python
from ethlibs.address import Address, to_checksum_address

to_checksum_address("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed")
# '0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed'

Address("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed").to_json()
# '0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed'
```

Hex data hashes its decoded bytes:

```python
from ethlibs.hexdata import Data

Data("0x").hash()
# Data32('0xc5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470')
```

Quantities print as hex:

```python
from ethlibs.quantity import Quantity

Quantity.from_int(0xABCD).to_json()
# '0xabcd'
```

Block specifiers accept either a string or a mapping; set `raw` to get the
plain-string form:

```python
from ethlibs.block_specifier import BlockSpecifier

spec = BlockSpecifier.parse({"blockNumber": "0x0"})
spec.to_json()
# {'blockNumber': '0x0'}
spec.raw = True
spec.to_json()
# '0x0'
```

Log filters are built from their JSON form and then matched against logs:

```python
from ethlibs.log_filter import LogFilter
from ethlibs.logs import Log

log_filter = LogFilter.from_dict({
    "address": "0xcdbf1d1c64faad6d8484fd3dd5be2b4ea57f5f4c",
    "topics": [None, "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"],
})
log_filter.matches(Log.from_dict(payload))
```

Tags in `fromBlock` and `toBlock` are not resolved by `matches`; replace them
with block numbers first.

## Signing

`ec_sign(digest, private_key, chain_id)` signs a 32-byte message hash with a
raw private key, using deterministic RFC 6979 nonces and low-S values, and
finds the recovery V by recovering the sender. `ec_recover(digest, r, s, v)`
returns the signer's `Address`. The curve arithmetic is plain Python: it is
not constant-time and is not meant for handling keys in hostile settings.

## What this package does not do

- RLP values are represented as Python strings and nested lists (`rlp()`
  and `from_rlp()`); there is no RLP byte encoder or decoder here.
- There are no block, transaction or receipt types and no raw block parsing.
- There is no JSON-RPC client or transport: the package builds and reads the
  values, it does not talk to a node.