"""secp256k1 transaction signatures: signing, sender recovery and EIP-155 packing."""

from __future__ import annotations

import hashlib
import hmac
from typing import Iterator, Optional, Tuple

from .address import Address
from .hexdata import Data32, keccak256
from .quantity import Quantity

_P = 2**256 - 2**32 - 977
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
_ORDER = "big"

_Point = Optional[Tuple[int, int]]


def _add(a: _Point, b: _Point) -> _Point:
    if a is None:
        return b
    if b is None:
        return a
    x1, y1 = a
    x2, y2 = b
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1 % _P, -1, _P) % _P
    else:
        slope = (y2 - y1) * pow((x2 - x1) % _P, -1, _P) % _P
    x3 = (slope * slope - x1 - x2) % _P
    y3 = (slope * (x1 - x3) - y1) % _P
    return x3, y3


def _mul(k: int, point: _Point) -> _Point:
    result: _Point = None
    addend = point
    while k:
        if k & 1:
            result = _add(result, addend)
        addend = _add(addend, addend)
        k >>= 1
    return result


def _lift_x(x: int, odd: int) -> tuple[int, int]:
    if x >= _P:
        raise ValueError("signature R value is not a valid curve coordinate")
    y_squared = (pow(x, 3, _P) + 7) % _P
    y = pow(y_squared, (_P + 1) // 4, _P)
    if y * y % _P != y_squared:
        raise ValueError("signature R value is not on the curve")
    if y & 1 != odd:
        y = _P - y
    return x, y


def _point_to_address(point: _Point) -> Address:
    if point is None:
        raise ValueError("invalid public key recovered")
    x, y = point
    digest = keccak256(x.to_bytes(32, _ORDER) + y.to_bytes(32, _ORDER))
    return Address("0x" + digest[-20:].hex())


def _digest_bytes(digest: Data32) -> bytes:
    return Data32(digest).to_bytes()


def _nonces(scalar: int, message: bytes) -> Iterator[int]:
    """Deterministic nonce candidates (RFC 6979, HMAC-SHA256)."""
    scalar_bytes = scalar.to_bytes(32, _ORDER)
    msg_bytes = (int.from_bytes(message, _ORDER) % _N).to_bytes(32, _ORDER)
    v = b"\x01" * 32
    k = b"\x00" * 32
    k = hmac.new(k, v + b"\x00" + scalar_bytes + msg_bytes, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    k = hmac.new(k, v + b"\x01" + scalar_bytes + msg_bytes, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    while True:
        v = hmac.new(k, v, hashlib.sha256).digest()
        candidate = int.from_bytes(v, _ORDER)
        if 1 <= candidate < _N:
            yield candidate
        k = hmac.new(k, v + b"\x00", hashlib.sha256).digest()
        v = hmac.new(k, v, hashlib.sha256).digest()


class Signature:
    """R, S and recovery V values, plus the chain id they were made for.

    A chain id of zero means an unprotected, pre-EIP-155 signature.
    """

    __slots__ = ("r", "s", "v", "_chain_id")

    def __init__(self, r: Quantity, s: Quantity, v: Quantity, chain_id: Quantity | None = None) -> None:
        self.r = r
        self.s = s
        self.v = v
        self._chain_id = chain_id if chain_id is not None else Quantity("0x0")

    @classmethod
    def from_eip2718(cls, chain_id: Quantity, r: Quantity, s: Quantity, v: Quantity) -> "Signature":
        """Build from discrete chain id, R, S and parity V values."""
        if int(chain_id) == 0:
            raise ValueError("chainId is required for EIP-2718 style signatures")
        if int(v) not in (0, 1):
            raise ValueError("v must be 0x0 or 0x1 for EIP-2718 style signatures")
        return cls(r, s, v, chain_id)

    @classmethod
    def from_eip155(cls, r: Quantity, s: Quantity, v: Quantity) -> "Signature":
        """Build from R, S and a V value that may carry an EIP-155 chain id."""
        packed = int(v)
        if packed in (27, 28):
            return cls(r, s, Quantity.from_int(packed - 27), Quantity("0x0"))
        if packed in (0, 1):
            return cls(r, s, Quantity.from_int(packed), Quantity("0x0"))
        if packed >= 35:
            chain_id = (packed - 35) // 2
            recovery = (packed - 27) - (chain_id * 2 + 8)
            return cls(r, s, Quantity.from_int(recovery), Quantity.from_int(chain_id))
        raise ValueError("unexpected EIP-155 V value")

    def eip155_values(self) -> tuple[Quantity, Quantity, Quantity]:
        """Return R, S and V with the chain id packed into V."""
        chain_id = int(self._chain_id)
        if chain_id == 0:
            return self.r, self.s, Quantity.from_int(int(self.v) + 27)
        return self.r, self.s, Quantity.from_int(int(self.v) + chain_id * 2 + 35)

    def eip2718_values(self) -> tuple[Quantity, Quantity, Quantity]:
        """Return R, S and the plain parity bit V."""
        return self.r, self.s, self.v

    def recover(self, digest: Data32) -> Address:
        """Recover the signing address for the given message hash."""
        return ec_recover(digest, self.r, self.s, self.v)

    def chain_id(self) -> Quantity:
        """Return the chain id, raising if the signature is unprotected."""
        if int(self._chain_id) == 0:
            raise ValueError("chainId was not provided")
        return self._chain_id

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Signature):
            return (self.r, self.s, self.v, self._chain_id) == (
                other.r,
                other.s,
                other.v,
                other._chain_id,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.r, self.s, self.v, self._chain_id))

    def __repr__(self) -> str:
        return f"Signature(r={self.r!r}, s={self.s!r}, v={self.v!r}, chain_id={self._chain_id!r})"


def ec_sign(digest: Data32, private_key: bytes, chain_id: Quantity) -> Signature:
    """Sign a message hash with a raw secp256k1 private key."""
    scalar = int.from_bytes(bytes(private_key), _ORDER) % _N
    if scalar == 0:
        raise ValueError("invalid private key")
    address = _point_to_address(_mul(scalar, _G))

    message = _digest_bytes(digest)
    e = int.from_bytes(message, _ORDER) % _N
    for nonce in _nonces(scalar, message):
        point = _mul(nonce, _G)
        r = point[0] % _N
        if r == 0:
            continue
        s = pow(nonce, -1, _N) * (e + r * scalar) % _N
        if s == 0:
            continue
        break
    if s > _N // 2:
        s = _N - s

    r_q, s_q = Quantity.from_int(r), Quantity.from_int(s)
    v = Quantity.from_int(1)
    try:
        sender: Address | None = ec_recover(digest, r_q, s_q, v)
    except ValueError:
        sender = None
    if sender != address:
        v = Quantity.from_int(0)
        try:
            sender = ec_recover(digest, r_q, s_q, v)
        except ValueError as err:
            raise ValueError(f"recovery failed: {err}") from err

    if sender != address:
        raise ValueError("signature mismatch")
    return Signature(r_q, s_q, v, chain_id)


def ec_recover(digest: Data32, r: Quantity, s: Quantity, v: Quantity) -> Address:
    """Return the address whose key produced R, S, V over the message hash."""
    message = _digest_bytes(digest)
    code = int(v)
    if not 0 <= code <= 7:
        raise ValueError("could not recover secp256k1 key: invalid recovery code")
    code &= 3

    r_int, s_int = int(r), int(s)
    if not 0 < r_int < _N or not 0 < s_int < _N:
        raise ValueError("could not recover secp256k1 key: signature value out of range")

    x = r_int + _N if code & 2 else r_int
    point_r = _lift_x(x, code & 1)
    e = int.from_bytes(message, _ORDER) % _N
    r_inv = pow(r_int, -1, _N)
    public = _add(_mul(s_int * r_inv % _N, point_r), _mul((-e * r_inv) % _N, _G))
    if public is None:
        raise ValueError("could not recover secp256k1 key: point at infinity")
    return _point_to_address(public)