"""Account address helpers."""

from __future__ import annotations

import re

from Crypto.Hash import keccak
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")
_HEX_RE = re.compile(r"(?:0x)?[0-9a-fA-F]+")


def keccak256(data: bytes) -> bytes:
    digest = keccak.new(digest_bits=256)
    digest.update(data)
    return digest.digest()


def to_checksum_address(address: str) -> str:
    """Return the EIP-55 mixed-case form of a hex address."""
    if not _ADDRESS_RE.fullmatch(address):
        raise ValueError(f"Not a hex account address: {address!r}")
    body = address[2:].lower()
    digest = keccak256(body.encode("ascii")).hex()
    return "0x" + "".join(c.upper() if int(digest[i], 16) >= 8 else c for i, c in enumerate(body))


def is_valid_address(value: object) -> bool:
    """Syntactic account address check.

    Single-case input is accepted as is; mixed-case input must carry a valid
    EIP-55 checksum.
    """
    if not isinstance(value, str) or not _ADDRESS_RE.fullmatch(value):
        return False
    body = value[2:]
    if body == body.lower() or body == body.upper():
        return True
    return to_checksum_address(value) == value


def _public_key_bytes(public_key: str | bytes) -> bytes:
    if isinstance(public_key, bytes):
        return public_key
    if not isinstance(public_key, str):
        raise TypeError(f"Public key must be hex text or bytes, got {type(public_key).__name__}.")
    text = public_key.strip()
    if not _HEX_RE.fullmatch(text):
        raise ValueError("Public key must be hex encoded.")
    if text.startswith("0x"):
        text = text[2:]
    if len(text) % 2:
        raise ValueError("Public key hex has an odd number of digits.")
    return bytes.fromhex(text)


def to_eth_address(public_key: str | bytes) -> str:
    """Derive the checksummed account address of a secp256k1 public key.

    Accepts SEC1 compressed (33 bytes), uncompressed (65 bytes) or the raw
    64-byte ``x || y`` form.
    """
    raw = _public_key_bytes(public_key)
    if len(raw) == 64:
        raw = b"\x04" + raw
    # from_encoded_point rejects points that are not on the curve.
    point = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), raw)
    uncompressed = point.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)
    return to_checksum_address("0x" + keccak256(uncompressed[1:])[-20:].hex())
