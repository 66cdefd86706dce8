"""Reference hashing, base58 and Ed25519 primitives.

Ed25519: `cryptography` package.
Keccak-256: `pycryptodome`. BLAKE3: `blake3`. SHA-256: stdlib hashlib.
"""

import hashlib

import base58
import blake3
from Crypto.Hash import keccak
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .errors import CatalogError, EncodingError

PUBKEY_BYTES = 32
HASH_BYTES = 32
SIGNATURE_BYTES = 64
SECRET_KEY_LENGTH = 32
KEYPAIR_LENGTH = 64
MAX_BASE58_LEN = 44


def sha256(data: bytes) -> bytes:
    """SHA-256 hash of data."""
    return hashlib.sha256(data).digest()


def hashv(*parts: bytes) -> bytes:
    """SHA-256 over the concatenation of parts."""
    h = hashlib.sha256()
    for part in parts:
        h.update(part)
    return h.digest()


def keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def blake3_hash(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


def b58encode(data: bytes) -> str:
    return base58.b58encode(data).decode("ascii")


def b58decode(text: str) -> bytes:
    return base58.b58decode(text)


def pubkey(text: str) -> bytes:
    """Decode a base58 address, insisting on 32 bytes."""
    try:
        raw = b58decode(text)
    except ValueError as e:
        raise CatalogError(f"invalid base58 address {text!r}: {e}") from e
    if len(raw) != PUBKEY_BYTES:
        raise CatalogError(f"address {text!r} decodes to {len(raw)} bytes, expected 32")
    return raw


def hash_to_string(data: bytes) -> str:
    """Textual form of a chain hash (base58, like addresses)."""
    if len(data) != HASH_BYTES:
        raise EncodingError(f"hash must be 32 bytes, got {len(data)}")
    return b58encode(data)


class Keypair:
    """Ed25519 keypair derived from a 32-byte seed."""

    __slots__ = ("seed", "pubkey", "_private_key")

    def __init__(self, seed: bytes):
        if len(seed) != SECRET_KEY_LENGTH:
            raise CatalogError(f"keypair seed must be 32 bytes, got {len(seed)}")
        self.seed = bytes(seed)
        self._private_key = Ed25519PrivateKey.from_private_bytes(self.seed)
        self.pubkey = self._private_key.public_key().public_bytes(
            Encoding.Raw, PublicFormat.Raw
        )

    @classmethod
    def from_seed(cls, seed: bytes) -> "Keypair":
        return cls(seed)

    def to_bytes(self) -> bytes:
        """64-byte secret key form: seed followed by the public key."""
        return self.seed + self.pubkey

    def sign(self, message: bytes) -> bytes:
        sig = self._private_key.sign(message)
        if len(sig) != SIGNATURE_BYTES:
            raise EncodingError(f"signature must be 64 bytes, got {len(sig)}")
        return sig


def verify_ed25519(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """Verify an Ed25519 signature over a message."""
    try:
        Ed25519PublicKey.from_public_bytes(public_key).verify(signature, message)
        return True
    except (InvalidSignature, ValueError):
        return False


BIG_MOD_EXP_MAX_INPUT_LEN = 512


def big_mod_exp(base: bytes, exponent: bytes, modulus: bytes) -> bytes:
    """Big-endian modular exponentiation, result padded to the modulus width.

    A modulus of 0 or 1 yields all zeros.
    """
    for part in (base, exponent, modulus):
        if len(part) > BIG_MOD_EXP_MAX_INPUT_LEN:
            raise CatalogError(f"big_mod_exp input exceeds {BIG_MOD_EXP_MAX_INPUT_LEN} bytes")
    m = int.from_bytes(modulus, "big")
    if m <= 1:
        return bytes(len(modulus))
    result = pow(int.from_bytes(base, "big"), int.from_bytes(exponent, "big"), m)
    return result.to_bytes(len(modulus), "big")
