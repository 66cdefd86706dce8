"""Signature-verification precompile instruction layouts.

Each instruction starts with a signature count, then one packed offsets
table per signature pointing at the key, signature and message bytes. An
instruction index of all-ones means "this instruction".
"""

import struct
from dataclasses import dataclass

from . import programs
from .crypto import pubkey
from .errors import EncodingError
from .instructions import Instruction

# ed25519
ED25519_PUBKEY_SERIALIZED_SIZE = 32
ED25519_SIGNATURE_SERIALIZED_SIZE = 64
ED25519_SIGNATURE_OFFSETS_SERIALIZED_SIZE = 14
ED25519_SIGNATURE_OFFSETS_START = 2
ED25519_DATA_START = ED25519_SIGNATURE_OFFSETS_SERIALIZED_SIZE + ED25519_SIGNATURE_OFFSETS_START

# secp256k1
SECP256K1_PUBKEY_SERIALIZED_SIZE = 64
SECP256K1_PRIVATE_KEY_SERIALIZED_SIZE = 32
SECP256K1_HASHED_PUBKEY_SERIALIZED_SIZE = 20
SECP256K1_SIGNATURE_SERIALIZED_SIZE = 64
SECP256K1_SIGNATURE_OFFSETS_SERIALIZED_SIZE = 11
SECP256K1_SIGNATURE_OFFSETS_START = 1
SECP256K1_DATA_START = SECP256K1_SIGNATURE_OFFSETS_SERIALIZED_SIZE + SECP256K1_SIGNATURE_OFFSETS_START

# secp256r1
SECP256R1_COMPRESSED_PUBKEY_SERIALIZED_SIZE = 33
SECP256R1_SIGNATURE_SERIALIZED_SIZE = 64
SECP256R1_SIGNATURE_OFFSETS_SERIALIZED_SIZE = 14
SECP256R1_SIGNATURE_OFFSETS_START = 2
SECP256R1_DATA_START = SECP256R1_SIGNATURE_OFFSETS_SERIALIZED_SIZE + SECP256R1_SIGNATURE_OFFSETS_START

CURRENT_INSTRUCTION_U16 = 0xFFFF
CURRENT_INSTRUCTION_U8 = 0xFF


def _pack(fmt: str, *values: int) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as e:
        raise EncodingError(f"offset table field out of range: {e}") from e


@dataclass
class Ed25519SignatureOffsets:
    signature_offset: int
    signature_instruction_index: int
    public_key_offset: int
    public_key_instruction_index: int
    message_data_offset: int
    message_data_size: int
    message_instruction_index: int

    def pack(self) -> bytes:
        return _pack(
            "<7H",
            self.signature_offset,
            self.signature_instruction_index,
            self.public_key_offset,
            self.public_key_instruction_index,
            self.message_data_offset,
            self.message_data_size,
            self.message_instruction_index,
        )


# Same layout, compressed P-256 key
Secp256r1SignatureOffsets = Ed25519SignatureOffsets


@dataclass
class Secp256k1SignatureOffsets:
    signature_offset: int
    signature_instruction_index: int
    eth_address_offset: int
    eth_address_instruction_index: int
    message_data_offset: int
    message_data_size: int
    message_instruction_index: int

    def pack(self) -> bytes:
        return _pack(
            "<HBHBHHB",
            self.signature_offset,
            self.signature_instruction_index,
            self.eth_address_offset,
            self.eth_address_instruction_index,
            self.message_data_offset,
            self.message_data_size,
            self.message_instruction_index,
        )


def ed25519_offsets_for(message_len: int) -> Ed25519SignatureOffsets:
    """Offsets of a single self-contained signature: key, then signature, then message."""
    public_key_offset = ED25519_DATA_START
    signature_offset = public_key_offset + ED25519_PUBKEY_SERIALIZED_SIZE
    message_data_offset = signature_offset + ED25519_SIGNATURE_SERIALIZED_SIZE
    return Ed25519SignatureOffsets(
        signature_offset=signature_offset,
        signature_instruction_index=CURRENT_INSTRUCTION_U16,
        public_key_offset=public_key_offset,
        public_key_instruction_index=CURRENT_INSTRUCTION_U16,
        message_data_offset=message_data_offset,
        message_data_size=message_len,
        message_instruction_index=CURRENT_INSTRUCTION_U16,
    )


def new_ed25519_instruction(public_key: bytes, signature: bytes, message: bytes) -> Instruction:
    if len(public_key) != ED25519_PUBKEY_SERIALIZED_SIZE:
        raise EncodingError(f"ed25519 public key must be 32 bytes, got {len(public_key)}")
    if len(signature) != ED25519_SIGNATURE_SERIALIZED_SIZE:
        raise EncodingError(f"ed25519 signature must be 64 bytes, got {len(signature)}")
    offsets = ed25519_offsets_for(len(message))
    data = bytes([1, 0]) + offsets.pack() + public_key + signature + message
    return Instruction(pubkey(programs.ED25519_PROGRAM), [], data)


def secp256k1_offsets_for(message_len: int, instruction_index: int = 0) -> Secp256k1SignatureOffsets:
    """Offsets of a single signature laid out as address, signature+recovery id, message."""
    eth_address_offset = SECP256K1_DATA_START
    signature_offset = eth_address_offset + SECP256K1_HASHED_PUBKEY_SERIALIZED_SIZE
    message_data_offset = signature_offset + SECP256K1_SIGNATURE_SERIALIZED_SIZE + 1
    return Secp256k1SignatureOffsets(
        signature_offset=signature_offset,
        signature_instruction_index=instruction_index,
        eth_address_offset=eth_address_offset,
        eth_address_instruction_index=instruction_index,
        message_data_offset=message_data_offset,
        message_data_size=message_len,
        message_instruction_index=instruction_index,
    )


def secp256r1_offsets_for(message_len: int) -> Secp256r1SignatureOffsets:
    public_key_offset = SECP256R1_DATA_START
    signature_offset = public_key_offset + SECP256R1_COMPRESSED_PUBKEY_SERIALIZED_SIZE
    message_data_offset = signature_offset + SECP256R1_SIGNATURE_SERIALIZED_SIZE
    return Secp256r1SignatureOffsets(
        signature_offset=signature_offset,
        signature_instruction_index=CURRENT_INSTRUCTION_U16,
        public_key_offset=public_key_offset,
        public_key_instruction_index=CURRENT_INSTRUCTION_U16,
        message_data_offset=message_data_offset,
        message_data_size=message_len,
        message_instruction_index=CURRENT_INSTRUCTION_U16,
    )
