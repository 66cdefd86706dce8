"""Legacy and v0 messages, and signed transactions.

Wire format: every variable-length list is prefixed by its short_u16 count.
A v0 message is the legacy layout preceded by 0x80 and followed by the
address-table lookups.
"""

from dataclasses import dataclass, field
from typing import Sequence

from .codec import decode_short_u16, encode_short_u16
from .crypto import HASH_BYTES, PUBKEY_BYTES, Keypair, verify_ed25519
from .errors import EncodingError
from .instructions import Instruction

MESSAGE_VERSION_PREFIX = 0x80
MESSAGE_HEADER_LENGTH = 3


def _short_vec(items: bytes) -> bytes:
    return encode_short_u16(len(items)) + bytes(items)


@dataclass
class MessageHeader:
    num_required_signatures: int = 0
    num_readonly_signed_accounts: int = 0
    num_readonly_unsigned_accounts: int = 0

    def serialize(self) -> bytes:
        return bytes(
            [
                self.num_required_signatures,
                self.num_readonly_signed_accounts,
                self.num_readonly_unsigned_accounts,
            ]
        )


@dataclass
class CompiledInstruction:
    program_id_index: int
    accounts: list[int] = field(default_factory=list)
    data: bytes = b""

    def serialize(self) -> bytes:
        return bytes([self.program_id_index]) + _short_vec(bytes(self.accounts)) + _short_vec(self.data)


def _body(header: MessageHeader, account_keys: Sequence[bytes], recent_blockhash: bytes,
          instructions: Sequence[CompiledInstruction]) -> bytes:
    for key in account_keys:
        if len(key) != PUBKEY_BYTES:
            raise EncodingError(f"account key must be 32 bytes, got {len(key)}")
    if len(recent_blockhash) != HASH_BYTES:
        raise EncodingError(f"blockhash must be 32 bytes, got {len(recent_blockhash)}")
    out = bytearray(header.serialize())
    out += encode_short_u16(len(account_keys))
    for key in account_keys:
        out += key
    out += recent_blockhash
    out += encode_short_u16(len(instructions))
    for ix in instructions:
        out += ix.serialize()
    return bytes(out)


@dataclass
class LegacyMessage:
    header: MessageHeader
    account_keys: list[bytes]
    recent_blockhash: bytes
    instructions: list[CompiledInstruction] = field(default_factory=list)

    def serialize(self) -> bytes:
        return _body(self.header, self.account_keys, self.recent_blockhash, self.instructions)


@dataclass
class MessageAddressTableLookup:
    account_key: bytes
    writable_indexes: list[int] = field(default_factory=list)
    readonly_indexes: list[int] = field(default_factory=list)

    def serialize(self) -> bytes:
        return self.account_key + _short_vec(bytes(self.writable_indexes)) + _short_vec(bytes(self.readonly_indexes))


@dataclass
class V0Message:
    header: MessageHeader
    account_keys: list[bytes]
    recent_blockhash: bytes
    instructions: list[CompiledInstruction] = field(default_factory=list)
    address_table_lookups: list[MessageAddressTableLookup] = field(default_factory=list)

    def serialize(self) -> bytes:
        out = bytearray([MESSAGE_VERSION_PREFIX])
        out += _body(self.header, self.account_keys, self.recent_blockhash, self.instructions)
        out += encode_short_u16(len(self.address_table_lookups))
        for lookup in self.address_table_lookups:
            out += lookup.serialize()
        return bytes(out)


def compile_legacy_message(instructions: Sequence[Instruction], payer: bytes, recent_blockhash: bytes) -> LegacyMessage:
    """Order keys the way the reference client does.

    Payer first, then signer/writable groups; within a group keys sort by
    their bytes. Program ids enter as read-only non-signers.
    """
    metas: dict[bytes, list[bool]] = {}
    for ix in instructions:
        metas.setdefault(ix.program_id, [False, False])
        for meta in ix.accounts:
            flags = metas.setdefault(meta.pubkey, [False, False])
            flags[0] |= meta.is_signer
            flags[1] |= meta.is_writable
    metas.pop(payer, None)

    def group(signer: bool, writable: bool) -> list[bytes]:
        return [k for k in sorted(metas) if metas[k][0] == signer and metas[k][1] == writable]

    writable_signers = [payer] + group(True, True)
    readonly_signers = group(True, False)
    writable_non_signers = group(False, True)
    readonly_non_signers = group(False, False)
    account_keys = writable_signers + readonly_signers + writable_non_signers + readonly_non_signers
    if len(account_keys) > 256:
        raise EncodingError("message references more than 256 accounts")

    index = {key: i for i, key in enumerate(account_keys)}
    compiled = [
        CompiledInstruction(index[ix.program_id], [index[m.pubkey] for m in ix.accounts], ix.data)
        for ix in instructions
    ]
    header = MessageHeader(
        num_required_signatures=len(writable_signers) + len(readonly_signers),
        num_readonly_signed_accounts=len(readonly_signers),
        num_readonly_unsigned_accounts=len(readonly_non_signers),
    )
    return LegacyMessage(header, account_keys, recent_blockhash, compiled)


def signer_keys(message_bytes: bytes) -> list[bytes]:
    """Public keys that must sign a serialized (legacy or v0) message."""
    pos = 1 if message_bytes and message_bytes[0] & MESSAGE_VERSION_PREFIX else 0
    num_signers = message_bytes[pos]
    pos += MESSAGE_HEADER_LENGTH
    num_keys, consumed = decode_short_u16(message_bytes, pos)
    pos += consumed
    if num_signers > num_keys:
        raise EncodingError("header requires more signatures than there are keys")
    return [message_bytes[pos + i * 32:pos + (i + 1) * 32] for i in range(num_signers)]


@dataclass
class Transaction:
    signatures: list[bytes]
    message: bytes

    @classmethod
    def sign(cls, keypairs: Sequence[Keypair], message: bytes) -> "Transaction":
        """Sign ``message`` with one keypair per required signer, in key order."""
        by_pubkey = {kp.pubkey: kp for kp in keypairs}
        signatures = []
        for key in signer_keys(message):
            if key not in by_pubkey:
                raise EncodingError("missing keypair for a required signer")
            signatures.append(by_pubkey[key].sign(message))
        return cls(signatures, message)

    def verify(self) -> bool:
        keys = signer_keys(self.message)
        return len(keys) == len(self.signatures) and all(
            verify_ed25519(key, self.message, sig) for key, sig in zip(keys, self.signatures)
        )

    def serialize(self) -> bytes:
        return encode_short_u16(len(self.signatures)) + b"".join(self.signatures) + self.message
