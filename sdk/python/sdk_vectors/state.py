"""Account state layouts owned by the built-in programs."""

from dataclasses import dataclass, field
from typing import Optional

from .codec import BincodeWriter
from .crypto import hashv
from .errors import EncodingError

U64_MAX = 2 ** 64 - 1

# Nonce
NONCE_ACCOUNT_LENGTH = 80
DURABLE_NONCE_HASH_PREFIX = b"DURABLE_NONCE"
NONCED_TX_MARKER_IX_INDEX = 0

# Feature gate
FEATURE_SIZE = 9

# Upgradeable loader
UPGRADEABLE_LOADER_STATE_UNINITIALIZED_SIZE = 4
UPGRADEABLE_LOADER_STATE_BUFFER_METADATA_SIZE = 37
UPGRADEABLE_LOADER_STATE_PROGRAM_SIZE = 36
UPGRADEABLE_LOADER_STATE_PROGRAMDATA_METADATA_SIZE = 45

# Address lookup table
LOOKUP_TABLE_MAX_ADDRESSES = 256
LOOKUP_TABLE_META_SIZE = 56
SLOT_MAX = U64_MAX

# Vote
VOTE_INIT_SIZE = 97

# Stake
LOCKUP_SIZE = 48
AUTHORIZED_SIZE = 64


def durable_nonce_from_blockhash(blockhash: bytes) -> bytes:
    return hashv(DURABLE_NONCE_HASH_PREFIX, blockhash)


@dataclass
class NonceData:
    authority: bytes
    durable_nonce: bytes
    lamports_per_signature: int


def serialize_nonce_versions(data: Optional[NonceData]) -> bytes:
    """``Versions::Current(State)``; ``None`` is the uninitialized state."""
    w = BincodeWriter().tag(1)
    if data is None:
        return w.tag(0).to_bytes()
    return (
        w.tag(1)
        .pubkey(data.authority)
        .raw(data.durable_nonce)
        .u64(data.lamports_per_signature)
        .to_bytes()
    )


def serialize_feature(activated_at: Optional[int]) -> bytes:
    """Feature account data, zero-padded to the fixed account size."""
    w = BincodeWriter()
    w.option(activated_at, w.u64)
    return w.pad_to(FEATURE_SIZE).to_bytes()


# UpgradeableLoaderState variants
UNINITIALIZED, BUFFER, PROGRAM, PROGRAM_DATA = range(4)
UPGRADEABLE_STATE_NAMES = ("Uninitialized", "Buffer", "Program", "ProgramData")


def serialize_upgradeable_loader_state(
    state_type: str,
    authority: Optional[bytes] = None,
    programdata_address: Optional[bytes] = None,
    slot: Optional[int] = None,
) -> bytes:
    try:
        tag = UPGRADEABLE_STATE_NAMES.index(state_type)
    except ValueError:
        raise EncodingError(f"unknown upgradeable loader state {state_type!r}") from None
    w = BincodeWriter().tag(tag)
    if tag == BUFFER:
        w.option(authority, w.pubkey)
    elif tag == PROGRAM:
        w.pubkey(programdata_address)
    elif tag == PROGRAM_DATA:
        w.u64(slot)
        w.option(authority, w.pubkey)
    return w.to_bytes()


def serialize_program_data_header(slot: int, upgrade_authority: Optional[bytes]) -> bytes:
    """ProgramData metadata, padded to the fixed 45-byte header preceding the ELF."""
    raw = serialize_upgradeable_loader_state("ProgramData", upgrade_authority, slot=slot)
    return BincodeWriter().raw(raw).pad_to(UPGRADEABLE_LOADER_STATE_PROGRAMDATA_METADATA_SIZE).to_bytes()


@dataclass
class LookupTableMeta:
    deactivation_slot: int = SLOT_MAX
    last_extended_slot: int = 0
    last_extended_slot_start_index: int = 0
    authority: Optional[bytes] = None

    def is_active(self) -> bool:
        return self.deactivation_slot == SLOT_MAX

    def write(self, w: BincodeWriter) -> BincodeWriter:
        w.u64(self.deactivation_slot).u64(self.last_extended_slot).u8(self.last_extended_slot_start_index)
        w.option(self.authority, w.pubkey)
        return w.u16(0)

    def serialize(self) -> bytes:
        return self.write(BincodeWriter()).to_bytes()


@dataclass
class AddressLookupTable:
    meta: LookupTableMeta
    addresses: list[bytes] = field(default_factory=list)

    def serialize(self) -> bytes:
        if len(self.addresses) > LOOKUP_TABLE_MAX_ADDRESSES:
            raise EncodingError(f"lookup table holds at most {LOOKUP_TABLE_MAX_ADDRESSES} addresses")
        w = BincodeWriter().tag(1)
        self.meta.write(w).pad_to(LOOKUP_TABLE_META_SIZE)
        for address in self.addresses:
            w.pubkey(address)
        return w.to_bytes()


@dataclass
class VoteInit:
    node_pubkey: bytes
    authorized_voter: bytes
    authorized_withdrawer: bytes
    commission: int

    def write(self, w: BincodeWriter) -> BincodeWriter:
        return (
            w.pubkey(self.node_pubkey)
            .pubkey(self.authorized_voter)
            .pubkey(self.authorized_withdrawer)
            .u8(self.commission)
        )

    def serialize(self) -> bytes:
        return self.write(BincodeWriter()).to_bytes()


@dataclass
class Lockup:
    unix_timestamp: int = 0
    epoch: int = 0
    custodian: bytes = bytes(32)

    def write(self, w: BincodeWriter) -> BincodeWriter:
        return w.i64(self.unix_timestamp).u64(self.epoch).pubkey(self.custodian)

    def serialize(self) -> bytes:
        return self.write(BincodeWriter()).to_bytes()


@dataclass
class Authorized:
    staker: bytes = bytes(32)
    withdrawer: bytes = bytes(32)

    def write(self, w: BincodeWriter) -> BincodeWriter:
        return w.pubkey(self.staker).pubkey(self.withdrawer)
