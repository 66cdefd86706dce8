from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Optional

# Record shapes of the published vector files. Field order is the on-disk
# key order; never rename or reorder, only append.
# bytes fields render as arrays of 0-255 integers, None as null.


def to_json_value(value: Any) -> Any:
    if is_dataclass(value):
        return {f.name: to_json_value(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


# --- raw identifiers -------------------------------------------------------

@dataclass
class PubkeyVector:
    name: str
    bytes: bytes
    base58: str

@dataclass
class HashVector:
    name: str
    bytes: bytes
    hex: str

@dataclass
class SignatureVector:
    name: str
    bytes: bytes
    base58: str

@dataclass
class AddressVector:
    """sysvar_id, native_program_id and special_addresses share this shape."""
    name: str
    bytes: bytes
    base58: str


# --- derivation and keys ---------------------------------------------------

@dataclass
class PdaVector:
    name: str
    program_id: bytes
    seeds: list[bytes]
    expected_pubkey: bytes
    expected_bump: int

@dataclass
class SignerSeedsVector:
    name: str
    program_id: bytes
    seeds: list[bytes]
    expected_bump: int
    signer_seeds: list[bytes]
    expected_pubkey: bytes

@dataclass
class KeypairVector:
    name: str
    seed: bytes
    keypair_bytes: bytes
    pubkey: bytes
    message: bytes
    signature: bytes

@dataclass
class Ed25519VerifyVector:
    name: str
    pubkey: bytes
    message: bytes
    signature: bytes
    valid: bool


# --- hashing ---------------------------------------------------------------

@dataclass
class HashFunctionVector:
    """sha256, keccak256 and blake3 files."""
    name: str
    input: bytes
    hash: bytes

@dataclass
class DurableNonceVector:
    name: str
    blockhash: bytes
    durable_nonce: bytes


# --- codec primitives ------------------------------------------------------

@dataclass
class ShortVecVector:
    name: str
    value: int
    encoded: bytes

@dataclass
class CodecVector:
    """bincode and borsh files."""
    name: str
    type_name: str
    value_json: str
    encoded: bytes


# --- sysvars and chain arithmetic ------------------------------------------

@dataclass
class EpochInfoVector:
    name: str
    epoch: int
    slot_index: int
    slots_in_epoch: int
    absolute_slot: int
    block_height: int
    transaction_count: Optional[int]

@dataclass
class LamportsVector:
    name: str
    sol_str: str
    lamports: Optional[int]

@dataclass
class RentVector:
    name: str
    data_len: int
    minimum_balance: int

@dataclass
class RentExemptVector:
    name: str
    data_len: int
    lamports: int
    minimum_balance: int
    is_exempt: bool

@dataclass
class ClockVector:
    name: str
    slot: int
    epoch_start_timestamp: int
    epoch: int
    leader_schedule_epoch: int
    unix_timestamp: int
    serialized: bytes

@dataclass
class EpochScheduleVector:
    name: str
    slots_per_epoch: int
    warmup: bool
    first_normal_epoch: int
    first_normal_slot: int
    test_slot: int
    expected_epoch: int
    expected_slot_index: int
    expected_slots_in_epoch: int
    first_slot_in_epoch: int
    serialized: bytes

@dataclass
class SlotHashEntry:
    slot: int
    hash: bytes

@dataclass
class SlotHashVector:
    name: str
    entries: list[SlotHashEntry]
    serialized: bytes

@dataclass
class EpochRewardsVector:
    name: str
    distribution_starting_block_height: int
    num_partitions: int
    parent_blockhash: bytes
    total_points: int
    total_rewards: int
    distributed_rewards: int
    active: bool
    serialized: bytes

@dataclass
class LastRestartSlotVector:
    name: str
    last_restart_slot: int
    serialized: bytes


# --- account state ---------------------------------------------------------

@dataclass
class FeatureStateVector:
    name: str
    activated_at: Optional[int]
    encoded: bytes

@dataclass
class NonceVersionsVector:
    name: str
    authority: bytes
    durable_nonce: bytes
    lamports_per_signature: int
    encoded: bytes

@dataclass
class UpgradeableLoaderStateVector:
    name: str
    state_type: str
    authority: Optional[bytes]
    programdata_address: Optional[bytes]
    slot: Optional[int]
    serialized: bytes

@dataclass
class ProgramDataVector:
    name: str
    slot: int
    upgrade_authority: Optional[bytes]
    serialized: bytes

@dataclass
class AddressLookupTableStateVector:
    name: str
    deactivation_slot: int
    last_extended_slot: int
    last_extended_slot_start_index: int
    authority: Optional[bytes]
    addresses: list[bytes]
    serialized: bytes

@dataclass
class LookupTableMetaVector:
    name: str
    deactivation_slot: int
    last_extended_slot: int
    last_extended_slot_start_index: int
    authority: Optional[bytes]
    is_active: bool
    serialized: bytes

@dataclass
class VoteInitVector:
    name: str
    node_pubkey: bytes
    authorized_voter: bytes
    authorized_withdrawer: bytes
    commission: int
    serialized: bytes
    instruction_encoded: bytes

@dataclass
class LockupVector:
    name: str
    unix_timestamp: int
    epoch: int
    custodian: bytes
    serialized: bytes

@dataclass
class AuthorizeVector:
    name: str
    program: str
    new_authority: bytes
    authorize_type: int
    encoded: bytes


# --- errors ----------------------------------------------------------------

@dataclass
class InstructionErrorVector:
    name: str
    error_code: int
    custom_code: Optional[int]
    encoded: bytes

@dataclass
class TransactionErrorVector:
    name: str
    error_type: str
    instruction_index: Optional[int]
    encoded: bytes


# --- instructions ----------------------------------------------------------

@dataclass
class SystemInstructionVector:
    name: str
    instruction_type: str
    encoded: bytes
    from_pubkey: Optional[bytes]
    to_pubkey: Optional[bytes]
    lamports: Optional[int]
    space: Optional[int]
    owner: Optional[bytes]

@dataclass
class SystemInstructionExtendedVector:
    name: str
    instruction_type: str
    encoded: bytes
    base: Optional[bytes]
    seed: Optional[str]
    derived_address: Optional[bytes]
    lamports: Optional[int]
    space: Optional[int]
    owner: Optional[bytes]
    authority: Optional[bytes]

@dataclass
class ComputeBudgetVector:
    name: str
    instruction_type: str
    encoded: bytes
    value: int

@dataclass
class LoaderV3InstructionVector:
    name: str
    instruction_type: str
    encoded: bytes
    write_offset: Optional[int]
    write_bytes: Optional[bytes]
    max_data_len: Optional[int]
    additional_bytes: Optional[int]

@dataclass
class LoaderV4InstructionVector:
    name: str
    instruction_type: str
    encoded: bytes
    offset: Optional[int]
    bytes_len: Optional[int]

@dataclass
class StakeInstructionVector:
    name: str
    instruction_type: str
    encoded: bytes
    lamports: Optional[int]

@dataclass
class AddressLookupTableInstructionVector:
    name: str
    instruction_type: str
    encoded: bytes
    recent_slot: Optional[int]
    bump_seed: Optional[int]
    new_addresses: Optional[list[bytes]]

@dataclass
class VoteInstructionVector:
    name: str
    instruction_type: str
    encoded: bytes
    vote_authorize: Optional[int]
    commission: Optional[int]
    lamports: Optional[int]

@dataclass
class FeatureGateInstructionVector:
    name: str
    instruction_type: str
    program_id: bytes
    encoded: bytes
    lamports: Optional[int]
    space: Optional[int]
    owner: Optional[bytes]

@dataclass
class AccountMetaVector:
    name: str
    pubkey: bytes
    is_signer: bool
    is_writable: bool
    encoded: bytes


# --- precompiles -----------------------------------------------------------

@dataclass
class Ed25519InstructionVector:
    name: str
    num_signatures: int
    signature_offset: int
    signature_instruction_index: int
    public_key_offset: int
    public_key_instruction_index: int
    message_data_offset: int
    message_data_size: int
    message_instruction_index: int
    offsets_serialized: bytes
    pubkey: bytes
    signature: bytes
    message: bytes
    encoded: bytes

@dataclass
class Secp256k1InstructionVector:
    name: str
    signature_offset: int
    signature_instruction_index: int
    eth_address_offset: int
    eth_address_instruction_index: int
    message_data_offset: int
    message_data_size: int
    message_instruction_index: int
    serialized: bytes

@dataclass
class Secp256r1InstructionVector:
    name: str
    signature_offset: int
    signature_instruction_index: int
    public_key_offset: int
    public_key_instruction_index: int
    message_data_offset: int
    message_data_size: int
    message_instruction_index: int
    serialized: bytes


# --- messages and transactions ---------------------------------------------

@dataclass
class MessageHeaderVector:
    name: str
    num_required_signatures: int
    num_readonly_signed_accounts: int
    num_readonly_unsigned_accounts: int
    encoded: bytes

@dataclass
class CompiledInstructionVector:
    name: str
    program_id_index: int
    accounts: bytes
    data: bytes
    encoded: bytes

@dataclass
class MessageVector:
    name: str
    num_required_signatures: int
    num_readonly_signed_accounts: int
    num_readonly_unsigned_accounts: int
    account_keys: list[bytes]
    recent_blockhash: bytes
    instructions_count: int
    serialized: bytes

@dataclass
class VersionedMessageVector:
    name: str
    version: int
    num_required_signatures: int
    num_readonly_signed_accounts: int
    num_readonly_unsigned_accounts: int
    account_keys: list[bytes]
    recent_blockhash: bytes
    instructions_count: int
    address_table_lookups_count: int
    serialized: bytes

@dataclass
class TransactionVector:
    name: str
    version: str
    signer_pubkeys: list[bytes]
    signatures: list[bytes]
    message: bytes
    serialized: bytes


# --- math ------------------------------------------------------------------

@dataclass
class BigModExpVector:
    name: str
    base: bytes
    exponent: bytes
    modulus: bytes
    result: bytes
