"""Constants tables: each family is a single record of named magic numbers.

Values that the oracle can measure (encoded widths, digest sizes, header
sizes) are measured and checked against the declared constant, so a drift
between a table and the encoders fails generation instead of shipping.
"""

from dataclasses import dataclass

from . import crypto, instructions, pda, precompiles, state, sysvars, token
from .codec import encode_value
from .errors import EncodingError


def _measured(declared: int, actual: int, what: str) -> int:
    if declared != actual:
        raise EncodingError(f"{what}: declared {declared}, encoders produce {actual}")
    return declared


# Serialized input region of a program invocation
MAX_ACCOUNTS = 64
NON_DUP_MARKER = 0xFF
DUPLICATE_FLAG_OFFSET = 0
IS_SIGNER_OFFSET = 1
IS_WRITABLE_OFFSET = 2
EXECUTABLE_OFFSET = 3
ORIGINAL_DATA_LEN_OFFSET = 4
KEY_OFFSET = 8
OWNER_OFFSET = 40
LAMPORTS_OFFSET = 72
DATA_LEN_OFFSET = 80
DATA_OFFSET = 88
MAX_PERMITTED_DATA_INCREASE = 10 * 1024
BPF_ALIGN_OF_U128 = 8

# BLS12-381
BLS_PUBLIC_KEY_COMPRESSED_SIZE = 48
BLS_PUBLIC_KEY_AFFINE_SIZE = 96
BLS_SIGNATURE_COMPRESSED_SIZE = 96
BLS_SIGNATURE_AFFINE_SIZE = 192
BLS_PROOF_OF_POSSESSION_COMPRESSED_SIZE = 96
BLS_PROOF_OF_POSSESSION_AFFINE_SIZE = 192
BLS_POP_DST = "BLS_POP_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"

# alt_bn128
BN254_FIELD_MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
BN254_SCALAR_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
BN254_CURVE_B = 3
BN254_FIELD_SIZE = 32
BN254_G1_POINT_SIZE = 64
BN254_G2_POINT_SIZE = 128
BN254_G1_COMPRESSED_POINT_SIZE = 32
BN254_G2_COMPRESSED_POINT_SIZE = 64
BN254_ADDITION_INPUT_SIZE = 128
BN254_MULTIPLICATION_INPUT_SIZE = 96
BN254_PAIRING_ELEMENT_SIZE = 192
BN254_ADDITION_OUTPUT_SIZE = 64
BN254_MULTIPLICATION_OUTPUT_SIZE = 64
BN254_PAIRING_OUTPUT_SIZE = 32

# Vote program
MAX_LOCKOUT_HISTORY = 31
INITIAL_LOCKOUT = 2
MAX_EPOCH_CREDITS_HISTORY = 64
VOTE_CREDITS_GRACE_SLOTS = 2
VOTE_CREDITS_MAXIMUM_PER_SLOT = 16
VOTE_STATE_SIZE = 3762

# Runtime limits
MAX_PERMITTED_ACCOUNTS_DATA_ALLOCATIONS_PER_TRANSACTION = 2 * instructions.MAX_PERMITTED_DATA_LENGTH
MAX_TX_ACCOUNT_LOCKS = 128
PACKET_DATA_SIZE = 1280 - 40 - 8
MAX_SIGNERS = 16


@dataclass
class AccountLayoutConstants:
    max_accounts: int
    non_dup_marker: int
    duplicate_flag_offset: int
    is_signer_offset: int
    is_writable_offset: int
    executable_offset: int
    original_data_len_offset: int
    key_offset: int
    owner_offset: int
    lamports_offset: int
    data_len_offset: int
    data_offset: int
    max_permitted_data_increase: int
    bpf_align_of_u128: int


@dataclass
class PrimitiveTypeSizes:
    u8: int
    u16: int
    u32: int
    u64: int
    u128: int
    i8: int
    i16: int
    i32: int
    i64: int
    f64: int
    bool: int
    pubkey: int
    hash: int
    signature: int


@dataclass
class HashSizes:
    hash: int
    sha256: int
    keccak256: int
    blake3: int
    durable_nonce: int


@dataclass
class SignatureSizes:
    signature: int
    ed25519_signature: int
    secp256k1_signature: int
    secp256r1_signature: int
    max_base58_len: int


@dataclass
class PubkeySizes:
    pubkey: int
    max_base58_len: int
    max_seed_len: int
    max_seeds: int
    pda_marker: str
    pda_marker_len: int


@dataclass
class NativeTokenConstants:
    lamports_per_sol: int
    sol_decimals: int
    sol_symbol: str


@dataclass
class NonceConstants:
    nonce_account_length: int
    durable_nonce_hash_prefix: str
    nonced_tx_marker_ix_index: int
    uninitialized_versions_size: int


@dataclass
class AltConstants:
    lookup_table_max_addresses: int
    lookup_table_meta_size: int
    slot_max: int


@dataclass
class ComputeBudgetConstants:
    max_compute_unit_limit: int
    default_instruction_compute_unit_limit: int
    max_builtin_allocation_compute_unit_limit: int
    max_heap_frame_bytes: int
    min_heap_frame_bytes: int
    default_heap_cost: int
    max_loaded_accounts_data_size_bytes: int
    micro_lamports_per_lamport: int


@dataclass
class BpfLoaderStateSizes:
    uninitialized: int
    buffer_metadata: int
    program: int
    programdata_metadata: int


@dataclass
class Ed25519Constants:
    pubkey_serialized_size: int
    signature_serialized_size: int
    signature_offsets_serialized_size: int
    signature_offsets_start: int
    data_start: int


@dataclass
class Secp256k1Constants:
    pubkey_serialized_size: int
    private_key_serialized_size: int
    hashed_pubkey_serialized_size: int
    signature_serialized_size: int
    signature_offsets_serialized_size: int
    signature_offsets_start: int
    data_start: int


@dataclass
class EpochScheduleConstants:
    minimum_slots_per_epoch: int
    default_slots_per_epoch: int
    default_leader_schedule_slot_offset: int
    max_leader_schedule_epoch_offset: int


@dataclass
class BlsConstants:
    public_key_compressed_size: int
    public_key_affine_size: int
    signature_compressed_size: int
    signature_affine_size: int
    proof_of_possession_compressed_size: int
    proof_of_possession_affine_size: int
    pop_dst: str


@dataclass
class Bn254Constants:
    field_modulus: int
    scalar_modulus: int
    curve_b: int
    field_size: int
    g1_point_size: int
    g2_point_size: int
    g1_compressed_point_size: int
    g2_compressed_point_size: int
    addition_input_size: int
    multiplication_input_size: int
    pairing_element_size: int
    addition_output_size: int
    multiplication_output_size: int
    pairing_output_size: int


@dataclass
class SlotHistoryConstants:
    max_entries: int
    bitvec_words: int
    serialized_size: int


@dataclass
class VoteStateConstants:
    bls_public_key_compressed_size: int
    bls_proof_of_possession_compressed_size: int
    max_lockout_history: int
    initial_lockout: int
    max_epoch_credits_history: int
    vote_credits_grace_slots: int
    vote_credits_maximum_per_slot: int
    vote_state_size: int
    vote_init_size: int


@dataclass
class SysvarSizes:
    clock: int
    rent: int
    epoch_schedule: int
    fees: int
    slot_hashes: int
    stake_history: int
    recent_blockhashes: int
    slot_history: int
    epoch_rewards: int
    last_restart_slot: int


@dataclass
class AccountLimits:
    max_permitted_data_length: int
    max_permitted_data_increase: int
    max_permitted_accounts_data_allocations_per_transaction: int
    max_tx_account_locks: int
    packet_data_size: int
    max_signers: int


def generate_account_layout():
    return [
        AccountLayoutConstants(
            MAX_ACCOUNTS,
            NON_DUP_MARKER,
            DUPLICATE_FLAG_OFFSET,
            IS_SIGNER_OFFSET,
            IS_WRITABLE_OFFSET,
            EXECUTABLE_OFFSET,
            ORIGINAL_DATA_LEN_OFFSET,
            KEY_OFFSET,
            _measured(OWNER_OFFSET, KEY_OFFSET + crypto.PUBKEY_BYTES, "owner offset"),
            _measured(LAMPORTS_OFFSET, OWNER_OFFSET + crypto.PUBKEY_BYTES, "lamports offset"),
            DATA_LEN_OFFSET,
            DATA_OFFSET,
            MAX_PERMITTED_DATA_INCREASE,
            BPF_ALIGN_OF_U128,
        )
    ]


def _width(type_name: str, value=0) -> int:
    return len(encode_value("bincode", type_name, value))


def generate_primitive_type_sizes():
    return [
        PrimitiveTypeSizes(
            u8=_width("u8"),
            u16=_width("u16"),
            u32=_width("u32"),
            u64=_width("u64"),
            u128=_width("u128"),
            i8=_width("i8"),
            i16=_width("i16"),
            i32=_width("i32"),
            i64=_width("i64"),
            f64=8,
            bool=_width("bool", False),
            pubkey=crypto.PUBKEY_BYTES,
            hash=crypto.HASH_BYTES,
            signature=crypto.SIGNATURE_BYTES,
        )
    ]


def generate_hash_sizes():
    return [
        HashSizes(
            hash=crypto.HASH_BYTES,
            sha256=_measured(crypto.HASH_BYTES, len(crypto.sha256(b"")), "sha256 width"),
            keccak256=_measured(crypto.HASH_BYTES, len(crypto.keccak256(b"")), "keccak256 width"),
            blake3=_measured(crypto.HASH_BYTES, len(crypto.blake3_hash(b"")), "blake3 width"),
            durable_nonce=_measured(
                crypto.HASH_BYTES, len(state.durable_nonce_from_blockhash(bytes(32))), "durable nonce width"
            ),
        )
    ]


def generate_signature_sizes():
    signature = crypto.Keypair(bytes(32)).sign(b"")
    return [
        SignatureSizes(
            signature=crypto.SIGNATURE_BYTES,
            ed25519_signature=_measured(precompiles.ED25519_SIGNATURE_SERIALIZED_SIZE, len(signature), "ed25519"),
            secp256k1_signature=precompiles.SECP256K1_SIGNATURE_SERIALIZED_SIZE,
            secp256r1_signature=precompiles.SECP256R1_SIGNATURE_SERIALIZED_SIZE,
            max_base58_len=_measured(88, len(crypto.b58encode(b"\xff" * 64)), "signature base58 length"),
        )
    ]


def generate_pubkey_sizes():
    return [
        PubkeySizes(
            pubkey=crypto.PUBKEY_BYTES,
            max_base58_len=_measured(crypto.MAX_BASE58_LEN, len(crypto.b58encode(b"\xff" * 32)), "base58 length"),
            max_seed_len=pda.MAX_SEED_LEN,
            max_seeds=pda.MAX_SEEDS,
            pda_marker=pda.PDA_MARKER.decode("ascii"),
            pda_marker_len=len(pda.PDA_MARKER),
        )
    ]


def generate_native_token_constants():
    return [NativeTokenConstants(token.LAMPORTS_PER_SOL, token.SOL_DECIMALS, token.SOL_SYMBOL)]


def generate_nonce_constants():
    return [
        NonceConstants(
            nonce_account_length=state.NONCE_ACCOUNT_LENGTH,
            durable_nonce_hash_prefix=state.DURABLE_NONCE_HASH_PREFIX.decode("ascii"),
            nonced_tx_marker_ix_index=state.NONCED_TX_MARKER_IX_INDEX,
            uninitialized_versions_size=len(state.serialize_nonce_versions(None)),
        )
    ]


def generate_alt_constants():
    meta = state.AddressLookupTable(state.LookupTableMeta()).serialize()
    return [
        AltConstants(
            state.LOOKUP_TABLE_MAX_ADDRESSES,
            _measured(state.LOOKUP_TABLE_META_SIZE, len(meta), "lookup table meta size"),
            state.SLOT_MAX,
        )
    ]


def generate_compute_budget_constants():
    return [
        ComputeBudgetConstants(
            instructions.MAX_COMPUTE_UNIT_LIMIT,
            instructions.DEFAULT_INSTRUCTION_COMPUTE_UNIT_LIMIT,
            instructions.MAX_BUILTIN_ALLOCATION_COMPUTE_UNIT_LIMIT,
            instructions.MAX_HEAP_FRAME_BYTES,
            instructions.MIN_HEAP_FRAME_BYTES,
            instructions.DEFAULT_HEAP_COST,
            instructions.MAX_LOADED_ACCOUNTS_DATA_SIZE_BYTES,
            instructions.MICRO_LAMPORTS_PER_LAMPORT,
        )
    ]


def generate_bpf_loader_state_sizes():
    key = bytes(32)
    return [
        BpfLoaderStateSizes(
            uninitialized=_measured(
                state.UPGRADEABLE_LOADER_STATE_UNINITIALIZED_SIZE,
                len(state.serialize_upgradeable_loader_state("Uninitialized")),
                "uninitialized",
            ),
            buffer_metadata=_measured(
                state.UPGRADEABLE_LOADER_STATE_BUFFER_METADATA_SIZE,
                len(state.serialize_upgradeable_loader_state("Buffer", authority=key)),
                "buffer metadata",
            ),
            program=_measured(
                state.UPGRADEABLE_LOADER_STATE_PROGRAM_SIZE,
                len(state.serialize_upgradeable_loader_state("Program", programdata_address=key)),
                "program",
            ),
            programdata_metadata=_measured(
                state.UPGRADEABLE_LOADER_STATE_PROGRAMDATA_METADATA_SIZE,
                len(state.serialize_upgradeable_loader_state("ProgramData", authority=key, slot=0)),
                "programdata metadata",
            ),
        )
    ]


def generate_ed25519_constants():
    offsets = precompiles.ed25519_offsets_for(0).pack()
    return [
        Ed25519Constants(
            precompiles.ED25519_PUBKEY_SERIALIZED_SIZE,
            precompiles.ED25519_SIGNATURE_SERIALIZED_SIZE,
            _measured(precompiles.ED25519_SIGNATURE_OFFSETS_SERIALIZED_SIZE, len(offsets), "ed25519 offsets"),
            precompiles.ED25519_SIGNATURE_OFFSETS_START,
            precompiles.ED25519_DATA_START,
        )
    ]


def generate_secp256k1_constants():
    offsets = precompiles.secp256k1_offsets_for(0).pack()
    return [
        Secp256k1Constants(
            precompiles.SECP256K1_PUBKEY_SERIALIZED_SIZE,
            precompiles.SECP256K1_PRIVATE_KEY_SERIALIZED_SIZE,
            precompiles.SECP256K1_HASHED_PUBKEY_SERIALIZED_SIZE,
            precompiles.SECP256K1_SIGNATURE_SERIALIZED_SIZE,
            _measured(precompiles.SECP256K1_SIGNATURE_OFFSETS_SERIALIZED_SIZE, len(offsets), "secp256k1 offsets"),
            precompiles.SECP256K1_SIGNATURE_OFFSETS_START,
            precompiles.SECP256K1_DATA_START,
        )
    ]


def generate_epoch_schedule_constants():
    return [
        EpochScheduleConstants(
            sysvars.MINIMUM_SLOTS_PER_EPOCH,
            sysvars.DEFAULT_SLOTS_PER_EPOCH,
            sysvars.DEFAULT_LEADER_SCHEDULE_SLOT_OFFSET,
            sysvars.MAX_LEADER_SCHEDULE_EPOCH_OFFSET,
        )
    ]


def generate_bls_constants():
    return [
        BlsConstants(
            BLS_PUBLIC_KEY_COMPRESSED_SIZE,
            BLS_PUBLIC_KEY_AFFINE_SIZE,
            BLS_SIGNATURE_COMPRESSED_SIZE,
            BLS_SIGNATURE_AFFINE_SIZE,
            BLS_PROOF_OF_POSSESSION_COMPRESSED_SIZE,
            BLS_PROOF_OF_POSSESSION_AFFINE_SIZE,
            BLS_POP_DST,
        )
    ]


def generate_bn254_constants():
    if BN254_FIELD_MODULUS.bit_length() > BN254_FIELD_SIZE * 8:
        raise EncodingError("bn254 field modulus does not fit the field size")
    return [
        Bn254Constants(
            BN254_FIELD_MODULUS,
            BN254_SCALAR_MODULUS,
            BN254_CURVE_B,
            BN254_FIELD_SIZE,
            _measured(BN254_G1_POINT_SIZE, 2 * BN254_FIELD_SIZE, "g1 point"),
            _measured(BN254_G2_POINT_SIZE, 4 * BN254_FIELD_SIZE, "g2 point"),
            BN254_G1_COMPRESSED_POINT_SIZE,
            BN254_G2_COMPRESSED_POINT_SIZE,
            _measured(BN254_ADDITION_INPUT_SIZE, 2 * BN254_G1_POINT_SIZE, "addition input"),
            _measured(BN254_MULTIPLICATION_INPUT_SIZE, BN254_G1_POINT_SIZE + BN254_FIELD_SIZE, "multiplication input"),
            _measured(BN254_PAIRING_ELEMENT_SIZE, BN254_G1_POINT_SIZE + BN254_G2_POINT_SIZE, "pairing element"),
            BN254_ADDITION_OUTPUT_SIZE,
            BN254_MULTIPLICATION_OUTPUT_SIZE,
            BN254_PAIRING_OUTPUT_SIZE,
        )
    ]


def generate_slot_history_constants():
    return [
        SlotHistoryConstants(
            sysvars.SLOT_HISTORY_MAX_ENTRIES,
            sysvars.SLOT_HISTORY_WORDS,
            sysvars.SLOT_HISTORY_SIZE,
        )
    ]


def generate_vote_state_constants():
    init = state.VoteInit(bytes(32), bytes(32), bytes(32), 0).serialize()
    return [
        VoteStateConstants(
            BLS_PUBLIC_KEY_COMPRESSED_SIZE,
            BLS_PROOF_OF_POSSESSION_COMPRESSED_SIZE,
            MAX_LOCKOUT_HISTORY,
            INITIAL_LOCKOUT,
            MAX_EPOCH_CREDITS_HISTORY,
            VOTE_CREDITS_GRACE_SLOTS,
            VOTE_CREDITS_MAXIMUM_PER_SLOT,
            VOTE_STATE_SIZE,
            _measured(state.VOTE_INIT_SIZE, len(init), "vote init"),
        )
    ]


def generate_sysvar_sizes():
    return [
        SysvarSizes(
            clock=_measured(sysvars.CLOCK_SIZE, len(sysvars.Clock().serialize()), "clock"),
            rent=_measured(sysvars.RENT_SIZE, len(sysvars.Rent().serialize()), "rent"),
            epoch_schedule=_measured(
                sysvars.EPOCH_SCHEDULE_SIZE, len(sysvars.EpochSchedule.without_warmup().serialize()), "epoch schedule"
            ),
            fees=sysvars.FEES_SIZE,
            slot_hashes=sysvars.SLOT_HASHES_SIZE,
            stake_history=sysvars.STAKE_HISTORY_SIZE,
            recent_blockhashes=sysvars.RECENT_BLOCKHASHES_SIZE,
            slot_history=sysvars.SLOT_HISTORY_SIZE,
            epoch_rewards=_measured(sysvars.EPOCH_REWARDS_SIZE, len(sysvars.EpochRewards().serialize()), "epoch rewards"),
            last_restart_slot=_measured(
                sysvars.LAST_RESTART_SLOT_SIZE, len(sysvars.LastRestartSlot().serialize()), "last restart slot"
            ),
        )
    ]


def generate_account_limits():
    return [
        AccountLimits(
            instructions.MAX_PERMITTED_DATA_LENGTH,
            MAX_PERMITTED_DATA_INCREASE,
            MAX_PERMITTED_ACCOUNTS_DATA_ALLOCATIONS_PER_TRANSACTION,
            MAX_TX_ACCOUNT_LOCKS,
            PACKET_DATA_SIZE,
            MAX_SIGNERS,
        )
    ]
