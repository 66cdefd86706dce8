"""Declarative case tables, one per vector family.

Entries are plain literals. Addresses appear either as raw 32-byte values or
as base58 strings (resolved by the generators). Adding a case is adding a
row; row order is the order cases appear in the output file.
"""

from . import programs as ids

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
I64_MAX = 0x7FFF_FFFF_FFFF_FFFF
I64_MIN = -0x8000_0000_0000_0000

ZERO32 = bytes(32)
ONES32 = b"\xff" * 32
SEQ32 = bytes(range(32))


def unique(n: int) -> bytes:
    """The n-th value of the SDK's process-local "unique" key/hash counter."""
    return n.to_bytes(8, "big") + bytes(24)


# Accounts used across instruction and message families
ALICE = "4rL4RCWHz3iNCdCaveD8KcHfV9YagGbXgSYq9QWPZ4Zx"
BOB = "8opHzTAnfzRpPEx21XtnrVTX28YQuCpAjcn1PczScKh"
NONCE_ACCOUNT = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"
NONCE_AUTHORITY = "HWHvQhFmJB6gPtqJx3gjxHX1iDZhQ9WJorxwb3iTWVHi"
RECENT_BLOCKHASH = unique(1)

# Fixed signing seeds
SIGNER_SEED = bytes([7] * 32)
OTHER_SIGNER_SEED = bytes([8] * 32)
PAYER_SEED = bytes([11] * 32)
SECOND_SIGNER_SEED = bytes([12] * 32)


# --- raw identifiers -------------------------------------------------------

PUBKEY_CASES = (
    ("zero", ZERO32),
    ("system_program", ids.SYSTEM_PROGRAM),
    ("bpf_loader_upgradeable", ids.BPF_LOADER_UPGRADEABLE),
    ("max_bytes", ONES32),
    ("sequential", SEQ32),
)

HASH_CASES = (
    ("zero", ZERO32),
    ("max_bytes", ONES32),
    ("sequential", SEQ32),
)

SIGNATURE_CASES = (
    ("zero", bytes(64)),
    ("max_bytes", b"\xff" * 64),
    ("sequential", bytes(range(64))),
)

SYSVAR_ID_CASES = (
    ("clock", ids.SYSVAR_CLOCK),
    ("epoch_schedule", ids.SYSVAR_EPOCH_SCHEDULE),
    ("fees", ids.SYSVAR_FEES),
    ("instructions", ids.SYSVAR_INSTRUCTIONS),
    ("recent_blockhashes", ids.SYSVAR_RECENT_BLOCKHASHES),
    ("rent", ids.SYSVAR_RENT),
    ("slot_hashes", ids.SYSVAR_SLOT_HASHES),
    ("slot_history", ids.SYSVAR_SLOT_HISTORY),
    ("stake_history", ids.SYSVAR_STAKE_HISTORY),
    ("epoch_rewards", ids.SYSVAR_EPOCH_REWARDS),
    ("last_restart_slot", ids.SYSVAR_LAST_RESTART_SLOT),
)

NATIVE_PROGRAM_ID_CASES = (
    ("system_program", ids.SYSTEM_PROGRAM),
    ("bpf_loader_deprecated", ids.BPF_LOADER_DEPRECATED),
    ("bpf_loader", ids.BPF_LOADER),
    ("bpf_loader_upgradeable", ids.BPF_LOADER_UPGRADEABLE),
    ("loader_v4", ids.LOADER_V4),
    ("native_loader", ids.NATIVE_LOADER),
    ("vote_program", ids.VOTE_PROGRAM),
    ("stake_program", ids.STAKE_PROGRAM),
    ("stake_config", ids.STAKE_CONFIG),
    ("config_program", ids.CONFIG_PROGRAM),
    ("ed25519_program", ids.ED25519_PROGRAM),
    ("secp256k1_program", ids.SECP256K1_PROGRAM),
    ("secp256r1_program", ids.SECP256R1_PROGRAM),
    ("compute_budget_program", ids.COMPUTE_BUDGET_PROGRAM),
    ("address_lookup_table_program", ids.ADDRESS_LOOKUP_TABLE_PROGRAM),
    ("feature_program", ids.FEATURE_PROGRAM),
)

SPECIAL_ADDRESS_CASES = (
    ("default_pubkey", ZERO32),
    ("incinerator", ids.INCINERATOR),
    ("sysvar_owner", ids.SYSVAR_OWNER),
    ("native_loader", ids.NATIVE_LOADER),
    ("system_program", ids.SYSTEM_PROGRAM),
)


# --- derivation ------------------------------------------------------------

# (name, program_id, seeds)
PDA_CASES = (
    ("system_test", ids.SYSTEM_PROGRAM, (b"test",)),
    ("upgradeable_loader_program", ids.BPF_LOADER_UPGRADEABLE, (b"program",)),
    ("two_seeds", bytes([1] * 32), (b"seed1", b"seed2")),
    ("long_seed_and_raw_bytes", bytes([42] * 32), (b"long_seed_value_to_test", bytes([1, 2, 3, 4, 5]))),
    ("no_seeds", SEQ32, ()),
    ("max_seed_length", bytes([7] * 32), (SEQ32,)),
    ("max_seed_count", bytes([3] * 32), tuple(bytes([i]) for i in range(15))),
    ("zero_byte_seed", ONES32, (b"\x00",)),
)

SIGNER_SEEDS_CASES = (
    ("vault", bytes([9] * 32), (b"vault",)),
    ("escrow_with_id", SEQ32, (b"escrow", bytes(range(8)))),
    ("loader_authority", ids.BPF_LOADER_UPGRADEABLE, (b"authority",)),
    ("vote_no_seeds", ids.VOTE_PROGRAM, ()),
)

# (name, seed, message)
KEYPAIR_CASES = (
    ("zero_seed", ZERO32, b"hello world"),
    ("sequential_seed", SEQ32, b"test message"),
    ("max_seed", ONES32, b""),
    ("solana_example", bytes([1] + [0] * 31), b"Sign this message for authentication"),
)

# (name, signing seed, presented key seed, signed message, presented message, valid)
_VERIFY_MESSAGE = b"test message for signature verification"
ED25519_VERIFY_CASES = (
    ("valid_signature", SIGNER_SEED, SIGNER_SEED, _VERIFY_MESSAGE, _VERIFY_MESSAGE, True),
    ("wrong_message", SIGNER_SEED, SIGNER_SEED, _VERIFY_MESSAGE, b"wrong message", False),
    ("wrong_pubkey", SIGNER_SEED, OTHER_SIGNER_SEED, _VERIFY_MESSAGE, _VERIFY_MESSAGE, False),
    ("empty_message", SIGNER_SEED, SIGNER_SEED, b"", b"", True),
    ("long_message", SIGNER_SEED, SIGNER_SEED, b"\x42" * 1000, b"\x42" * 1000, True),
)


# --- hashing ---------------------------------------------------------------

SHA256_CASES = (
    ("empty", b""),
    ("hello", b"hello"),
    ("hello_world", b"hello world"),
    ("solana", b"solana"),
    ("binary_data", bytes(range(10))),
    ("all_zeros", ZERO32),
    ("all_ones", ONES32),
)

KECCAK256_CASES = (
    ("empty", b""),
    ("hello", b"hello"),
    ("hello_world", b"hello world"),
    ("solana", b"Solana"),
    ("single_byte", b"\x42"),
    ("zeros_32", ZERO32),
    ("ones_32", ONES32),
)

BLAKE3_CASES = KECCAK256_CASES

DURABLE_NONCE_CASES = (
    ("zero", ZERO32),
    ("one", bytes([1] * 32)),
    ("sequential", SEQ32),
    ("max", ONES32),
)


# --- codec primitives ------------------------------------------------------

SHORT_VEC_CASES = (
    ("zero", 0),
    ("one", 1),
    ("max_1byte", 0x7F),
    ("min_2byte", 0x80),
    ("mid_2byte", 0x3FFF),
    ("max_2byte", 0x3FFF),
    ("min_3byte", 0x4000),
    ("mid_3byte", 0x8000),
    ("max_u16", 0xFFFF),
)

# (name, type_name, value); value_json is the compact JSON of value
CODEC_CASES = (
    ("u8_zero", "u8", 0),
    ("u8_max", "u8", 255),
    ("u16_value", "u16", 12345),
    ("u32_value", "u32", 305419896),
    ("u64_value", "u64", 1311768467463790320),
    ("i32_negative", "i32", -12345),
    ("i64_negative", "i64", -9876543210),
    ("bool_true", "bool", True),
    ("bool_false", "bool", False),
    ("option_some_u32", "Option<u32>", 42),
    ("option_none_u32", "Option<u32>", None),
    ("u64_max", "u64", U64_MAX),
    ("i64_min", "i64", I64_MIN),
    ("u128_value", "u128", 2 ** 100 + 7),
    ("i8_negative", "i8", -128),
    ("i16_negative", "i16", -2),
    ("string_hello", "String", "hello"),
    ("string_empty", "String", ""),
    ("vec_u8", "Vec<u8>", [1, 2, 3]),
    ("vec_u8_empty", "Vec<u8>", []),
    ("option_some_u64_max", "Option<u64>", U64_MAX),
)


# --- chain arithmetic and sysvars ------------------------------------------

# (name, epoch, slot_index, slots_in_epoch, absolute_slot, block_height, transaction_count)
EPOCH_INFO_CASES = (
    ("mainnet_typical", 500, 216000, 432000, 216216000, 180000000, 5000000000),
    ("epoch_start", 100, 0, 432000, 43200000, 35000000, 1000000000),
    ("epoch_end", 100, 431999, 432000, 43631999, 35500000, 1100000000),
    ("null_tx_count", 0, 0, 432000, 0, 0, None),
    ("devnet", 1000, 50000, 432000, 432050000, 300000000, 10000000000),
)

LAMPORTS_CASES = (
    ("zero", "0"),
    ("zero_decimal", "0.0"),
    ("one_sol", "1"),
    ("one_sol_decimal", "1.0"),
    ("half_sol", "0.5"),
    ("one_and_half_sol", "1.5"),
    ("one_lamport", "0.000000001"),
    ("full_precision", "1.123456789"),
    ("large_value", "1000"),
    ("complex_decimal", "8.50228288"),
    ("empty_string", ""),
    ("just_dot", "."),
    ("negative", "-1"),
    ("invalid_chars", "abc"),
    ("multiple_dots", "1.2.3"),
    ("excess_precision", "0.1234567891"),
    ("leading_dot", ".5"),
    ("trailing_dot", "5."),
    ("u64_overflow", "18446744074"),
)

RENT_CASES = (
    ("empty", 0),
    ("small", 100),
    ("medium", 1000),
    ("large", 10000),
    ("account_data", 165),
    ("mint_data", 82),
    ("nonce_data", 80),
)

# (name, data_len, lamports); None lamports means "exactly the minimum"
RENT_EXEMPT_CASES = (
    ("empty_at_minimum", 0, None),
    ("empty_one_below", 0, 890879),
    ("nonce_at_minimum", 80, None),
    ("token_account_funded", 165, 2039280),
    ("token_account_short", 165, 2039279),
    ("zero_balance", 1000, 0),
    ("max_balance", 10240, U64_MAX),
)

# (name, slot, epoch_start_timestamp, epoch, leader_schedule_epoch, unix_timestamp)
CLOCK_CASES = (
    ("genesis", 0, 0, 0, 0, 0),
    ("mainnet_typical", 250000000, 1700000000, 578, 579, 1700100000),
    ("negative_timestamp", 1000, -86400, 0, 0, -1),
    ("max_values", U64_MAX, I64_MAX, U64_MAX, U64_MAX, I64_MAX),
)

# (slots_per_epoch, leader_schedule_slot_offset, warmup) or None for the default, then (name, slot) rows
EPOCH_SCHEDULE_CASES = (
    (None, (
        ("no_warmup_slot_0", 0),
        ("no_warmup_slot_100", 100),
        ("no_warmup_epoch_boundary", 432000),
        ("no_warmup_epoch_5", 432000 * 5 + 1000),
    )),
    ((256, 256, True), (
        ("warmup_epoch_0", 0),
        ("warmup_epoch_0_end", 31),
        ("warmup_epoch_1", 32),
        ("warmup_epoch_2", 96),
        ("warmup_first_normal", 224),
        ("warmup_normal_epoch", 480),
    )),
)

# (name, [(slot, hash)])
SLOT_HASH_CASES = (
    ("empty", ()),
    ("single", ((100, SEQ32),)),
    ("descending_three", ((300, ONES32), (299, bytes([2] * 32)), (298, ZERO32))),
    ("max_slot", ((U64_MAX, bytes([0xAB] * 32)),)),
)

# (name, height, partitions, parent_blockhash, total_points, total_rewards, distributed, active)
EPOCH_REWARDS_CASES = (
    ("default", 0, 0, ZERO32, 0, 0, 0, False),
    ("active_distribution", 250000000, 64, SEQ32, 2 ** 70 + 12345, 500000000000, 125000000000, True),
    ("completed", 180000000, 1, ONES32, 1, 1000, 1000, False),
    ("max_values", U64_MAX, U64_MAX, ONES32, 2 ** 128 - 1, U64_MAX, U64_MAX, True),
)

LAST_RESTART_SLOT_CASES = (
    ("zero", 0),
    ("typical", 250000000),
    ("max", U64_MAX),
)


# --- account state ---------------------------------------------------------

FEATURE_STATE_CASES = (
    ("unactivated", None),
    ("activated_slot_0", 0),
    ("activated_slot_100", 100),
    ("activated_slot_max", U64_MAX),
)

# (name, authority, blockhash or None for uninitialized, lamports_per_signature)
NONCE_VERSIONS_CASES = (
    ("initialized", ALICE, bytes([0x42] * 32), 5000),
    ("uninitialized", None, None, 0),
    ("initialized_zero_fee", NONCE_AUTHORITY, SEQ32, 0),
)

# (name, state_type, authority, programdata_address, slot)
UPGRADEABLE_LOADER_STATE_CASES = (
    ("uninitialized", "Uninitialized", None, None, None),
    ("buffer_with_authority", "Buffer", ALICE, None, None),
    ("buffer_immutable", "Buffer", None, None, None),
    ("program", "Program", None, BOB, None),
    ("program_data_with_authority", "ProgramData", ALICE, None, 123456789),
    ("program_data_immutable", "ProgramData", None, None, 0),
)

# (name, slot, upgrade_authority)
PROGRAM_DATA_CASES = (
    ("with_authority", 250000000, ALICE),
    ("immutable", 1000, None),
    ("max_slot", U64_MAX, ONES32),
)

# (name, deactivation_slot, last_extended_slot, start_index, authority, addresses)
LOOKUP_TABLE_CASES = (
    ("active_empty", U64_MAX, 0, 0, ALICE, ()),
    ("active_two_addresses", U64_MAX, 1000, 0, ALICE, (ALICE, BOB)),
    ("frozen", U64_MAX, 5000, 2, None, (ids.SYSTEM_PROGRAM, ids.SYSVAR_CLOCK, ids.SYSVAR_RENT)),
    ("deactivated", 12345678, 12000000, 1, NONCE_AUTHORITY, (NONCE_ACCOUNT,)),
)

LOOKUP_TABLE_META_CASES = tuple(row[:5] for row in LOOKUP_TABLE_CASES) + (
    ("zero_deactivation_slot", 0, 0, 0, None),
)

# (name, node, voter, withdrawer, commission)
VOTE_INIT_CASES = (
    ("distinct_authorities", ALICE, BOB, NONCE_AUTHORITY, 10),
    ("same_authorities", ALICE, ALICE, ALICE, 0),
    ("max_commission", SEQ32, ONES32, ZERO32, 100),
    ("commission_overflow_byte", ZERO32, ZERO32, ZERO32, 255),
)

# (name, unix_timestamp, epoch, custodian)
LOCKUP_CASES = (
    ("default", 0, 0, ZERO32),
    ("typical", 1700000000, 500, ALICE),
    ("negative_timestamp", -1, 0, BOB),
    ("max_values", I64_MAX, U64_MAX, ONES32),
)

# (name, program, new_authority, authorize_type)
AUTHORIZE_CASES = (
    ("stake_staker", "stake", ALICE, 0),
    ("stake_withdrawer", "stake", BOB, 1),
    ("vote_voter", "vote", ALICE, 0),
    ("vote_withdrawer", "vote", NONCE_AUTHORITY, 1),
)


# --- errors ----------------------------------------------------------------

# (name, variant, custom_code)
INSTRUCTION_ERROR_CASES = (
    ("generic_error", "GenericError", None),
    ("invalid_argument", "InvalidArgument", None),
    ("invalid_instruction_data", "InvalidInstructionData", None),
    ("custom_42", "Custom", 42),
    ("insufficient_funds", "InsufficientFunds", None),
    ("account_already_initialized", "AccountAlreadyInitialized", None),
    ("missing_required_signature", "MissingRequiredSignature", None),
    ("custom_zero", "Custom", 0),
    ("custom_max", "Custom", U32_MAX),
    ("arithmetic_overflow", "ArithmeticOverflow", None),
    ("builtin_programs_must_consume_compute_units", "BuiltinProgramsMustConsumeComputeUnits", None),
)

# (name, variant, instruction_index, inner instruction error, custom_code)
TRANSACTION_ERROR_CASES = (
    ("account_in_use", "AccountInUse", None, None, None),
    ("account_loaded_twice", "AccountLoadedTwice", None, None, None),
    ("account_not_found", "AccountNotFound", None, None, None),
    ("insufficient_funds_for_fee", "InsufficientFundsForFee", None, None, None),
    ("invalid_account_for_fee", "InvalidAccountForFee", None, None, None),
    ("instruction_error_generic", "InstructionError", 0, "GenericError", None),
    ("instruction_error_invalid_arg", "InstructionError", 5, "InvalidArgument", None),
    ("blockhash_not_found", "BlockhashNotFound", None, None, None),
    ("program_account_not_found", "ProgramAccountNotFound", None, None, None),
    ("already_processed", "AlreadyProcessed", None, None, None),
    ("call_chain_too_deep", "CallChainTooDeep", None, None, None),
    ("sanitize_failure", "SanitizeFailure", None, None, None),
    ("cluster_maintenance", "ClusterMaintenance", None, None, None),
    ("instruction_error_custom", "InstructionError", 2, "Custom", 7),
    ("duplicate_instruction", "DuplicateInstruction", 3, None, None),
    ("insufficient_funds_for_rent", "InsufficientFundsForRent", 1, None, None),
    ("program_execution_temporarily_restricted", "ProgramExecutionTemporarilyRestricted", 4, None, None),
    ("commit_cancelled", "CommitCancelled", None, None, None),
)


# --- instructions ----------------------------------------------------------

# (name, instruction_type, fields); fields name the builder arguments
SYSTEM_INSTRUCTION_CASES = (
    ("transfer_1_sol", "Transfer", {"from_pubkey": ALICE, "to_pubkey": BOB, "lamports": 1_000_000_000}),
    ("transfer_zero", "Transfer", {"from_pubkey": ALICE, "to_pubkey": BOB, "lamports": 0}),
    ("transfer_max", "Transfer", {"from_pubkey": ALICE, "to_pubkey": BOB, "lamports": U64_MAX}),
    ("create_account", "CreateAccount", {
        "from_pubkey": ALICE, "to_pubkey": BOB, "lamports": 1_000_000, "space": 100,
        "owner": ids.BPF_LOADER_UPGRADEABLE,
    }),
    ("assign", "Assign", {"to_pubkey": BOB, "owner": ids.BPF_LOADER_UPGRADEABLE}),
    ("allocate", "Allocate", {"to_pubkey": BOB, "space": 200}),
    ("advance_nonce", "AdvanceNonceAccount", {"nonce": NONCE_ACCOUNT, "authority": NONCE_AUTHORITY}),
    ("withdraw_nonce", "WithdrawNonceAccount", {
        "nonce": NONCE_ACCOUNT, "authority": NONCE_AUTHORITY, "recipient": BOB, "lamports": 500_000,
    }),
    ("authorize_nonce", "AuthorizeNonceAccount", {
        "nonce": NONCE_ACCOUNT, "authority": NONCE_AUTHORITY, "new_authority": BOB,
    }),
)

_SEED_BASE = ALICE
SYSTEM_INSTRUCTION_EXTENDED_CASES = (
    ("create_account_with_seed", "CreateAccountWithSeed", {
        "base": _SEED_BASE, "seed": "stake:0", "lamports": 2_282_880, "space": 200, "owner": ids.STAKE_PROGRAM,
    }),
    ("create_account_with_empty_seed", "CreateAccountWithSeed", {
        "base": _SEED_BASE, "seed": "", "lamports": 0, "space": 0, "owner": ids.SYSTEM_PROGRAM,
    }),
    ("allocate_with_seed", "AllocateWithSeed", {
        "base": _SEED_BASE, "seed": "buffer", "space": 1024, "owner": ids.BPF_LOADER_UPGRADEABLE,
    }),
    ("assign_with_seed", "AssignWithSeed", {"base": _SEED_BASE, "seed": "vote", "owner": ids.VOTE_PROGRAM}),
    ("transfer_with_seed", "TransferWithSeed", {
        "base": _SEED_BASE, "seed": "savings", "lamports": 1_000_000_000, "owner": ids.SYSTEM_PROGRAM,
    }),
    ("transfer_with_max_len_seed", "TransferWithSeed", {
        "base": _SEED_BASE, "seed": "a" * 32, "lamports": 1, "owner": ids.SYSTEM_PROGRAM,
    }),
    ("initialize_nonce_account", "InitializeNonceAccount", {"authority": NONCE_AUTHORITY}),
    ("upgrade_nonce_account", "UpgradeNonceAccount", {}),
)

# (name, instruction_type, value)
COMPUTE_BUDGET_CASES = (
    ("set_compute_unit_limit_400k", "SetComputeUnitLimit", 400_000),
    ("set_compute_unit_limit_max", "SetComputeUnitLimit", 1_400_000),
    ("set_compute_unit_price_1000", "SetComputeUnitPrice", 1_000),
    ("set_compute_unit_price_1m", "SetComputeUnitPrice", 1_000_000),
    ("request_heap_frame_64k", "RequestHeapFrame", 65_536),
    ("request_heap_frame_256k", "RequestHeapFrame", 262_144),
    ("set_loaded_accounts_data_size_1m", "SetLoadedAccountsDataSizeLimit", 1_048_576),
    ("set_compute_unit_price_max", "SetComputeUnitPrice", U64_MAX),
)

# (name, instruction_type, fields)
LOADER_V3_CASES = (
    ("initialize_buffer", "InitializeBuffer", {}),
    ("write", "Write", {"write_offset": 100, "write_bytes": bytes([1, 2, 3, 4, 5, 6, 7, 8])}),
    ("set_authority", "SetAuthority", {}),
    ("close", "Close", {}),
    ("extend_program", "ExtendProgram", {"additional_bytes": 1024}),
    ("deploy_with_max_data_len", "DeployWithMaxDataLen", {"max_data_len": 10000}),
    ("upgrade", "Upgrade", {}),
    ("set_authority_checked", "SetAuthorityChecked", {}),
    ("migrate", "Migrate", {}),
    ("extend_program_checked", "ExtendProgramChecked", {"additional_bytes": 4096}),
    ("write_empty", "Write", {"write_offset": 0, "write_bytes": b""}),
)

STAKE_CASES = (
    ("initialize", "Initialize", {}),
    ("delegate_stake", "DelegateStake", {}),
    ("split", "Split", {"lamports": 1_000_000_000}),
    ("withdraw", "Withdraw", {"lamports": 500_000_000}),
    ("deactivate", "Deactivate", {}),
    ("merge", "Merge", {}),
    ("initialize_checked", "InitializeChecked", {}),
    ("get_minimum_delegation", "GetMinimumDelegation", {}),
    ("deactivate_delinquent", "DeactivateDelinquent", {}),
    ("move_stake", "MoveStake", {"lamports": 2_000_000_000}),
    ("move_lamports", "MoveLamports", {"lamports": 1}),
)

ALT_CASES = (
    ("create_lookup_table", "CreateLookupTable", {"recent_slot": 12345678, "bump_seed": 255}),
    ("freeze_lookup_table", "FreezeLookupTable", {}),
    ("extend_lookup_table_empty", "ExtendLookupTable", {"new_addresses": ()}),
    ("deactivate_lookup_table", "DeactivateLookupTable", {}),
    ("close_lookup_table", "CloseLookupTable", {}),
    ("extend_lookup_table_two", "ExtendLookupTable", {"new_addresses": (ALICE, BOB)}),
)

LOADER_V4_CASES = (
    ("write", "Write", {"offset": 0, "data": bytes([1, 2, 3, 4])}),
    ("write_with_offset", "Write", {"offset": 100, "data": bytes([0xAB] * 8)}),
    ("set_program_length", "SetProgramLength", {"new_size": 1024}),
    ("deploy", "Deploy", {}),
    ("retract", "Retract", {}),
    ("transfer_authority", "TransferAuthority", {}),
    ("finalize", "Finalize", {}),
)

VOTE_CASES = (
    ("authorize_voter", "Authorize", {"new_authority": unique(1), "vote_authorize": 0}),
    ("authorize_withdrawer", "Authorize", {"new_authority": unique(2), "vote_authorize": 1}),
    ("withdraw", "Withdraw", {"lamports": 1_000_000_000}),
    ("update_commission", "UpdateCommission", {"commission": 50}),
    ("update_validator_identity", "UpdateValidatorIdentity", {}),
    ("authorize_checked_voter", "AuthorizeChecked", {"vote_authorize": 0}),
    ("authorize_checked_withdrawer", "AuthorizeChecked", {"vote_authorize": 1}),
)

FEATURE_ID = bytes([0xFE] * 32)
FEATURE_FUNDER = ALICE


# --- messages --------------------------------------------------------------

# (name, num_required_signatures, num_readonly_signed, num_readonly_unsigned)
MESSAGE_HEADER_CASES = (
    ("simple_transfer", 1, 0, 1),
    ("multi_sig", 2, 1, 3),
    ("empty", 0, 0, 0),
    ("max_values", 255, 128, 64),
)

# (name, program_id_index, accounts, data)
COMPILED_INSTRUCTION_CASES = (
    ("transfer", 2, (0, 1), bytes([2, 0, 0, 0, 0, 202, 154, 59, 0, 0, 0, 0])),
    ("compute_budget", 1, (0,), bytes([3, 232, 3, 0, 0, 0, 0, 0, 0])),
    ("empty", 0, (), b""),
    ("long_data", 5, tuple(range(10)), bytes(200)),
)

# (name, pubkey, is_signer, is_writable)
ACCOUNT_META_CASES = (
    ("signer_writable", ALICE, True, True),
    ("signer_readonly", ALICE, True, False),
    ("nonsigner_writable", ALICE, False, True),
    ("nonsigner_readonly", ALICE, False, False),
)

_TRANSFER_1 = bytes([2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0])
# (name, header, account_keys, blockhash, [(program_id_index, data, accounts)])
MESSAGE_CASES = (
    ("simple_transfer", (1, 0, 1), (ALICE, BOB, ids.SYSTEM_PROGRAM), RECENT_BLOCKHASH,
     ((2, _TRANSFER_1, (0, 1)),)),
    ("empty_message", (0, 0, 0), (), ZERO32, ()),
    ("multi_instruction", (2, 1, 1), (ALICE, BOB, ids.BPF_LOADER_UPGRADEABLE, ids.SYSTEM_PROGRAM), RECENT_BLOCKHASH,
     ((3, bytes([2, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0]), (0, 1)), (3, bytes([1, 0, 0, 0]), (1, 2)))),
)

LOOKUP_TABLE_KEY = NONCE_ACCOUNT
# (name, header, account_keys, blockhash, instructions, [(table, writable, readonly)])
VERSIONED_MESSAGE_CASES = (
    ("v0_no_lookups", (1, 0, 1), (ALICE, BOB, ids.SYSTEM_PROGRAM), RECENT_BLOCKHASH,
     ((2, _TRANSFER_1, (0, 1)),), ()),
    ("v0_single_lookup", (1, 0, 1), (ALICE, ids.SYSTEM_PROGRAM), RECENT_BLOCKHASH,
     ((1, _TRANSFER_1, (0, 2)),), ((LOOKUP_TABLE_KEY, (0,), (1, 2)),)),
    ("v0_two_lookups", (1, 0, 1), (ALICE, ids.SYSTEM_PROGRAM), RECENT_BLOCKHASH,
     ((1, _TRANSFER_1, (0, 2)), (1, bytes([1, 0, 0, 0]), (3,))),
     ((LOOKUP_TABLE_KEY, (0,), ()), (NONCE_AUTHORITY, (5,), (6, 7)))),
    ("v0_empty", (0, 0, 0), (), ZERO32, (), ()),
)

# Transactions: (name, signer seeds, instruction steps); the first signer pays.
# Steps: ("transfer", to, lamports), ("compute_unit_limit", units),
# ("compute_unit_price", micro_lamports), ("create_account", lamports, space, owner)
TRANSACTION_CASES = (
    ("legacy_transfer", (PAYER_SEED,), (("transfer", BOB, 1_000_000_000),)),
    ("legacy_priority_transfer", (PAYER_SEED,), (
        ("compute_unit_limit", 200_000),
        ("compute_unit_price", 10_000),
        ("transfer", BOB, 5_000),
    )),
    ("legacy_create_account_two_signers", (PAYER_SEED, SECOND_SIGNER_SEED), (
        ("create_account", 1_461_600, 82, ids.BPF_LOADER_UPGRADEABLE),
    )),
)
# (name, payer seed, lookup table, writable lookup indexes, lamports); the
# transfer goes to the first address loaded from the table
VERSIONED_TRANSACTION_CASES = (
    ("v0_transfer_to_lookup_address", PAYER_SEED, LOOKUP_TABLE_KEY, (0,), 1_000_000),
    ("v0_transfer_to_fifth_table_entry", PAYER_SEED, NONCE_AUTHORITY, (4,), 42),
)


# --- precompiles -----------------------------------------------------------

# (name, signer seed, message)
ED25519_INSTRUCTION_CASES = (
    ("single_signature", SIGNER_SEED, b"hello ed25519 precompile"),
    ("empty_message", SIGNER_SEED, b""),
    ("long_message", OTHER_SIGNER_SEED, bytes(range(256)) * 2),
)

# (name, message_len, instruction index) for the single-signature layout, or
# (name, explicit field tuple) for hand-placed tables
SECP256K1_INSTRUCTION_CASES = (
    ("single_signature_current", 32, 0),
    ("single_signature_other_instruction", 11, 1),
    ("zero_offsets", (0, 0, 0, 0, 0, 0, 0)),
    ("max_values", (U16_MAX, U8_MAX, U16_MAX, U8_MAX, U16_MAX, U16_MAX, U8_MAX)),
)

SECP256R1_INSTRUCTION_CASES = (
    ("single_signature", 32),
    ("empty_message", 0),
    ("zero_offsets", (0, 0, 0, 0, 0, 0, 0)),
    ("cross_instruction", (200, 1, 100, 2, 300, 64, 3)),
    ("max_values", (U16_MAX,) * 7),
)


# --- math ------------------------------------------------------------------

# (name, base, exponent, modulus), all big-endian
BIG_MOD_EXP_CASES = (
    ("simple", bytes([3]), bytes([4]), bytes([7])),
    ("any_pow_0_mod_m", bytes([42]), bytes([0]), bytes([17])),
    ("base_pow_exp_mod_1", bytes([5]), bytes([3]), bytes([1])),
    ("modulus_zero", bytes([5]), bytes([3]), bytes([0, 0])),
    ("zero_base", bytes([0]), bytes([5]), bytes([13])),
    ("padded_result", bytes([2]), bytes([1]), bytes([1, 0, 1])),
    ("fermat_little", bytes([2]), (65536).to_bytes(3, "big"), (65537).to_bytes(3, "big")),
    ("rsa_like_256", ONES32, bytes([1, 0, 1]), bytes([0xFF] * 31 + [0xF1])),
    ("empty_inputs", b"", b"", bytes([9])),
)
