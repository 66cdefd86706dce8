"""One generator per vector family.

Every generator takes no arguments, reads its rows from ``catalog`` and
returns the records in catalog order. Bytes come from the oracle modules;
nothing here encodes by hand. A failing case raises a ``VectorError``
carrying the case name; the driver adds the family.
"""

import json
from contextlib import contextmanager
from dataclasses import astuple
from typing import Optional, Union

from . import catalog
from . import programs
from .chain_errors import encode_instruction_error, encode_transaction_error, instruction_error_code
from .codec import BorshReader, decode_short_u16, decode_value, encode_short_u16, encode_value
from .crypto import (
    Keypair,
    b58decode,
    b58encode,
    big_mod_exp,
    blake3_hash,
    hash_to_string,
    keccak256,
    pubkey,
    sha256,
    verify_ed25519,
)
from .curve import is_on_curve
from .errors import EncodingError, VectorError
from .instructions import (
    COMPUTE_BUDGET_INSTRUCTIONS,
    AccountMeta,
    activate_feature,
    advance_nonce_account,
    allocate,
    allocate_with_seed,
    assign,
    assign_with_seed,
    authorize_nonce_account,
    create_account,
    create_account_with_seed,
    encode_alt_instruction,
    encode_loader_v3_instruction,
    encode_loader_v4_instruction,
    encode_stake_instruction,
    encode_system_instruction,
    encode_vote_instruction,
    initialize_nonce_account,
    request_heap_frame,
    revoke_pending_activation,
    set_compute_unit_limit,
    set_compute_unit_price,
    set_loaded_accounts_data_size_limit,
    transfer,
    transfer_with_seed,
    upgrade_nonce_account,
    withdraw_nonce_account,
)
from .message import (
    CompiledInstruction,
    LegacyMessage,
    MessageAddressTableLookup,
    MessageHeader,
    Transaction,
    V0Message,
    compile_legacy_message,
    signer_keys,
)
from .pda import create_program_address, create_with_seed, find_program_address
from .precompiles import (
    Secp256k1SignatureOffsets,
    Secp256r1SignatureOffsets,
    ed25519_offsets_for,
    new_ed25519_instruction,
    secp256k1_offsets_for,
    secp256r1_offsets_for,
)
from .state import (
    FEATURE_SIZE,
    AddressLookupTable,
    Lockup,
    LookupTableMeta,
    NonceData,
    VoteInit,
    durable_nonce_from_blockhash,
    serialize_feature,
    serialize_nonce_versions,
    serialize_program_data_header,
    serialize_upgradeable_loader_state,
)
from .sysvars import (
    CLOCK_SIZE,
    EPOCH_REWARDS_SIZE,
    EPOCH_SCHEDULE_SIZE,
    LAST_RESTART_SLOT_SIZE,
    Clock,
    EpochRewards,
    EpochSchedule,
    LastRestartSlot,
    Rent,
    SlotHashes,
)
from .token import sol_str_to_lamports
from .types import (
    AccountMetaVector,
    AddressLookupTableInstructionVector,
    AddressLookupTableStateVector,
    AddressVector,
    AuthorizeVector,
    BigModExpVector,
    ClockVector,
    CodecVector,
    CompiledInstructionVector,
    ComputeBudgetVector,
    DurableNonceVector,
    Ed25519InstructionVector,
    Ed25519VerifyVector,
    EpochInfoVector,
    EpochRewardsVector,
    EpochScheduleVector,
    FeatureGateInstructionVector,
    FeatureStateVector,
    HashFunctionVector,
    HashVector,
    InstructionErrorVector,
    KeypairVector,
    LamportsVector,
    LastRestartSlotVector,
    LoaderV3InstructionVector,
    LoaderV4InstructionVector,
    LockupVector,
    LookupTableMetaVector,
    MessageHeaderVector,
    MessageVector,
    NonceVersionsVector,
    PdaVector,
    ProgramDataVector,
    PubkeyVector,
    RentExemptVector,
    RentVector,
    Secp256k1InstructionVector,
    Secp256r1InstructionVector,
    ShortVecVector,
    SignatureVector,
    SignerSeedsVector,
    SlotHashEntry,
    SlotHashVector,
    StakeInstructionVector,
    SystemInstructionExtendedVector,
    SystemInstructionVector,
    TransactionErrorVector,
    TransactionVector,
    UpgradeableLoaderStateVector,
    VersionedMessageVector,
    VoteInitVector,
    VoteInstructionVector,
)

Key = Union[str, bytes]


@contextmanager
def _case(name: str):
    try:
        yield
    except VectorError as e:
        if e.case is None:
            e.case = name
        raise


def _key(value: Optional[Key]) -> Optional[bytes]:
    """Catalog address (base58 text or raw bytes) as 32 raw bytes."""
    if value is None:
        return None
    if isinstance(value, str):
        return pubkey(value)
    if len(value) != 32:
        raise EncodingError(f"address literal must be 32 bytes, got {len(value)}")
    return bytes(value)


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise EncodingError(message)


# --- raw identifiers -------------------------------------------------------

def _address_vectors(rows, record=AddressVector):
    out = []
    for name, value in rows:
        with _case(name):
            raw = _key(value)
            text = b58encode(raw)
            _check(b58decode(text) == raw, "base58 does not round-trip")
            out.append(record(name, raw, text))
    return out


def generate_pubkey():
    return _address_vectors(catalog.PUBKEY_CASES, PubkeyVector)


def generate_hash():
    out = []
    for name, raw in catalog.HASH_CASES:
        with _case(name):
            out.append(HashVector(name, raw, hash_to_string(raw)))
    return out


def generate_signature():
    out = []
    for name, raw in catalog.SIGNATURE_CASES:
        with _case(name):
            _check(len(raw) == 64, "signature literal must be 64 bytes")
            out.append(SignatureVector(name, raw, b58encode(raw)))
    return out


def generate_sysvar_id():
    return _address_vectors(catalog.SYSVAR_ID_CASES)


def generate_native_program_id():
    return _address_vectors(catalog.NATIVE_PROGRAM_ID_CASES)


def generate_special_addresses():
    return _address_vectors(catalog.SPECIAL_ADDRESS_CASES)


# --- derivation and keys ---------------------------------------------------

def generate_pda():
    out = []
    for name, program_id, seeds in catalog.PDA_CASES:
        with _case(name):
            program_id = _key(program_id)
            address, bump = find_program_address(seeds, program_id)
            _check(not is_on_curve(address), "derived address is on the curve")
            _check(
                create_program_address(list(seeds) + [bytes([bump])], program_id) == address,
                "derived address does not re-derive from its bump",
            )
            out.append(PdaVector(name, program_id, list(seeds), address, bump))
    return out


def generate_signer_seeds():
    out = []
    for name, program_id, seeds in catalog.SIGNER_SEEDS_CASES:
        with _case(name):
            program_id = _key(program_id)
            address, bump = find_program_address(seeds, program_id)
            signer_seeds = list(seeds) + [bytes([bump])]
            _check(create_program_address(signer_seeds, program_id) == address, "signer seeds do not re-derive")
            out.append(SignerSeedsVector(name, program_id, list(seeds), bump, signer_seeds, address))
    return out


def generate_keypair():
    out = []
    for name, seed, message in catalog.KEYPAIR_CASES:
        with _case(name):
            kp = Keypair.from_seed(seed)
            signature = kp.sign(message)
            _check(verify_ed25519(kp.pubkey, message, signature), "signature does not verify")
            out.append(KeypairVector(name, seed, kp.to_bytes(), kp.pubkey, message, signature))
    return out


def generate_ed25519_verify():
    out = []
    for name, sign_seed, key_seed, signed, presented, expected in catalog.ED25519_VERIFY_CASES:
        with _case(name):
            signature = Keypair.from_seed(sign_seed).sign(signed)
            public_key = Keypair.from_seed(key_seed).pubkey
            valid = verify_ed25519(public_key, presented, signature)
            _check(valid == expected, f"verification returned {valid}, expected {expected}")
            out.append(Ed25519VerifyVector(name, public_key, presented, signature, valid))
    return out


# --- hashing ---------------------------------------------------------------

def _hash_vectors(rows, fn):
    out = []
    for name, data in rows:
        with _case(name):
            digest = fn(data)
            _check(len(digest) == 32, "digest must be 32 bytes")
            out.append(HashFunctionVector(name, data, digest))
    return out


def generate_sha256():
    return _hash_vectors(catalog.SHA256_CASES, sha256)


def generate_keccak256():
    return _hash_vectors(catalog.KECCAK256_CASES, keccak256)


def generate_blake3():
    return _hash_vectors(catalog.BLAKE3_CASES, blake3_hash)


def generate_durable_nonce():
    out = []
    for name, blockhash in catalog.DURABLE_NONCE_CASES:
        with _case(name):
            out.append(DurableNonceVector(name, blockhash, durable_nonce_from_blockhash(blockhash)))
    return out


# --- codec primitives ------------------------------------------------------

def generate_short_vec():
    out = []
    for name, value in catalog.SHORT_VEC_CASES:
        with _case(name):
            encoded = encode_short_u16(value)
            _check(decode_short_u16(encoded) == (value, len(encoded)), "short_u16 does not round-trip")
            out.append(ShortVecVector(name, value, encoded))
    return out


def _codec_vectors(codec: str):
    out = []
    for name, type_name, value in catalog.CODEC_CASES:
        with _case(name):
            encoded = encode_value(codec, type_name, value)
            _check(decode_value(codec, type_name, encoded) == value, f"{codec} value does not round-trip")
            value_json = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
            out.append(CodecVector(name, type_name, value_json, encoded))
    return out


def generate_bincode():
    return _codec_vectors("bincode")


def generate_borsh():
    return _codec_vectors("borsh")


# --- chain arithmetic and sysvars ------------------------------------------

def generate_epoch_info():
    return [EpochInfoVector(*row) for row in catalog.EPOCH_INFO_CASES]


def generate_lamports():
    return [LamportsVector(name, text, sol_str_to_lamports(text)) for name, text in catalog.LAMPORTS_CASES]


def generate_rent():
    rent = Rent()
    return [RentVector(name, data_len, rent.minimum_balance(data_len)) for name, data_len in catalog.RENT_CASES]


def generate_rent_exempt():
    rent = Rent()
    out = []
    for name, data_len, lamports in catalog.RENT_EXEMPT_CASES:
        minimum = rent.minimum_balance(data_len)
        if lamports is None:
            lamports = minimum
        out.append(RentExemptVector(name, data_len, lamports, minimum, rent.is_exempt(lamports, data_len)))
    return out


def generate_clock():
    out = []
    for name, *fields in catalog.CLOCK_CASES:
        with _case(name):
            serialized = Clock(*fields).serialize()
            _check(len(serialized) == CLOCK_SIZE, f"clock serialized to {len(serialized)} bytes")
            out.append(ClockVector(name, *fields, serialized))
    return out


def generate_epoch_schedule():
    out = []
    for config, rows in catalog.EPOCH_SCHEDULE_CASES:
        schedule = EpochSchedule.without_warmup() if config is None else EpochSchedule.custom(*config)
        serialized = schedule.serialize()
        for name, slot in rows:
            with _case(name):
                _check(len(serialized) == EPOCH_SCHEDULE_SIZE, "epoch schedule has the wrong size")
                epoch, slot_index = schedule.get_epoch_and_slot_index(slot)
                out.append(
                    EpochScheduleVector(
                        name,
                        schedule.slots_per_epoch,
                        schedule.warmup,
                        schedule.first_normal_epoch,
                        schedule.first_normal_slot,
                        slot,
                        epoch,
                        slot_index,
                        schedule.get_slots_in_epoch(epoch),
                        schedule.get_first_slot_in_epoch(epoch),
                        serialized,
                    )
                )
    return out


def generate_slot_hash():
    out = []
    for name, entries in catalog.SLOT_HASH_CASES:
        with _case(name):
            serialized = SlotHashes(list(entries)).serialize()
            out.append(SlotHashVector(name, [SlotHashEntry(slot, h) for slot, h in entries], serialized))
    return out


def generate_epoch_rewards():
    out = []
    for name, *fields in catalog.EPOCH_REWARDS_CASES:
        with _case(name):
            serialized = EpochRewards(*fields).serialize()
            _check(len(serialized) == EPOCH_REWARDS_SIZE, f"epoch rewards serialized to {len(serialized)} bytes")
            out.append(EpochRewardsVector(name, *fields, serialized))
    return out


def generate_last_restart_slot():
    out = []
    for name, slot in catalog.LAST_RESTART_SLOT_CASES:
        with _case(name):
            serialized = LastRestartSlot(slot).serialize()
            _check(len(serialized) == LAST_RESTART_SLOT_SIZE, "last restart slot has the wrong size")
            out.append(LastRestartSlotVector(name, slot, serialized))
    return out


# --- account state ---------------------------------------------------------

def generate_feature_state():
    return [FeatureStateVector(name, slot, serialize_feature(slot)) for name, slot in catalog.FEATURE_STATE_CASES]


def generate_nonce_versions():
    out = []
    for name, authority, blockhash, lamports_per_signature in catalog.NONCE_VERSIONS_CASES:
        with _case(name):
            if blockhash is None:
                out.append(NonceVersionsVector(name, b"", b"", 0, serialize_nonce_versions(None)))
                continue
            data = NonceData(_key(authority), durable_nonce_from_blockhash(blockhash), lamports_per_signature)
            out.append(
                NonceVersionsVector(
                    name, data.authority, data.durable_nonce, lamports_per_signature, serialize_nonce_versions(data)
                )
            )
    return out


def generate_upgradeable_loader_state():
    out = []
    for name, state_type, authority, programdata, slot in catalog.UPGRADEABLE_LOADER_STATE_CASES:
        with _case(name):
            authority, programdata = _key(authority), _key(programdata)
            serialized = serialize_upgradeable_loader_state(state_type, authority, programdata, slot)
            out.append(UpgradeableLoaderStateVector(name, state_type, authority, programdata, slot, serialized))
    return out


def generate_program_data():
    out = []
    for name, slot, authority in catalog.PROGRAM_DATA_CASES:
        with _case(name):
            authority = _key(authority)
            out.append(ProgramDataVector(name, slot, authority, serialize_program_data_header(slot, authority)))
    return out


def generate_address_lookup_table_state():
    out = []
    for name, deactivation, extended, start_index, authority, addresses in catalog.LOOKUP_TABLE_CASES:
        with _case(name):
            meta = LookupTableMeta(deactivation, extended, start_index, _key(authority))
            addresses = [_key(a) for a in addresses]
            serialized = AddressLookupTable(meta, addresses).serialize()
            out.append(
                AddressLookupTableStateVector(
                    name, deactivation, extended, start_index, meta.authority, addresses, serialized
                )
            )
    return out


def generate_lookup_table_meta():
    out = []
    for name, deactivation, extended, start_index, authority in catalog.LOOKUP_TABLE_META_CASES:
        with _case(name):
            meta = LookupTableMeta(deactivation, extended, start_index, _key(authority))
            out.append(
                LookupTableMetaVector(
                    name, deactivation, extended, start_index, meta.authority, meta.is_active(), meta.serialize()
                )
            )
    return out


def generate_vote_init():
    out = []
    for name, node, voter, withdrawer, commission in catalog.VOTE_INIT_CASES:
        with _case(name):
            init = VoteInit(_key(node), _key(voter), _key(withdrawer), commission)
            out.append(
                VoteInitVector(
                    name,
                    init.node_pubkey,
                    init.authorized_voter,
                    init.authorized_withdrawer,
                    commission,
                    init.serialize(),
                    encode_vote_instruction("InitializeAccount", vote_init=init),
                )
            )
    return out


def generate_lockup():
    out = []
    for name, unix_timestamp, epoch, custodian in catalog.LOCKUP_CASES:
        with _case(name):
            lockup = Lockup(unix_timestamp, epoch, _key(custodian))
            out.append(LockupVector(name, unix_timestamp, epoch, lockup.custodian, lockup.serialize()))
    return out


def generate_authorize():
    out = []
    for name, program, new_authority, authorize_type in catalog.AUTHORIZE_CASES:
        with _case(name):
            new_authority = _key(new_authority)
            if program == "stake":
                encoded = encode_stake_instruction(
                    "Authorize", new_authority=new_authority, stake_authorize=authorize_type
                )
            else:
                encoded = encode_vote_instruction("Authorize", new_authority=new_authority, vote_authorize=authorize_type)
            out.append(AuthorizeVector(name, program, new_authority, authorize_type, encoded))
    return out


# --- errors ----------------------------------------------------------------

def generate_instruction_error():
    out = []
    for name, variant, custom_code in catalog.INSTRUCTION_ERROR_CASES:
        with _case(name):
            out.append(
                InstructionErrorVector(
                    name, instruction_error_code(variant), custom_code, encode_instruction_error(variant, custom_code)
                )
            )
    return out


def generate_transaction_error():
    out = []
    for name, variant, index, inner, custom_code in catalog.TRANSACTION_ERROR_CASES:
        with _case(name):
            out.append(
                TransactionErrorVector(name, variant, index, encode_transaction_error(variant, index, inner, custom_code))
            )
    return out


# --- instructions ----------------------------------------------------------

def _system_builder(kind: str, f: dict):
    if kind == "Transfer":
        return transfer(_key(f["from_pubkey"]), _key(f["to_pubkey"]), f["lamports"])
    if kind == "CreateAccount":
        return create_account(
            _key(f["from_pubkey"]), _key(f["to_pubkey"]), f["lamports"], f["space"], _key(f["owner"])
        )
    if kind == "Assign":
        return assign(_key(f["to_pubkey"]), _key(f["owner"]))
    if kind == "Allocate":
        return allocate(_key(f["to_pubkey"]), f["space"])
    if kind == "AdvanceNonceAccount":
        return advance_nonce_account(_key(f["nonce"]), _key(f["authority"]))
    if kind == "WithdrawNonceAccount":
        return withdraw_nonce_account(_key(f["nonce"]), _key(f["authority"]), _key(f["recipient"]), f["lamports"])
    if kind == "AuthorizeNonceAccount":
        return authorize_nonce_account(_key(f["nonce"]), _key(f["authority"]), _key(f["new_authority"]))
    raise EncodingError(f"no system builder for {kind}")


def generate_system_instruction():
    out = []
    for name, kind, fields in catalog.SYSTEM_INSTRUCTION_CASES:
        with _case(name):
            ix = _system_builder(kind, fields)
            _check(ix.program_id == pubkey(programs.SYSTEM_PROGRAM), "system builder used another program")
            out.append(
                SystemInstructionVector(
                    name,
                    kind,
                    ix.data,
                    _key(fields.get("from_pubkey")),
                    _key(fields.get("to_pubkey")),
                    fields.get("lamports"),
                    fields.get("space"),
                    _key(fields.get("owner")),
                )
            )
    return out


def generate_system_instruction_extended():
    nonce_account = _key(catalog.NONCE_ACCOUNT)
    recipient = _key(catalog.BOB)
    out = []
    for name, kind, f in catalog.SYSTEM_INSTRUCTION_EXTENDED_CASES:
        with _case(name):
            base, owner, authority = _key(f.get("base")), _key(f.get("owner")), _key(f.get("authority"))
            seed = f.get("seed")
            derived = create_with_seed(base, seed, owner) if base is not None else None
            if kind == "CreateAccountWithSeed":
                ix = create_account_with_seed(base, derived, base, seed, f["lamports"], f["space"], owner)
            elif kind == "AllocateWithSeed":
                ix = allocate_with_seed(derived, base, seed, f["space"], owner)
            elif kind == "AssignWithSeed":
                ix = assign_with_seed(derived, base, seed, owner)
            elif kind == "TransferWithSeed":
                ix = transfer_with_seed(derived, base, seed, owner, recipient, f["lamports"])
            elif kind == "InitializeNonceAccount":
                ix = initialize_nonce_account(nonce_account, authority)
            else:
                ix = upgrade_nonce_account(nonce_account)
            out.append(
                SystemInstructionExtendedVector(
                    name, kind, ix.data, base, seed, derived, f.get("lamports"), f.get("space"), owner, authority
                )
            )
    return out


_COMPUTE_BUDGET_BUILDERS = {
    "RequestHeapFrame": request_heap_frame,
    "SetComputeUnitLimit": set_compute_unit_limit,
    "SetComputeUnitPrice": set_compute_unit_price,
    "SetLoadedAccountsDataSizeLimit": set_loaded_accounts_data_size_limit,
}


def generate_compute_budget():
    out = []
    for name, kind, value in catalog.COMPUTE_BUDGET_CASES:
        with _case(name):
            ix = _COMPUTE_BUDGET_BUILDERS[kind](value)
            r = BorshReader(ix.data)
            _check(r.tag() == COMPUTE_BUDGET_INSTRUCTIONS.index(kind), "compute budget tag mismatch")
            decoded = r.u64() if kind == "SetComputeUnitPrice" else r.u32()
            r.finish()
            _check(decoded == value, "compute budget value does not round-trip")
            out.append(ComputeBudgetVector(name, kind, ix.data, value))
    return out


def generate_loader_v3_instruction():
    out = []
    for name, kind, f in catalog.LOADER_V3_CASES:
        with _case(name):
            encoded = encode_loader_v3_instruction(kind, **f)
            out.append(
                LoaderV3InstructionVector(
                    name,
                    kind,
                    encoded,
                    f.get("write_offset"),
                    f.get("write_bytes"),
                    f.get("max_data_len"),
                    f.get("additional_bytes"),
                )
            )
    return out


def generate_loader_v4_instruction():
    out = []
    for name, kind, f in catalog.LOADER_V4_CASES:
        with _case(name):
            encoded = encode_loader_v4_instruction(kind, **f)
            data = f.get("data")
            out.append(
                LoaderV4InstructionVector(name, kind, encoded, f.get("offset"), len(data) if data is not None else None)
            )
    return out


def generate_stake_instruction():
    out = []
    for name, kind, f in catalog.STAKE_CASES:
        with _case(name):
            out.append(StakeInstructionVector(name, kind, encode_stake_instruction(kind, **f), f.get("lamports")))
    return out


def generate_address_lookup_table_instruction():
    out = []
    for name, kind, f in catalog.ALT_CASES:
        with _case(name):
            addresses = f.get("new_addresses")
            if addresses is not None:
                addresses = [_key(a) for a in addresses]
            encoded = encode_alt_instruction(kind, f.get("recent_slot"), f.get("bump_seed"), addresses)
            out.append(
                AddressLookupTableInstructionVector(
                    name, kind, encoded, f.get("recent_slot"), f.get("bump_seed"), addresses
                )
            )
    return out


def generate_vote_instruction():
    out = []
    for name, kind, f in catalog.VOTE_CASES:
        with _case(name):
            encoded = encode_vote_instruction(
                kind,
                new_authority=f.get("new_authority"),
                vote_authorize=f.get("vote_authorize"),
                lamports=f.get("lamports"),
                commission=f.get("commission"),
            )
            out.append(
                VoteInstructionVector(
                    name, kind, encoded, f.get("vote_authorize"), f.get("commission"), f.get("lamports")
                )
            )
    return out


def generate_feature_gate_instruction():
    feature_id = catalog.FEATURE_ID
    transfer_ix, allocate_ix, assign_ix = activate_feature(feature_id, _key(catalog.FEATURE_FUNDER))
    lamports = Rent().minimum_balance(FEATURE_SIZE)
    feature_program = pubkey(programs.FEATURE_PROGRAM)
    revoke_ix = revoke_pending_activation(feature_id)
    return [
        FeatureGateInstructionVector(
            "activate_transfer", "Transfer", transfer_ix.program_id, transfer_ix.data, lamports, None, None
        ),
        FeatureGateInstructionVector(
            "activate_allocate", "Allocate", allocate_ix.program_id, allocate_ix.data, None, FEATURE_SIZE, None
        ),
        FeatureGateInstructionVector(
            "activate_assign", "Assign", assign_ix.program_id, assign_ix.data, None, None, feature_program
        ),
        FeatureGateInstructionVector(
            "revoke_pending_activation",
            "RevokePendingActivation",
            revoke_ix.program_id,
            revoke_ix.data,
            None,
            None,
            None,
        ),
    ]


def generate_account_meta():
    out = []
    for name, key, is_signer, is_writable in catalog.ACCOUNT_META_CASES:
        with _case(name):
            meta = AccountMeta(_key(key), is_signer, is_writable)
            out.append(AccountMetaVector(name, meta.pubkey, is_signer, is_writable, meta.serialize()))
    return out


# --- precompiles -----------------------------------------------------------

def generate_ed25519_instruction():
    out = []
    for name, seed, message in catalog.ED25519_INSTRUCTION_CASES:
        with _case(name):
            kp = Keypair.from_seed(seed)
            signature = kp.sign(message)
            _check(verify_ed25519(kp.pubkey, message, signature), "signature does not verify")
            offsets = ed25519_offsets_for(len(message))
            ix = new_ed25519_instruction(kp.pubkey, signature, message)
            out.append(
                Ed25519InstructionVector(
                    name,
                    ix.data[0],
                    offsets.signature_offset,
                    offsets.signature_instruction_index,
                    offsets.public_key_offset,
                    offsets.public_key_instruction_index,
                    offsets.message_data_offset,
                    offsets.message_data_size,
                    offsets.message_instruction_index,
                    offsets.pack(),
                    kp.pubkey,
                    signature,
                    message,
                    ix.data,
                )
            )
    return out


def generate_secp256k1_instruction():
    out = []
    for row in catalog.SECP256K1_INSTRUCTION_CASES:
        name = row[0]
        with _case(name):
            if isinstance(row[1], tuple):
                offsets = Secp256k1SignatureOffsets(*row[1])
            else:
                offsets = secp256k1_offsets_for(row[1], row[2])
            out.append(Secp256k1InstructionVector(name, *astuple(offsets), offsets.pack()))
    return out


def generate_secp256r1_instruction():
    out = []
    for name, layout in catalog.SECP256R1_INSTRUCTION_CASES:
        with _case(name):
            if isinstance(layout, tuple):
                offsets = Secp256r1SignatureOffsets(*layout)
            else:
                offsets = secp256r1_offsets_for(layout)
            out.append(Secp256r1InstructionVector(name, *astuple(offsets), offsets.pack()))
    return out


# --- messages and transactions ---------------------------------------------

def generate_message_header():
    out = []
    for name, *counts in catalog.MESSAGE_HEADER_CASES:
        with _case(name):
            out.append(MessageHeaderVector(name, *counts, MessageHeader(*counts).serialize()))
    return out


def generate_compiled_instruction():
    out = []
    for name, program_id_index, accounts, data in catalog.COMPILED_INSTRUCTION_CASES:
        with _case(name):
            ix = CompiledInstruction(program_id_index, list(accounts), data)
            out.append(CompiledInstructionVector(name, program_id_index, bytes(accounts), data, ix.serialize()))
    return out


def _compiled(rows):
    return [CompiledInstruction(index, list(accounts), data) for index, data, accounts in rows]


def generate_message():
    out = []
    for name, header, keys, blockhash, instructions in catalog.MESSAGE_CASES:
        with _case(name):
            keys = [_key(k) for k in keys]
            message = LegacyMessage(MessageHeader(*header), keys, blockhash, _compiled(instructions))
            out.append(MessageVector(name, *header, keys, blockhash, len(instructions), message.serialize()))
    return out


def generate_versioned_message():
    out = []
    for name, header, keys, blockhash, instructions, lookups in catalog.VERSIONED_MESSAGE_CASES:
        with _case(name):
            keys = [_key(k) for k in keys]
            message = V0Message(
                MessageHeader(*header),
                keys,
                blockhash,
                _compiled(instructions),
                [MessageAddressTableLookup(_key(table), list(w), list(r)) for table, w, r in lookups],
            )
            serialized = message.serialize()
            _check(serialized[0] == 0x80, "v0 message must start with the version prefix")
            out.append(
                VersionedMessageVector(
                    name, 0, *header, keys, blockhash, len(instructions), len(lookups), serialized
                )
            )
    return out


def _transaction_instruction(step, payer: bytes, signers: list[Keypair]):
    kind = step[0]
    if kind == "transfer":
        return transfer(payer, _key(step[1]), step[2])
    if kind == "compute_unit_limit":
        return set_compute_unit_limit(step[1])
    if kind == "compute_unit_price":
        return set_compute_unit_price(step[1])
    if kind == "create_account":
        return create_account(payer, signers[1].pubkey, step[1], step[2], _key(step[3]))
    raise EncodingError(f"unknown transaction instruction {kind!r}")


def _transaction_vector(name: str, version: str, keypairs: list[Keypair], message: bytes) -> TransactionVector:
    tx = Transaction.sign(keypairs, message)
    _check(tx.verify(), "transaction signatures do not verify")
    return TransactionVector(name, version, signer_keys(message), tx.signatures, message, tx.serialize())


def generate_transaction():
    out = []
    for name, seeds, steps in catalog.TRANSACTION_CASES:
        with _case(name):
            keypairs = [Keypair.from_seed(s) for s in seeds]
            payer = keypairs[0].pubkey
            instructions = [_transaction_instruction(step, payer, keypairs) for step in steps]
            message = compile_legacy_message(instructions, payer, catalog.RECENT_BLOCKHASH).serialize()
            out.append(_transaction_vector(name, "legacy", keypairs, message))
    system_program = pubkey(programs.SYSTEM_PROGRAM)
    for name, seed, table, writable, lamports in catalog.VERSIONED_TRANSACTION_CASES:
        with _case(name):
            kp = Keypair.from_seed(seed)
            message = V0Message(
                MessageHeader(1, 0, 1),
                [kp.pubkey, system_program],
                catalog.RECENT_BLOCKHASH,
                [CompiledInstruction(1, [0, 2], encode_system_instruction("Transfer", lamports=lamports))],
                [MessageAddressTableLookup(_key(table), list(writable), [])],
            ).serialize()
            out.append(_transaction_vector(name, "v0", [kp], message))
    return out


# --- math ------------------------------------------------------------------

def generate_big_mod_exp():
    out = []
    for name, base, exponent, modulus in catalog.BIG_MOD_EXP_CASES:
        with _case(name):
            result = big_mod_exp(base, exponent, modulus)
            _check(len(result) == len(modulus), "result must be as wide as the modulus")
            out.append(BigModExpVector(name, base, exponent, modulus, result))
    return out
