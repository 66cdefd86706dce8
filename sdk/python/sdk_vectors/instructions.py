"""Instruction builders for the built-in programs.

Each ``encode_*`` function produces the opaque instruction data for one
variant of a program's instruction enum from its logical fields; the
builders on top attach program id and account metas the way the chain's
reference client does.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from . import programs
from .codec import BincodeWriter, BorshWriter
from .crypto import pubkey
from .errors import EncodingError
from .state import FEATURE_SIZE, Authorized, Lockup, VoteInit
from .sysvars import Rent


@dataclass
class AccountMeta:
    pubkey: bytes
    is_signer: bool
    is_writable: bool

    def serialize(self) -> bytes:
        return BincodeWriter().pubkey(self.pubkey).boolean(self.is_signer).boolean(self.is_writable).to_bytes()


@dataclass
class Instruction:
    program_id: bytes
    accounts: list[AccountMeta] = field(default_factory=list)
    data: bytes = b""


def _variant(names: Sequence[str], kind: str, program: str) -> int:
    try:
        return names.index(kind)
    except ValueError:
        raise EncodingError(f"unknown {program} instruction {kind!r}") from None


def _require(value, what: str, kind: str):
    if value is None:
        raise EncodingError(f"{kind} needs {what}")
    return value


# --- system program --------------------------------------------------------

SYSTEM_INSTRUCTIONS = (
    "CreateAccount",
    "Assign",
    "Transfer",
    "CreateAccountWithSeed",
    "AdvanceNonceAccount",
    "WithdrawNonceAccount",
    "InitializeNonceAccount",
    "AuthorizeNonceAccount",
    "Allocate",
    "AllocateWithSeed",
    "AssignWithSeed",
    "TransferWithSeed",
    "UpgradeNonceAccount",
)

MAX_PERMITTED_DATA_LENGTH = 10 * 1024 * 1024


def encode_system_instruction(
    kind: str,
    lamports: Optional[int] = None,
    space: Optional[int] = None,
    owner: Optional[bytes] = None,
    base: Optional[bytes] = None,
    seed: Optional[str] = None,
    authority: Optional[bytes] = None,
) -> bytes:
    w = BincodeWriter().tag(_variant(SYSTEM_INSTRUCTIONS, kind, "system"))
    if kind == "CreateAccount":
        w.u64(_require(lamports, "lamports", kind)).u64(_require(space, "space", kind))
        w.pubkey(_require(owner, "owner", kind))
    elif kind == "Assign":
        w.pubkey(_require(owner, "owner", kind))
    elif kind in ("Transfer", "WithdrawNonceAccount"):
        w.u64(_require(lamports, "lamports", kind))
    elif kind == "CreateAccountWithSeed":
        w.pubkey(_require(base, "base", kind)).string(_require(seed, "seed", kind))
        w.u64(_require(lamports, "lamports", kind)).u64(_require(space, "space", kind))
        w.pubkey(_require(owner, "owner", kind))
    elif kind in ("InitializeNonceAccount", "AuthorizeNonceAccount"):
        w.pubkey(_require(authority, "authority", kind))
    elif kind == "Allocate":
        w.u64(_require(space, "space", kind))
    elif kind == "AllocateWithSeed":
        w.pubkey(_require(base, "base", kind)).string(_require(seed, "seed", kind))
        w.u64(_require(space, "space", kind)).pubkey(_require(owner, "owner", kind))
    elif kind == "AssignWithSeed":
        w.pubkey(_require(base, "base", kind)).string(_require(seed, "seed", kind))
        w.pubkey(_require(owner, "owner", kind))
    elif kind == "TransferWithSeed":
        # from_seed / from_owner travel in the seed / owner fields
        w.u64(_require(lamports, "lamports", kind)).string(_require(seed, "seed", kind))
        w.pubkey(_require(owner, "owner", kind))
    return w.to_bytes()


def _system(data: bytes, *accounts: AccountMeta) -> Instruction:
    return Instruction(pubkey(programs.SYSTEM_PROGRAM), list(accounts), data)


def transfer(from_pubkey: bytes, to_pubkey: bytes, lamports: int) -> Instruction:
    return _system(
        encode_system_instruction("Transfer", lamports=lamports),
        AccountMeta(from_pubkey, True, True),
        AccountMeta(to_pubkey, False, True),
    )


def create_account(from_pubkey: bytes, to_pubkey: bytes, lamports: int, space: int, owner: bytes) -> Instruction:
    return _system(
        encode_system_instruction("CreateAccount", lamports=lamports, space=space, owner=owner),
        AccountMeta(from_pubkey, True, True),
        AccountMeta(to_pubkey, True, True),
    )


def create_account_with_seed(
    from_pubkey: bytes, to_pubkey: bytes, base: bytes, seed: str, lamports: int, space: int, owner: bytes
) -> Instruction:
    accounts = [AccountMeta(from_pubkey, True, True), AccountMeta(to_pubkey, False, True)]
    if base != from_pubkey:
        accounts.append(AccountMeta(base, True, False))
    return _system(
        encode_system_instruction(
            "CreateAccountWithSeed", lamports=lamports, space=space, owner=owner, base=base, seed=seed
        ),
        *accounts,
    )


def assign(account: bytes, owner: bytes) -> Instruction:
    return _system(encode_system_instruction("Assign", owner=owner), AccountMeta(account, True, True))


def assign_with_seed(address: bytes, base: bytes, seed: str, owner: bytes) -> Instruction:
    return _system(
        encode_system_instruction("AssignWithSeed", owner=owner, base=base, seed=seed),
        AccountMeta(address, False, True),
        AccountMeta(base, True, False),
    )


def allocate(account: bytes, space: int) -> Instruction:
    if space > MAX_PERMITTED_DATA_LENGTH:
        raise EncodingError(f"space {space} exceeds {MAX_PERMITTED_DATA_LENGTH}")
    return _system(encode_system_instruction("Allocate", space=space), AccountMeta(account, True, True))


def allocate_with_seed(address: bytes, base: bytes, seed: str, space: int, owner: bytes) -> Instruction:
    return _system(
        encode_system_instruction("AllocateWithSeed", space=space, owner=owner, base=base, seed=seed),
        AccountMeta(address, False, True),
        AccountMeta(base, True, False),
    )


def transfer_with_seed(
    from_pubkey: bytes, from_base: bytes, from_seed: str, from_owner: bytes, to_pubkey: bytes, lamports: int
) -> Instruction:
    return _system(
        encode_system_instruction("TransferWithSeed", lamports=lamports, seed=from_seed, owner=from_owner),
        AccountMeta(from_pubkey, False, True),
        AccountMeta(from_base, True, False),
        AccountMeta(to_pubkey, False, True),
    )


def _sysvar(name: str) -> AccountMeta:
    return AccountMeta(pubkey(name), False, False)


def advance_nonce_account(nonce_pubkey: bytes, authorized_pubkey: bytes) -> Instruction:
    return _system(
        encode_system_instruction("AdvanceNonceAccount"),
        AccountMeta(nonce_pubkey, False, True),
        _sysvar(programs.SYSVAR_RECENT_BLOCKHASHES),
        AccountMeta(authorized_pubkey, True, False),
    )


def withdraw_nonce_account(
    nonce_pubkey: bytes, authorized_pubkey: bytes, to_pubkey: bytes, lamports: int
) -> Instruction:
    return _system(
        encode_system_instruction("WithdrawNonceAccount", lamports=lamports),
        AccountMeta(nonce_pubkey, False, True),
        AccountMeta(to_pubkey, False, True),
        _sysvar(programs.SYSVAR_RECENT_BLOCKHASHES),
        _sysvar(programs.SYSVAR_RENT),
        AccountMeta(authorized_pubkey, True, False),
    )


def initialize_nonce_account(nonce_pubkey: bytes, authority: bytes) -> Instruction:
    return _system(
        encode_system_instruction("InitializeNonceAccount", authority=authority),
        AccountMeta(nonce_pubkey, False, True),
        _sysvar(programs.SYSVAR_RECENT_BLOCKHASHES),
        _sysvar(programs.SYSVAR_RENT),
    )


def authorize_nonce_account(nonce_pubkey: bytes, authorized_pubkey: bytes, new_authority: bytes) -> Instruction:
    return _system(
        encode_system_instruction("AuthorizeNonceAccount", authority=new_authority),
        AccountMeta(nonce_pubkey, False, True),
        AccountMeta(authorized_pubkey, True, False),
    )


def upgrade_nonce_account(nonce_pubkey: bytes) -> Instruction:
    return _system(encode_system_instruction("UpgradeNonceAccount"), AccountMeta(nonce_pubkey, False, True))


# --- compute budget (borsh, one-byte tag) ----------------------------------

COMPUTE_BUDGET_INSTRUCTIONS = (
    "Unused",
    "RequestHeapFrame",
    "SetComputeUnitLimit",
    "SetComputeUnitPrice",
    "SetLoadedAccountsDataSizeLimit",
)

MAX_COMPUTE_UNIT_LIMIT = 1_400_000
DEFAULT_INSTRUCTION_COMPUTE_UNIT_LIMIT = 200_000
MAX_BUILTIN_ALLOCATION_COMPUTE_UNIT_LIMIT = 3_000
MAX_HEAP_FRAME_BYTES = 256 * 1024
MIN_HEAP_FRAME_BYTES = 32 * 1024
DEFAULT_HEAP_COST = 8
MAX_LOADED_ACCOUNTS_DATA_SIZE_BYTES = 64 * 1024 * 1024
MICRO_LAMPORTS_PER_LAMPORT = 1_000_000


def encode_compute_budget_instruction(kind: str, value: int) -> bytes:
    w = BorshWriter().tag(_variant(COMPUTE_BUDGET_INSTRUCTIONS, kind, "compute budget"))
    if kind == "SetComputeUnitPrice":
        w.u64(value)
    elif kind == "Unused":
        raise EncodingError("Unused compute budget variant has no encoding")
    else:
        w.u32(value)
    return w.to_bytes()


def _compute_budget(kind: str, value: int) -> Instruction:
    return Instruction(pubkey(programs.COMPUTE_BUDGET_PROGRAM), [], encode_compute_budget_instruction(kind, value))


def request_heap_frame(bytes_: int) -> Instruction:
    return _compute_budget("RequestHeapFrame", bytes_)


def set_compute_unit_limit(units: int) -> Instruction:
    return _compute_budget("SetComputeUnitLimit", units)


def set_compute_unit_price(micro_lamports: int) -> Instruction:
    return _compute_budget("SetComputeUnitPrice", micro_lamports)


def set_loaded_accounts_data_size_limit(bytes_: int) -> Instruction:
    return _compute_budget("SetLoadedAccountsDataSizeLimit", bytes_)


# --- stake -----------------------------------------------------------------

STAKE_INSTRUCTIONS = (
    "Initialize",
    "Authorize",
    "DelegateStake",
    "Split",
    "Withdraw",
    "Deactivate",
    "SetLockup",
    "Merge",
    "AuthorizeWithSeed",
    "InitializeChecked",
    "AuthorizeChecked",
    "AuthorizeCheckedWithSeed",
    "SetLockupChecked",
    "GetMinimumDelegation",
    "DeactivateDelinquent",
    "Redelegate",
    "MoveStake",
    "MoveLamports",
)
STAKE_AUTHORIZE = ("Staker", "Withdrawer")


def encode_stake_instruction(
    kind: str,
    lamports: Optional[int] = None,
    authorized: Optional[Authorized] = None,
    lockup: Optional[Lockup] = None,
    new_authority: Optional[bytes] = None,
    stake_authorize: Optional[int] = None,
) -> bytes:
    w = BincodeWriter().tag(_variant(STAKE_INSTRUCTIONS, kind, "stake"))
    if kind == "Initialize":
        (authorized or Authorized()).write(w)
        (lockup or Lockup()).write(w)
    elif kind == "Authorize":
        w.pubkey(_require(new_authority, "a new authority", kind))
        w.u32(_require(stake_authorize, "an authorize kind", kind))
    elif kind == "AuthorizeChecked":
        w.u32(_require(stake_authorize, "an authorize kind", kind))
    elif kind in ("Split", "Withdraw", "MoveStake", "MoveLamports"):
        w.u64(_require(lamports, "lamports", kind))
    elif kind in ("SetLockup", "AuthorizeWithSeed", "AuthorizeCheckedWithSeed", "SetLockupChecked"):
        raise EncodingError(f"stake {kind} is not supported")
    return w.to_bytes()


# --- vote ------------------------------------------------------------------

VOTE_INSTRUCTIONS = (
    "InitializeAccount",
    "Authorize",
    "Vote",
    "Withdraw",
    "UpdateValidatorIdentity",
    "UpdateCommission",
    "VoteSwitch",
    "AuthorizeChecked",
    "UpdateVoteState",
    "UpdateVoteStateSwitch",
    "AuthorizeWithSeed",
    "AuthorizeCheckedWithSeed",
    "CompactUpdateVoteState",
    "CompactUpdateVoteStateSwitch",
    "TowerSync",
    "TowerSyncSwitch",
)
VOTE_AUTHORIZE = ("Voter", "Withdrawer")


def encode_vote_instruction(
    kind: str,
    vote_init: Optional[VoteInit] = None,
    new_authority: Optional[bytes] = None,
    vote_authorize: Optional[int] = None,
    lamports: Optional[int] = None,
    commission: Optional[int] = None,
) -> bytes:
    w = BincodeWriter().tag(_variant(VOTE_INSTRUCTIONS, kind, "vote"))
    if kind == "InitializeAccount":
        _require(vote_init, "a VoteInit", kind).write(w)
    elif kind == "Authorize":
        w.pubkey(_require(new_authority, "a new authority", kind))
        w.u32(_require(vote_authorize, "an authorize kind", kind))
    elif kind == "AuthorizeChecked":
        w.u32(_require(vote_authorize, "an authorize kind", kind))
    elif kind == "Withdraw":
        w.u64(_require(lamports, "lamports", kind))
    elif kind == "UpdateCommission":
        w.u8(_require(commission, "a commission", kind))
    elif kind != "UpdateValidatorIdentity":
        raise EncodingError(f"vote {kind} is not supported")
    return w.to_bytes()


# --- BPF loader v3 (upgradeable) -------------------------------------------

LOADER_V3_INSTRUCTIONS = (
    "InitializeBuffer",
    "Write",
    "DeployWithMaxDataLen",
    "Upgrade",
    "SetAuthority",
    "Close",
    "ExtendProgram",
    "SetAuthorityChecked",
    "Migrate",
    "ExtendProgramChecked",
)


def encode_loader_v3_instruction(
    kind: str,
    write_offset: Optional[int] = None,
    write_bytes: Optional[bytes] = None,
    max_data_len: Optional[int] = None,
    additional_bytes: Optional[int] = None,
) -> bytes:
    w = BincodeWriter().tag(_variant(LOADER_V3_INSTRUCTIONS, kind, "loader v3"))
    if kind == "Write":
        w.u32(_require(write_offset, "an offset", kind)).byte_vec(bytes(_require(write_bytes, "bytes", kind)))
    elif kind == "DeployWithMaxDataLen":
        w.u64(_require(max_data_len, "max_data_len", kind))
    elif kind in ("ExtendProgram", "ExtendProgramChecked"):
        w.u32(_require(additional_bytes, "additional_bytes", kind))
    return w.to_bytes()


# --- loader v4 -------------------------------------------------------------

LOADER_V4_INSTRUCTIONS = (
    "Write",
    "Copy",
    "SetProgramLength",
    "Deploy",
    "Retract",
    "TransferAuthority",
    "Finalize",
)


def encode_loader_v4_instruction(
    kind: str,
    offset: Optional[int] = None,
    data: Optional[bytes] = None,
    new_size: Optional[int] = None,
    source_offset: Optional[int] = None,
    length: Optional[int] = None,
) -> bytes:
    w = BincodeWriter().tag(_variant(LOADER_V4_INSTRUCTIONS, kind, "loader v4"))
    if kind == "Write":
        w.u32(_require(offset, "an offset", kind)).byte_vec(bytes(_require(data, "bytes", kind)))
    elif kind == "Copy":
        w.u32(_require(offset, "a destination offset", kind))
        w.u32(_require(source_offset, "a source offset", kind))
        w.u32(_require(length, "a length", kind))
    elif kind == "SetProgramLength":
        w.u32(_require(new_size, "new_size", kind))
    return w.to_bytes()


# --- address lookup table --------------------------------------------------

ALT_INSTRUCTIONS = (
    "CreateLookupTable",
    "FreezeLookupTable",
    "ExtendLookupTable",
    "DeactivateLookupTable",
    "CloseLookupTable",
)


def encode_alt_instruction(
    kind: str,
    recent_slot: Optional[int] = None,
    bump_seed: Optional[int] = None,
    new_addresses: Optional[Sequence[bytes]] = None,
) -> bytes:
    w = BincodeWriter().tag(_variant(ALT_INSTRUCTIONS, kind, "address lookup table"))
    if kind == "CreateLookupTable":
        w.u64(_require(recent_slot, "recent_slot", kind)).u8(_require(bump_seed, "bump_seed", kind))
    elif kind == "ExtendLookupTable":
        addresses = _require(new_addresses, "new_addresses", kind)
        w.length(len(addresses))
        for address in addresses:
            w.pubkey(address)
    return w.to_bytes()


# --- feature gate ----------------------------------------------------------

FEATURE_GATE_INSTRUCTIONS = ("RevokePendingActivation",)


def revoke_pending_activation(feature_id: bytes) -> Instruction:
    return Instruction(
        pubkey(programs.FEATURE_PROGRAM),
        [
            AccountMeta(feature_id, True, True),
            AccountMeta(pubkey(programs.INCINERATOR), False, True),
            AccountMeta(pubkey(programs.SYSTEM_PROGRAM), False, False),
        ],
        BorshWriter().tag(FEATURE_GATE_INSTRUCTIONS.index("RevokePendingActivation")).to_bytes(),
    )


def activate_feature(feature_id: bytes, funding_address: bytes, rent: Optional[Rent] = None) -> list[Instruction]:
    """Fund, size and hand a feature account to the feature program."""
    lamports = (rent or Rent()).minimum_balance(FEATURE_SIZE)
    return [
        transfer(funding_address, feature_id, lamports),
        allocate(feature_id, FEATURE_SIZE),
        assign(feature_id, pubkey(programs.FEATURE_PROGRAM)),
    ]
