"""Runtime error enums and their bincode encoding.

Variant order is the wire discriminant; append only.
"""

from typing import Optional

from .codec import BincodeWriter
from .errors import EncodingError

INSTRUCTION_ERRORS = (
    "GenericError",
    "InvalidArgument",
    "InvalidInstructionData",
    "InvalidAccountData",
    "AccountDataTooSmall",
    "InsufficientFunds",
    "IncorrectProgramId",
    "MissingRequiredSignature",
    "AccountAlreadyInitialized",
    "UninitializedAccount",
    "UnbalancedInstruction",
    "ModifiedProgramId",
    "ExternalAccountLamportSpend",
    "ExternalAccountDataModified",
    "ReadonlyLamportChange",
    "ReadonlyDataModified",
    "DuplicateAccountIndex",
    "ExecutableModified",
    "RentEpochModified",
    "NotEnoughAccountKeys",
    "AccountDataSizeChanged",
    "AccountNotExecutable",
    "AccountBorrowFailed",
    "AccountBorrowOutstanding",
    "DuplicateAccountOutOfSync",
    "Custom",
    "InvalidError",
    "ExecutableDataModified",
    "ExecutableLamportChange",
    "ExecutableAccountNotRentExempt",
    "UnsupportedProgramId",
    "CallDepth",
    "MissingAccount",
    "ReentrancyNotAllowed",
    "MaxSeedLengthExceeded",
    "InvalidSeeds",
    "InvalidRealloc",
    "ComputationalBudgetExceeded",
    "PrivilegeEscalation",
    "ProgramEnvironmentSetupFailure",
    "ProgramFailedToComplete",
    "ProgramFailedToCompile",
    "Immutable",
    "IncorrectAuthority",
    "BorshIoError",
    "AccountNotRentExempt",
    "InvalidAccountOwner",
    "ArithmeticOverflow",
    "UnsupportedSysvar",
    "IllegalOwner",
    "MaxAccountsDataAllocationsExceeded",
    "MaxAccountsExceeded",
    "MaxInstructionTraceLengthExceeded",
    "BuiltinProgramsMustConsumeComputeUnits",
)

TRANSACTION_ERRORS = (
    "AccountInUse",
    "AccountLoadedTwice",
    "AccountNotFound",
    "ProgramAccountNotFound",
    "InsufficientFundsForFee",
    "InvalidAccountForFee",
    "AlreadyProcessed",
    "BlockhashNotFound",
    "InstructionError",
    "CallChainTooDeep",
    "MissingSignatureForFee",
    "InvalidAccountIndex",
    "SignatureFailure",
    "InvalidProgramForExecution",
    "SanitizeFailure",
    "ClusterMaintenance",
    "AccountBorrowOutstanding",
    "WouldExceedMaxBlockCostLimit",
    "UnsupportedVersion",
    "InvalidWritableAccount",
    "WouldExceedMaxAccountCostLimit",
    "WouldExceedAccountDataBlockLimit",
    "TooManyAccountLocks",
    "AddressLookupTableNotFound",
    "InvalidAddressLookupTableOwner",
    "InvalidAddressLookupTableData",
    "InvalidAddressLookupTableIndex",
    "InvalidRentPayingAccount",
    "WouldExceedMaxVoteCostLimit",
    "WouldExceedAccountDataTotalLimit",
    "DuplicateInstruction",
    "InsufficientFundsForRent",
    "MaxLoadedAccountsDataSizeExceeded",
    "InvalidLoadedAccountsDataSizeLimit",
    "ResanitizationNeeded",
    "ProgramExecutionTemporarilyRestricted",
    "UnbalancedTransaction",
    "ProgramCacheHitMaxLimit",
    "CommitCancelled",
)

# Variants carrying a single u8 account/instruction index
_TX_INDEX_VARIANTS = frozenset(
    ("DuplicateInstruction", "InsufficientFundsForRent", "ProgramExecutionTemporarilyRestricted")
)


def instruction_error_code(name: str) -> int:
    try:
        return INSTRUCTION_ERRORS.index(name)
    except ValueError:
        raise EncodingError(f"unknown instruction error {name!r}") from None


def transaction_error_code(name: str) -> int:
    try:
        return TRANSACTION_ERRORS.index(name)
    except ValueError:
        raise EncodingError(f"unknown transaction error {name!r}") from None


def _write_instruction_error(w: BincodeWriter, name: str, custom_code: Optional[int]) -> None:
    w.tag(instruction_error_code(name))
    if name == "Custom":
        if custom_code is None:
            raise EncodingError("Custom instruction error needs a code")
        w.u32(custom_code)


def encode_instruction_error(name: str, custom_code: Optional[int] = None) -> bytes:
    w = BincodeWriter()
    _write_instruction_error(w, name, custom_code)
    return w.to_bytes()


def encode_transaction_error(
    name: str,
    instruction_index: Optional[int] = None,
    instruction_error: Optional[str] = None,
    custom_code: Optional[int] = None,
) -> bytes:
    """Encode a transaction error; ``InstructionError`` nests an instruction error."""
    w = BincodeWriter().tag(transaction_error_code(name))
    if name == "InstructionError":
        if instruction_index is None or instruction_error is None:
            raise EncodingError("InstructionError needs an index and an inner error")
        w.u8(instruction_index)
        _write_instruction_error(w, instruction_error, custom_code)
    elif name in _TX_INDEX_VARIANTS:
        if instruction_index is None:
            raise EncodingError(f"{name} needs an index")
        w.u8(instruction_index)
    return w.to_bytes()
