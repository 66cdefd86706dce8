"""Well-known program, sysvar and special addresses (base58)."""

SYSTEM_PROGRAM = "11111111111111111111111111111111"
BPF_LOADER_DEPRECATED = "BPFLoader1111111111111111111111111111111111"
BPF_LOADER = "BPFLoader2111111111111111111111111111111111"
BPF_LOADER_UPGRADEABLE = "BPFLoaderUpgradeab1e11111111111111111111111"
LOADER_V4 = "LoaderV411111111111111111111111111111111111"
NATIVE_LOADER = "NativeLoader1111111111111111111111111111111"
VOTE_PROGRAM = "Vote111111111111111111111111111111111111111"
STAKE_PROGRAM = "Stake11111111111111111111111111111111111111"
STAKE_CONFIG = "StakeConfig11111111111111111111111111111111"
CONFIG_PROGRAM = "Config1111111111111111111111111111111111111"
ED25519_PROGRAM = "Ed25519SigVerify111111111111111111111111111"
SECP256K1_PROGRAM = "KeccakSecp256k11111111111111111111111111111"
SECP256R1_PROGRAM = "Secp256r11111111111111111111111111111111111"
COMPUTE_BUDGET_PROGRAM = "ComputeBudget111111111111111111111111111111"
ADDRESS_LOOKUP_TABLE_PROGRAM = "AddressLookupTab1e1111111111111111111111111"
FEATURE_PROGRAM = "Feature111111111111111111111111111111111111"

INCINERATOR = "1nc1nerator11111111111111111111111111111111"
SYSVAR_OWNER = "Sysvar1111111111111111111111111111111111111"

SYSVAR_CLOCK = "SysvarC1ock11111111111111111111111111111111"
SYSVAR_EPOCH_SCHEDULE = "SysvarEpochSchedu1e111111111111111111111111"
SYSVAR_FEES = "SysvarFees111111111111111111111111111111111"
SYSVAR_INSTRUCTIONS = "Sysvar1nstructions1111111111111111111111111"
SYSVAR_RECENT_BLOCKHASHES = "SysvarRecentB1ockHashes11111111111111111111"
SYSVAR_RENT = "SysvarRent111111111111111111111111111111111"
SYSVAR_SLOT_HASHES = "SysvarS1otHashes111111111111111111111111111"
SYSVAR_SLOT_HISTORY = "SysvarS1otHistory11111111111111111111111111"
SYSVAR_STAKE_HISTORY = "SysvarStakeHistory1111111111111111111111111"
SYSVAR_EPOCH_REWARDS = "SysvarEpochRewards1111111111111111111111111"
SYSVAR_LAST_RESTART_SLOT = "SysvarLastRestartS1ot1111111111111111111111"
