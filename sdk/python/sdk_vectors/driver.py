"""Runs every generator once and writes one JSON file per family."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Union

from . import config, constants, generators as g
from .errors import OutputError, VectorError
from .log import get_logger
from .types import to_json_value

log = get_logger()

# Output order. The first block matches the historical corpus; later
# families were appended and must stay after it.
FAMILIES: list[tuple[str, Callable[[], list]]] = [
    ("pubkey", g.generate_pubkey),
    ("hash", g.generate_hash),
    ("signature", g.generate_signature),
    ("pda", g.generate_pda),
    ("keypair", g.generate_keypair),
    ("epoch_info", g.generate_epoch_info),
    ("short_vec", g.generate_short_vec),
    ("sha256", g.generate_sha256),
    ("lamports", g.generate_lamports),
    ("rent", g.generate_rent),
    ("clock", g.generate_clock),
    ("epoch_schedule", g.generate_epoch_schedule),
    ("durable_nonce", g.generate_durable_nonce),
    ("bincode", g.generate_bincode),
    ("borsh", g.generate_borsh),
    ("system_instruction", g.generate_system_instruction),
    ("keccak256", g.generate_keccak256),
    ("compute_budget", g.generate_compute_budget),
    ("ed25519_verify", g.generate_ed25519_verify),
    ("message_header", g.generate_message_header),
    ("compiled_instruction", g.generate_compiled_instruction),
    ("feature_state", g.generate_feature_state),
    ("nonce_versions", g.generate_nonce_versions),
    ("instruction_error", g.generate_instruction_error),
    ("transaction_error", g.generate_transaction_error),
    ("account_meta", g.generate_account_meta),
    ("loader_v3_instruction", g.generate_loader_v3_instruction),
    ("blake3", g.generate_blake3),
    ("stake_instruction", g.generate_stake_instruction),
    ("address_lookup_table_instruction", g.generate_address_lookup_table_instruction),
    ("loader_v4_instruction", g.generate_loader_v4_instruction),
    ("vote_instruction", g.generate_vote_instruction),
    ("message", g.generate_message),
    ("versioned_message", g.generate_versioned_message),
    ("transaction", g.generate_transaction),
    ("system_instruction_extended", g.generate_system_instruction_extended),
    ("feature_gate_instruction", g.generate_feature_gate_instruction),
    ("upgradeable_loader_state", g.generate_upgradeable_loader_state),
    ("address_lookup_table_state", g.generate_address_lookup_table_state),
    ("lookup_table_meta", g.generate_lookup_table_meta),
    ("slot_hash", g.generate_slot_hash),
    ("epoch_rewards", g.generate_epoch_rewards),
    ("last_restart_slot", g.generate_last_restart_slot),
    ("program_data", g.generate_program_data),
    ("vote_init", g.generate_vote_init),
    ("lockup", g.generate_lockup),
    ("authorize", g.generate_authorize),
    ("sysvar_id", g.generate_sysvar_id),
    ("native_program_id", g.generate_native_program_id),
    ("special_addresses", g.generate_special_addresses),
    ("ed25519_instruction", g.generate_ed25519_instruction),
    ("secp256k1_instruction", g.generate_secp256k1_instruction),
    ("secp256r1_instruction", g.generate_secp256r1_instruction),
    ("signer_seeds", g.generate_signer_seeds),
    ("rent_exempt", g.generate_rent_exempt),
    ("big_mod_exp", g.generate_big_mod_exp),
    ("account_layout", constants.generate_account_layout),
    ("primitive_type_sizes", constants.generate_primitive_type_sizes),
    ("hash_sizes", constants.generate_hash_sizes),
    ("signature_sizes", constants.generate_signature_sizes),
    ("pubkey_sizes", constants.generate_pubkey_sizes),
    ("native_token_constants", constants.generate_native_token_constants),
    ("nonce_constants", constants.generate_nonce_constants),
    ("alt_constants", constants.generate_alt_constants),
    ("compute_budget_constants", constants.generate_compute_budget_constants),
    ("bpf_loader_state_sizes", constants.generate_bpf_loader_state_sizes),
    ("ed25519_constants", constants.generate_ed25519_constants),
    ("secp256k1_constants", constants.generate_secp256k1_constants),
    ("epoch_schedule_constants", constants.generate_epoch_schedule_constants),
    ("bls_constants", constants.generate_bls_constants),
    ("bn254_constants", constants.generate_bn254_constants),
    ("slot_history_constants", constants.generate_slot_history_constants),
    ("vote_state_constants", constants.generate_vote_state_constants),
    ("sysvar_sizes", constants.generate_sysvar_sizes),
    ("account_limits", constants.generate_account_limits),
]


def file_name(family: str) -> str:
    return f"{family}_vectors.json"


def render(records: list[Any]) -> str:
    """Serialize records exactly as they land on disk (no trailing newline)."""
    return json.dumps(to_json_value(records), indent=config.INDENT, ensure_ascii=False)


def write_family(output_dir: Union[str, Path], family: str, records: list[Any]) -> Path:
    """Atomically replace ``<output_dir>/<family>_vectors.json``."""
    output_dir = Path(output_dir)
    target = output_dir / file_name(family)
    text = render(records)
    try:
        fd, tmp = tempfile.mkstemp(prefix=f".{family}.", suffix=".tmp", dir=output_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, target)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
    except OSError as e:
        raise OutputError(f"cannot write {target}: {e}", family=family) from e
    return target


def _run(family: str, fn: Callable[[], list]) -> list[Any]:
    try:
        return fn()
    except VectorError as e:
        e.family = e.family or family
        raise


def generate_family(family: str) -> list[Any]:
    """Records of one family, without touching the filesystem."""
    for name, fn in FAMILIES:
        if name == family:
            return _run(name, fn)
    raise KeyError(family)


def generate_all(output_dir: Union[str, Path]) -> list[Path]:
    """Write the whole corpus into ``output_dir``; returns the written paths."""
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"cannot create {output_dir}: {e}") from e

    written = []
    for family, fn in FAMILIES:
        records = _run(family, fn)
        path = write_family(output_dir, family, records)
        log.debug("%s: %d cases -> %s", family, len(records), path)
        written.append(path)
    log.info("wrote %d vector files to %s", len(written), output_dir)
    return written
