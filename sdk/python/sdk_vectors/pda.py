"""Program-derived and seed-derived addresses."""

from typing import Optional, Sequence

from .crypto import PUBKEY_BYTES, hashv
from .curve import is_on_curve
from .errors import CatalogError

PDA_MARKER = b"ProgramDerivedAddress"
MAX_SEED_LEN = 32
MAX_SEEDS = 16


def _check_seeds(seeds: Sequence[bytes]) -> None:
    if len(seeds) > MAX_SEEDS:
        raise CatalogError(f"too many seeds: {len(seeds)} > {MAX_SEEDS}")
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise CatalogError(f"seed of {len(seed)} bytes exceeds {MAX_SEED_LEN}")


def try_create_program_address(seeds: Sequence[bytes], program_id: bytes) -> Optional[bytes]:
    """Hash seeds with the program id; None when the result lies on the curve."""
    _check_seeds(seeds)
    digest = hashv(*seeds, program_id, PDA_MARKER)
    if is_on_curve(digest):
        return None
    return digest


def create_program_address(seeds: Sequence[bytes], program_id: bytes) -> bytes:
    address = try_create_program_address(seeds, program_id)
    if address is None:
        raise CatalogError("seeds produce an on-curve address")
    return address


def find_program_address(seeds: Sequence[bytes], program_id: bytes) -> tuple[bytes, int]:
    """Canonical address: the highest bump, scanning 255 down, that lands off-curve."""
    _check_seeds(list(seeds) + [b"\x00"])
    for bump in range(255, -1, -1):
        address = try_create_program_address(list(seeds) + [bytes([bump])], program_id)
        if address is not None:
            return address, bump
    raise CatalogError("no viable bump seed")


def create_with_seed(base: bytes, seed: str, owner: bytes) -> bytes:
    seed_bytes = seed.encode("utf-8")
    if len(seed_bytes) > MAX_SEED_LEN:
        raise CatalogError(f"seed {seed!r} exceeds {MAX_SEED_LEN} bytes")
    if len(owner) == PUBKEY_BYTES and owner.endswith(PDA_MARKER):
        raise CatalogError("owner may not end with the PDA marker")
    return hashv(base, seed_bytes, owner)
