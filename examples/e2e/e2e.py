"""
SDK Vectors End-to-End Example (Python)

Demonstrates the full lifecycle:
1. Generate the whole corpus into a scratch directory
2. Read back one file per kind of family
3. Re-check a PDA and a signed transaction from the JSON alone

Run: pip install -e . && python examples/e2e/e2e.py
"""

import json
import tempfile
from pathlib import Path

from sdk_vectors import generate_all
from sdk_vectors.crypto import b58encode, verify_ed25519
from sdk_vectors.message import signer_keys
from sdk_vectors.pda import create_program_address

print("=== SDK Vectors E2E Demo ===\n")

with tempfile.TemporaryDirectory() as tmp:
    out = Path(tmp)

    # 1. Generate
    paths = generate_all(out)
    total = sum(len(json.loads(p.read_text())) for p in paths)
    print(f"1. Generated {len(paths)} files, {total} records")
    print(f"   First: {paths[0].name}")
    print(f"   Last:  {paths[-1].name}\n")

    # 2. Read back
    pubkeys = json.loads((out / "pubkey_vectors.json").read_text())
    print("2. pubkey vectors")
    for r in pubkeys[:3]:
        print(f"   {r['name']:<24} {r['base58']}")
    limits = json.loads((out / "account_limits_vectors.json").read_text())[0]
    print(f"   packet_data_size = {limits['packet_data_size']}\n")

    # 3. PDA from its seeds and bump
    pda = json.loads((out / "pda_vectors.json").read_text())[0]
    seeds = [bytes(s) for s in pda["seeds"]] + [bytes([pda["expected_bump"]])]
    derived = create_program_address(seeds, bytes(pda["program_id"]))
    print(f"3. PDA '{pda['name']}' bump {pda['expected_bump']}")
    print(f"   Address: {b58encode(derived)}")
    print(f"   Matches: {derived == bytes(pda['expected_pubkey'])}\n")

    # 4. Transaction signatures
    tx = json.loads((out / "transaction_vectors.json").read_text())[0]
    message = bytes(tx["message"])
    ok = all(
        verify_ed25519(key, message, bytes(sig))
        for key, sig in zip(signer_keys(message), tx["signatures"])
    )
    print(f"4. Transaction '{tx['name']}' ({tx['version']})")
    print(f"   Signers: {len(tx['signatures'])}")
    print(f"   Result:  {'VALID' if ok else 'INVALID'}\n")

print("=== Done ===")
