import struct

import pytest
from sdk_vectors import programs
from sdk_vectors.chain_errors import encode_instruction_error, encode_transaction_error
from sdk_vectors.crypto import Keypair, pubkey
from sdk_vectors.errors import EncodingError
from sdk_vectors.instructions import (
    AccountMeta,
    activate_feature,
    advance_nonce_account,
    create_account,
    encode_alt_instruction,
    encode_loader_v3_instruction,
    encode_loader_v4_instruction,
    encode_stake_instruction,
    encode_system_instruction,
    encode_vote_instruction,
    revoke_pending_activation,
    set_compute_unit_limit,
    set_compute_unit_price,
    transfer,
)
from sdk_vectors.precompiles import (
    CURRENT_INSTRUCTION_U16,
    Secp256k1SignatureOffsets,
    ed25519_offsets_for,
    new_ed25519_instruction,
    secp256k1_offsets_for,
    secp256r1_offsets_for,
)
from sdk_vectors.state import VoteInit

A = bytes([1] * 32)
B = bytes([2] * 32)


class TestSystem:
    def test_transfer(self):
        ix = transfer(A, B, 1_000_000_000)
        assert ix.program_id == bytes(32)
        assert ix.data == bytes([2, 0, 0, 0, 0, 202, 154, 59, 0, 0, 0, 0])
        assert [(m.is_signer, m.is_writable) for m in ix.accounts] == [(True, True), (False, True)]

    def test_create_account(self):
        ix = create_account(A, B, 1_000_000, 100, B)
        assert len(ix.data) == 52
        assert ix.data[:4] == bytes(4)
        assert ix.data[-32:] == B

    def test_advance_nonce_has_no_payload(self):
        ix = advance_nonce_account(A, B)
        assert ix.data == bytes([4, 0, 0, 0])
        assert ix.accounts[1].pubkey == pubkey(programs.SYSVAR_RECENT_BLOCKHASHES)

    def test_seeded_variant_carries_string(self):
        data = encode_system_instruction("AllocateWithSeed", space=8, owner=B, base=A, seed="ab")
        assert data == bytes([9, 0, 0, 0]) + A + bytes([2]) + bytes(7) + b"ab" + (8).to_bytes(8, "little") + B

    def test_missing_field(self):
        with pytest.raises(EncodingError):
            encode_system_instruction("Transfer")

    def test_unknown_variant(self):
        with pytest.raises(EncodingError):
            encode_system_instruction("Burn")


class TestComputeBudget:
    def test_unit_limit(self):
        assert set_compute_unit_limit(400_000).data == bytes([2]) + (400_000).to_bytes(4, "little")

    def test_unit_price(self):
        assert set_compute_unit_price(1000).data == bytes([3, 0xE8, 0x03, 0, 0, 0, 0, 0, 0])

    def test_program(self):
        assert set_compute_unit_limit(1).program_id == pubkey(programs.COMPUTE_BUDGET_PROGRAM)


class TestStakeVote:
    def test_stake_initialize_defaults(self):
        data = encode_stake_instruction("Initialize")
        assert len(data) == 116
        assert data[:4] == bytes(4)

    def test_stake_split(self):
        assert encode_stake_instruction("Split", lamports=1) == bytes([3, 0, 0, 0, 1]) + bytes(7)

    def test_stake_authorize(self):
        data = encode_stake_instruction("Authorize", new_authority=A, stake_authorize=1)
        assert data == bytes([1, 0, 0, 0]) + A + bytes([1, 0, 0, 0])

    def test_vote_initialize(self):
        init = VoteInit(A, B, A, 10)
        assert encode_vote_instruction("InitializeAccount", vote_init=init) == bytes(4) + init.serialize()
        assert len(init.serialize()) == 97

    def test_vote_commission(self):
        assert encode_vote_instruction("UpdateCommission", commission=50) == bytes([5, 0, 0, 0, 50])

    def test_vote_unsupported(self):
        with pytest.raises(EncodingError):
            encode_vote_instruction("TowerSync")


class TestLoaders:
    def test_v3_write(self):
        data = encode_loader_v3_instruction("Write", write_offset=100, write_bytes=bytes(range(1, 9)))
        assert data == bytes([1, 0, 0, 0, 100, 0, 0, 0, 8]) + bytes(7) + bytes(range(1, 9))

    def test_v3_deploy(self):
        assert encode_loader_v3_instruction("DeployWithMaxDataLen", max_data_len=10000)[4:] == struct.pack("<Q", 10000)

    def test_v3_unit_variants(self):
        assert encode_loader_v3_instruction("Upgrade") == bytes([3, 0, 0, 0])

    def test_v4_set_program_length(self):
        assert encode_loader_v4_instruction("SetProgramLength", new_size=1024) == bytes([2, 0, 0, 0, 0, 4, 0, 0])

    def test_v4_copy(self):
        data = encode_loader_v4_instruction("Copy", offset=1, source_offset=2, length=3)
        assert data == struct.pack("<IIII", 1, 1, 2, 3)


class TestLookupTable:
    def test_create(self):
        data = encode_alt_instruction("CreateLookupTable", recent_slot=12345678, bump_seed=255)
        assert data == bytes(4) + struct.pack("<Q", 12345678) + bytes([255])

    def test_extend(self):
        data = encode_alt_instruction("ExtendLookupTable", new_addresses=[A, B])
        assert data == bytes([2, 0, 0, 0, 2]) + bytes(7) + A + B

    def test_extend_empty(self):
        assert encode_alt_instruction("ExtendLookupTable", new_addresses=[]) == bytes([2, 0, 0, 0]) + bytes(8)


class TestFeatureGate:
    def test_activate_sequence(self):
        feature_id = bytes([0xFE] * 32)
        transfer_ix, allocate_ix, assign_ix = activate_feature(feature_id, A)
        assert transfer_ix.data[4:] == struct.pack("<Q", (128 + 9) * 3480 * 2)
        assert allocate_ix.data == bytes([8, 0, 0, 0, 9]) + bytes(7)
        assert assign_ix.data[4:] == pubkey(programs.FEATURE_PROGRAM)

    def test_revoke(self):
        ix = revoke_pending_activation(bytes([0xFE] * 32))
        assert ix.data == bytes([0])
        assert ix.accounts[1].pubkey == pubkey(programs.INCINERATOR)


class TestErrors:
    def test_custom(self):
        assert encode_instruction_error("Custom", 42) == bytes([25, 0, 0, 0, 42, 0, 0, 0])

    def test_insufficient_funds(self):
        assert encode_instruction_error("InsufficientFunds") == bytes([5, 0, 0, 0])

    def test_nested_instruction_error(self):
        assert encode_transaction_error("InstructionError", 5, "InvalidArgument") == bytes([8, 0, 0, 0, 5, 1, 0, 0, 0])

    def test_indexed_variant(self):
        assert encode_transaction_error("DuplicateInstruction", 3) == bytes([30, 0, 0, 0, 3])

    def test_custom_needs_code(self):
        with pytest.raises(EncodingError):
            encode_instruction_error("Custom")


class TestAccountMeta:
    def test_layout(self):
        assert AccountMeta(A, True, False).serialize() == A + bytes([1, 0])


class TestPrecompiles:
    def test_ed25519_layout(self):
        kp = Keypair.from_seed(bytes([7] * 32))
        message = b"hello"
        signature = kp.sign(message)
        ix = new_ed25519_instruction(kp.pubkey, signature, message)
        offsets = ed25519_offsets_for(len(message))
        assert ix.data[:2] == bytes([1, 0])
        assert ix.data[2:16] == offsets.pack()
        assert ix.data[offsets.public_key_offset:offsets.public_key_offset + 32] == kp.pubkey
        assert ix.data[offsets.signature_offset:offsets.signature_offset + 64] == signature
        assert ix.data[offsets.message_data_offset:] == message
        assert offsets.signature_instruction_index == CURRENT_INSTRUCTION_U16

    def test_ed25519_offsets(self):
        o = ed25519_offsets_for(5)
        assert (o.public_key_offset, o.signature_offset, o.message_data_offset) == (16, 48, 112)
        assert len(o.pack()) == 14

    def test_secp256k1_offsets(self):
        o = secp256k1_offsets_for(32)
        assert o.pack() == struct.pack("<HBHBHHB", 32, 0, 12, 0, 97, 32, 0)
        assert len(o.pack()) == 11

    def test_secp256k1_index_is_one_byte(self):
        with pytest.raises(EncodingError):
            Secp256k1SignatureOffsets(0, 256, 0, 0, 0, 0, 0).pack()

    def test_secp256r1_offsets(self):
        o = secp256r1_offsets_for(0)
        assert (o.public_key_offset, o.signature_offset, o.message_data_offset) == (16, 49, 113)
        assert len(o.pack()) == 14
