import pytest
from sdk_vectors import constants
from sdk_vectors.errors import EncodingError


def only(records):
    assert len(records) == 1
    return records[0]


class TestSizes:
    def test_hash_sizes(self):
        r = only(constants.generate_hash_sizes())
        assert {r.hash, r.sha256, r.keccak256, r.blake3, r.durable_nonce} == {32}

    def test_primitive_widths(self):
        r = only(constants.generate_primitive_type_sizes())
        assert (r.u8, r.u16, r.u32, r.u64, r.u128) == (1, 2, 4, 8, 16)
        assert (r.i8, r.i16, r.i32, r.i64, r.bool) == (1, 2, 4, 8, 1)
        assert (r.pubkey, r.hash, r.signature) == (32, 32, 64)

    def test_signature_sizes(self):
        r = only(constants.generate_signature_sizes())
        assert (r.signature, r.ed25519_signature, r.max_base58_len) == (64, 64, 88)

    def test_pubkey_sizes(self):
        r = only(constants.generate_pubkey_sizes())
        assert (r.max_base58_len, r.max_seed_len, r.max_seeds) == (44, 32, 16)
        assert r.pda_marker == "ProgramDerivedAddress"
        assert r.pda_marker_len == 21

    def test_bpf_loader_state_sizes(self):
        r = only(constants.generate_bpf_loader_state_sizes())
        assert (r.uninitialized, r.buffer_metadata, r.program, r.programdata_metadata) == (4, 37, 36, 45)

    def test_sysvar_sizes(self):
        r = only(constants.generate_sysvar_sizes())
        assert (r.clock, r.rent, r.epoch_schedule, r.fees) == (40, 17, 33, 8)
        assert (r.slot_hashes, r.stake_history, r.recent_blockhashes) == (20_488, 16_392, 6_008)
        assert (r.epoch_rewards, r.last_restart_slot) == (81, 8)
        assert r.slot_history == 131_097


class TestProgramConstants:
    def test_nonce(self):
        r = only(constants.generate_nonce_constants())
        assert r.nonce_account_length == 80
        assert r.durable_nonce_hash_prefix == "DURABLE_NONCE"
        assert r.uninitialized_versions_size == 8

    def test_lookup_tables(self):
        r = only(constants.generate_alt_constants())
        assert (r.lookup_table_max_addresses, r.lookup_table_meta_size) == (256, 56)
        assert r.slot_max == 2 ** 64 - 1

    def test_ed25519_layout(self):
        r = only(constants.generate_ed25519_constants())
        assert (r.signature_offsets_serialized_size, r.signature_offsets_start, r.data_start) == (14, 2, 16)

    def test_secp256k1_layout(self):
        r = only(constants.generate_secp256k1_constants())
        assert (r.hashed_pubkey_serialized_size, r.signature_serialized_size) == (20, 64)
        assert (r.signature_offsets_serialized_size, r.signature_offsets_start, r.data_start) == (11, 1, 12)

    def test_epoch_schedule(self):
        r = only(constants.generate_epoch_schedule_constants())
        assert (r.minimum_slots_per_epoch, r.default_slots_per_epoch) == (32, 432_000)

    def test_vote_state(self):
        r = only(constants.generate_vote_state_constants())
        assert (r.max_lockout_history, r.vote_init_size, r.vote_state_size) == (31, 97, 3762)


class TestCurves:
    def test_bn254_moduli(self):
        r = only(constants.generate_bn254_constants())
        assert r.field_modulus == 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47
        assert r.scalar_modulus == 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
        assert r.field_modulus.bit_length() == 254
        assert (r.addition_input_size, r.multiplication_input_size, r.pairing_element_size) == (128, 96, 192)

    def test_bls(self):
        r = only(constants.generate_bls_constants())
        assert (r.public_key_compressed_size, r.signature_compressed_size) == (48, 96)
        assert r.pop_dst.endswith("_POP_")


class TestLimits:
    def test_account_limits(self):
        r = only(constants.generate_account_limits())
        assert r.max_permitted_data_length == 10 * 1024 * 1024
        assert r.max_permitted_accounts_data_allocations_per_transaction == 2 * r.max_permitted_data_length
        assert (r.packet_data_size, r.max_tx_account_locks, r.max_signers) == (1232, 128, 16)

    def test_account_layout_offsets(self):
        r = only(constants.generate_account_layout())
        assert (r.key_offset, r.owner_offset, r.lamports_offset, r.data_len_offset, r.data_offset) == (8, 40, 72, 80, 88)


class TestMeasuredDrift:
    def test_mismatch_fails(self):
        with pytest.raises(EncodingError, match="declared 33, encoders produce 32"):
            constants._measured(33, 32, "width")

    def test_drifted_table_fails_generation(self, monkeypatch):
        monkeypatch.setattr(constants, "OWNER_OFFSET", 41)
        with pytest.raises(EncodingError, match="owner offset"):
            constants.generate_account_layout()
