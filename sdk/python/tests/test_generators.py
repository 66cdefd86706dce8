import json

import pytest
from sdk_vectors import catalog, constants, generators
from sdk_vectors.codec import decode_short_u16, decode_value
from sdk_vectors.crypto import b58decode, b58encode, pubkey, verify_ed25519
from sdk_vectors.curve import is_on_curve
from sdk_vectors.driver import generate_family
from sdk_vectors.errors import EncodingError, VectorError
from sdk_vectors.instructions import (
    encode_alt_instruction,
    encode_loader_v3_instruction,
    encode_stake_instruction,
    encode_vote_instruction,
)
from sdk_vectors.message import signer_keys
from sdk_vectors.pda import create_program_address, try_create_program_address


def by_name(records):
    return {r.name: r for r in records}


class TestRawIdentifiers:
    def test_pubkey_zero(self):
        assert by_name(generators.generate_pubkey())["zero"].base58 == "1" * 32

    @pytest.mark.parametrize("family", ["pubkey", "signature", "sysvar_id", "native_program_id", "special_addresses"])
    def test_base58_round_trip(self, family):
        for r in generate_family(family):
            assert b58decode(r.base58) == r.bytes, r.name

    def test_hash_text_is_base58(self):
        for r in generators.generate_hash():
            assert len(r.bytes) == 32
            assert r.hex == b58encode(r.bytes)

    def test_sysvar_clock(self):
        assert by_name(generators.generate_sysvar_id())["clock"].base58 == "SysvarC1ock11111111111111111111111111111111"


class TestDerivation:
    def test_pda_properties(self):
        for r in generators.generate_pda():
            assert not is_on_curve(r.expected_pubkey), r.name
            assert create_program_address(r.seeds + [bytes([r.expected_bump])], r.program_id) == r.expected_pubkey
            for higher in range(r.expected_bump + 1, 256):
                assert try_create_program_address(r.seeds + [bytes([higher])], r.program_id) is None

    def test_pda_case_names_come_first(self):
        assert [r.name for r in generators.generate_pda()] == [row[0] for row in catalog.PDA_CASES]

    def test_signer_seeds_rederive(self):
        for r in generators.generate_signer_seeds():
            assert r.signer_seeds[-1] == bytes([r.expected_bump])
            assert create_program_address(r.signer_seeds, r.program_id) == r.expected_pubkey

    def test_keypair_signatures_verify(self):
        for r in generators.generate_keypair():
            assert r.keypair_bytes == r.seed + r.pubkey
            assert verify_ed25519(r.pubkey, r.message, r.signature), r.name

    def test_ed25519_verify_expectations(self):
        records = by_name(generators.generate_ed25519_verify())
        assert records["valid_signature"].valid is True
        assert records["wrong_message"].valid is False
        assert records["wrong_pubkey"].valid is False
        assert records["empty_message"].valid is True
        assert records["long_message"].valid is True
        for r in records.values():
            assert verify_ed25519(r.pubkey, r.message, r.signature) is r.valid

    def test_catalog_contradiction_is_reported(self, monkeypatch):
        seed = bytes([7] * 32)
        monkeypatch.setattr(catalog, "ED25519_VERIFY_CASES", (("bad", seed, seed, b"a", b"b", True),))
        with pytest.raises(EncodingError) as excinfo:
            generators.generate_ed25519_verify()
        assert excinfo.value.case == "bad"


class TestCodecFamilies:
    def test_short_vec_min_encodings(self):
        records = by_name(generators.generate_short_vec())
        assert list(records["zero"].encoded) == [0]
        assert list(records["min_2byte"].encoded) == [0x80, 0x01]
        assert list(records["min_3byte"].encoded) == [0x80, 0x80, 0x01]
        for r in records.values():
            assert decode_short_u16(r.encoded)[0] == r.value

    @pytest.mark.parametrize("codec", ["bincode", "borsh"])
    def test_round_trip(self, codec):
        for r in generate_family(codec):
            assert decode_value(codec, r.type_name, r.encoded) == json.loads(r.value_json), r.name

    def test_value_json_matches_historical_text(self):
        records = by_name(generators.generate_bincode())
        assert records["u64_value"].value_json == "1311768467463790320"
        assert records["bool_true"].value_json == "true"
        assert records["option_none_u32"].value_json == "null"


class TestChainArithmetic:
    def test_lamports_rejections_are_null(self):
        records = by_name(generators.generate_lamports())
        for name in ("just_dot", "negative", "invalid_chars", "multiple_dots", "u64_overflow"):
            assert records[name].lamports is None
        assert records["empty_string"].lamports == 0
        assert records["excess_precision"].lamports == 123_456_789

    def test_rent(self):
        assert by_name(generators.generate_rent())["empty"].minimum_balance == 890_880

    def test_rent_exempt_boundary(self):
        records = by_name(generators.generate_rent_exempt())
        assert records["empty_at_minimum"].is_exempt
        assert not records["empty_one_below"].is_exempt
        assert records["max_balance"].is_exempt

    def test_epoch_schedule_warmup(self):
        records = by_name(generators.generate_epoch_schedule())
        r = records["warmup_epoch_1"]
        assert (r.expected_epoch, r.expected_slot_index, r.expected_slots_in_epoch) == (1, 0, 64)
        assert records["warmup_first_normal"].first_slot_in_epoch == 224
        assert records["no_warmup_epoch_5"].expected_slot_index == 1000

    @pytest.mark.parametrize("family,size", [("clock", 40), ("epoch_rewards", 81), ("last_restart_slot", 8)])
    def test_fixed_sysvar_sizes(self, family, size):
        for r in generate_family(family):
            assert len(r.serialized) == size

    def test_epoch_info_null_count(self):
        assert by_name(generators.generate_epoch_info())["null_tx_count"].transaction_count is None


class TestAccountState:
    def test_feature_state(self):
        records = by_name(generators.generate_feature_state())
        assert list(records["activated_slot_100"].encoded) == [1, 100, 0, 0, 0, 0, 0, 0, 0]
        assert records["unactivated"].encoded == bytes(9)

    def test_nonce_versions(self):
        records = by_name(generators.generate_nonce_versions())
        assert len(records["initialized"].encoded) == 80
        assert records["uninitialized"].encoded == bytes([1, 0, 0, 0, 0, 0, 0, 0])
        assert records["uninitialized"].authority == b""

    def test_program_data_header_is_padded(self):
        for r in generators.generate_program_data():
            assert len(r.serialized) == 45

    def test_lookup_table_state(self):
        for r in generators.generate_address_lookup_table_state():
            assert len(r.serialized) == 56 + 32 * len(r.addresses)
            assert r.serialized[:4] == bytes([1, 0, 0, 0])

    def test_lookup_table_meta_active(self):
        records = by_name(generators.generate_lookup_table_meta())
        assert records["active_empty"].is_active
        assert not records["deactivated"].is_active

    def test_vote_init_instruction_wraps_state(self):
        for r in generators.generate_vote_init():
            assert r.instruction_encoded == bytes(4) + r.serialized

    def test_lockup_size(self):
        for r in generators.generate_lockup():
            assert len(r.serialized) == 48

    def test_authorize_matches_builders(self):
        for r in generators.generate_authorize():
            if r.program == "stake":
                expected = encode_stake_instruction("Authorize", new_authority=r.new_authority, stake_authorize=r.authorize_type)
            else:
                expected = encode_vote_instruction("Authorize", new_authority=r.new_authority, vote_authorize=r.authorize_type)
            assert r.encoded == expected


class TestErrors:
    def test_instruction_error_codes(self):
        records = by_name(generators.generate_instruction_error())
        assert records["custom_42"].error_code == 25
        assert records["custom_42"].custom_code == 42
        assert records["insufficient_funds"].error_code == 5
        for r in records.values():
            assert r.encoded[:4] == r.error_code.to_bytes(4, "little")

    def test_transaction_error_order(self):
        names = [r.name for r in generators.generate_transaction_error()]
        assert names[:3] == ["account_in_use", "account_loaded_twice", "account_not_found"]

    def test_nested_error(self):
        r = by_name(generators.generate_transaction_error())["instruction_error_invalid_arg"]
        assert r.instruction_index == 5
        assert list(r.encoded) == [8, 0, 0, 0, 5, 1, 0, 0, 0]


class TestInstructionFamilies:
    def test_system_transfer_fields(self):
        r = by_name(generators.generate_system_instruction())["transfer_1_sol"]
        assert r.lamports == 1_000_000_000
        assert r.space is None and r.owner is None
        assert r.from_pubkey == pubkey(catalog.ALICE)

    def test_system_nonce_cases_have_no_transfer_fields(self):
        r = by_name(generators.generate_system_instruction())["advance_nonce"]
        assert (r.from_pubkey, r.to_pubkey, r.lamports) == (None, None, None)
        assert by_name(generators.generate_system_instruction())["withdraw_nonce"].lamports == 500_000

    def test_extended_derived_addresses(self):
        for r in generators.generate_system_instruction_extended():
            if r.base is not None:
                assert len(r.derived_address) == 32

    def test_compute_budget(self):
        r = by_name(generators.generate_compute_budget())["set_compute_unit_price_max"]
        assert r.encoded == bytes([3]) + b"\xff" * 8

    def test_loader_v3_rebuilds(self):
        for r in generators.generate_loader_v3_instruction():
            fields = {
                k: getattr(r, k)
                for k in ("write_offset", "write_bytes", "max_data_len", "additional_bytes")
                if getattr(r, k) is not None
            }
            assert encode_loader_v3_instruction(r.instruction_type, **fields) == r.encoded

    def test_loader_v4_bytes_len(self):
        r = by_name(generators.generate_loader_v4_instruction())["write_with_offset"]
        assert (r.offset, r.bytes_len) == (100, 8)

    def test_stake_initialize_size(self):
        assert len(by_name(generators.generate_stake_instruction())["initialize"].encoded) == 116

    def test_alt_rebuilds(self):
        for r in generators.generate_address_lookup_table_instruction():
            assert encode_alt_instruction(r.instruction_type, r.recent_slot, r.bump_seed, r.new_addresses) == r.encoded

    def test_vote_uses_counter_keys(self):
        records = by_name(generators.generate_vote_instruction())
        assert records["authorize_voter"].encoded[4:12] == (1).to_bytes(8, "big")
        assert records["authorize_withdrawer"].encoded[4:12] == (2).to_bytes(8, "big")

    def test_feature_gate(self):
        records = by_name(generators.generate_feature_gate_instruction())
        assert records["activate_allocate"].space == 9
        assert records["revoke_pending_activation"].encoded == bytes([0])

    def test_account_meta(self):
        for r in generators.generate_account_meta():
            assert r.encoded == r.pubkey + bytes([r.is_signer, r.is_writable])


class TestPrecompileFamilies:
    def test_ed25519_signatures_verify(self):
        for r in generators.generate_ed25519_instruction():
            assert verify_ed25519(r.pubkey, r.message, r.signature)
            assert r.encoded[2:16] == r.offsets_serialized
            assert r.num_signatures == 1

    def test_secp256k1_packed_width(self):
        for r in generators.generate_secp256k1_instruction():
            assert len(r.serialized) == 11

    def test_secp256r1_packed_width(self):
        for r in generators.generate_secp256r1_instruction():
            assert len(r.serialized) == 14


class TestMessages:
    def test_compiled_transfer(self):
        r = by_name(generators.generate_compiled_instruction())["transfer"]
        assert list(r.encoded) == [2, 2, 0, 1, 12, 2, 0, 0, 0, 0, 202, 154, 59, 0, 0, 0, 0]

    def test_message_blockhash_is_first_counter_value(self):
        r = by_name(generators.generate_message())["simple_transfer"]
        assert r.recent_blockhash == catalog.unique(1)
        assert r.serialized[:3] == bytes([1, 0, 1])

    def test_versioned_prefix(self):
        for r in generators.generate_versioned_message():
            assert r.serialized[0] == 0x80
            assert r.version == 0

    def test_transactions_verify(self):
        for r in generators.generate_transaction():
            assert r.signer_pubkeys == signer_keys(r.message)
            assert len(r.signatures) == len(r.signer_pubkeys)
            for key, signature in zip(r.signer_pubkeys, r.signatures):
                assert verify_ed25519(key, r.message, signature), r.name

    def test_transaction_versions(self):
        versions = {r.name: r.version for r in generators.generate_transaction()}
        assert versions["legacy_transfer"] == "legacy"
        assert versions["v0_transfer_to_lookup_address"] == "v0"


class TestMath:
    def test_big_mod_exp_scenarios(self):
        records = by_name(generators.generate_big_mod_exp())
        assert records["any_pow_0_mod_m"].result == bytes([1])
        assert records["base_pow_exp_mod_1"].result == bytes([0])
        for r in records.values():
            assert len(r.result) == len(r.modulus)


class TestErrorAnnotation:
    def test_family_and_case_attached(self, monkeypatch):
        monkeypatch.setattr(catalog, "PUBKEY_CASES", (("short", b"\x00" * 31),))
        with pytest.raises(VectorError) as excinfo:
            generate_family("pubkey")
        assert excinfo.value.family == "pubkey"
        assert excinfo.value.case == "short"
        assert str(excinfo.value).startswith("pubkey/short: ")


class TestConstantsTables:
    @pytest.mark.parametrize(
        "fn",
        [getattr(constants, name) for name in dir(constants) if name.startswith("generate_")],
    )
    def test_single_record(self, fn):
        assert len(fn()) == 1
