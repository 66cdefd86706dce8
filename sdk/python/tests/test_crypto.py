import pytest
from sdk_vectors.crypto import (
    Keypair,
    b58decode,
    b58encode,
    big_mod_exp,
    blake3_hash,
    hash_to_string,
    hashv,
    keccak256,
    pubkey,
    sha256,
    verify_ed25519,
)
from sdk_vectors.errors import CatalogError, EncodingError

# RFC 8032 section 7.1, test 1
RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
RFC8032_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


class TestEd25519:
    def test_rfc8032_public_key(self):
        assert Keypair.from_seed(RFC8032_SEED).pubkey == RFC8032_PUBLIC

    def test_rfc8032_signature(self):
        assert Keypair.from_seed(RFC8032_SEED).sign(b"") == RFC8032_SIGNATURE

    def test_keypair_bytes_are_seed_then_public(self):
        kp = Keypair.from_seed(RFC8032_SEED)
        assert kp.to_bytes() == RFC8032_SEED + RFC8032_PUBLIC
        assert len(kp.to_bytes()) == 64

    def test_valid_signature(self):
        assert verify_ed25519(RFC8032_PUBLIC, b"", RFC8032_SIGNATURE) is True

    def test_tampered_message(self):
        assert verify_ed25519(RFC8032_PUBLIC, b"x", RFC8032_SIGNATURE) is False

    def test_wrong_key(self):
        other = Keypair.from_seed(bytes(32)).pubkey
        assert verify_ed25519(other, b"", RFC8032_SIGNATURE) is False

    def test_malformed_key_is_invalid_not_error(self):
        assert verify_ed25519(b"\x01" * 31, b"", RFC8032_SIGNATURE) is False

    def test_signing_is_deterministic(self):
        a = Keypair.from_seed(bytes([7] * 32)).sign(b"same message")
        b = Keypair.from_seed(bytes([7] * 32)).sign(b"same message")
        assert a == b

    def test_seed_width_enforced(self):
        with pytest.raises(CatalogError):
            Keypair(b"\x00" * 31)


class TestHashes:
    def test_sha256_empty(self):
        assert sha256(b"").hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_hashv_matches_concatenation(self):
        assert hashv(b"ab", b"", b"cd") == sha256(b"abcd")

    def test_keccak256_empty(self):
        assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"

    def test_blake3_empty(self):
        assert blake3_hash(b"").hex() == "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"

    @pytest.mark.parametrize("fn", [sha256, keccak256, blake3_hash])
    def test_width(self, fn):
        assert len(fn(b"solana")) == 32


class TestBase58:
    def test_zero_pubkey(self):
        assert b58encode(bytes(32)) == "1" * 32

    def test_system_program_decodes_to_zero(self):
        assert pubkey("11111111111111111111111111111111") == bytes(32)

    def test_round_trip(self):
        data = bytes(range(32))
        assert b58decode(b58encode(data)) == data

    def test_pubkey_rejects_short_address(self):
        with pytest.raises(CatalogError):
            pubkey("1111")

    def test_pubkey_rejects_bad_alphabet(self):
        with pytest.raises(CatalogError):
            pubkey("0OIl" * 11)

    def test_hash_string_is_base58(self):
        assert hash_to_string(bytes(32)) == "1" * 32

    def test_hash_string_width(self):
        with pytest.raises(EncodingError):
            hash_to_string(bytes(31))


class TestBigModExp:
    def test_simple(self):
        assert big_mod_exp(bytes([3]), bytes([4]), bytes([7])) == bytes([81 % 7])

    def test_any_pow_zero(self):
        assert big_mod_exp(bytes([42]), bytes([0]), bytes([17])) == bytes([1])

    def test_modulus_one(self):
        assert big_mod_exp(bytes([5]), bytes([3]), bytes([1])) == bytes([0])

    def test_modulus_zero_keeps_width(self):
        assert big_mod_exp(bytes([5]), bytes([3]), bytes([0, 0])) == bytes(2)

    def test_result_left_padded(self):
        assert big_mod_exp(bytes([2]), bytes([1]), bytes([1, 0, 1])) == bytes([0, 0, 2])

    def test_fermat(self):
        p = (65537).to_bytes(3, "big")
        assert big_mod_exp(bytes([3]), (65536).to_bytes(3, "big"), p) == bytes([0, 0, 1])

    def test_input_cap(self):
        with pytest.raises(CatalogError):
            big_mod_exp(bytes(513), bytes([1]), bytes([7]))
