import pytest
from sdk_vectors.codec import (
    BincodeReader,
    BincodeWriter,
    BorshReader,
    BorshWriter,
    decode_short_u16,
    decode_value,
    encode_short_u16,
    encode_value,
)
from sdk_vectors.errors import EncodingError


class TestShortU16:
    @pytest.mark.parametrize(
        "value,encoded",
        [
            (0, [0x00]),
            (1, [0x01]),
            (0x7F, [0x7F]),
            (0x80, [0x80, 0x01]),
            (0xFF, [0xFF, 0x01]),
            (0x3FFF, [0xFF, 0x7F]),
            (0x4000, [0x80, 0x80, 0x01]),
            (0xFFFF, [0xFF, 0xFF, 0x03]),
        ],
    )
    def test_encoding(self, value, encoded):
        assert list(encode_short_u16(value)) == encoded
        assert decode_short_u16(bytes(encoded)) == (value, len(encoded))

    def test_decode_at_offset(self):
        assert decode_short_u16(b"\xaa\x80\x01\xbb", 1) == (0x80, 2)

    @pytest.mark.parametrize("value", [-1, 0x10000])
    def test_out_of_range(self, value):
        with pytest.raises(EncodingError):
            encode_short_u16(value)

    def test_rejects_overlong_zero(self):
        with pytest.raises(EncodingError):
            decode_short_u16(b"\x80\x00")

    def test_rejects_overflow(self):
        with pytest.raises(EncodingError):
            decode_short_u16(b"\xff\xff\x04")

    def test_rejects_fourth_byte(self):
        with pytest.raises(EncodingError):
            decode_short_u16(b"\x80\x80\x80\x01")

    def test_rejects_truncated(self):
        with pytest.raises(EncodingError):
            decode_short_u16(b"\x80")


class TestBincode:
    def test_enum_tag_is_u32(self):
        assert BincodeWriter().tag(2).to_bytes() == b"\x02\x00\x00\x00"

    def test_string_has_u64_length(self):
        assert encode_value("bincode", "String", "hi") == b"\x02" + bytes(7) + b"hi"

    def test_option(self):
        assert encode_value("bincode", "Option<u32>", 42) == b"\x01\x2a\x00\x00\x00"
        assert encode_value("bincode", "Option<u32>", None) == b"\x00"

    def test_signed(self):
        assert encode_value("bincode", "i32", -12345) == (-12345).to_bytes(4, "little", signed=True)

    def test_u128(self):
        assert encode_value("bincode", "u128", 1) == b"\x01" + bytes(15)

    def test_overflow(self):
        with pytest.raises(EncodingError):
            encode_value("bincode", "u8", 256)

    def test_reader_round_trip(self):
        data = BincodeWriter().u8(7).i64(-1).boolean(True).pubkey(bytes(32)).string("x").to_bytes()
        r = BincodeReader(data)
        assert (r.u8(), r.i64(), r.boolean(), r.pubkey(), r.string()) == (7, -1, True, bytes(32), "x")
        r.finish()

    def test_reader_rejects_trailing_bytes(self):
        r = BincodeReader(b"\x01\x02")
        r.u8()
        with pytest.raises(EncodingError):
            r.finish()

    def test_reader_rejects_bad_bool(self):
        with pytest.raises(EncodingError):
            BincodeReader(b"\x02").boolean()

    def test_pad_to(self):
        assert BincodeWriter().u8(1).pad_to(4).to_bytes() == b"\x01\x00\x00\x00"
        with pytest.raises(EncodingError):
            BincodeWriter().u64(0).pad_to(4)


class TestBorsh:
    def test_enum_tag_is_u8(self):
        assert BorshWriter().tag(2).to_bytes() == b"\x02"

    def test_vec_has_u32_length(self):
        assert encode_value("borsh", "Vec<u8>", [1, 2, 3]) == b"\x03\x00\x00\x00\x01\x02\x03"

    def test_string(self):
        assert encode_value("borsh", "String", "") == bytes(4)

    def test_reader(self):
        r = BorshReader(b"\x03\x00\x00\x00abc")
        assert r.string() == "abc"
        r.finish()


class TestValueRoundTrip:
    @pytest.mark.parametrize("codec", ["bincode", "borsh"])
    @pytest.mark.parametrize(
        "type_name,value",
        [
            ("u64", 2 ** 64 - 1),
            ("i64", -(2 ** 63)),
            ("bool", False),
            ("String", "héllo"),
            ("Vec<u8>", []),
            ("Option<u64>", None),
            ("Option<String>", "x"),
        ],
    )
    def test_decode_inverts_encode(self, codec, type_name, value):
        assert decode_value(codec, type_name, encode_value(codec, type_name, value)) == value

    def test_unknown_type(self):
        with pytest.raises(EncodingError):
            encode_value("borsh", "f32", 1.0)
