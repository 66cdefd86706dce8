"""Wire codecs: short-u16 and the two little-endian structural codecs.

S-LE (bincode layout): u32 enum tags, u64 sequence/string lengths.
B-LE (borsh layout): u8 enum tags, u32 sequence/string lengths.
Both write fixed-width integers little-endian, bools as one byte and
options as a one-byte presence flag followed by the payload.
"""

import struct
from typing import Any, Callable, Optional

from .errors import EncodingError

MAX_ENCODING_LENGTH = 3


def encode_short_u16(value: int) -> bytes:
    """Encode a u16 in 1-3 bytes, 7 bits per byte, high bit = continuation."""
    if not 0 <= value <= 0xFFFF:
        raise EncodingError(f"short_u16 value out of range: {value}")
    if value < 0x80:
        return bytes([value])
    if value < 0x4000:
        return bytes([(value & 0x7F) | 0x80, value >> 7])
    return bytes([(value & 0x7F) | 0x80, ((value >> 7) & 0x7F) | 0x80, value >> 14])


def decode_short_u16(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a short_u16 at ``offset``. Returns (value, bytes consumed)."""
    value = 0
    for i in range(MAX_ENCODING_LENGTH):
        if offset + i >= len(data):
            raise EncodingError("short_u16 truncated")
        byte = data[offset + i]
        value |= (byte & 0x7F) << (7 * i)
        if byte & 0x80 == 0:
            if i > 0 and byte == 0:
                raise EncodingError("short_u16 has a redundant trailing byte")
            if value > 0xFFFF:
                raise EncodingError("short_u16 overflows u16")
            return value, i + 1
    raise EncodingError("short_u16 longer than 3 bytes")


_INT_TYPES = {
    "u8": (1, False),
    "u16": (2, False),
    "u32": (4, False),
    "u64": (8, False),
    "u128": (16, False),
    "i8": (1, True),
    "i16": (2, True),
    "i32": (4, True),
    "i64": (8, True),
}


class _Writer:
    TAG_WIDTH = 4
    LEN_WIDTH = 8

    def __init__(self):
        self._buf = bytearray()

    def _int(self, value: int, width: int, signed: bool = False) -> "_Writer":
        try:
            self._buf += int(value).to_bytes(width, "little", signed=signed)
        except OverflowError as e:
            raise EncodingError(f"{value} does not fit in {width} bytes") from e
        return self

    def u8(self, value: int):
        return self._int(value, 1)

    def u16(self, value: int):
        return self._int(value, 2)

    def u32(self, value: int):
        return self._int(value, 4)

    def u64(self, value: int):
        return self._int(value, 8)

    def u128(self, value: int):
        return self._int(value, 16)

    def i8(self, value: int):
        return self._int(value, 1, signed=True)

    def i16(self, value: int):
        return self._int(value, 2, signed=True)

    def i32(self, value: int):
        return self._int(value, 4, signed=True)

    def i64(self, value: int):
        return self._int(value, 8, signed=True)

    def f64(self, value: float):
        self._buf += struct.pack("<d", value)
        return self

    def boolean(self, value: bool):
        return self.u8(1 if value else 0)

    def raw(self, data: bytes):
        self._buf += data
        return self

    def pubkey(self, data: bytes):
        if len(data) != 32:
            raise EncodingError(f"pubkey must be 32 bytes, got {len(data)}")
        return self.raw(data)

    def tag(self, index: int):
        return self._int(index, self.TAG_WIDTH)

    def length(self, n: int):
        return self._int(n, self.LEN_WIDTH)

    def byte_vec(self, data: bytes):
        return self.length(len(data)).raw(data)

    def string(self, text: str):
        return self.byte_vec(text.encode("utf-8"))

    def option(self, value: Any, write: Callable[[Any], Any]):
        if value is None:
            return self.u8(0)
        self.u8(1)
        write(value)
        return self

    def pad_to(self, size: int):
        if len(self._buf) > size:
            raise EncodingError(f"{len(self._buf)} bytes already exceed padded size {size}")
        self._buf += bytes(size - len(self._buf))
        return self

    def __len__(self) -> int:
        return len(self._buf)

    def to_bytes(self) -> bytes:
        return bytes(self._buf)


class _Reader:
    TAG_WIDTH = 4
    LEN_WIDTH = 8

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    def _take(self, n: int) -> bytes:
        if self._pos + n > len(self._data):
            raise EncodingError(f"unexpected end of input at byte {self._pos}")
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk

    def _int(self, width: int, signed: bool = False) -> int:
        return int.from_bytes(self._take(width), "little", signed=signed)

    def u8(self) -> int:
        return self._int(1)

    def u16(self) -> int:
        return self._int(2)

    def u32(self) -> int:
        return self._int(4)

    def u64(self) -> int:
        return self._int(8)

    def u128(self) -> int:
        return self._int(16)

    def i8(self) -> int:
        return self._int(1, True)

    def i16(self) -> int:
        return self._int(2, True)

    def i32(self) -> int:
        return self._int(4, True)

    def i64(self) -> int:
        return self._int(8, True)

    def f64(self) -> float:
        return struct.unpack("<d", self._take(8))[0]

    def boolean(self) -> bool:
        b = self.u8()
        if b > 1:
            raise EncodingError(f"invalid bool byte {b}")
        return b == 1

    def raw(self, n: int) -> bytes:
        return self._take(n)

    def pubkey(self) -> bytes:
        return self._take(32)

    def tag(self) -> int:
        return self._int(self.TAG_WIDTH)

    def length(self) -> int:
        return self._int(self.LEN_WIDTH)

    def byte_vec(self) -> bytes:
        return self._take(self.length())

    def string(self) -> str:
        return self.byte_vec().decode("utf-8")

    def option(self, read: Callable[[], Any]) -> Optional[Any]:
        flag = self.u8()
        if flag == 0:
            return None
        if flag != 1:
            raise EncodingError(f"invalid option tag {flag}")
        return read()

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def finish(self) -> None:
        if self.remaining():
            raise EncodingError(f"{self.remaining()} trailing bytes")


class BincodeWriter(_Writer):
    TAG_WIDTH = 4
    LEN_WIDTH = 8


class BincodeReader(_Reader):
    TAG_WIDTH = 4
    LEN_WIDTH = 8


class BorshWriter(_Writer):
    TAG_WIDTH = 1
    LEN_WIDTH = 4


class BorshReader(_Reader):
    TAG_WIDTH = 1
    LEN_WIDTH = 4


CODECS = {
    "bincode": (BincodeWriter, BincodeReader),
    "borsh": (BorshWriter, BorshReader),
}


def _inner(type_name: str, prefix: str) -> Optional[str]:
    if type_name.startswith(prefix + "<") and type_name.endswith(">"):
        return type_name[len(prefix) + 1:-1]
    return None


def _write(w: _Writer, type_name: str, value: Any) -> None:
    if type_name in _INT_TYPES:
        width, signed = _INT_TYPES[type_name]
        w._int(value, width, signed)
    elif type_name == "bool":
        w.boolean(value)
    elif type_name == "String":
        w.string(value)
    elif type_name == "Vec<u8>":
        w.byte_vec(bytes(value))
    elif _inner(type_name, "Option") is not None:
        inner = _inner(type_name, "Option")
        w.option(value, lambda v: _write(w, inner, v))
    else:
        raise EncodingError(f"unsupported type {type_name!r}")


def _read(r: _Reader, type_name: str) -> Any:
    if type_name in _INT_TYPES:
        width, signed = _INT_TYPES[type_name]
        return r._int(width, signed)
    if type_name == "bool":
        return r.boolean()
    if type_name == "String":
        return r.string()
    if type_name == "Vec<u8>":
        return list(r.byte_vec())
    inner = _inner(type_name, "Option")
    if inner is not None:
        return r.option(lambda: _read(r, inner))
    raise EncodingError(f"unsupported type {type_name!r}")


def encode_value(codec: str, type_name: str, value: Any) -> bytes:
    """Serialize a single value of ``type_name`` with the named codec."""
    writer_cls, _ = CODECS[codec]
    w = writer_cls()
    _write(w, type_name, value)
    return w.to_bytes()


def decode_value(codec: str, type_name: str, data: bytes) -> Any:
    _, reader_cls = CODECS[codec]
    r = reader_cls(data)
    value = _read(r, type_name)
    r.finish()
    return value
