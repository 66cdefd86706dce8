"""Edwards25519 point decompression check.

Only the question "does this 32-byte string decompress to a curve point" is
answered here; that is all address derivation needs.
"""

P = 2 ** 255 - 19
D = -121665 * pow(121666, P - 2, P) % P
_Y_MASK = (1 << 255) - 1


def _inv(x: int) -> int:
    return pow(x, P - 2, P)


def is_on_curve(data: bytes) -> bool:
    """True if ``data`` is the compressed form of an edwards25519 point.

    The sign bit is ignored and a non-canonical y is reduced mod p, as the
    reference decompression does.
    """
    if len(data) != 32:
        return False
    y = (int.from_bytes(data, "little") & _Y_MASK) % P
    yy = y * y % P
    u = (yy - 1) % P
    v = (D * yy + 1) % P
    if u == 0:
        return True
    xx = u * _inv(v) % P
    return pow(xx, (P - 1) // 2, P) == 1
