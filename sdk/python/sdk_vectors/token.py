"""Native token (SOL) amounts and their decimal string form."""

from typing import Optional

LAMPORTS_PER_SOL = 1_000_000_000
SOL_DECIMALS = 9
SOL_SYMBOL = "◎"
U64_MAX = 2 ** 64 - 1


def _parse_u64(text: str) -> Optional[int]:
    # Accepts an optional leading '+', then ASCII digits only.
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= c <= "9" for c in digits):
        return None
    value = int(digits)
    if value > U64_MAX:
        return None
    return value


def sol_str_to_lamports(sol_str: str) -> Optional[int]:
    """Parse a decimal SOL amount into lamports.

    Returns None when the string is rejected: a lone ".", a sign other than
    "+", non-digits, a second ".", or a total beyond u64. Fractions longer
    than nine digits are truncated; an empty string is zero.
    """
    if sol_str == ".":
        return None
    whole, _, frac = sol_str.partition(".")
    sol = _parse_u64(whole) if whole else 0
    if sol is None:
        return None
    if frac:
        lamports = _parse_u64((frac + "0" * SOL_DECIMALS)[:SOL_DECIMALS])
        if lamports is None:
            return None
    else:
        lamports = 0
    total = sol * LAMPORTS_PER_SOL + lamports
    if total > U64_MAX:
        return None
    return total


def lamports_to_sol(lamports: int) -> str:
    """Render lamports as a decimal SOL string with trailing zeros removed."""
    whole, frac = divmod(lamports, LAMPORTS_PER_SOL)
    if frac == 0:
        return str(whole)
    return f"{whole}.{frac:09d}".rstrip("0")
