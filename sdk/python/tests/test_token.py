import pytest
from sdk_vectors.token import LAMPORTS_PER_SOL, U64_MAX, lamports_to_sol, sol_str_to_lamports


class TestSolStrToLamports:
    @pytest.mark.parametrize(
        "text,lamports",
        [
            ("0", 0),
            ("0.0", 0),
            ("1", LAMPORTS_PER_SOL),
            ("1.5", 1_500_000_000),
            ("0.000000001", 1),
            ("1.123456789", 1_123_456_789),
            ("8.50228288", 8_502_282_880),
            (".5", 500_000_000),
            ("5.", 5 * LAMPORTS_PER_SOL),
            ("", 0),
            ("+2", 2 * LAMPORTS_PER_SOL),
        ],
    )
    def test_accepted(self, text, lamports):
        assert sol_str_to_lamports(text) == lamports

    @pytest.mark.parametrize("text", [".", "-1", "abc", "1.2.3", "1e9", " 1", "18446744074"])
    def test_rejected(self, text):
        assert sol_str_to_lamports(text) is None

    def test_excess_precision_truncates(self):
        assert sol_str_to_lamports("0.1234567891") == 123_456_789

    def test_u64_boundary(self):
        assert sol_str_to_lamports("18446744073.709551615") == U64_MAX
        assert sol_str_to_lamports("18446744073.709551616") is None


class TestLamportsToSol:
    @pytest.mark.parametrize(
        "lamports,text",
        [(0, "0"), (LAMPORTS_PER_SOL, "1"), (1, "0.000000001"), (1_500_000_000, "1.5")],
    )
    def test_format(self, lamports, text):
        assert lamports_to_sol(lamports) == text

    def test_inverse(self):
        assert sol_str_to_lamports(lamports_to_sol(8_502_282_880)) == 8_502_282_880
