#!/usr/bin/env python3
"""
Tests for the brute-force crack time estimator.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from passwords_app.crack_time import (
    A_LOT_OF_TIME, CRACK_TIME_TABLES, INSTANTLY, MAX_TABLE_LENGTH, UNKNOWN,
    CharacterClass, classify, estimate_crack_time,
)


NUMERIC_TABLE = {
    12: "2 seconds", 13: "19 seconds", 14: "3 minutes", 15: "32 minutes",
    16: "5 hours", 17: "2 days", 18: "3 weeks",
}


class TestClassification:
    """Test first-match-wins classification."""

    def test_each_class(self):
        """Test a typical password for every class."""
        cases = [
            ("0123456789", CharacterClass.NUMERIC),
            ("abcxyz", CharacterClass.LOWERCASE_ONLY),
            ("ABCxyz", CharacterClass.UPPERCASE_OR_MIXED_LETTERS),
            ("ABCDEF", CharacterClass.UPPERCASE_OR_MIXED_LETTERS),
            ("abc123", CharacterClass.ALPHANUMERIC),
            ("Abc123!", CharacterClass.ALPHANUMERIC_SYMBOL),
            ("!@#$%^", CharacterClass.ALPHANUMERIC_SYMBOL),
            ("two words", CharacterClass.UNCLASSIFIED),
        ]
        for password, expected in cases:
            assert classify(password) is expected, f"'{password}' should be {expected.value}"

    def test_empty_string_is_lowercase_only(self):
        """Numeric needs one digit, LowercaseOnly accepts zero letters."""
        assert classify("") is CharacterClass.LOWERCASE_ONLY
        assert estimate_crack_time("") == INSTANTLY

    def test_high_code_points_count_as_lowercase(self):
        """Anything from U+0080 up falls in the lowercase range."""
        for password in ["éééé", "密码密码", "😀😀", "ÄÖÜ", "\u00a0"]:
            assert classify(password) is CharacterClass.LOWERCASE_ONLY, repr(password)

    def test_non_ascii_digits_are_not_numeric(self):
        """Only ASCII digits are Numeric."""
        assert classify("١٢٣٤٥٦٧٨٩٠١٢") is CharacterClass.LOWERCASE_ONLY

    def test_order_sensitivity(self):
        """All-lowercase passwords match every class but take the lowercase table."""
        password = "abcdefghijk"
        assert classify(password) is CharacterClass.LOWERCASE_ONLY
        assert estimate_crack_time(password) == "2 hours"
        assert CRACK_TIME_TABLES[CharacterClass.ALPHANUMERIC_SYMBOL].lookup(11) == "34 years"

    def test_digits_are_numeric_before_alphanumeric(self):
        assert classify("123456789012") is CharacterClass.NUMERIC
        assert classify("12345678901a") is CharacterClass.ALPHANUMERIC

    def test_unclassified_inputs(self):
        """Whitespace outside the extended range ends up unknown."""
        for password in [" ", "   ", "\t", "correct horse", "pass word!", " !", "123456789012\n"]:
            assert classify(password) is CharacterClass.UNCLASSIFIED, repr(password)
            assert estimate_crack_time(password) == UNKNOWN


class TestNumericTable:
    """Test digit-only passwords against the numeric table."""

    def test_short_digits_are_instant(self):
        for length in range(1, 12):
            assert estimate_crack_time("7" * length) == INSTANTLY

    def test_table_values(self):
        for length, expected in NUMERIC_TABLE.items():
            assert estimate_crack_time("1" * length) == expected, f"length {length}"

    def test_long_digits(self):
        for length in [19, 20, 64, 1000]:
            assert estimate_crack_time("9" * length) == A_LOT_OF_TIME


class TestEstimates:
    """Test the documented examples and boundaries."""

    def test_documented_examples(self):
        cases = [
            ("12345678901234", "3 minutes"),
            ("ABCDEFGH", "2 minutes"),
            ("Passw0rd!ab", "34 years"),
            ("abcdefghi", "10 seconds"),
            ("abc1234", "7 seconds"),
            ("Tr0ub4dor&3", "34 years"),
            ("P@ssword", "39 minutes"),
        ]
        for password, expected in cases:
            assert estimate_crack_time(password) == expected, f"'{password}'"

    def test_below_minimum_is_instant(self):
        cases = ["abcdefgh", "ABCDEF", "abc123", "a!b@c#", "x"]
        for password in cases:
            assert estimate_crack_time(password) == INSTANTLY, f"'{password}'"

    def test_boundaries_hit_literals(self):
        """Minimum length and length 18 are literal entries, not fallbacks."""
        samples = {
            CharacterClass.NUMERIC: "5",
            CharacterClass.LOWERCASE_ONLY: "q",
            CharacterClass.UPPERCASE_OR_MIXED_LETTERS: "Q",
            CharacterClass.ALPHANUMERIC: None,
            CharacterClass.ALPHANUMERIC_SYMBOL: None,
        }
        for character_class, table in CRACK_TIME_TABLES.items():
            for length in (table.min_length, MAX_TABLE_LENGTH):
                char = samples[character_class]
                if char is not None:
                    password = char * length
                elif character_class is CharacterClass.ALPHANUMERIC:
                    password = "a1" + "b" * (length - 2)
                else:
                    password = "a!" + "b" * (length - 2)
                assert classify(password) is character_class
                result = estimate_crack_time(password)
                assert result == table.entries[length]
                assert result not in (INSTANTLY, A_LOT_OF_TIME)

    def test_above_table_is_a_lot_of_time(self):
        for password in ["a" * 19, "A" * 25, "a1" * 10, "a!" * 10, "Zz9#" * 50]:
            assert estimate_crack_time(password) == A_LOT_OF_TIME

    def test_length_counts_code_points(self):
        """Astral characters count once each."""
        assert estimate_crack_time("😀" * 9) == "10 seconds"
        assert estimate_crack_time("😀" * 8) == INSTANTLY


class TestTables:
    """Test the static table data."""

    def test_tables_are_contiguous_up_to_18(self):
        expected_minimums = {
            CharacterClass.NUMERIC: 12,
            CharacterClass.LOWERCASE_ONLY: 9,
            CharacterClass.UPPERCASE_OR_MIXED_LETTERS: 7,
            CharacterClass.ALPHANUMERIC: 7,
            CharacterClass.ALPHANUMERIC_SYMBOL: 7,
        }
        assert set(CRACK_TIME_TABLES) == set(expected_minimums)
        for character_class, table in CRACK_TIME_TABLES.items():
            assert table.min_length == expected_minimums[character_class]
            assert table.max_length == MAX_TABLE_LENGTH
            assert sorted(table.entries) == list(range(table.min_length, MAX_TABLE_LENGTH + 1))

    def test_tables_are_read_only(self):
        table = CRACK_TIME_TABLES[CharacterClass.NUMERIC]
        with pytest.raises(TypeError):
            table.entries[12] = "forever"
        with pytest.raises(TypeError):
            CRACK_TIME_TABLES[CharacterClass.UNCLASSIFIED] = table

    def test_unclassified_has_no_table(self):
        assert CharacterClass.UNCLASSIFIED not in CRACK_TIME_TABLES


class TestPurity:
    """Test the estimator has no hidden state."""

    def test_idempotent(self):
        for password in ["", "abc", "Passw0rd!ab", "1" * 14, "two words"]:
            assert estimate_crack_time(password) == estimate_crack_time(password)

    def test_concurrent_calls(self):
        passwords = ["1" * n for n in range(25)] + ["Aa1!" * n for n in range(6)]
        expected = [estimate_crack_time(p) for p in passwords]
        with ThreadPoolExecutor(max_workers=8) as pool:
            for _ in range(5):
                assert list(pool.map(estimate_crack_time, passwords)) == expected

    def test_always_returns_text(self):
        for password in ["", "\x00", "\x7f", "\U0010ffff", " " * 30, "a\u200bb"]:
            result = estimate_crack_time(password)
            assert isinstance(result, str)
            assert len(result) > 0

    def test_trace_does_not_log_password(self, caplog):
        """The debug trace names the class and length only."""
        caplog.set_level(logging.DEBUG, logger="passwords_app")
        secret = "Zq9!Kx7#Wm"
        assert estimate_crack_time(secret) == "5 months"
        assert "AlphaNumericSymbol" in caplog.text
        assert "length=10" in caplog.text
        assert secret not in caplog.text
