"""
Brute-force crack time estimation.

The estimate only looks at which characters a password is made of and how
long it is. There is no dictionary or repetition analysis here; that is the
backend's job.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from .logger import app_logger

INSTANTLY = "instantly"
A_LOT_OF_TIME = "a lot of time"
UNKNOWN = "unknown"

MAX_TABLE_LENGTH = 18


class CharacterClass(Enum):
    """Composition categories, listed in evaluation order."""
    NUMERIC = "Numeric"
    LOWERCASE_ONLY = "LowercaseOnly"
    UPPERCASE_OR_MIXED_LETTERS = "UpperCaseOrMixedLetters"
    ALPHANUMERIC = "AlphaNumeric"
    ALPHANUMERIC_SYMBOL = "AlphaNumericSymbol"
    UNCLASSIFIED = "Unclassified"


# Code points from U+0080 upwards count as "extended" letters in every
# letter-based class.
_EXTENDED = "\u0080-\U0010ffff"

_NUMERIC = re.compile(r"[0-9]+")
_LOWERCASE_ONLY = re.compile(f"[a-z{_EXTENDED}]*")
_MIXED_LETTERS = re.compile(f"[a-zA-Z{_EXTENDED}]*")
_ALPHANUMERIC = re.compile(f"[a-zA-Z0-9{_EXTENDED}]*")
_ALPHANUMERIC_SYMBOL = re.compile(r"\S+")


def _matches(pattern: "re.Pattern[str]") -> Callable[[str], bool]:
    return lambda password: pattern.fullmatch(password) is not None


# Order matters: later classes are supersets of earlier ones, first match wins.
CLASSIFIERS: Tuple[Tuple[CharacterClass, Callable[[str], bool]], ...] = (
    (CharacterClass.NUMERIC, _matches(_NUMERIC)),
    (CharacterClass.LOWERCASE_ONLY, _matches(_LOWERCASE_ONLY)),
    (CharacterClass.UPPERCASE_OR_MIXED_LETTERS, _matches(_MIXED_LETTERS)),
    (CharacterClass.ALPHANUMERIC, _matches(_ALPHANUMERIC)),
    (CharacterClass.ALPHANUMERIC_SYMBOL, _matches(_ALPHANUMERIC_SYMBOL)),
)


class CrackTimeTable:
    """Length to crack time lookup for one character class."""

    def __init__(self, entries: Mapping[int, str]):
        self.entries: Mapping[int, str] = MappingProxyType(dict(entries))
        self.min_length = min(self.entries)
        self.max_length = max(self.entries)

    def lookup(self, length: int) -> str:
        if length < self.min_length:
            return INSTANTLY
        if length > self.max_length:
            return A_LOT_OF_TIME
        # Tables are contiguous, a missing length cannot happen in practice.
        return self.entries.get(length, A_LOT_OF_TIME)

    def __repr__(self) -> str:
        return f"CrackTimeTable({self.min_length}..{self.max_length})"


CRACK_TIME_TABLES: Mapping[CharacterClass, CrackTimeTable] = MappingProxyType({
    CharacterClass.NUMERIC: CrackTimeTable({
        12: "2 seconds",
        13: "19 seconds",
        14: "3 minutes",
        15: "32 minutes",
        16: "5 hours",
        17: "2 days",
        18: "3 weeks",
    }),
    CharacterClass.LOWERCASE_ONLY: CrackTimeTable({
        9: "10 seconds",
        10: "4 minutes",
        11: "2 hours",
        12: "2 days",
        13: "2 months",
        14: "4 years",
        15: "100 years",
        16: "3k years",
        17: "69k years",
        18: "2m years",
    }),
    CharacterClass.UPPERCASE_OR_MIXED_LETTERS: CrackTimeTable({
        7: "2 seconds",
        8: "2 minutes",
        9: "1 hour",
        10: "3 days",
        11: "5 months",
        12: "24 years",
        13: "1k years",
        14: "64k years",
        15: "3m years",
        16: "173m years",
        17: "9bn years",
        18: "467bn years",
    }),
    CharacterClass.ALPHANUMERIC: CrackTimeTable({
        7: "7 seconds",
        8: "7 minutes",
        9: "7 hours",
        10: "3 weeks",
        11: "3 years",
        12: "200 years",
        13: "12k years",
        14: "750k years",
        15: "46m years",
        16: "3bn years",
        17: "179bn years",
        18: "11tn years",
    }),
    CharacterClass.ALPHANUMERIC_SYMBOL: CrackTimeTable({
        7: "31 seconds",
        8: "39 minutes",
        9: "2 days",
        10: "5 months",
        11: "34 years",
        12: "3k years",
        13: "202k years",
        14: "16m years",
        15: "1bn years",
        16: "92bn years",
        17: "7tn years",
        18: "438tn years",
    }),
})


def classify(password: str) -> CharacterClass:
    """Return the first character class whose pattern matches the whole password.

    The empty string is not Numeric (one or more digits) but is LowercaseOnly
    (zero or more letters). Only passwords holding whitespace next to a
    character outside the letter classes (an ASCII space, a tab, a no-break
    space beside a symbol) end up Unclassified.
    """
    for character_class, matches in CLASSIFIERS:
        if matches(password):
            return character_class
    return CharacterClass.UNCLASSIFIED


def table_for(character_class: CharacterClass) -> Optional[CrackTimeTable]:
    return CRACK_TIME_TABLES.get(character_class)


def estimate_crack_time(password: str) -> str:
    """Estimate how long a brute-force attack needs to guess the password.

    Args:
        password: Any string, including the empty string.

    Returns:
        A human readable duration such as ``"39 minutes"``, ``"instantly"``,
        ``"a lot of time"`` or ``"unknown"`` for unclassified passwords.
    """
    password_length = len(password)
    character_class = classify(password)
    app_logger.logger.debug(
        f"Crack time estimate: class={character_class.value} length={password_length}"
    )

    table = table_for(character_class)
    if table is None:
        return UNKNOWN
    return table.lookup(password_length)
