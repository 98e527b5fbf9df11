"""
Backend boundary for generation, scoring, analysis and hashing.

The user-facing panels only talk to a ``Backend``. ``LocalBackend`` is the
in-process implementation; tests swap in mocks.
"""

import base64
import secrets
import string
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, asdict, replace
from typing import Dict, List, Optional, Any

import bcrypt as bcrypt_lib
from cryptography.hazmat.primitives import hashes
from zxcvbn import zxcvbn

from .errors import AnalysisError, GenerationError, HashingError
from .logger import app_logger
from .wordlist import COMMON_PASSWORDS, SYLLABLES, WORDS

MAX_WORDS = 256
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31
# bcrypt only ever looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72
# zxcvbn runtime grows with length, longer input adds nothing to the score
SCORE_MAX_CHARS = 100

NUMBERS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
SYMBOLS = string.punctuation
SPACES = " "
SIMILAR_CHARACTERS = "iIlLoO01|`'\""


@dataclass
class Complexity:
    """Options for random password generation."""
    length: int = 20
    numbers: bool = True
    symbols: bool = False
    uppercase: bool = True
    lowercase: bool = True
    spaces: bool = False
    exclude_similar_characters: bool = False
    strict: bool = True


@dataclass
class AnalyzedResult:
    """Structural analysis of a password."""
    password: str
    length: int
    spaces_count: int = 0
    numbers_count: int = 0
    lowercase_letters_count: int = 0
    uppercase_letters_count: int = 0
    symbols_count: int = 0
    other_characters_count: int = 0
    consecutive_count: int = 0
    non_consecutive_count: int = 0
    progressive_count: int = 0
    is_common: bool = False
    score: float = 0.0
    crack_times: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalyzedResult':
        return cls(**data)


class Backend(ABC):
    """Operations the generator, hasher and analyzer delegate."""

    @abstractmethod
    def generate_password(self, complexity: Complexity) -> str:
        ...

    @abstractmethod
    def generate_words(self, length: int, full_words: bool) -> List[str]:
        ...

    @abstractmethod
    def generate_pin(self, length: int) -> str:
        ...

    @abstractmethod
    def analyze(self, password: str) -> AnalyzedResult:
        ...

    @abstractmethod
    def score(self, password: str) -> float:
        """Strength score in [0, 100]."""

    @abstractmethod
    def is_common_password(self, password: str) -> bool:
        ...

    @abstractmethod
    def md5(self, password: str) -> str:
        ...

    @abstractmethod
    def sha1(self, password: str) -> str:
        ...

    @abstractmethod
    def sha224(self, password: str) -> str:
        ...

    @abstractmethod
    def sha256(self, password: str) -> str:
        ...

    @abstractmethod
    def sha384(self, password: str) -> str:
        ...

    @abstractmethod
    def sha512(self, password: str) -> str:
        ...

    @abstractmethod
    def bcrypt(self, password: str, rounds: int) -> str:
        ...

    @abstractmethod
    def base64(self, password: str) -> str:
        ...


class LocalBackend(Backend):
    """In-process backend built on secrets, cryptography, bcrypt and zxcvbn."""

    def __init__(self):
        self._random = secrets.SystemRandom()

    # ----- Generation -----

    def _pools(self, complexity: Complexity) -> List[str]:
        enabled = [
            (complexity.numbers, NUMBERS),
            (complexity.lowercase, LOWERCASE),
            (complexity.uppercase, UPPERCASE),
            (complexity.symbols, SYMBOLS),
            (complexity.spaces, SPACES),
        ]
        pools = []
        for flag, pool in enabled:
            if not flag:
                continue
            if complexity.exclude_similar_characters:
                pool = "".join(c for c in pool if c not in SIMILAR_CHARACTERS)
            pools.append(pool)
        return pools

    def _generate(self, complexity: Complexity) -> str:
        if complexity.length < 1:
            raise GenerationError(f"Invalid password length: {complexity.length}")

        pools = self._pools(complexity)
        if not pools:
            raise GenerationError("No character types selected")

        chars = []
        if complexity.strict:
            if complexity.length < len(pools):
                raise GenerationError(
                    f"Length {complexity.length} is too short to include "
                    f"all {len(pools)} character types"
                )
            chars = [secrets.choice(pool) for pool in pools]

        alphabet = "".join(pools)
        while len(chars) < complexity.length:
            chars.append(secrets.choice(alphabet))

        self._random.shuffle(chars)
        return "".join(chars)

    def generate_password(self, complexity: Complexity) -> str:
        # Lowercase letters are always part of a random password
        if not complexity.lowercase:
            complexity = replace(complexity, lowercase=True)
        password = self._generate(complexity)
        app_logger.log_generation("random", len(password))
        return password

    def generate_words(self, length: int, full_words: bool) -> List[str]:
        if length < 0:
            raise GenerationError(f"Invalid word count: {length}")
        pool = WORDS if full_words else SYLLABLES
        count = min(length, MAX_WORDS)
        words = self._random.sample(pool, count)
        app_logger.log_generation("memorable", count)
        return words

    def generate_pin(self, length: int) -> str:
        pin = self._generate(Complexity(
            length=length,
            numbers=True,
            uppercase=False,
            lowercase=False,
        ))
        app_logger.log_generation("pin", len(pin))
        return pin

    # ----- Analysis -----

    def analyze(self, password: str) -> AnalyzedResult:
        result = AnalyzedResult(password=password, length=len(password))

        for c in password:
            if c == " ":
                result.spaces_count += 1
            elif c in NUMBERS:
                result.numbers_count += 1
            elif c in LOWERCASE:
                result.lowercase_letters_count += 1
            elif c in UPPERCASE:
                result.uppercase_letters_count += 1
            elif c in SYMBOLS:
                result.symbols_count += 1
            else:
                result.other_characters_count += 1

        result.consecutive_count = self._consecutive_count(password)
        repeated = sum(n for n in Counter(password).values() if n > 1)
        result.non_consecutive_count = max(0, repeated - result.consecutive_count)
        result.progressive_count = self._progressive_count(password)
        result.is_common = self.is_common_password(password)
        return result

    @staticmethod
    def _consecutive_count(password: str) -> int:
        """Characters that sit in a run of identical neighbours ("aa" counts 2)."""
        count = 0
        run = 1
        for prev, cur in zip(password, password[1:]):
            if cur == prev:
                run += 1
                continue
            if run > 1:
                count += run
            run = 1
        if run > 1:
            count += run
        return count

    @staticmethod
    def _progressive_count(password: str) -> int:
        """Characters in runs of three or more stepping by one ("abc", "321").

        Runs that share a turning point ("abcba") count it once.
        """
        counted = set()
        start = 0
        step = 0
        for i in range(1, len(password)):
            diff = ord(password[i]) - ord(password[i - 1])
            if not (diff in (1, -1) and (i - start == 1 or diff == step)):
                if i - start >= 3:
                    counted.update(range(start, i))
                start = i - 1 if diff in (1, -1) else i
            step = diff
        if len(password) - start >= 3:
            counted.update(range(start, len(password)))
        return len(counted)

    def score(self, password: str) -> float:
        if not password:
            return 0.0
        try:
            result = zxcvbn(password[:SCORE_MAX_CHARS])
        except Exception as e:
            raise AnalysisError(f"Scoring failed: {str(e)}") from e
        # 10^20 guesses and beyond is as strong as the scale goes
        score = min(100.0, float(result["guesses_log10"]) * 5)
        if self.is_common_password(password):
            score = min(score, 10.0)
        return round(max(0.0, score), 2)

    def is_common_password(self, password: str) -> bool:
        return password.lower() in COMMON_PASSWORDS

    # ----- Hashing -----

    def _digest(self, algorithm: hashes.HashAlgorithm, password: str) -> str:
        try:
            digest = hashes.Hash(algorithm)
            digest.update(password.encode('utf-8'))
            value = digest.finalize().hex()
        except Exception as e:
            app_logger.log_hash(algorithm.name, False)
            raise HashingError(f"{algorithm.name} failed: {str(e)}") from e
        app_logger.log_hash(algorithm.name, True)
        return value

    def md5(self, password: str) -> str:
        return self._digest(hashes.MD5(), password)

    def sha1(self, password: str) -> str:
        return self._digest(hashes.SHA1(), password)

    def sha224(self, password: str) -> str:
        return self._digest(hashes.SHA224(), password)

    def sha256(self, password: str) -> str:
        return self._digest(hashes.SHA256(), password)

    def sha384(self, password: str) -> str:
        return self._digest(hashes.SHA384(), password)

    def sha512(self, password: str) -> str:
        return self._digest(hashes.SHA512(), password)

    def bcrypt(self, password: str, rounds: int) -> str:
        if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
            raise HashingError(
                f"BCrypt rounds must be between {MIN_BCRYPT_ROUNDS} "
                f"and {MAX_BCRYPT_ROUNDS}, got {rounds}"
            )
        secret = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
        try:
            value = bcrypt_lib.hashpw(secret, bcrypt_lib.gensalt(rounds)).decode('utf-8')
        except ValueError as e:
            app_logger.log_hash("bcrypt", False)
            raise HashingError(f"bcrypt failed: {str(e)}") from e
        app_logger.log_hash("bcrypt", True)
        return value

    def base64(self, password: str) -> str:
        return base64.b64encode(password.encode('utf-8')).decode('utf-8')
