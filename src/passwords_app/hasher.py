"""
Hashing panel.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from .backend import Backend
from .errors import HashingError

SHA_BITS = (1, 224, 256, 384, 512)


@dataclass
class HashDigests:
    """All digests of one input string."""
    md5: str = ""
    base64: str = ""
    bcrypt: str = ""
    sha1: str = ""
    sha224: str = ""
    sha256: str = ""
    sha384: str = ""
    sha512: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class Hasher:
    """Compute digests through the backend."""

    def __init__(self, backend: Backend):
        self.backend = backend

    def md5(self, text: str, uppercase: bool = False) -> str:
        value = self.backend.md5(text)
        return value.upper() if uppercase else value

    def sha(self, text: str, bits: int) -> str:
        """SHA digest by size; 1 selects SHA-1."""
        try:
            bits = int(bits)
        except (TypeError, ValueError):
            raise HashingError(f"Unsupported SHA type: {bits!r}")
        if bits not in SHA_BITS:
            raise HashingError(f"Unsupported SHA type: {bits}")
        return getattr(self.backend, f"sha{bits}")(text)

    def bcrypt(self, text: str, rounds: int = 10) -> str:
        if not text:
            return ""
        return self.backend.bcrypt(text, rounds)

    def digest_all(self, text: str, bcrypt_rounds: int = 10, md5_uppercase: bool = False) -> HashDigests:
        """Every digest of ``text``; empty input gives empty digests."""
        if not text:
            return HashDigests()

        return HashDigests(
            md5=self.md5(text, uppercase=md5_uppercase),
            base64=self.backend.base64(text),
            bcrypt=self.backend.bcrypt(text, bcrypt_rounds),
            sha1=self.backend.sha1(text),
            sha224=self.backend.sha224(text),
            sha256=self.backend.sha256(text),
            sha384=self.backend.sha384(text),
            sha512=self.backend.sha512(text),
        )
