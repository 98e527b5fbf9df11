"""
Password generation panel: random passwords, memorable word lists and PINs.
"""

from dataclasses import dataclass
from typing import List, Optional

from .analyzer import strength_color, strength_label
from .backend import Backend, Complexity
from .config import Config
from .crack_time import estimate_crack_time


@dataclass
class MemorableOptions:
    """How generated words are cased and joined."""
    length: int = 4
    full_words: bool = True
    capitalize: bool = False
    uppercase: bool = False
    separator: str = "-"


@dataclass
class GeneratedPassword:
    """A random password with its score and crack time."""
    password: str
    score: float
    strength: str
    color: Optional[str]
    crack_time: str


def join_words(words: List[str], options: MemorableOptions) -> str:
    """Case the words and join them; an empty separator joins with a space."""
    if options.uppercase:
        words = [w.upper() for w in words]
    elif options.capitalize:
        words = [w[:1].upper() + w[1:] for w in words]
    separator = options.separator if options.separator != "" else " "
    return separator.join(words)


class PasswordGenerator:
    """Front end over the backend's generators, defaults from ``Config``."""

    def __init__(self, backend: Backend, config: Optional[Config] = None):
        self.backend = backend
        self.config = config or Config()

    def default_complexity(self) -> Complexity:
        return Complexity(
            length=self.config.get("random_length"),
            symbols=self.config.get("random_symbols"),
            numbers=self.config.get("random_numbers"),
            uppercase=self.config.get("random_uppercase"),
            lowercase=True,
            spaces=False,
            exclude_similar_characters=self.config.get("random_exclude_similar_characters"),
            strict=self.config.get("random_strict"),
        )

    def default_memorable(self) -> MemorableOptions:
        return MemorableOptions(
            length=self.config.get("memorable_length"),
            full_words=self.config.get("memorable_full_words"),
            capitalize=self.config.get("memorable_capitalize"),
            uppercase=self.config.get("memorable_uppercase"),
            separator=self.config.get("memorable_separator"),
        )

    def random(self, complexity: Optional[Complexity] = None) -> GeneratedPassword:
        complexity = complexity or self.default_complexity()
        password = self.backend.generate_password(complexity)
        score = self.backend.score(password)
        return GeneratedPassword(
            password=password,
            score=score,
            strength=strength_label(score),
            color=strength_color(score),
            crack_time=estimate_crack_time(password),
        )

    def memorable(self, options: Optional[MemorableOptions] = None) -> str:
        options = options or self.default_memorable()
        words = self.backend.generate_words(options.length, options.full_words)
        return join_words(words, options)

    def pin(self, length: Optional[int] = None) -> str:
        if length is None:
            length = self.config.get("pin_length")
        return self.backend.generate_pin(length)
