"""
Passwords: a password generator, hasher and analyzer with a brute-force
crack time estimator.
"""

from .crack_time import CharacterClass, classify, estimate_crack_time
from .backend import AnalyzedResult, Backend, Complexity, LocalBackend
from .generator import GeneratedPassword, MemorableOptions, PasswordGenerator
from .hasher import HashDigests, Hasher
from .analyzer import PasswordAnalyzer, strength_color, strength_label

__version__ = "1.0.0"
