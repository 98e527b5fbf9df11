"""
Password analysis panel: structure, score, strength label and crack time.
"""

from typing import Optional

from .backend import AnalyzedResult, Backend
from .crack_time import estimate_crack_time
from .errors import AnalysisError
from .logger import app_logger


def strength_label(score: float) -> str:
    """Map a 0-100 score to its strength label, empty when out of range."""
    if 0 <= score < 20:
        return "VERY DANGEROUS"
    elif 20 <= score < 40:
        return "DANGEROUS"
    elif 40 <= score < 60:
        return "VERY WEAK"
    elif 60 <= score < 80:
        return "WEAK"
    elif 80 <= score < 90:
        return "GOOD"
    elif 90 <= score < 95:
        return "STRONG"
    elif 95 <= score < 99:
        return "VERY STRONG"
    elif 99 <= score <= 100:
        return "INVULNERABLE"
    return ""


def strength_color(score: float) -> Optional[str]:
    """Badge color for a score."""
    if 0 <= score < 40:
        return "red"
    elif 40 <= score < 60:
        return "orange"
    elif 60 <= score < 80:
        return "yellow"
    elif 80 <= score <= 100:
        return "green"
    return None


class PasswordAnalyzer:
    """Combine the backend's analysis and score with a local crack time."""

    def __init__(self, backend: Backend):
        self.backend = backend

    def analyze(self, password: str) -> Optional[AnalyzedResult]:
        """Analyze a password, ``None`` for an empty one.

        The score comes from the backend and the crack time from
        ``estimate_crack_time``; the two are computed independently and
        may disagree.
        """
        if not password:
            return None

        result = self.backend.analyze(password)
        if not isinstance(result, AnalyzedResult):
            raise AnalysisError(f"Backend returned {type(result).__name__}, expected AnalyzedResult")

        result.score = self.backend.score(password)
        result.crack_times = estimate_crack_time(password)
        app_logger.log_analysis(result.length, result.score)
        return result
