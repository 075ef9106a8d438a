"""
Penalty-based scoring shared by all content validators.

Every validator starts from a perfect score of 100 and subtracts a fixed
penalty per finding. Errors invalidate the page, warnings only lower the
score. The result is always clamped to the 0-100 range.
"""

import math
from dataclasses import dataclass, field, asdict

MAX_SCORE = 100
MIN_SCORE = 0

# Score bands used when summarizing many pages
SCORE_BANDS = {
    "excellent": 90,
    "good": 70,
    "needs_improvement": 50,
    "poor": 0,
}


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    score: int = MAX_SCORE

    @property
    def has_issues(self) -> bool:
        return bool(self.warnings or self.errors)

    def to_dict(self) -> dict:
        return asdict(self)


class ScoreCard:
    """Collects findings for one validator run and produces its result."""

    def __init__(self):
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.penalty = 0

    def warn(self, message: str, penalty: int) -> None:
        self.warnings.append(message)
        self.penalty += penalty

    def error(self, message: str, penalty: int) -> None:
        self.errors.append(message)
        self.penalty += penalty

    @property
    def score(self) -> int:
        return clamp_score(MAX_SCORE - self.penalty)

    def result(self) -> ValidationResult:
        return ValidationResult(
            is_valid=len(self.errors) == 0,
            warnings=list(self.warnings),
            errors=list(self.errors),
            score=self.score,
        )


def clamp_score(score: float) -> int:
    """Clamp a raw score into [0, 100]."""
    return int(max(MIN_SCORE, min(MAX_SCORE, score)))


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() would use banker's rounding)."""
    return int(math.floor(value + 0.5))


def average_score(scores: list[int]) -> int:
    """Unweighted mean of component scores, rounded half up."""
    if not scores:
        return 0
    return clamp_score(round_half_up(sum(scores) / len(scores)))


def score_band(score: int) -> str:
    """Classify a score into excellent / good / needs_improvement / poor."""
    for band, threshold in SCORE_BANDS.items():
        if score >= threshold:
            return band
    return "poor"
