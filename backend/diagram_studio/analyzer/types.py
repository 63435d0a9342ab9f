from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class StrengthLevel(Enum):
    EXPLORATORY = "exploratory"
    FOCUSED = "focused"
    PRECISE = "precise"


PRECISE_THRESHOLD = 70
FOCUSED_THRESHOLD = 40


def level_for_score(score: int) -> StrengthLevel:
    if score >= PRECISE_THRESHOLD:
        return StrengthLevel.PRECISE
    if score >= FOCUSED_THRESHOLD:
        return StrengthLevel.FOCUSED
    return StrengthLevel.EXPLORATORY


@dataclass(frozen=True)
class StrengthBreakdown:
    """Independent sub-scores of one prompt"""
    length: int = 0
    structure: int = 0
    keywords: int = 0
    constraints: int = 0
    vague_penalty: int = 0
    char_count: int = 0

    @property
    def total(self) -> int:
        raw = self.length + self.structure + self.keywords + self.constraints - self.vague_penalty
        return max(0, min(100, round(raw)))

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "structure": self.structure,
            "keywords": self.keywords,
            "constraints": self.constraints,
            "vague_penalty": self.vague_penalty,
            "char_count": self.char_count,
            "total": self.total,
        }


@dataclass(frozen=True)
class StrengthVerdict:
    score: int
    level: StrengthLevel
    label: str
    reasons: Tuple[str, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level.value,
            "label": self.label,
            "reasons": list(self.reasons),
            "suggestions": list(self.suggestions),
        }
