#backend\diagram_studio\analyzer\strength.py

from typing import Any, List

from diagram_studio.analyzer.messages import MessageKey, message
from diagram_studio.analyzer.types import (
    StrengthBreakdown,
    StrengthLevel,
    StrengthVerdict,
    FOCUSED_THRESHOLD,
    level_for_score,
)
from diagram_studio.language import Language, resolve_language
from diagram_studio.patterns import RuleCategory, get_pattern_registry


# ============================================================
# Sub-score limits and diagnostic thresholds
# ============================================================

KEYWORD_MAX = 30
CONSTRAINT_MAX = 20
VAGUE_MAX = 20

DETAIL_MIN_CHARS = 80
CLEAR_TERMS_MIN = 18
CONSTRAINTS_REASON_MIN = 10
CONSTRAINTS_SUGGEST_BELOW = 8
STRUCTURE_SUGGEST_BELOW = 10

# (upper bound exclusive, points); sweet spot is 120-260 characters
LENGTH_BUCKETS = (
    (40, 10),
    (80, 25),
    (120, 40),
    (260, 60),
    (380, 55),
)
LENGTH_OVERFLOW_SCORE = 45

LEVEL_LABELS = {
    StrengthLevel.EXPLORATORY: MessageKey.LABEL_EXPLORATORY,
    StrengthLevel.FOCUSED: MessageKey.LABEL_FOCUSED,
    StrengthLevel.PRECISE: MessageKey.LABEL_PRECISE,
}

LEVEL_HINTS = {
    StrengthLevel.EXPLORATORY: MessageKey.HINT_EXPLORATORY,
    StrengthLevel.FOCUSED: MessageKey.HINT_FOCUSED,
    StrengthLevel.PRECISE: MessageKey.HINT_PRECISE,
}


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _as_text(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw if isinstance(raw, str) else str(raw)


# ============================================================
# Sub-scores
# ============================================================

def length_score(text: str) -> int:
    length = len(text)
    for upper, points in LENGTH_BUCKETS:
        if length < upper:
            return points
    return LENGTH_OVERFLOW_SCORE


def structure_score(text: str) -> int:
    return get_pattern_registry().points(RuleCategory.STRUCTURE, text)


def keyword_score(text: str) -> int:
    return _clamp(get_pattern_registry().points(RuleCategory.KEYWORD, text), 0, KEYWORD_MAX)


def constraints_score(text: str) -> int:
    return _clamp(get_pattern_registry().points(RuleCategory.CONSTRAINT, text), 0, CONSTRAINT_MAX)


def vague_penalty(text: str) -> int:
    return _clamp(get_pattern_registry().points(RuleCategory.VAGUE, text), 0, VAGUE_MAX)


def score_components(raw: Any) -> StrengthBreakdown:
    """Compute every sub-score of a prompt on its trimmed text"""
    text = _as_text(raw).strip()
    if not text:
        return StrengthBreakdown()

    return StrengthBreakdown(
        length=length_score(text),
        structure=structure_score(text),
        keywords=keyword_score(text),
        constraints=constraints_score(text),
        vague_penalty=vague_penalty(text),
        char_count=len(text),
    )


# ============================================================
# Verdict
# ============================================================

def _reasons(breakdown: StrengthBreakdown, language: Language) -> List[str]:
    keys = [
        MessageKey.REASON_ENOUGH_DETAIL
        if breakdown.char_count >= DETAIL_MIN_CHARS
        else MessageKey.REASON_LITTLE_DETAIL,
        MessageKey.REASON_CLEAR_TERMS
        if breakdown.keywords >= CLEAR_TERMS_MIN
        else MessageKey.REASON_FEW_TERMS,
        MessageKey.REASON_HAS_CONSTRAINTS
        if breakdown.constraints >= CONSTRAINTS_REASON_MIN
        else MessageKey.REASON_FEW_CONSTRAINTS,
    ]
    if breakdown.vague_penalty > 0:
        keys.append(MessageKey.REASON_VAGUE_WORDS)
    return [message(key, language) for key in keys]


def _suggestions(breakdown: StrengthBreakdown, language: Language) -> List[str]:
    keys = []
    if breakdown.total < FOCUSED_THRESHOLD:
        keys.append(MessageKey.SUGGEST_TYPE_AND_RELATIONS)
    if breakdown.constraints < CONSTRAINTS_SUGGEST_BELOW:
        keys.append(MessageKey.SUGGEST_HARD_CONSTRAINTS)
    if breakdown.structure < STRUCTURE_SUGGEST_BELOW:
        keys.append(MessageKey.SUGGEST_GROUPING)
    return [message(key, language) for key in keys]


def analyze_prompt_strength(raw: Any, language: Any = None) -> StrengthVerdict:
    """
    Score how specific and controllable a diagram prompt is.

    Pure and total: any input, including None or non-text values,
    yields a verdict. All strings of one verdict share one language.
    """
    lang = resolve_language(language)
    text = _as_text(raw).strip()

    if not text:
        return StrengthVerdict(
            score=0,
            level=StrengthLevel.EXPLORATORY,
            label=message(MessageKey.LABEL_EMPTY, lang),
            reasons=(message(MessageKey.REASON_EMPTY, lang),),
            suggestions=(message(MessageKey.SUGGEST_START, lang),),
        )

    breakdown = score_components(text)
    score = breakdown.total
    level = level_for_score(score)

    return StrengthVerdict(
        score=score,
        level=level,
        label=message(LEVEL_LABELS[level], lang),
        reasons=tuple(_reasons(breakdown, lang)),
        suggestions=tuple(_suggestions(breakdown, lang)),
    )


def level_hint(level: StrengthLevel, language: Any = None) -> str:
    """One-line explanation shown next to a level"""
    return message(LEVEL_HINTS[level], language)


def next_suggestion(verdict: StrengthVerdict, language: Any = None) -> str:
    """First actionable suggestion, or a confirmation when there is none"""
    if verdict.suggestions:
        return verdict.suggestions[0]
    return message(MessageKey.SOLID_PROMPT, language)


def is_strong_enough(verdict: StrengthVerdict, minimum: int) -> bool:
    return verdict.score >= minimum
