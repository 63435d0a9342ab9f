"""
Prompt Strength Analyzer

Rule-based scoring of diagram prompts into a level, reasons and
suggestions.
"""

from diagram_studio.analyzer.types import (
    StrengthBreakdown,
    StrengthLevel,
    StrengthVerdict,
    level_for_score,
)
from diagram_studio.analyzer.strength import (
    analyze_prompt_strength,
    is_strong_enough,
    level_hint,
    next_suggestion,
    score_components,
)
from diagram_studio.analyzer.messages import MESSAGES, MessageKey, message

__all__ = [
    "StrengthBreakdown",
    "StrengthLevel",
    "StrengthVerdict",
    "level_for_score",
    "analyze_prompt_strength",
    "is_strong_enough",
    "level_hint",
    "next_suggestion",
    "score_components",
    "MESSAGES",
    "MessageKey",
    "message",
]
