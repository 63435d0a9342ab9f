"""
Diagram prompt studio.

Scores architectural diagram prompts and compiles them into structured
instructions for an image-generation model.
"""

from diagram_studio.analyzer import StrengthLevel, StrengthVerdict, analyze_prompt_strength
from diagram_studio.compiler import (
    CompilerConfig,
    build_diagram_prompt,
    build_explanation_prompt,
    get_intent_presets,
)
from diagram_studio.language import Language

__all__ = [
    "StrengthLevel",
    "StrengthVerdict",
    "analyze_prompt_strength",
    "CompilerConfig",
    "build_diagram_prompt",
    "build_explanation_prompt",
    "get_intent_presets",
    "Language",
]
