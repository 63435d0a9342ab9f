# backend/diagram_studio/patterns/__init__.py
"""
Prompt Pattern Library

Static rule groups used to detect structure, diagram vocabulary,
explicit constraints and vague wording in prompt text.
"""

from diagram_studio.patterns.registry import (
    RuleCategory,
    RuleGroup,
    PatternRegistry,
    compile_rules,
    get_pattern_registry,
)
from diagram_studio.patterns.catalog import (
    KEYWORD_WEIGHT,
    RULE_CATALOG,
    VAGUE_WEIGHT,
    register_all_rule_groups,
)

__all__ = [
    "RuleCategory",
    "RuleGroup",
    "PatternRegistry",
    "compile_rules",
    "get_pattern_registry",
    "KEYWORD_WEIGHT",
    "RULE_CATALOG",
    "VAGUE_WEIGHT",
    "register_all_rule_groups",
]
