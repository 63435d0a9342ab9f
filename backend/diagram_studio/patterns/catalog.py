# backend/diagram_studio/patterns/catalog.py
"""
Pattern Catalog - Rule groups used to score prompt strength

Contains the structure, keyword, constraint and vagueness rule groups.
Every group is counted per occurrence; keyword and vagueness groups are
case-insensitive where the vocabulary is Latin.
"""

import re

from diagram_studio.patterns.registry import (
    PatternRegistry,
    RuleCategory,
    RuleGroup,
    compile_rules,
)


KEYWORD_WEIGHT = 6
VAGUE_WEIGHT = 8


# ============================================================
# STRUCTURE GROUPS
# ============================================================

PUNCTUATION_GROUP = RuleGroup(
    id="punctuation",
    name="Separator punctuation",
    category=RuleCategory.STRUCTURE,
    patterns=compile_rules(r"[,:;，。；：]"),
    weight=10,
    description="Commas, colons and semicolons in Latin or CJK forms.",
)

LINE_BREAK_GROUP = RuleGroup(
    id="line_break",
    name="Line breaks",
    category=RuleCategory.STRUCTURE,
    patterns=compile_rules(r"\n"),
    weight=8,
    description="Text spread over more than one line.",
)

BULLET_GROUP = RuleGroup(
    id="bullets",
    name="Bulleted list",
    category=RuleCategory.STRUCTURE,
    patterns=compile_rules(r"(?:^|\n)\s*[-•*]\s+"),
    weight=10,
    description="A line starting with -, • or * followed by whitespace.",
)


# ============================================================
# KEYWORD GROUPS
# ============================================================

DIAGRAM_TYPE_GROUP = RuleGroup(
    id="diagram_types",
    name="Diagram type vocabulary",
    category=RuleCategory.KEYWORD,
    patterns=compile_rules(
        r"massing|volume|zoning|program|circulation|section|axonometric|isometric|plan|diagram|hierarchy",
        flags=re.IGNORECASE,
    ),
    weight=KEYWORD_WEIGHT,
)

VISUAL_LANGUAGE_GROUP = RuleGroup(
    id="visual_language",
    name="Visual language vocabulary",
    category=RuleCategory.KEYWORD,
    patterns=compile_rules(
        r"line\s*weight|contrast|monochrome|black\s*and\s*white|minimal|bold|RGB|grid|layer",
        flags=re.IGNORECASE,
    ),
    weight=KEYWORD_WEIGHT,
)

RELATIONSHIP_GROUP = RuleGroup(
    id="relationships",
    name="Spatial relationship vocabulary",
    category=RuleCategory.KEYWORD,
    patterns=compile_rules(
        r"public|private|adjacen|sequence|node|threshold|entry|core|vertical|loop|arrow|label",
        flags=re.IGNORECASE,
    ),
    weight=KEYWORD_WEIGHT,
)

OUTPUT_DIRECTIVE_GROUP = RuleGroup(
    id="output_directives",
    name="Output directive verbs",
    category=RuleCategory.KEYWORD,
    patterns=compile_rules(
        r"show|annotate|label|highlight|emphasize|clarify|reduce|simplify",
        flags=re.IGNORECASE,
    ),
    weight=KEYWORD_WEIGHT,
)

CJK_TERM_GROUP = RuleGroup(
    id="cjk_terms",
    name="Chinese diagram vocabulary",
    category=RuleCategory.KEYWORD,
    patterns=compile_rules(
        r"体量|分区|功能|动线|剖面|轴测|平面|层级|关系|公共|私密|入口|核心|节点|标注|箭头|线稿|黑白|对比|网格|图层",
    ),
    weight=KEYWORD_WEIGHT,
)


# ============================================================
# CONSTRAINT GROUPS
# ============================================================

NUMBER_GROUP = RuleGroup(
    id="numbers",
    name="Numeric tokens",
    category=RuleCategory.CONSTRAINT,
    patterns=compile_rules(r"[0-9]+"),
    weight=4,
    description="Explicit counts such as '3 zones' or '2 main paths'.",
)

ROLE_ENUMERATION_GROUP = RuleGroup(
    id="role_enumeration",
    name="Role enumeration words",
    category=RuleCategory.CONSTRAINT,
    patterns=compile_rules(r"\b(?:public|private|service|staff|guest)\b", flags=re.IGNORECASE),
    weight=2,
)

SEPARATOR_GROUP = RuleGroup(
    id="separators",
    name="Category separators",
    category=RuleCategory.CONSTRAINT,
    patterns=compile_rules(r"[/|]"),
    weight=1,
    description="Slashes and pipes used to list categories.",
)


# ============================================================
# VAGUENESS GROUPS
# ============================================================

VAGUE_EN_GROUP = RuleGroup(
    id="vague_en",
    name="Empty compliments",
    category=RuleCategory.VAGUE,
    patterns=compile_rules(
        r"nice|cool|beautiful|awesome|good|make it better|random",
        flags=re.IGNORECASE,
    ),
    weight=VAGUE_WEIGHT,
)

VAGUE_ZH_GROUP = RuleGroup(
    id="vague_zh",
    name="Empty compliments (Chinese)",
    category=RuleCategory.VAGUE,
    patterns=compile_rules(r"随便|好看|高级感|酷一点|优化一下|更好一点"),
    weight=VAGUE_WEIGHT,
)


# ============================================================
# CATALOG
# ============================================================

RULE_CATALOG = [
    # Structure
    PUNCTUATION_GROUP,
    LINE_BREAK_GROUP,
    BULLET_GROUP,
    # Keywords
    DIAGRAM_TYPE_GROUP,
    VISUAL_LANGUAGE_GROUP,
    RELATIONSHIP_GROUP,
    OUTPUT_DIRECTIVE_GROUP,
    CJK_TERM_GROUP,
    # Constraints
    NUMBER_GROUP,
    ROLE_ENUMERATION_GROUP,
    SEPARATOR_GROUP,
    # Vagueness
    VAGUE_EN_GROUP,
    VAGUE_ZH_GROUP,
]


def register_all_rule_groups(registry: PatternRegistry) -> None:
    """Register all catalog rule groups with the registry"""
    for group in RULE_CATALOG:
        registry.register(group)
    print(f"[PATTERN CATALOG] Registered {len(RULE_CATALOG)} rule groups")
