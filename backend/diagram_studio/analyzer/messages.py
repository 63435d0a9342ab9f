# backend/diagram_studio/analyzer/messages.py
"""
Bilingual message table for strength verdicts.

Scoring never reads this table; it only decides which keys to emit.
Adding a language means adding a column here.
"""

from enum import Enum
from typing import Dict

from diagram_studio.language import Language, resolve_language


class MessageKey(Enum):
    # labels
    LABEL_EMPTY = "label_empty"
    LABEL_EXPLORATORY = "label_exploratory"
    LABEL_FOCUSED = "label_focused"
    LABEL_PRECISE = "label_precise"

    # empty prompt
    REASON_EMPTY = "reason_empty"
    SUGGEST_START = "suggest_start"

    # reasons
    REASON_ENOUGH_DETAIL = "reason_enough_detail"
    REASON_LITTLE_DETAIL = "reason_little_detail"
    REASON_CLEAR_TERMS = "reason_clear_terms"
    REASON_FEW_TERMS = "reason_few_terms"
    REASON_HAS_CONSTRAINTS = "reason_has_constraints"
    REASON_FEW_CONSTRAINTS = "reason_few_constraints"
    REASON_VAGUE_WORDS = "reason_vague_words"

    # suggestions
    SUGGEST_TYPE_AND_RELATIONS = "suggest_type_and_relations"
    SUGGEST_HARD_CONSTRAINTS = "suggest_hard_constraints"
    SUGGEST_GROUPING = "suggest_grouping"

    # level hints
    HINT_EXPLORATORY = "hint_exploratory"
    HINT_FOCUSED = "hint_focused"
    HINT_PRECISE = "hint_precise"
    SOLID_PROMPT = "solid_prompt"


MESSAGES: Dict[MessageKey, Dict[Language, str]] = {
    MessageKey.LABEL_EMPTY: {
        Language.EN: "Empty",
        Language.ZH: "未输入",
    },
    MessageKey.LABEL_EXPLORATORY: {
        Language.EN: "Exploratory",
        Language.ZH: "探索 Exploratory",
    },
    MessageKey.LABEL_FOCUSED: {
        Language.EN: "Focused",
        Language.ZH: "聚焦 Focused",
    },
    MessageKey.LABEL_PRECISE: {
        Language.EN: "Precise",
        Language.ZH: "精确 Precise",
    },
    MessageKey.REASON_EMPTY: {
        Language.EN: "No prompt yet",
        Language.ZH: "还没有输入 prompt",
    },
    MessageKey.SUGGEST_START: {
        Language.EN: "Start with: subject + diagram type + relationships (zoning / circulation / hierarchy).",
        Language.ZH: "先写：对象 + 图类型 + 你想表达的关系（例如：公共/私密、动线、层级）",
    },
    MessageKey.REASON_ENOUGH_DETAIL: {
        Language.EN: "Enough detail",
        Language.ZH: "信息量足够",
    },
    MessageKey.REASON_LITTLE_DETAIL: {
        Language.EN: "Too little detail",
        Language.ZH: "信息量偏少",
    },
    MessageKey.REASON_CLEAR_TERMS: {
        Language.EN: "Clear diagram / architecture terms",
        Language.ZH: "包含明确的图像语言/建筑术语",
    },
    MessageKey.REASON_FEW_TERMS: {
        Language.EN: "Few diagram terms (a bit vague)",
        Language.ZH: "术语较少，表达偏泛",
    },
    MessageKey.REASON_HAS_CONSTRAINTS: {
        Language.EN: "Has constraints / categories (more controllable)",
        Language.ZH: "有约束/层级/分类（更可控）",
    },
    MessageKey.REASON_FEW_CONSTRAINTS: {
        Language.EN: "Few constraints (model may drift)",
        Language.ZH: "约束少，AI 更容易跑偏",
    },
    MessageKey.REASON_VAGUE_WORDS: {
        Language.EN: "Contains vague words (reduces control)",
        Language.ZH: "存在模糊词（会降低可控性）",
    },
    MessageKey.SUGGEST_TYPE_AND_RELATIONS: {
        Language.EN: "Add: diagram type (massing/circulation/zoning) + relationships (public vs private / loop).",
        Language.ZH: "补齐：图类型（massing/circulation/zoning）+ 你要表达的关系（比如 public vs private / loop）",
    },
    MessageKey.SUGGEST_HARD_CONSTRAINTS: {
        Language.EN: "Add 1–2 hard constraints: e.g., 3 zones, 2 main paths, label key nodes, minimal text.",
        Language.ZH: "加 1-2 个硬约束：比如 3 个分区、2 条主路径、标注关键节点、最少文字",
    },
    MessageKey.SUGGEST_GROUPING: {
        Language.EN: "Group with commas/line breaks: goal / relationships / style / annotations.",
        Language.ZH: "用逗号或换行把信息分组（更稳定）：目标 / 关系 / 风格 / 标注",
    },
    MessageKey.HINT_EXPLORATORY: {
        Language.EN: "Currently exploratory. Add constraints for more stable results.",
        Language.ZH: "当前偏探索，建议加约束让结果更稳定。",
    },
    MessageKey.HINT_FOCUSED: {
        Language.EN: "Focused, good to generate. Add 1–2 constraints for more control.",
        Language.ZH: "已比较聚焦，可以生成；再加一两条约束会更可控。",
    },
    MessageKey.HINT_PRECISE: {
        Language.EN: "Precise, highly controllable.",
        Language.ZH: "很精确，生成会更可控。",
    },
    MessageKey.SOLID_PROMPT: {
        Language.EN: "Looks solid and controllable.",
        Language.ZH: "很好，已经比较可控了。",
    },
}


def message(key: MessageKey, language=None) -> str:
    """Look up one message; unknown languages use the configured default"""
    return MESSAGES[key][resolve_language(language)]
