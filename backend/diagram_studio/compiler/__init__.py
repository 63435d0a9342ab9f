from diagram_studio.compiler.types import (
    CompilerConfig,
    EmphasisType,
    PresetType,
    QualityMode,
    StyleType,
    coerce_enum,
)
from diagram_studio.compiler.compiler import (
    BLOCK_SEQUENCE,
    build_diagram_prompt,
    compile_blocks,
)
from diagram_studio.compiler.intents import GENERIC_INTENTS, INTENT_PRESETS, get_intent_presets
from diagram_studio.compiler.explanation import build_explanation_prompt

__all__ = [
    "CompilerConfig",
    "EmphasisType",
    "PresetType",
    "QualityMode",
    "StyleType",
    "coerce_enum",
    "BLOCK_SEQUENCE",
    "build_diagram_prompt",
    "compile_blocks",
    "GENERIC_INTENTS",
    "INTENT_PRESETS",
    "get_intent_presets",
    "build_explanation_prompt",
]
