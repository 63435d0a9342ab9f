#backend\diagram_studio\compiler\compiler.py

from typing import Any, Callable, List, Mapping, Union

from diagram_studio.compiler import blocks
from diagram_studio.compiler.types import CompilerConfig


BLOCK_SEPARATOR = "\n\n"

Block = Callable[[CompilerConfig], str]


# ============================================================
# Block functions
# Each reads only the config; none reads another block's output.
# ============================================================

def system_role(config: CompilerConfig) -> str:
    return blocks.SYSTEM_ROLE


def quality_statement(config: CompilerConfig) -> str:
    return blocks.QUALITY_BLOCKS[config.quality]


def rendering_constraints(config: CompilerConfig) -> str:
    return blocks.rendering_block(config.style, config.quality)


def composition_constraints(config: CompilerConfig) -> str:
    return blocks.COMPOSITION_BLOCKS[config.quality]


def diagram_grammar(config: CompilerConfig) -> str:
    return blocks.DIAGRAM_GRAMMAR


def preset_description(config: CompilerConfig) -> str:
    return blocks.preset_block(config.preset)


def emphasis_override(config: CompilerConfig) -> str:
    return blocks.emphasis_block(config.emphasis)


def intent_focus(config: CompilerConfig) -> str:
    if not config.intent:
        return ""
    return f"{blocks.INTENT_HEADER}\n- {config.intent}"


def user_request(config: CompilerConfig) -> str:
    text = (config.user_prompt or "").strip()
    return f"{blocks.USER_REQUEST_HEADER}\n{text or blocks.USER_REQUEST_PLACEHOLDER}"


def output_reminder(config: CompilerConfig) -> str:
    return blocks.OUTPUT_REMINDER


# More specific instructions sit closer to the end.
BLOCK_SEQUENCE: List[Block] = [
    system_role,
    quality_statement,
    rendering_constraints,
    composition_constraints,
    diagram_grammar,
    preset_description,
    emphasis_override,
    intent_focus,
    user_request,
    output_reminder,
]


def _as_config(config: Union[CompilerConfig, Mapping[str, Any]]) -> CompilerConfig:
    if isinstance(config, CompilerConfig):
        return config
    return CompilerConfig.from_dict(config)


def compile_blocks(config: CompilerConfig) -> List[str]:
    """Evaluate the block sequence and keep the non-empty blocks in order"""
    rendered = (block(config) for block in BLOCK_SEQUENCE)
    return [text for text in rendered if text]


def build_diagram_prompt(config: Union[CompilerConfig, Mapping[str, Any]]) -> str:
    """
    Build the final instruction string sent to the image model.

    Accepts a CompilerConfig or a plain mapping of its fields; unknown
    enum values fall back to their defaults, so this never fails.
    """
    return BLOCK_SEPARATOR.join(compile_blocks(_as_config(config))).strip()
