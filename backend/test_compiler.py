"""
Diagram prompt compiler verification
Run with: pytest backend/test_compiler.py
"""

import pytest

from diagram_studio.compiler import (
    BLOCK_SEQUENCE,
    CompilerConfig,
    EmphasisType,
    PresetType,
    QualityMode,
    StyleType,
    build_diagram_prompt,
    build_explanation_prompt,
    compile_blocks,
)
from diagram_studio.compiler import blocks


BALANCED_ARROWS = "Balanced: volumes + relationships (and arrows only if relevant)"


def _zoning_prompt(**overrides):
    values = dict(
        user_prompt="3 zones around a courtyard",
        preset="zoning",
        style="minimal",
        emphasis="all",
        quality="portfolio",
    )
    values.update(overrides)
    return build_diagram_prompt(CompilerConfig.from_values(**values))


def test_zoning_example_block_order():
    prompt = _zoning_prompt()

    markers = [
        "You are an architectural diagram generator",
        "Mode: PORTFOLIO",
        "Linework style:",
        "Portfolio polish:",
        "Diagram type: PROGRAM ZONING",
        BALANCED_ARROWS,
        "3 zones around a courtyard",
        "Output requirements:",
    ]
    positions = [prompt.find(marker) for marker in markers]
    print(f"  Marker positions: {positions}")
    assert all(pos >= 0 for pos in positions)
    assert positions == sorted(positions)


def test_blocks_are_separated_by_one_blank_line():
    prompt = _zoning_prompt(intent="Public vs private zoning separation")
    assert prompt == prompt.strip()
    assert "\n\n\n" not in prompt
    assert prompt.startswith(blocks.SYSTEM_ROLE)
    assert prompt.endswith("- Diagrammatic clarity above all")


def test_user_prompt_is_trimmed_and_echoed():
    prompt = _zoning_prompt(user_prompt="   3 zones around a courtyard \n ")
    assert "Design description from user:\n3 zones around a courtyard\n" in prompt


@pytest.mark.parametrize("user_prompt", ["", "   ", None])
def test_empty_user_prompt_uses_placeholder(user_prompt):
    prompt = build_diagram_prompt(CompilerConfig.from_values(user_prompt=user_prompt))
    assert prompt
    assert "Design description from user:\n(no additional input)" in prompt


def test_massing_emphasis_replaces_balanced_block():
    balanced = _zoning_prompt(emphasis="all")
    massing = _zoning_prompt(emphasis="massing")

    assert BALANCED_ARROWS in balanced
    assert BALANCED_ARROWS not in massing
    assert "- MASSING ONLY\n- No arrows" in massing


@pytest.mark.parametrize("emphasis", list(EmphasisType))
def test_exactly_one_emphasis_block(emphasis):
    prompt = _zoning_prompt(emphasis=emphasis.value)
    present = [e for e, text in blocks.EMPHASIS_BLOCKS.items() if text in prompt]
    assert present == [emphasis]


def test_draft_quality_drops_polish():
    prompt = _zoning_prompt(quality="draft")
    assert "Mode: DRAFT" in prompt
    assert "Portfolio polish:" not in prompt
    assert blocks.COMPOSITION_BLOCKS[QualityMode.DRAFT] in prompt
    assert blocks.COMPOSITION_BLOCKS[QualityMode.PORTFOLIO] not in prompt


def test_bold_style_swaps_linework_for_colour():
    prompt = _zoning_prompt(style="bold")
    assert "Color style:" in prompt
    assert "Linework style:" not in prompt
    assert blocks.RENDERING_COMMON in prompt


@pytest.mark.parametrize("preset", list(PresetType))
def test_each_preset_selects_its_block(preset):
    prompt = build_diagram_prompt(CompilerConfig(user_prompt="x", preset=preset))
    assert blocks.PRESET_BLOCKS[preset] in prompt
    assert blocks.GENERIC_PRESET_BLOCK not in prompt


def test_unknown_values_fall_back_to_defaults():
    defaults = build_diagram_prompt(CompilerConfig(user_prompt="library"))
    odd = build_diagram_prompt({
        "userPrompt": "library",
        "preset": "castle",
        "style": "neon",
        "emphasis": "everything",
        "quality": "ultra",
    })
    assert odd == defaults
    assert blocks.GENERIC_PRESET_BLOCK in defaults


def test_mapping_and_config_inputs_agree():
    config = CompilerConfig(
        user_prompt="museum loop",
        preset=PresetType.CIRCULATION,
        style=StyleType.BOLD,
        emphasis=EmphasisType.CIRCULATION,
        quality=QualityMode.DRAFT,
    )
    assert build_diagram_prompt(config) == build_diagram_prompt(config.to_dict())
    assert build_diagram_prompt(config) == build_diagram_prompt({
        "prompt": "museum loop",
        "preset": "Circulation",
        "style": "BOLD",
        "emphasis": "circulation",
        "quality": "draft",
    })


def test_intent_block_only_when_intent_given():
    assert "Specific intent focus:" not in _zoning_prompt()
    assert "Specific intent focus:" not in _zoning_prompt(intent="   ")

    prompt = _zoning_prompt(intent="Front-of-house vs back-of-house zoning")
    assert "Specific intent focus:\n- Front-of-house vs back-of-house zoning" in prompt
    assert prompt.find("Specific intent focus:") < prompt.find("Design description from user:")


def test_block_sequence_drops_empty_blocks():
    config = CompilerConfig(user_prompt="x")
    assert len(BLOCK_SEQUENCE) == 10
    assert len(compile_blocks(config)) == 9
    assert len(compile_blocks(config.with_intent("Vertical stacking logic"))) == 10


def test_compilation_is_deterministic():
    assert _zoning_prompt() == _zoning_prompt()


def test_direct_construction_resolves_raw_strings():
    config = CompilerConfig(user_prompt="x", quality="draft", style="bold", preset="Zoning", emphasis="neon")
    assert config.quality == QualityMode.DRAFT
    assert config.style == StyleType.BOLD
    assert config.preset == PresetType.ZONING
    assert config.emphasis == EmphasisType.ALL

    prompt = build_diagram_prompt(config)
    assert "Mode: DRAFT" in prompt
    assert "Color style:" in prompt
    assert "Linework style:" not in prompt
    assert prompt == build_diagram_prompt(CompilerConfig.from_values(
        user_prompt="x", quality="draft", style="bold", preset="zoning",
    ))


def test_direct_construction_feeds_caption_builder():
    prompt = build_explanation_prompt(CompilerConfig(style="bold", quality="draft"))
    assert "- Style: bold" in prompt
    assert "- Mode: draft" in prompt


def test_intent_is_echoed_verbatim():
    prompt = _zoning_prompt(intent="  Public vs private  ")
    assert "Specific intent focus:\n-   Public vs private  \n" in prompt
    assert CompilerConfig(intent=" \n ").intent is None
