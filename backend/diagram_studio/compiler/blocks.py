# backend/diagram_studio/compiler/blocks.py
"""
Prompt Block Set - Composable instruction fragments

Each block is plain text. Selector tables map configuration enums to
blocks so every concern can be looked up and tested on its own.
"""

from typing import Dict, Optional

from diagram_studio.compiler.types import (
    EmphasisType,
    PresetType,
    QualityMode,
    StyleType,
)


# ============================================================
# CONSTANT BLOCKS
# ============================================================

SYSTEM_ROLE = """
You are an architectural diagram generator for spatial design thinking.
Your output must look like a clean studio / portfolio diagram, not an illustration.
""".strip()

DIAGRAM_GRAMMAR = """
Diagram grammar:
- Use block volumes to represent spaces/programs
- Use arrows to represent movement only when relevant
- Use dashed lines sparingly to indicate secondary / optional relationships
- Use minimal annotation (prefer none). If any marks appear, keep them abstract (no text)
- Prioritize: hierarchy, adjacency, sequence, and legibility
""".strip()

OUTPUT_REMINDER = """
Output requirements:
- Single diagram image
- Clean white background
- Diagrammatic clarity above all
""".strip()

USER_REQUEST_HEADER = "Design description from user:"
USER_REQUEST_PLACEHOLDER = "(no additional input)"
INTENT_HEADER = "Specific intent focus:"


# ============================================================
# QUALITY
# ============================================================

QUALITY_BLOCKS: Dict[QualityMode, str] = {
    QualityMode.DRAFT: """
Mode: DRAFT
Goal: fast ideation and variation. Keep it simple and readable.
""".strip(),
    QualityMode.PORTFOLIO: """
Mode: PORTFOLIO
Goal: portfolio-ready clarity, disciplined composition, consistent graphics.
""".strip(),
}

COMPOSITION_BLOCKS: Dict[QualityMode, str] = {
    QualityMode.DRAFT: """
Composition:
- Keep layout simple and readable
- Avoid too many elements
- Prioritize clarity over completeness
""".strip(),
    QualityMode.PORTFOLIO: """
Composition:
- Centered layout with clear hierarchy
- 1 main reading focus + supporting elements
- Strong alignment and consistent spacing
- Do not overcrowd the canvas
""".strip(),
}

# Only portfolio output gets the polish sub-block
POLISH_BLOCKS: Dict[QualityMode, str] = {
    QualityMode.DRAFT: "",
    QualityMode.PORTFOLIO: """
Portfolio polish:
- Balanced margins and centered composition
- Avoid clutter and decorative elements
- Ensure a strong figure-ground relationship
- Maintain consistent spacing between blocks
""".strip(),
}


# ============================================================
# RENDERING
# ============================================================

RENDERING_COMMON = """
Rendering constraints (MANDATORY):
- Architectural diagram, NOT a sketch, NOT an illustration, NOT a rendering
- White background only
- Flat graphic output (no textures, no material realism)
- No shadows, no gradients, no 3D shading
- No people, no furniture, no trees, no realistic context
- Use rectilinear / geometric block volumes
- Use a clean axonometric OR orthographic projection (avoid strong perspective distortion)
- Maintain generous negative space
- Keep edges crisp and readable
""".strip()

STYLE_BLOCKS: Dict[StyleType, str] = {
    StyleType.MINIMAL: """
Linework style:
- Thin, consistent black lineweight
- Clean outlines with uniform stroke
- If fills exist, keep them very light (or none)
- Arrows are simple, consistent, and minimal
""".strip(),
    StyleType.BOLD: """
Color style:
- Use only primary colors: red, blue, yellow (plus black outlines)
- Flat fills, no gradients
- High contrast but disciplined composition
- Limit palette (do not introduce extra colors)
- Keep arrows and outlines consistent
""".strip(),
}


# ============================================================
# PRESETS
# ============================================================

PRESET_BLOCKS: Dict[PresetType, str] = {
    PresetType.MASSING: """
Diagram type: MASSING & VOLUME
- 2–4 primary volumes (simple blocks)
- Show hierarchy via size/height (conceptual)
- Emphasize solid-void relationships
""".strip(),
    PresetType.CIRCULATION: """
Diagram type: CIRCULATION FLOW
- Circulation is the primary subject
- Use arrows to show direction
- Distinguish primary vs secondary paths clearly
- Keep volumes minimal and secondary
""".strip(),
    PresetType.ZONING: """
Diagram type: PROGRAM ZONING
- Use distinct blocks to represent zones
- Show adjacency and separation
- Emphasize public/semi-public/private gradient
""".strip(),
    PresetType.PROGRAM: """
Diagram type: PROGRAM HIERARCHY
- Show primary vs secondary spaces with size and grouping
- Emphasize hierarchy and clustering
- Avoid detailed partitions; stay abstract
""".strip(),
    PresetType.IMMERSIVE: """
Diagram type: SPATIAL EXPERIENCE
- Show a clear sequence of spaces (journey)
- Highlight nodes, thresholds, transitions
- Compression/release can be expressed via volume size and spacing
""".strip(),
    PresetType.PROCESS: """
Diagram type: DESIGN PROCESS
- Show 3–5 steps or states
- Use arrows to indicate transformation
- Each step must be clearly separated and readable
""".strip(),
}

GENERIC_PRESET_BLOCK = """
Diagram type: GENERIC ARCHITECTURAL CONCEPT
- Focus on spatial relationships and clarity
- Keep abstraction high
""".strip()


# ============================================================
# EMPHASIS
# ============================================================

EMPHASIS_BLOCKS: Dict[EmphasisType, str] = {
    EmphasisType.MASSING: """
Emphasis override:
- MASSING ONLY
- No arrows
- No internal subdivision
- Show solid volumes and their relationship only
""".strip(),
    EmphasisType.CIRCULATION: """
Emphasis override:
- CIRCULATION ONLY
- Show arrows/paths as the main content
- Volumes should be minimal outlines or very light blocks
""".strip(),
    EmphasisType.PROGRAM: """
Emphasis override:
- PROGRAM ONLY
- Show program blocks and adjacency clearly
- Minimize arrows; avoid circulation detail
""".strip(),
    EmphasisType.EXPERIENCE: """
Emphasis override:
- EXPERIENCE SEQUENCE
- Focus on transitions and nodes
- Use arrows sparingly to guide reading order
""".strip(),
    EmphasisType.ALL: """
Emphasis:
- Balanced: volumes + relationships (and arrows only if relevant)
""".strip(),
}


def preset_block(preset: Optional[PresetType]) -> str:
    return PRESET_BLOCKS.get(preset, GENERIC_PRESET_BLOCK)


def emphasis_block(emphasis: EmphasisType) -> str:
    return EMPHASIS_BLOCKS.get(emphasis, EMPHASIS_BLOCKS[EmphasisType.ALL])


def rendering_block(style: StyleType, quality: QualityMode) -> str:
    parts = [
        RENDERING_COMMON,
        STYLE_BLOCKS.get(style, STYLE_BLOCKS[StyleType.MINIMAL]),
        POLISH_BLOCKS.get(quality, ""),
    ]
    return "\n\n".join(part for part in parts if part)
