from typing import Any, Dict, List, Tuple

from diagram_studio.compiler.types import PresetType, coerce_enum


# Four facets per preset, most central first
INTENT_PRESETS: Dict[PresetType, Tuple[str, str, str, str]] = {
    PresetType.MASSING: (
        "Overall massing hierarchy and volumetric reading",
        "Site coverage and setback logic (abstract)",
        "Solid-void relationships and courtyard strategy",
        "Step-backs and height gradient (conceptual)",
    ),
    PresetType.CIRCULATION: (
        "Primary circulation loop and key nodes",
        "Secondary circulation branches and shortcuts",
        "Entry sequence to central orientation space",
        "Back-of-house vs public circulation separation",
    ),
    PresetType.ZONING: (
        "Public vs private zoning separation",
        "Adjacency and program clustering strategy",
        "Front-of-house vs back-of-house zoning",
        "Gradient of accessibility (public → private)",
    ),
    PresetType.PROGRAM: (
        "Program hierarchy (primary vs secondary spaces)",
        "Adjacency map translated into block diagram",
        "Public anchor spaces and supporting spaces",
        "Vertical stacking logic and transitions",
    ),
    PresetType.IMMERSIVE: (
        "Experience sequence: entry → buildup → climax → release",
        "Moments of compression and expansion",
        "Key experiential nodes and thresholds",
        "Wayfinding narrative and pacing",
    ),
    PresetType.PROCESS: (
        "Step-by-step mass transformation (3–5 frames)",
        "Subtraction and carving operations (conceptual)",
        "Rotation/shift to form view corridors (abstract)",
        "Iteration sequence with clear arrows between states",
    ),
}

GENERIC_INTENTS: Tuple[str, str, str, str] = (
    "Overall spatial logic and hierarchy",
    "Circulation and movement intent",
    "Program adjacency and zoning logic",
    "Experiential sequence and transitions",
)


def get_intent_presets(preset: Any = None) -> List[str]:
    """
    Sub-intents for multi-intent generation.

    Always four labels; callers wanting fewer should slice from the
    front. A new list is returned on every call.
    """
    resolved = coerce_enum(PresetType, preset, None)
    return list(INTENT_PRESETS.get(resolved, GENERIC_INTENTS))
