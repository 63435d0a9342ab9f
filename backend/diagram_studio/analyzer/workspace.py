"""
Prompt workspace helpers: example prompts, tag chips and the text edits
they trigger. Every edit is cut to the workspace character limit.
"""

from dataclasses import dataclass
from typing import List

from diagram_studio.config import PROMPT_MAX_CHARS


@dataclass(frozen=True)
class PromptExample:
    title: str
    text: str


@dataclass(frozen=True)
class TagChip:
    label: str
    value: str  # appended to the prompt as-is


DEFAULT_EXAMPLES: List[PromptExample] = [
    PromptExample(
        title="Exploration",
        text="Massing study of a community library: simple stacked volumes, courtyard void, clear entrance axis.",
    ),
    PromptExample(
        title="Focused",
        text=(
            "Circulation diagram for a museum: main loop + secondary shortcuts, vertical circulation core, "
            "public vs staff separation, annotate key nodes."
        ),
    ),
    PromptExample(
        title="Precise",
        text=(
            "Axonometric zoning diagram: 3 program bands (public / semi-public / service), show adjacency arrows, "
            "label hierarchy, high contrast, minimal text, clean line weights."
        ),
    ),
]

DEFAULT_TAGS: List[TagChip] = [
    TagChip(label="Axonometric", value=" axonometric diagram"),
    TagChip(label="Black/White", value=" black and white"),
    TagChip(label="High Contrast", value=" high contrast"),
    TagChip(label="Label Key Nodes", value=" label key nodes"),
    TagChip(label="Add Arrows", value=" add directional arrows"),
    TagChip(label="Public/Private", value=" public vs private zoning"),
    TagChip(label="Hierarchy", value=" emphasize hierarchy"),
    TagChip(label="Minimal Text", value=" minimal text"),
]


def insert_example(value: str, text: str, max_chars: int = PROMPT_MAX_CHARS) -> str:
    """Append an example on its own line after the current text"""
    value = value or ""
    combined = (value.rstrip() + "\n" + text) if value else text
    return combined[:max_chars]


def append_tag(value: str, tag: str, max_chars: int = PROMPT_MAX_CHARS) -> str:
    return ((value or "") + tag)[:max_chars]


def char_progress(value: str, max_chars: int = PROMPT_MAX_CHARS) -> int:
    """Used share of the character limit, as a 0-100 percentage"""
    if max_chars <= 0:
        return 100
    return max(0, min(100, round(len(value or "") / max_chars * 100)))
