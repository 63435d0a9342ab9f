"""
Generation planner.

Turns a generation request into the ordered list of compiled prompts an
image provider should receive. Intent diversity (how many distinct
intents) and variation count (how many images per intent) are separate
knobs. Nothing here talks to a provider.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from diagram_studio.compiler import CompilerConfig, build_diagram_prompt, get_intent_presets
from diagram_studio.config import (
    DEFAULT_INTENT_COUNT,
    DEFAULT_VARIATIONS,
    MAX_DIAGRAM_COUNT,
    STRENGTH_MIN,
)
from diagram_studio.schemas import GenerateRequest
from diagram_studio.validation import RequestValidationResult, RequestValidator


PRIMARY_INTENT = "Primary diagram output"


class GenerationRejected(ValueError):
    """Raised when a request fails validation; carries the full result"""

    def __init__(self, validation: RequestValidationResult):
        self.validation = validation
        messages = "; ".join(i.message for i in validation.errors)
        super().__init__(messages or "Generation request rejected")


@dataclass
class PlannedDiagram:
    intent: str
    prompt: str
    variations: int = 1

    def to_dict(self) -> dict:
        return {"intent": self.intent, "prompt": self.prompt, "variations": self.variations}


@dataclass
class GenerationPlan:
    config: CompilerConfig
    items: List[PlannedDiagram] = field(default_factory=list)
    multi_intent: bool = False
    validation: Optional[RequestValidationResult] = None

    @property
    def image_count(self) -> int:
        return sum(item.variations for item in self.items)

    @property
    def intents(self) -> List[str]:
        return [item.intent for item in self.items]

    @property
    def meta(self) -> Dict[str, Any]:
        return {
            "preset": self.config.preset_name or "custom",
            "style": self.config.style.value,
            "quality": self.config.quality.value,
            "emphasis": self.config.emphasis.value,
            "multi_intent": self.multi_intent,
            "count": self.image_count,
        }


def clamp_count(value: Optional[Any], default: int, maximum: int = MAX_DIAGRAM_COUNT) -> int:
    """Floor a requested count into [1, maximum]; non-numbers use the default"""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        return default
    if math.isinf(value):
        return maximum if value > 0 else 1
    return max(1, min(maximum, math.floor(value)))


def select_intents(preset: Any, multi_intent: bool, count: Optional[Any] = None) -> List[str]:
    """Distinct intents to generate, in priority order"""
    if not multi_intent:
        return [PRIMARY_INTENT]
    intent_count = clamp_count(count, DEFAULT_INTENT_COUNT)
    return get_intent_presets(preset)[:intent_count]


def plan_generation(
    request: GenerateRequest,
    min_strength: int = STRENGTH_MIN,
) -> GenerationPlan:
    """
    Validate a request and compile one prompt per intent.

    Raises GenerationRejected when there is nothing to generate from or
    the prompt is too weak.
    """
    validation = RequestValidator(min_strength=min_strength).validate(
        request.prompt,
        request.preset,
        request.count,
        request.language,
        request.variations,
    )
    if not validation.is_valid:
        print(f"[Planner] Rejected: {validation.get_summary()}")
        raise GenerationRejected(validation)

    config = CompilerConfig.from_values(
        user_prompt=request.prompt.strip(),
        preset=request.preset,
        style=request.style,
        emphasis=request.emphasis,
        quality=request.quality,
    )

    if request.multi_intent:
        intents = select_intents(config.preset, True, request.count)
        variations = clamp_count(request.variations, 1)
    else:
        intents = [request.intent] if request.intent and request.intent.strip() else [PRIMARY_INTENT]
        requested = request.variations if request.variations is not None else request.count
        variations = clamp_count(requested, DEFAULT_VARIATIONS)

    items = [
        PlannedDiagram(
            intent=intent,
            prompt=build_diagram_prompt(config.with_intent(intent)),
            variations=variations,
        )
        for intent in intents
    ]

    print(
        f"[Planner] {len(items)} intent(s) x {variations} variation(s) "
        f"for preset '{config.preset_name or 'custom'}'"
    )
    return GenerationPlan(
        config=config,
        items=items,
        multi_intent=request.multi_intent,
        validation=validation,
    )
