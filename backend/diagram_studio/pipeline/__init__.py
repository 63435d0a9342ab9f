from diagram_studio.pipeline.planner import (
    PRIMARY_INTENT,
    GenerationPlan,
    GenerationRejected,
    PlannedDiagram,
    clamp_count,
    plan_generation,
    select_intents,
)

__all__ = [
    "PRIMARY_INTENT",
    "GenerationPlan",
    "GenerationRejected",
    "PlannedDiagram",
    "clamp_count",
    "plan_generation",
    "select_intents",
]
