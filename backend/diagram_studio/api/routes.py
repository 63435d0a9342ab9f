from fastapi import APIRouter
from fastapi.responses import JSONResponse

from diagram_studio.schemas import (
    AnalyzeRequest,
    CompileRequest,
    ExplainRequest,
    GenerateRequest,
)
from diagram_studio.api.serializers import serialize
from diagram_studio.analyzer import (
    analyze_prompt_strength,
    level_hint,
    next_suggestion,
    score_components,
)
from diagram_studio.analyzer.workspace import DEFAULT_EXAMPLES, DEFAULT_TAGS
from diagram_studio.compiler import (
    CompilerConfig,
    PresetType,
    build_diagram_prompt,
    build_explanation_prompt,
    get_intent_presets,
)
from diagram_studio.pipeline import GenerationRejected, plan_generation

router = APIRouter()


def _config_from_request(request: CompileRequest) -> CompilerConfig:
    return CompilerConfig.from_values(
        user_prompt=request.prompt,
        preset=request.preset,
        style=request.style,
        emphasis=request.emphasis,
        quality=request.quality,
        intent=request.intent,
    )


@router.get("/health")
def health():
    return {"status": "ok"}


# ============================================================
# PROMPT ENDPOINTS - Strength, Compile, Explain
# ============================================================

@router.post("/prompt/analyze")
def analyze_prompt(request: AnalyzeRequest):
    """Score prompt strength; cheap enough to call on every edit"""
    verdict = analyze_prompt_strength(request.text, request.language)
    payload = verdict.to_dict()
    payload["hint"] = level_hint(verdict.level, request.language)
    payload["next_suggestion"] = next_suggestion(verdict, request.language)
    payload["breakdown"] = score_components(request.text).to_dict()
    return payload


@router.post("/prompt/compile")
def compile_prompt(request: CompileRequest):
    """Compile the final diagram instruction string"""
    try:
        config = _config_from_request(request)
        return {
            "status": "success",
            "config": serialize(config),
            "prompt": build_diagram_prompt(config),
        }
    except Exception as e:
        import traceback
        traceback.print_exc()
        return JSONResponse(status_code=500, content={"status": "error", "message": str(e)})


@router.post("/prompt/explain")
def explain_prompt(request: ExplainRequest):
    """Compile a caption request explaining the diagram's logic"""
    try:
        config = _config_from_request(request)
        return {
            "status": "success",
            "prompt": build_explanation_prompt(config, request.language),
        }
    except Exception as e:
        import traceback
        traceback.print_exc()
        return JSONResponse(status_code=500, content={"status": "error", "message": str(e)})


@router.get("/prompt/examples")
def prompt_examples():
    return {
        "examples": serialize(DEFAULT_EXAMPLES),
        "tags": serialize(DEFAULT_TAGS),
    }


# ============================================================
# PRESET ENDPOINTS
# ============================================================

@router.get("/presets")
def list_presets():
    """List diagram presets with their sub-intents"""
    return [
        {"id": preset.value, "intents": get_intent_presets(preset)}
        for preset in PresetType
    ]


@router.get("/presets/{preset}/intents")
def preset_intents(preset: str):
    """Sub-intents of a preset; unknown presets get the generic list"""
    known = {p.value for p in PresetType}
    return {
        "preset": preset if preset in known else "generic",
        "intents": get_intent_presets(preset),
    }


# ============================================================
# GENERATION PLAN - Prompts per intent, no provider call
# ============================================================

@router.post("/generate/plan")
def generate_plan(request: GenerateRequest):
    try:
        plan = plan_generation(request)

        response = {
            "status": "success" if not plan.validation.warnings else "warning",
            "results": [item.to_dict() for item in plan.items],
            "meta": plan.meta,
        }
        if plan.validation.warnings:
            response["warnings"] = [i.to_dict() for i in plan.validation.warnings]
        return response

    except GenerationRejected as e:
        print(f"[Routes] Generation rejected: {e}")
        return JSONResponse(
            status_code=400,
            content={
                "status": "error",
                "message": str(e),
                "validation": e.validation.to_dict(),
            },
        )
    except Exception as e:
        import traceback
        traceback.print_exc()
        return JSONResponse(status_code=500, content={"status": "error", "message": str(e)})
