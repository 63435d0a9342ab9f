from typing import Any, Mapping, Union

from diagram_studio.compiler.types import CompilerConfig
from diagram_studio.language import Language, resolve_language


LANGUAGE_RULES = {
    Language.EN: "Write in concise, natural English.",
    Language.ZH: "Write in concise, natural Chinese.",
}


def build_explanation_prompt(
    config: Union[CompilerConfig, Mapping[str, Any]],
    language: Any = None,
) -> str:
    """
    Prompt for a short portfolio caption explaining a diagram's logic.

    The language may be passed directly or as a "language" key of a
    mapping config.
    """
    if not isinstance(config, CompilerConfig):
        if language is None:
            language = config.get("language")
        config = CompilerConfig.from_dict(config)

    lang_rule = LANGUAGE_RULES[resolve_language(language)]
    user_prompt = (config.user_prompt or "").strip()

    return f"""
You are an architecture studio assistant. {lang_rule}

Write a short caption (4–6 sentences) that explains the diagram's design logic.
Do NOT mention AI. Do NOT mention prompts. Do NOT mention tools.

Context:
- Diagram type: {config.preset_name or "generic"}
- Style: {config.style.value}
- Mode: {config.quality.value}
- Emphasis: {config.emphasis.value}
- Intent: {config.intent or "general spatial logic"}
- User description: {user_prompt or "(none)"}

Caption should:
- Describe the spatial hierarchy and key relationships
- Mention circulation / zoning / sequence only if relevant
- Sound portfolio-ready and professional
""".strip()
