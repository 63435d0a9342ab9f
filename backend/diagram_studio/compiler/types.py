from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar


class StyleType(Enum):
    MINIMAL = "minimal"
    BOLD = "bold"


class PresetType(Enum):
    MASSING = "massing"
    CIRCULATION = "circulation"
    ZONING = "zoning"
    PROGRAM = "program"
    IMMERSIVE = "immersive"
    PROCESS = "process"


class EmphasisType(Enum):
    ALL = "all"
    MASSING = "massing"
    CIRCULATION = "circulation"
    PROGRAM = "program"
    EXPERIENCE = "experience"


class QualityMode(Enum):
    DRAFT = "draft"
    PORTFOLIO = "portfolio"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Any, default: Optional[E]) -> Optional[E]:
    """
    Resolve a raw value ("Bold", StyleType.BOLD, None, "neon") to a member.
    Empty or unknown values resolve to the default.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_cls:
            if member.value == normalized:
                return member
    return default


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CompilerConfig:
    """
    Everything a compiled prompt depends on.

    `preset` is None for the generic diagram type.
    """
    user_prompt: str = ""
    preset: Optional[PresetType] = None
    style: StyleType = StyleType.MINIMAL
    emphasis: EmphasisType = EmphasisType.ALL
    quality: QualityMode = QualityMode.PORTFOLIO
    intent: Optional[str] = None

    def __post_init__(self):
        # Frozen, so raw strings are resolved through object.__setattr__
        object.__setattr__(self, "user_prompt", _clean_text(self.user_prompt))
        object.__setattr__(self, "preset", coerce_enum(PresetType, self.preset, None))
        object.__setattr__(self, "style", coerce_enum(StyleType, self.style, StyleType.MINIMAL))
        object.__setattr__(self, "emphasis", coerce_enum(EmphasisType, self.emphasis, EmphasisType.ALL))
        object.__setattr__(self, "quality", coerce_enum(QualityMode, self.quality, QualityMode.PORTFOLIO))
        intent = _clean_text(self.intent)
        object.__setattr__(self, "intent", intent if intent.strip() else None)

    @classmethod
    def from_values(
        cls,
        user_prompt: Any = "",
        preset: Any = None,
        style: Any = None,
        emphasis: Any = None,
        quality: Any = None,
        intent: Any = None,
    ) -> "CompilerConfig":
        return cls(
            user_prompt=user_prompt,
            preset=preset,
            style=style,
            emphasis=emphasis,
            quality=quality,
            intent=intent,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompilerConfig":
        """Accepts both snake_case and the camelCase keys the web client sends"""
        return cls.from_values(
            user_prompt=data.get("user_prompt", data.get("userPrompt", data.get("prompt", ""))),
            preset=data.get("preset"),
            style=data.get("style"),
            emphasis=data.get("emphasis"),
            quality=data.get("quality"),
            intent=data.get("intent"),
        )

    @property
    def preset_name(self) -> str:
        return self.preset.value if self.preset else ""

    def with_intent(self, intent: Optional[str]) -> "CompilerConfig":
        return replace(self, intent=intent)

    def to_dict(self) -> dict:
        return {
            "user_prompt": self.user_prompt,
            "preset": self.preset_name,
            "style": self.style.value,
            "emphasis": self.emphasis.value,
            "quality": self.quality.value,
            "intent": self.intent,
        }
