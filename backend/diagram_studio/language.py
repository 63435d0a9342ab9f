from enum import Enum
from typing import Any, Optional

from diagram_studio import config


class Language(Enum):
    """Display languages the analyzer and caption builder can answer in"""
    EN = "en"
    ZH = "zh"


def _match(value: Any) -> Optional[Language]:
    if isinstance(value, Language):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for language in Language:
            if language.value == normalized:
                return language
    return None


def default_language() -> Language:
    """DEFAULT_LANGUAGE from config; English when it is unset or unknown"""
    return _match(config.DEFAULT_LANGUAGE) or Language.EN


def resolve_language(value: Any) -> Language:
    """
    Map a raw selector ("en", "zh", Language.ZH, None, ...) to a Language.
    Anything unrecognized answers in the configured default language.
    """
    return _match(value) or default_language()
