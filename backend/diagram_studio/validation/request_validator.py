"""
Request Validator - Checks generation requests before prompts are compiled.

Catches issues like:
- Neither a prompt nor a preset supplied
- Prompts too weak to produce a controllable diagram
- Requested diagram counts outside the supported range
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from diagram_studio.analyzer import analyze_prompt_strength
from diagram_studio.config import MAX_DIAGRAM_COUNT, STRENGTH_MIN


class ValidationSeverity(Enum):
    ERROR = "error"      # Request cannot be planned
    WARNING = "warning"  # Request was adjusted
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue found in a request"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    field: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "field": self.field,
            "suggestion": self.suggestion,
        }


@dataclass
class RequestValidationResult:
    """Result of request validation"""
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        """Get human-readable summary"""
        status = "✅ Valid" if self.is_valid else "❌ Invalid"
        return f"{status} | Errors: {self.error_count}, Warnings: {self.warning_count}"


class RequestValidator:
    """
    Validates generation requests.

    Usage:
        validator = RequestValidator(min_strength=25)
        result = validator.validate(prompt, preset, count)

        if not result.is_valid:
            for issue in result.issues:
                print(f"[{issue.severity.value}] {issue.message}")
    """

    def __init__(self, min_strength: int = STRENGTH_MIN, max_count: int = MAX_DIAGRAM_COUNT):
        self.min_strength = min_strength
        self.max_count = max_count

    def validate(
        self,
        prompt: str,
        preset: str = "",
        count: Optional[int] = None,
        language: Optional[str] = None,
        variations: Optional[int] = None,
    ) -> RequestValidationResult:
        issues: List[ValidationIssue] = []
        stats: Dict[str, int] = {}

        prompt = (prompt or "").strip()
        preset = (preset or "").strip()

        if not prompt and not preset:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code="MISSING_INPUT",
                message="Prompt or preset is required.",
                field="prompt",
                suggestion="Describe the diagram or pick a diagram preset",
            ))

        if prompt:
            verdict = analyze_prompt_strength(prompt, language)
            stats["strength_score"] = verdict.score
            if verdict.score < self.min_strength:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="PROMPT_TOO_WEAK",
                    message=(
                        f"Prompt strength {verdict.score} is below the minimum of "
                        f"{self.min_strength}."
                    ),
                    field="prompt",
                    suggestion=verdict.suggestions[0] if verdict.suggestions else None,
                ))

        for field_name, value in (("count", count), ("variations", variations)):
            if value is not None and not 1 <= value <= self.max_count:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="COUNT_CLAMPED",
                    message=f"Requested {field_name} {value} was clamped to the range 1-{self.max_count}.",
                    field=field_name,
                ))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        return RequestValidationResult(is_valid=not has_errors, issues=issues, stats=stats)


def validate_request(
    prompt: str,
    preset: str = "",
    count: Optional[int] = None,
    language: Optional[str] = None,
    min_strength: int = STRENGTH_MIN,
    variations: Optional[int] = None,
) -> RequestValidationResult:
    """Convenience function to validate a generation request."""
    validator = RequestValidator(min_strength=min_strength)
    return validator.validate(prompt, preset, count, language, variations)


def raise_on_errors(result: RequestValidationResult) -> None:
    """Raise if a validation result carries errors."""
    if not result.is_valid:
        error_messages = [f"[{i.code}] {i.message}" for i in result.errors]
        raise ValueError(
            f"Request validation failed with {result.error_count} errors:\n" +
            "\n".join(error_messages)
        )
