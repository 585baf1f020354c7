"""Validation result models.

Pydantic v2 models describing what the documentation validator found: hard
errors (with a severity), soft warnings (with a suggestion), the five
quality metrics and the aggregate verdict.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


class ErrorType(str, Enum):
    MISSING_FILE = "missing_file"
    EMPTY_CONTENT = "empty_content"
    BROKEN_LINK = "broken_link"
    MISSING_EXPLANATION = "missing_explanation"
    NO_SUCCESS_INDICATOR = "no_success_indicator"


class WarningType(str, Enum):
    JARGON = "jargon"
    LONG_PARAGRAPH = "long_paragraph"
    MISSING_EXAMPLE = "missing_example"
    PASSIVE_VOICE = "passive_voice"
    NO_SUCCESS_INDICATOR = "no_success_indicator"


# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------

class ValidationIssue(BaseModel):
    """A hard problem with one documentation file."""

    file: str = Field(..., description="Virtual path of the offending file")
    type: ErrorType
    message: str = Field(..., description="Human-readable description")
    severity: Severity


class ValidationWarning(BaseModel):
    """A soft quality problem, paired with a suggested fix."""

    file: str = Field(..., description="Virtual path of the offending file")
    type: WarningType
    message: str
    suggestion: str = Field(default="", description="How to address the warning")


class RuleOutcome(BaseModel):
    """What a single rule concluded about a single file."""

    score: int = Field(..., ge=0)
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

class QualityMetrics(BaseModel):
    """The five averaged sub-scores of a documentation map."""

    clarity: int = Field(default=0, ge=0, le=25)
    completeness: int = Field(default=0, ge=0, le=25)
    verifiability: int = Field(default=0, ge=0, le=20)
    examples: int = Field(default=0, ge=0, le=15)
    organization: int = Field(default=0, ge=0, le=15)

    @computed_field  # type: ignore[misc]
    @property
    def total(self) -> int:
        """Sum of the five metrics (0-100)."""
        return (
            self.clarity
            + self.completeness
            + self.verifiability
            + self.examples
            + self.organization
        )


class ValidationResult(BaseModel):
    """Outcome of validating a whole documentation map."""

    is_valid: bool = Field(default=False)
    score: int = Field(default=0, ge=0, le=100)
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)
    metrics: QualityMetrics = Field(default_factory=QualityMetrics)

    @computed_field  # type: ignore[misc]
    @property
    def critical_errors(self) -> list[ValidationIssue]:
        """Errors with critical severity."""
        return [e for e in self.errors if e.severity == Severity.CRITICAL]

    @property
    def has_critical_errors(self) -> bool:
        return bool(self.critical_errors)
