"""Documentation validator.

Scores a documentation map on clarity, completeness, verifiability, examples
and organization, and checks that the novice-facing entry documents exist.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Optional

from docbuilder.config import ValidationConfig
from docbuilder.validator.models import (
    ErrorType,
    QualityMetrics,
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
)
from docbuilder.validator.rules import DEFAULT_RULES, ValidationRule

REQUIRED_FILES: tuple[str, ...] = (
    "/README.md",
    "/SETUP.md",
    "/TROUBLESHOOTING.md",
    "/ARCHITECTURE.md",
    "/FAQ.md",
    "/.env.example",
)

_METRIC_NAMES = tuple(QualityMetrics.model_fields)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


class DocumentationValidator:
    """Validates a ``path -> markdown`` documentation map.

    Args:
        rules: Rule instances to apply to every non-empty file.  Each rule's
            ``name`` selects the metric it feeds.  Defaults to the five
            built-in rules.
        config: Thresholds.  Only ``pass_threshold`` is used here.
    """

    def __init__(
        self,
        rules: Optional[Iterable[ValidationRule]] = None,
        config: Optional[ValidationConfig] = None,
    ) -> None:
        self.rules: list[ValidationRule] = (
            list(rules) if rules is not None else [rule() for rule in DEFAULT_RULES]
        )
        self.config = config or ValidationConfig()

    def validate(self, docs: Mapping[str, str]) -> ValidationResult:
        """Validate *docs* and return the aggregate result.

        Never raises for bad content; every problem becomes an error or a
        warning on the result.
        """
        errors: list[ValidationIssue] = self._check_required(docs)
        warnings: list[ValidationWarning] = []

        totals = {name: 0 for name in _METRIC_NAMES}
        scored_files = 0

        for path, content in docs.items():
            if not content.strip():
                continue
            scored_files += 1
            for rule in self.rules:
                outcome = rule.check(path, content)
                if rule.name in totals:
                    totals[rule.name] += outcome.score
                errors.extend(outcome.errors)
                warnings.extend(outcome.warnings)

        if scored_files:
            metrics = QualityMetrics(
                **{name: round_half_up(total / scored_files) for name, total in totals.items()}
            )
        else:
            metrics = QualityMetrics()

        score = metrics.total
        has_critical = any(e.severity == Severity.CRITICAL for e in errors)

        return ValidationResult(
            is_valid=not has_critical and score >= self.config.pass_threshold,
            score=score,
            errors=errors,
            warnings=warnings,
            metrics=metrics,
        )

    # ------------------------------------------------------------------
    # Required files
    # ------------------------------------------------------------------

    @staticmethod
    def _check_required(docs: Mapping[str, str]) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        for path in REQUIRED_FILES:
            if path not in docs:
                issues.append(ValidationIssue(
                    file=path,
                    type=ErrorType.MISSING_FILE,
                    message=f"Required file {path} is missing",
                    severity=Severity.CRITICAL,
                ))
            elif not docs[path].strip():
                issues.append(ValidationIssue(
                    file=path,
                    type=ErrorType.EMPTY_CONTENT,
                    message=f"Required file {path} is empty",
                    severity=Severity.CRITICAL,
                ))
        return issues


def validate_documentation(
    docs: Mapping[str, str],
    config: Optional[ValidationConfig] = None,
) -> ValidationResult:
    """Validate *docs* with the built-in rules."""
    return DocumentationValidator(config=config).validate(docs)
