"""Documentation quality validation.

Usage::

    from docbuilder.validator import validate_documentation, generate_validation_report

    result = validate_documentation(docs)
    print(result.score, result.is_valid)
    print(generate_validation_report(result))
"""

from docbuilder.validator.models import (
    ErrorType,
    QualityMetrics,
    RuleOutcome,
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
    WarningType,
)
from docbuilder.validator.report import generate_validation_report, passes_novice_test
from docbuilder.validator.rules import (
    DEFAULT_RULES,
    TECHNICAL_TERMS,
    ClarityRule,
    CompletenessRule,
    ExamplesRule,
    OrganizationRule,
    ValidationRule,
    VerifiabilityRule,
)
from docbuilder.validator.validator import (
    REQUIRED_FILES,
    DocumentationValidator,
    validate_documentation,
)

__all__ = [
    "ClarityRule",
    "CompletenessRule",
    "DEFAULT_RULES",
    "DocumentationValidator",
    "ErrorType",
    "ExamplesRule",
    "OrganizationRule",
    "QualityMetrics",
    "REQUIRED_FILES",
    "RuleOutcome",
    "Severity",
    "TECHNICAL_TERMS",
    "ValidationIssue",
    "ValidationResult",
    "ValidationRule",
    "ValidationWarning",
    "VerifiabilityRule",
    "WarningType",
    "generate_validation_report",
    "passes_novice_test",
    "validate_documentation",
]
