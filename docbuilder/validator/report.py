"""Markdown quality report and the novice-readability verdict."""

from __future__ import annotations

from typing import Optional

from docbuilder.config import ValidationConfig
from docbuilder.validator.models import QualityMetrics, ValidationResult

# metric -> (max, excellent-at, good-at)
_METRIC_BANDS: dict[str, tuple[int, int, int]] = {
    "clarity": (25, 20, 15),
    "completeness": (25, 20, 15),
    "verifiability": (20, 16, 12),
    "examples": (15, 12, 9),
    "organization": (15, 12, 9),
}

_FOCUS_HINTS: dict[str, str] = {
    "clarity": "Explaining technical terms more clearly",
    "completeness": "Adding missing sections and details",
    "verifiability": "Adding success indicators for each step",
    "examples": "Including more code examples",
    "organization": "Improving structure and navigation",
}


def _rating(value: int, excellent: int, good: int) -> str:
    if value >= excellent:
        return "✅ Excellent"
    if value >= good:
        return "⚠️ Good"
    return "❌ Needs Improvement"


def _score_breakdown(metrics: QualityMetrics) -> list[str]:
    lines = ["## Score Breakdown", ""]
    for name, (maximum, excellent, good) in _METRIC_BANDS.items():
        value = getattr(metrics, name)
        lines.append(
            f"- **{name.capitalize()}** ({value}/{maximum}): {_rating(value, excellent, good)}"
        )
    lines.append("")
    return lines


def _recommendations(result: ValidationResult) -> list[str]:
    lines = ["## 📋 Recommendations", ""]
    score = result.score
    if score >= 90:
        lines.append("🎉 **Excellent!** Your documentation is clear, complete, and user-friendly.")
    elif score >= 80:
        lines.append(
            "👍 **Good!** Your documentation meets quality standards. "
            "Consider addressing the warnings above."
        )
    elif score >= 70:
        lines.append(
            "⚠️ **Acceptable**: Your documentation is usable but could be improved. Focus on:"
        )
        for name, (_, excellent, _) in _METRIC_BANDS.items():
            if getattr(result.metrics, name) < excellent:
                lines.append(f"- {_FOCUS_HINTS[name]}")
    else:
        lines.append(
            "❌ **Needs Improvement**: Your documentation needs significant work. "
            "Priority issues:"
        )
        for error in result.errors[:5]:
            lines.append(f"- {error.message}")
    lines.append("")
    return lines


def generate_validation_report(
    result: ValidationResult,
    config: Optional[ValidationConfig] = None,
) -> str:
    """Render *result* as a human-readable markdown report.

    Lists every error, at most ``config.max_report_warnings`` warnings, and
    recommendations keyed off the overall score.
    """
    cfg = config or ValidationConfig()
    verdict = "✅ PASS" if result.is_valid else "❌ FAIL"

    lines = [
        "# Documentation Quality Report",
        "",
        f"**Overall Score**: {result.score}/100 {verdict}",
        "",
    ]
    lines.extend(_score_breakdown(result.metrics))

    if result.errors:
        lines.extend([f"## ❌ Errors ({len(result.errors)})", ""])
        for error in result.errors:
            lines.extend([
                f"### {error.severity.value.upper()}: {error.file}",
                f"- **Type**: {error.type.value}",
                f"- **Message**: {error.message}",
                "",
            ])
    else:
        lines.extend(["## ✅ No Errors Found", ""])

    if result.warnings:
        lines.extend([f"## ⚠️ Warnings ({len(result.warnings)})", ""])
        for warning in result.warnings[: cfg.max_report_warnings]:
            lines.extend([
                f"### {warning.file}",
                f"- **Issue**: {warning.message}",
                f"- **Suggestion**: {warning.suggestion}",
                "",
            ])
        hidden = len(result.warnings) - cfg.max_report_warnings
        if hidden > 0:
            lines.extend([f"_... and {hidden} more warnings_", ""])
    else:
        lines.extend(["## ✅ No Warnings", ""])

    lines.extend(_recommendations(result))
    return "\n".join(lines) + "\n"


def passes_novice_test(
    result: ValidationResult,
    config: Optional[ValidationConfig] = None,
) -> bool:
    """Whether a newcomer could plausibly follow the documentation.

    Requires high clarity and verifiability and no critical errors.
    """
    cfg = config or ValidationConfig()
    return (
        result.metrics.clarity >= cfg.novice_min_clarity
        and result.metrics.verifiability >= cfg.novice_min_verifiability
        and not result.has_critical_errors
    )
