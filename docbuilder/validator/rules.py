"""Heuristic quality rules.

Each rule scores one file in isolation, starting from its ``max_score`` and
subtracting a fixed penalty per problem found.  Scores never drop below zero.
Rules are independent of each other, so new ones can be plugged into
:class:`~docbuilder.validator.validator.DocumentationValidator` freely.
"""

from __future__ import annotations

import re

from docbuilder.validator.models import (
    ErrorType,
    RuleOutcome,
    Severity,
    ValidationIssue,
    ValidationWarning,
    WarningType,
)


# ---------------------------------------------------------------------------
# Vocabulary and patterns
# ---------------------------------------------------------------------------

TECHNICAL_TERMS: tuple[str, ...] = (
    "API", "endpoint", "authentication", "authorization", "JWT", "token",
    "database", "migration", "schema", "query", "ORM", "REST", "GraphQL",
    "frontend", "backend", "server", "client", "HTTP", "HTTPS", "SSL",
    "CORS", "CSRF", "XSS", "SQL injection", "hashing", "encryption",
    "middleware", "webhook", "CDN", "DNS", "deployment", "production",
    "staging", "environment variable", "session", "cookie", "cache",
)

SUCCESS_INDICATOR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"✅\s*(?:Success|You should see)", re.IGNORECASE),
    re.compile(r"✅\s*\*\*Success\*\*", re.IGNORECASE),
    re.compile(r"should see\s+[\"']?[^\"'\n]+[\"']?", re.IGNORECASE),
    re.compile(r"you should now have", re.IGNORECASE),
)

TROUBLESHOOTING_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"❌.*(?:Error|Problem|Issue)", re.IGNORECASE),
    re.compile(r"\*\*(?:If|When)\s+you\s+see.*error\*\*", re.IGNORECASE),
    re.compile(r"Common\s+(?:issues|errors|problems)", re.IGNORECASE),
    re.compile(r"Troubleshooting", re.IGNORECASE),
)

_RE_CODE_BLOCK = re.compile(r"```[\s\S]*?```")
_RE_SENTENCE_END = re.compile(r"[.!?]+")
_RE_STEP = re.compile(r"(?:Step|##)\s+\d+")
_RE_HEADER = re.compile(r"^#{1,6}\s+.+$", re.MULTILINE)
_RE_PLACEHOLDER = re.compile(r"\b(foo|bar|baz|example|test123|placeholder)\b", re.IGNORECASE)


def _term_patterns(term: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Return (occurrence, explanation) patterns for a glossary term."""
    escaped = re.escape(term)
    used = re.compile(rf"\b{escaped}\b", re.IGNORECASE)
    explained = re.compile(rf"{escaped}.*?(?:is|means|refers to|\(.*?\))", re.IGNORECASE)
    return used, explained


_TERM_PATTERNS = {term: _term_patterns(term) for term in TECHNICAL_TERMS}


def strip_code_blocks(content: str) -> str:
    """Remove fenced code blocks so prose checks ignore code."""
    return _RE_CODE_BLOCK.sub("", content)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class ValidationRule:
    """Base class for a scoring rule.

    Subclasses set ``name`` and ``max_score`` and implement :meth:`check`.
    """

    name: str = ""
    max_score: int = 0

    def check(self, path: str, content: str) -> RuleOutcome:
        raise NotImplementedError

    def _outcome(
        self,
        penalty: int,
        errors: list[ValidationIssue] | None = None,
        warnings: list[ValidationWarning] | None = None,
    ) -> RuleOutcome:
        return RuleOutcome(
            score=max(0, self.max_score - penalty),
            errors=errors or [],
            warnings=warnings or [],
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, max_score={self.max_score})"


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

class ClarityRule(ValidationRule):
    """Unexplained jargon and overly long paragraphs."""

    name = "clarity"
    max_score = 25

    def check(self, path: str, content: str) -> RuleOutcome:
        prose = strip_code_blocks(content)
        warnings: list[ValidationWarning] = []

        for term, (used, explained) in _TERM_PATTERNS.items():
            if used.search(prose) and not explained.search(prose):
                warnings.append(ValidationWarning(
                    file=path,
                    type=WarningType.JARGON,
                    message=f'Technical term "{term}" may not be explained',
                    suggestion=(
                        f'Add an explanation like: "{term} (the thing that...)" '
                        "or create a glossary"
                    ),
                ))

        for paragraph in prose.split("\n\n"):
            sentences = [s for s in _RE_SENTENCE_END.split(paragraph) if s.strip()]
            if len(sentences) > 5:
                warnings.append(ValidationWarning(
                    file=path,
                    type=WarningType.LONG_PARAGRAPH,
                    message="Found a very long paragraph",
                    suggestion="Break into smaller paragraphs or use bullet points",
                ))

        return self._outcome(len(warnings), warnings=warnings)


class CompletenessRule(ValidationRule):
    """Key sections of the three entry-point documents."""

    name = "completeness"
    max_score = 25
    penalty = 5

    def check(self, path: str, content: str) -> RuleOutcome:
        message: str | None = None
        if path == "/README.md":
            if "Quick Start" not in content and "Getting Started" not in content:
                message = "README missing Quick Start section"
        elif path == "/SETUP.md":
            if "Step 1" not in content and "## 1." not in content:
                message = "SETUP missing step-by-step instructions"
        elif path == "/TROUBLESHOOTING.md":
            if not any(p.search(content) for p in TROUBLESHOOTING_PATTERNS):
                message = "TROUBLESHOOTING missing error scenarios"

        if message is None:
            return self._outcome(0)
        error = ValidationIssue(
            file=path,
            type=ErrorType.MISSING_EXPLANATION,
            message=message,
            severity=Severity.HIGH,
        )
        return self._outcome(self.penalty, errors=[error])


class VerifiabilityRule(ValidationRule):
    """Success indicators for numbered steps in setup-style documents."""

    name = "verifiability"
    max_score = 20
    penalty = 5

    def check(self, path: str, content: str) -> RuleOutcome:
        if "SETUP" not in path and "README" not in path:
            return self._outcome(0)

        indicators = sum(len(p.findall(content)) for p in SUCCESS_INDICATOR_PATTERNS)
        steps = len(_RE_STEP.findall(content))

        if steps > 0 and indicators < steps * 0.5:
            warning = ValidationWarning(
                file=path,
                type=WarningType.NO_SUCCESS_INDICATOR,
                message=f"Only {indicators} success indicators for {steps} steps",
                suggestion="Add ✅ Success Check for each step",
            )
            return self._outcome(self.penalty, warnings=[warning])
        return self._outcome(0)


class ExamplesRule(ValidationRule):
    """Code examples in technical documents, with realistic values."""

    name = "examples"
    max_score = 15

    def check(self, path: str, content: str) -> RuleOutcome:
        if not any(marker in path for marker in ("SETUP", "ARCHITECTURE", "README")):
            return self._outcome(0)

        blocks = _RE_CODE_BLOCK.findall(content)
        penalty = 0
        warnings: list[ValidationWarning] = []

        if not blocks:
            penalty += 5
            warnings.append(ValidationWarning(
                file=path,
                type=WarningType.MISSING_EXAMPLE,
                message="No code examples found",
                suggestion="Add code examples to illustrate concepts",
            ))
        elif any(_RE_PLACEHOLDER.search(block) for block in blocks):
            penalty += 2
            warnings.append(ValidationWarning(
                file=path,
                type=WarningType.MISSING_EXAMPLE,
                message="Code examples use placeholder values (foo, bar, etc.)",
                suggestion="Use realistic example values",
            ))

        return self._outcome(penalty, warnings=warnings)


class OrganizationRule(ValidationRule):
    """Headers and navigation in long documents."""

    name = "organization"
    max_score = 15

    def check(self, path: str, content: str) -> RuleOutcome:
        penalty = 0
        warnings: list[ValidationWarning] = []

        if len(content) > 1000 and len(_RE_HEADER.findall(content)) < 3:
            penalty += 3
            warnings.append(ValidationWarning(
                file=path,
                type=WarningType.MISSING_EXAMPLE,
                message="Long document with few headers",
                suggestion="Add more section headers to improve scannability",
            ))

        if len(content) > 3000 and "Table of Contents" not in content:
            penalty += 2
            warnings.append(ValidationWarning(
                file=path,
                type=WarningType.MISSING_EXAMPLE,
                message="Long document without table of contents",
                suggestion="Add a table of contents at the beginning",
            ))

        return self._outcome(penalty, warnings=warnings)


DEFAULT_RULES: tuple[type[ValidationRule], ...] = (
    ClarityRule,
    CompletenessRule,
    VerifiabilityRule,
    ExamplesRule,
    OrganizationRule,
)
