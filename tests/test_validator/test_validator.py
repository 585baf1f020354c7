"""Unit tests for DocumentationValidator (docbuilder.validator.validator)."""

from __future__ import annotations

import pytest

from docbuilder.config import ValidationConfig
from docbuilder.validator import (
    REQUIRED_FILES,
    DocumentationValidator,
    ErrorType,
    RuleOutcome,
    Severity,
    ValidationRule,
    validate_documentation,
)
from docbuilder.validator.validator import round_half_up


class _CountingRule(ValidationRule):
    name = "clarity"
    max_score = 25

    def __init__(self) -> None:
        self.seen: list[str] = []

    def check(self, path: str, content: str) -> RuleOutcome:
        self.seen.append(path)
        return RuleOutcome(score=self.max_score)


class TestRequiredFiles:
    @pytest.mark.unit
    def test_well_formed_map_passes(self, well_formed_docs):
        result = validate_documentation(well_formed_docs)
        assert result.score == 100
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.unit
    def test_missing_file_is_critical(self, well_formed_docs):
        del well_formed_docs["/FAQ.md"]
        result = validate_documentation(well_formed_docs)
        assert not result.is_valid
        assert len(result.critical_errors) == 1
        error = result.critical_errors[0]
        assert error.file == "/FAQ.md"
        assert error.type == ErrorType.MISSING_FILE
        assert error.message == "Required file /FAQ.md is missing"
        assert result.score == 100

    @pytest.mark.unit
    def test_whitespace_file_is_empty_content(self, well_formed_docs):
        well_formed_docs["/.env.example"] = "  \n\t"
        result = validate_documentation(well_formed_docs)
        assert not result.is_valid
        assert [e.type for e in result.critical_errors] == [ErrorType.EMPTY_CONTENT]

    @pytest.mark.unit
    def test_empty_string_is_empty_content(self, well_formed_docs):
        well_formed_docs["/FAQ.md"] = ""
        result = validate_documentation(well_formed_docs)
        assert not result.is_valid
        assert [(e.file, e.type) for e in result.critical_errors] == [
            ("/FAQ.md", ErrorType.EMPTY_CONTENT)
        ]

    @pytest.mark.unit
    def test_empty_map(self):
        result = validate_documentation({})
        assert result.score == 0
        assert not result.is_valid
        assert [e.file for e in result.errors] == list(REQUIRED_FILES)
        assert all(e.severity == Severity.CRITICAL for e in result.errors)


class TestScoring:
    @pytest.mark.unit
    def test_metrics_are_rounded_half_up(self):
        docs = {"/a.md": "The database stores rows.", "/b.md": "Plain words."}
        result = validate_documentation(docs)
        # (24 + 25) / 2 = 24.5
        assert result.metrics.clarity == 25
        assert result.metrics.total == result.score

    @pytest.mark.unit
    def test_round_half_up(self):
        assert round_half_up(24.5) == 25
        assert round_half_up(22.5) == 23
        assert round_half_up(22.49) == 22
        assert round_half_up(0) == 0

    @pytest.mark.unit
    def test_blank_files_not_scored(self):
        rule = _CountingRule()
        DocumentationValidator(rules=[rule]).validate({"/a.md": "text", "/b.md": "   "})
        assert rule.seen == ["/a.md"]

    @pytest.mark.unit
    def test_high_errors_do_not_block_validity(self, well_formed_docs):
        well_formed_docs["/README.md"] = "# Demo\n\n```bash\nnpm install\n```\n"
        result = validate_documentation(well_formed_docs)
        assert [e.severity for e in result.errors] == [Severity.HIGH]
        assert result.is_valid

    @pytest.mark.unit
    def test_threshold_is_configurable(self, well_formed_docs):
        well_formed_docs["/notes.md"] = "The database stores rows."
        strict = DocumentationValidator(config=ValidationConfig(pass_threshold=100))
        result = strict.validate(well_formed_docs)
        assert result.score == 100
        assert result.is_valid

        well_formed_docs["/SETUP.md"] = "# Setup\n\nNo steps and no code."
        result = strict.validate(well_formed_docs)
        assert result.score < 100
        assert not result.is_valid

    @pytest.mark.unit
    def test_custom_rules_replace_defaults(self, well_formed_docs):
        rule = _CountingRule()
        result = DocumentationValidator(rules=[rule]).validate(well_formed_docs)
        assert result.metrics.clarity == 25
        assert result.metrics.completeness == 0
        assert result.score == 25
        assert not result.is_valid

    @pytest.mark.unit
    def test_never_raises_on_odd_content(self):
        docs = {"/README.md": "```\nunterminated", "/x": "???!!!...", "/y": "#"}
        result = validate_documentation(docs)
        assert 0 <= result.score <= 100
