"""Unit tests for the individual quality rules (docbuilder.validator.rules)."""

from __future__ import annotations

import pytest

from docbuilder.validator import (
    ClarityRule,
    CompletenessRule,
    ErrorType,
    ExamplesRule,
    OrganizationRule,
    Severity,
    VerifiabilityRule,
    WarningType,
)
from docbuilder.validator.rules import strip_code_blocks


# ---------------------------------------------------------------------------
# Clarity
# ---------------------------------------------------------------------------


class TestClarityRule:
    @pytest.mark.unit
    def test_clean_prose_scores_full(self):
        assert ClarityRule().check("/a.md", "# Title\n\nPlain words here.").score == 25

    @pytest.mark.unit
    def test_unexplained_term_penalised(self):
        outcome = ClarityRule().check("/a.md", "The database stores rows.")
        assert outcome.score == 24
        assert outcome.warnings[0].type == WarningType.JARGON
        assert '"database"' in outcome.warnings[0].message

    @pytest.mark.unit
    def test_explained_term_not_penalised(self):
        outcome = ClarityRule().check("/a.md", "A database is where rows live.")
        assert outcome.score == 25

    @pytest.mark.unit
    def test_parenthetical_explanation(self):
        outcome = ClarityRule().check("/a.md", "Add a webhook (a callback URL) now.")
        assert outcome.score == 25

    @pytest.mark.unit
    def test_terms_inside_code_ignored(self):
        content = "Run this:\n\n```\ncurl the database endpoint\n```\n"
        assert ClarityRule().check("/a.md", content).score == 25

    @pytest.mark.unit
    def test_term_match_is_case_insensitive_and_whole_word(self):
        assert ClarityRule().check("/a.md", "Check the Cookie jar.").score == 24
        assert ClarityRule().check("/a.md", "Check the cookies jar.").score == 25

    @pytest.mark.unit
    def test_long_paragraph_penalised(self):
        outcome = ClarityRule().check("/a.md", "One. Two. Three. Four. Five. Six.")
        assert outcome.score == 24
        assert outcome.warnings[0].type == WarningType.LONG_PARAGRAPH

    @pytest.mark.unit
    def test_five_sentences_allowed(self):
        assert ClarityRule().check("/a.md", "One. Two. Three. Four. Five.").score == 25

    @pytest.mark.unit
    def test_score_floor_is_zero(self):
        paragraph = "One. Two. Three. Four. Five. Six."
        content = "\n\n".join([paragraph] * 30)
        assert ClarityRule().check("/a.md", content).score == 0

    @pytest.mark.unit
    def test_strip_code_blocks(self):
        assert strip_code_blocks("a\n```\ncode\n```\nb") == "a\n\nb"


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------


class TestCompletenessRule:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path, content",
        [
            ("/README.md", "## Quick Start"),
            ("/README.md", "## Getting Started"),
            ("/SETUP.md", "Step 1: install"),
            ("/SETUP.md", "## 1. Install"),
            ("/TROUBLESHOOTING.md", "### ❌ Error: port in use"),
            ("/TROUBLESHOOTING.md", "Common issues"),
        ],
    )
    def test_section_present(self, path, content):
        outcome = CompletenessRule().check(path, content)
        assert outcome.score == 25
        assert outcome.errors == []

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["/README.md", "/SETUP.md", "/TROUBLESHOOTING.md"])
    def test_section_missing(self, path):
        outcome = CompletenessRule().check(path, "# Nothing useful")
        assert outcome.score == 20
        assert outcome.errors[0].severity == Severity.HIGH
        assert outcome.errors[0].type == ErrorType.MISSING_EXPLANATION

    @pytest.mark.unit
    def test_exact_path_only(self):
        assert CompletenessRule().check("/docs/README.md", "# Nothing").score == 25


# ---------------------------------------------------------------------------
# Verifiability
# ---------------------------------------------------------------------------


class TestVerifiabilityRule:
    @pytest.mark.unit
    def test_steps_without_indicators(self):
        outcome = VerifiabilityRule().check("/SETUP.md", "## 1 Install\n\n## 2 Run\n")
        assert outcome.score == 15
        assert outcome.warnings[0].message == "Only 0 success indicators for 2 steps"

    @pytest.mark.unit
    def test_half_the_steps_is_enough(self):
        content = "Step 1\n\nStep 2\n\n✅ Success: it runs\n"
        assert VerifiabilityRule().check("/SETUP.md", content).score == 20

    @pytest.mark.unit
    def test_every_match_counts(self):
        content = (
            "Step 1\n\nStep 2\n\nStep 3\n\nStep 4\n\n"
            "You should now have a folder.\n\nYou should now have a server.\n"
        )
        assert VerifiabilityRule().check("/README.md", content).score == 20

    @pytest.mark.unit
    def test_other_paths_ignored(self):
        assert VerifiabilityRule().check("/FAQ.md", "## 1 A\n## 2 B\n").score == 20

    @pytest.mark.unit
    def test_no_steps(self):
        assert VerifiabilityRule().check("/SETUP.md", "# Setup\n").score == 20


# ---------------------------------------------------------------------------
# Examples
# ---------------------------------------------------------------------------


class TestExamplesRule:
    @pytest.mark.unit
    def test_missing_code_block(self):
        outcome = ExamplesRule().check("/SETUP.md", "# Setup\n\nJust prose.")
        assert outcome.score == 10
        assert outcome.warnings[0].message == "No code examples found"

    @pytest.mark.unit
    def test_placeholder_values(self):
        outcome = ExamplesRule().check("/README.md", "```\nconst foo = 1\n```")
        assert outcome.score == 13

    @pytest.mark.unit
    def test_realistic_code(self):
        assert ExamplesRule().check("/ARCHITECTURE.md", "```\nnpm start\n```").score == 15

    @pytest.mark.unit
    def test_placeholder_outside_code_ignored(self):
        assert ExamplesRule().check("/README.md", "For example:\n```\nnpm start\n```").score == 15

    @pytest.mark.unit
    def test_other_paths_ignored(self):
        assert ExamplesRule().check("/FAQ.md", "No code at all").score == 15


# ---------------------------------------------------------------------------
# Organization
# ---------------------------------------------------------------------------


class TestOrganizationRule:
    @pytest.mark.unit
    def test_short_document(self):
        assert OrganizationRule().check("/a.md", "tiny").score == 15

    @pytest.mark.unit
    def test_long_with_few_headers(self):
        content = "# Title\n\n" + "word " * 300
        assert OrganizationRule().check("/a.md", content).score == 12

    @pytest.mark.unit
    def test_very_long_without_toc(self):
        content = "# Title\n\n" + "word " * 700
        outcome = OrganizationRule().check("/a.md", content)
        assert outcome.score == 10
        assert len(outcome.warnings) == 2

    @pytest.mark.unit
    def test_very_long_with_toc_and_headers(self):
        content = "# Title\n\n## Table of Contents\n\n## Part\n\n" + "word " * 700
        assert OrganizationRule().check("/a.md", content).score == 15

    @pytest.mark.unit
    def test_section_headers_do_not_replace_toc(self):
        content = "# Title\n\n" + "".join(f"## Part {n}\n\nword word word\n\n" for n in range(200))
        outcome = OrganizationRule().check("/a.md", content)
        assert outcome.score == 13
        assert len(outcome.warnings) == 1
