"""Unit tests for interview sections and questions (docbuilder.catalog.interview)."""

from __future__ import annotations

import pytest

from docbuilder.catalog import INTERVIEW_SECTIONS, QuestionType, all_questions, get_question


class TestInterviewSections:
    @pytest.mark.unit
    def test_section_order(self):
        assert [s.id for s in INTERVIEW_SECTIONS] == ["vision", "tech", "features", "quality"]

    @pytest.mark.unit
    def test_question_ids_unique(self):
        ids = [q.id for q in all_questions()]
        assert len(ids) == len(set(ids))

    @pytest.mark.unit
    def test_all_questions_flattened_in_order(self):
        ids = [q.id for q in all_questions()]
        assert ids[:5] == ["purpose", "target-users", "frontend", "backend", "database"]
        assert "monitoring" in ids


class TestQuestions:
    @pytest.mark.unit
    def test_get_question(self):
        question = get_question("auth")
        assert question is not None
        assert question.type == QuestionType.MULTIPLE
        assert question.allow_details

    @pytest.mark.unit
    def test_get_question_unknown(self):
        assert get_question("favourite-colour") is None

    @pytest.mark.unit
    def test_option_label(self):
        question = get_question("frontend")
        assert question.option_label("vue") == "Vue.js"

    @pytest.mark.unit
    def test_option_label_unknown_id_returned_verbatim(self):
        question = get_question("frontend")
        assert question.option_label("elm") == "elm"
