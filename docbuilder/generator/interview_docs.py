"""Interview-flow documentation generator.

Substitutes interview answers into four fixed documents.  Missing answers
fall back to generic filler text so the output map is always complete.
"""

from __future__ import annotations

from typing import Iterable, Optional

from docbuilder.catalog.interview import get_question
from docbuilder.catalog.models import Answer
from docbuilder.generator.templates import TemplateRenderer

INTERVIEW_DOCUMENTS: dict[str, str] = {
    "/project/overview.md": "interview/overview.md.j2",
    "/architecture/tech-stack.md": "interview/tech-stack.md.j2",
    "/security/authentication.md": "interview/authentication.md.j2",
    "/project/requirements.md": "interview/requirements.md.j2",
}

FALLBACK_PURPOSE = "A modern software application designed to solve specific user needs."
FALLBACK_TARGET_USERS = (
    "Our application serves a diverse user base with varying needs and technical expertise."
)
FALLBACK_FRONTEND = "React"
FALLBACK_BACKEND = "Node.js"
FALLBACK_DATABASE = "PostgreSQL"
FALLBACK_AUTH = "Email/Password"


def option_labels(answer: Optional[Answer]) -> list[str]:
    """Return the labels of the options selected in *answer*.

    Ids that the question does not define are returned unchanged.
    """
    if answer is None:
        return []
    question = get_question(answer.question_id)
    if question is None:
        return list(answer.selected_options)
    return [question.option_label(option_id) for option_id in answer.selected_options]


class InterviewDocGenerator:
    """Generates the interview-flow documentation map."""

    def __init__(self, renderer: Optional[TemplateRenderer] = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def generate(self, answers: Iterable[Answer], project_name: str) -> dict[str, str]:
        """Build the four interview documents.

        When several answers share a question id, the first one wins.
        """
        by_question: dict[str, Answer] = {}
        for answer in answers:
            by_question.setdefault(answer.question_id, answer)

        context = {
            "project_name": project_name,
            "purpose": self._free_text(by_question.get("purpose"), FALLBACK_PURPOSE),
            "target_users": self._free_text(
                by_question.get("target-users"), FALLBACK_TARGET_USERS
            ),
            "frontend": self._first_label(by_question.get("frontend"), FALLBACK_FRONTEND),
            "backend": self._first_label(by_question.get("backend"), FALLBACK_BACKEND),
            "database": self._first_label(by_question.get("database"), FALLBACK_DATABASE),
            "auth_methods": ", ".join(option_labels(by_question.get("auth"))) or FALLBACK_AUTH,
        }

        return {
            path: self.renderer.render(template, context)
            for path, template in INTERVIEW_DOCUMENTS.items()
        }

    # ------------------------------------------------------------------
    # Answer extraction
    # ------------------------------------------------------------------

    @staticmethod
    def _free_text(answer: Optional[Answer], fallback: str) -> str:
        """Prefer the free-text details, then the selected labels, then *fallback*."""
        if answer is not None and answer.details and answer.details.strip():
            return answer.details.strip()
        labels = option_labels(answer)
        if labels:
            return ", ".join(labels)
        return fallback

    @staticmethod
    def _first_label(answer: Optional[Answer], fallback: str) -> str:
        labels = option_labels(answer)
        return labels[0] if labels else fallback
