"""Shared pytest fixtures for the Docbuilder test suite.

Provides reusable fixtures for:
- A template renderer and both generators
- Generated documentation maps for common selections
- A small hand-written documentation map that passes validation
- Interview answers
"""

from __future__ import annotations

from pathlib import Path

import pytest

from docbuilder.catalog import Answer, TechStack
from docbuilder.generator import ComponentDocGenerator, InterviewDocGenerator, TemplateRenderer


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    """One renderer shared by the whole session (templates are read-only)."""
    return TemplateRenderer()


@pytest.fixture
def component_generator(renderer: TemplateRenderer) -> ComponentDocGenerator:
    return ComponentDocGenerator(renderer)


@pytest.fixture
def interview_generator(renderer: TemplateRenderer) -> InterviewDocGenerator:
    return InterviewDocGenerator(renderer)


# ---------------------------------------------------------------------------
# Documentation maps
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def auth_docs() -> dict[str, str]:
    """Documentation for basic-auth on the default stack."""
    return ComponentDocGenerator().generate(["basic-auth"], TechStack(), "Acme Portal")


@pytest.fixture(scope="session")
def full_docs() -> dict[str, str]:
    """Documentation for every catalog component on the default stack."""
    return ComponentDocGenerator().generate(
        ["basic-auth", "user-dashboard", "crud-operations", "stripe-integration", "rest-api"],
        TechStack(),
        "Acme Portal",
    )


@pytest.fixture
def well_formed_docs() -> dict[str, str]:
    """A minimal map that satisfies every rule for every file."""
    return {
        "/README.md": "# Demo\n\n## Quick Start\n\n```bash\nnpm install\n```\n",
        "/SETUP.md": (
            "# Setup\n\n"
            "Step 1: install the packages.\n\n"
            "```bash\nnpm install\n```\n\n"
            "✅ Success: you should see the prompt again.\n"
        ),
        "/TROUBLESHOOTING.md": "# Troubleshooting\n\nRestart the app and retry.\n",
        "/ARCHITECTURE.md": "# Architecture\n\n```text\nweb -> worker\n```\n",
        "/FAQ.md": "# FAQ\n\nAsk the team.\n",
        "/.env.example": "PORT=3000\n",
    }


@pytest.fixture
def docs_file(tmp_path: Path, auth_docs: dict[str, str]) -> Path:
    """``documentation.json`` for the basic-auth map, written to a temp dir."""
    from docbuilder.export import write_export

    return write_export(auth_docs, tmp_path / "out", "json")


# ---------------------------------------------------------------------------
# Interview answers
# ---------------------------------------------------------------------------

@pytest.fixture
def answers() -> list[Answer]:
    return [
        Answer(question_id="purpose", selected_options=["saas"], details="Invoice tracking for freelancers"),
        Answer(question_id="target-users", selected_options=["consumers", "businesses"]),
        Answer(question_id="frontend", selected_options=["vue"]),
        Answer(question_id="backend", selected_options=["python"]),
        Answer(question_id="database", selected_options=["mongodb"]),
        Answer(question_id="auth", selected_options=["email", "social"]),
    ]
