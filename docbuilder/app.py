"""Application state and controller.

``AppState`` is an immutable snapshot of one user session: which view is
active, the current selection or interview answers, and the generated
documentation.  Transitions are plain functions returning a new state, so
they can be tested without any I/O.

``AppController`` owns a single state, applies transitions, runs generation
and validation as stateless queries, and reports progress on the shared Rich
console.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from docbuilder.catalog.models import Answer, TechStack
from docbuilder.config import DocBuilderConfig, ExportFormat
from docbuilder.errors import EmptySelectionError
from docbuilder.export import write_export
from docbuilder.generator.component_docs import ComponentDocGenerator
from docbuilder.generator.interview_docs import InterviewDocGenerator
from docbuilder.utils import print_success, print_summary_table, print_warning
from docbuilder.validator import DocumentationValidator, ValidationResult


class AppView(str, Enum):
    LANDING = "landing"
    DASHBOARD = "dashboard"
    COMPONENT_SELECTION = "component-selection"
    INTERVIEW = "interview"
    DOCUMENTATION = "documentation"


class StartMode(str, Enum):
    COMPONENTS = "components"
    INTERVIEW = "interview"


class AppState(BaseModel):
    """Snapshot of a session."""

    model_config = ConfigDict(frozen=True)

    view: AppView = AppView.LANDING
    auth_prompt_open: bool = Field(default=False, description="Sign-in prompt is showing")
    is_authenticated: bool = False
    user_email: Optional[str] = None
    project_name: str = "My Project"
    selected_ids: tuple[str, ...] = ()
    tech_stack: TechStack = Field(default_factory=TechStack)
    answers: tuple[Answer, ...] = ()
    documentation: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def get_started(state: AppState) -> AppState:
    """Go to the dashboard, or ask the user to sign in first."""
    if state.is_authenticated:
        return state.model_copy(update={"view": AppView.DASHBOARD, "auth_prompt_open": False})
    return state.model_copy(update={"auth_prompt_open": True})


def authenticate(state: AppState, email: str = "", password: str = "") -> AppState:
    """Mock sign-in.  Any credentials are accepted."""
    return state.model_copy(update={
        "is_authenticated": True,
        "user_email": email or None,
        "auth_prompt_open": False,
        "view": AppView.DASHBOARD,
    })


def dismiss_auth_prompt(state: AppState) -> AppState:
    return state.model_copy(update={"auth_prompt_open": False})


def start_project(
    state: AppState, mode: Union[StartMode, str] = StartMode.COMPONENTS
) -> AppState:
    """Open a fresh selection or interview, discarding previous work."""
    view = (
        AppView.INTERVIEW if StartMode(mode) == StartMode.INTERVIEW else AppView.COMPONENT_SELECTION
    )
    return state.model_copy(update={
        "view": view,
        "selected_ids": (),
        "answers": (),
        "documentation": {},
    })


def toggle_component(state: AppState, component_id: str) -> AppState:
    """Select *component_id*, or deselect it when already selected."""
    if component_id in state.selected_ids:
        return remove_component(state, component_id)
    return state.model_copy(update={"selected_ids": state.selected_ids + (component_id,)})


def remove_component(state: AppState, component_id: str) -> AppState:
    remaining = tuple(cid for cid in state.selected_ids if cid != component_id)
    return state.model_copy(update={"selected_ids": remaining})


def set_tech_stack(state: AppState, stack: TechStack) -> AppState:
    return state.model_copy(update={"tech_stack": stack})


def set_project_name(state: AppState, name: str) -> AppState:
    return state.model_copy(update={"project_name": name.strip() or state.project_name})


def complete_selection(state: AppState, documentation: dict[str, str]) -> AppState:
    """Store generated documentation and show it.

    Raises:
        EmptySelectionError: If no component is selected.
    """
    if not state.selected_ids:
        raise EmptySelectionError()
    return state.model_copy(update={
        "view": AppView.DOCUMENTATION,
        "documentation": dict(documentation),
    })


def record_answer(state: AppState, answer: Answer) -> AppState:
    """Add *answer*, replacing any earlier answer to the same question."""
    kept = tuple(a for a in state.answers if a.question_id != answer.question_id)
    return state.model_copy(update={"answers": kept + (answer,)})


def complete_interview(state: AppState, documentation: dict[str, str]) -> AppState:
    return state.model_copy(update={
        "view": AppView.DOCUMENTATION,
        "documentation": dict(documentation),
    })


def edit_document(state: AppState, path: str, content: str) -> AppState:
    """Replace (or add) one document in the generated map."""
    updated = dict(state.documentation)
    updated[path] = content
    return state.model_copy(update={"documentation": updated})


def back_to_dashboard(state: AppState) -> AppState:
    return state.model_copy(update={"view": AppView.DASHBOARD})


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class AppController:
    """Drives one session from landing page to exported documentation.

    Args:
        config: Global configuration.  Supplies the initial project name,
            default stack, validation thresholds and export settings.
        quiet: Suppress console progress output.
    """

    def __init__(self, config: Optional[DocBuilderConfig] = None, quiet: bool = False) -> None:
        self.config = config or DocBuilderConfig()
        self.quiet = quiet
        self.state = AppState(
            project_name=self.config.project_name,
            tech_stack=self.config.default_stack,
        )
        self._component_generator = ComponentDocGenerator()
        self._interview_generator = InterviewDocGenerator(self._component_generator.renderer)
        self._validator = DocumentationValidator(config=self.config.validation)

    # ------------------------------------------------------------------
    # Navigation and selection
    # ------------------------------------------------------------------

    def get_started(self) -> AppState:
        self.state = get_started(self.state)
        return self.state

    def sign_in(self, email: str = "", password: str = "") -> AppState:
        self.state = authenticate(self.state, email, password)
        return self.state

    def start_project(self, mode: Union[StartMode, str] = StartMode.COMPONENTS) -> AppState:
        self.state = start_project(self.state, mode)
        return self.state

    def toggle_component(self, component_id: str) -> AppState:
        self.state = toggle_component(self.state, component_id)
        return self.state

    def remove_component(self, component_id: str) -> AppState:
        self.state = remove_component(self.state, component_id)
        return self.state

    def set_tech_stack(self, stack: TechStack) -> AppState:
        self.state = set_tech_stack(self.state, stack)
        return self.state

    def set_project_name(self, name: str) -> AppState:
        self.state = set_project_name(self.state, name)
        return self.state

    def record_answer(self, answer: Answer) -> AppState:
        self.state = record_answer(self.state, answer)
        return self.state

    def edit_document(self, path: str, content: str) -> AppState:
        self.state = edit_document(self.state, path, content)
        return self.state

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def complete_selection(self) -> dict[str, str]:
        """Generate documentation for the current selection.

        Raises:
            EmptySelectionError: If nothing is selected.
        """
        if not self.state.selected_ids:
            raise EmptySelectionError()

        docs = self._component_generator.generate(
            self.state.selected_ids, self.state.tech_stack, self.state.project_name
        )
        self.state = complete_selection(self.state, docs)
        self._report_generation(docs)
        return docs

    def complete_interview(self) -> dict[str, str]:
        docs = self._interview_generator.generate(self.state.answers, self.state.project_name)
        self.state = complete_interview(self.state, docs)
        self._report_generation(docs)
        return docs

    def validate(self) -> ValidationResult:
        """Validate the current documentation map."""
        return self._validator.validate(self.state.documentation)

    def export(
        self,
        fmt: Union[ExportFormat, str, None] = None,
        output_dir: Union[str, Path, None] = None,
    ) -> Path:
        """Write the current documentation using configured defaults."""
        if not self.state.documentation and not self.quiet:
            print_warning("No documentation has been generated yet; exporting an empty map")
        target = write_export(
            self.state.documentation,
            output_dir or self.config.output_dir,
            fmt or self.config.export_format,
        )
        if not self.quiet:
            print_success(f"Exported documentation to {target}")
        return target

    def _report_generation(self, docs: dict[str, str]) -> None:
        if self.quiet:
            return
        print_summary_table(
            {
                "Project": self.state.project_name,
                "Components": ", ".join(self.state.selected_ids) or "-",
                "Answers": str(len(self.state.answers)),
                "Files": str(len(docs)),
            },
            title="Documentation generated",
        )
