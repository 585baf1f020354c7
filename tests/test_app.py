"""Unit tests for application state transitions and the controller (docbuilder.app)."""

from __future__ import annotations

from pathlib import Path

import pytest

from docbuilder.app import (
    AppController,
    AppState,
    AppView,
    StartMode,
    authenticate,
    back_to_dashboard,
    complete_interview,
    complete_selection,
    dismiss_auth_prompt,
    edit_document,
    get_started,
    record_answer,
    remove_component,
    set_project_name,
    set_tech_stack,
    start_project,
    toggle_component,
)
from docbuilder.catalog import Answer, TechStack
from docbuilder.config import DocBuilderConfig, ExportFormat
from docbuilder.errors import EmptySelectionError, ExportError
from docbuilder.generator import FIXED_DOCUMENTS


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class TestNavigation:
    @pytest.mark.unit
    def test_initial_state(self):
        state = AppState()
        assert state.view == AppView.LANDING
        assert not state.is_authenticated
        assert state.project_name == "My Project"

    @pytest.mark.unit
    def test_get_started_prompts_for_sign_in(self):
        state = get_started(AppState())
        assert state.view == AppView.LANDING
        assert state.auth_prompt_open

    @pytest.mark.unit
    def test_authenticate_always_succeeds(self):
        state = authenticate(get_started(AppState()), "ada@example.com", "whatever")
        assert state.is_authenticated
        assert state.user_email == "ada@example.com"
        assert state.view == AppView.DASHBOARD
        assert not state.auth_prompt_open

    @pytest.mark.unit
    def test_get_started_when_signed_in(self):
        state = get_started(back_to_dashboard(authenticate(AppState())))
        assert state.view == AppView.DASHBOARD

    @pytest.mark.unit
    def test_dismiss_prompt(self):
        assert not dismiss_auth_prompt(get_started(AppState())).auth_prompt_open

    @pytest.mark.unit
    def test_start_project_modes(self):
        signed_in = authenticate(AppState())
        assert start_project(signed_in).view == AppView.COMPONENT_SELECTION
        assert start_project(signed_in, "interview").view == AppView.INTERVIEW

    @pytest.mark.unit
    def test_start_project_resets_work(self):
        state = toggle_component(AppState(), "basic-auth")
        state = edit_document(state, "/README.md", "# Old")
        state = start_project(state, StartMode.COMPONENTS)
        assert state.selected_ids == ()
        assert state.documentation == {}

    @pytest.mark.unit
    def test_transitions_do_not_mutate(self):
        original = AppState()
        toggle_component(original, "basic-auth")
        assert original.selected_ids == ()


class TestSelection:
    @pytest.mark.unit
    def test_toggle_adds_then_removes(self):
        state = toggle_component(AppState(), "basic-auth")
        state = toggle_component(state, "rest-api")
        assert state.selected_ids == ("basic-auth", "rest-api")
        state = toggle_component(state, "basic-auth")
        assert state.selected_ids == ("rest-api",)

    @pytest.mark.unit
    def test_remove_component(self):
        state = toggle_component(AppState(), "basic-auth")
        assert remove_component(state, "basic-auth").selected_ids == ()
        assert remove_component(state, "absent").selected_ids == ("basic-auth",)

    @pytest.mark.unit
    def test_set_tech_stack(self):
        state = set_tech_stack(AppState(), TechStack(frontend="vue"))
        assert state.tech_stack.frontend == "vue"

    @pytest.mark.unit
    def test_set_project_name_ignores_blank(self):
        state = set_project_name(AppState(), "  Acme  ")
        assert state.project_name == "Acme"
        assert set_project_name(state, "   ").project_name == "Acme"

    @pytest.mark.unit
    def test_complete_selection_requires_components(self):
        with pytest.raises(EmptySelectionError, match="Please select at least one component"):
            complete_selection(AppState(), {"/README.md": "# x"})

    @pytest.mark.unit
    def test_complete_selection(self):
        state = complete_selection(toggle_component(AppState(), "basic-auth"), {"/README.md": "# x"})
        assert state.view == AppView.DOCUMENTATION
        assert state.documentation == {"/README.md": "# x"}


class TestInterview:
    @pytest.mark.unit
    def test_record_answer_replaces_same_question(self):
        state = record_answer(AppState(), Answer(question_id="frontend", selected_options=["vue"]))
        state = record_answer(state, Answer(question_id="backend", selected_options=["go"]))
        state = record_answer(state, Answer(question_id="frontend", selected_options=["svelte"]))
        assert [a.question_id for a in state.answers] == ["backend", "frontend"]
        assert state.answers[-1].selected_options == ["svelte"]

    @pytest.mark.unit
    def test_complete_interview(self):
        state = complete_interview(AppState(), {"/project/overview.md": "# P"})
        assert state.view == AppView.DOCUMENTATION

    @pytest.mark.unit
    def test_edit_document(self):
        state = complete_interview(AppState(), {"/a.md": "old"})
        edited = edit_document(state, "/a.md", "new")
        assert edited.documentation == {"/a.md": "new"}
        assert state.documentation == {"/a.md": "old"}


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


@pytest.fixture
def controller(tmp_path: Path) -> AppController:
    config = DocBuilderConfig(project_name="Acme Portal", output_dir=tmp_path / "out")
    return AppController(config, quiet=True)


class TestAppController:
    @pytest.mark.unit
    def test_uses_config_defaults(self, controller):
        assert controller.state.project_name == "Acme Portal"
        assert controller.state.tech_stack == TechStack()

    @pytest.mark.unit
    def test_component_flow(self, controller, auth_docs):
        controller.get_started()
        controller.sign_in("ada@example.com")
        controller.start_project()
        controller.toggle_component("basic-auth")
        docs = controller.complete_selection()
        assert docs == auth_docs
        assert controller.state.view == AppView.DOCUMENTATION
        assert controller.state.documentation == auth_docs

    @pytest.mark.unit
    def test_empty_selection_raises(self, controller):
        controller.start_project()
        with pytest.raises(EmptySelectionError):
            controller.complete_selection()
        assert controller.state.view == AppView.COMPONENT_SELECTION

    @pytest.mark.unit
    def test_unknown_only_selection_yields_fixed_docs(self, controller):
        controller.toggle_component("ghost")
        assert list(controller.complete_selection()) == list(FIXED_DOCUMENTS)

    @pytest.mark.unit
    def test_interview_flow(self, controller, answers):
        controller.start_project(StartMode.INTERVIEW)
        for answer in answers:
            controller.record_answer(answer)
        docs = controller.complete_interview()
        assert len(docs) == 4
        assert docs["/project/overview.md"].startswith("# Acme Portal")

    @pytest.mark.unit
    def test_validate_and_export(self, controller, tmp_path):
        controller.toggle_component("basic-auth")
        controller.complete_selection()
        result = controller.validate()
        assert not result.critical_errors

        path = controller.export()
        assert path == tmp_path / "out" / "documentation.json"
        md = controller.export(ExportFormat.MARKDOWN, tmp_path / "md")
        assert md.read_text(encoding="utf-8").startswith("# /README.md")

    @pytest.mark.unit
    def test_clashing_edit_fails_files_export(self, controller, tmp_path):
        controller.toggle_component("basic-auth")
        controller.complete_selection()
        controller.edit_document("/README.md/extra.md", "# Extra")
        with pytest.raises(ExportError):
            controller.export(ExportFormat.FILES, tmp_path / "files")
        assert not (tmp_path / "files" / "README.md").exists()

    @pytest.mark.unit
    def test_progress_reported(self, tmp_path, capsys):
        controller = AppController(DocBuilderConfig(output_dir=tmp_path))
        controller.toggle_component("basic-auth")
        controller.complete_selection()
        out = capsys.readouterr().out
        assert "Documentation generated" in out
        assert "58" in out
