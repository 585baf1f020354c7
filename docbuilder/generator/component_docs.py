"""Component-flow documentation generator.

Turns a component selection, a tech stack and a project name into the full
documentation map: every fixed top-level guide (rendered from the Jinja2
templates under ``templates/docs/``) plus a bundle of files per selected
component.
"""

from __future__ import annotations

from typing import Iterable, Optional

from docbuilder.catalog.components import resolve_components
from docbuilder.catalog.models import BoilerplateComponent, ComponentSelection, TechStack
from docbuilder.generator.context import build_context
from docbuilder.generator.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fixed documents
# ---------------------------------------------------------------------------

USER_FRIENDLY_DOCUMENTS: tuple[str, ...] = (
    "/README.md",
    "/SETUP.md",
    "/TROUBLESHOOTING.md",
    "/ARCHITECTURE.md",
    "/FAQ.md",
    "/.env.example",
)

GUIDE_DOCUMENTS: tuple[str, ...] = (
    "/project/overview.md",
    "/project/requirements.md",
    "/project/goals-and-constraints.md",
    "/project/stakeholders.md",
    "/architecture/context-and-scope.md",
    "/architecture/solution-strategy.md",
    "/architecture/building-blocks.md",
    "/architecture/runtime-view.md",
    "/architecture/deployment-view.md",
    "/architecture/cross-cutting-concerns.md",
    "/api/overview.md",
    "/api/endpoints.md",
    "/api/authentication.md",
    "/api/errors.md",
    "/frontend/components.md",
    "/frontend/routing.md",
    "/frontend/state-management.md",
    "/frontend/forms.md",
    "/frontend/styling.md",
    "/backend/business-logic.md",
    "/backend/data-access.md",
    "/backend/validation.md",
    "/backend/background-jobs.md",
    "/backend/caching.md",
    "/backend/error-handling.md",
    "/testing/strategy.md",
    "/testing/unit-tests.md",
    "/testing/integration-tests.md",
    "/testing/e2e-tests.md",
    "/deployment/environments.md",
    "/deployment/ci-cd.md",
    "/deployment/monitoring.md",
    "/deployment/backup-recovery.md",
    "/security/overview.md",
    "/security/data-protection.md",
    "/security/compliance.md",
    "/design/ui-ux.md",
    "/design/user-flows.md",
    "/integrations/third-party.md",
    "/integrations/api-clients.md",
    "/development/setup.md",
    "/development/coding-standards.md",
    "/development/git-workflow.md",
    "/development/troubleshooting.md",
)

FIXED_DOCUMENTS: tuple[str, ...] = USER_FRIENDLY_DOCUMENTS + GUIDE_DOCUMENTS


def template_for(path: str) -> str:
    """Map a fixed document path to its template (``/api/errors.md`` -> ``docs/api/errors.md.j2``)."""
    if path == "/.env.example":
        return "docs/env.example.j2"
    return f"docs{path}.j2"


def component_base_path(component: BoilerplateComponent) -> str:
    return f"/components/{component.category.value}/{component.id}"


# ---------------------------------------------------------------------------
# ComponentDocGenerator
# ---------------------------------------------------------------------------


class ComponentDocGenerator:
    """Generates the component-flow documentation map.

    Generation is a pure query: the same inputs always produce the same map,
    unknown component ids are skipped and unknown stack keys degrade to
    generic text instead of raising.
    """

    def __init__(self, renderer: Optional[TemplateRenderer] = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(
        self,
        selected_ids: Iterable[str],
        stack: Optional[TechStack] = None,
        project_name: str = "My Project",
    ) -> dict[str, str]:
        """Build the documentation map for a selection.

        Args:
            selected_ids: Component ids in selection order.  Unknown ids are
                dropped and repeated ids are kept once.
            stack: Frontend/backend/database choice.  Defaults to
                React + Node.js + PostgreSQL.
            project_name: Display name substituted into every document.

        Returns:
            Mapping of absolute virtual path to markdown content.
        """
        components = resolve_components(dict.fromkeys(selected_ids))
        context = build_context(components, stack or TechStack(), project_name)

        docs: dict[str, str] = {}
        for path in FIXED_DOCUMENTS:
            docs[path] = self.renderer.render(template_for(path), context)

        for component in components:
            docs.update(self._component_documents(component))

        return docs

    def generate_for(self, selection: ComponentSelection) -> dict[str, str]:
        """Convenience wrapper taking a :class:`ComponentSelection`."""
        return self.generate(
            selection.component_ids, selection.tech_stack, selection.project_name
        )

    # ------------------------------------------------------------------
    # Per-component documents
    # ------------------------------------------------------------------

    def _component_documents(self, component: BoilerplateComponent) -> dict[str, str]:
        base = component_base_path(component)
        doc = component.documentation

        files: dict[str, str] = {
            f"{base}.md": doc.overview,
            f"{base}/implementation.md": self._implementation(component),
            f"{base}/architecture.md": doc.architecture,
            f"{base}/security.md": doc.security,
            f"{base}/testing.md": doc.testing,
            f"{base}/configuration.md": doc.configuration,
        }
        if doc.api_endpoints:
            files[f"{base}/api-endpoints.md"] = self.renderer.render(
                "component/api-endpoints.md.j2", {"component": component}
            )
        if doc.database_schema:
            files[f"{base}/database-schema.md"] = doc.database_schema
        return files

    @staticmethod
    def _implementation(component: BoilerplateComponent) -> str:
        # First sample in insertion order; it is not matched to the chosen stack.
        for sample in component.documentation.technical_implementation.values():
            return sample
        return f"# {component.name} Implementation\n\nNo implementation sample is available yet.\n"


def generate_documentation(
    selected_ids: Iterable[str],
    stack: Optional[TechStack] = None,
    project_name: str = "My Project",
) -> dict[str, str]:
    """Module-level shortcut for :meth:`ComponentDocGenerator.generate`."""
    return ComponentDocGenerator().generate(selected_ids, stack, project_name)
