"""Static catalog data: components, technology maps and interview questions."""

from docbuilder.catalog.components import (
    estimate_hours,
    find_conflicts,
    get_all_categories,
    get_all_components,
    get_component_by_id,
    get_components_by_category,
    missing_dependencies,
    resolve_components,
)
from docbuilder.catalog.interview import INTERVIEW_SECTIONS, all_questions, get_question
from docbuilder.catalog.models import (
    Answer,
    APIEndpoint,
    BoilerplateComponent,
    ComponentCategory,
    ComponentDocumentation,
    ComponentSelection,
    Complexity,
    Question,
    QuestionType,
    Section,
    SelectionOption,
    TechnologyMap,
    TechStack,
)
from docbuilder.catalog.technology import (
    BACKEND_OPTIONS,
    DATABASE_OPTIONS,
    FRONTEND_OPTIONS,
    get_backend,
    get_database,
    get_frontend,
)

__all__ = [
    "APIEndpoint",
    "Answer",
    "BACKEND_OPTIONS",
    "BoilerplateComponent",
    "ComponentCategory",
    "ComponentDocumentation",
    "ComponentSelection",
    "Complexity",
    "DATABASE_OPTIONS",
    "FRONTEND_OPTIONS",
    "INTERVIEW_SECTIONS",
    "Question",
    "QuestionType",
    "Section",
    "SelectionOption",
    "TechStack",
    "TechnologyMap",
    "all_questions",
    "estimate_hours",
    "find_conflicts",
    "get_all_categories",
    "get_all_components",
    "get_backend",
    "get_component_by_id",
    "get_components_by_category",
    "get_database",
    "get_frontend",
    "get_question",
    "missing_dependencies",
    "resolve_components",
]
