"""Pydantic v2 models for the Docbuilder catalog.

Defines the component catalog entries, technology maps, tech stack selection
and the interview question/answer model shared by both generation flows.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ComponentCategory(str, Enum):
    """Fixed category tags for catalog components."""
    AUTHENTICATION = "authentication"
    DASHBOARD = "dashboard"
    DATA_MANAGEMENT = "data-management"
    PAYMENTS = "payments"
    API = "api"
    COMMUNICATION = "communication"
    CONTENT = "content"
    SOCIAL = "social"
    MOBILE = "mobile"
    GAMING = "gaming"
    ECOMMERCE = "ecommerce"
    ADMIN = "admin"
    SECURITY = "security"
    DEVOPS = "devops"


class Complexity(str, Enum):
    """Implementation difficulty tier of a component."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class QuestionType(str, Enum):
    """Whether an interview question accepts one or several options."""
    SINGLE = "single"
    MULTIPLE = "multiple"


# ---------------------------------------------------------------------------
# Component Models
# ---------------------------------------------------------------------------

class APIEndpoint(BaseModel):
    """An API endpoint documented by a component."""
    model_config = ConfigDict(frozen=True)

    method: str = Field(..., description="HTTP method, e.g. 'POST'")
    endpoint: str = Field(..., description="URL path, e.g. '/api/auth/login'")
    description: str = Field(default="", description="What this endpoint does")
    request: Optional[str] = Field(default=None, description="Sample request shape")
    response: Optional[str] = Field(default=None, description="Sample response shape")


class ComponentDocumentation(BaseModel):
    """The pre-written documentation bundle of a component."""
    model_config = ConfigDict(frozen=True)

    overview: str = Field(..., description="Overview markdown")
    technical_implementation: dict[str, str] = Field(
        default_factory=dict,
        description="Stack key -> implementation sample markdown, in insertion order",
    )
    architecture: str = Field(default="", description="Architecture markdown")
    api_endpoints: list[APIEndpoint] = Field(
        default_factory=list, description="Endpoints exposed by the component"
    )
    database_schema: Optional[str] = Field(
        default=None, description="Database schema markdown, if the component has one"
    )
    security: str = Field(default="", description="Security markdown")
    testing: str = Field(default="", description="Testing markdown")
    configuration: str = Field(default="", description="Configuration markdown")


class BoilerplateComponent(BaseModel):
    """A catalog entry: one feature area with its documentation bundle."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable unique identifier, e.g. 'basic-auth'")
    name: str = Field(..., description="Display name")
    category: ComponentCategory = Field(..., description="Category tag")
    description: str = Field(default="", description="One-line description")
    icon: str = Field(default="", description="Emoji shown in listings")
    documentation: ComponentDocumentation
    dependencies: list[str] = Field(
        default_factory=list, description="Component ids this one requires"
    )
    recommended_with: list[str] = Field(
        default_factory=list, description="Component ids that pair well with this one"
    )
    conflicts: list[str] = Field(
        default_factory=list, description="Component ids that should not co-occur (advisory)"
    )
    complexity: Complexity = Field(default=Complexity.INTERMEDIATE)
    estimated_hours: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Technology Models
# ---------------------------------------------------------------------------

class TechnologyMap(BaseModel):
    """Rationale and best practices for one technology choice."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    rationale: str
    best_practices: list[str] = Field(default_factory=list)
    patterns: dict[str, str] = Field(default_factory=dict)
    libraries: list[str] = Field(default_factory=list)


class TechStack(BaseModel):
    """The user's frontend/backend/database choice.

    Keys are not validated against the technology maps; unknown keys are
    rendered verbatim by the generator.
    """
    frontend: str = Field(default="react")
    backend: str = Field(default="nodejs")
    database: str = Field(default="postgresql")


class ComponentSelection(BaseModel):
    """Everything the component-flow generator needs."""
    component_ids: list[str] = Field(default_factory=list)
    tech_stack: TechStack = Field(default_factory=TechStack)
    project_name: str = Field(default="My Project")


# ---------------------------------------------------------------------------
# Interview Models
# ---------------------------------------------------------------------------

class SelectionOption(BaseModel):
    """A selectable option of an interview question."""
    id: str
    label: str
    icon: Optional[str] = None
    description: Optional[str] = None


class Question(BaseModel):
    """An interview question."""
    id: str
    title: str
    description: Optional[str] = None
    type: QuestionType = QuestionType.SINGLE
    options: list[SelectionOption] = Field(default_factory=list)
    allow_details: bool = False

    def option_label(self, option_id: str) -> str:
        """Return the label of *option_id*, or the id itself when unknown."""
        for option in self.options:
            if option.id == option_id:
                return option.label
        return option_id


class Section(BaseModel):
    """A group of interview questions shown as one wizard stage."""
    id: str
    title: str
    icon: str = ""
    questions: list[Question] = Field(default_factory=list)


class Answer(BaseModel):
    """The user's answer to one question."""
    question_id: str
    selected_options: list[str] = Field(default_factory=list)
    details: Optional[str] = None
