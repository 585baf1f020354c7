"""Generation strategies.

Both generation flows share one output contract, a ``path -> markdown`` map.
A strategy is a tagged union discriminated on ``kind`` so callers (and JSON
payloads) can pick a flow without branching on types themselves.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from docbuilder.catalog.models import Answer, ComponentSelection
from docbuilder.generator.component_docs import ComponentDocGenerator
from docbuilder.generator.interview_docs import InterviewDocGenerator
from docbuilder.generator.templates import TemplateRenderer


class ComponentStrategy(BaseModel):
    """Generate from catalog components and a tech stack."""

    kind: Literal["components"] = "components"
    selection: ComponentSelection = Field(default_factory=ComponentSelection)


class InterviewStrategy(BaseModel):
    """Generate from interview answers."""

    kind: Literal["interview"] = "interview"
    answers: list[Answer] = Field(default_factory=list)
    project_name: str = Field(default="My Project")


GenerationStrategy = Annotated[
    Union[ComponentStrategy, InterviewStrategy],
    Field(discriminator="kind"),
]

_strategy_adapter: TypeAdapter[Any] = TypeAdapter(GenerationStrategy)


def parse_strategy(data: dict[str, Any]) -> Union[ComponentStrategy, InterviewStrategy]:
    """Validate a raw payload into the matching strategy model."""
    return _strategy_adapter.validate_python(data)


def generate_from_strategy(
    strategy: Union[ComponentStrategy, InterviewStrategy],
    renderer: Optional[TemplateRenderer] = None,
) -> dict[str, str]:
    """Run the generator selected by *strategy*."""
    if isinstance(strategy, InterviewStrategy):
        return InterviewDocGenerator(renderer).generate(
            strategy.answers, strategy.project_name
        )
    return ComponentDocGenerator(renderer).generate_for(strategy.selection)
