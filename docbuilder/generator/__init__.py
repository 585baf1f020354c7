"""Documentation generators.

Two flows share one output contract, a mapping of virtual path to markdown:

Usage::

    from docbuilder.generator import generate_documentation
    from docbuilder.catalog import TechStack

    docs = generate_documentation(["basic-auth"], TechStack(), "Acme Portal")
    print(docs["/README.md"])
"""

from docbuilder.generator.component_docs import (
    FIXED_DOCUMENTS,
    ComponentDocGenerator,
    generate_documentation,
)
from docbuilder.generator.context import ResolvedTechnology, SelectionFlags, infer_flags
from docbuilder.generator.interview_docs import INTERVIEW_DOCUMENTS, InterviewDocGenerator
from docbuilder.generator.strategy import (
    ComponentStrategy,
    GenerationStrategy,
    InterviewStrategy,
    generate_from_strategy,
    parse_strategy,
)
from docbuilder.generator.templates import TemplateRenderer

__all__ = [
    "ComponentDocGenerator",
    "ComponentStrategy",
    "FIXED_DOCUMENTS",
    "GenerationStrategy",
    "INTERVIEW_DOCUMENTS",
    "InterviewDocGenerator",
    "InterviewStrategy",
    "ResolvedTechnology",
    "SelectionFlags",
    "TemplateRenderer",
    "generate_documentation",
    "generate_from_strategy",
    "infer_flags",
    "parse_strategy",
]
