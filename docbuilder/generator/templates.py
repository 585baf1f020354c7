"""Jinja2 template rendering for generated documentation.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``docbuilder/generator/templates/`` directory and renders them with the
selection context built by :mod:`docbuilder.generator.context`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from docbuilder.utils import title_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates into markdown documents.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Output is plain markdown, so autoescaping is off.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["title_case"] = title_case
        self.env.filters["bullets"] = _bullets_filter

    # -- Rendering -----------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"docs/api/overview.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _bullets_filter(items: list[str], empty: str = "") -> str:
    """Render a list as markdown bullets, or *empty* when there are none."""
    if not items:
        return empty
    return "\n".join(f"- {item}" for item in items)
