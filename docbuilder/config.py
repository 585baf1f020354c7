"""Docbuilder configuration.

Centralised, typed configuration for the generator, validator and exporter.
All settings use Pydantic v2 models so they can be validated at construction
time and serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from docbuilder.catalog.models import TechStack


class ExportFormat(str, Enum):
    """Supported export formats."""
    JSON = "json"
    MARKDOWN = "markdown"
    FILES = "files"


class ValidationConfig(BaseModel):
    """Thresholds used by the documentation validator and its report."""

    pass_threshold: int = Field(
        default=80, ge=0, le=100, description="Minimum total score for a map to be valid"
    )
    novice_min_clarity: int = Field(
        default=20, ge=0, le=25, description="Clarity needed to pass the novice test"
    )
    novice_min_verifiability: int = Field(
        default=16, ge=0, le=20, description="Verifiability needed to pass the novice test"
    )
    max_report_warnings: int = Field(
        default=10, ge=0, description="How many warnings the markdown report lists"
    )


class DocBuilderConfig(BaseModel):
    """Global Docbuilder configuration.

    Instances are typically created once by the CLI entry point (or by
    ``AppController``) and then passed through the rest of the system.
    """

    project_name: str = Field(default="My Project")
    output_dir: Path = Field(default=Path("./output"))
    export_format: ExportFormat = Field(default=ExportFormat.JSON)
    default_stack: TechStack = Field(default_factory=TechStack)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def report_path(self) -> Path:
        """Path of the validation report."""
        return self.output_dir / "quality-report.md"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/docbuilder.json``.

        Returns:
            The resolved path where the file was written.
        """
        target = path or (self.output_dir / "docbuilder.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "DocBuilderConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "DocBuilderConfig":
        """Build a ``DocBuilderConfig`` from environment variables.

        Recognised variables (all optional):
            DOCBUILDER_PROJECT_NAME, DOCBUILDER_OUTPUT_DIR,
            DOCBUILDER_EXPORT_FORMAT, DOCBUILDER_FRONTEND,
            DOCBUILDER_BACKEND, DOCBUILDER_DATABASE,
            DOCBUILDER_PASS_THRESHOLD.
        """
        stack_kwargs: dict[str, Any] = {}
        if os.environ.get("DOCBUILDER_FRONTEND"):
            stack_kwargs["frontend"] = os.environ["DOCBUILDER_FRONTEND"]
        if os.environ.get("DOCBUILDER_BACKEND"):
            stack_kwargs["backend"] = os.environ["DOCBUILDER_BACKEND"]
        if os.environ.get("DOCBUILDER_DATABASE"):
            stack_kwargs["database"] = os.environ["DOCBUILDER_DATABASE"]

        validation_kwargs: dict[str, Any] = {}
        if os.environ.get("DOCBUILDER_PASS_THRESHOLD"):
            validation_kwargs["pass_threshold"] = int(os.environ["DOCBUILDER_PASS_THRESHOLD"])

        return cls(
            project_name=os.environ.get("DOCBUILDER_PROJECT_NAME", "My Project"),
            output_dir=Path(os.environ.get("DOCBUILDER_OUTPUT_DIR", "./output")),
            export_format=ExportFormat(os.environ.get("DOCBUILDER_EXPORT_FORMAT", "json")),
            default_stack=TechStack(**stack_kwargs),
            validation=ValidationConfig(**validation_kwargs),
        )
