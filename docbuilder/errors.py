"""Exceptions raised by Docbuilder.

Generation and validation never raise for bad content; these cover the few
operations that can genuinely refuse a request.
"""

from __future__ import annotations


class DocBuilderError(Exception):
    """Base class for every error raised by Docbuilder."""


class EmptySelectionError(DocBuilderError):
    """Raised when documentation is requested without any selected component."""

    def __init__(self) -> None:
        super().__init__("Please select at least one component")


class ExportError(DocBuilderError):
    """Raised when a documentation map cannot be exported or loaded."""
