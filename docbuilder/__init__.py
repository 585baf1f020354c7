"""Docbuilder: project documentation generator and quality checker."""

__version__ = "0.1.0"
