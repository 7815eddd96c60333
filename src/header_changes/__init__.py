"""
Top-level package for header_changes.

This package exposes the change detection pipeline via
:mod:`header_changes.versioning` and the CLI entry point via the
``header_changes.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
