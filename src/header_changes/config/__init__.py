"""
Configuration loading for header_changes.

Provides a simple loader for the optional configuration file located in
the repository root. See :mod:`header_changes.config.loader` for
implementation details.
"""

from .loader import ConfigError, find_config, load_config  # noqa: F401
