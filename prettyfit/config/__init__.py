"""Centralized configuration management for prettyfit.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from prettyfit.config import EnvVar, get_environment
    >>>
    >>> width = get_environment(EnvVar.WIDTH)  # Returns int: 80
    >>> width = get_environment(EnvVar.WIDTH, override=40)
    >>>
    >>> for var in list_environment_variables("layout"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    layout: Rendering defaults (width, indentation step)
    debug: Diagnostics (Choice verification, CLI log level)
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Convenience functions
    get_default_indent,
    get_default_width,
    # Main interface
    get_environment,
    get_environment_info,
    is_choice_verification_enabled,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_default_width",
    "get_default_indent",
    "is_choice_verification_enabled",
    # Introspection
    "list_environment_variables",
]
