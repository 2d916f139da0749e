"""Centralized environment configuration management for prettyfit.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from prettyfit.config import EnvVar, get_environment
    >>>
    >>> width = get_environment(EnvVar.WIDTH)  # Returns int
    >>> width = get_environment(EnvVar.WIDTH, override=40)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "PRETTYFIT_WIDTH").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by prettyfit.

    Categories:
        - layout: Rendering defaults
        - debug: Diagnostics and opt-in checks
    """

    # -------------------------------------------------------------------------
    # Layout Defaults
    # -------------------------------------------------------------------------
    WIDTH = EnvConfig(
        name="PRETTYFIT_WIDTH",
        default=80,
        var_type=int,
        description="Default target line width in columns",
        category="layout",
    )
    INDENT = EnvConfig(
        name="PRETTYFIT_INDENT",
        default=2,
        var_type=int,
        description="Indentation step used by the S-expression formatter",
        category="layout",
    )

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------
    VERIFY_CHOICES = EnvConfig(
        name="PRETTYFIT_VERIFY_CHOICES",
        default=False,
        var_type=bool,
        description="Check that both branches of every choice flatten alike",
        category="debug",
    )
    LOG_LEVEL = EnvConfig(
        name="PRETTYFIT_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Log level used by the command line (DEBUG, INFO, ...)",
        category="debug",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int or bool).

    Example:
        >>> get_environment(EnvVar.WIDTH)
        80
        >>> get_environment(EnvVar.WIDTH, override=40)
        40
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_default_width(override: int | None = None) -> int:
    """Get the default rendering width.

    Resolution: override > PRETTYFIT_WIDTH > 80
    """
    return get_environment(EnvVar.WIDTH, override=override)


def get_default_indent(override: int | None = None) -> int:
    """Get the default indentation step."""
    return get_environment(EnvVar.INDENT, override=override)


def is_choice_verification_enabled() -> bool:
    """Whether PRETTYFIT_VERIFY_CHOICES asks for Choice verification."""
    return bool(get_environment(EnvVar.VERIFY_CHOICES))


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (layout, debug).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


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
