"""
Utils Layer - Helpers shared by skills
======================================
"""

from .tool_helpers import (
    PARAM_ALIASES,
    normalize_param_aliases,
    require_params,
    tool_error,
    tool_response,
    tool_wrapper,
    validate_params,
)

__all__ = [
    "PARAM_ALIASES",
    "normalize_param_aliases",
    "require_params",
    "tool_error",
    "tool_response",
    "tool_wrapper",
    "validate_params",
]
