"""
Tool Helpers
============

Standardized helpers for skill tool functions.
Every tool takes a params dict and returns a response dict with a
``success`` flag, so callers never need to catch exceptions.

Usage:
    from Dotty.core.utils.tool_helpers import (
        tool_response, tool_error, validate_params, tool_wrapper
    )

    @tool_wrapper(required_params=['action'])
    def my_tool(params: Dict[str, Any]) -> Dict[str, Any]:
        error = validate_params(params, {'text': {'type': str}})
        if error:
            return error

        return tool_response(text=params['text'])
"""

import logging
import functools
from typing import Dict, Any, List, Optional, Callable

logger = logging.getLogger(__name__)

# Alternative names callers commonly use for canonical params.
PARAM_ALIASES: Dict[str, List[str]] = {
    'text': ['message', 'input', 'plain_text', 'content'],
    'morse': ['code', 'morse_code', 'signal'],
    'action': ['mode', 'operation', 'direction'],
}


def normalize_param_aliases(params: Dict[str, Any]) -> None:
    """Resolve param aliases in-place.

    Mutates *params*: if a canonical key is missing but an alias is
    present, the alias is popped and assigned to the canonical key.
    """
    for canonical, aliases in PARAM_ALIASES.items():
        if canonical in params:
            continue
        for alias in aliases:
            if alias in params:
                params[canonical] = params.pop(alias)
                break


def tool_response(data: Optional[Dict[str, Any]] = None, **kwargs: Any) -> Dict[str, Any]:
    """
    Create a successful tool response.

    Args:
        data: Optional dict of response data
        **kwargs: Additional fields to include

    Returns:
        Dict with success=True and provided data
    """
    result = {"success": True}
    if data:
        result.update(data)
    result.update(kwargs)
    return result


def tool_error(error: str, code: Optional[str] = None, **kwargs: Any) -> Dict[str, Any]:
    """
    Create an error tool response.

    Args:
        error: Error message
        code: Optional error code
        **kwargs: Additional fields

    Returns:
        Dict with success=False and error details
    """
    result = {"success": False, "error": error}
    if code:
        result["code"] = code
    result.update(kwargs)
    return result


def require_params(
    params: Dict[str, Any],
    required: List[str]
) -> Optional[Dict[str, Any]]:
    """
    Validate required parameters.

    Args:
        params: Parameters dict
        required: List of required parameter names

    Returns:
        Error dict if validation fails, None if valid
    """
    for param in required:
        if not params.get(param):
            return tool_error(f"{param} parameter is required", code="missing_param")
    return None


def validate_params(
    params: Dict[str, Any],
    schema: Dict[str, Dict[str, Any]]
) -> Optional[Dict[str, Any]]:
    """
    Validate parameters against schema.

    Args:
        params: Parameters dict
        schema: Validation schema like:
            {
                'text': {'required': True, 'type': str, 'max_length': 10000},
                'action': {'choices': ['encode', 'decode']}
            }

    Returns:
        Error dict if validation fails, None if valid
    """
    for name, rules in schema.items():
        value = params.get(name)

        if rules.get('required', False) and value is None:
            return tool_error(f"{name} parameter is required", code="missing_param")

        if value is None:
            continue

        expected_type = rules.get('type')
        if expected_type and not isinstance(value, expected_type):
            return tool_error(f"{name} must be {expected_type.__name__}", code="invalid_param")

        choices = rules.get('choices')
        if choices and value not in choices:
            return tool_error(
                f"Unknown {name}: {value}. Use: {', '.join(choices)}",
                code="invalid_param"
            )

        if isinstance(value, str):
            if 'max_length' in rules and len(value) > rules['max_length']:
                return tool_error(
                    f"{name} cannot exceed {rules['max_length']} characters",
                    code="invalid_param"
                )

    return None


def tool_wrapper(
    required_params: Optional[List[str]] = None,
    log_errors: bool = True
) -> Callable:
    """
    Decorator for tool functions with automatic error handling.

    Args:
        required_params: List of required parameter names
        log_errors: Whether to log exceptions

    Usage:
        @tool_wrapper(required_params=['action'])
        def morse_tool(params: Dict[str, Any]) -> Dict[str, Any]:
            # No need for try/except or param validation
            action = params['action']
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(params: Dict[str, Any]) -> Dict[str, Any]:
            try:
                normalize_param_aliases(params)

                if required_params:
                    error = require_params(params, required_params)
                    if error:
                        return error

                return func(params)

            except Exception as e:
                if log_errors:
                    logger.error(f"{func.__name__} error: {e}", exc_info=True)
                return tool_error(f"Failed to execute {func.__name__}: {str(e)}")

        # Stash required_params for introspection
        wrapper._required_params = required_params or []
        return wrapper
    return decorator
