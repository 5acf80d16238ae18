"""Morse Code Translator Skill — encode/decode Morse code."""

import logging
from typing import Any, Dict

from Dotty.core.morse import decode, encode
from Dotty.core.utils.tool_helpers import tool_response, tool_wrapper, validate_params

logger = logging.getLogger(__name__)

MAX_INPUT_LENGTH = 100_000

_SCHEMA = {
    "action": {"type": str, "choices": ["encode", "decode"]},
    "text": {"type": str, "max_length": MAX_INPUT_LENGTH},
    "morse": {"type": str, "max_length": MAX_INPUT_LENGTH},
}


@tool_wrapper(required_params=["action"])
def morse_tool(params: Dict[str, Any]) -> Dict[str, Any]:
    """Encode text to Morse code or decode Morse to text."""
    error = validate_params(params, _SCHEMA)
    if error:
        return error

    action = params["action"]
    # Input under the other direction's key (e.g. "input" -> text for a
    # decode) is still the input to convert.
    text_param = params.get("text")
    morse_param = params.get("morse")

    if action == "encode":
        text = (text_param if text_param is not None else morse_param) or ""
        morse = encode(text)
        logger.debug(f"Encoded {len(text)} chars to {len(morse)} chars of Morse")
        return tool_response(text=text, morse=morse)

    morse = (morse_param if morse_param is not None else text_param) or ""
    text = decode(morse)
    logger.debug(f"Decoded {len(morse)} chars of Morse to {len(text)} chars")
    return tool_response(morse=morse, text=text)


__all__ = ["morse_tool"]
