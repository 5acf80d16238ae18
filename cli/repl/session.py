"""
Converter Session
=================

Mode and view state for the interactive converter.

The session decides which direction is active, clears its transient
state when the direction changes, and hands every input to the engine.
It owns no conversion logic.
"""

import logging
from enum import Enum
from typing import Optional, Union

from ...core.morse import decode, encode
from ..ui.clipboard import ClipboardWriter

logger = logging.getLogger(__name__)


class ConversionMode(Enum):
    """Direction of conversion."""
    ENCODE = "encode"   # text -> Morse
    DECODE = "decode"   # Morse -> text

    @property
    def opposite(self) -> "ConversionMode":
        return ConversionMode.DECODE if self is ConversionMode.ENCODE else ConversionMode.ENCODE


class ConverterSession:
    """
    Mutable view state for one converter UI.

    Attributes:
        mode: Active conversion direction
        input_text: Last input handed to the engine
        output_text: Result of the last conversion
        copy_status: Transient message from the last clipboard request
    """

    def __init__(self, mode: Union[ConversionMode, str] = ConversionMode.ENCODE) -> None:
        self.mode = ConversionMode(mode)
        self.input_text = ""
        self.output_text = ""
        self.copy_status: Optional[str] = None
        self._generation = 0

    def set_mode(self, mode: Union[ConversionMode, str]) -> bool:
        """
        Switch direction, clearing input, output and copy status.

        Returns:
            True if the mode changed
        """
        mode = ConversionMode(mode)
        if mode is self.mode:
            return False
        self.mode = mode
        self.clear()
        logger.debug(f"Switched to {mode.value} mode")
        return True

    def toggle_mode(self) -> ConversionMode:
        """Switch to the opposite direction."""
        self.set_mode(self.mode.opposite)
        return self.mode

    def update(self, text: str) -> str:
        """Convert text in the active direction and keep the result."""
        self.input_text = text
        self.copy_status = None
        self._generation += 1
        if self.mode is ConversionMode.ENCODE:
            self.output_text = encode(text)
        else:
            self.output_text = decode(text)
        return self.output_text

    def clear(self) -> None:
        """Reset transient input/output state."""
        self.input_text = ""
        self.output_text = ""
        self.copy_status = None
        self._generation += 1

    def copy_output(self, writer: ClipboardWriter):
        """
        Request a clipboard copy of the current output.

        The copy runs in the background. Its outcome only sets copy_status,
        and is dropped if the session was cleared or switched meanwhile.

        Returns:
            The clipboard worker thread, or None if there is nothing to copy
        """
        if not self.output_text:
            self.copy_status = "Nothing to copy"
            return None

        generation = self._generation
        self.copy_status = "Copying..."

        def _done(ok: bool, message: str) -> None:
            if generation == self._generation:
                self.copy_status = message
            if not ok:
                logger.info(message)

        return writer.copy(self.output_text, callback=_done)
