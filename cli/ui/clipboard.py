"""
Clipboard Writer
================

Copies text to the system clipboard through whichever command-line tool
the platform provides. Copies run on a daemon thread and report back
through a callback; conversions never wait on them.
"""

import logging
import subprocess
import threading
from typing import Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

CLIPBOARD_COMMANDS: List[List[str]] = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["pbcopy"],
    ["clip"],
]

CopyCallback = Callable[[bool, str], None]

NO_TOOL_MESSAGE = "No clipboard tool found (wl-copy/xclip/xsel/pbcopy)"


class ClipboardWriter:
    """
    Fire-and-forget clipboard writer.

    Args:
        commands: Candidate clipboard commands, tried in order
        timeout: Seconds to wait for a clipboard command to finish
    """

    def __init__(self, commands: Optional[Sequence[Sequence[str]]] = None, timeout: float = 5.0):
        self.commands = [list(cmd) for cmd in (commands or CLIPBOARD_COMMANDS)]
        self.timeout = timeout

    def _attempt(self, text: str) -> Tuple[bool, str]:
        """Try each command in turn and describe the outcome."""
        failure: Optional[str] = None
        for cmd in self.commands:
            name = cmd[0]
            try:
                proc = subprocess.Popen(
                    cmd,
                    stdin=subprocess.PIPE,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
                proc.communicate(text.encode("utf-8"), timeout=self.timeout)
            except FileNotFoundError:
                continue
            except subprocess.TimeoutExpired:
                proc.kill()
                proc.communicate()
                logger.debug(f"Clipboard command {name} timed out")
                failure = f"Clipboard command {name} timed out"
                continue
            except (OSError, subprocess.SubprocessError) as e:
                logger.debug(f"Clipboard command {name} failed: {e}")
                failure = f"Clipboard command {name} failed: {e}"
                continue

            if proc.returncode == 0:
                logger.debug(f"Copied {len(text)} chars with {name}")
                return True, "Copied to clipboard"
            logger.debug(f"Clipboard command {name} exited with {proc.returncode}")
            failure = f"Clipboard command {name} failed (exit {proc.returncode})"

        return False, failure or NO_TOOL_MESSAGE

    def copy_text(self, text: str) -> bool:
        """
        Copy text synchronously.

        Returns:
            True if a clipboard command accepted the text
        """
        return self._attempt(text)[0]

    def copy(self, text: str, callback: Optional[CopyCallback] = None) -> threading.Thread:
        """
        Copy text in the background.

        Args:
            text: Text to copy
            callback: Called with (ok, message) once the copy settles. The
                message tells a missing tool apart from one that failed.

        Returns:
            The started worker thread
        """
        def _worker() -> None:
            ok, message = self._attempt(text)
            if callback is not None:
                callback(ok, message)

        thread = threading.Thread(target=_worker, name="dotty-clipboard", daemon=True)
        thread.start()
        return thread
