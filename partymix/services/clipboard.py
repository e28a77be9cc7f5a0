"""Clipboard access via pyperclip."""

import logging

import pyperclip

from partymix.exceptions import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """
    Put `text` on the system clipboard.

    Raises:
        ClipboardError: if no clipboard mechanism is available or the write fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(
            f"Clipboard write failed: {e}",
            details={"type": type(e).__name__}
        ) from e

    logger.info(f"Copied {len(text)} characters to clipboard")
