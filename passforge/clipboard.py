"""
Clipboard integration for generated passwords.
"""

import logging
import threading
import time
from typing import Optional

import pyperclip

from .exceptions import ClipboardError

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_AFTER = 60


def copy_to_clipboard(text: str,
                      clear_after: int = DEFAULT_CLEAR_AFTER) -> Optional[threading.Thread]:
    """
    Copy text to the system clipboard.

    The auto-clear runs in a daemon thread; callers that exit right away
    must join it or the clear never happens.

    Args:
        text: Text to copy
        clear_after: Seconds before the clipboard is cleared (0 keeps it)

    Returns:
        The started auto-clear thread, or None if no clear was scheduled

    Raises:
        ClipboardError: If the clipboard backend is unavailable or fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e

    if clear_after <= 0:
        return None

    clear_thread = threading.Thread(
        target=clear_clipboard, args=(text, clear_after), daemon=True
    )
    clear_thread.start()
    return clear_thread


def clear_clipboard(text: str, delay: float = 0) -> None:
    """Clear the clipboard after delay, unless it was changed meanwhile."""
    if delay > 0:
        time.sleep(delay)
    try:
        if pyperclip.paste() == text:
            pyperclip.copy("")
    except pyperclip.PyperclipException as e:
        logger.debug(f"Could not clear clipboard: {e}")
