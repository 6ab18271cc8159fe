"""Clipboard export"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the system clipboard

    Failures are logged and reported through the return value; the caller
    may simply try again.

    Args:
        text: Text to copy

    Returns:
        True if the clipboard was written
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to copy story to clipboard: {e}")
        return False

    logger.info(f"Copied {len(text)} characters to clipboard")
    return True
