"""Clipboard access via pyperclip."""

import logging

import pyperclip

from passgen import PassgenError

logger = logging.getLogger(__name__)


class ClipboardUnavailable(PassgenError):
    """No clipboard backend could be reached."""


def copy_to_clipboard(text: str) -> None:
    """Put *text* on the system clipboard."""
    if not text:
        raise ValueError("Nothing to copy")

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailable(str(exc)) from exc

    logger.debug("Copied %d characters to the clipboard", len(text))
