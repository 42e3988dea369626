"""Clipboard access with read-back verification.

Requires `pyperclip` for cross-platform clipboard access.
"""

from __future__ import annotations

import logging

from common.exceptions import ClipboardError

try:
    import pyperclip  # type: ignore[import-not-found]
except Exception:  # noqa: BLE001
    pyperclip = None  # type: ignore[assignment]


logger = logging.getLogger(__name__)


def get_clip_text() -> str:
    if pyperclip is None:
        raise ClipboardError("pyperclip is not installed. Run: pip install pyperclip")
    try:
        return str(pyperclip.paste())
    except Exception as ex:  # noqa: BLE001
        raise ClipboardError(f"Failed to verify clipboard: {ex}") from ex


def copy_to_clipboard(text: str) -> None:
    """Place text on the clipboard and confirm it reads back unchanged.

    Raises:
        ClipboardError: If the backend is missing, the write fails, or the
            clipboard holds something else afterwards.
    """
    if pyperclip is None:
        raise ClipboardError("pyperclip is not installed. Run: pip install pyperclip")
    try:
        pyperclip.copy(text)
    except Exception as ex:  # noqa: BLE001
        raise ClipboardError(f"Failed to write to clipboard: {ex}") from ex

    if get_clip_text() != text:
        raise ClipboardError("Failed to verify clipboard contents")
    logger.debug(f"Copied {len(text)} chars to clipboard")
