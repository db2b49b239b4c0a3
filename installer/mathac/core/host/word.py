"""Word's Math AutoCorrect table through COM automation (pywin32).

pywin32 is only importable on Windows, so the COM modules are imported when
a connection is opened rather than at module load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mathac.config import settings
from mathac.core.errors import EntryNotFoundError, HostConnectionError
from mathac.core.host.base import AutoCorrectStore

logger = logging.getLogger(__name__)


class WordAutoCorrectStore(AutoCorrectStore):
    """``Application.OMathAutoCorrect.Entries`` of a running Word instance."""

    def __init__(self, app):
        self._app = app

    @property
    def _collection(self):
        return self._app.OMathAutoCorrect.Entries

    def entries(self) -> Iterator[tuple[str, str]]:
        for entry in self._collection:
            yield str(entry.Name), str(entry.Value)

    def _item(self, name: str):
        try:
            return self._collection.Item(name)
        except Exception as e:  # com_error: no entry with that name
            raise EntryNotFoundError(name) from e

    def get(self, name: str) -> str:
        return str(self._item(name).Value)

    def add(self, name: str, value: str) -> None:
        self._collection.Add(name, value)

    def delete(self, name: str) -> None:
        self._item(name).Delete()


@contextmanager
def open_word_store(prog_id: str | None = None, visible: bool | None = None):
    """Start a private Word instance and yield its Math AutoCorrect store.

    Word is quit and COM uninitialized on exit, whether or not the body
    raised. Failure to start Word raises ``HostConnectionError``.
    """
    prog_id = prog_id or settings.WORD_PROG_ID
    visible = settings.WORD_VISIBLE if visible is None else visible

    try:
        import pythoncom
        import win32com.client
    except ImportError as e:
        raise HostConnectionError(f"pywin32 (win32com) not available: {e}") from e

    pythoncom.CoInitialize()
    app = None
    try:
        try:
            # DispatchEx starts a separate instance instead of attaching to the user's Word
            app = win32com.client.DispatchEx(prog_id)
            app.Visible = visible
        except Exception as e:
            raise HostConnectionError(f"Could not start {prog_id}: {e}") from e
        logger.info("Connected to Word application.")
        yield WordAutoCorrectStore(app)
    finally:
        if app is not None:
            try:
                app.Quit()
            except Exception as e:
                logger.warning("Failed to quit Word cleanly: %s", e)
            app = None
        pythoncom.CoUninitialize()
