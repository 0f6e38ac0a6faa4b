# db/cancellation.py

from __future__ import annotations

import threading
import uuid

from db.errors import QueryCancelled


class CancellationToken:
    """Shared flag between a page render and the queries it issues.

    Streamlit runs each script execution in its own thread, so the flag is
    a threading.Event rather than a plain bool.
    """

    def __init__(self):
        self.id = uuid.uuid4().hex
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise QueryCancelled(self.id)

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"<CancellationToken {self.id[:8]} {state}>"
