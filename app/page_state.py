from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViewState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"
    SAVING = "saving"
    SUCCESS = "success"


_TRANSITIONS = {
    ViewState.LOADING: {ViewState.ERROR, ViewState.EMPTY, ViewState.POPULATED},
    ViewState.POPULATED: {ViewState.SAVING},
    ViewState.SAVING: {ViewState.SUCCESS, ViewState.ERROR},
    ViewState.SUCCESS: {ViewState.POPULATED},
    ViewState.ERROR: set(),
    ViewState.EMPTY: set(),
}


class InvalidTransition(Exception):
    pass


@dataclass
class PageState:
    status: ViewState = ViewState.LOADING
    previous: Optional[ViewState] = None

    def can_move_to(self, target: ViewState) -> bool:
        if target in _TRANSITIONS[self.status]:
            return True
        # A failed save falls back to the populated form; a failed load does not
        return (
            self.status is ViewState.ERROR
            and self.previous is ViewState.SAVING
            and target is ViewState.POPULATED
        )

    def move_to(self, target: ViewState) -> "PageState":
        if not self.can_move_to(target):
            raise InvalidTransition(f"{self.status.value} -> {target.value}")
        self.previous, self.status = self.status, target
        return self
