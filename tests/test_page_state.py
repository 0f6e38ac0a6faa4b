"""Tests for the page view state machine."""
import pytest

from page_state import InvalidTransition, PageState, ViewState


@pytest.mark.parametrize("target", [ViewState.ERROR, ViewState.EMPTY, ViewState.POPULATED])
def test_loading_resolves_to_outcome(target):
    assert PageState().move_to(target).status is target


def test_save_success_cycle():
    state = PageState(ViewState.POPULATED)
    state.move_to(ViewState.SAVING).move_to(ViewState.SUCCESS).move_to(ViewState.POPULATED)
    assert state.status is ViewState.POPULATED


def test_save_failure_returns_to_form():
    state = PageState(ViewState.POPULATED)
    state.move_to(ViewState.SAVING).move_to(ViewState.ERROR).move_to(ViewState.POPULATED)
    assert state.status is ViewState.POPULATED


def test_load_error_is_terminal():
    state = PageState().move_to(ViewState.ERROR)
    with pytest.raises(InvalidTransition):
        state.move_to(ViewState.POPULATED)


@pytest.mark.parametrize("start,target", [
    (ViewState.LOADING, ViewState.SAVING),
    (ViewState.EMPTY, ViewState.SAVING),
    (ViewState.POPULATED, ViewState.SUCCESS),
    (ViewState.SAVING, ViewState.POPULATED),
])
def test_other_transitions_rejected(start, target):
    with pytest.raises(InvalidTransition):
        PageState(start).move_to(target)

