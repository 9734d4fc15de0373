from app.state import ViewState


def test_toggle_student_selects_and_deselects():
    state = ViewState()
    assert state.toggle_student("a@x") == "a@x"
    assert state.toggle_student("b@x") == "b@x"
    assert state.toggle_student("b@x") is None
    assert state.selected_student is None


def test_notify_and_clear_message():
    state = ViewState()
    state.notify("Unable to load submissions", error=True)
    assert state.is_error
    state.clear_message()
    assert state.message == ""
    assert not state.is_error
