import pytest

from superseq.input import Buttons, Direction, InputState, NavigationAxis


def test_from_names_sets_only_named_buttons():
    buttons = Buttons.from_names(["a", "d_left"])
    assert buttons.a is True
    assert buttons.d_left is True
    assert buttons.b is False
    assert buttons.d_right is False


def test_from_names_is_case_insensitive():
    assert Buttons.from_names([" C_Right "]) == Buttons(c_right=True)


def test_from_names_empty_is_nothing_pressed():
    assert Buttons.from_names([]) == Buttons()


def test_from_names_rejects_unknown():
    with pytest.raises(ValueError):
        Buttons.from_names(["turbo"])


def test_fresh_state_has_no_direction_pressed():
    state = InputState()
    assert not any(state.direction_pressed(d) for d in Direction)


@pytest.mark.parametrize(
    "name, direction",
    [
        ("d_up", Direction.UP),
        ("d_down", Direction.DOWN),
        ("d_left", Direction.LEFT),
        ("d_right", Direction.RIGHT),
    ],
)
def test_direction_follows_dpad(name, direction):
    state = InputState()
    state.update(Buttons.from_names([name]))
    pressed = [d for d in Direction if state.direction_pressed(d)]
    assert pressed == [direction]


def test_axis_does_not_change_answer():
    state = InputState()
    state.update(Buttons(d_up=True))
    assert state.direction_pressed(Direction.UP, NavigationAxis.STICK) is True
    assert state.direction_pressed(Direction.UP, NavigationAxis.DPAD) is True


def test_diagonal_never_reported():
    state = InputState()
    state.update(Buttons(d_up=True, d_right=True))
    assert state.direction_pressed(Direction.UP_RIGHT) is False


def test_update_replaces_previous_frame():
    state = InputState()
    state.update(Buttons(d_down=True))
    state.update(Buttons())
    assert state.direction_pressed(Direction.DOWN) is False
    assert state.pressed == Buttons()