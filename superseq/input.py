"""Controller state: which buttons were pressed this frame."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from enum import Enum


class Direction(Enum):
    """One of the eight directions a pad or stick can point."""

    UP = "up"
    UP_RIGHT = "up_right"
    RIGHT = "right"
    DOWN_RIGHT = "down_right"
    DOWN = "down"
    DOWN_LEFT = "down_left"
    LEFT = "left"
    UP_LEFT = "up_left"


class NavigationAxis(Enum):
    """Which control a widget is navigated with."""

    STICK = "stick"
    DPAD = "dpad"
    C_BUTTONS = "c_buttons"


@dataclass(frozen=True)
class Buttons:
    """The set of buttons pressed in one frame."""

    a: bool = False
    b: bool = False
    z: bool = False
    start: bool = False
    d_up: bool = False
    d_down: bool = False
    d_left: bool = False
    d_right: bool = False
    l: bool = False  # noqa: E741
    r: bool = False
    c_up: bool = False
    c_down: bool = False
    c_left: bool = False
    c_right: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Buttons:
        """Build a button set from button names such as ``"a"`` or ``"d_up"``."""
        known = {f.name for f in fields(cls)}
        pressed = {}
        for name in names:
            key = name.strip().lower()
            if key not in known:
                raise ValueError(f"unknown button: {name!r}")
            pressed[key] = True
        return replace(cls(), **pressed)


_DIRECTION_BUTTONS = {
    Direction.UP: "d_up",
    Direction.DOWN: "d_down",
    Direction.LEFT: "d_left",
    Direction.RIGHT: "d_right",
}


class InputState:
    """Holds the buttons pressed since the last poll."""

    def __init__(self) -> None:
        self.pressed = Buttons()

    def update(self, buttons: Buttons) -> None:
        """Record the buttons pressed in the new frame."""
        self.pressed = buttons

    def direction_pressed(
        self, direction: Direction, axis: NavigationAxis | None = None
    ) -> bool:
        """Whether the d-pad was pressed in ``direction`` this frame.

        The axis is accepted for every navigation kind but the d-pad answers
        for all of them; diagonals are never reported.
        """
        button = _DIRECTION_BUTTONS.get(direction)
        if button is None:
            return False
        return getattr(self.pressed, button)