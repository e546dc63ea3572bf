"""Frame-based keyboard and mouse state."""

from __future__ import annotations

from typing import Sequence

from sibox.keys import KEY_COUNT, MOUSE_BUTTON_COUNT

Vector2 = tuple[float, float]


def _check_key(key: int) -> int:
    value = int(key)
    if not 0 <= value < KEY_COUNT:
        raise ValueError(f"scancode {value} out of range [0, {KEY_COUNT})")
    return value


def _check_button(button: int) -> int:
    value = int(button)
    if not 0 <= value <= MOUSE_BUTTON_COUNT:
        raise ValueError(f"mouse button {value} out of range [0, {MOUSE_BUTTON_COUNT}]")
    return value


def _vector(values: Sequence[float]) -> Vector2:
    x, y = values
    return (float(x), float(y))


class Input:
    """Tracks key and mouse button state for the current and previous frame.

    While ``keyboard_captured`` (or ``mouse_captured``) is set, for example
    because a user interface has focus, every keyboard (or mouse) query
    reports ``False``.
    """

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._previous_keys: frozenset[int] = frozenset()
        self._buttons: set[int] = set()
        self._previous_buttons: frozenset[int] = frozenset()
        self.mouse_position: Vector2 = (0.0, 0.0)
        self.mouse_delta: Vector2 = (0.0, 0.0)
        self.keyboard_captured = False
        self.mouse_captured = False

    def pre_update(self) -> None:
        """Start a new frame: remember the current state and clear the mouse delta."""
        self._previous_keys = frozenset(self._keys)
        self._previous_buttons = frozenset(self._buttons)
        self.mouse_delta = (0.0, 0.0)

    def set_key(self, key: int, down: bool) -> None:
        value = _check_key(key)
        if down:
            self._keys.add(value)
        else:
            self._keys.discard(value)

    def set_mouse_button(self, button: int, down: bool) -> None:
        value = _check_button(button)
        if down:
            self._buttons.add(value)
        else:
            self._buttons.discard(value)

    def move_mouse(self, position: Sequence[float], delta: Sequence[float]) -> None:
        """Record a mouse motion; deltas within one frame accumulate."""
        self.mouse_position = _vector(position)
        dx, dy = _vector(delta)
        self.mouse_delta = (self.mouse_delta[0] + dx, self.mouse_delta[1] + dy)

    def _key_states(self, key: int) -> tuple[bool, bool]:
        value = _check_key(key)
        return value in self._keys, value in self._previous_keys

    def _button_states(self, button: int) -> tuple[bool, bool]:
        value = _check_button(button)
        return value in self._buttons, value in self._previous_buttons

    def is_key_down(self, key: int) -> bool:
        now, _ = self._key_states(key)
        return not self.keyboard_captured and now

    def is_key_down_this_frame(self, key: int) -> bool:
        now, before = self._key_states(key)
        return not self.keyboard_captured and now and not before

    def is_key_up(self, key: int) -> bool:
        now, _ = self._key_states(key)
        return not self.keyboard_captured and not now

    def is_key_up_this_frame(self, key: int) -> bool:
        now, before = self._key_states(key)
        return not self.keyboard_captured and not now and before

    def is_mouse_button_down(self, button: int) -> bool:
        now, _ = self._button_states(button)
        return not self.mouse_captured and now

    def is_mouse_button_down_this_frame(self, button: int) -> bool:
        now, before = self._button_states(button)
        return not self.mouse_captured and now and not before

    def is_mouse_button_up(self, button: int) -> bool:
        now, _ = self._button_states(button)
        return not self.mouse_captured and not now

    def is_mouse_button_up_this_frame(self, button: int) -> bool:
        now, before = self._button_states(button)
        return not self.mouse_captured and not now and before