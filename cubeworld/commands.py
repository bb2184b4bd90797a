"""Commands that react to window events and drive the world."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Protocol

from cubeworld.linalg import perspective
from cubeworld.world import World

RELEASE = 0
PRESS = 1
REPEAT = 2

MOUSE_BUTTON_1 = 0

KEY_A = 65
KEY_D = 68
KEY_E = 69
KEY_Q = 81
KEY_S = 83
KEY_W = 87

_KEY_NAMES = {
    KEY_A: "a",
    KEY_S: "s",
    KEY_D: "d",
    KEY_W: "w",
    KEY_Q: "q",
    KEY_E: "e",
}

_MAX_LOOK_DELTA = 25


class _Window(Protocol):
    width: int
    height: int

    def add_keypress_listener(self, listener: Callable[[int, int, int, int], None]) -> None: ...

    def add_pulse_listener(self, listener: Callable[[float], None]) -> None: ...

    def add_mouse_button_listener(self, listener: Callable[[int, int, int], None]) -> None: ...

    def add_framebuffer_resize_listener(self, listener: Callable[[int, int], None]) -> None: ...

    def cursor_pos(self) -> tuple[float, float]: ...

    def set_cursor_pos(self, x: float, y: float) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...


class Command:
    """Base for commands bound to a world and the window it is shown in."""

    def __init__(self, world: World, window: _Window) -> None:
        self.world = world
        self.window = window


class Mover(Command):
    """Moves the camera while the a, s, d, w, q or e keys are held."""

    def __init__(self, world: World, window: _Window) -> None:
        super().__init__(world, window)
        self.keys = {name: False for name in "aswdqe"}
        window.add_keypress_listener(self.on_keypress)
        window.add_pulse_listener(self.on_pulse)

    def on_keypress(self, key: int, scancode: int, action: int, mods: int) -> None:
        """Record whether a movement key is down."""
        name = _KEY_NAMES.get(key)
        if name is not None:
            self.keys[name] = action != RELEASE

    def on_pulse(self, elapsed: float) -> None:
        """Move for every held key and refresh the view matrix."""
        camera = self.world.camera
        moves = (
            ("a", camera.strafe_left),
            ("s", camera.move_backward),
            ("d", camera.strafe_right),
            ("w", camera.move_forward),
            ("q", camera.move_up),
            ("e", camera.move_down),
        )
        for name, move in moves:
            if self.keys[name]:
                move(elapsed)
        self.world.matrix_stack.top_view()[:] = camera.view()


class Looker(Command):
    """Mouse look, toggled by clicking the first mouse button."""

    def __init__(self, world: World, window: _Window) -> None:
        super().__init__(world, window)
        self.mouse_look = False
        window.add_pulse_listener(self.on_pulse)
        window.add_mouse_button_listener(self.on_mouse_button)

    def _center(self) -> tuple[int, int]:
        return self.window.width // 2, self.window.height // 2

    def on_pulse(self, elapsed: float) -> None:
        """Yaw and pitch by the cursor's offset from the centre, then recentre it."""
        if not self.mouse_look:
            return
        x, y = self.window.cursor_pos()
        cent_x, cent_y = self._center()
        delta_x = max(-_MAX_LOOK_DELTA, min(_MAX_LOOK_DELTA, x - cent_x))
        delta_y = max(-_MAX_LOOK_DELTA, min(_MAX_LOOK_DELTA, y - cent_y))
        camera = self.world.camera
        camera.yaw(elapsed, int(delta_x))
        camera.pitch(elapsed, int(delta_y))
        self.window.set_cursor_pos(cent_x, cent_y)

    def center_cursor(self) -> None:
        """Move the cursor to the centre of the window."""
        self.window.set_cursor_pos(*self._center())

    def on_mouse_button(self, button: int, action: int, mods: int) -> None:
        """Toggle mouse look when the first button is pressed."""
        if button != MOUSE_BUTTON_1 or action != PRESS:
            return
        self.center_cursor()
        if self.mouse_look:
            self.window.show_cursor()
        else:
            self.window.hide_cursor()
        self.mouse_look = not self.mouse_look


class Renderer(Command):
    """Draws the world on every pulse."""

    def __init__(self, world: World, window: _Window) -> None:
        super().__init__(world, window)
        window.add_pulse_listener(self.on_pulse)

    def on_pulse(self, elapsed: float) -> None:
        """Draw the world."""
        self.world.draw(elapsed)


class ViewManager(Command):
    """Keeps the projection matrix in step with the window size."""

    def __init__(self, world: World, window: _Window) -> None:
        super().__init__(world, window)
        window.add_framebuffer_resize_listener(self.on_resize)
        self.on_resize(window.width, window.height)

    def on_resize(self, width: int, height: int) -> None:
        """Set a 60 degree perspective projection for the new size."""
        if height == 0:
            raise ValueError("height must be non-zero")
        stack = self.world.matrix_stack
        stack.top_projection()[:] = perspective(
            math.pi / 3, float(width) / float(height), 0.01, 1000.0
        )
        stack.top_view()[:] = self.world.camera.view()