"""
A simple finite state machine (FSM) for the game's screens.
"""

import logging

LOG = logging.getLogger(__name__)


class State:
    """Base class for a screen state."""
    def __init__(self, game):
        self.game = game

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def enter(self):
        """Code to execute when entering this state."""
        pass

    def exit(self):
        """Code to execute when exiting this state."""
        pass

    def update(self, dt: float):
        """Advance one fixed step."""
        pass

    def draw(self):
        pass

    def on_mouse_press(self, x, y, button, modifiers):
        pass

    def on_mouse_release(self, x, y, button, modifiers):
        pass

    def on_mouse_motion(self, x, y, dx, dy):
        pass

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        pass

    def on_key_press(self, symbol, modifiers):
        pass

    def on_resize(self, width, height):
        pass


class StateMachine:
    """Holds the registered states and forwards window events to the active one."""
    def __init__(self, initial_state: State | None = None):
        self.current_state = None
        self._states = {}
        if initial_state:
            self.add_state(initial_state)
            self.set_state(initial_state.name)

    def add_state(self, state: State):
        self._states[state.name] = state

    def get_state(self, state_name: str) -> State:
        state = self._states.get(state_name)
        if state is None:
            raise ValueError(f"State '{state_name}' not found.")
        return state

    def set_state(self, state_name: str):
        """Transitions to a new state."""
        new_state = self.get_state(state_name)
        if self.current_state:
            self.current_state.exit()
        LOG.debug(
            "Screen %s -> %s",
            self.current_state.name if self.current_state else None,
            state_name,
        )
        self.current_state = new_state
        self.current_state.enter()

    def update(self, dt: float):
        if self.current_state:
            self.current_state.update(dt)

    def draw(self):
        if self.current_state:
            self.current_state.draw()

    def on_mouse_press(self, x, y, button, modifiers):
        if self.current_state:
            self.current_state.on_mouse_press(x, y, button, modifiers)

    def on_mouse_release(self, x, y, button, modifiers):
        if self.current_state:
            self.current_state.on_mouse_release(x, y, button, modifiers)

    def on_mouse_motion(self, x, y, dx, dy):
        if self.current_state:
            self.current_state.on_mouse_motion(x, y, dx, dy)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        if self.current_state:
            self.current_state.on_mouse_drag(x, y, dx, dy, buttons, modifiers)

    def on_key_press(self, symbol, modifiers):
        if self.current_state:
            self.current_state.on_key_press(symbol, modifiers)

    def on_resize(self, width, height):
        for state in self._states.values():
            state.on_resize(width, height)
