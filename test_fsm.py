"""Screen state machine."""
import pytest

from fsm import State, StateMachine


class Recording(State):
    def __init__(self, game, log):
        super().__init__(game)
        self.log = log

    def enter(self):
        self.log.append(("enter", self.name))

    def exit(self):
        self.log.append(("exit", self.name))

    def on_resize(self, width, height):
        self.log.append(("resize", self.name, width, height))


class MenuState(Recording):
    pass


class PlayingState(Recording):
    pass


def test_transitions_call_exit_then_enter():
    log = []
    fsm = StateMachine(MenuState(None, log))
    fsm.add_state(PlayingState(None, log))
    fsm.set_state("PlayingState")
    assert log == [("enter", "MenuState"), ("exit", "MenuState"), ("enter", "PlayingState")]
    assert isinstance(fsm.current_state, PlayingState)


def test_unknown_state_raises_and_keeps_current():
    fsm = StateMachine(MenuState(None, []))
    with pytest.raises(ValueError):
        fsm.set_state("PausedState")
    assert isinstance(fsm.current_state, MenuState)


def test_resize_reaches_every_state():
    log = []
    fsm = StateMachine(MenuState(None, log))
    fsm.add_state(PlayingState(None, log))
    log.clear()
    fsm.on_resize(800, 600)
    assert ("resize", "MenuState", 800, 600) in log
    assert ("resize", "PlayingState", 800, 600) in log
