# Pyglet top-down tank battle
# Controls: WASD/Arrows move, mouse aims the turret, LMB fires, ESC menu.
# --touch adds an on-screen joystick (bottom-left) and FIRE button (bottom-right).
# Install: py -m pip install pyglet

import logging

import pyglet

pyglet.options["shadow_window"] = False

import config
from config import SCREEN_W, SCREEN_H, FPS
from controls import TouchControls
from fsm import State, StateMachine
from hud import HUD, TouchOverlay
from level import InputState, MatchState, reset_match, resize_battlefield, update_match
from logic import BalanceLogic
from menu import Menu, GameOverMenu
from snapshot import MatchSnapshot, take_snapshot
from utils import Vec2
from visuals import Visuals

LOG = logging.getLogger(__name__)

_LEVEL_KEYS = {
    pyglet.window.key._1: "easy",
    pyglet.window.key._2: "medium",
    pyglet.window.key._3: "hard",
    pyglet.window.key.NUM_1: "easy",
    pyglet.window.key.NUM_2: "medium",
    pyglet.window.key.NUM_3: "hard",
}


def _draw_playing_scene(game) -> None:
    snap = game.last_snapshot
    if snap is None:
        return
    game.visuals.draw(snap)
    game.hud.sync(snap)
    game.hud.draw()
    if game.touch is not None and not snap.ended:
        game.touch_overlay.sync(game.touch)
        game.touch_overlay.draw()


class MenuState(State):
    def enter(self):
        self.game._reset_input_flags()

    def on_mouse_press(self, x, y, button, modifiers):
        action = self.game.main_menu.on_mouse_press(x, y, button)
        if action is None:
            return
        if action.startswith("start:"):
            self.game.start_match(action.split(":", 1)[1])
        elif action == "quit":
            self.game._quit_game()

    def on_mouse_motion(self, x, y, dx, dy):
        self.game.main_menu.on_mouse_motion(x, y)

    def on_key_press(self, symbol, modifiers):
        level = _LEVEL_KEYS.get(symbol)
        if level is not None:
            self.game.start_match(level)
        elif symbol == pyglet.window.key.ESCAPE:
            self.game._quit_game()

    def on_resize(self, width, height):
        self.game.main_menu.resize(width, height)

    def draw(self):
        self.game.main_menu.draw()


class PlayingState(State):
    def enter(self):
        self.game._reset_input_flags()

    def on_key_press(self, symbol, modifiers):
        if symbol == pyglet.window.key.ESCAPE:
            self.game._return_to_menu()

    def on_mouse_press(self, x, y, button, modifiers):
        if button != pyglet.window.mouse.LEFT:
            return
        touch = self.game.touch
        if touch is not None:
            if not touch.handle_press(button, x, y):
                touch.tap(self.game.to_world(x, y))
            return
        self.game.mouse_xy = (x, y)
        self.game.fire_pending = True

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        touch = self.game.touch
        if touch is not None and touch.handle_drag(pyglet.window.mouse.LEFT, x, y):
            return
        self.game.mouse_xy = (x, y)

    def on_mouse_release(self, x, y, button, modifiers):
        if self.game.touch is not None:
            self.game.touch.handle_release(button)

    def update(self, dt: float):
        game = self.game
        s = game.state
        if s is None:
            return
        update_match(s, game.collect_input())
        game.last_snapshot = take_snapshot(s)
        if s.ended:
            game.fsm.set_state("GameOverState")

    def draw(self):
        _draw_playing_scene(self.game)


class GameOverState(State):
    def enter(self):
        s = self.game.state
        if s is not None:
            self.game.game_over_menu.set_result(s.score.score, s.score.kills)
        self.game._reset_input_flags()

    def on_mouse_press(self, x, y, button, modifiers):
        action = self.game.game_over_menu.on_mouse_press(x, y, button)
        if action == "retry":
            self.game.start_match(self.game.difficulty)
        elif action == "menu":
            self.game._return_to_menu()

    def on_mouse_motion(self, x, y, dx, dy):
        self.game.game_over_menu.on_mouse_motion(x, y)

    def on_key_press(self, symbol, modifiers):
        if symbol == pyglet.window.key.ESCAPE:
            self.game._return_to_menu()

    def on_resize(self, width, height):
        self.game.game_over_menu.resize(width, height)

    def draw(self):
        _draw_playing_scene(self.game)
        self.game.game_over_menu.draw()


# ============================
# Main Game Class
# ============================
class Game(pyglet.window.Window):
    """Main game window. Owns the match and feeds it input every tick."""

    def __init__(self, width: int = SCREEN_W, height: int = SCREEN_H, difficulty: str | None = None, seed: int | None = None, touch: bool = False):
        super().__init__(width=width, height=height, caption="Tank Battle", resizable=True, vsync=True)

        self.difficulty = config.DEFAULT_DIFFICULTY
        self.seed = seed

        self.main_menu = Menu(self.width, self.height)
        self.game_over_menu = GameOverMenu(self.width, self.height)
        self.hud = HUD(self.width, self.height, show_hints=not touch)
        self.touch = TouchControls() if touch else None
        self.touch_overlay = TouchOverlay() if touch else None
        if self.touch is not None:
            self.touch.layout(self.width, self.height)
        self.visuals = Visuals()

        # Match objects (created when a level is picked)
        self.state: MatchState | None = None
        self.last_snapshot: MatchSnapshot | None = None

        self.keys = pyglet.window.key.KeyStateHandler()
        self.push_handlers(self.keys)

        self.mouse_xy = (self.width / 2, self.height / 2)
        self.fire_pending = False
        self.balance = BalanceLogic(fps=float(FPS))
        self._fixed_dt = self.balance.fixed_dt
        self._frame_dt_cap = self.balance.frame_dt_cap
        self._max_catchup_steps = self.balance.max_catchup_steps
        self._accumulator = 0.0

        pyglet.clock.schedule_interval(self.update, 1.0 / FPS)

        self.fsm = StateMachine(MenuState(self))
        self.fsm.add_state(PlayingState(self))
        self.fsm.add_state(GameOverState(self))

        if difficulty is not None:
            self.start_match(difficulty)

    def _reset_input_flags(self) -> None:
        self.fire_pending = False
        if self.touch is not None:
            self.touch.release_all()

    def start_match(self, difficulty: str) -> None:
        """Begin a fresh match on the given level."""
        self.difficulty = difficulty
        self.state = reset_match(difficulty, self.width, self.height, seed=self.seed, balance=self.balance)
        self.last_snapshot = take_snapshot(self.state)
        self._accumulator = 0.0
        LOG.debug("Host started %s match", self.state.difficulty)
        self.fsm.set_state("PlayingState")

    def _quit_game(self):
        """Quit the game."""
        self._schedule_app_close()

    def _schedule_app_close(self):
        def _close(_dt):
            self.close()
            pyglet.app.exit()
        pyglet.clock.schedule_once(_close, 0)

    def _return_to_menu(self):
        """Drop the match and show the level selection."""
        self.state = None
        self.last_snapshot = None
        self.fsm.set_state("MenuState")

    def collect_input(self) -> InputState:
        """Sample the keyboard and mouse for one tick."""
        if self.touch is not None and self.state is not None:
            return self.touch.input_for(self.state.player, self.balance, fallback_move=self._input_dir())
        mx, my = self.mouse_xy
        fire = self.fire_pending
        self.fire_pending = False
        return InputState(move=self._input_dir(), aim=self.to_world(mx, my), fire=fire)

    def to_world(self, x: float, y: float) -> Vec2:
        # The battlefield's y axis grows downwards.
        return Vec2(float(x), float(self.height - y))

    def _input_dir(self) -> Vec2:
        """Get input direction from keyboard."""
        k = pyglet.window.key
        d = Vec2(0.0, 0.0)
        if self.keys[k.W] or self.keys[k.UP]:
            d.y -= 1
        if self.keys[k.S] or self.keys[k.DOWN]:
            d.y += 1
        if self.keys[k.A] or self.keys[k.LEFT]:
            d.x -= 1
        if self.keys[k.D] or self.keys[k.RIGHT]:
            d.x += 1
        return d

    def on_resize(self, width, height):
        super().on_resize(width, height)
        if getattr(self, "fsm", None) is None:
            return
        self.hud.resize(width, height)
        if self.touch is not None:
            self.touch.layout(width, height)
        self.fsm.on_resize(width, height)
        if self.state is not None:
            resize_battlefield(self.state, width, height)
            self.last_snapshot = take_snapshot(self.state)

    def on_mouse_motion(self, x, y, dx, dy):
        self.mouse_xy = (x, y)
        self.fsm.on_mouse_motion(x, y, dx, dy)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.fsm.on_mouse_drag(x, y, dx, dy, buttons, modifiers)

    def on_mouse_press(self, x, y, button, modifiers):
        self.fsm.on_mouse_press(x, y, button, modifiers)

    def on_mouse_release(self, x, y, button, modifiers):
        self.fsm.on_mouse_release(x, y, button, modifiers)

    def on_key_press(self, symbol, modifiers):
        """Handle key presses."""
        self.fsm.on_key_press(symbol, modifiers)
        # Keep pyglet's default ESC-closes-window out of the way.
        return pyglet.event.EVENT_HANDLED

    def on_close(self):
        """Handle window close event."""
        self._schedule_app_close()
        return True

    def update(self, dt: float):
        """Run as many fixed ticks as the elapsed time covers."""
        frame_dt = max(0.0, min(float(dt), self._frame_dt_cap))
        self._accumulator += frame_dt
        steps = 0
        while self._accumulator >= self._fixed_dt and steps < self._max_catchup_steps:
            self.fsm.update(self._fixed_dt)
            self._accumulator -= self._fixed_dt
            steps += 1
        if steps >= self._max_catchup_steps:
            # Drop extra accumulated time to avoid spiral-of-death stalls.
            self._accumulator = 0.0

    def on_draw(self):
        """Render the game."""
        self.clear()
        self.fsm.draw()
