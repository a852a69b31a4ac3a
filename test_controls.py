"""On-screen joystick and fire button."""
import pytest

from controls import TouchControls
from level import reset_match, update_match
from logic import BalanceLogic
from utils import Vec2

W, H = 1024, 700
LEFT = 1


@pytest.fixture
def controls():
    c = TouchControls()
    c.layout(W, H)
    return c


@pytest.fixture
def state():
    s = reset_match("medium", W, H, seed=3)
    s.terrain = ()
    return s


def test_layout_puts_stick_left_and_fire_right(controls):
    assert controls.stick.center == (100, 100)
    assert controls.fire.center == (W - 80, 80)


def test_full_deflection_moves_and_aims_ahead(controls, state):
    assert controls.handle_press(LEFT, 100, 100)
    controls.handle_drag(LEFT, 160, 100)
    inp = controls.input_for(state.player, BalanceLogic())
    assert inp.move.x == pytest.approx(1.0)
    assert inp.move.y == pytest.approx(0.0)
    assert inp.aim == Vec2(612, 350)
    assert inp.speed_scale == pytest.approx(1.2)
    assert not inp.fire


def test_pushing_up_the_screen_drives_up_the_battlefield(controls, state):
    controls.handle_press(LEFT, 100, 100)
    controls.handle_drag(LEFT, 100, 220)
    inp = controls.input_for(state.player, BalanceLogic())
    assert inp.move.x == pytest.approx(0.0)
    assert inp.move.y == pytest.approx(-1.0)
    assert inp.aim.y == pytest.approx(250)


def test_partial_deflection_scales_move(controls, state):
    controls.handle_press(LEFT, 100, 100)
    controls.handle_drag(LEFT, 130, 100)
    assert controls.input_for(state.player, BalanceLogic()).move.x == pytest.approx(0.5)


def test_released_stick_keeps_last_aim(controls, state):
    controls.handle_press(LEFT, 100, 100)
    controls.handle_drag(LEFT, 160, 100)
    controls.input_for(state.player, BalanceLogic())
    assert controls.handle_release(LEFT)
    inp = controls.input_for(state.player, BalanceLogic(), fallback_move=Vec2(0, 1))
    assert inp.move == Vec2(0, 1)
    assert inp.aim == Vec2(612, 350)
    assert inp.speed_scale == 1.0


def test_fire_button_fires_once_along_turret(controls, state):
    state.player.turret_heading = 90.0
    assert controls.handle_press(LEFT, W - 80, 80)
    inp = controls.input_for(state.player, BalanceLogic())
    assert inp.fire
    assert inp.aim.x == pytest.approx(612)
    assert inp.aim.y == pytest.approx(350)
    assert not controls.input_for(state.player, BalanceLogic()).fire


def test_press_away_from_controls_is_not_consumed(controls):
    assert not controls.handle_press(LEFT, 500, 400)
    controls.tap(Vec2(300, 200))
    assert controls.fire_pending
    assert controls.aim == Vec2(300, 200)


def test_stick_drive_is_faster_in_the_match(controls, state):
    controls.handle_press(LEFT, 100, 100)
    controls.handle_drag(LEFT, 160, 100)
    update_match(state, controls.input_for(state.player, state.balance))
    assert state.player.pos.x == pytest.approx(515.0)
    assert state.player.turret_heading == pytest.approx(90.0)
