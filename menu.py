"""Menu screens: difficulty selection and game over."""

from dataclasses import dataclass, field
from typing import List, Optional
import pyglet
from pyglet import shapes
import config

UI_FONT_HEAD = "Courier New"
UI_FONT_BODY = "Courier New"


def _ui_scale(width: int, height: int) -> float:
    """Responsive UI scale factor based on window size."""
    base_w, base_h = 1024.0, 700.0
    s = min(max(1.0, float(width)) / base_w, max(1.0, float(height)) / base_h)
    return max(0.85, min(1.85, s))


@dataclass
class MenuButton:
    """A clickable button on the menu."""
    x: float
    y: float
    width: float
    height: float
    text: str
    action: str
    color: tuple = (100, 150, 200)
    hover_color: tuple = (150, 200, 255)
    font_size: int = 16
    is_hovered: bool = False

    _batch: object = field(init=False, default=None, repr=False)
    _border: object = field(init=False, default=None, repr=False)
    _bg: object = field(init=False, default=None, repr=False)
    _label: object = field(init=False, default=None, repr=False)

    def contains_point(self, px: float, py: float) -> bool:
        """Check if point is inside button."""
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def ensure(self, batch: pyglet.graphics.Batch) -> None:
        if self._batch is batch and self._bg is not None:
            return
        self._batch = batch
        self._border = shapes.Rectangle(0, 0, 1, 1, color=(20, 20, 20), batch=batch)
        self._bg = shapes.Rectangle(0, 0, 1, 1, color=self.color, batch=batch)
        self._label = pyglet.text.Label(
            self.text,
            font_name=UI_FONT_BODY,
            font_size=self.font_size,
            bold=True,
            x=0,
            y=0,
            anchor_x="center",
            anchor_y="center",
            batch=batch,
            color=(255, 255, 255, 255),
        )
        self.sync()

    def sync(self) -> None:
        if self._bg is None:
            return
        border_pad = max(2, int(self.height * 0.06))

        self._border.x = self.x - border_pad
        self._border.y = self.y - border_pad
        self._border.width = self.width + border_pad * 2
        self._border.height = self.height + border_pad * 2

        self._bg.x = self.x
        self._bg.y = self.y
        self._bg.width = self.width
        self._bg.height = self.height
        self._bg.color = self.hover_color if self.is_hovered else self.color

        self._label.text = self.text
        self._label.font_size = self.font_size
        self._label.x = self.x + self.width // 2
        self._label.y = self.y + self.height // 2


def _layout_column(buttons: List[MenuButton], cx: int, top_y: int, scale: float) -> None:
    button_w = int(230 * scale)
    button_h = int(56 * scale)
    gap = int(18 * scale)
    for i, btn in enumerate(buttons):
        btn.width = button_w
        btn.height = button_h
        btn.font_size = max(12, int(18 * scale))
        btn.x = cx - button_w // 2
        btn.y = top_y - i * (button_h + gap)
        btn.sync()


class _ButtonScreen:
    """Shared hover/click handling for screens made of buttons."""

    buttons: List[MenuButton]

    def on_mouse_motion(self, x: float, y: float):
        for button in self.buttons:
            button.is_hovered = button.contains_point(x, y)
            button.sync()

    def on_mouse_press(self, x: float, y: float, button: int) -> Optional[str]:
        """Returns the clicked button's action or None."""
        if button != pyglet.window.mouse.LEFT:
            return None
        for btn in self.buttons:
            if btn.contains_point(x, y):
                return btn.action
        return None

    def draw(self):
        self.batch.draw()


class Menu(_ButtonScreen):
    """Level selection screen."""

    def __init__(self, width: int, height: int):
        self.batch = pyglet.graphics.Batch()
        self._bg = shapes.Rectangle(0, 0, width, height, color=config.GROUND, batch=self.batch)
        self._panel = shapes.Rectangle(0, 0, 1, 1, color=(30, 34, 24), batch=self.batch)
        self._panel.opacity = 200

        self.buttons: List[MenuButton] = []
        for name in config.DIFFICULTIES:
            base = config.DIFFICULTY_COLORS[name]
            hover = tuple(min(255, c + 40) for c in base)
            self.buttons.append(MenuButton(0, 0, 160, 50, name.upper(), f"start:{name}", color=base, hover_color=hover))
        self.buttons.append(MenuButton(0, 0, 160, 50, "QUIT", "quit", color=(90, 90, 90), hover_color=(130, 130, 130)))

        self.title = pyglet.text.Label(
            "TANK BATTLE",
            font_name=UI_FONT_HEAD,
            font_size=36,
            bold=True,
            x=0,
            y=0,
            anchor_x="center",
            anchor_y="center",
            color=(255, 255, 255, 255),
            batch=self.batch,
        )
        self.subtitle = pyglet.text.Label(
            "Select level  (1 / 2 / 3)",
            font_name=UI_FONT_BODY,
            font_size=14,
            x=0,
            y=0,
            anchor_x="center",
            anchor_y="center",
            color=(230, 230, 210, 255),
            batch=self.batch,
        )

        for btn in self.buttons:
            btn.ensure(self.batch)
        self.resize(width, height)

    def resize(self, width: int, height: int):
        cx = width // 2
        scale = _ui_scale(width, height)
        self._bg.width = width
        self._bg.height = height

        _layout_column(self.buttons, cx, height // 2 + int(70 * scale), scale)
        top = self.buttons[0]
        bottom = self.buttons[-1]
        pad = int(40 * scale)
        self._panel.x = top.x - pad
        self._panel.y = bottom.y - pad
        self._panel.width = top.width + pad * 2
        self._panel.height = (top.y + top.height) - bottom.y + pad * 2

        self.title.x = cx
        self.title.font_size = max(22, int(36 * scale))
        self.title.y = height - int(80 * scale)
        self.subtitle.x = cx
        self.subtitle.y = height - int(125 * scale)


class GameOverMenu(_ButtonScreen):
    """Game Over screen drawn over the frozen final frame."""

    def __init__(self, width: int, height: int):
        self.batch = pyglet.graphics.Batch()
        self.overlay = shapes.Rectangle(0, 0, width, height, color=(20, 5, 5), batch=self.batch)
        self.overlay.opacity = 170

        self.buttons: List[MenuButton] = [
            MenuButton(0, 0, 160, 50, "TRY AGAIN", "retry", color=(45, 150, 90), hover_color=(80, 200, 130)),
            MenuButton(0, 0, 160, 50, "CHANGE LEVEL", "menu", color=(70, 110, 180), hover_color=(105, 150, 230)),
        ]
        for b in self.buttons:
            b.ensure(self.batch)

        self.title = pyglet.text.Label(
            "GAME OVER",
            font_name=UI_FONT_HEAD,
            font_size=40,
            bold=True,
            x=0,
            y=0,
            anchor_x="center",
            anchor_y="center",
            color=(255, 90, 90, 255),
            batch=self.batch,
        )
        self.final_score_label = pyglet.text.Label(
            "Final Score: 0",
            font_name=UI_FONT_BODY,
            font_size=22,
            x=0,
            y=0,
            anchor_x="center",
            anchor_y="center",
            color=(255, 240, 180, 255),
            batch=self.batch,
        )
        self.resize(width, height)

    def set_result(self, score: int, kills: int) -> None:
        self.final_score_label.text = f"Final Score: {score}  ({kills} destroyed)"

    def resize(self, width: int, height: int):
        cx = width // 2
        scale = min(_ui_scale(width, height), 1.6)
        self.overlay.width = width
        self.overlay.height = height
        self.title.x = cx
        self.title.y = height - int(140 * scale)
        self.final_score_label.x = cx
        self.final_score_label.y = height - int(200 * scale)
        _layout_column(self.buttons, cx, height // 2 - int(20 * scale), scale)
