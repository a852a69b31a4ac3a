"""HUD: health bar, score, level and control hints."""

import pyglet
from pyglet import shapes

import config
from controls import TouchControls
from menu import UI_FONT_BODY
from snapshot import MatchSnapshot


def health_color(frac: float) -> tuple:
    if frac > 0.6:
        return config.HEALTH_HIGH
    if frac > 0.3:
        return config.HEALTH_MID
    return config.HEALTH_LOW


class HUD:
    """Game HUD drawn on top of the battlefield."""

    BAR_W = 200
    BAR_H = 20

    def __init__(self, width: int, height: int, show_hints: bool = True):
        self.batch = pyglet.graphics.Batch()
        self.show_hints = show_hints
        self.bar_bg = shapes.BorderedRectangle(
            0, 0, self.BAR_W, self.BAR_H, border=2,
            color=(51, 51, 51), border_color=(0, 0, 0), batch=self.batch,
        )
        self.bar = shapes.Rectangle(0, 0, self.BAR_W, self.BAR_H - 4, color=config.HEALTH_HIGH, batch=self.batch)

        def make_label(size, anchor_x="left", bold=True):
            return pyglet.text.Label(
                "",
                font_name=UI_FONT_BODY,
                font_size=size,
                bold=bold,
                x=0,
                y=0,
                anchor_x=anchor_x,
                anchor_y="center",
                color=config.HUD_TEXT + (255,),
                batch=self.batch,
            )

        self.hp_label = make_label(12)
        self.score_label = make_label(18, anchor_x="right")
        self.level_label = make_label(14, anchor_x="center")
        self.hints = [make_label(11, bold=False) for _ in range(3)]
        self.hints[0].text = "WASD or Arrow Keys: Move Tank"
        self.hints[1].text = "Mouse Movement: Aim Turret"
        self.hints[2].text = "Mouse Click: Fire Cannon"
        for h in self.hints:
            h.color = (255, 255, 255, 180)
        self.resize(width, height)

    def resize(self, width: int, height: int):
        top = height - 20 - self.BAR_H
        self.bar_bg.x, self.bar_bg.y = 20, top
        self.bar.x, self.bar.y = 22, top + 2
        self.hp_label.x, self.hp_label.y = 30, top + self.BAR_H / 2
        self.score_label.x, self.score_label.y = width - 20, height - 30
        self.level_label.x, self.level_label.y = width // 2, height - 30
        for i, h in enumerate(self.hints):
            h.x = 20
            h.y = 60 - i * 20

    def sync(self, snap: MatchSnapshot) -> None:
        frac = max(0.0, min(1.0, snap.player.health / max(1e-6, snap.player_starting_health)))
        self.bar.width = max(0.0, (self.BAR_W - 4) * frac)
        self.bar.color = health_color(frac)
        self.hp_label.text = f"HP: {int(snap.player.health)}"
        self.score_label.text = f"SCORE: {snap.score}"
        self.level_label.text = f"LEVEL: {snap.difficulty.upper()}"
        self.level_label.color = config.DIFFICULTY_COLORS.get(snap.difficulty, config.HUD_TEXT) + (255,)
        for h in self.hints:
            h.visible = self.show_hints and not snap.ended

    def draw(self):
        self.batch.draw()


class TouchOverlay:
    """Draws the on-screen joystick and fire button."""

    def __init__(self):
        self.batch = pyglet.graphics.Batch()
        self.base = shapes.Circle(0, 0, 1, color=(255, 255, 255), batch=self.batch)
        self.base.opacity = 50
        self.knob = shapes.Circle(0, 0, 1, color=(255, 255, 255), batch=self.batch)
        self.knob.opacity = 130
        self.fire = shapes.Circle(0, 0, 1, color=(139, 0, 0), batch=self.batch)
        self.fire.opacity = 180
        self.fire_label = pyglet.text.Label(
            "FIRE",
            font_name=UI_FONT_BODY,
            font_size=14,
            bold=True,
            x=0,
            y=0,
            anchor_x="center",
            anchor_y="center",
            color=(255, 255, 255, 230),
            batch=self.batch,
        )

    def sync(self, controls: TouchControls) -> None:
        stick = controls.stick
        cx, cy = stick.center
        dx, dy = stick.delta()
        self.base.x, self.base.y, self.base.radius = cx, cy, stick.radius
        self.knob.x, self.knob.y, self.knob.radius = cx + dx, cy + dy, stick.radius * 0.45

        fx, fy = controls.fire.center
        self.fire.x, self.fire.y, self.fire.radius = fx, fy, controls.fire.radius
        self.fire.color = (200, 0, 0) if controls.fire.pressed() else (139, 0, 0)
        self.fire.opacity = 180
        self.fire_label.x, self.fire_label.y = fx, fy

    def draw(self):
        self.batch.draw()
