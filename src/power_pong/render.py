"""
Drawing of a ``GameState`` snapshot with pygame.

Nothing here changes the state; the shell calls ``draw_state`` once per
frame.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame
from mini_arcade_core.scenes.sim_scene import Drawable, DrawCall
from mini_arcade_core.spaces.d2.collision2d import RectCollider

from power_pong.constants import (
    BACKGROUND,
    BASE_PADDLE_WIDTH,
    DIM,
    HIGHLIGHT,
    MAX_X,
    MAX_Y,
    WHITE,
)
from power_pong.entities import PowerUpKind
from power_pong.scenes.pong.models import GameState, Side
from power_pong.scenes.pong.scene import END_MENU, PAUSE_MENU, START_MENU
from power_pong.ui.menu import BaseMenu, button_rect

POWER_UP_LABELS = {
    PowerUpKind.SPEED: "SPEED",
    PowerUpKind.FAST_BALL: "FAST BALL",
    PowerUpKind.RETURN: "RETURN",
    PowerUpKind.EXPAND: "EXPAND",
}


@dataclass
class Fonts:
    """
    Fonts used by the drawables.

    :ivar large (pygame.font.Font): Scores and titles.
    :ivar small (pygame.font.Font): Buttons and power-up labels.
    """

    large: pygame.font.Font
    small: pygame.font.Font

    @classmethod
    def load(cls) -> Fonts:
        """Default pygame font at two sizes; needs ``pygame.font.init()``."""
        return cls(large=pygame.font.Font(None, 48), small=pygame.font.Font(None, 24))


@dataclass(frozen=True)
class RenderContext:
    """
    What one frame is drawn from.

    :ivar state (GameState): Snapshot to draw.
    :ivar fonts (Fonts | None): Loaded fonts.
    """

    state: GameState
    fonts: Fonts | None = None


def to_rect(collider: RectCollider) -> pygame.Rect:
    """Pixel rectangle covering ``collider``."""
    x, y = collider.position.to_tuple()
    width, height = collider.size.to_tuple()
    return pygame.Rect(int(x), int(y), int(width), int(height))


class DrawCenterLine(Drawable[RenderContext]):
    """
    Drawable to render the center dashed line.
    """

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        x = MAX_X // 2 - 2
        dash_h = 16
        gap = 12

        y = 0
        while y < MAX_Y:
            pygame.draw.rect(backend, DIM, (x, y, 4, dash_h))
            y += dash_h + gap


class DrawPaddles(Drawable[RenderContext]):
    """
    Drawable to render both paddles.
    """

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        for paddle in (ctx.state.player.paddle, ctx.state.ai.paddle):
            pygame.draw.rect(
                backend,
                WHITE,
                (int(paddle.x), int(paddle.y), BASE_PADDLE_WIDTH, int(paddle.height)),
            )


class DrawBall(Drawable[RenderContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        pygame.draw.rect(backend, WHITE, to_rect(ctx.state.ball.collider))


class DrawPickup(Drawable[RenderContext]):
    """
    Drawable to render the power-up box while it can be collected.
    """

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        if not ctx.state.pickup.is_active:
            return
        box = to_rect(ctx.state.pickup.collider)
        pygame.draw.rect(backend, HIGHLIGHT, box, width=2)
        mark = ctx.fonts.large.render("?", True, HIGHLIGHT)
        backend.blit(mark, mark.get_rect(center=box.center))


class DrawScore(Drawable[RenderContext]):
    """
    Drawable to render the score.
    """

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        center_x = MAX_X // 2
        gap = 40

        ai_text = ctx.fonts.large.render(str(ctx.state.score.ai), True, DIM)
        player_text = ctx.fonts.large.render(str(ctx.state.score.player), True, DIM)

        backend.blit(ai_text, (center_x - gap - ai_text.get_width(), 20))
        backend.blit(player_text, (center_x + gap, 20))


class DrawPowerUps(Drawable[RenderContext]):
    """
    Drawable to render what each side holds or has running.
    """

    @staticmethod
    def _label(state: GameState, side: Side) -> str | None:
        own = state.side(side)
        if own.active_power_up is not None:
            kind = own.active_power_up.kind
            return f"{POWER_UP_LABELS[kind]} {own.active_power_up.ticks_remaining}"
        if own.held_power_up is PowerUpKind.NONE:
            return None
        if side == "AI":
            # the CPU's pick stays hidden until it uses it
            return "?"
        return POWER_UP_LABELS[own.held_power_up]

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        state = ctx.state
        ai_label = self._label(state, "AI")
        if ai_label is not None:
            text = ctx.fonts.small.render(ai_label, True, WHITE)
            backend.blit(text, (20, MAX_Y - 30))

        player_label = self._label(state, "PLAYER")
        if player_label is not None:
            color = HIGHLIGHT if state.meta.power_up_intent else WHITE
            text = ctx.fonts.small.render(player_label, True, color)
            backend.blit(text, (MAX_X - 20 - text.get_width(), MAX_Y - 30))


class DrawMenu(Drawable[RenderContext]):
    """
    Drawable to render one menu over the board.
    """

    def __init__(self, menu: BaseMenu, subtitle: str | None = None):
        self.menu = menu
        self.subtitle = subtitle

    def draw(self, backend: pygame.Surface, ctx: RenderContext):
        style = self.menu.menu_style()
        fonts = ctx.fonts

        overlay = pygame.Surface((MAX_X, MAX_Y), pygame.SRCALPHA)
        overlay.fill(style.overlay_color)
        backend.blit(overlay, (0, 0))

        if self.menu.menu_title:
            title = fonts.large.render(self.menu.menu_title, True, style.title_color)
            backend.blit(title, title.get_rect(center=(MAX_X // 2, 200)))
        if self.subtitle:
            sub = fonts.small.render(self.subtitle, True, HIGHLIGHT)
            backend.blit(sub, sub.get_rect(center=(MAX_X // 2, 260)))

        for number, item in enumerate(self.menu.menu_items(), start=1):
            rect = button_rect(number)
            pygame.draw.rect(backend, style.button_fill, rect)
            pygame.draw.rect(backend, style.button_border, rect, width=2)
            label = fonts.small.render(item.label, True, style.selected)
            backend.blit(label, label.get_rect(center=rect.center))


def draw_ops(ctx: RenderContext) -> list[DrawCall]:
    """Draw calls for one frame, back to front."""
    state = ctx.state
    drawables: list[Drawable[RenderContext]] = [
        DrawCenterLine(),
        DrawPaddles(),
        DrawPickup(),
        DrawBall(),
        DrawScore(),
        DrawPowerUps(),
    ]
    if state.show_start:
        drawables.append(DrawMenu(START_MENU, "Pick a difficulty"))
    elif state.show_end:
        message = "You win!" if state.winner == "PLAYER" else "You lose"
        drawables.append(DrawMenu(END_MENU, message))
    elif state.show_pause:
        drawables.append(DrawMenu(PAUSE_MENU))
    return [DrawCall(drawable=drawable, ctx=ctx) for drawable in drawables]


def draw_state(surface: pygame.Surface, fonts: Fonts, state: GameState):
    """Render a full frame of ``state``."""
    surface.fill(BACKGROUND)
    for call in draw_ops(RenderContext(state=state, fonts=fonts)):
        call(surface)
