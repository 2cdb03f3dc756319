"""
Simulator window using pygame.

Draws the game's node tree and turns mouse clicks and key presses into
game input events. The window owns the frame loop: every frame it
advances the game's animations, renders, then yields to the asyncio
tasks running the rounds.
"""

import asyncio
import logging
import math
from typing import Optional

import pygame

from wheelspin.core.events import Event, EventType, key_down_event, pointer_down_event
from wheelspin.game import Game
from wheelspin.graphics.node import Node
from wheelspin.screens.bonus import WHEEL_CENTER_RADIUS, WHEEL_RADIUS
from wheelspin.settings import WindowSettings

logger = logging.getLogger(__name__)

# Scene coordinates are laid out for a 1080 pixel tall stage
STAGE_HEIGHT = 1080

BG_COLOR = (20, 20, 30)
PANEL_COLOR = (40, 40, 50)
TEXT_COLOR = (230, 230, 240)
ACCENT_COLOR = (100, 150, 255)
GOLD = (255, 200, 40)


class SimulatorWindow:
    """
    Desktop window running the game.

    Keyboard Mapping:
        SPACE / RETURN: Confirm (same as a click)
        D: Toggle the debug panel
        1-6: Debug presets while the panel is open
        ESC: Exit
    """

    def __init__(self, game: Game, config: WindowSettings | None = None) -> None:
        self.game = game
        self.config = config or game.settings.window
        self.event_bus = game.event_bus

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0

        logger.info("SimulatorWindow created")

    @property
    def scale(self) -> float:
        return self.config.height / STAGE_HEIGHT

    def _init_pygame(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode((self.config.width, self.config.height), flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._big_font = pygame.font.SysFont(None, max(12, int(96 * self.scale)))
        self._font = pygame.font.SysFont(None, max(12, int(56 * self.scale)))
        self._small_font = pygame.font.SysFont(None, 20)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Stage coordinates (origin at the centre) to window pixels."""
        return (
            int(self.config.width / 2 + x * self.scale),
            int(self.config.height / 2 + y * self.scale),
        )

    def to_stage(self, px: int, py: int) -> tuple[float, float]:
        return (
            (px - self.config.width / 2) / self.scale,
            (py - self.config.height / 2) / self.scale,
        )

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = self.to_stage(*event.pos)
                self.event_bus.emit(pointer_down_event(x, y, source="mouse"))

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                else:
                    self.event_bus.emit(key_down_event(pygame.key.name(event.key)))

    def _render(self) -> None:
        if not self._screen:
            return

        self._screen.fill(BG_COLOR)

        self._render_layer(self.game.title.node, self._render_title)
        self._render_layer(self.game.bonus.node, self._render_bonus)
        self._render_layer(self.game.win_screen.node, self._render_win)
        self._render_particles(self.game.bonus.sparkles.particles)
        self._render_particles(self.game.win_screen.coins.particles)
        self._render_balance()
        if self.game.debug.visible:
            self._render_debug_panel()

        pygame.display.flip()

    def _render_layer(self, node: Node, draw) -> None:
        """Draw a screen onto its own surface so its fade alpha applies as a whole."""
        alpha = node.world_alpha
        if alpha <= 0:
            return
        layer = pygame.Surface((self.config.width, self.config.height), pygame.SRCALPHA)
        draw(layer, node)
        layer.set_alpha(int(255 * alpha))
        self._screen.blit(layer, (0, 0))

    def _blit_text(
        self,
        surface: pygame.Surface,
        text: str,
        center: tuple[int, int],
        font: pygame.font.Font,
        color=TEXT_COLOR,
    ) -> None:
        lines = text.split("\n")
        height = font.get_linesize()
        top = center[1] - height * (len(lines) - 1) // 2
        for i, line in enumerate(lines):
            rendered = font.render(line, True, color)
            surface.blit(rendered, rendered.get_rect(center=(center[0], top + i * height)))

    def _render_title(self, surface: pygame.Surface, node: Node) -> None:
        title = node.find("titleText")
        button = node.find("titleButton")

        self._blit_text(surface, title.text, self.to_screen(title.x, title.y), self._big_font, ACCENT_COLOR)

        rect = pygame.Rect(0, 0, int(320 * self.scale), int(110 * self.scale))
        rect.center = self.to_screen(button.x, button.y)
        button_surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(button_surface, (46, 204, 113), button_surface.get_rect(), border_radius=12)
        self._blit_text(button_surface, button.text, (rect.width // 2, rect.height // 2), self._font)
        button_surface.set_alpha(int(255 * button.alpha))
        surface.blit(button_surface, rect.topleft)

    def _render_bonus(self, surface: pygame.Surface, node: Node) -> None:
        wheel = node.find("wheelContainer")
        cx, cy = self.to_screen(0, 0)
        radius = WHEEL_RADIUS * self.scale
        half_width = 360 / max(1, len(self.game.bonus.segments)) / 2

        for i, segment in enumerate(self.game.bonus.segments):
            section = wheel.find(f"wheelSection{i}")
            centre_angle = section.angle + wheel.angle
            points = [(cx, cy)]
            for step in range(9):
                a = math.radians(centre_angle - half_width + step * half_width / 4)
                points.append((cx + math.sin(a) * radius, cy - math.cos(a) * radius))
            pygame.draw.polygon(surface, segment.tint, points)
            pygame.draw.polygon(surface, BG_COLOR, points, 2)

            label = section.find(f"wheelSectionText{i}")
            a = math.radians(centre_angle)
            label_radius = radius * 0.72
            self._blit_text(
                surface, label.text,
                (int(cx + math.sin(a) * label_radius), int(cy - math.cos(a) * label_radius)),
                self._font, BG_COLOR,
            )

        pygame.draw.circle(surface, PANEL_COLOR, (cx, cy), int(WHEEL_CENTER_RADIUS * self.scale))

        pin = node.find("wheelPin")
        px, py = self.to_screen(pin.x, pin.y)
        size = 36 * self.scale
        pygame.draw.polygon(surface, TEXT_COLOR, [
            (px - size / 2, py - size / 2),
            (px + size / 2, py - size / 2),
            (px, py + size),
        ])

        prompt = node.find("bonusText")
        if prompt.visible:
            self._blit_text(surface, prompt.text, (cx, cy), self._small_font)

    def _render_win(self, surface: pygame.Surface, node: Node) -> None:
        glow = node.find("winGlow")
        text = node.find("winText")
        cx, cy = self.to_screen(glow.x, glow.y)

        # Rotating sunburst behind the banner
        radius = 220 * glow.scale * self.scale
        for ray in range(12):
            a = math.radians(glow.angle + ray * 30)
            b = math.radians(glow.angle + ray * 30 + 12)
            pygame.draw.polygon(surface, (255, 220, 120, 90), [
                (cx, cy),
                (cx + math.sin(a) * radius, cy - math.cos(a) * radius),
                (cx + math.sin(b) * radius, cy - math.cos(b) * radius),
            ])

        self._blit_text(surface, text.text, self.to_screen(text.x, text.y), self._big_font, GOLD)

    def _render_particles(self, particles) -> None:
        for particle in particles:
            if not particle.active:
                continue
            size = max(1, int(particle.get_current_size() * self.scale))
            pygame.draw.circle(
                self._screen,
                particle.get_current_color(),
                self.to_screen(particle.x, particle.y),
                size,
            )

    def _render_balance(self) -> None:
        text = self.game.ledger.text
        if text is None or not text.visible:
            return
        x, y = self.to_screen(text.x + 200, text.y + 80)
        rendered = self._font.render(text.text, True, TEXT_COLOR)
        self._screen.blit(rendered, rendered.get_rect(bottomright=(x, y)))

    def _render_debug_panel(self) -> None:
        debug = self.game.debug
        rect = pygame.Rect(10, 40, 220, 40 + 28 * len(debug.buttons))
        pygame.draw.rect(self._screen, PANEL_COLOR, rect, border_radius=5)

        header = self._small_font.render(
            f"FORCE: {self.game.bonus.force_weight}   FPS: {self._clock.get_fps():.0f}",
            True, ACCENT_COLOR,
        )
        self._screen.blit(header, (rect.x + 10, rect.y + 10))

        for i, button in enumerate(debug.buttons):
            color = GOLD if debug.selected == i else TEXT_COLOR
            line = self._small_font.render(f"{i + 1}  {button.text}", True, color)
            self._screen.blit(line, (rect.x + 10, rect.y + 38 + 28 * i))

    async def run(self, rounds: Optional[int] = None) -> None:
        """Main simulator loop; returns when the window closes or the rounds end."""
        self._init_pygame()
        self._running = True

        game_task = asyncio.create_task(self.game.run(rounds), name="game")
        logger.info("Simulator started")

        try:
            while self._running and not game_task.done():
                self._handle_events()

                delta_ms = self._clock.get_time() if self._clock else 0
                self.game.update(delta_ms)

                self._render()

                if self._clock:
                    self._clock.tick(self.config.fps)
                self._frame_count += 1

                await asyncio.sleep(0)
        finally:
            if not game_task.done():
                game_task.cancel()
                try:
                    await game_task
                except asyncio.CancelledError:
                    pass
            self._cleanup()

        if game_task.done() and not game_task.cancelled() and game_task.exception():
            raise game_task.exception()

    def _cleanup(self) -> None:
        self.event_bus.emit(Event(EventType.SHUTDOWN, source="simulator"))
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        self._running = False
