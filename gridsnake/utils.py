import logging
import time

import pygame

from config import *
from gridsnake.audio import SoundBoard
from gridsnake.errors import BoardFullError
from gridsnake.geometry import Direction
from gridsnake.snake import Snake
from gridsnake.world import World

logger = logging.getLogger(__name__)


def key_codes(names):
    """Translate pygame key names (``"up"``, ``"w"``) into key codes."""
    return tuple(pygame.key.key_code(name) for name in names)


def held_directions(pressed, bindings):
    """Map each Direction to whether any of its bound keys is down.

    ``pressed`` is anything indexable by key code, normally the result of
    ``pygame.key.get_pressed()``.
    """
    return {
        direction: any(pressed[code] for code in bindings[direction])
        for direction in Direction
    }


def format_score(score, digits=SCORE_DIGITS):
    return f"{score:0{digits}d}"


class SnakeGame:
    """Main game controller: owns the window, the world and the snake."""

    def __init__(self, world=None, snake=None):
        pygame.init()
        self.world = world or World()
        self.snake = snake or Snake()
        self.screen = pygame.display.set_mode(self.world.pixel_size)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.small_font = pygame.font.Font(None, HUD_FONT_SIZE * 2 // 3)

        self.bindings = {
            Direction[name]: key_codes(names) for name, names in KEY_BINDINGS.items()
        }
        self.reset_key = pygame.key.key_code(RESET_KEY)
        self.pause_key = pygame.key.key_code(PAUSE_KEY)
        self.mute_key = pygame.key.key_code(MUTE_KEY)
        self.debug_key = pygame.key.key_code(DEBUG_KEY)

        self.sounds = SoundBoard()
        self.running = True
        self.paused = False
        self.show_debug = False
        self.board_cleared = False
        self.frame_ms = 0.0

    def reset(self):
        """Put the world and the snake back to their start state."""
        self.world.reset()
        self.snake.reset()
        self.board_cleared = False
        self.sounds.play("start")
        logger.info("Game reset")

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == self.reset_key:
                self.reset()
            elif event.key == self.pause_key:
                self.paused = not self.paused
                logger.debug("Paused: %s", self.paused)
            elif event.key == self.mute_key:
                logger.debug("Muted: %s", self.sounds.toggle_mute())
            elif event.key == self.debug_key:
                self.show_debug = not self.show_debug

    def step(self, held):
        """Run one frame of simulation and fire sound effects on changes."""
        if self.paused or self.board_cleared:
            return
        was_alive = self.snake.alive
        score = self.snake.score
        try:
            self.snake.update(self.world, held)
        except BoardFullError as exc:
            # Nowhere left to put food: the run is over and the player filled the board.
            self.board_cleared = True
            logger.info("Board cleared with score %d (%s)", self.snake.score, exc)
            return

        if self.snake.score > score:
            self.sounds.play("eat")
        if was_alive and not self.snake.alive:
            self.sounds.play("die")
            logger.info("Game over, final score %s", format_score(self.snake.score))

    def draw_text(self, text, pos, color=WHITE, font=None, center=True):
        """Draw text on screen."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        if center:
            text_rect = text_surface.get_rect(center=pos)
        else:
            text_rect = text_surface.get_rect(topleft=pos)
        self.screen.blit(text_surface, text_rect)

    def draw_hud(self):
        """Score in the top-left, overlays for pause and game over."""
        width, height = self.world.pixel_size
        self.draw_text(format_score(self.snake.score), (HUD_PADDING, HUD_PADDING),
                       YELLOW, center=False)

        if self.show_debug:
            self.draw_text(f"{self.frame_ms:.2f} ms", (HUD_PADDING, height - HUD_PADDING - 16),
                           GREY, self.small_font, center=False)

        if self.board_cleared:
            self.draw_text("BOARD CLEARED!", (width // 2, height // 2 - 20), YELLOW)
            self.draw_text("Press R to play again", (width // 2, height // 2 + 20),
                           WHITE, self.small_font)
        elif not self.snake.alive:
            self.draw_text("GAME OVER!", (width // 2, height // 2 - 20), RED)
            self.draw_text("Press R to restart", (width // 2, height // 2 + 20),
                           WHITE, self.small_font)
        elif self.paused:
            self.draw_text("PAUSED", (width // 2, height // 2), YELLOW)

    def run(self):
        """Main game loop."""
        logger.info("Starting %dx%d board, one step every %d frames at %d FPS",
                    self.world.width, self.world.height, self.world.tick_delay, FPS)
        self.sounds.play("start")
        while self.running:
            started = time.perf_counter()
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break

            held = held_directions(pygame.key.get_pressed(), self.bindings)
            self.step(held)

            self.screen.fill(BLACK)
            self.snake.draw(self.screen, self.world)
            self.draw_hud()
            self.frame_ms = (time.perf_counter() - started) * 1000.0

            pygame.display.flip()
            self.clock.tick(FPS)

        self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        pygame.quit()
