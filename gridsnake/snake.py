import logging

import pygame

from config import *
from gridsnake.geometry import Direction, Edge, Position, cell_slice, wrap_step

logger = logging.getLogger(__name__)

# Checked in this order; when several keys are held the last one wins.
INPUT_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def resolve_direction(current, held):
    """Pick the heading for the next step from the held direction keys.

    ``held`` maps Direction -> bool. A request to reverse straight back into
    the neck is ignored and the current heading is kept.
    """
    wanted = current
    for direction in INPUT_ORDER:
        if held.get(direction, False):
            wanted = direction
    if wanted is current.opposite():
        return current
    return wanted


class Snake:
    """Grid snake stepped every ``tick_delay`` frames and drawn every frame."""

    def __init__(self, start=SNAKE_START, length=SNAKE_START_LENGTH,
                 direction=Direction[SNAKE_START_DIRECTION]):
        if length < 1:
            raise ValueError(f"snake length must be at least 1, got {length}")
        self._start = Position(*start)
        self._length = length
        self._direction = direction
        self.reset()

    def reset(self):
        """Reset snake to initial state."""
        trail = self._direction.opposite().vector
        self.body = [
            Position(self._start.x + trail.x * n, self._start.y + trail.y * n)
            for n in range(self._length)
        ]
        self.direction = self._direction
        self.alive = True
        self.ticker = 0
        self.score = 0

    @property
    def head(self):
        return self.body[0]

    @property
    def length(self):
        return len(self.body)

    def update(self, world, held):
        """Advance one rendered frame: collisions, food, then maybe one grid step."""
        head = self.body[0]
        if self.alive and head in self.body[1:]:
            self.alive = False
            logger.info("Snake ran into itself at (%d, %d), score %d",
                        head.x, head.y, self.score)

        if head == world.food:
            self.grow()
            world.respawn_food(self.body)

        self.ticker += 1

        if self.ticker % world.tick_delay == 0 and self.alive:
            self.direction = resolve_direction(self.direction, held)
            self.move(world)

    def grow(self, amount=GROWTH_RATE):
        """Stack copies of the tail so the new segments slide out of it."""
        tail = self.body[-1]
        self.body.extend([tail] * amount)
        self.score += 1
        logger.debug("Food eaten, length %d, score %d", len(self.body), self.score)

    def move(self, world):
        """Shift every segment into its predecessor's old cell behind a new head."""
        old = self.body
        new_head = wrap_step(old[0], self.direction, world.width, world.height)
        self.body = [new_head] + old[:-1]

    def phase(self, world):
        """How far through the current step window we are, in ``[0, 1)``."""
        return (self.ticker % world.tick_delay) / world.tick_delay

    def segment_rects(self, world):
        """Pixel rects for each body segment, head and tail interpolated."""
        scale = world.scale
        rects = [cell_slice(pos, None, 1.0, scale) for pos in self.body]
        if len(self.body) < 2 or not self.alive:
            return rects

        op = self.phase(world)
        head_edge = Edge.between(self.body[0], self.body[1], world.width, world.height)
        tail_edge = Edge.between(self.body[-1], self.body[-2], world.width, world.height)
        rects[0] = cell_slice(self.body[0], head_edge, op, scale)
        rects[-1] = cell_slice(self.body[-1], tail_edge, 1.0 - op, scale)
        return rects

    def draw(self, screen, world):
        """Draw the food cell and the snake, white while alive and red once dead."""
        scale = world.scale
        food_rect = (world.food.x * scale, world.food.y * scale, scale, scale)
        pygame.draw.rect(screen, ORANGE, food_rect)

        color = WHITE if self.alive else RED
        for x, y, w, h in self.segment_rects(world):
            if w <= 0 or h <= 0:
                continue
            pygame.draw.rect(screen, color, (x, y, w, h))
