import logging
import random

from config import CELL_SCALE, FOOD_START, GRID_HEIGHT, GRID_WIDTH, TICK_DELAY
from gridsnake.errors import BoardFullError
from gridsnake.geometry import Position

logger = logging.getLogger(__name__)


class World:
    """Board parameters plus the one piece of mutable board state: the food."""

    def __init__(self, width=GRID_WIDTH, height=GRID_HEIGHT, scale=CELL_SCALE,
                 tick_delay=TICK_DELAY, food=FOOD_START, rng=None):
        for name, value in (("width", width), ("height", height),
                            ("scale", scale), ("tick_delay", tick_delay)):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        self._initial = (width, height, scale, tick_delay, Position(*food))
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self):
        """Restore the values the world was created with."""
        self.width, self.height, self.scale, self.tick_delay, self.food = self._initial

    @property
    def pixel_size(self):
        return (self.width * self.scale, self.height * self.scale)

    def random_cell(self):
        return Position(self.rng.randrange(self.width), self.rng.randrange(self.height))

    def respawn_food(self, body):
        """Move the food to a uniformly random cell not covered by ``body``.

        Rejection sampling with no retry cap; a board with no free cell left
        raises BoardFullError instead of looping forever.
        """
        occupied = set(body)
        if len(occupied) >= self.width * self.height:
            raise BoardFullError(self.width, self.height)

        food = self.random_cell()
        while food in occupied:
            food = self.random_cell()
        self.food = food
        logger.debug("Food placed at (%d, %d)", food.x, food.y)
        return food
