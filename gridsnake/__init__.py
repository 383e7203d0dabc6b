"""Package initializer for the gridsnake package.

The simulation types are cheap to import. ``SnakeGame`` pulls in the window,
font and audio setup, so it is exported lazily::

	from gridsnake import SnakeGame
"""

from gridsnake.geometry import Direction, Edge, Position
from gridsnake.snake import Snake
from gridsnake.world import World

__version__ = "0.2"

__all__ = ["Direction", "Edge", "Position", "Snake", "SnakeGame", "World"]

def __getattr__(name: str):
	if name == "SnakeGame":
		from .utils import SnakeGame

		return SnakeGame
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
