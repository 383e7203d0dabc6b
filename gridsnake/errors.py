"""Exceptions raised by the snake simulation."""


class SnakeError(Exception):
    """Base class for simulation errors."""


class BoardFullError(SnakeError):
    """Raised when food cannot be placed because the snake covers every cell."""

    def __init__(self, width, height):
        super().__init__(f"no free cell left on a {width}x{height} board")
        self.width = width
        self.height = height
