"""
Error taxonomy for the snake engine.
"""


class SnakeWorldError(ValueError):
    """Base class for errors raised by snakeworld."""


class ConfigError(SnakeWorldError):
    """Bad construction or configuration parameters."""


class InvalidStateError(SnakeWorldError):
    """An operation was requested in a mode that does not allow it."""
