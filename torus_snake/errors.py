"""Exceptions raised by the game."""


class GameError(Exception):
    """Base class for all errors raised by torus_snake."""


class AssetError(GameError):
    """A font or sound file given on the command line could not be loaded."""

    def __init__(self, kind, path, reason):
        super().__init__(f"Could not load {kind} '{path}': {reason}")
        self.kind = kind
        self.path = path
        self.reason = reason


class BoardFullError(GameError):
    """Fruit placement was asked for on a grid with no free cell."""
