"""
Custom exceptions shared by all layers.

Everything derives from GameError, so a caller can catch a single type at the top.
NOTE: rejected moves are not errors. The engine answers those with a REJECTED result instead.
"""


class GameError(Exception):
    """Base class of all custom exceptions in this project."""


class GameStateError(GameError):
    """A game state (or its transport model) cannot be decoded or breaks an invariant."""


class InvalidBoardError(GameStateError):
    """Board notation that does not describe a 3x3 board."""


class RepositoryError(GameError):
    """Persistence layer could not find (or store) the requested game."""


class InvalidRequestError(GameError):
    """Incoming request does not pass validation."""
