"""
Errors Module - Exception hierarchy for maze building, solving and configuration.

Every error raised by the library derives from LabyrinthError so callers
(the CLI in particular) can report a clean message instead of a traceback.
"""


class LabyrinthError(Exception):
    """Base class for all labyrinth errors."""
    pass


class OutOfBoundsError(LabyrinthError, ValueError):
    """Raised when a cell lies outside the maze rectangle."""

    def __init__(self, position, width: int, height: int):
        self.position = position
        self.width = width
        self.height = height
        super().__init__(
            f"Position {position} is outside the {width}x{height} maze"
        )


class InvalidPassageError(LabyrinthError, ValueError):
    """Raised when a passage would join cells that are not grid neighbours."""
    pass


class ProtocolError(LabyrinthError):
    """Raised when an algorithm breaks the insight/guess exchange."""
    pass


class EmptyGuessError(ProtocolError):
    """Raised when an algorithm returns a guess with no positions."""
    pass


class InvalidGuessError(ProtocolError):
    """Raised when a guess does not follow open passages from the start."""
    pass


class ExpiredContextError(ProtocolError):
    """Raised when a context is used after its step has finished."""
    pass


class SearchExhaustedError(LabyrinthError):
    """Raised when an algorithm has no unvisited branch left to explore."""
    pass


class StepLimitExceededError(LabyrinthError):
    """Raised when the executor runs past its configured step limit."""
    pass


class ConfigurationError(LabyrinthError, ValueError):
    """Raised for invalid configuration detected before solving starts."""
    pass
