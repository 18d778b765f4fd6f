"""Engine exceptions."""

from mindi.models.enums import ErrorCode


class MindiError(Exception):
    """Base class for all engine errors."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        """Initialize with a human-readable message and an error code."""
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidTableSizeError(MindiError, ValueError):
    """Raised when a match is requested for an unsupported table size."""

    def __init__(self, table_size: object) -> None:
        """Initialize with the rejected table size."""
        super().__init__(
            f"Table size must be one of 4, 6 or 8, got {table_size!r}",
            ErrorCode.INVALID_TABLE_SIZE,
        )
        self.table_size = table_size


class IllegalMoveError(MindiError):
    """Raised when a play is rejected. Match state is left untouched."""


class ActionAfterTerminationError(IllegalMoveError):
    """Raised when something tries to act on a match that is already over."""

    def __init__(self, message: str = "Match is over") -> None:
        """Initialize with the GAME_OVER error code."""
        super().__init__(message, ErrorCode.GAME_OVER)


class MatchNotFoundError(MindiError, KeyError):
    """Raised when a session id is unknown."""

    def __init__(self, session_id: str) -> None:
        """Initialize with the missing session id."""
        super().__init__(f"Match {session_id} not found", ErrorCode.MATCH_NOT_FOUND)
        self.session_id = session_id

    def __str__(self) -> str:
        """Return the message (KeyError would quote it otherwise)."""
        return self.message
