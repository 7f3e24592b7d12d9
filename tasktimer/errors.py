class TimerError(Exception):
    """Base exception for task timer domain errors."""

    exit_code = 1


class ValidationError(TimerError):
    """Raised when user input is malformed (empty name, bad id, bad filter)."""

    exit_code = 2


class NotFoundError(TimerError):
    """Raised when an operation targets a task id that does not exist."""

    exit_code = 3


class InvalidTransitionError(TimerError):
    """Raised when a task's current status does not allow the operation."""

    exit_code = 4


class StorageError(TimerError):
    """Raised when the database cannot be opened or a statement fails."""

    exit_code = 5
