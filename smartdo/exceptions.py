class SmartdoError(Exception):
    """Base class for errors raised by SmartDo services."""


class ValidationError(SmartdoError):
    """Raised when caller-supplied input fails shape or required-field checks."""


class UpstreamError(SmartdoError):
    """Raised when the Gemini call fails or returns unusable output."""


class TaskNotFoundError(SmartdoError):
    """Raised when a task id is not in the store."""
