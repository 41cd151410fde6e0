"""Exception hierarchy for eventide.

All custom exceptions inherit from EventideError base class.
"""


class EventideError(Exception):
    """Base exception for all eventide errors.

    Errors raised by listeners, observers or transaction bodies are never
    wrapped in this hierarchy; they propagate to the caller unchanged.
    """


class InvalidListenerError(EventideError, TypeError):
    """Listener validation failed.

    Raised when a non-callable object is registered as a listener.
    No registry state is changed when this is raised.

    This wraps pydantic.ValidationError to provide a framework-specific exception type.
    """
