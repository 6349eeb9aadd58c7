"""Custom exceptions for feedboat.

This module defines a hierarchy of exceptions for different error types:
- FeedboatError: Base exception for all feedboat errors
- EventSourceClosed: The keyboard/resize event source stopped producing
- ConfigurationError: Configuration related errors
"""

from typing import Optional


class FeedboatError(Exception):
    """Base exception for all feedboat errors.

    All feedboat-specific exceptions inherit from this class, allowing
    callers to catch all feedboat errors with a single except clause.
    """

    pass


class EventSourceClosed(FeedboatError):
    """The event source has no producers left.

    Raised by EventsSource.next() instead of returning an event, so the
    dashboard loop can tell "no more input" apart from "event received".

    Attributes:
        producer: Name of the producer whose exit closed the source
    """

    def __init__(self, message: str, producer: Optional[str] = None):
        super().__init__(message)
        self.producer = producer


class ConfigurationError(FeedboatError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Key bindings that are not a single letter
    - Cycle-next and cycle-previous bound to the same letter
    - Unknown config keys passed to `feedboat config set`
    """

    pass
