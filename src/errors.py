"""Exception hierarchy for rozmarra.

Bad top-level input never raises: the services return a sentinel instead.
These exceptions cover the cases that are bugs in the caller, such as a
malformed entry inside an otherwise valid collection.
"""

from typing import Optional


class RozmarraError(Exception):
    """Base exception for all rozmarra errors.

    All custom exceptions inherit from this base class for easy catching.
    """

    pass


class ValidationError(RozmarraError):
    """Validation errors (invalid input, malformed data)."""

    pass


class RecordError(ValidationError):
    """A single record inside a collection is malformed.

    Raised for cart items, addon strings and auction players whose shape the
    parser cannot make sense of.

    Attributes:
        index: Position of the offending record in its collection, if known
    """

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"record {index}: {message}"
        super().__init__(message)
        self.index = index


class ConfigurationError(RozmarraError):
    """Configuration errors (invalid settings, unusable log directory)."""

    pass
