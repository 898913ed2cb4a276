"""Errors raised while creating and reading reviews.

``ValidationFailed`` extends Protean's ``ValidationError`` so that its
``messages`` dict keeps the framework's ``{field: [message, ...]}`` shape.
Everything else derives from ``ReviewsError``.
"""

from typing import NamedTuple

from protean.exceptions import ValidationError


class Violation(NamedTuple):
    """A single broken input rule."""

    field: str
    message: str


class ReviewsError(Exception):
    """Base class for Reviews domain failures that are not input errors."""


class ValidationFailed(ValidationError):
    """The command broke one or more input rules. The handler never ran."""

    def __init__(self, violations):
        self.violations = list(violations)
        messages: dict[str, list[str]] = {}
        for violation in self.violations:
            messages.setdefault(violation.field, []).append(violation.message)
        super().__init__(messages)


class StoreUnavailable(ReviewsError):
    """The review store could not be reached or rejected the write."""


class PersistenceFailed(ReviewsError):
    """Creating a review failed because it could not be persisted."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Review could not be persisted: {cause}")


class PublicationFailed(ReviewsError):
    """An integration event could not be handed to the transport."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Event could not be published: {cause}")


class CommandCancelled(ReviewsError):
    """The caller cancelled the command before its handler started."""
