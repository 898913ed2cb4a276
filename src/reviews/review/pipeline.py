"""Command pipeline: cross-cutting stages composed around a single handler.

A middleware is a plain function ``(command, call_next) -> result`` that
decides whether and when the next stage runs. The stages are listed
explicitly, outermost first, so their order is fixed where the pipeline
is built:

    log_command -> validate_with(validator) -> [cancellation check] -> handler

Cancellation is only honored up to the start of the handler. Once the
handler runs, the write is allowed to complete and its result returned.
"""

from collections.abc import Callable, Iterable
from functools import partial
from typing import Any
from uuid import uuid4

from reviews.review.creation import CreateReview, CreateReviewHandler, utc_now
from reviews.review.errors import CommandCancelled, ValidationFailed
from reviews.review.review import Review
from reviews.review.validation import validate_create_review
from reviews.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

Middleware = Callable[[Any, Callable[[Any], Any]], Any]


# ---------------------------------------------------------------------------
# Middlewares
# ---------------------------------------------------------------------------
def log_command(command, call_next):
    """Log entry with the command payload, then success or failure on exit."""
    add_context(command_id=str(uuid4()), command_type=type(command).__name__)
    logger.info("command_received", payload=command.to_dict())
    try:
        result = call_next(command)
    except Exception as exc:
        logger.warning("command_failed", error_type=type(exc).__name__, error=str(exc))
        raise
    else:
        logger.info("command_succeeded")
        return result
    finally:
        clear_context("command_id", "command_type")


def validate_with(validator: Callable[[Any], list]) -> Middleware:
    """Reject the command with ``ValidationFailed`` if ``validator`` finds violations."""

    def validate(command, call_next):
        violations = validator(command)
        if violations:
            logger.info(
                "command_validation_failed",
                violations=[violation._asdict() for violation in violations],
            )
            raise ValidationFailed(violations)
        return call_next(command)

    return validate


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------
class CommandPipeline:
    def __init__(self, handler: Callable[[Any], Any], middlewares: Iterable[Middleware] = ()):
        self.handler = handler
        self.middlewares = tuple(middlewares)

    def execute(self, command, cancel_token=None):
        """Run ``command`` through every middleware and the handler.

        ``cancel_token`` is anything with an ``is_set()`` method, such as
        ``threading.Event``. It is checked once, right before the handler.
        """

        def run_handler(cmd):
            if cancel_token is not None and cancel_token.is_set():
                raise CommandCancelled(f"{type(cmd).__name__} cancelled before handling")
            return self.handler(cmd)

        call = run_handler
        for middleware in reversed(self.middlewares):
            call = partial(middleware, call_next=call)
        return call(command)


def create_review_pipeline(repository=None, publisher=None, clock=utc_now) -> CommandPipeline:
    """The pipeline wrapping every review creation."""
    return CommandPipeline(
        handler=CreateReviewHandler(repository=repository, publisher=publisher, clock=clock),
        middlewares=[
            log_command,
            validate_with(validate_create_review),
        ],
    )


def create_review(product_id, user_id, rating, review_text=None, cancel_token=None, pipeline=None) -> Review:
    """Create a review through the command pipeline and return the stored review."""
    command = CreateReview(
        product_id=product_id,
        user_id=user_id,
        rating=rating,
        review_text=review_text,
    )
    return (pipeline or create_review_pipeline()).execute(command, cancel_token=cancel_token)
