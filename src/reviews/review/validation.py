"""Input rules for the CreateReview command.

Every rule is checked on its own so the caller sees all violations at
once. Pure and side-effect-free.
"""

from reviews.review.errors import Violation
from reviews.review.review import MAX_RATING, MAX_REVIEW_TEXT_LENGTH, MAX_USER_ID_LENGTH, MIN_RATING


def validate_create_review(command) -> list[Violation]:
    """Return the violations of ``command``; empty when it is valid."""
    violations = []

    if command.product_id is None or command.product_id <= 0:
        violations.append(Violation("product_id", "ProductId must be greater than 0"))

    user_id = command.user_id or ""
    if not user_id.strip():
        violations.append(Violation("user_id", "UserId is required"))
    if len(user_id) > MAX_USER_ID_LENGTH:
        violations.append(Violation("user_id", f"UserId must not exceed {MAX_USER_ID_LENGTH} characters"))

    if command.rating is None or not MIN_RATING <= command.rating <= MAX_RATING:
        violations.append(Violation("rating", f"Rating must be between {MIN_RATING} and {MAX_RATING}"))

    if command.review_text is not None and len(command.review_text) > MAX_REVIEW_TEXT_LENGTH:
        violations.append(
            Violation("review_text", f"Review text must not exceed {MAX_REVIEW_TEXT_LENGTH} characters")
        )

    return violations
