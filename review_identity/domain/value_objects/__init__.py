"""Domain value objects."""

from review_identity.domain.value_objects.email import Email, normalize_email

__all__ = ["Email", "normalize_email"]
