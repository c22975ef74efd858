"""Field checks shared by the deck and flashcard services."""

from flashycardy.exceptions import ValidationError


def require_text(value: str | None, field: str, max_length: int) -> str:
    """Return ``value`` if it is non-blank and within ``max_length``."""
    if value is None or not value.strip():
        raise ValidationError(f"{field.capitalize()} is required", field=field)
    if len(value) > max_length:
        raise ValidationError(
            f"{field.capitalize()} is too long (maximum {max_length} characters)", field=field
        )
    return value


def optional_text(value: str | None, field: str, max_length: int) -> str | None:
    """Return ``value`` or None for blank input; reject values over ``max_length``."""
    if value is None:
        return None
    if len(value) > max_length:
        raise ValidationError(
            f"{field.capitalize()} is too long (maximum {max_length} characters)", field=field
        )
    return value if value.strip() else None
