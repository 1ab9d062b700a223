from email_validator import EmailNotValidError, validate_email

from usermodel.core.models.exceptions import ConstraintViolationError


def ensure_valid_email(value, field: str) -> None:
    """Raise ConstraintViolationError unless ``value`` is a syntactically valid address."""
    if value is None:
        # non-null is enforced by the column itself
        return
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ConstraintViolationError(f"{field}: '{value}' is not a valid e-mail address. {e}", field=field) from e
