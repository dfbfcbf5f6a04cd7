import uuid

from rest_framework.exceptions import ValidationError


def parse_uuid(value, name):
    """Parse an id coming from a query string or body; 400 when malformed."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{name} inválido: {value}")
