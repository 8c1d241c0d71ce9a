"""Request validation: all three fields or nothing."""

from typing import Any

from vocalingo.errors import ValidationError
from vocalingo.models import PronunciationRequest

REQUIRED_FIELDS = ("targetWord", "spokenWord", "language")


def validate_request(payload: Any) -> PronunciationRequest:
    """Return a :class:`PronunciationRequest` or raise :class:`ValidationError`.

    A field counts as present only when it is a non-empty string. Anything
    that is not a mapping is treated as a request with no fields. The error
    is the same whichever field is missing.
    """
    if not isinstance(payload, dict):
        payload = {}

    values = {}
    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            raise ValidationError(f"missing or empty field: {field}")
        values[field] = value

    return PronunciationRequest(**values)
