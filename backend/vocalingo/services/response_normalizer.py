"""Turn a raw model completion into the feedback record.

The model is asked for bare JSON but often wraps it in a markdown code
fence. Fences are removed, nothing else is repaired.
"""

import json
import logging
import math
import re
from typing import Any

from pydantic import ValidationError as SchemaError

from vocalingo.errors import MalformedResponseError
from vocalingo.models import PronunciationFeedback

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_fences(raw: str) -> str:
    """Remove every ```json / ``` marker (any case) and surrounding whitespace."""
    return _FENCE_RE.sub("", raw).strip()


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def parse_feedback_json(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, RecursionError) as exc:
        raise MalformedResponseError(f"completion is not valid JSON: {exc}") from exc


def normalize_response(raw: str, strict: bool = False) -> Any:
    """Strip fences and parse *raw* as JSON.

    With ``strict`` off the parsed value is returned as-is, whatever its
    shape. With ``strict`` on it must be an object whose present feedback
    fields have the expected types; missing and extra keys are still
    accepted and the parsed value is still returned unmodified.
    """
    data = parse_feedback_json(strip_fences(raw))

    if strict:
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"completion is a JSON {type(data).__name__}, expected an object"
            )
        try:
            PronunciationFeedback.model_validate(data)
        except SchemaError as exc:
            raise MalformedResponseError(f"feedback schema mismatch: {exc}") from exc

    return data
