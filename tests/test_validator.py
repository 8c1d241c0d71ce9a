import pytest

from vocalingo.errors import VALIDATION_ERROR_MESSAGE, ValidationError
from vocalingo.services.validator import validate_request

COMPLETE = {"targetWord": "hello", "spokenWord": "hello", "language": "English"}


def test_complete_request_passes():
    req = validate_request(COMPLETE)
    assert req.targetWord == "hello"
    assert req.spokenWord == "hello"
    assert req.language == "English"


@pytest.mark.parametrize("missing", ["targetWord", "spokenWord", "language"])
def test_missing_field_rejected_with_fixed_message(missing):
    payload = {k: v for k, v in COMPLETE.items() if k != missing}
    with pytest.raises(ValidationError) as exc_info:
        validate_request(payload)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == VALIDATION_ERROR_MESSAGE


@pytest.mark.parametrize("value", ["", None, 0, ["hello"]])
def test_empty_or_non_text_value_rejected(value):
    with pytest.raises(ValidationError):
        validate_request({**COMPLETE, "spokenWord": value})


@pytest.mark.parametrize("payload", [None, [], "hello", {}])
def test_non_object_payload_rejected(payload):
    with pytest.raises(ValidationError):
        validate_request(payload)


def test_same_message_whichever_fields_missing():
    with pytest.raises(ValidationError) as one:
        validate_request({"targetWord": "hello", "spokenWord": "hello"})
    with pytest.raises(ValidationError) as all_three:
        validate_request({})
    assert one.value.message == all_three.value.message


def test_whitespace_only_value_counts_as_present():
    req = validate_request({**COMPLETE, "spokenWord": "   "})
    assert req.spokenWord == "   "
