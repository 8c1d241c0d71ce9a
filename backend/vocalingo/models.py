"""Pydantic models for API request/response schemas."""

from pydantic import BaseModel, ConfigDict


# ── Requests ────────────────────────────────────────────────

class PronunciationRequest(BaseModel):
    targetWord: str
    spokenWord: str
    language: str                         # display name, e.g. "English"


# ── Responses ───────────────────────────────────────────────

class PronunciationFeedback(BaseModel):
    """Feedback record produced by the model.

    Every field is optional and unknown keys are kept: the service returns
    what the model sent, it does not fill in or drop anything.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    isCorrect: bool | None = None
    targetPhonetic: str | None = None
    spokenPhonetic: str | None = None
    feedback: str | None = None
    commonMistakes: str | None = None
    culturalContext: str | None = None
    tips: list[str] | None = None
    encouragement: str | None = None


class ErrorOut(BaseModel):
    error: str


class LanguageOut(BaseModel):
    code: str
    name: str
