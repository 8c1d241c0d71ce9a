"""Client side of a pronunciation check: request glue and feedback display."""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from vocalingo.config import settings

logger = logging.getLogger(__name__)

CHECK_PATH = "/api/check-pronunciation"
MISSING_TARGET_MESSAGE = "Please enter a target word before speaking."
TRANSPORT_FAILURE_FEEDBACK = {
    "isCorrect": False,
    "feedback": "Error checking pronunciation. Please try again.",
}


@dataclass
class CheckOutcome:
    """Either a renderable feedback record or an error message for the user."""

    feedback: dict[str, Any] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.feedback is not None


class PronunciationClient:
    def __init__(
        self,
        base_url: str = settings.SERVICE_URL,
        session: requests.Session | None = None,
        timeout: float = 60.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def check(self, target_word: str, spoken_word: str, language_name: str) -> CheckOutcome:
        """Send one attempt to the service.

        A 400 reflects the server's message; every other failure is replaced
        by a local negative feedback record so there is always something to
        show.
        """
        if not target_word:
            return CheckOutcome(error=MISSING_TARGET_MESSAGE)

        payload = {
            "targetWord": target_word.lower(),
            "spokenWord": spoken_word,
            "language": language_name,
        }
        logger.info("targetWord: %s, Transcript: %s", payload["targetWord"], spoken_word)

        try:
            r = self.session.post(
                f"{self.base_url}{CHECK_PATH}", json=payload, timeout=self.timeout
            )
            if r.status_code == 400:
                return CheckOutcome(error=_error_message(r))
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error checking pronunciation: %s", exc)
            return CheckOutcome(feedback=dict(TRANSPORT_FAILURE_FEEDBACK))

        if not isinstance(data, dict):
            logger.error("Unexpected feedback payload: %r", data)
            return CheckOutcome(feedback=dict(TRANSPORT_FAILURE_FEEDBACK))
        return CheckOutcome(feedback=data)


def _error_message(response: requests.Response) -> str:
    try:
        message = response.json().get("error")
    except (ValueError, AttributeError):
        message = None
    return message or f"Request rejected ({response.status_code})"


# ── Display ─────────────────────────────────────────────────

_TEXT_FIELDS = [
    ("targetPhonetic", "Target pronunciation"),
    ("spokenPhonetic", "Your pronunciation"),
    ("feedback", "Feedback"),
    ("commonMistakes", "Common mistakes"),
    ("culturalContext", "Cultural context"),
]


def render_feedback(feedback: dict[str, Any]) -> list[str]:
    """Readable lines for every field present; absent or null fields are skipped."""
    lines: list[str] = []

    is_correct = feedback.get("isCorrect")
    if is_correct is not None:
        lines.append("Correct!" if is_correct else "Not quite right.")

    for key, label in _TEXT_FIELDS:
        value = feedback.get(key)
        if value is None or value == "":
            continue
        lines.append(f"{label}: {value}")

    tips = feedback.get("tips")
    if tips:
        lines.append("Tips:")
        if isinstance(tips, str):
            tips = [tips]
        lines.extend(f"  - {tip}" for tip in tips)

    encouragement = feedback.get("encouragement")
    if encouragement:
        lines.append(str(encouragement))

    return lines
