"""The check pipeline: validate → prompt → model → normalize."""

import logging
from typing import Any

from vocalingo.services.model_invoker import TextGenerator
from vocalingo.services.prompt_builder import build_prompt
from vocalingo.services.response_normalizer import normalize_response
from vocalingo.services.validator import validate_request

logger = logging.getLogger(__name__)


class PronunciationChecker:
    """Runs one pronunciation check per call.

    Holds only its collaborators, so one instance serves concurrent requests.
    """

    def __init__(self, generator: TextGenerator, strict_schema: bool = False):
        self.generator = generator
        self.strict_schema = strict_schema

    def check(self, payload: Any) -> Any:
        """Return the feedback record for *payload*.

        Raises ``ValidationError`` before any model call, ``UpstreamError``
        when the model call fails and ``MalformedResponseError`` when the
        completion cannot be parsed.
        """
        request = validate_request(payload)
        prompt = build_prompt(request.targetWord, request.spokenWord, request.language)

        logger.info(
            "Checking %r against target %r (%s)",
            request.spokenWord, request.targetWord, request.language,
        )
        raw = self.generator.complete(prompt)
        logger.debug("Raw model response: %s", raw)

        return normalize_response(raw, strict=self.strict_schema)
