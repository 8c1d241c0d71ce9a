"""Speech capture lifecycle for a practice session.

The recognizer itself is an external capability (a browser speech API, a
desktop ASR engine, or typed input). This module only guarantees the
session rules: one capture at a time, a target word before listening, the
locale follows the selected language, and the recognizer is aborted on
every exit path.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from vocalingo.client import CheckOutcome, PronunciationClient
from vocalingo.languages import DEFAULT_LANGUAGE, Language

logger = logging.getLogger(__name__)


class CaptureError(Exception):
    """The recognizer could not deliver a transcript."""


class CaptureBusyError(CaptureError):
    """A capture is already running for this session."""


class MissingTargetWordError(CaptureError):
    def __init__(self):
        super().__init__("Please enter a target word before starting.")


class SpeechRecognizer:
    """Single-shot recognizer: no continuous mode, no interim results."""

    def start(self, locale: str) -> None:
        raise NotImplementedError

    def listen(self) -> str:
        """Block until the terminal transcript; raise CaptureError otherwise."""
        raise NotImplementedError

    def abort(self) -> None:
        raise NotImplementedError


class TypedRecognizer(SpeechRecognizer):
    """Reads the "spoken" attempt as a line of text, for terminals and tests."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdin
        self.locale: str | None = None
        self.active = False

    def start(self, locale: str) -> None:
        self.locale = locale
        self.active = True

    def listen(self) -> str:
        if not self.active:
            raise CaptureError("aborted")
        line = self.stream.readline()
        self.active = False
        if not line.strip():
            raise CaptureError("no-speech")
        return line.strip()

    def abort(self) -> None:
        self.active = False


class PracticeSession:
    def __init__(
        self,
        recognizer: SpeechRecognizer,
        client: PronunciationClient,
        language: Language = DEFAULT_LANGUAGE,
    ):
        self.recognizer = recognizer
        self.client = client
        self.language = language
        self._listening = False

    @property
    def listening(self) -> bool:
        return self._listening

    @contextmanager
    def capture(self, target_word: str) -> Iterator[SpeechRecognizer]:
        """Start the recognizer for *target_word*; always abort it afterwards."""
        if not target_word:
            raise MissingTargetWordError()
        if self._listening:
            raise CaptureBusyError("A capture is already in progress.")

        self._listening = True
        try:
            self.recognizer.start(self.language.code)
            yield self.recognizer
        finally:
            self._listening = False
            self.recognizer.abort()

    def set_language(self, language: Language) -> None:
        """Rebind the locale; a running capture is aborted first."""
        if self._listening:
            logger.info("Language changed during capture, aborting")
            self.recognizer.abort()
        self.language = language

    def attempt(self, target_word: str) -> CheckOutcome:
        """Capture one attempt and have it checked against *target_word*."""
        with self.capture(target_word) as recognizer:
            transcript = recognizer.listen().lower()
        return self.client.check(target_word, transcript, self.language.name)

    def close(self) -> None:
        self.recognizer.abort()
        self._listening = False

    def __enter__(self) -> "PracticeSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
