"""Shared fixtures: a stub model and a TestClient around the app."""

import json

import pytest
from fastapi.testclient import TestClient

from vocalingo.config import Settings
from vocalingo.main import create_app
from vocalingo.services.model_invoker import TextGenerator

HELLO_FEEDBACK = {
    "isCorrect": True,
    "targetPhonetic": "həˈloʊ",
    "spokenPhonetic": "həˈloʊ",
    "feedback": "Both syllables were clear and the stress fell on the second one.",
    "commonMistakes": "Dropping the initial /h/ or stressing the first syllable.",
    "culturalContext": None,
    "tips": [
        "Exhale gently before the vowel to voice the /h/.",
        "Lengthen the final diphthong slightly.",
        "Record yourself and compare with a native speaker.",
    ],
    "encouragement": "Great job, keep it up!",
}


class StubGenerator(TextGenerator):
    """Returns a canned completion (or raises) and remembers every prompt."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    @property
    def calls(self) -> int:
        return len(self.prompts)


@pytest.fixture
def hello_feedback():
    return dict(HELLO_FEEDBACK)


@pytest.fixture
def stub():
    return StubGenerator(reply="```json\n" + json.dumps(HELLO_FEEDBACK) + "\n```")


@pytest.fixture
def make_client():
    """Build a TestClient around *generator*; the lifespan runs on enter."""
    clients = []

    def _make(generator: TextGenerator, strict: bool = False) -> TestClient:
        settings = Settings()
        settings.STRICT_FEEDBACK_SCHEMA = strict
        client = TestClient(create_app(generator=generator, settings=settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, stub):
    return make_client(stub)
