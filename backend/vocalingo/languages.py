"""Practice languages: speech-recognition locale + the name used in prompts."""

from typing import NamedTuple


class Language(NamedTuple):
    code: str   # BCP-47 locale handed to the speech recognizer
    name: str   # human-readable name sent to the service


LANGUAGES: list[Language] = [
    Language("ar-SA", "Arabic"),
    Language("zh-CN", "Chinese (Mandarin)"),
    Language("en-US", "English"),
    Language("fr-FR", "French"),
    Language("de-DE", "German"),
    Language("hi-IN", "Hindi"),
    Language("it-IT", "Italian"),
    Language("ja-JP", "Japanese"),
    Language("ko-KR", "Korean"),
    Language("pt-BR", "Portuguese"),
    Language("ru-RU", "Russian"),
    Language("es-ES", "Spanish"),
]

DEFAULT_LANGUAGE = LANGUAGES[2]


def find_language(code: str) -> Language | None:
    for lang in LANGUAGES:
        if lang.code.lower() == code.lower():
            return lang
    return None
