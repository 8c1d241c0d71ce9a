"""Practise a word from the terminal against a running VocaLingo server.

Usage:
    vocalingo-practice --word hello                   # type your attempt
    vocalingo-practice --word bonjour --language fr-FR --spoken bonjour
"""

import argparse
import io
import sys

from vocalingo.capture import CaptureError, PracticeSession, TypedRecognizer
from vocalingo.client import PronunciationClient, render_feedback
from vocalingo.config import settings
from vocalingo.languages import DEFAULT_LANGUAGE, LANGUAGES, find_language


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="VocaLingo pronunciation practice")
    parser.add_argument("--word", required=True, help="Word to practise")
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE.code,
        help=f"Locale code ({', '.join(lang.code for lang in LANGUAGES)})",
    )
    parser.add_argument("--spoken", help="Attempt as text (default: read one line from stdin)")
    parser.add_argument("--url", default=settings.SERVICE_URL, help="Service base URL")
    args = parser.parse_args(argv)

    language = find_language(args.language)
    if language is None:
        print(f"[FAIL] Unknown language code: {args.language}")
        return 1

    stream = io.StringIO(args.spoken + "\n") if args.spoken is not None else sys.stdin
    if args.spoken is None:
        print(f"Say (type) '{args.word}' in {language.name}:")

    with PracticeSession(TypedRecognizer(stream), PronunciationClient(args.url), language) as session:
        try:
            outcome = session.attempt(args.word)
        except CaptureError as exc:
            print(f"[FAIL] Speech recognition error: {exc}. Please try again.")
            return 1

    if outcome.error:
        print(f"[FAIL] {outcome.error}")
        return 1

    for line in render_feedback(outcome.feedback or {}):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
