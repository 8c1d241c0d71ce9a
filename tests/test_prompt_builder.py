from vocalingo.services.prompt_builder import build_prompt


def test_prompt_is_deterministic():
    a = build_prompt("hello", "helo", "English")
    b = build_prompt("hello", "helo", "English")
    assert a == b


def test_inputs_appear_once_in_their_slots():
    prompt = build_prompt("zebrafruit", "zebrafroot", "Klingonese")
    assert prompt.count("zebrafruit") == 1
    assert prompt.count("zebrafroot") == 1
    assert prompt.count("Klingonese") == 1
    assert 'pronunciation of "zebrafroot"' in prompt
    assert 'target word "zebrafruit" in Klingonese' in prompt


def test_prompt_varies_with_each_input():
    base = build_prompt("hello", "hello", "English")
    assert build_prompt("hallo", "hello", "English") != base
    assert build_prompt("hello", "hallo", "English") != base
    assert build_prompt("hello", "hello", "German") != base


def test_seven_concerns_in_fixed_order():
    prompt = build_prompt("hello", "hello", "English")
    headings = [
        "1. Correctness",
        "2. Phonetic Transcription",
        "3. Detailed Feedback",
        "4. Common Mistakes",
        "5. Cultural Context",
        "6. Improvement Tips",
        "7. Encouragement",
    ]
    positions = [prompt.index(h) for h in headings]
    assert positions == sorted(positions)
    assert "IPA" in prompt
    assert "3-5" in prompt


def test_output_schema_is_embedded():
    prompt = build_prompt("hello", "hello", "English")
    for key in (
        "isCorrect", "targetPhonetic", "spokenPhonetic", "feedback",
        "commonMistakes", "culturalContext", "tips", "encouragement",
    ):
        assert f'"{key}"' in prompt
    assert "or null if not" in prompt


def test_braces_in_input_are_not_interpreted():
    prompt = build_prompt("{target}", "{0}", "{language}")
    assert '"{0}"' in prompt
    assert '"{target}"' in prompt
