"""Prompt text sent to the generative model for a pronunciation check.

Pure functions; the output depends only on the three arguments.
"""

OUTPUT_SCHEMA = """{
  "isCorrect": boolean,
  "targetPhonetic": "IPA transcription of target word",
  "spokenPhonetic": "IPA transcription of spoken attempt",
  "feedback": "Detailed feedback string",
  "commonMistakes": "Description of common mistakes",
  "culturalContext": "Cultural information if applicable, or null if not",
  "tips": ["array", "of", "improvement", "tips"],
  "encouragement": "Motivational message"
}"""

PROMPT_TEMPLATE = """As a multilingual pronunciation expert, evaluate the pronunciation of "{spoken_word}" compared to the target word "{target_word}" in {language}.

Provide a comprehensive analysis including:

1. Correctness: Determine if the pronunciation is correct or not.
2. Phonetic Transcription: Provide the IPA (International Phonetic Alphabet) transcription for both the target word and the spoken attempt.
3. Detailed Feedback:
   - Identify specific sounds or syllables that were pronounced correctly or incorrectly.
   - Explain any differences between the target and spoken pronunciations.
   - Describe the correct mouth positioning, tongue placement, and airflow for challenging sounds.
4. Common Mistakes: Mention typical errors made by learners of this language when pronouncing this word or similar sounds.
5. Cultural Context: If relevant, provide any cultural nuances or contexts related to the pronunciation or usage of the word.
6. Improvement Tips: Offer 3-5 practical exercises or techniques to help the learner improve their pronunciation.
7. Encouragement: Include a motivational message to encourage the learner's progress.

Format your response as JSON with the following structure:
{schema}

Ensure all text is appropriate for language learners and avoid using technical linguistic terminology without explanation."""


def build_prompt(target_word: str, spoken_word: str, language: str) -> str:
    """Render the evaluation prompt.

    Each argument is substituted exactly once; the seven evaluation concerns
    and the JSON output schema are fixed text.
    """
    return PROMPT_TEMPLATE.format(
        target_word=target_word,
        spoken_word=spoken_word,
        language=language,
        schema=OUTPUT_SCHEMA,
    )
