"""Prompt construction and request sizing for backend generation."""

import logging

from quizlit.models.request import GenerationRequest

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "\n[Content truncated due to size...]"


def token_budget(
    question_count: int,
    per_question: int = 400,
    floor: int = 4000,
    ceiling: int = 8000,
) -> int:
    """Scale the completion budget with the question count, within bounds."""
    return max(floor, min(question_count * per_question, ceiling))


def truncate_source(text: str, max_chars: int = 10000) -> str:
    """Cap the source text sent to the backend, marking any cut."""
    if len(text) <= max_chars:
        return text
    logger.warning("Content too large (%d chars), truncating to %d", len(text), max_chars)
    return text[:max_chars] + TRUNCATION_MARKER


def build_prompt(
    source_text: str,
    request: GenerationRequest,
    question_count: int,
    language: str | None = None,
) -> str:
    """Build the quiz-generation prompt.

    Args:
        source_text: Curated (and already truncated) content.
        request: Supplies title and description.
        question_count: Exact number of questions to ask for.
        language: Optional language all output must be written in.

    Returns:
        The full prompt text.
    """
    language_rules = ""
    if language:
        language_rules = (
            f"- LANGUAGE: Generate ALL questions and options in {language} ONLY\n"
            "- Keep language consistent across all questions and answer options\n"
        )

    return f"""Create a quiz with EXACTLY {question_count} questions based on the following content.

Content:
{source_text}

Requirements:
- Title: {request.title}
- Description: {request.description}
- Generate EXACTLY {question_count} questions - NO MORE, NO LESS
- ONLY generate multiple-choice questions with 4 options each
- Each question must have exactly 4 answer options
- Indicate the correct answer as index (0-3)
- DO NOT include fill-in-the-blank or incomplete questions
{language_rules}
QUALITY GUIDELINES:
- Make questions clear, specific, and directly related to the content
- Ensure all 4 options are plausible but only one is correct
- Avoid obvious patterns (e.g., correct answer always being option A)
- Each question should test different concepts from the material
- Write concise explanations that clarify why the answer is correct

Format as JSON ARRAY with this EXACT structure:
[
  {{
    "question": "What is the complete question text here?",
    "options": ["Option A text", "Option B text", "Option C text", "Option D text"],
    "correctAnswer": 0,
    "explanation": "Brief explanation"
  }}
]

CRITICAL REQUIREMENTS:
- You MUST generate exactly {question_count} questions in the JSON array
- Question text must be complete sentences, not fill-in-the-blank format
- Do not use underscores (____) in questions
- correctAnswer must be 0, 1, 2, or 3 (array index)
- Return ONLY a JSON array of objects, no additional text or wrapper object

Return ONLY valid JSON array, no markdown formatting."""
