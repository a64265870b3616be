"""Quiz generation from study text with retrieval, LLM and rule-based paths."""

from quizlit.config import AppConfig, load_config
from quizlit.models import GenerationRequest, Question, Quiz
from quizlit.orchestrator import QuizGenerator

__all__ = ["AppConfig", "GenerationRequest", "Question", "Quiz", "QuizGenerator", "load_config"]
