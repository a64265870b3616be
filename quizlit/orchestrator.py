"""Quiz generation orchestration: strategy choice and quiz assembly."""

import logging
import threading
from datetime import datetime

from quizlit.config import AppConfig
from quizlit.errors import (
    ConfigurationError,
    ContentError,
    MalformedResponseError,
    TransportError,
    ValidationError,
    raise_if_cancelled,
)
from quizlit.fallback.generator import RuleBasedGenerator
from quizlit.fallback.text_analysis import extract_sentences
from quizlit.gateway.client import ModelGateway
from quizlit.gateway.prompt import build_prompt, token_budget, truncate_source
from quizlit.models.quiz import Question, Quiz
from quizlit.models.request import GenerationRequest
from quizlit.parsing.response_parser import parse_response, to_questions
from quizlit.retrieval.embedding import Embedder
from quizlit.retrieval.selector import ContextSelector

logger = logging.getLogger(__name__)


class QuizGenerator:
    """Turns a GenerationRequest into a Quiz.

    With the backend enabled, the pipeline is context selection, model
    selection, generation and parsing. Backend failures propagate unless
    ``generation.fallback_on_backend_failure`` is set, in which case the
    rule-based generator takes over on the same context. With the backend
    disabled the rule-based generator runs directly.

    Args:
        config: Application configuration.
        gateway: Backend client; built from config when the backend is
            enabled and none is given.
        embedder: Embedding provider for context selection.
        fallback: Rule-based generator instance.
    """

    def __init__(
        self,
        config: AppConfig,
        gateway: ModelGateway | None = None,
        embedder: Embedder | None = None,
        fallback: RuleBasedGenerator | None = None,
    ) -> None:
        self._config = config
        if gateway is None and config.backend.enabled:
            if not config.backend.base_url:
                raise ConfigurationError("Backend is enabled but no base URL is configured")
            gateway = ModelGateway.from_config(config.backend)
        self._gateway = gateway
        self._selector = ContextSelector(config.chunking, config.retrieval, embedder)
        self._fallback = fallback or RuleBasedGenerator()

    @property
    def backend_enabled(self) -> bool:
        return self._config.backend.enabled and self._gateway is not None

    def resolve_question_count(self, requested: int) -> int:
        """Apply the default for 0 and clamp to the configured maximum."""
        policy = self._config.generation
        count = requested if requested > 0 else policy.default_question_count
        if count > policy.max_question_count:
            logger.info(
                "Requested %d questions, capping at %d", count, policy.max_question_count
            )
            count = policy.max_question_count
        return count

    def generate_quiz(
        self,
        request: GenerationRequest,
        cancel_event: threading.Event | None = None,
    ) -> Quiz:
        """Generate a quiz for the request.

        Args:
            request: Title, description, difficulty, source text and count.
            cancel_event: Set by the caller to abandon the request; checked
                between stages.

        Returns:
            A Quiz whose total_questions equals its question count.

        Raises:
            ConfigurationError: No strategy is available.
            ContentError: Source text is empty or has no usable sentences.
            TransportError: Backend unreachable or returned an error.
            MalformedResponseError: Backend output yielded no valid record.
            ValidationError: No question survived quality gating.
            GenerationCancelledError: cancel_event was set.
        """
        if not self.backend_enabled and not self._config.generation.rule_based_enabled:
            raise ConfigurationError("Backend is disabled and rule-based generation is off")
        if not request.source_text.strip():
            raise ContentError("Source text is empty")

        count = self.resolve_question_count(request.question_count)
        logger.info(
            "Generating quiz with %d questions for difficulty: %s", count, request.difficulty
        )

        content = request.source_text
        if self._config.retrieval.enabled:
            query = f"{request.description} {request.difficulty}".strip()
            content = self._selector.select(
                content,
                query=query,
                document_id=request.title.strip() or None,
                cancel_event=cancel_event,
            )
        raise_if_cancelled(cancel_event, "context selection")

        if self.backend_enabled:
            try:
                questions = self._generate_with_backend(content, request, count, cancel_event)
            except (TransportError, MalformedResponseError) as e:
                if not (
                    self._config.generation.fallback_on_backend_failure
                    and self._config.generation.rule_based_enabled
                ):
                    logger.error("Backend generation failed: %s", e)
                    raise
                logger.warning("Backend generation failed, using rule-based generator: %s", e)
                questions = self._generate_rule_based(
                    self._rule_based_source(request.source_text, content), count, cancel_event
                )
        else:
            questions = self._generate_rule_based(
                self._rule_based_source(request.source_text, content), count, cancel_event
            )

        now = datetime.now()
        quiz = Quiz(
            title=request.title,
            description=request.description,
            questions=questions,
            difficulty=request.difficulty,
            created_at=now,
            updated_at=now,
        )
        logger.info("Successfully generated quiz with %d questions", quiz.total_questions)
        return quiz

    def _generate_with_backend(
        self,
        content: str,
        request: GenerationRequest,
        count: int,
        cancel_event: threading.Event | None,
    ) -> list[Question]:
        backend = self._config.backend
        assert self._gateway is not None

        prompt = build_prompt(
            truncate_source(content, backend.max_source_chars),
            request,
            count,
            language=backend.output_language,
        )
        model = self._gateway.choose_model(backend.preferred_models, backend.default_model)
        raise_if_cancelled(cancel_event, "model selection")

        max_tokens = token_budget(
            count, backend.tokens_per_question, backend.min_tokens, backend.max_tokens
        )
        raw = self._gateway.generate(model, prompt, backend.temperature, max_tokens)
        raise_if_cancelled(cancel_event, "backend generation")

        records = parse_response(raw, self._config.generation.max_backend_records)
        return to_questions(records)

    def _rule_based_source(self, source_text: str, curated: str) -> str:
        """Full source when it fits the context budget, otherwise the curated context."""
        if len(source_text.encode("utf-8")) <= self._config.retrieval.max_context_bytes:
            return source_text
        return curated

    def _generate_rule_based(
        self,
        content: str,
        count: int,
        cancel_event: threading.Event | None,
    ) -> list[Question]:
        questions = self._fallback.generate(content, count, cancel_event)
        if questions:
            return questions
        if not extract_sentences(content):
            raise ContentError("No usable sentences found in source text")
        raise ValidationError("No generated question passed quality checks")
