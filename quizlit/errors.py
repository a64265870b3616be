"""Exception hierarchy for quiz generation."""

import threading


class QuizGenerationError(Exception):
    """Base class for all quiz generation failures."""


class ConfigurationError(QuizGenerationError):
    """No usable generation strategy is configured."""


class ContentError(QuizGenerationError):
    """Source text is empty or yields no usable sentences."""


class TransportError(QuizGenerationError):
    """The backend could not be reached or answered with an error.

    Args:
        message: Human-readable description.
        status_code: HTTP status, when a response was received.
        body: Raw response body kept for diagnostics.
    """

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedResponseError(QuizGenerationError):
    """Backend output could not be turned into any valid question record."""


class ValidationError(QuizGenerationError):
    """Generation finished but no question passed quality gating."""


class EmbeddingError(QuizGenerationError):
    """An embedding provider failed to embed a text."""


class GenerationCancelledError(QuizGenerationError):
    """The caller cancelled the request before it completed."""


def raise_if_cancelled(cancel_event: threading.Event | None, stage: str) -> None:
    """Raise GenerationCancelledError if the caller set the cancel event."""
    if cancel_event is not None and cancel_event.is_set():
        raise GenerationCancelledError(f"Generation cancelled during {stage}")
