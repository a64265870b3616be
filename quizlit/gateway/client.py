"""HTTP client for the remote text-generation backend."""

import logging

import requests

from quizlit.config import BackendConfig
from quizlit.errors import TransportError

logger = logging.getLogger(__name__)


def select_model(
    available: list[str], preferences: list[str], default: str
) -> str:
    """Pick the backend model to use.

    Preference terms are tried in priority order; for each term the
    available models are scanned in the order given, and the first model
    whose id contains the term wins. Otherwise the first available model
    is used, and with nothing available the default.
    """
    for preferred in preferences:
        for model in available:
            if preferred in model:
                return model
    if available:
        return available[0]
    return default


class ModelGateway:
    """Blocking client for the ``/models`` and ``/generate`` endpoints.

    Every call is bounded by ``timeout`` seconds and is attempted once.
    Network errors, non-2xx statuses and undecodable envelopes all raise
    TransportError.

    Args:
        base_url: Backend root URL, without a trailing slash.
        api_key: Optional bearer token.
        timeout: Per-request timeout in seconds.
        session: Optional requests session (injected in tests).
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 120.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_config(cls, config: BackendConfig) -> "ModelGateway":
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout=config.timeout_seconds,
        )

    def list_models(self) -> list[str]:
        """Return the model ids the backend currently serves."""
        data = self._request("GET", "/models")
        models = data.get("models")
        if not isinstance(models, list):
            raise TransportError("Backend /models response has no 'models' list")
        return [str(m) for m in models]

    def choose_model(self, preferences: list[str], default: str) -> str:
        """Select a model, falling back to ``default`` when listing fails."""
        try:
            available = self.list_models()
        except TransportError as e:
            logger.warning("Could not fetch models (%s), using default: %s", e, default)
            return default

        model = select_model(available, preferences, default)
        logger.info("Using backend model %s (from %d available)", model, len(available))
        return model

    def generate(
        self, model: str, prompt: str, temperature: float, max_tokens: int
    ) -> str:
        """Run one non-streaming generation and return the raw text."""
        payload = {
            "model": model,
            "prompt": prompt,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "stream": False,
        }
        logger.info(
            "POST %s/generate model=%s prompt_chars=%d temperature=%.1f max_tokens=%d",
            self.base_url,
            model,
            len(prompt),
            temperature,
            max_tokens,
        )
        data = self._request("POST", "/generate", json=payload)
        text = data.get("response")
        if not isinstance(text, str):
            raise TransportError("Backend /generate response has no 'response' text")
        return text

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _request(self, method: str, path: str, **kwargs: object) -> dict:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.ok:
            logger.error("Backend error %d from %s: %s", response.status_code, url, response.text)
            raise TransportError(
                f"API error (status {response.status_code}): {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Failed to decode response from {url}: {e}") from e
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected response shape from {url}")
        return data
