"""Remote text-generation backend access."""

from quizlit.gateway.client import ModelGateway, select_model
from quizlit.gateway.prompt import build_prompt, token_budget, truncate_source

__all__ = [
    "ModelGateway",
    "build_prompt",
    "select_model",
    "token_budget",
    "truncate_source",
]
