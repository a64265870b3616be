"""Configuration loader for the Quizlit quiz generator."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Quizlit"
    version: str = "1.0.0"


class ChunkingConfig(BaseModel):
    """Text chunking configuration (sizes in characters)."""

    chunk_size: int = 800
    chunk_overlap: int = 150


class RetrievalConfig(BaseModel):
    """Context selection configuration."""

    enabled: bool = True
    top_k: int = 8
    max_context_bytes: int = 8000
    default_query: str = "generate quiz key concepts"


class BackendConfig(BaseModel):
    """Remote text-generation backend configuration."""

    enabled: bool = False
    base_url: str = "http://localhost:8000"
    api_key: str | None = None
    timeout_seconds: float = 120.0
    preferred_models: list[str] = Field(
        default_factory=lambda: [
            "qwen2.5:14b",
            "llama3:latest",
            "qwen2.5:7b",
            "llama3",
            "qwen2.5",
        ]
    )
    default_model: str = "qwen2.5:14b"
    temperature: float = 0.7
    max_source_chars: int = 10000
    tokens_per_question: int = 400
    min_tokens: int = 4000
    max_tokens: int = 8000
    output_language: str | None = None


class GenerationConfig(BaseModel):
    """Question-count policy and strategy selection."""

    default_question_count: int = 10
    max_question_count: int = 15
    rule_based_enabled: bool = True
    fallback_on_backend_failure: bool = False
    max_backend_records: int = 15


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    chunking: ChunkingConfig = Field(default_factory=ChunkingConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    backend: BackendConfig = Field(default_factory=BackendConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Backend endpoint and credentials from environment
    base_url = os.getenv("BACKEND_BASE_URL")
    if base_url:
        config.backend.base_url = base_url
    config.backend.api_key = os.getenv("BACKEND_API_KEY") or config.backend.api_key

    return config
