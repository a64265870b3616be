"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from quizlit.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _clear_backend_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BACKEND_BASE_URL", raising=False)
    monkeypatch.delenv("BACKEND_API_KEY", raising=False)


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Quizlit"

    def test_default_chunking_config(self) -> None:
        config = AppConfig()
        assert config.chunking.chunk_size == 800
        assert config.chunking.chunk_overlap == 150

    def test_default_retrieval_config(self) -> None:
        config = AppConfig()
        assert config.retrieval.enabled is True
        assert config.retrieval.top_k == 8
        assert config.retrieval.max_context_bytes == 8000
        assert config.retrieval.default_query == "generate quiz key concepts"

    def test_default_backend_config(self) -> None:
        config = AppConfig()
        assert config.backend.enabled is False
        assert config.backend.preferred_models[0] == "qwen2.5:14b"
        assert config.backend.default_model == "qwen2.5:14b"
        assert config.backend.max_source_chars == 10000
        assert config.backend.api_key is None

    def test_default_generation_config(self) -> None:
        config = AppConfig()
        assert config.generation.default_question_count == 10
        assert config.generation.max_question_count == 15
        assert config.generation.fallback_on_backend_failure is False


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "retrieval": {"top_k": 3},
            "backend": {"enabled": True, "preferred_models": ["mistral"]},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.retrieval.top_k == 3
        assert config.backend.enabled is True
        assert config.backend.preferred_models == ["mistral"]
        # Other fields keep defaults
        assert config.chunking.chunk_size == 800

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Quizlit"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.generation.default_question_count == 10

    def test_env_vars_override_backend(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("BACKEND_BASE_URL", "https://llm.example.org/api")
        monkeypatch.setenv("BACKEND_API_KEY", "test-key-123")

        config = load_config(config_file)
        assert config.backend.base_url == "https://llm.example.org/api"
        assert config.backend.api_key == "test-key-123"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the project's own config.yaml."""
        config_path = Path(__file__).parent.parent / "config.yaml"
        config = load_config(config_path)
        assert config.app.name == "Quizlit"
        assert config.generation.max_backend_records == 15
