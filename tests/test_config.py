from unittest.mock import patch

import pytest

from ai_helper.config import HelperSettings, load_settings


class TestHelperSettings:
    def test_defaults(self):
        settings = HelperSettings()
        assert settings.api_key is None
        assert settings.backend == "anthropic"
        assert settings.model is None
        assert settings.max_tokens == 4000
        assert settings.log_level == "INFO"

    def test_log_level_normalized(self):
        assert HelperSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            HelperSettings(log_level="LOUD")

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_max_tokens(self, value):
        with pytest.raises(ValueError, match="positive"):
            HelperSettings(max_tokens=value)

    def test_non_integer_max_tokens(self):
        with pytest.raises(ValueError, match="integer"):
            HelperSettings(max_tokens="100")

    def test_empty_backend(self):
        with pytest.raises(ValueError):
            HelperSettings(backend="")


class TestLoadSettings:
    def test_from_mapping(self):
        settings = load_settings(
            {
                "ANTHROPIC_API_KEY": "sk-1",
                "AI_HELPER_BACKEND": "mock",
                "AI_HELPER_MODEL": "claude-z",
                "AI_HELPER_MAX_TOKENS": "256",
                "AI_HELPER_LOG_LEVEL": "warning",
                "AZURE_OPENAI_ENDPOINT": "https://e",
                "AZURE_OPENAI_API_KEY": "az",
                "AZURE_OPENAI_DEPLOYMENT_NAME": "dep",
                "AZURE_OPENAI_API_VERSION": "v1",
            }
        )

        assert settings.api_key == "sk-1"
        assert settings.backend == "mock"
        assert settings.model == "claude-z"
        assert settings.max_tokens == 256
        assert settings.log_level == "WARNING"
        assert settings.azure_endpoint == "https://e"
        assert settings.azure_api_key == "az"
        assert settings.azure_deployment == "dep"
        assert settings.azure_api_version == "v1"

    def test_empty_mapping_gives_defaults(self):
        settings = load_settings({})
        assert settings.api_key is None
        assert settings.backend == "anthropic"
        assert settings.max_tokens == 4000

    def test_empty_values_count_as_unset(self):
        settings = load_settings({"ANTHROPIC_API_KEY": "", "AI_HELPER_MAX_TOKENS": ""})
        assert settings.api_key is None
        assert settings.max_tokens == 4000

    def test_bad_max_tokens(self):
        with pytest.raises(ValueError, match="AI_HELPER_MAX_TOKENS"):
            load_settings({"AI_HELPER_MAX_TOKENS": "lots"})

    def test_reads_process_environment_and_dotenv(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")
        monkeypatch.delenv("AI_HELPER_MAX_TOKENS", raising=False)

        with patch("ai_helper.config.find_dotenv", return_value="/work/.env") as mock_find, \
                patch("ai_helper.config.load_dotenv") as mock_load:
            settings = load_settings()

        mock_find.assert_called_once_with(usecwd=True)
        mock_load.assert_called_once_with("/work/.env")
        assert settings.api_key == "sk-env"

    def test_dotenv_found_from_working_directory(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("ANTHROPIC_API_KEY=sk-dotenv\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        monkeypatch.delenv("AI_HELPER_MAX_TOKENS", raising=False)
        monkeypatch.delenv("AI_HELPER_BACKEND", raising=False)
        monkeypatch.delenv("AI_HELPER_LOG_LEVEL", raising=False)

        settings = load_settings()

        assert settings.api_key == "sk-dotenv"
