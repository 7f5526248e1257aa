import pytest
from pydantic import ValidationError

from tabchat.config import AppConfig, create_app_config, load_config_from_env
from tabchat.constants import DEFAULT_PORT, get_mock_data_path

ENV_VARS = ["HOST", "PORT", "DEBUG", "CORS_ORIGINS", "MOCK_DATA_PATH", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestAppConfig:
    def test_defaults(self, clean_env):
        config = load_config_from_env()

        assert config.port == DEFAULT_PORT == 4000
        assert config.host == "0.0.0.0"
        assert config.cors_origins == ["*"]
        assert config.mock_data_path == get_mock_data_path()
        assert config.log_level == "INFO"
        assert config.debug is False

    def test_environment_overrides(self, clean_env, tmp_path):
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("HOST", "127.0.0.1")
        clean_env.setenv("DEBUG", "yes")
        clean_env.setenv("CORS_ORIGINS", "http://localhost:3000, https://chat.example.com")
        clean_env.setenv("MOCK_DATA_PATH", str(tmp_path / "answers.json"))
        clean_env.setenv("LOG_LEVEL", "debug")

        config = load_config_from_env()

        assert config.port == 8080
        assert config.host == "127.0.0.1"
        assert config.debug is True
        assert config.cors_origins == ["http://localhost:3000", "https://chat.example.com"]
        assert config.mock_data_path == str(tmp_path / "answers.json")
        assert config.log_level == "DEBUG"

    def test_invalid_port(self):
        with pytest.raises(ValidationError):
            create_app_config(port=70000)

    def test_overrides_on_defaults(self):
        config = create_app_config(port=5000)

        assert isinstance(config, AppConfig)
        assert config.port == 5000
        assert config.cors_origins == ["*"]
