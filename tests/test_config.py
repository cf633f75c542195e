from plataforma_cursos.core.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.app_name == "Plataforma de cursos"
    assert settings.app_version == "1.0.0"
    assert settings.api_v1_str == "/api/v1"
    assert settings.actuator_base_path == "/actuator"
    assert settings.port == 8080
    assert settings.log_json is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_V1_STR", "/api/v2")
    monkeypatch.setenv("port", "9000")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = Settings(_env_file=None)
    assert settings.api_v1_str == "/api/v2"
    assert settings.port == 9000
    assert settings.log_json is True


def test_unknown_environment_keys_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\nSOMETHING_ELSE=1\n")

    settings = Settings(_env_file=env_file)
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
