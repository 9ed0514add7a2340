from investsim.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.CURRENCY == "BRL"
    assert settings.LOG_LEVEL == "INFO"
    assert "http://localhost:5173" in settings.CORS_ORIGINS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INVESTSIM_CURRENCY", "USD")
    monkeypatch.setenv("INVESTSIM_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("INVESTSIM_CORS_ORIGINS", '["https://sim.example.com"]')

    settings = Settings(_env_file=None)

    assert settings.CURRENCY == "USD"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.CORS_ORIGINS == ["https://sim.example.com"]
