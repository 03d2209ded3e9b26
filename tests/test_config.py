from app.core.config import Settings


def test_defaults():
    """Test the defaults used when nothing is configured."""
    settings = Settings()

    assert settings.environment == "development"
    assert settings.is_production is False
    assert settings.port == 3000


def test_production_from_environment(monkeypatch):
    """Test that ENVIRONMENT=production switches production mode on."""
    monkeypatch.setenv("ENVIRONMENT", "production")

    assert Settings().is_production is True


def test_production_requires_exact_value():
    """Test that only the exact value "production" counts."""
    assert Settings(ENVIRONMENT="Production").is_production is False
    assert Settings(ENVIRONMENT="staging").is_production is False


def test_port_from_environment(monkeypatch):
    """Test that PORT is read from the environment."""
    monkeypatch.setenv("PORT", "8080")

    assert Settings().port == 8080


def test_invalid_port_falls_back_to_default(monkeypatch):
    """Test that empty, zero and non-numeric ports fall back to 3000."""
    for value in ("", "0", "not-a-port"):
        monkeypatch.setenv("PORT", value)
        assert Settings().port == 3000
