import pytest
from pydantic import ValidationError

from odb_datasources.shared.core.config import (
    Settings,
    get_settings,
    reload_settings_from_environment,
)


def test_defaults():
    settings = Settings()

    assert settings.AWS_DEFAULT_REGION == "us-east-1"
    assert settings.ODB_READ_TIMEOUT_SECONDS == 60.0
    assert settings.ODB_CONNECT_TIMEOUT_SECONDS == 10.0
    assert settings.ENVIRONMENT == "development"


def test_unknown_environment_rejected():
    with pytest.raises(ValidationError, match="ENVIRONMENT must be one of"):
        Settings(ENVIRONMENT="qa")


def test_testing_flag_rejected_in_production():
    """Verify TESTING cannot leak into a production runtime."""
    with pytest.raises(ValidationError, match="TESTING must be false"):
        Settings(ENVIRONMENT="production", TESTING=True)


def test_production_allowed_without_testing_flag():
    settings = Settings(ENVIRONMENT="production", TESTING=False)

    assert settings.ENVIRONMENT == "production"


@pytest.mark.parametrize(
    "overrides",
    [{"ODB_READ_TIMEOUT_SECONDS": 0}, {"ODB_CONNECT_TIMEOUT_SECONDS": -1.0}],
)
def test_timeouts_must_be_positive(overrides):
    with pytest.raises(ValidationError, match="timeouts must be positive"):
        Settings(**overrides)


@pytest.mark.parametrize(
    "overrides",
    [{"AWS_ACCESS_KEY_ID": "AKIAEXAMPLE"}, {"AWS_SECRET_ACCESS_KEY": "secret"}],
)
def test_static_credentials_must_be_paired(overrides):
    with pytest.raises(ValidationError, match="must be set together"):
        Settings(**overrides)


def test_reload_picks_up_environment(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("ODB_READ_TIMEOUT_SECONDS", "5")

    refreshed = reload_settings_from_environment()

    assert refreshed is not first
    assert refreshed.ODB_READ_TIMEOUT_SECONDS == 5.0
    assert get_settings() is refreshed
