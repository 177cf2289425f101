"""Tests for core/config.py."""

# pylint: disable=missing-function-docstring

from dnsolve.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, monkeypatch):
        # Clear env vars that conftest sets, to test actual defaults
        monkeypatch.delenv("HOSTS_FILE", raising=False)
        monkeypatch.delenv("SENTRY_DSN", raising=False)

        settings = Settings(_env_file=None)
        assert settings.hosts_file == "/etc/hosts"
        assert settings.hosts_ttl == 86400
        assert settings.resolver_timeout is None
        assert settings.resolver_lifetime is None
        assert settings.edns_payload == 1232
        assert settings.api_port == 8053
        assert settings.sentry_dsn is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RESOLVER_LIFETIME", "2.5")
        monkeypatch.setenv("API_PORT", "9000")

        settings = Settings(_env_file=None)
        assert settings.resolver_lifetime == 2.5
        assert settings.api_port == 9000

    def test_use_sentry_false_without_dsn(self):
        assert Settings(sentry_dsn=None, _env_file=None).use_sentry is False
        assert Settings(sentry_dsn="", _env_file=None).use_sentry is False

    def test_use_sentry_true_with_dsn(self):
        settings = Settings(sentry_dsn="https://key@sentry.example/1", _env_file=None)
        assert settings.use_sentry is True

    def test_log_level_name_normalized(self):
        assert Settings(log_level=" debug ", _env_file=None).log_level_name == "DEBUG"

    def test_log_level_name_defaults_when_blank(self):
        assert Settings(log_level="", _env_file=None).log_level_name == "INFO"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
