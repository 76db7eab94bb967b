"""Unit tests for configuration validation."""

import pytest

from dns_check.config import Config


ENV_KEYS = (
    "DNS_CHECK_TIMEOUT",
    "DNS_CHECK_WORKERS",
    "DNS_CHECK_FORMAT",
    "DNS_CHECK_SERVER_LIST",
    "DNS_CHECK_DOMAIN_LIST",
    "DNS_CHECK_OUTPUT",
    "DNS_CHECK_PROGRESS",
    "VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_config_defaults():
    """Test defaults when no environment variables are set."""
    config = Config.from_env()

    assert config.timeout == 15.0
    assert config.workers == 50
    assert config.output_format == "text"
    assert config.server_list is None
    assert config.domain_list is None
    assert config.output_file is None
    assert config.show_progress is True
    assert config.verbose is False


def test_config_from_env_valid(monkeypatch):
    """Test loading valid configuration from environment variables."""
    env_vars = {
        "DNS_CHECK_TIMEOUT": "2.5",
        "DNS_CHECK_WORKERS": "8",
        "DNS_CHECK_FORMAT": "JSON",
        "DNS_CHECK_SERVER_LIST": "servers.txt",
        "DNS_CHECK_DOMAIN_LIST": "domains.txt",
        "DNS_CHECK_OUTPUT": "out.json",
        "DNS_CHECK_PROGRESS": "no",
        "VERBOSE": "yes",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    config = Config.from_env()

    assert config.timeout == 2.5
    assert config.workers == 8
    assert config.output_format == "json"
    assert config.server_list == "servers.txt"
    assert config.domain_list == "domains.txt"
    assert config.output_file == "out.json"
    assert config.show_progress is False
    assert config.verbose is True


@pytest.mark.parametrize("value", ["0", "-1", "301"])
def test_config_timeout_out_of_range(monkeypatch, value):
    monkeypatch.setenv("DNS_CHECK_TIMEOUT", value)

    with pytest.raises(ValueError, match="DNS_CHECK_TIMEOUT must be between"):
        Config.from_env()


@pytest.mark.parametrize("value", ["0", "1001"])
def test_config_workers_out_of_range(monkeypatch, value):
    monkeypatch.setenv("DNS_CHECK_WORKERS", value)

    with pytest.raises(ValueError, match="DNS_CHECK_WORKERS must be between 1 and 1000"):
        Config.from_env()


def test_config_workers_not_a_number(monkeypatch):
    monkeypatch.setenv("DNS_CHECK_WORKERS", "many")

    with pytest.raises(ValueError, match="DNS_CHECK_WORKERS must be a number"):
        Config.from_env()


def test_config_invalid_format(monkeypatch):
    monkeypatch.setenv("DNS_CHECK_FORMAT", "xml")

    with pytest.raises(ValueError, match="DNS_CHECK_FORMAT must be one of"):
        Config.from_env()


def test_with_overrides_applies_non_none_values():
    config = Config.from_env().with_overrides(
        workers=4, timeout=None, output_format="yaml", show_progress=False
    )

    assert config.workers == 4
    assert config.timeout == 15.0
    assert config.output_format == "yaml"
    assert config.show_progress is False


def test_with_overrides_revalidates():
    with pytest.raises(ValueError, match="DNS_CHECK_WORKERS"):
        Config.from_env().with_overrides(workers=0)
