import logging

import pytest

from stats_api.common.config import ServerConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
	for key in ("STATS_API_HOST", "STATS_API_PORT", "STATS_API_LOG_LEVEL", "STATS_API_LOG_JSON"):
		monkeypatch.delenv(key, raising=False)

	config = ServerConfig.from_env()
	assert config == ServerConfig(host="0.0.0.0", port=3000, log_level="INFO", json_logs=False)
	assert config.log_level_number == logging.INFO


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.setenv("STATS_API_HOST", "127.0.0.1")
	monkeypatch.setenv("STATS_API_PORT", "8080")
	monkeypatch.setenv("STATS_API_LOG_LEVEL", "debug")

	config = ServerConfig.from_env()
	assert (config.host, config.port) == ("127.0.0.1", 8080)
	assert config.log_level_number == logging.DEBUG


@pytest.mark.parametrize(
	("key", "value"),
	[("STATS_API_PORT", "abc"), ("STATS_API_PORT", "0"), ("STATS_API_LOG_LEVEL", "loud")],
)
def test_invalid_env(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
	monkeypatch.setenv(key, value)
	with pytest.raises(ValueError):
		ServerConfig.from_env()


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("true", True), ("", False), ("no", False)])
def test_json_logs_from_env(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
	monkeypatch.setenv("STATS_API_LOG_JSON", value)
	assert ServerConfig.from_env().json_logs is expected
