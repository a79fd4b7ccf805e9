"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from kafka_health import __main__
from unittest.mock import ANY, MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def fixture_clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "KAFKA_HEALTH_DOTENV",
        "KAFKA_HEALTH_BOOTSTRAP_URI",
        "KAFKA_HEALTH_SECURITY_PROTOCOL",
        "KAFKA_HEALTH_SASL_PLAIN_USERNAME",
        "KAFKA_HEALTH_SASL_PLAIN_PASSWORD",
        "KAFKA_HEALTH_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_parse_args_dotted_kafka_option_names() -> None:
    args = __main__.parse_args(
        ["-b", "kafka:9092", "-s", "sasl_ssl", "--sasl.username", "admin", "--sasl.password", "secret", "--port", "9000"]
    )

    assert args.bootstrap_uri == "kafka:9092"
    assert args.security_protocol == "sasl_ssl"
    assert args.sasl_plain_username == "admin"
    assert args.sasl_plain_password == "secret"
    assert args.port == 9000
    assert args.host is None
    assert args.log_level is None


def test_get_config_command_line_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KAFKA_HEALTH_BOOTSTRAP_URI", "from-env:9092")
    monkeypatch.setenv("KAFKA_HEALTH_PORT", "9100")

    config = __main__.get_config(__main__.parse_args(["-b", "from-cli:9092", "-s", "ssl"]))

    assert config.bootstrap_uri == "from-cli:9092"
    assert config.security_protocol == "SSL"
    assert config.port == 9100


def test_main_rejects_username_without_password(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("kafka_health.__main__.uvicorn.run") as mock_run:
        assert __main__.main(["-u", "admin"]) == 1

    mock_run.assert_not_called()
    assert "must be configured together" in capsys.readouterr().err


def test_main_rejects_malformed_environment_value(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("KAFKA_HEALTH_PORT", "not-a-port")

    with patch("kafka_health.__main__.uvicorn.run") as mock_run:
        assert __main__.main([]) == 1

    mock_run.assert_not_called()
    assert "port" in capsys.readouterr().err


def test_main_starts_server() -> None:
    with (
        patch("kafka_health.__main__.KafkaHealthContainer") as mock_container,
        patch("kafka_health.__main__.create_kafka_health_application") as mock_create_app,
        patch("kafka_health.__main__.uvicorn.run") as mock_run,
    ):
        mock_app = MagicMock()
        mock_create_app.return_value = mock_app

        assert __main__.main(["-b", "kafka:9092", "--port", "8181", "--log-level", "warning"]) == 0

        container = mock_container.return_value
        container.config.override.assert_called_once()
        container.wire.assert_called_once_with(
            modules=[
                __main__.kafka_health.api.factory,
                __main__.kafka_health.api.routers.health,
            ]
        )
        mock_create_app.assert_called_once_with(config=ANY, lifespan=__main__.kafka_health_lifespan)
        config = mock_create_app.call_args.kwargs["config"]
        assert config.bootstrap_uri == "kafka:9092"
        mock_run.assert_called_once_with(mock_app, host="0.0.0.0", port=8181, log_level="warning", log_config=None)
