"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger, InteractionContextFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    InteractionContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Aceita os níveis válidos sem diferenciar maiúsculas."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected
        configure_logging()

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_context_filter(self) -> None:
        configure_logging(
            correlation_id_getter=lambda: "corr",
            interaction_id_getter=lambda: "900",
        )
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, InteractionContextFilter) for f in handler.filters)

    def test_uvicorn_loggers_propagate_to_root(self) -> None:
        uvicorn_access = logging.getLogger("uvicorn.access")
        uvicorn_access.handlers = [logging.NullHandler()]
        uvicorn_access.propagate = False

        configure_logging()

        assert uvicorn_access.handlers == []
        assert uvicorn_access.propagate is True

    def test_http_client_loggers_never_log_request_urls(self) -> None:
        configure_logging(level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
        configure_logging()

    def test_valid_log_levels_constant(self) -> None:
        """VALID_LOG_LEVELS contém os níveis esperados."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        assert DEFAULT_SERVICE_NAME == "discord-interactions"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestInteractionContextFilter:
    """Testes para InteractionContextFilter."""

    def test_filter_adds_context_from_getters(self) -> None:
        filter_ = InteractionContextFilter("my_service", lambda: "corr-123", lambda: "900")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.interaction_id == "900"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_values(self) -> None:
        """Valores vindos de `extra` têm precedência sobre o contexto."""
        filter_ = InteractionContextFilter("svc", lambda: "from-getter", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-corr"
        record.interaction_id = "explicit-interaction"

        filter_.filter(record)

        assert record.correlation_id == "explicit-corr"
        assert record.interaction_id == "explicit-interaction"

    def test_filter_uses_empty_string_without_getters(self) -> None:
        filter_ = InteractionContextFilter("service_name")
        record = _record()

        filter_.filter(record)

        assert record.correlation_id == ""
        assert record.interaction_id == ""
        assert record.service == "service_name"

    def test_filter_always_returns_true(self) -> None:
        assert InteractionContextFilter("svc").filter(_record("", logging.ERROR)) is True


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "interaction_id",
            "service",
        }

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_create_json_formatter_returns_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_json_formatter_renames_fields(self) -> None:
        record = _record("interaction_received")
        record.name = "api.routes.discord.interactions"
        record.correlation_id = "abc-123"
        record.interaction_id = "900"
        record.service = "discord-interactions"
        record.interaction_type = "PING"

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "interaction_received"
        assert output["level"] == "INFO"
        assert output["logger"] == "api.routes.discord.interactions"
        assert output["interaction_id"] == "900"
        assert output["interaction_type"] == "PING"


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_full_logging_flow(self) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
            interaction_id_getter=lambda: "900",
        )
        logger = get_logger("integration.test")
        # Não deve levantar exceção
        logger.debug("Debug message", extra={"custom_field": "value"})
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
        configure_logging()
