"""Logging configuration setup.

The SDK never configures logging on import; applications and the CLI call
``setup_logging()`` (settings driven) or ``configure_logging()`` (explicit).
Configuration is applied with ``logging.config.dictConfig`` and attaches a
single console handler to the ``translate_sdk`` logger.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from translate_sdk.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

SDK_LOGGER = "translate_sdk"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from translate_sdk.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def build_logging_config(
    log_level: str = "INFO",
    json_logs: bool = True,
    console_enabled: bool = True,
    include_context: bool = True,
    service_name: str = "translate-sdk",
) -> dict[str, Any]:
    """Build the dictConfig mapping used by configure_logging()."""
    formatters: dict[str, Any] = {
        "json": {
            "()": "translate_sdk.infra.logging.formatters.JSONFormatter",
            "static": {"service": service_name},
        },
        "text": {"format": TEXT_FORMAT},
    }
    filters: dict[str, Any] = {}
    if include_context:
        filters["context"] = {
            "()": "translate_sdk.infra.logging.context.ContextInjectingFilter",
        }

    handlers: dict[str, Any] = {}
    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "json" if json_logs else "text",
            "filters": list(filters),
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            SDK_LOGGER: {
                "level": log_level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    console_enabled: bool = True,
    include_context: bool = True,
    capture_warnings: bool = True,
    service_name: str = "translate-sdk",
    **kwargs: Any,
) -> None:
    """Configure SDK logging with dictConfig.

    Args:
        log_level: Level of the ``translate_sdk`` logger.
        json_logs: Emit JSON Lines instead of plain text.
        console_enabled: Attach a stderr handler.
        include_context: Inject contextvars-based fields into records.
        capture_warnings: Forward Python warnings to logging.
        service_name: Static ``service`` field of JSON records.
        **kwargs: Ignored extra settings.

    Example:
        from translate_sdk.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())
    """
    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs)))

    if capture_warnings:
        logging.captureWarnings(True)

    logging.config.dictConfig(
        build_logging_config(
            log_level=log_level,
            json_logs=json_logs,
            console_enabled=console_enabled,
            include_context=include_context,
            service_name=service_name,
        ),
    )
