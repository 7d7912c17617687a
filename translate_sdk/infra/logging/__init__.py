"""Logging infrastructure.

Basic usage:
    from translate_sdk.infra.logging import set_log_context, setup_logging
    import logging

    setup_logging()  # reads TRANSLATE_LOG_* settings
    set_log_context(ecosystem="evm", chain="eth")
    logging.getLogger(__name__).info("Fetching")  # includes ecosystem and chain
"""

from translate_sdk.infra.logging.config import (
    build_logging_config,
    configure_logging,
    setup_logging,
)
from translate_sdk.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from translate_sdk.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "build_logging_config",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
