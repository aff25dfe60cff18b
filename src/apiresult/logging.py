"""Structured logging for the exception handlers.

Only install_exception_handlers() logs; the error model and the result helpers
never do. Events are JSON lines on stdout, rendered by structlog through the
stdlib logging tree so the host's own loggers share the same output.

Hosts that already configure structlog leave ``configure_logging`` off in
Settings and just receive the events.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from structlog.stdlib import BoundLogger


def _add_timestamp(
    _logger: object, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def add_status_class(
    _logger: object, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Tag events carrying a ``status_code`` with its class ("4xx", "5xx")."""
    code = event_dict.get("status_code")
    if isinstance(code, int) and not isinstance(code, bool):
        event_dict["status_class"] = f"{code // 100}xx"
    return event_dict


def configure_logging(log_level: str = "INFO") -> None:
    """Route structlog and stdlib logging to JSON lines on stdout.

    Called by install_exception_handlers() when ``Settings.configure_logging``
    is set; hosts may also call it directly once at startup.
    """
    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,  # request_id etc. bound by the host
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        add_status_class,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "apiresult_json": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": structlog.processors.JSONRenderer(),
                    "foreign_pre_chain": shared,
                },
            },
            "handlers": {
                "apiresult_stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "apiresult_json",
                    "stream": sys.stdout,
                },
            },
            "root": {"handlers": ["apiresult_stdout"], "level": log_level.upper()},
        }
    )


def get_logger(name: str) -> BoundLogger:
    """Structured logger for ``name`` (typically __name__)."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
