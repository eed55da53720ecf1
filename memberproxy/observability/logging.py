"""Structured logging configuration using structlog.

JSON output for production, console output for development. Member
payloads routinely carry contact details, so values that look like e-mail
addresses or phone numbers are masked before rendering.
"""

import re
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

# Keys whose values are never rendered
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "authorization",
    "password",
    "secret",
    "token",
    "api_key",
    "dsn",
    "contact",
    "email",
    "phone",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
# Optional country code, area code, then two groups of three or four digits.
# ISO dates and times have no two trailing groups that long.
PHONE_PATTERN = re.compile(
    r"(?<![\w-])\+?(?:\d{1,3}[\s.-]?)?\(?\d{2,4}\)?[\s.-]?\d{3,4}[\s.-]?\d{3,4}(?![\w-])"
)

LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class ContactRedactor:
    """Processor that masks member contact data in log events.

    Known sensitive keys are replaced wholesale; string values anywhere
    else are scanned for e-mail and phone patterns.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact(event_dict))

    def _redact(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            else:
                result[key] = self._redact_value(value)
        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._redact(value)
        if isinstance(value, list):
            return [self._redact_value(item) for item in value]
        if isinstance(value, str):
            value = EMAIL_PATTERN.sub("[EMAIL]", value)
            return PHONE_PATTERN.sub("[PHONE]", value)
        return value


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
) -> None:
    """Configure structured logging for the process.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "json" for production, "console" for development
        redact_pii: Whether to mask member contact data
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]

    # Ahead of TimeStamper: timestamps are not subject to redaction
    if redact_pii:
        processors.append(ContactRedactor())

    processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            LEVELS.get(level.upper(), 20)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to the given module name."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
