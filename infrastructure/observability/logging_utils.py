import logging
import re
from typing import Any, Iterable

from infrastructure.observability.context import get_request_id, get_request_secrets


_TOKEN_PATTERNS = (
    re.compile(r"(x-access-token:)[^@\s]+", re.IGNORECASE),
    re.compile(r"(Bearer\s+)[A-Za-z0-9_\-.]+", re.IGNORECASE),
    re.compile(r"\bgh[pousr]_[A-Za-z0-9_]+\b"),
    re.compile(r"\bgithub_pat_[A-Za-z0-9_]+\b"),
)
_REGISTERED_SENSITIVE_VALUES: set[str] = set()


def register_sensitive_values(*values: str | None) -> None:
    for value in values:
        if value:
            _REGISTERED_SENSITIVE_VALUES.add(value)


def registered_sensitive_values() -> frozenset[str]:
    return frozenset(_REGISTERED_SENSITIVE_VALUES)


def _sensitive_values() -> Iterable[str]:
    yield from _REGISTERED_SENSITIVE_VALUES
    yield from get_request_secrets()


def redact_secrets(text: str) -> str:
    redacted = text
    for value in _sensitive_values():
        redacted = redacted.replace(value, "[REDACTED]")
    for pattern in _TOKEN_PATTERNS:
        if pattern.groups > 0:
            redacted = pattern.sub(r"\1[REDACTED]", redacted)
        else:
            redacted = pattern.sub("[REDACTED]", redacted)
    return redacted


def configure_logging(level: int = logging.INFO) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [request_id=%(request_id)s] %(name)s - %(message)s",
        )

    current_factory = logging.getLogRecordFactory()
    if not getattr(current_factory, "_request_id_factory", False):
        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = current_factory(*args, **kwargs)
            record.request_id = get_request_id()
            return record

        setattr(record_factory, "_request_id_factory", True)
        logging.setLogRecordFactory(record_factory)


def safe_message(message: str) -> str:
    return redact_secrets(message)


def _format_field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return safe_message(value)
    return safe_message(repr(value))


def structured_message(event: str, **fields: Any) -> str:
    parts = [f"event={safe_message(event)}"]
    for key, value in fields.items():
        if value is None:
            continue
        formatted_value = _format_field_value(value).replace('"', '\\"')
        parts.append(f'{key}="{formatted_value}"')
    return " ".join(parts)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    logger.log(level, structured_message(event, **fields))
