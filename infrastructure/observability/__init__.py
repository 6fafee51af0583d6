from infrastructure.observability.configs_observer import (
    is_fetch_error,
    observe_configs_event,
    observe_resolved_configs,
)
from infrastructure.observability.logging_utils import configure_logging, log_event

__all__ = [
    "configure_logging",
    "log_event",
    "is_fetch_error",
    "observe_configs_event",
    "observe_resolved_configs",
]
