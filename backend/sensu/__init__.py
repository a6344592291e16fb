from sensu.client import SensuClient
from sensu.config import SensuConfig, load_config
from sensu.errors import (
    HandlerConfigError,
    SensuAPIError,
    SensuHandlerError,
    SilenceConflictError,
    SilencedValidationError,
)

__all__ = [
    "HandlerConfigError",
    "SensuAPIError",
    "SensuClient",
    "SensuConfig",
    "SensuHandlerError",
    "SilenceConflictError",
    "SilencedValidationError",
    "load_config",
]
