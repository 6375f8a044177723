from client.api import ScheduleApiClient, INIT_DATA_HEADER
from client.errors import (
    ApiError,
    ConfigurationError,
    NetworkError,
    ParseError,
    ScheduleClientError,
)

__all__ = [
    "ScheduleApiClient",
    "INIT_DATA_HEADER",
    "ScheduleClientError",
    "ConfigurationError",
    "NetworkError",
    "ApiError",
    "ParseError",
]
