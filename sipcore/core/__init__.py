# sipcore core - configuration, exceptions, and logging

from sipcore.core.exceptions import (
    ErrorCode,
    SIPError,
    SIPParseError,
    ParamsError,
    URIError,
    NameAddrError,
    RouteError,
    RouteSetError,
)
from sipcore.core.logging import configure_logging, JsonFormatter

__all__ = [
    "ErrorCode",
    "SIPError",
    "SIPParseError",
    "ParamsError",
    "URIError",
    "NameAddrError",
    "RouteError",
    "RouteSetError",
    "configure_logging",
    "JsonFormatter",
]
