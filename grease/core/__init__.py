"""Core types shared by every layer."""

from .config import ConfigError, Settings, load_settings
from .errors import (
    BadArgument,
    BadGlobPattern,
    ErrorCode,
    GreaseError,
    IncorrectArgumentCount,
    MissingRequiredArgument,
    RemoteError,
)
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "Settings",
    "load_settings",
    # errors
    "BadArgument",
    "BadGlobPattern",
    "ErrorCode",
    "GreaseError",
    "IncorrectArgumentCount",
    "MissingRequiredArgument",
    "RemoteError",
    # result
    "Err",
    "Ok",
    "Result",
]
