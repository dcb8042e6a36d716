"""Core types shared by every layer."""

from .errors import ConfigError
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # errors
    "ConfigError",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
