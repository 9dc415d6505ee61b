"""Core types shared by the config and detection engines."""

from .errors import ErrorCode, UnsupportedPlatformError
from .result import Err, Ok, Result, is_err, is_ok
from .structured import StrDict, as_str_dict, get_path, set_path

__all__ = [
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "StrDict",
    "UnsupportedPlatformError",
    "as_str_dict",
    "get_path",
    "is_err",
    "is_ok",
    "set_path",
]
