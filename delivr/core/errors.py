"""Error codes and caller errors.

`ErrorCode` maps CLI failures to shell exit codes. Everything the engines can
recover from is reported through a console warning; the exceptions defined
here are the only errors that reach a caller.
"""

from enum import IntEnum

__all__ = ["ErrorCode", "UnsupportedPlatformError"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable.
    - 0: Success
    - 1: User error (bad input, unknown platform, unknown key)
    - 2: Config error (file could not be written or parsed on request)
    - 5: I/O error (file not found, permission denied)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK


class UnsupportedPlatformError(ValueError):
    """Raised when a platform tag is neither 'android' nor 'ios'."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported platform: {value!r} (expected 'android' or 'ios')")
        self.value = value
