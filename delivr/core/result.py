"""Result type for explicit error handling.

Readers at the file boundary return a Result instead of raising, so the
resolvers can decide per source whether a failure is fatal (it never is for
configuration files: a bad file only produces a warning).

Usage:
    match parse_config_file(path):
        case Ok(None):
            ...  # empty file, contributes nothing
        case Ok(tree):
            ...
        case Err(error):
            console.warning(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeGuard


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that narrows a Result to Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that narrows a Result to Err."""
    return isinstance(result, Err)
