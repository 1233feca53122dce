"""
Tagged results for the translation pipeline.

Providers, the validator and the orchestrator return ``Ok`` or ``Err``
instead of raising, so every failure that reaches a caller is a value that
can be inspected and classified.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union, Callable

T = TypeVar('T')  # Success type
E = TypeVar('E')  # Error type
R = TypeVar('R')  # Return type for map


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The successful value
    """
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, func: Callable[[T], R]) -> 'Ok[R]':
        """Apply ``func`` to the wrapped value."""
        return Ok(func(self.value))

    def and_then(self, func: Callable[[T], 'Result']) -> 'Result':
        """Chain a step that itself returns a result."""
        return func(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The failure descriptor
    """
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"Called unwrap on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, func: Callable) -> 'Err[E]':
        return self

    def and_then(self, func: Callable) -> 'Err[E]':
        return self


Result = Union[Ok[T], Err[E]]
