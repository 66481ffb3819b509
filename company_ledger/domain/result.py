"""
Result Type
===========

Explicit success/failure values returned by use cases.

Use cases never let a DomainError escape: they return Ok(value) or
Err(error) and the caller decides how to present each failure kind.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from company_ledger.domain.errors import DomainError

T = TypeVar("T")
E = TypeVar("E", bound=DomainError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the domain error that caused it."""
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err[E]]
