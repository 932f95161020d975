"""Lightweight, typed Result container for check outcomes.

Validation checks never raise: each returns either ``Ok(message)`` when its
rule holds or ``Err(diagnostic)`` when it does not, so a caller can run every
check and collect the outcomes before deciding the exit status.

Example
-------
>>> from computerese.core.result import ok, err, Result
>>> def nonempty(word: str) -> Result[str, str]:
...     return ok(word) if word else err("missing 'word' field")
>>> nonempty("").unwrap_err()
"missing 'word' field"
>>> nonempty("cache").message()
'cache'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Either a passing `Ok[T]` or a failing `Err[E]`."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the ``Ok`` value; raise ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the ``Err`` payload; raise ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def message(self) -> T | E:
        """Return whichever payload this result carries.

        Checks put a human-readable line in both variants, so report code can
        print the outcome without branching on it first.
        """
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return self.unwrap_err()


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Passing outcome."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failing outcome."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)


__all__ = ["Result", "Ok", "Err", "ok", "err"]
