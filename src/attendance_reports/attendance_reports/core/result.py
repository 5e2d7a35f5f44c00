"""Result type returned by fetch + aggregate pipelines.

Services never let a fetch failure escape as an exception: they return
``Failure`` and the caller decides how to surface it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]
