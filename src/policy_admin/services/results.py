"""Outcome type shared by the data-access services."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """Success or failure of a read against the document store.

    Services never raise on database errors; they log and hand back a
    failure so the caller decides how to surface it.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: T) -> "FetchResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "FetchResult[T]":
        return cls(success=False, error=error)
