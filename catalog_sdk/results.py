# catalog_sdk/results.py
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    """A remote call that did not produce a usable payload.

    ``operation`` names what was attempted (e.g. "fetching products"),
    ``reason`` is the human readable cause and ``status_code`` is set when
    the server answered with a non-2xx status.
    """
    operation: str
    reason: str
    status_code: Optional[int] = None

    def __str__(self) -> str:
        return f"Error {self.operation}: {self.reason}"


Result = Union[Success[T], Failure]
