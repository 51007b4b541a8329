"""
Tagged success/failure value returned by every filesystem use case.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from file_explorer.exceptions import ErrorKind, FileRepositoryError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Either a value (success) or a FileRepositoryError (failure), never both."""

    value: T | None = None
    error: FileRepositoryError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FileRepositoryError) -> "OperationResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Error category of a failure, None on success."""
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    def unwrap(self) -> T:
        """
        Return the value of a success.

        Raises:
            FileRepositoryError: The carried error, if this is a failure
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
