# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: cumerr
"""
Value-or-error results.

A function using cumerr returns either a ``Success`` wrapping its normal
value or an ``ErrorRecord`` (see ``cumerr.record``), which is the failure arm
of the same ``Result`` hierarchy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")


@runtime_checkable
class HasToDict(Protocol):
    """
    Protocol for objects that can be converted to dictionaries.
    """

    def to_dict(self) -> dict[str, Any]: ...


class Result(ABC, Generic[T]):
    """Abstract base class for value-or-error results."""

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Result[U]": ...

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Result[U]"]) -> "Result[U]": ...

    @abstractmethod
    def unwrap(self) -> T: ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    @abstractmethod
    def unwrap_or_else(self, func: Callable[[Any], T]) -> T: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class Success(Result[T], Generic[T]):
    """
    Represents a successful result with a value.

    Attributes:
        value: The successful result value
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """
        Map the value of a successful result.

        Args:
            func: The function to apply to the value

        Returns:
            A new Success with the mapped value
        """
        return Success(func(self.value))

    def flat_map(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """
        Apply a function that returns a Result to the value.

        Args:
            func: The function to apply to the value

        Returns:
            The Result returned by the function
        """
        return func(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[Any], T]) -> T:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the result to a dictionary.

        Returns:
            A dictionary representation of the result
        """
        if isinstance(self.value, HasToDict):
            return {"status": "success", "data": self.value.to_dict()}
        return {"status": "success", "data": self.value}

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


def of(value: T) -> Success[T]:
    """
    Create a successful result with a value.

    Args:
        value: The value

    Returns:
        A successful result
    """
    return Success(value)
