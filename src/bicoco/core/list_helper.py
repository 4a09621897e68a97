from __future__ import annotations

from typing import TypeVar, Generic, Any, Callable, Self
from operator import index as _index

from typing_extensions import SupportsIndex

from ..types.na import NA, na
from ..lib import log

__all__ = ['ListHelper', 'OutOfRangeError', 'NO_DEFAULT']

T = TypeVar('T')
R = TypeVar('R')

# Marks a missing default argument of fetch, None is a valid default
NO_DEFAULT: Any = object()


class OutOfRangeError(IndexError):
    """Raised when an index or count is outside the valid range of the list."""
    pass


class ListHelper(Generic[T]):
    """
    Helper methods over a mutable list.

    The list is borrowed, not copied: the ``*_inplace`` methods and ``push`` modify the caller's
    list. All other methods return new values and leave the list as it is.

    The wrapped list is not thread-safe, the caller must not modify it from another thread while
    a method is running.
    """

    __slots__ = ('sequence',)

    def __init__(self, sequence: list[T] | None) -> None:
        """
        :param sequence: The list to execute operations on, ``None`` (or NA) means an absent list
        """
        self.sequence = sequence

    def __repr__(self) -> str:
        return f"ListHelper({self.sequence!r})"

    def _absent(self) -> bool:
        return na(self.sequence)

    #
    # Iterating methods
    #

    def each(self, function: Callable[[T], Any]) -> None:
        """
        Execute a custom action for each element of the list.

        :param function: Function to call with each element
        """
        for t in self.sequence:
            function(t)

    def map(self, function: Callable[[T], T]) -> list[T]:
        """
        Return a new list with the function applied to each element.

        :param function: Function that returns the new value of an element
        :return: The mapped list
        """
        return [function(t) for t in self.sequence]

    def transform(self, function: Callable[[T], R]) -> list[R]:
        """
        Return a new list of another element type, applying the function to each element.

        :param function: Function to apply to each element
        :return: The list of transformed elements
        """
        return [function(t) for t in self.sequence]

    #
    # Selecting methods
    #

    def select(self, function: Callable[[T], bool]) -> list[T]:
        """
        Select all elements the condition is true for.

        :param function: Condition to check on each element
        :return: Elements the condition is true for, in original order
        """
        return [t for t in self.sequence if function(t)]

    def reject(self, function: Callable[[T], bool]) -> list[T]:
        """
        Select all elements the condition is false for.

        :param function: Condition to check on each element
        :return: Elements the condition is false for, in original order
        """
        return [t for t in self.sequence if not function(t)]

    def compact(self) -> list[T]:
        """
        Return a new list without the None and NA elements.
        """
        return [t for t in self.sequence if not na(t)]

    def detect(self, function: Callable[[T], bool]) -> T | NA:
        """
        Get the first element the condition is true for.

        :param function: Condition to check on each element
        :return: The first matching element, or NA if there is none
        """
        for t in self.sequence:
            if function(t):
                return t
        return NA(None)

    find = detect

    #
    # Modifying methods
    #

    def _replace(self, values: list[T]) -> None:
        # Slice assignment keeps the identity of the caller's list
        removed = len(self.sequence) - len(values)
        self.sequence[:] = values
        if removed:
            log.debug("removed %d element(s) in place", removed)

    def map_inplace(self, function: Callable[[T], T]) -> None:
        """
        Replace each element of the list with the value returned by the function.

        The new values are computed first, so if the function raises the list is left unchanged.

        :param function: Function that returns the new value of an element
        """
        self._replace(self.map(function))

    def select_inplace(self, function: Callable[[T], bool]) -> None:
        """
        Remove all elements the condition is false for.

        :param function: Condition to check on each element
        """
        self._replace(self.select(function))

    def reject_inplace(self, function: Callable[[T], bool]) -> None:
        """
        Remove all elements the condition is true for.

        :param function: Condition to check on each element
        """
        self._replace(self.reject(function))

    def compact_inplace(self) -> None:
        """
        Remove the None and NA elements of the list.
        """
        self._replace(self.compact())

    def push(self, *elements: T) -> Self:
        """
        Add elements to the end of the list, in argument order.

        :param elements: Elements to append
        :return: This helper, to chain calls like ``.push(a).push(b)``
        """
        for t in elements:
            self.sequence.append(t)
        return self

    insert = push

    #
    # Accessing methods
    #

    def at(self, index: SupportsIndex) -> T | NA:
        """
        Return the element at the index. Negative index counts from the end of the list.

        :param index: Index of the element
        :return: The element, or NA if the index is out of range
        """
        index = _index(index)
        size = self.count()
        if index < 0:
            index += size
        if index < 0 or index >= size:
            return NA(None)
        return self.sequence[index]

    def fetch(self, index: SupportsIndex, default: T = NO_DEFAULT) -> T:
        """
        Return the element at the index with strict bounds checking.

        Negative indices are not translated, they are out of range.

        :param index: Index of the element
        :param default: Value to return if the index is out of range
        :return: The element, or the default
        :raises OutOfRangeError: If the index is out of range and there is no default
        """
        index = _index(index)
        size = self.count()
        if 0 <= index < size:
            return self.sequence[index]
        if default is not NO_DEFAULT:
            return default
        raise OutOfRangeError(f"Index {index} out of range for list of size {size}")

    def first(self) -> T | NA:
        """
        Get the first element, or NA if the list is empty.
        """
        return self.at(0)

    def last(self) -> T | NA:
        """
        Get the last element, or NA if the list is empty.
        """
        return self.at(-1)

    def _check_count(self, n: SupportsIndex) -> int:
        n = _index(n)
        size = self.size()
        if n < 0 or n > size:
            raise OutOfRangeError(f"Count {n} out of range for list of size {size}")
        return n

    def take(self, n: SupportsIndex) -> list[T]:
        """
        Get the first n elements of the list.

        :param n: Number of elements
        :return: New list of the first n elements
        :raises OutOfRangeError: If n is negative or greater than the size of the list
        """
        return self.sequence[:self._check_count(n)]

    def drop(self, n: SupportsIndex) -> list[T]:
        """
        Get the elements of the list except the first n.

        :param n: Number of elements to skip
        :return: New list of the remaining elements
        :raises OutOfRangeError: If n is negative or greater than the size of the list
        """
        return self.sequence[self._check_count(n):]

    #
    # Information methods
    #

    def is_empty(self) -> bool:
        """True if the list is absent or has no elements"""
        return self._absent() or len(self.sequence) == 0

    def is_not_empty(self) -> bool:
        """True if the list is present and has at least one element"""
        return not self.is_empty()

    def size(self) -> int:
        """
        Size of the list.

        :raises OutOfRangeError: If the list is absent
        """
        if self._absent():
            raise OutOfRangeError("Cannot get the size of an absent list")
        return len(self.sequence)

    def count(self, function: Callable[[T], bool] | None = None) -> int:
        """
        Count the elements of the list.

        :param function: Optional condition, only elements it is true for are counted
        :return: The count, 0 if the list is absent
        """
        if self.is_empty():
            return 0
        if function is None:
            return len(self.sequence)
        return sum(1 for t in self.sequence if function(t))

    length = count

    def all(self, function: Callable[[T], bool]) -> bool:
        """
        True if the condition is true for every element, also for an empty list.
        Stops at the first failing element.
        """
        for t in self.sequence:
            if not function(t):
                return False
        return True

    every = all

    def any(self, function: Callable[[T], bool]) -> bool:
        """
        True if the condition is true for at least one element, False for an empty list.
        Stops at the first passing element.
        """
        for t in self.sequence:
            if function(t):
                return True
        return False

    some = any

    def reduce(self, seed: R, function: Callable[[R, T], R]) -> R:
        """
        Fold the list from left to right.

        :param seed: Initial value of the accumulator
        :param function: Function of the accumulator and an element, returns the new accumulator
        :return: The final accumulator, the seed itself for an empty list
        """
        acc = seed
        for t in self.sequence:
            acc = function(acc, t)
        return acc
