"""
List helper functions

Every function takes the list as its first argument and delegates to
:class:`bicoco.core.list_helper.ListHelper`.
"""
from typing import TypeVar, Any, Callable

from typing_extensions import SupportsIndex

from ..core.list_helper import ListHelper, NO_DEFAULT
from ..types.na import NA

T = TypeVar('T')
R = TypeVar('R')

__all__ = [
    'all',
    'any',
    'at',
    'compact',
    'compact_inplace',
    'count',
    'detect',
    'drop',
    'each',
    'every',
    'fetch',
    'find',
    'first',
    'insert',
    'is_empty',
    'is_not_empty',
    'last',
    'length',
    'map',
    'map_inplace',
    'push',
    'reduce',
    'reject',
    'reject_inplace',
    'select',
    'select_inplace',
    'size',
    'some',
    'take',
    'transform',
]


# noinspection PyShadowingBuiltins
def all(id: list[T], function: Callable[[T], bool]) -> bool:
    """
    Returns true if the condition is true for every element of the list, or the list is empty.

    :param id: Input list
    :param function: Condition to check on each element
    :return: True if all elements pass the condition
    """
    return ListHelper(id).all(function)


# noinspection PyShadowingBuiltins
def any(id: list[T], function: Callable[[T], bool]) -> bool:
    """
    Returns true if the condition is true for at least one element of the list.

    :param id: Input list
    :param function: Condition to check on each element
    :return: True if any element passes the condition, false for an empty list
    """
    return ListHelper(id).any(function)


# noinspection PyShadowingBuiltins
def at(id: list[T], index: SupportsIndex) -> T | NA:
    """
    Returns the element at the index, negative index counts from the end of the list.

    :param id: Input list
    :param index: Index of the element
    :return: The element, or NA if the index is out of range
    """
    return ListHelper(id).at(index)


# noinspection PyShadowingBuiltins
def compact(id: list[T]) -> list[T]:
    """
    Returns a new list without the None and NA elements.

    :param id: Input list
    :return: List of the available elements
    """
    return ListHelper(id).compact()


# noinspection PyShadowingBuiltins
def compact_inplace(id: list[T]) -> None:
    """
    Removes the None and NA elements of the list.

    :param id: Input list
    """
    ListHelper(id).compact_inplace()


# noinspection PyShadowingBuiltins
def count(id: list[T] | None, function: Callable[[T], bool] | None = None) -> int:
    """
    Returns the number of elements, or the number of elements the condition is true for.

    :param id: Input list, may be None
    :param function: Optional condition
    :return: The count, 0 for an absent list
    """
    return ListHelper(id).count(function)


# noinspection PyShadowingBuiltins
def detect(id: list[T], function: Callable[[T], bool]) -> T | NA:
    """
    Returns the first element the condition is true for.

    :param id: Input list
    :param function: Condition to check on each element
    :return: The first matching element, or NA
    """
    return ListHelper(id).detect(function)


# noinspection PyShadowingBuiltins
def drop(id: list[T], n: SupportsIndex) -> list[T]:
    """
    Returns the elements of the list except the first n.

    :param id: Input list
    :param n: Number of elements to skip
    :return: New list of the remaining elements
    :raises OutOfRangeError: If n is negative or greater than the size of the list
    """
    return ListHelper(id).drop(n)


# noinspection PyShadowingBuiltins
def each(id: list[T], function: Callable[[T], Any]) -> None:
    """
    Calls the function with each element of the list.

    :param id: Input list
    :param function: Function to call
    """
    ListHelper(id).each(function)


every = all


# noinspection PyShadowingBuiltins
def fetch(id: list[T], index: SupportsIndex, default: T = NO_DEFAULT) -> T:
    """
    Returns the element at the index, with strict bounds checking.

    :param id: Input list
    :param index: Index of the element, negative values are out of range
    :param default: Value to return if the index is out of range
    :return: The element, or the default
    :raises OutOfRangeError: If the index is out of range and no default is given
    """
    return ListHelper(id).fetch(index, default)


find = detect


# noinspection PyShadowingBuiltins
def first(id: list[T]) -> T | NA:
    """
    Returns the first element in the list.

    :param id: Input list
    :return: First element, or NA if the list is empty
    """
    return ListHelper(id).first()


# noinspection PyShadowingBuiltins
def is_empty(id: list[T] | None) -> bool:
    """
    Returns true if the list is None or has no elements.

    :param id: Input list
    """
    return ListHelper(id).is_empty()


# noinspection PyShadowingBuiltins
def is_not_empty(id: list[T] | None) -> bool:
    """
    Returns true if the list is not None and has elements.

    :param id: Input list
    """
    return ListHelper(id).is_not_empty()


# noinspection PyShadowingBuiltins
def last(id: list[T]) -> T | NA:
    """
    Returns the last element in the list.

    :param id: Input list
    :return: Last element, or NA if the list is empty
    """
    return ListHelper(id).last()


length = count


# noinspection PyShadowingBuiltins
def map(id: list[T], function: Callable[[T], T]) -> list[T]:
    """
    Returns a new list with the function applied to each element.

    :param id: Input list
    :param function: Function returning the new value of an element
    :return: The mapped list
    """
    return ListHelper(id).map(function)


# noinspection PyShadowingBuiltins
def map_inplace(id: list[T], function: Callable[[T], T]) -> None:
    """
    Replaces each element of the list with the value returned by the function.

    :param id: Input list
    :param function: Function returning the new value of an element
    """
    ListHelper(id).map_inplace(function)


# noinspection PyShadowingBuiltins
def push(id: list[T], *elements: T) -> ListHelper[T]:
    """
    Appends the elements to the end of the list.

    :param id: Input list
    :param elements: Elements to append, in order
    :return: A helper bound to the same list, for chaining
    """
    return ListHelper(id).push(*elements)


insert = push


# noinspection PyShadowingBuiltins
def reduce(id: list[T], seed: R, function: Callable[[R, T], R]) -> R:
    """
    Folds the list from left to right.

    :param id: Input list
    :param seed: Initial value of the accumulator
    :param function: Function of the accumulator and an element
    :return: The final accumulator
    """
    return ListHelper(id).reduce(seed, function)


# noinspection PyShadowingBuiltins
def reject(id: list[T], function: Callable[[T], bool]) -> list[T]:
    """
    Returns the elements the condition is false for.

    :param id: Input list
    :param function: Condition to check on each element
    :return: New list of the rejected elements
    """
    return ListHelper(id).reject(function)


# noinspection PyShadowingBuiltins
def reject_inplace(id: list[T], function: Callable[[T], bool]) -> None:
    """
    Removes the elements the condition is true for.

    :param id: Input list
    :param function: Condition to check on each element
    """
    ListHelper(id).reject_inplace(function)


# noinspection PyShadowingBuiltins
def select(id: list[T], function: Callable[[T], bool]) -> list[T]:
    """
    Returns the elements the condition is true for.

    :param id: Input list
    :param function: Condition to check on each element
    :return: New list of the selected elements
    """
    return ListHelper(id).select(function)


# noinspection PyShadowingBuiltins
def select_inplace(id: list[T], function: Callable[[T], bool]) -> None:
    """
    Removes the elements the condition is false for.

    :param id: Input list
    :param function: Condition to check on each element
    """
    ListHelper(id).select_inplace(function)


# noinspection PyShadowingBuiltins
def size(id: list[T]) -> int:
    """
    Returns the size of the list.

    :param id: Input list
    :raises OutOfRangeError: If the list is None
    """
    return ListHelper(id).size()


some = any


# noinspection PyShadowingBuiltins
def take(id: list[T], n: SupportsIndex) -> list[T]:
    """
    Returns the first n elements of the list.

    :param id: Input list
    :param n: Number of elements
    :return: New list of the first n elements
    :raises OutOfRangeError: If n is negative or greater than the size of the list
    """
    return ListHelper(id).take(n)


# noinspection PyShadowingBuiltins
def transform(id: list[T], function: Callable[[T], R]) -> list[R]:
    """
    Returns a new list of the values returned by the function for each element.

    :param id: Input list
    :param function: Function to apply
    :return: List of transformed elements
    """
    return ListHelper(id).transform(function)
