"""
Helper functions over mutable lists: each, map, select/reject, at/fetch, take/drop, reduce...

Pure functions return new lists, the ``*_inplace`` variants modify the list they get.
"""
from .types import NA, na
from .core.list_helper import ListHelper, OutOfRangeError
from .lib import array, log

__all__ = ['NA', 'na', 'ListHelper', 'OutOfRangeError', 'array', 'log']
