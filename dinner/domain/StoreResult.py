"""Outcome of a data store mutation."""
from enum import Enum


class StoreResult(str, Enum):
    SUCCESS = "success"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"

    @property
    def changed(self) -> bool:
        '''True when the in-memory collection was modified (even if persisting failed).'''
        return self in (StoreResult.SUCCESS, StoreResult.IO_ERROR)

    def __bool__(self) -> bool:
        return self is StoreResult.SUCCESS
