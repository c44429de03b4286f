"""Persistence error hierarchy."""


class PersistenceError(Exception):
    """Base class for failures reading or writing a persisted slot."""


class CodecError(PersistenceError):
    """A collection could not be encoded to, or decoded from, bytes."""


class StorageError(PersistenceError):
    """The underlying key-value storage failed."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"{key}: {message}")
