"""Typed failures raised by the stores and workflows."""


class DaybookError(Exception):
    """Base class for all Daybook failures."""

    pass


class InvalidInputError(DaybookError):
    """Raised when a caller passes a malformed date key or preference value."""

    pass


class TodoNotFoundError(InvalidInputError):
    """Raised when a todo id is not present on the given day."""

    pass


class CorruptDataError(DaybookError):
    """Raised when a stored file exists but cannot be parsed."""

    pass


class StorageError(DaybookError):
    """Raised when a file cannot be read, written or renamed."""

    pass
