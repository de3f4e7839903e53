# eventdb/core/exceptions.py
"""
Error taxonomy of the data layer.

Every error is raised synchronously at the offending read or write. Writes
that fail leave the session rolled back, so no partial state is visible.
"""


class DataModelError(Exception):
    """Base class for all data-layer errors."""


class DuplicateKey(DataModelError):
    """A unique or primary key already holds the value being written."""

    def __init__(self, constraint: str, message: str | None = None):
        self.constraint = constraint
        super().__init__(message or f"Duplicate key violates {constraint}")


class ConstraintViolation(DataModelError):
    """A row-level check (range, bound, enumeration, status rule) failed."""

    def __init__(self, rule: str, message: str | None = None):
        self.rule = rule
        super().__init__(message or f"Row violates {rule}")


class ReferentialViolation(DataModelError):
    """A foreign key points at a missing row, or a delete is restricted."""

    def __init__(self, message: str = "Foreign key constraint failed"):
        super().__init__(message)


class NotFound(DataModelError):
    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")
