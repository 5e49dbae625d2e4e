"""
Exceptions raised by audited models before anything reaches the database.
"""


class AuditError(ValueError):
    """Base class for audit-related argument errors."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class BlankValueError(AuditError):
    """A required text attribute was given an empty or whitespace-only value."""

    pass


class NonUpdatableFieldError(AuditError):
    """An update tried to write a column that is fixed after insert."""

    pass
