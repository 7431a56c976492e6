"""Exceptions raised by the application use cases."""


class NotFoundError(ValueError):
    """A referenced template, team, project or user does not exist."""


class TransactionError(RuntimeError):
    """A write inside an open transaction failed and was rolled back."""


class RowImportError(ValueError):
    """A single CSV row could not be imported."""


class DuplicateRowError(RowImportError):
    """A CSV row targets a record that already exists.

    Counted as a failed row but not reported in the error list.
    """


class NotificationSideEffectError(RuntimeError):
    """Best-effort notification fan-out failed after a committed write."""


__all__ = [
    "DuplicateRowError",
    "NotFoundError",
    "NotificationSideEffectError",
    "RowImportError",
    "TransactionError",
]
