"""Exception types raised by the tree.

Each one also derives from the builtin that would be raised for the same
kind of bad argument, so ``except ValueError`` keeps working for callers
that don't import this module.
"""


class BSTError(Exception):
    pass


class ConversionError(BSTError, ValueError):
    """A value could not be converted to a numeric key."""

    def __init__(self, value: object) -> None:
        super().__init__(f"cannot convert {value!r} to a number")
        self.value = value


class CallbackError(BSTError, TypeError):
    """A traversal was given something that is not callable."""

    def __init__(self, callback: object) -> None:
        super().__init__(f"traversal callback must be callable, got {type(callback).__name__}")
        self.callback = callback


class NotFoundError(BSTError, LookupError):
    """A node passed to a query is not part of the tree."""
