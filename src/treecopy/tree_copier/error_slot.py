"""First-error-wins bookkeeping for operations with deferred cleanup."""

from contextlib import contextmanager
from typing import Iterator, Optional


class FirstErrorSlot:
    """Holds the first error raised by an operation or by any of its cleanup steps.

    A copy step such as writing a file or populating a directory has a primary body and
    one or more release actions (closing a handle, restoring a mode) that must run on
    every exit path. Each of them can fail. The slot records errors in the order they
    occur and keeps only the first one, so a cleanup failure never hides the error that
    caused the cleanup, while a cleanup failure after an otherwise successful body is
    still reported.

    Example:
        >>> slot = FirstErrorSlot()
        >>> with slot.capture():
        ...     raise FileNotFoundError("primary")
        >>> with slot.capture():
        ...     raise PermissionError("cleanup")
        >>> slot.error
        FileNotFoundError('primary')
        >>> slot.raise_if_set()
        Traceback (most recent call last):
          ...
        FileNotFoundError: primary
    """

    def __init__(self) -> None:
        self.error: Optional[Exception] = None

    def record(self, error: Exception) -> None:
        """Record an error unless an earlier one has already been recorded.

        Args:
            error: The error to record.
        """
        if self.error is None:
            self.error = error

    @contextmanager
    def capture(self) -> Iterator[None]:
        """Run a block and record any exception it raises instead of propagating it."""
        try:
            yield
        except Exception as e:
            self.record(e)

    def raise_if_set(self) -> None:
        """Raise the recorded error, if any."""
        if self.error is not None:
            raise self.error
