"""Kernel lifecycle – Destroyable base class."""
from __future__ import annotations

from types import TracebackType
from typing import Self

from mf_messaging.kernel.errors import AlreadyDestroyedError


class Destroyable:
    """One-way Active -> Destroyed lifecycle.

    Subclasses release their resources in :meth:`_on_destroy`, which runs
    exactly once no matter how often :meth:`destroy` is called. Usable as a
    context manager::

        with MessagingApiBroker(...) as broker:
            ...
    """

    def __init__(self) -> None:
        self._destroyed = False

    def is_destroyed(self) -> bool:
        return self._destroyed

    def ensure_active(self) -> None:
        """Raise :class:`AlreadyDestroyedError` once the object is destroyed."""
        if self._destroyed:
            raise AlreadyDestroyedError()

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self._on_destroy()

    def _on_destroy(self) -> None:
        """Override to release owned resources."""

    def __enter__(self) -> Self:
        self.ensure_active()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()


__all__ = ["Destroyable"]
