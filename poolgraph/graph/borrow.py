"""Shared/exclusive access bookkeeping for a single ``Graph``.

Python offers no borrow checker, so each graph carries a ``BorrowState`` that
hands out epochs. Strong handles remember the epoch they were issued in and
are rejected once a later acquisition has ended it:

- An exclusive acquisition (``insert``, ``weak_mut``) starts a new epoch and
  marks it exclusive. Only the ``NodeMut`` it returned may use that epoch.
- A mutation without a handle (``connect*``) starts a new epoch that nobody
  holds, which ends every outstanding handle.
- A shared acquisition (``find``, ``weak_ref``, ...) ends an open exclusive
  epoch, then joins the current shared epoch. Shared handles coexist freely.

There is no locking; a single thread is assumed throughout.
"""

from __future__ import annotations


class BorrowState:
    """Epoch counter that tracks which strong handles are still usable."""

    __slots__ = ("epoch", "exclusive_open")

    def __init__(self) -> None:
        self.epoch: int = 0
        self.exclusive_open: bool = False

    def acquire_exclusive(self) -> int:
        """Start a new exclusive epoch and return it."""
        self.epoch += 1
        self.exclusive_open = True
        return self.epoch

    def release_all(self) -> None:
        """End every outstanding borrow, e.g. before changing connectivity."""
        self.epoch += 1
        self.exclusive_open = False

    def acquire_shared(self) -> int:
        """Return the current shared epoch, closing an open exclusive one first."""
        if self.exclusive_open:
            self.epoch += 1
            self.exclusive_open = False
        return self.epoch

    def check_shared(self, epoch: int) -> None:
        """Raise if a read-only handle from ``epoch`` is no longer current.

        Raises:
            RuntimeError: If the graph was borrowed again since ``epoch``.
        """
        if epoch != self.epoch:
            raise RuntimeError(
                "Stale handle: the graph was mutated or exclusively borrowed "
                "after this handle was created. Keep a WeakNode instead."
            )

    def check_exclusive(self, epoch: int) -> None:
        """Raise if a ``NodeMut`` from ``epoch`` no longer holds exclusive access.

        Raises:
            RuntimeError: If another borrow started since ``epoch``.
        """
        if epoch != self.epoch or not self.exclusive_open:
            raise RuntimeError(
                "Stale handle: exclusive access ended when the graph was "
                "borrowed again. Re-acquire it with Graph.weak_mut()."
            )
