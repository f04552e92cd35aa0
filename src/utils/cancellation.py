"""
Cancellation tokens tied to a view's lifetime.

The store hands out one token per active view and cancels it when the user
navigates away, so a slow AI response that lands afterwards is dropped.
"""

import threading


class CancellationToken:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self, label: str = ""):
        self.label = label
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"<CancellationToken(label='{self.label}', {state})>"
