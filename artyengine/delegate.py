"""Single- and multi-subscriber event delegates."""

from __future__ import annotations

from typing import Any, Callable, List, Optional


class UnicastDelegate:
    """Holds at most one callback and returns its result when executed."""

    def __init__(self) -> None:
        self._callback: Optional[Callable[..., Any]] = None

    def bind(self, callback: Callable[..., Any]) -> None:
        self._callback = callback

    def unbind(self) -> None:
        self._callback = None

    @property
    def is_bound(self) -> bool:
        return self._callback is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound callback; None when nothing is bound."""
        if self._callback is None:
            return None
        return self._callback(*args)

    __call__ = execute


class MulticastDelegate:
    """Calls every added callback in the order they were added."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., None]] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def add(self, callback: Callable[..., None]) -> None:
        """Add ``callback`` unless an equal one is already present."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove(self, callback: Callable[..., None]) -> None:
        """Remove ``callback`` if present."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def broadcast(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)

    __call__ = broadcast