# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Reactive signals for control state.

Signals hold values that change over time. Controls derive their attributes
and styles from signals with ComputedSignal, so a change to an input signal
flows to every derived value without manual synchronization.

Example:
    disabled = Signal(False)
    tabindex = ComputedSignal(lambda: None if disabled.value else "0", [disabled])
    disabled.value = True
    tabindex.value  # None
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from contextlib import contextmanager
from threading import Lock
from typing import Any, Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _noop() -> None:
    pass


class Signal(Generic[T]):
    """A reactive value that notifies subscribers when it changes.

    Attributes:
        value: The current value. Setting this notifies subscribers if changed.

    Example:
        open = Signal(False, "dropdown_open")
        open.subscribe(lambda v: print("open" if v else "closed"))
        open.update(lambda it: not it)  # Prints: "open"
    """

    __slots__ = ("_value", "_subscribers", "_lock", "_name", "_next_id")

    def __init__(self, initial_value: T, name: str = "") -> None:
        self._value = initial_value
        self._subscribers: dict[int, Callable[[T], None]] = {}
        self._lock = Lock()
        self._name = name
        self._next_id = 0

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._value == new_value:
            return

        self._value = new_value

        if _batch_context.depth > 0:
            _batch_context.pending_notifications.append(self)
            return

        self._notify()

    def update(self, fn: Callable[[T], T]) -> None:
        """Replace the value with fn(current value)."""
        self.value = fn(self._value)

    def _notify(self) -> None:
        with self._lock:
            callbacks = list(self._subscribers.values())

        for callback in callbacks:
            try:
                callback(self._value)
            except Exception as e:
                logger.error("Signal '%s' callback error: %s", self._name or "unnamed", e)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Subscribe to value changes.

        Args:
            callback: Called with new value when signal changes.

        Returns:
            Unsubscribe function. Call it to stop receiving notifications.
        """
        with self._lock:
            sub_id = self._next_id
            self._next_id += 1
            self._subscribers[sub_id] = callback

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(sub_id, None)

        return unsubscribe

    def subscribe_as(self, owner: str, callback: Callable[[T], None]) -> Callable[[], None]:
        """Subscribe with owner tracking for cleanup when the owner is disposed."""
        from .subscription_registry import SubscriptionRegistry

        unsub = self.subscribe(callback)
        return SubscriptionRegistry.instance().register(owner, unsub)

    def peek(self) -> T:
        """Get value without triggering tracking in computed signals."""
        return self._value

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def __repr__(self) -> str:
        name = f" '{self._name}'" if self._name else ""
        return f"<Signal{name}: {self._value!r}>"


class ComputedSignal(Generic[T]):
    """A signal whose value is derived from other signals.

    Computed signals recompute lazily: a dependency change marks them dirty
    and the next read runs ``compute`` again. Subscribers are notified with
    the fresh value on every dependency change.

    With ``cache=False`` every read runs ``compute``, for values that depend on
    state outside the signal graph such as layout measurements.

    Example:
        disabled = Signal(False)
        aria_disabled = ComputedSignal(
            lambda: "true" if disabled.value else "false", [disabled]
        )
        aria_disabled.value  # "false"
        disabled.value = True
        aria_disabled.value  # "true"
    """

    __slots__ = (
        "_compute",
        "_dependencies",
        "_cached_value",
        "_dirty",
        "_subscribers",
        "_lock",
        "_unsubscribers",
        "_next_id",
        "_name",
        "_cache",
    )

    def __init__(
        self,
        compute: Callable[[], T],
        dependencies: Sequence[Any],
        name: str = "",
        cache: bool = True,
    ) -> None:
        self._compute = compute
        self._dependencies = list(dependencies)
        self._cached_value: T | None = None
        self._dirty = True
        self._subscribers: dict[int, Callable[[T], None]] = {}
        self._lock = Lock()
        self._unsubscribers: list[Callable[[], None]] = []
        self._next_id = 0
        self._name = name
        self._cache = cache

        for dep in self._dependencies:
            unsub = dep.subscribe(self._on_dependency_change)
            self._unsubscribers.append(unsub)

    def _on_dependency_change(self, _: object) -> None:
        self.invalidate()

    def invalidate(self) -> None:
        """Mark the value stale and notify subscribers with a recomputed value."""
        self._dirty = True
        self._notify()

    @property
    def value(self) -> T:
        if self._dirty or not self._cache:
            self._cached_value = self._compute()
            self._dirty = False
        return self._cached_value  # type: ignore

    def peek(self) -> T:
        return self.value

    def _notify(self) -> None:
        with self._lock:
            callbacks = list(self._subscribers.values())
        if not callbacks:
            return

        value = self.value
        for callback in callbacks:
            try:
                callback(value)
            except Exception as e:
                logger.error("ComputedSignal '%s' callback error: %s", self._name or "unnamed", e)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        with self._lock:
            sub_id = self._next_id
            self._next_id += 1
            self._subscribers[sub_id] = callback

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(sub_id, None)

        return unsubscribe

    def subscribe_as(self, owner: str, callback: Callable[[T], None]) -> Callable[[], None]:
        """Subscribe with owner tracking for cleanup when the owner is disposed."""
        from .subscription_registry import SubscriptionRegistry

        unsub = self.subscribe(callback)
        return SubscriptionRegistry.instance().register(owner, unsub)

    def dispose(self) -> None:
        """Detach from all dependencies. The last computed value stays readable."""
        unsubs, self._unsubscribers = self._unsubscribers, []
        for unsub in unsubs:
            unsub()

    def __repr__(self) -> str:
        name = f" '{self._name}'" if self._name else ""
        return f"<ComputedSignal{name}: {self.value!r}>"


class Constant(Generic[T]):
    """A read-only value with the same read interface as Signal.

    Used where a prop may be either a plain value or a signal, so derived
    values can treat both alike. A constant never notifies.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def peek(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        return _noop

    def __repr__(self) -> str:
        return f"<Constant: {self._value!r}>"


def is_readable(value: object) -> bool:
    """Return True for signals, computed signals, constants and node refs."""
    return hasattr(value, "peek") and hasattr(value, "subscribe")


def maybe_signal(value: Any, default: T) -> Any:
    """Lift an optional prop into something readable.

    Args:
        value: None, a plain value, or anything readable.
        default: Used when value is None.

    Returns:
        value itself if already readable, otherwise a Constant.
    """
    if value is None:
        return Constant(default)
    if is_readable(value):
        return value
    return Constant(value)


class _BatchContext:
    """Context for batching signal updates."""

    __slots__ = ("depth", "pending_notifications")

    def __init__(self) -> None:
        self.depth = 0
        self.pending_notifications: list[Signal] = []


_batch_context = _BatchContext()


class Batch:
    """Context manager for batching multiple signal updates.

    Inside a batch, signal notifications are deferred until the outermost
    batch ends. Each changed signal notifies once, in the order it first
    changed.

    Example:
        with Batch():
            disabled.value = True
            active.value = False
        # Subscribers see both changes at once
    """

    def __enter__(self) -> Batch:
        _batch_context.depth += 1
        return self

    def __exit__(self, *args: object) -> None:
        _batch_context.depth -= 1
        if _batch_context.depth > 0:
            return
        while _batch_context.pending_notifications:
            pending = list(dict.fromkeys(_batch_context.pending_notifications))
            _batch_context.pending_notifications.clear()
            for signal in pending:
                signal._notify()


@contextmanager
def batch():
    """Context manager for batching signal updates.

    Alias for Batch() as a function.
    """
    with Batch():
        yield
