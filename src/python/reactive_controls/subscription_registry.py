# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Registry for tracking subscriptions and listeners by owner.

Components and mounted views register every unsubscribe function they create
under an owner key, then release them all at teardown.
"""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from threading import Lock
from typing import Callable

logger = logging.getLogger(__name__)

_owner_ids = itertools.count(1)


def new_owner(prefix: str) -> str:
    """Return a process-unique owner key such as ``"button-3"``."""
    return f"{prefix}-{next(_owner_ids)}"


class SubscriptionRegistry:
    """Tracks unsubscribe functions by owner for scoped cleanup."""

    _instance: SubscriptionRegistry | None = None

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[Callable[[], None]]] = defaultdict(list)
        self._lock = Lock()

    @classmethod
    def instance(cls) -> SubscriptionRegistry:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, owner: str, unsubscribe: Callable[[], None]) -> Callable[[], None]:
        """Register an unsubscribe function under an owner.

        Returns a wrapped unsubscribe that also removes from registry.
        """
        with self._lock:
            self._subscriptions[owner].append(unsubscribe)

        def wrapped_unsubscribe() -> None:
            unsubscribe()
            with self._lock:
                try:
                    self._subscriptions[owner].remove(unsubscribe)
                except ValueError:
                    pass

        return wrapped_unsubscribe

    def count(self, owner: str) -> int:
        with self._lock:
            return len(self._subscriptions.get(owner, ()))

    def unsubscribe_all(self, owner: str) -> int:
        """Unsubscribe all callbacks for an owner. Returns count."""
        with self._lock:
            unsubs = self._subscriptions.pop(owner, [])

        count = 0
        for unsub in unsubs:
            try:
                unsub()
                count += 1
            except Exception as e:
                logger.error("Error unsubscribing for %s: %s", owner, e)

        return count


class OwnerScope:
    """The teardown scope of one component instance.

    Example:
        scope = OwnerScope("button")
        scope.add(signal.subscribe(callback))
        scope.dispose()  # unsubscribes everything added above
    """

    def __init__(self, prefix: str, registry: SubscriptionRegistry | None = None) -> None:
        self.owner = new_owner(prefix)
        self._registry = registry or SubscriptionRegistry.instance()
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add(self, unsubscribe: Callable[[], None]) -> Callable[[], None]:
        return self._registry.register(self.owner, unsubscribe)

    @property
    def subscription_count(self) -> int:
        return self._registry.count(self.owner)

    def dispose(self) -> int:
        """Release everything registered under this scope. Safe to call twice."""
        if self._disposed:
            return 0
        self._disposed = True
        released = self._registry.unsubscribe_all(self.owner)
        logger.debug("Disposed %s (%d subscriptions)", self.owner, released)
        return released
