# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Protocol definitions shared by controls, the host model and the renderer.

Protocols keep the controls independent of any concrete host: anything with
the right attributes works, no inheritance required.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, Union, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Readable(Protocol[T_co]):
    """Protocol for reactive values: Signal, ComputedSignal, Constant, NodeRef."""

    @property
    def value(self) -> T_co:
        """Current value, tracked by computed signals."""
        ...

    def peek(self) -> T_co:
        """Current value without tracking."""
        ...

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        ...


@runtime_checkable
class Measurable(Protocol):
    """Protocol for mounted elements whose natural content size can be read.

    Reading either property may force the host to perform layout.
    """

    @property
    def scroll_width(self) -> int:
        ...

    @property
    def scroll_height(self) -> int:
        ...


# An attribute value bound onto an element. None and False remove the
# attribute, True renders it without a value.
AttributeValue = Union[str, bool, None, Readable]

EventHandler = Callable[[Any], None]


@runtime_checkable
class Component(Protocol):
    """Protocol for controls: a view to mount and a scope to tear down."""

    def view(self) -> Any:
        """Return the control's ElementNode tree. Mount it at most once."""
        ...

    def dispose(self) -> None:
        """Release every subscription and listener the control installed."""
        ...
