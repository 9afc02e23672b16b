"""Ambient attribute context shared by generated icon components."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator, List, Optional

from .models.attributes import IconAttributes

Subscriber = Callable[[IconAttributes], None]


class MissingAttributesContextError(LookupError):
    """Raised when a component renders without any provided attributes."""


class AttributesSignal:
    """Observable holder of the current :class:`IconAttributes`.

    Components call ``get()`` on every render; subscribers are told about each
    change so a host can re-render.
    """

    def __init__(self, attributes: Optional[IconAttributes] = None) -> None:
        self._attributes = attributes if attributes is not None else IconAttributes.new()
        self._subscribers: List[Subscriber] = []

    def get(self) -> IconAttributes:
        return self._attributes

    def set(self, attributes: IconAttributes) -> None:
        self._attributes = attributes
        self._notify()

    def update(self, func: Callable[[IconAttributes], Optional[IconAttributes]]) -> None:
        """Apply ``func`` to a copy of the current attributes and store the result.

        ``func`` may mutate the copy in place (returning ``None``) or return a
        replacement instance.
        """
        draft = self._attributes.model_copy()
        result = func(draft)
        self.set(result if result is not None else draft)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; the returned function unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self._attributes)


_current: ContextVar[Optional[AttributesSignal]] = ContextVar(
    "lucide_attributes", default=None
)


def provide_attributes(attributes: Optional[IconAttributes] = None) -> AttributesSignal:
    """Make ``attributes`` (defaults when omitted) the ambient icon attributes."""
    signal = AttributesSignal(attributes)
    _current.set(signal)
    return signal


def use_attributes() -> Optional[AttributesSignal]:
    return _current.get()


def expect_attributes() -> AttributesSignal:
    """Return the ambient attributes signal or fail if none was provided."""
    signal = _current.get()
    if signal is None:
        raise MissingAttributesContextError(
            "No icon attributes provided; call provide_attributes() first"
        )
    return signal


@contextmanager
def attributes_scope(attributes: Optional[IconAttributes] = None) -> Iterator[AttributesSignal]:
    """Provide attributes for the duration of a ``with`` block."""
    signal = AttributesSignal(attributes)
    token = _current.set(signal)
    try:
        yield signal
    finally:
        _current.reset(token)
