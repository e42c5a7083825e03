"""
Explicit state containers for an interactive palette explorer.

The engine itself takes palettes and locked sets as plain arguments; these
containers hold the current values for a front end and notify subscribers
when they change.

Usage:
    state = ExplorerState(generate_palette())
    unsubscribe = state.palette.subscribe(redraw)
    state.toggle_lock(12)
    state.palette.set(network.step(state.palette.get(), state.locked.get()))
"""

from typing import Callable, Generic, Sequence, TypeVar

from ..color import Color

T = TypeVar("T")


class Store(Generic[T]):
    """
    A value with change notification.

    Subscribers are called with the current value on subscribe and after
    every set()/update().
    """

    def __init__(self, value: T):
        self._value = value
        self._subscribers: list[Callable[[T], None]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def update(self, fn: Callable[[T], T]) -> None:
        """Replace the value with fn(current value)."""
        self.set(fn(self._value))

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """
        Register a callback.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


class ExplorerState:
    """
    Palette, active selection and locked set.

    The active color is tracked by palette index, never by value, so
    duplicate colors stay unambiguous.
    """

    def __init__(self, colors: Sequence[Color]):
        self.palette: Store[list[Color]] = Store(list(colors))
        self.active_index: Store[int | None] = Store(None)
        self.locked: Store[frozenset[int]] = Store(frozenset())

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.palette.get()):
            raise ValueError(f"Palette index out of range: {index}")

    def select(self, index: int | None) -> None:
        """Make index the active color (None clears the selection)."""
        if index is not None:
            self._check_index(index)
        self.active_index.set(index)

    def active_color(self) -> Color | None:
        index = self.active_index.get()
        if index is None:
            return None
        return self.palette.get()[index]

    def replace_color(self, index: int, color: Color) -> None:
        """Swap one palette entry for a new color."""
        self._check_index(index)

        def replace(colors: list[Color]) -> list[Color]:
            updated = list(colors)
            updated[index] = color
            return updated

        self.palette.update(replace)

    def toggle_lock(self, index: int) -> bool:
        """
        Lock or unlock an index.

        Returns:
            True if the index is locked afterwards
        """
        self._check_index(index)
        locked = self.locked.get()
        if index in locked:
            self.locked.set(locked - {index})
            return False
        self.locked.set(locked | {index})
        return True

    def replace_palette(self, colors: Sequence[Color]) -> None:
        """Swap in a whole new palette (e.g. after regeneration or load)."""
        self.palette.set(list(colors))
        active = self.active_index.get()
        if active is not None and active >= len(colors):
            self.active_index.set(None)
        self.locked.set(frozenset(i for i in self.locked.get() if i < len(colors)))
