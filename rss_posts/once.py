from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Once(Generic[T]):
    """
    Lazily computed value: the factory runs on the first `get()` only.

    A failed factory call caches nothing, so the next `get()` retries.
    The cell lives as long as its owner; it is not a process-wide cache.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: Optional[T] = None
        self._computed = False

    @property
    def computed(self) -> bool:
        return self._computed

    def get(self) -> T:
        if not self._computed:
            self._value = self._factory()
            self._computed = True
        return self._value  # type: ignore[return-value]

    __call__ = get

    def reset(self) -> None:
        self._value = None
        self._computed = False


def run_only_once(fn: Callable[[], T]) -> Once[T]:
    """Decorator form of `Once`."""
    return Once(fn)
