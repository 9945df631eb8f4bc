"""
Named registry for interchangeable core components (difference metrics,
diversity metrics, sampling strategies, weight generators).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from .exceptions import UnknownComponentError

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Maps names to component factories.

    Supports usage as a decorator:

        @DIVERSITY_METRICS.register("objective_space")
        class FitnessDiversity(DiversityMetric): ...
    """

    def __init__(self, kind: str = "component") -> None:
        self._kind = kind
        self._items: dict[str, T] = {}

    @property
    def kind(self) -> str:
        return self._kind

    def register(self, key: str, item: T | None = None, *, override: bool = False) -> Callable[[T], T] | T:
        """
        Register an item with the given key.

        Args:
            key: The unique name for the item (case-insensitive).
            item: The item to register. If None, returns a decorator.
            override: If True, overwrite existing key. If False, raise ValueError on duplicate.
        """
        norm = key.lower()

        def _do_register(obj: T) -> T:
            if norm in self._items and not override:
                raise ValueError(f"Key '{key}' already exists in {self._kind} registry")
            self._items[norm] = obj
            return obj

        if item is None:
            return _do_register
        return _do_register(item)

    def get(self, key: str, default: Any = ...) -> T:
        """
        Retrieve an item by key.

        Raises UnknownComponentError when the key is missing and no default is given.
        """
        norm = key.lower()
        if norm not in self._items:
            if default is not ...:
                return default
            raise UnknownComponentError(self._kind, key, self.list())
        return self._items[norm]

    def create(self, key: str, *args: Any, **kwargs: Any) -> Any:
        """Look up a factory and call it."""
        factory = self.get(key)
        return factory(*args, **kwargs)  # type: ignore[operator]

    def list(self) -> list[str]:
        """Return a sorted list of registered keys."""
        return sorted(self._items.keys())

    def __contains__(self, key: str) -> bool:
        return key.lower() in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __iter__(self) -> Iterable[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry"]
