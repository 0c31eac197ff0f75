"""Application events – ListenerContainer (listener name → factory)."""
from __future__ import annotations

from typing import Any, Callable

from commitflow.kernel.errors import ContractError, UnresolvedBindingError


class ListenerContainer:
    """Resolve listener names to listener objects or callbacks.

    Factories run on every :meth:`get`, so each dispatch can receive a
    fresh listener instance.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, Callable[[], Any]] = {}

    def bind(self, name: str, factory: Callable[[], Any]) -> None:
        self._bindings[name] = factory

    def get(self, name: str) -> Any:
        factory = self._bindings.get(name)
        if factory is None:
            raise UnresolvedBindingError("listener", name)

        listener = factory()
        if listener is None or isinstance(listener, (str, bytes, int, float, bool)):
            raise ContractError(
                f"Listener binding for {name} must return an object or callable, "
                f"got {type(listener).__name__}."
            )
        return listener


__all__ = ["ListenerContainer"]
