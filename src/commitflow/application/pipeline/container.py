"""Application pipeline – PipeContainer (name → middleware factory)."""
from __future__ import annotations

from typing import Any, Callable

from commitflow.kernel.errors import ContractError, UnresolvedBindingError


class PipeContainer:
    """Lazily build middleware by name.

    Example::

        pipes = PipeContainer()
        pipes.bind("log", lambda: LogDomainEventDispatch())
        dispatcher = Dispatcher(middleware=pipes)
        dispatcher.through(["log"])
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}

    def bind(self, name: str, factory: Callable[[], Any]) -> None:
        self._factories[name] = factory

    def get(self, name: str) -> Callable[..., Any]:
        factory = self._factories.get(name)
        if factory is None:
            raise UnresolvedBindingError("pipe", name)

        pipe = factory()
        if not callable(pipe):
            raise ContractError(
                f"Pipe binding for {name} must return a callable, got {type(pipe).__name__}."
            )
        return pipe


__all__ = ["PipeContainer"]
