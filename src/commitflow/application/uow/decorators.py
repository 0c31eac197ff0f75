"""Application UoW – in_unit_of_work decorator."""
from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from commitflow.application.uow.manager import UnitOfWorkManager

F = TypeVar("F", bound=Callable[..., Any])


def in_unit_of_work(manager_attribute: str = "_uow", attempts: int = 1) -> Callable[[F], F]:
    """Decorator: run a method inside the instance's :class:`UnitOfWorkManager`."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            manager: UnitOfWorkManager | None = getattr(self, manager_attribute, None)
            if manager is None:
                return func(self, *args, **kwargs)
            return manager.execute(lambda: func(self, *args, **kwargs), attempts)

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["in_unit_of_work"]
