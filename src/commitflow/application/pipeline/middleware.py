"""Application pipeline – Middleware base."""
from __future__ import annotations

import abc
from typing import Any, Callable

Handler = Callable[[Any], Any]
Next = Callable[[Any], Any]


class Middleware(abc.ABC):
    """Single node in the middleware chain.

    A middleware may replace the request before calling ``next_``,
    short-circuit by not calling it, or wrap the returned value.
    """

    @abc.abstractmethod
    def __call__(self, request: Any, next_: Next) -> Any: ...


#: Anything accepted in a chain: a bound name, a Middleware or a plain callable.
MiddlewareRef = str | Middleware | Callable[[Any, Next], Any]

__all__ = ["Handler", "Middleware", "MiddlewareRef", "Next"]
