"""Application pipeline – Pipeline class."""
from __future__ import annotations

from typing import Any, Callable, Iterable

from commitflow.application.pipeline.container import PipeContainer
from commitflow.application.pipeline.middleware import Handler, MiddlewareRef
from commitflow.kernel.errors import ContractError


class Pipeline:
    """Builds and executes an ordered chain of middleware around a handler.

    String entries are resolved through *container* each time the chain is
    executed, so bound factories can hand out fresh middleware instances.
    """

    def __init__(self, container: PipeContainer | None = None) -> None:
        self._container = container
        self._middlewares: list[MiddlewareRef] = []

    def add(self, middleware: MiddlewareRef) -> "Pipeline":
        """Append a middleware (fluent API)."""
        self._middlewares.append(middleware)
        return self

    def through(self, middlewares: Iterable[MiddlewareRef]) -> "Pipeline":
        """Replace the whole chain (fluent API)."""
        self._middlewares = list(middlewares)
        return self

    def __len__(self) -> int:
        return len(self._middlewares)

    def execute(self, request: Any, handler: Handler) -> Any:
        """Execute the full chain, ending with *handler*."""
        chain = handler
        for mw in reversed([self._resolve(ref) for ref in self._middlewares]):
            _next = chain
            _mw = mw

            def _wrap(req: Any, *, _n: Handler = _next, _m: Callable[..., Any] = _mw) -> Any:
                return _m(req, _n)

            chain = _wrap
        return chain(request)

    def _resolve(self, ref: MiddlewareRef) -> Callable[..., Any]:
        if isinstance(ref, str):
            if self._container is None:
                raise ContractError(f"Cannot resolve middleware {ref!r} without a pipe container.")
            return self._container.get(ref)

        if not callable(ref):
            raise ContractError(f"Middleware {type(ref).__name__} is not callable.")
        return ref


__all__ = ["Pipeline"]
