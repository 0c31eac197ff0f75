"""Application pipeline – middleware chain and unit of work middleware."""
from commitflow.application.pipeline.middleware import Handler, Middleware, MiddlewareRef, Next
from commitflow.application.pipeline.container import PipeContainer
from commitflow.application.pipeline.pipeline import Pipeline
from commitflow.application.pipeline.middlewares import (
    DeferredEvents,
    ExecuteInUnitOfWork,
    FlushDeferredEvents,
)

__all__ = [
    "DeferredEvents",
    "ExecuteInUnitOfWork",
    "FlushDeferredEvents",
    "Handler",
    "Middleware",
    "MiddlewareRef",
    "Next",
    "PipeContainer",
    "Pipeline",
]
