"""Application layer – unit of work coordination, middleware and event dispatch."""
