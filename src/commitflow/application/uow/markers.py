"""Application UoW – listener commit-timing capabilities.

A listener class mixes in at most one of these markers::

    class SendWelcomeEmail(DispatchAfterCommit):
        def handle(self, event: UserRegistered) -> None: ...
"""


class DispatchBeforeCommit:
    """Marker: run the listener just before the unit of work commits."""


class DispatchAfterCommit:
    """Marker: run the listener once the unit of work has committed."""


__all__ = ["DispatchAfterCommit", "DispatchBeforeCommit"]
