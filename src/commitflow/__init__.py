"""
commitflow – transactional callback coordination and domain-event dispatch.

Import path convention::

    from commitflow.application.uow import UnitOfWorkManager
    from commitflow.application.events import DeferredDispatcher
    from commitflow.kernel.ddd import DomainEvent, OccursImmediately
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
