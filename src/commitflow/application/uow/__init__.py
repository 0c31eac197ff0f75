"""Application UoW – ports, markers, manager and decorator."""
from commitflow.application.uow.ports import ExceptionReporter, TransactionManager, UnitOfWork
from commitflow.application.uow.markers import DispatchAfterCommit, DispatchBeforeCommit
from commitflow.application.uow.boundary import TransactionManagerUnitOfWork
from commitflow.application.uow.manager import UnitOfWorkManager, UnitOfWorkPhase
from commitflow.application.uow.decorators import in_unit_of_work

__all__ = [
    "DispatchAfterCommit",
    "DispatchBeforeCommit",
    "ExceptionReporter",
    "TransactionManager",
    "TransactionManagerUnitOfWork",
    "UnitOfWork",
    "UnitOfWorkManager",
    "UnitOfWorkPhase",
    "in_unit_of_work",
]
