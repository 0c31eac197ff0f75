"""Kernel value types."""
from commitflow.kernel.types.result import Err, Ok, Result, is_failure

__all__ = ["Err", "Ok", "Result", "is_failure"]
