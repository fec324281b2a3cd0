"""Document models that carry score fields"""

from .solver_job_result import SolverJobResult
from .solver_status import SolverStatus

__all__ = (
    "SolverJobResult",
    "SolverStatus",
)
