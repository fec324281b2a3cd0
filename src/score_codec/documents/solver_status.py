from enum import Enum


class SolverStatus(str, Enum):
    NOT_SOLVING = "NOT_SOLVING"
    SOLVING_ACTIVE = "SOLVING_ACTIVE"
    SOLVING_SCHEDULED = "SOLVING_SCHEDULED"

    def __str__(self) -> str:
        return str(self.value)
