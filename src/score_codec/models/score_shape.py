from enum import Enum


class ScoreShape(str, Enum):
    SIMPLE = "simple"
    HARD_SOFT = "hard_soft"
    HARD_MEDIUM_SOFT = "hard_medium_soft"
    BENDABLE = "bendable"

    def __str__(self) -> str:
        return str(self.value)
