from enum import Enum


class NumericVariant(str, Enum):
    INT = "int"
    LONG = "long"
    BIG_DECIMAL = "big_decimal"

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_integral(self) -> bool:
        return self is not NumericVariant.BIG_DECIMAL

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive (min, max) for the integral variants, None when unbounded."""
        if self is NumericVariant.INT:
            return INT_MIN, INT_MAX
        if self is NumericVariant.LONG:
            return LONG_MIN, LONG_MAX
        return None


INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
