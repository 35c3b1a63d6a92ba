"""Exceptions raised by the finance calculators.

Only programmer errors are raised. Invalid user input is reported through
``ValidationResult`` and unsolvable TVM inputs through a ``None`` value.
"""


class FinCalcError(Exception):
    """Base class for calculator errors."""

    pass


class UnsupportedVariableError(FinCalcError, ValueError):
    """Raised when ``calculate_tvm`` is asked to solve for an unknown variable."""

    def __init__(self, variable: object) -> None:
        self.variable = variable
        super().__init__(f"Invalid calculate variable: {variable}")
