"""
Error taxonomy for decimal-ta.

Validation errors are raised before any computation starts. Numeric
errors come from the decimal adapter, and batch engines re-raise them as
IndicatorCalculationError so callers know which indicator failed.
"""

from typing import Any, Optional


DATASET_MIN_SIZE_ERROR = "There must be at least 1 element in the dataset."
RSI_DATASET_MIN_SIZE_ERROR = "There must be at least 2 elements in the dataset."
PERIOD_MIN_VALUE_ERROR = "Period must be at least 1."
PERIOD_MAX_VALUE_ERROR = "Period can't be greater than the length of the dataset."


class IndicatorError(Exception):
    """Base class for every error raised by decimal-ta."""


class ValidationError(IndicatorError, ValueError):
    """Input rejected before any computation began."""


class EmptyDataset(ValidationError):
    """The series holds fewer elements than the indicator needs."""

    def __init__(self, message: str = DATASET_MIN_SIZE_ERROR):
        super().__init__(message)


class RsiDatasetTooSmall(EmptyDataset):
    """RSI needs at least two prices to observe a single movement."""

    def __init__(self, message: str = RSI_DATASET_MIN_SIZE_ERROR):
        super().__init__(message)


class PeriodTooSmall(ValidationError):
    """Period is below the indicator's minimum."""

    def __init__(self, period: Any = None, message: str = PERIOD_MIN_VALUE_ERROR):
        super().__init__(message)
        self.period = period


class PeriodExceedsDataset(ValidationError):
    """Period is larger than the usable length of the series."""

    def __init__(self, period: Any = None, length: Optional[int] = None,
                 message: str = PERIOD_MAX_VALUE_ERROR):
        super().__init__(message)
        self.period = period
        self.length = length


class NumericError(IndicatorError, ArithmeticError):
    """Raised by the decimal adapter."""


class InvalidNumericFormat(NumericError):
    """A value could not be parsed as a finite decimal."""

    def __init__(self, value: Any):
        super().__init__(f"Value {value!r} is not a valid decimal number.")
        self.value = value


class DivisionByZero(NumericError):
    """Division with a zero divisor."""

    def __init__(self, dividend: Any = None):
        super().__init__(f"Division of {dividend} by zero.")
        self.dividend = dividend


class IndicatorCalculationError(IndicatorError):
    """A numeric failure surfaced with the indicator that hit it.

    Attributes:
        indicator (str): Indicator name, e.g. ``"EMA"``
        cause (NumericError): The underlying adapter error
        index (Optional[int]): Position in the series where it failed
    """

    def __init__(self, indicator: str, cause: Optional[BaseException] = None,
                 index: Optional[int] = None):
        message = f"An error occurred while calculating the {indicator} value."
        if index is not None:
            message = f"{message[:-1]} at index {index}."
        super().__init__(message)
        self.indicator = indicator
        self.cause = cause
        self.index = index
