"""
Discriminated results for callers that prefer values over exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from decimal_ta.errors import IndicatorError


@dataclass(frozen=True)
class Result:
    """Either a computed value or the error that prevented it."""
    value: Any = None
    error: Optional[IndicatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: Any) -> 'Result':
        return cls(value=value)

    @classmethod
    def failure(cls, error: IndicatorError) -> 'Result':
        return cls(error=error)


def capture(fn: Callable[..., Any], *args, **kwargs) -> Result:
    """Run an indicator call and fold IndicatorError into a Result.

    Other exceptions propagate unchanged.
    """
    try:
        return Result.success(fn(*args, **kwargs))
    except IndicatorError as e:
        return Result.failure(e)
