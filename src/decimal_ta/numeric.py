"""
Exact decimal arithmetic for decimal-ta.

Every indicator routes numeric conversion and arithmetic through this
module so that parsing rules, precision and error reporting are the same
everywhere. Arithmetic runs in a single decimal context built from
``Config`` (28 significant digits, ROUND_HALF_UP unless overridden).
"""

import logging
import numbers
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

from decimal_ta.config import Config
from decimal_ta.errors import DivisionByZero, InvalidNumericFormat

logger = logging.getLogger(__name__)

ZERO = Decimal(0)
ONE = Decimal(1)
TWO = Decimal(2)
THREE = Decimal(3)
HUNDRED = Decimal(100)

_context: Optional[Context] = None

# Unrounded context for running sums; only the final division is rounded.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def get_context() -> Context:
    """Return the active decimal context, building it from Config on first use."""
    global _context
    if _context is None:
        _context = Config().decimal_context()
    return _context


def configure(config: Config) -> Context:
    """Install the decimal context described by ``config`` process-wide."""
    global _context
    if not config.validate():
        raise ValueError("Invalid decimal-ta configuration")
    _context = config.decimal_context()
    logger.info(f"Decimal context set: prec={_context.prec}, rounding={_context.rounding}")
    return _context


def reset():
    """Drop the active context; the next call rebuilds it from the environment."""
    global _context
    _context = None


def to_decimal(value: Any) -> Decimal:
    """Convert a price-like value to an exact Decimal.

    Floats go through their shortest round-tripping text, so ``22.81``
    becomes ``Decimal("22.81")`` and not its binary expansion.

    Raises:
        InvalidNumericFormat: for booleans, None, non-numeric text,
            NaN and infinities
    """
    if isinstance(value, bool):
        raise InvalidNumericFormat(value)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        result = Decimal(repr(float(value)))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidNumericFormat(value) from None
    else:
        raise InvalidNumericFormat(value)

    if not result.is_finite():
        raise InvalidNumericFormat(value)
    return result


def to_decimals(series: Iterable[Any]) -> List[Decimal]:
    """Convert every element of ``series``, preserving order."""
    return [to_decimal(value) for value in series]


def add(a: Decimal, b: Decimal) -> Decimal:
    return get_context().add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return get_context().subtract(a, b)


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """Add without rounding to the context precision."""
    return _EXACT.add(a, b)


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    """Subtract without rounding to the context precision."""
    return _EXACT.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    return get_context().multiply(a, b)


def divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Divide, raising DivisionByZero for any zero divisor (0/0 included)."""
    if is_zero(divisor):
        raise DivisionByZero(dividend)
    return get_context().divide(dividend, divisor)


def absolute(a: Decimal) -> Decimal:
    return get_context().abs(a)


def compare(a: Decimal, b: Decimal) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    return int(get_context().compare(a, b))


def maximum(a: Decimal, b: Decimal) -> Decimal:
    return a if compare(a, b) >= 0 else b


def is_zero(a: Any) -> bool:
    return Decimal(a).is_zero()
