from typing import Any, Callable, Iterable
import numbers

import sympy


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _coerce_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("Booleans are not matrix scalars")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    if isinstance(value, sympy.Basic) and value.is_integer:
        return int(value)
    raise TypeError(f"Value {value!r} is not an integer")


def _coerce_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("Booleans are not matrix scalars")
    return float(value)


def _coerce_rational(value: Any) -> sympy.Rational:
    if isinstance(value, bool):
        raise TypeError("Booleans are not matrix scalars")
    return sympy.Rational(value)


class ScalarField:
    """
    The numeric capabilities a matrix needs from its entries.

    Every element operation inside the engine is routed through one of these
    objects, so a matrix never mixes scalar types.
    """

    name: str

    def __init__(
        self,
        name: str,
        coerce: Callable[[Any], Any],
        div: Callable[[Any, Any], Any],
    ):
        self.name = name
        self._coerce = coerce
        self._div = div
        self.zero = coerce(0)
        self.one = coerce(1)

    def __repr__(self) -> str:
        return f"ScalarField({self.name})"

    def coerce(self, value: Any) -> Any:
        return self._coerce(value)

    def add(self, a: Any, b: Any) -> Any:
        return a + b

    def sub(self, a: Any, b: Any) -> Any:
        return a - b

    def mul(self, a: Any, b: Any) -> Any:
        return a * b

    def div(self, a: Any, b: Any) -> Any:
        return self._div(a, b)

    def neg(self, a: Any) -> Any:
        return -a

    def abs(self, a: Any) -> Any:
        return abs(a)

    def lt(self, a: Any, b: Any) -> bool:
        return bool(a < b)

    def eq(self, a: Any, b: Any) -> bool:
        return bool(a == b)

    def is_zero(self, a: Any) -> bool:
        return self.eq(a, self.zero)

    def is_one(self, a: Any) -> bool:
        return self.eq(a, self.one)

    def sum(self, values: Iterable[Any]) -> Any:
        """Left-to-right sum starting from zero."""
        total = self.zero
        for value in values:
            total = self.add(total, value)
        return total


INTEGER = ScalarField("integer", _coerce_int, _trunc_div)
FLOAT = ScalarField("float", _coerce_float, lambda a, b: a / b)
RATIONAL = ScalarField("rational", _coerce_rational, lambda a, b: a / b)


def infer_field(values: Iterable[Any]) -> ScalarField:
    """
    Pick the field for a grid of raw values.

    Exact sympy numbers select ``RATIONAL``; plain Python numbers, integers
    included, select ``FLOAT`` to agree with the shape constructors. The
    integer field is only used when asked for explicitly.
    """
    for value in values:
        if isinstance(value, sympy.Basic) and not isinstance(value, sympy.Float):
            return RATIONAL
    return FLOAT
