"""
Dimensioned quantities and the arithmetic between them.

Addition, subtraction, comparison and min/max require the operands to share dimensions and raise
:class:`DimensionMismatch` otherwise. Multiplication and division are always defined and combine
the dimension vectors of their operands.
"""
from numbers import Real
from typing import Callable, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

import numpy as np

from dimunit.dimension import Dimensions
from dimunit.errors import DimensionMismatch
from dimunit.formatting import FormatDimensioned

DIMENSIONLESS = Dimensions()


@runtime_checkable
class Dimensioned(Protocol):
    """Anything carrying a magnitude and the dimensions it is measured in."""

    @property
    def dimensions(self) -> Dimensions: ...

    @property
    def value(self) -> float: ...


Operand = Union[Dimensioned, Real]


def _dimensions_of(operand: Operand) -> Dimensions:
    if isinstance(operand, Dimensions):
        return operand
    if isinstance(operand, Dimensioned):
        return operand.dimensions
    if isinstance(operand, Real):
        return DIMENSIONLESS
    raise TypeError(f"Expected a dimensioned value or a number, got {type(operand).__name__}")


def _value_of(operand: Operand) -> float:
    if isinstance(operand, Dimensioned):
        return float(operand.value)
    return float(operand)


def _divide(numerator: float, denominator: float) -> float:
    # IEEE semantics: x/0 is +-Inf and 0/0 is NaN
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(numerator, denominator))


def _is_operand(other: object) -> bool:
    return isinstance(other, (Dimensioned, Real))


def DimensionsMatch(a, b) -> bool:
    """Checks if two values have the same dimensions.

    :param a: A dimensioned value, bare number, or :class:`Dimensions`.
    :param b: A dimensioned value, bare number, or :class:`Dimensions`.
    :return: True if every base dimension has the same exponent in both.
    :rtype: bool
    """
    return _dimensions_of(a).matches(_dimensions_of(b))


def _require_match(operation: str, expected: Dimensions, operand: Operand) -> None:
    got = _dimensions_of(operand)
    if not expected.matches(got):
        raise DimensionMismatch(operation, expected, got)


class Quantity:
    """A magnitude together with the SI dimensions it is measured in. Quantities are mutable: the in place methods :meth:`add`, :meth:`sub`, :meth:`mul` and :meth:`div` change the receiver and return it.

    :param value: The magnitude, in SI base units.
    :type value: float
    :param dimensions: The dimensions of the quantity. A mapping is converted to :class:`Dimensions`. Defaults to dimensionless.
    :type dimensions: :class:`Dimensions` or Mapping, optional
    """

    __slots__ = ("_dimensions", "_value", "_formatted")

    def __init__(
        self,
        value: float,
        dimensions: Union[Dimensions, Mapping, None] = None,
    ) -> None:
        self._value = float(value)
        # Always a fresh vector, never the caller's object
        self._dimensions = Dimensions(dimensions)
        self._formatted: Optional[str] = None

    @property
    def value(self) -> float:
        return self._value

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    def unit(self) -> "Quantity":
        return self

    def clone(self) -> "Quantity":
        """Returns a deep copy of this quantity."""
        return Quantity(self._value, self._dimensions)

    def _set_dimensions(self, dimensions: Dimensions) -> None:
        self._dimensions = dimensions
        self._formatted = None

    # --- In place arithmetic ---

    def add(self, other: Operand) -> "Quantity":
        _require_match("add", self._dimensions, other)
        self._value += _value_of(other)
        return self

    def sub(self, other: Operand) -> "Quantity":
        _require_match("sub", self._dimensions, other)
        self._value -= _value_of(other)
        return self

    def mul(self, other: Operand) -> "Quantity":
        value = self._value * _value_of(other)
        self._set_dimensions(self._dimensions * _dimensions_of(other))
        self._value = value
        return self

    def div(self, other: Operand) -> "Quantity":
        value = _divide(self._value, _value_of(other))
        self._set_dimensions(self._dimensions / _dimensions_of(other))
        self._value = value
        return self

    def __iadd__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __itruediv__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    # --- Arithmetic returning new quantities ---

    def __add__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Add(self, other)

    def __radd__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Add(other, self)

    def __sub__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Sub(self, other)

    def __rsub__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Sub(other, self)

    def __mul__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Mul(self, other)

    def __rmul__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Mul(other, self)

    def __truediv__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Div(self, other)

    def __rtruediv__(self, other: object) -> "Quantity":
        if not _is_operand(other):
            return NotImplemented
        return Div(other, self)

    def __pow__(self, power: int) -> "Quantity":
        return Quantity(self._value**power, self._dimensions**power)

    def __neg__(self) -> "Quantity":
        return Quantity(-self._value, self._dimensions)

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self._value), self._dimensions)

    def __float__(self) -> float:
        return self._value

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return DimensionsMatch(self, other) and self._value == _value_of(other)

    __hash__ = None

    def _compare(self, operation: str, other: object):
        if not _is_operand(other):
            return None
        _require_match(operation, self._dimensions, other)
        return _value_of(other)

    def __lt__(self, other: object) -> bool:
        value = self._compare("<", other)
        return NotImplemented if value is None else self._value < value

    def __le__(self, other: object) -> bool:
        value = self._compare("<=", other)
        return NotImplemented if value is None else self._value <= value

    def __gt__(self, other: object) -> bool:
        value = self._compare(">", other)
        return NotImplemented if value is None else self._value > value

    def __ge__(self, other: object) -> bool:
        value = self._compare(">=", other)
        return NotImplemented if value is None else self._value >= value

    # --- Formatting ---

    def __format__(self, spec: str) -> str:
        if self._formatted is None:
            self._formatted = str(self._dimensions)
        return FormatDimensioned(
            self._value, self._dimensions, spec, type(self).__name__, unit=self._formatted
        )

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return format(self, "#v")


def _start(operand: Operand) -> Quantity:
    return Quantity(_value_of(operand), _dimensions_of(operand))


def _max(accumulator: Quantity, operand: Operand) -> Quantity:
    _require_match("max", accumulator.dimensions, operand)
    value = _value_of(operand)
    if value > accumulator.value:
        accumulator._value = value
        accumulator._set_dimensions(_dimensions_of(operand))
    return accumulator


def _min(accumulator: Quantity, operand: Operand) -> Quantity:
    _require_match("min", accumulator.dimensions, operand)
    value = _value_of(operand)
    if value < accumulator.value:
        accumulator._value = value
        accumulator._set_dimensions(_dimensions_of(operand))
    return accumulator


# How each operation folds a single operand into an accumulator
_STEPS: Dict[str, Callable[[Quantity, Operand], Quantity]] = {
    "add": Quantity.add,
    "sub": Quantity.sub,
    "mul": Quantity.mul,
    "div": Quantity.div,
    "max": _max,
    "min": _min,
}


def _reduce(operation: str, operands) -> Quantity:
    if not operands:
        raise ValueError(f"{operation} requires at least one operand")
    step = _STEPS[operation]
    accumulator = _start(operands[0])
    for operand in operands[1:]:
        step(accumulator, operand)
    return accumulator


def _fold(operation: str, accumulator: Optional[Quantity], operands) -> Quantity:
    if accumulator is None:
        return _reduce(operation, operands)
    step = _STEPS[operation]
    for operand in operands:
        step(accumulator, operand)
    return accumulator


def Add(*operands: Operand) -> Quantity:
    """Returns the sum of the operands, which must all share dimensions.

    :param operands: One or more dimensioned values. Bare numbers count as dimensionless.
    :return: A new quantity with the dimensions of the operands.
    :rtype: :class:`Quantity`
    :raises DimensionMismatch: If an operand's dimensions differ from the first operand's.
    """
    return _reduce("add", operands)


def Sub(*operands: Operand) -> Quantity:
    """Returns the first operand minus the sum of the rest, which must all share dimensions.

    :param operands: One or more dimensioned values.
    :return: A new quantity with the dimensions of the operands.
    :rtype: :class:`Quantity`
    :raises DimensionMismatch: If an operand's dimensions differ from the first operand's.
    """
    return _reduce("sub", operands)


def Mul(*operands: Operand) -> Quantity:
    """Returns the product of the operands. Dimensions add up exponent by exponent.

    :param operands: One or more dimensioned values.
    :return: A new quantity.
    :rtype: :class:`Quantity`
    """
    return _reduce("mul", operands)


def Div(*operands: Operand) -> Quantity:
    """Divides the first operand by each of the rest in turn. Dimensions are subtracted exponent by exponent.

    :param operands: One or more dimensioned values.
    :return: A new quantity.
    :rtype: :class:`Quantity`
    """
    return _reduce("div", operands)


def Max(*operands: Operand) -> Quantity:
    """Returns a copy of the operand with the largest value. The first operand wins ties.

    :param operands: One or more dimensioned values sharing dimensions.
    :return: A new quantity.
    :rtype: :class:`Quantity`
    :raises DimensionMismatch: If an operand's dimensions differ from the first operand's.
    """
    return _reduce("max", operands)


def Min(*operands: Operand) -> Quantity:
    """Returns a copy of the operand with the smallest value. The first operand wins ties.

    :param operands: One or more dimensioned values sharing dimensions.
    :return: A new quantity.
    :rtype: :class:`Quantity`
    :raises DimensionMismatch: If an operand's dimensions differ from the first operand's.
    """
    return _reduce("min", operands)


def AddInto(accumulator: Optional[Quantity], *operands: Operand) -> Quantity:
    """Adds the operands into an accumulator. A missing accumulator starts from a copy of the first operand.

    :param accumulator: The quantity to add into, which is changed in place, or None.
    :type accumulator: :class:`Quantity`, optional
    :param operands: The values to add.
    :return: The accumulator, or a new quantity when it was None.
    :rtype: :class:`Quantity`
    """
    return _fold("add", accumulator, operands)


def SubInto(accumulator: Optional[Quantity], *operands: Operand) -> Quantity:
    return _fold("sub", accumulator, operands)


def MulInto(accumulator: Optional[Quantity], *operands: Operand) -> Quantity:
    return _fold("mul", accumulator, operands)


def DivInto(accumulator: Optional[Quantity], *operands: Operand) -> Quantity:
    return _fold("div", accumulator, operands)


def MaxInto(accumulator: Optional[Quantity], *operands: Operand) -> Quantity:
    return _fold("max", accumulator, operands)


def MinInto(accumulator: Optional[Quantity], *operands: Operand) -> Quantity:
    return _fold("min", accumulator, operands)
