import math
from numbers import Real

from dimunit.core import (
    Div,
    Dimensioned,
    Mul,
    Quantity,
    _dimensions_of,
    _divide,
    _value_of,
)
from dimunit.dimension import Dimensions
from dimunit.errors import DimensionMismatch
from dimunit.formatting import FormatDimensioned, RegisterTypeName
from dimunit.utils.logging import Warn


class TypedQuantity(float):
    """A float committed to one fixed set of dimensions, e.g. a length in meters. Subclasses set :attr:`DIMENSIONS` and are registered by name for debug formatting.

    Adding or subtracting two values of the same type, and scaling by a bare number, keeps the type. Mixing with other dimensioned values falls back to :class:`Quantity` arithmetic. Bare numbers are dimensionless, so they can only be added to :class:`Dimless` values.
    """

    DIMENSIONS: Dimensions = Dimensions()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # Subclasses of a named type keep its name
        if "DIMENSIONS" in cls.__dict__:
            RegisterTypeName(cls.DIMENSIONS, cls.__name__)

    @property
    def dimensions(self) -> Dimensions:
        return self.DIMENSIONS

    @property
    def value(self) -> float:
        return float(self)

    def unit(self) -> Quantity:
        """Converts this value to a general :class:`Quantity`.

        :return: A new quantity with this value and the type's dimensions.
        :rtype: :class:`Quantity`
        """
        return Quantity(float(self), self.DIMENSIONS)

    def as_dimension(self):
        return type(self)(float(self))

    @classmethod
    def from_unit(cls, u: Dimensioned, strict: bool = True):
        """Converts a dimensioned value to this type.

        :param u: The value to convert. A bare number counts as dimensionless.
        :type u: :class:`Dimensioned`
        :param strict: If False, a mismatch returns NaN and logs a warning instead of raising.
        :type strict: bool, optional
        :return: The value of ``u`` as this type.
        :raises DimensionMismatch: If the dimensions of ``u`` differ from :attr:`DIMENSIONS`. The exception's ``result`` is NaN of this type.
        """
        got = _dimensions_of(u)
        if got.matches(cls.DIMENSIONS):
            return cls(_value_of(u))
        result = cls(math.nan)
        if strict:
            raise DimensionMismatch(f"{cls.__name__} conversion", cls.DIMENSIONS, got, result=result)
        Warn(f"Cannot convert [{got}] to {cls.__name__} [{cls.DIMENSIONS}], using NaN")
        return result

    def _keeps_type(self, other) -> bool:
        if type(other) is type(self):
            return True
        return (
            isinstance(other, Real)
            and not isinstance(other, Dimensioned)
            and self.DIMENSIONS.is_dimensionless
        )

    # --- Arithmetic ---

    def __add__(self, other):
        if self._keeps_type(other):
            return type(self)(float(self) + float(other))
        if isinstance(other, (Dimensioned, Real)):
            return self.unit() + other
        return NotImplemented

    def __radd__(self, other):
        if self._keeps_type(other):
            return type(self)(float(other) + float(self))
        if isinstance(other, (Dimensioned, Real)):
            return other + self.unit()
        return NotImplemented

    def __sub__(self, other):
        if self._keeps_type(other):
            return type(self)(float(self) - float(other))
        if isinstance(other, (Dimensioned, Real)):
            return self.unit() - other
        return NotImplemented

    def __rsub__(self, other):
        if self._keeps_type(other):
            return type(self)(float(other) - float(self))
        if isinstance(other, (Dimensioned, Real)):
            return other - self.unit()
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Dimensioned):
            return Mul(self, other)
        if isinstance(other, Real):
            return type(self)(float(self) * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Dimensioned):
            return Mul(other, self)
        if isinstance(other, Real):
            return type(self)(other * float(self))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Dimensioned):
            return Div(self, other)
        if isinstance(other, Real):
            return type(self)(_divide(float(self), other))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, (Dimensioned, Real)):
            return Div(other, self)
        return NotImplemented

    def __neg__(self):
        return type(self)(-float(self))

    # --- Comparison ---

    # Equality and hashing stay those of float. Ordering checks dimensions like Quantity does.

    def __lt__(self, other):
        if isinstance(other, (Dimensioned, Real)):
            return self.unit() < other
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, (Dimensioned, Real)):
            return self.unit() <= other
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, (Dimensioned, Real)):
            return self.unit() > other
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, (Dimensioned, Real)):
            return self.unit() >= other
        return NotImplemented

    # --- Formatting ---

    def __format__(self, spec: str) -> str:
        return FormatDimensioned(float(self), self.DIMENSIONS, spec, type(self).__name__)

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return format(self, "#v")
