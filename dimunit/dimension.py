"""
SI base dimensions and the exponent vector describing the dimensions of a quantity.

A :class:`Dimensions` is always fully populated, one integer exponent per :class:`Dimension`,
so a zero exponent and a missing one are the same thing.
"""
from collections.abc import Mapping
from enum import Enum
from typing import Dict, Iterable, Iterator, Tuple, Union

import numpy as np


class Dimension(Enum):
    """Enum for the seven SI base dimensions, in the order they are rendered."""

    Mass = 0
    Length = 1
    Time = 2
    Current = 3
    Temperature = 4
    Luminosity = 5
    ChemicalAmount = 6

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]


SYMBOLS: Dict[Dimension, str] = {
    Dimension.Mass: "kg",
    Dimension.Length: "m",
    Dimension.Time: "s",
    Dimension.Current: "A",
    Dimension.Temperature: "K",
    Dimension.Luminosity: "cd",
    Dimension.ChemicalAmount: "mol",
}

# Keyword names accepted by the Dimensions constructor
KEYWORDS: Dict[str, Dimension] = {
    "mass": Dimension.Mass,
    "length": Dimension.Length,
    "time": Dimension.Time,
    "current": Dimension.Current,
    "temperature": Dimension.Temperature,
    "luminosity": Dimension.Luminosity,
    "chemical_amount": Dimension.ChemicalAmount,
}
_NAMES = {dimension: name for name, dimension in KEYWORDS.items()}

DimensionKey = Union[Dimension, str]


def _lookup(key: DimensionKey) -> Dimension:
    if isinstance(key, Dimension):
        return key
    if isinstance(key, str) and key in KEYWORDS:
        return KEYWORDS[key]
    raise KeyError(f"Unknown base dimension: {key!r}")


def _exponent(power) -> int:
    exponent = int(power)
    if exponent != power:
        raise ValueError(f"Dimension exponents must be integers, got {power!r}")
    return exponent


class Dimensions(Mapping):
    """An immutable vector of integer exponents over the SI base dimensions. Reads like a mapping of :class:`Dimension` to exponent which only contains the non-zero entries.

    :param exponents: A mapping or iterable of (dimension, exponent) pairs. Later pairs overwrite earlier ones.
    :type exponents: Mapping or Iterable, optional
    :param kwargs: Exponents by dimension name, e.g. ``mass=1, time=-2``. Applied after ``exponents``.
    :type kwargs: int
    """

    __slots__ = ("_exponents",)

    def __init__(
        self,
        exponents: Union[Mapping, Iterable[Tuple[DimensionKey, int]], None] = None,
        **kwargs: int,
    ) -> None:
        array = np.zeros(len(Dimension), dtype=np.int64)
        if exponents is not None:
            pairs = exponents.items() if isinstance(exponents, Mapping) else exponents
            for key, power in pairs:
                array[_lookup(key).value] = _exponent(power)
        for key, power in kwargs.items():
            array[_lookup(key).value] = _exponent(power)
        array.flags.writeable = False
        self._exponents = array

    @classmethod
    def from_array(cls, array) -> "Dimensions":
        """Creates a vector from an array of exponents indexed by :class:`Dimension` value.

        :param array: The exponents, one per base dimension.
        :type array: array_like
        :return: The new vector.
        :rtype: :class:`Dimensions`
        """
        array = np.asarray(array)
        if array.shape != (len(Dimension),):
            raise ValueError(
                f"Expected {len(Dimension)} exponents, got array of shape {array.shape}"
            )
        rounded = np.rint(array)
        if not np.array_equal(rounded, array):
            raise ValueError(f"Dimension exponents must be integers, got {array!r}")
        dimensions = cls.__new__(cls)
        exponents = rounded.astype(np.int64)
        exponents.flags.writeable = False
        dimensions._exponents = exponents
        return dimensions

    def to_array(self) -> np.ndarray:
        """Returns a writable copy of the exponents, indexed by :class:`Dimension` value."""
        return self._exponents.copy()

    @property
    def is_dimensionless(self) -> bool:
        return not self._exponents.any()

    def matches(self, other: "Dimensions") -> bool:
        return np.array_equal(self._exponents, other._exponents)

    # --- Mapping view ---

    def __getitem__(self, key: DimensionKey) -> int:
        return int(self._exponents[_lookup(key).value])

    def __iter__(self) -> Iterator[Dimension]:
        for dimension in Dimension:
            if self._exponents[dimension.value]:
                yield dimension

    def __len__(self) -> int:
        return int(np.count_nonzero(self._exponents))

    def __contains__(self, key: object) -> bool:
        try:
            return self[key] != 0
        except KeyError:
            return False

    # --- Algebra ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(self._exponents.tobytes())

    def __mul__(self, other: "Dimensions") -> "Dimensions":
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_array(self._exponents + other._exponents)

    def __truediv__(self, other: "Dimensions") -> "Dimensions":
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_array(self._exponents - other._exponents)

    def __pow__(self, power: int) -> "Dimensions":
        return Dimensions.from_array(self._exponents * _exponent(power))

    # --- Rendering ---

    def __str__(self) -> str:
        tokens = []
        for dimension, power in self.items():
            if power == 1:
                tokens.append(dimension.symbol)
            else:
                tokens.append(f"{dimension.symbol}^{power}")
        return " ".join(tokens)

    def __repr__(self) -> str:
        fields = ", ".join(f"{_NAMES[dimension]}={power}" for dimension, power in self.items())
        return f"Dimensions({fields})"
