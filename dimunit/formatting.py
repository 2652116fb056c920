"""
String formatting for dimensioned values.

Format specs follow the shape ``[flags][width][.precision][verb]`` with printf style verbs:

    >>> format(Quantity(9.81, Dimensions(mass=1, time=-2)), ".1f")
    '9.8 kg s^-2'

Parsing a spec (:class:`FormatSpec`) is kept apart from rendering the number, which is looked up
per verb in :data:`NUMBER_FORMATTERS`. Width, sign and padding only ever apply to the number,
never to the unit string which follows it.
"""
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Optional

import numpy as np

from dimunit.config import GetSettings
from dimunit.dimension import Dimensions

_SPEC_PATTERN = re.compile(
    r"^(?P<flags>[#+\- 0]*)(?P<width>[1-9]\d*)?(?:\.(?P<precision>\d*))?(?P<verb>[^\d.#+\- ]?)$"
)

# Names of single dimension types, used by the debug literal and the bad verb diagnostic
_TYPE_NAMES: Dict[Dimensions, str] = {}


def RegisterTypeName(dimensions: Dimensions, name: str) -> None:
    """Registers a type name to use when rendering values with exactly the given dimensions. The first name registered for a set of dimensions is kept.

    :param dimensions: The dimensions of the named type.
    :type dimensions: :class:`Dimensions`
    :param name: The name to render, e.g. ``"Length"``.
    :type name: str
    """
    _TYPE_NAMES.setdefault(dimensions, name)


def TypeNameFor(dimensions: Dimensions) -> Optional[str]:
    return _TYPE_NAMES.get(dimensions)


@dataclass(frozen=True)
class FormatSpec:
    """A parsed format spec.

    :param verb: The formatting verb, e.g. ``"f"``.
    :type verb: str
    :param width: The minimum width of the number, if given.
    :type width: int, optional
    :param precision: The number of digits, if given. ``"1.f"`` parses to precision 0.
    :type precision: int, optional
    :param flags: Any of ``#``, ``+``, ``-``, ``0`` and space.
    :type flags: frozenset
    """

    verb: str = "v"
    width: Optional[int] = None
    precision: Optional[int] = None
    flags: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, spec: str) -> "FormatSpec":
        match = _SPEC_PATTERN.match(spec)
        if match is None:
            # Unparseable specs are reported as a bad verb
            return cls(verb=spec[-1])
        width = match.group("width")
        precision = match.group("precision")
        return cls(
            verb=match.group("verb") or GetSettings().default_verb,
            width=int(width) if width else None,
            precision=int(precision or 0) if precision is not None else None,
            flags=frozenset(match.group("flags")),
        )

    @property
    def sharp(self) -> bool:
        return "#" in self.flags


# --- Number strategies ---


def _scientific(value: float) -> str:
    return np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)


def _positional(value: float) -> str:
    return np.format_float_positional(value, unique=True, trim="-")


def _non_finite(value: float) -> Optional[str]:
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return None


def _exponential(value: float, precision: Optional[int]) -> str:
    special = _non_finite(value)
    if special is not None:
        return special
    if precision is None:
        return _scientific(value)
    return format(value, f".{precision}e")


def _fixed(value: float, precision: Optional[int]) -> str:
    special = _non_finite(value)
    if special is not None:
        return special
    if precision is None:
        return _positional(value)
    return format(value, f".{precision}f")


def _general(value: float, precision: Optional[int]) -> str:
    special = _non_finite(value)
    if special is not None:
        return special
    if precision is not None:
        return format(value, f".{precision}g")
    scientific = _scientific(value)
    exponent = int(scientific.split("e")[1])
    if -4 <= exponent < 6:
        return _positional(value)
    return scientific


def _upper(strategy: Callable[[float, Optional[int]], str]) -> Callable[[float, Optional[int]], str]:
    def formatter(value: float, precision: Optional[int]) -> str:
        return strategy(value, precision).upper().replace("INF", "Inf").replace("NAN", "NaN")

    return formatter


NUMBER_FORMATTERS: Dict[str, Callable[[float, Optional[int]], str]] = {
    "e": _exponential,
    "E": _upper(_exponential),
    "f": _fixed,
    "F": _fixed,
    "g": _general,
    "G": _upper(_general),
    "v": _general,
}


def _pad(number: str, spec: FormatSpec) -> str:
    if "+" in spec.flags and not number.startswith("-"):
        number = "+" + number
    elif " " in spec.flags and not number.startswith("-"):
        number = " " + number
    if spec.width is None or len(number) >= spec.width:
        return number
    if "-" in spec.flags:
        return number.ljust(spec.width)
    if "0" in spec.flags and number[-1].isdigit():
        sign = number[0] if number[0] in "+- " else ""
        return sign + number[len(sign):].rjust(spec.width - len(sign), "0")
    return number.rjust(spec.width)


# --- Entry points ---


def FormatNumber(value: float, spec: FormatSpec) -> str:
    """Renders the number portion of a value, including width and sign flags."""
    return _pad(NUMBER_FORMATTERS[spec.verb](float(value), spec.precision), spec)


def DebugLiteral(value: float, dimensions: Dimensions, class_name: str) -> str:
    """Renders the ``#v`` form of a value.

    :param value: The magnitude.
    :type value: float
    :param dimensions: The dimensions of the value.
    :type dimensions: :class:`Dimensions`
    :param class_name: The class name used when the dimensions have no registered name.
    :type class_name: str
    :return: ``Name(number)`` for registered dimensions, otherwise a field dump.
    :rtype: str
    """
    number = _general(float(value), None)
    name = TypeNameFor(dimensions)
    if name is not None:
        return f"{name}({number})"
    return f"{class_name}(value={number}, dimensions={dimensions!r})"


def BadVerb(verb: str, value: float, dimensions: Dimensions, class_name: str) -> str:
    name = TypeNameFor(dimensions) or class_name
    rendered = _general(float(value), None)
    unit = str(dimensions)
    if unit:
        rendered = f"{rendered} {unit}"
    return f"%!{verb}({name}={rendered})"


def FormatDimensioned(
    value: float,
    dimensions: Dimensions,
    spec: str,
    class_name: str,
    unit: Optional[str] = None,
) -> str:
    """Formats a magnitude followed by its unit string.

    :param value: The magnitude.
    :type value: float
    :param dimensions: The dimensions of the value.
    :type dimensions: :class:`Dimensions`
    :param spec: The format spec, as passed to ``__format__``.
    :type spec: str
    :param class_name: The class name of the value, used in diagnostics.
    :type class_name: str
    :param unit: An already rendered unit string, to skip rendering ``dimensions`` again.
    :type unit: str, optional
    :return: The formatted value. Unsupported verbs produce a ``%!verb(...)`` diagnostic rather than raising.
    :rtype: str
    """
    parsed = FormatSpec.parse(spec)
    if parsed.verb == "v" and parsed.sharp:
        return DebugLiteral(value, dimensions, class_name)
    if parsed.verb not in NUMBER_FORMATTERS:
        return BadVerb(parsed.verb, value, dimensions, class_name)
    number = FormatNumber(value, parsed)
    if unit is None:
        unit = str(dimensions)
    if not unit:
        return number
    return f"{number} {unit}"
