"""
Dimensional analysis arithmetic over the seven SI base dimensions.
"""
from dimunit.dimension import Dimension, Dimensions, SYMBOLS
from dimunit.errors import DimensionMismatch, UnitError
from dimunit.core import (
    Add,
    AddInto,
    Dimensioned,
    DimensionsMatch,
    Div,
    DivInto,
    Max,
    MaxInto,
    Min,
    MinInto,
    Mul,
    MulInto,
    Quantity,
    Sub,
    SubInto,
)
from dimunit.quantities import Dimless, Length, Mass, Time, TypedQuantity
from dimunit import customary, derived

__version__ = "0.1.0"
