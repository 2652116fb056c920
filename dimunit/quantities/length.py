from dimunit.dimension import Dimensions
from dimunit.quantities.base import TypedQuantity


class Length(TypedQuantity):
    """A length in meters."""

    DIMENSIONS = Dimensions(length=1)


Yottameter = Length(1e24)
Zettameter = Length(1e21)
Exameter = Length(1e18)
Petameter = Length(1e15)
Terameter = Length(1e12)
Gigameter = Length(1e9)
Megameter = Length(1e6)
Kilometer = Length(1e3)
Hectometer = Length(1e2)
Decameter = Length(1e1)
Meter = Length(1.0)  # Base unit
Decimeter = Length(1e-1)
Centimeter = Length(1e-2)
Millimeter = Length(1e-3)
Micrometer = Length(1e-6)
Nanometer = Length(1e-9)
Picometer = Length(1e-12)
Femtometer = Length(1e-15)
Attometer = Length(1e-18)
Zeptometer = Length(1e-21)
Yoctometer = Length(1e-24)
