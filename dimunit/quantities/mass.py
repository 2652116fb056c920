from dimunit.dimension import Dimensions
from dimunit.quantities.base import TypedQuantity


class Mass(TypedQuantity):
    """A mass in kilograms."""

    DIMENSIONS = Dimensions(mass=1)


Yottagram = Mass(1e21)
Zettagram = Mass(1e18)
Exagram = Mass(1e15)
Petagram = Mass(1e12)
Teragram = Mass(1e9)
Gigagram = Mass(1e6)
Megagram = Mass(1e3)
Kilogram = Mass(1.0)  # Base unit
Hectogram = Mass(1e-1)
Decagram = Mass(1e-2)
Gram = Mass(1e-3)
Decigram = Mass(1e-4)
Centigram = Mass(1e-5)
Milligram = Mass(1e-6)
Microgram = Mass(1e-9)
Nanogram = Mass(1e-12)
Picogram = Mass(1e-15)
Femtogram = Mass(1e-18)
Attogram = Mass(1e-21)
Zeptogram = Mass(1e-24)
Yoctogram = Mass(1e-27)
