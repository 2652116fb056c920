"""
Dimensions of commonly used derived SI units.
"""
from dimunit.dimension import Dimensions

Unitless = Dimensions()
Dimless = Unitless

Meter = Dimensions(length=1)
# Meter2 is a square meter
Meter2 = Dimensions(length=2)
# Meter3 is a cubic meter
Meter3 = Dimensions(length=3)
Kilogram = Dimensions(mass=1)
Second = Dimensions(time=1)
Hertz = Dimensions(time=-1)

# KilogramPerMeter3 is density
KilogramPerMeter3 = Dimensions(mass=1, length=-3)
# Pascal is a unit of pressure [kg m^-1 s^-2]
Pascal = Dimensions(mass=1, length=-1, time=-2)
Joule = Dimensions(mass=1, length=2, time=-2)
Watt = Dimensions(mass=1, length=2, time=-3)
