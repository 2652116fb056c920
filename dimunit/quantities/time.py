from dimunit.dimension import Dimensions
from dimunit.quantities.base import TypedQuantity


class Time(TypedQuantity):
    """A duration in seconds."""

    DIMENSIONS = Dimensions(time=1)


Yottasecond = Time(1e24)
Zettasecond = Time(1e21)
Exasecond = Time(1e18)
Petasecond = Time(1e15)
Terasecond = Time(1e12)
Gigasecond = Time(1e9)
Megasecond = Time(1e6)
Kilosecond = Time(1e3)
Hour = Time(3600.0)
Hectosecond = Time(1e2)
Minute = Time(60.0)
Decasecond = Time(1e1)
Second = Time(1.0)  # Base unit
Decisecond = Time(1e-1)
Centisecond = Time(1e-2)
Millisecond = Time(1e-3)
Microsecond = Time(1e-6)
Nanosecond = Time(1e-9)
Picosecond = Time(1e-12)
Femtosecond = Time(1e-15)
Attosecond = Time(1e-18)
Zeptosecond = Time(1e-21)
Yoctosecond = Time(1e-24)
