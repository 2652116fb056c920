from dimunit import Dimensions, Length, Quantity
from dimunit.customary import HorsePower, Ton
from dimunit.quantities import Hour, Kilometer
from dimunit.utils.logging import Info, SetLoggingLevel

import logging

logging.basicConfig()
SetLoggingLevel(logging.INFO)

Info(f"Engine: {HorsePower(300):.1f}")
Info(f"Load: {Ton(2)}")

speed = Kilometer.unit() * 90 / Hour
Info(f"Speed: {speed:.2f}")
Info(f"Distance in 2h: {Length.from_unit(speed * (Hour * 2)):.0f}")

g = Quantity(9.81, Dimensions(length=1, time=-2))
Info(f"Weight of a 2 ton load: {Ton(2) * g:e}")
Info(f"Debug form: {Kilometer!r}")

Length.from_unit(g, strict=False)
