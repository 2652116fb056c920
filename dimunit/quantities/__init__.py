from dimunit.quantities.base import TypedQuantity
from dimunit.quantities.dimless import Dimless
from dimunit.quantities.length import *
from dimunit.quantities.mass import *
from dimunit.quantities.time import *
