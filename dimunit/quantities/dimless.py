from dimunit.dimension import Dimensions
from dimunit.quantities.base import TypedQuantity


class Dimless(TypedQuantity):
    """A dimensionless number, e.g. a ratio."""

    DIMENSIONS = Dimensions()
