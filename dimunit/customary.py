from dimunit.core import Quantity
from dimunit.derived import Kilogram, Watt

# Watts per mechanical horsepower
HORSEPOWER = 745.699872
# Kilograms per short ton
SHORT_TON = 907.185


def HorsePower(hp: float) -> Quantity:
    """Creates a power quantity from an amount of mechanical horsepower.

    :param hp: The power in horsepower.
    :type hp: float
    :return: The power in watts.
    :rtype: :class:`Quantity`
    """
    return Quantity(hp * HORSEPOWER, Watt)


def Ton(t: float) -> Quantity:
    """Creates a mass quantity from a number of short tons.

    :param t: The mass in short tons.
    :type t: float
    :return: The mass in kilograms.
    :rtype: :class:`Quantity`
    """
    return Quantity(t * SHORT_TON, Kilogram)
