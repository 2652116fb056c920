from dimunit.utils.logging import Debug


class UnitError(Exception):
    """Base class for errors raised by dimunit."""


class DimensionMismatch(UnitError, ValueError):
    """Raised when an operation requires matching dimensions and the operands disagree. Raising it also logs the message to the ``dimunit`` logger.

    :param operation: The name of the operation that failed.
    :type operation: str
    :param expected: The dimensions the operation required.
    :type expected: :class:`Dimensions`
    :param got: The dimensions that were supplied.
    :type got: :class:`Dimensions`
    :param result: The value the failed operation produced, if any. Typed conversions store their NaN result here.
    :type result: object, optional
    """

    def __init__(self, operation: str, expected, got, result=None) -> None:
        self.operation = operation
        self.expected = expected
        self.got = got
        self.result = result
        super().__init__(
            f"Dimension mismatch in {operation}: expected [{_describe(expected)}], got [{_describe(got)}]"
        )
        Debug(str(self))


def _describe(dimensions) -> str:
    return str(dimensions) or "dimensionless"
