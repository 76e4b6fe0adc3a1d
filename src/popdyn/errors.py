"""
Errors raised by popdyn.

Both error kinds subclass ValueError, so callers that only care about bad
input can keep catching ValueError.
"""


class PopdynError(Exception):
    pass


class InvalidParameter(PopdynError, ValueError):
    """
    A structural precondition was violated (non-positive step count, non-positive
    carrying capacity, empty sweep, trajectory too short...).
    Always raised before any computation begins.
    """


class DomainError(PopdynError, ValueError):
    """
    A mathematical operation met an out-of-domain value.

    Attributes:
        index (int): position of the offending value.
        value (float): the offending value.
    """

    def __init__(self, index: int, value: float, msg: str | None = None) -> None:
        self.index = index
        self.value = value
        if msg is None:
            msg = f"value {value} at index {index} is out of domain"
        super().__init__(msg)
