class BBPError(Exception):
    """Base class for errors raised by bbploom."""


class UsageError(BBPError, ValueError):
    """The requested digit count cannot be computed."""


class SerializationOverflow(BBPError):
    """An encoded partial sum does not fit in its message capacity."""

    def __init__(self, length: int, capacity: int):
        super().__init__(length, capacity)
        self.length = length
        self.capacity = capacity

    def __str__(self):
        return f"encoded partial sum is {self.length} bytes, capacity is {self.capacity}"


class CommunicationFailure(BBPError):
    """A send or receive between workers did not complete."""
