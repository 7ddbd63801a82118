"""Exceptions raised by the room type registry.

Only configuration-time problems raise. Run-time policy queries report
"not found" by returning ``None``, ``False`` or an empty string instead.
"""


class RoomTypeError(Exception):
    """Base class for room type registry errors."""
    pass


class InvalidConfig(RoomTypeError, ValueError):
    """A room type configuration was rejected at registration time."""
    pass


class MissingReferenceType(RoomTypeError, LookupError):
    """A reference room type needed for section classification is not registered."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Reference room type '{identifier}' is not registered; "
            f"register it before classifying room types by section"
        )


class RegistrySealedError(RoomTypeError, RuntimeError):
    """The registry was sealed and no longer accepts registrations."""
    pass
