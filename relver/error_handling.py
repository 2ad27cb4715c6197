"""This module contains the custom exceptions raised by relver."""


class RelverError(Exception):
    '''Base class for all exceptions raised by relver'''

class VersionFieldError(RelverError, ValueError):
    '''raised when a version field is out of range or of the wrong type'''

class BufferCapacityError(RelverError, ValueError):
    '''raised when a character buffer is created with no room for the terminator'''


def check_field(name: str, value, maximum: int) -> int:
    """Checks that a version field is an int within [0, maximum]."""
    # reject bool, which is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionFieldError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise VersionFieldError(f"{name} must be between 0 and {maximum}, got {value}")
    return int(value)
