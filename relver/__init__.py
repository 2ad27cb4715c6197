"""Version value type and its canonical string codec."""

from .buffer import BUFFER_SIZE, PRE_RELEASE_BUFFER_SIZE, CharBuffer
from .codec import TAG_MAX_LENGTH, from_string, pre_release_suffix, required_capacity, to_string
from .enums import PreRelease
from .error_handling import BufferCapacityError, RelverError, VersionFieldError
from .version import FIELD_MAX, Version

__version__ = "0.1.0"
