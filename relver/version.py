"""Version value class with pre-release stage support."""

from __future__ import annotations

from .enums import PreRelease
from .error_handling import VersionFieldError, check_field

# every numeric field is an unsigned 16-bit integer
FIELD_MAX = 0xFFFF


class Version:
    """A class to represent a version number with an optional pre-release stage.

    Attributes:
        major (int): The major version number
        minor (int): The minor version number
        patch (int): The patch version number
        pre_release (PreRelease): The pre-release stage
        pre_release_version (int): The pre-release number, only rendered when
                                   the stage is not NONE and the number is > 0

    The fields are plain attributes. Assigning them directly skips the range
    checks, so use the constructor or set() to keep every field within
    [0, FIELD_MAX].
    """

    def __init__(self, major: int = 0, minor: int = 1, patch: int = 0,
                 pre_release: PreRelease = PreRelease.NONE, pre_release_version: int = 0):
        """Initialize a Version instance.

        Note the default is 0.1.0, not 0.0.0.

        Raises:
            VersionFieldError: If a field is out of range or of the wrong type
        """
        self.set(major, minor, patch, pre_release, pre_release_version)

    def set(self, major: int = 0, minor: int = 1, patch: int = 0,
            pre_release: PreRelease = PreRelease.NONE, pre_release_version: int = 0) -> None:
        """Reassign all five fields.

        Every field is validated before any is assigned, so a failed call
        leaves the instance unchanged.
        """
        values = (
            check_field("major", major, FIELD_MAX),
            check_field("minor", minor, FIELD_MAX),
            check_field("patch", patch, FIELD_MAX),
            _check_pre_release(pre_release),
            check_field("pre_release_version", pre_release_version, FIELD_MAX),
        )
        self.major, self.minor, self.patch, self.pre_release, self.pre_release_version = values

    @classmethod
    def parse(cls, version_string) -> 'Version':
        """Parse a version string, see :func:`relver.codec.from_string`."""
        from .codec import from_string
        return from_string(version_string)

    def copy(self) -> 'Version':
        """Return an independent Version with the same fields."""
        return Version(*self.to_tuple())

    def to_tuple(self) -> tuple[int, int, int, int, int]:
        """Return the version as a tuple (major, minor, patch, pre_release, pre_release_version)."""
        return (self.major, self.minor, self.patch, int(self.pre_release), self.pre_release_version)

    def is_equal(self, other: 'Version') -> bool:
        """Check if all five fields match."""
        return self.to_tuple() == other.to_tuple()

    def is_newer_than(self, other: 'Version') -> bool:
        """Check if any field, scanned from major down, is greater than in ``other``.

        This is not a lexicographic comparison: the scan does not stop at an
        earlier field that is smaller. Version(1, 0, 0) is not newer than
        Version(2, 5, 0), yet Version(1, 6, 0) is.
        """
        for mine, theirs in zip(self.to_tuple(), other.to_tuple()):
            if mine > theirs:
                return True
        return False

    def is_older_than(self, other: 'Version') -> bool:
        """Check if any field, scanned from major down, is smaller than in ``other``."""
        for mine, theirs in zip(self.to_tuple(), other.to_tuple()):
            if mine < theirs:
                return True
        return False

    def __str__(self) -> str:
        """Return the canonical string form of the version."""
        from .codec import to_string
        return to_string(self)

    def __repr__(self) -> str:
        """Return the detailed string representation of the version."""
        return (f"Version(major={self.major}, minor={self.minor}, patch={self.patch}, "
                f"pre_release=PreRelease.{self.pre_release.name}, pre_release_version={self.pre_release_version})")

    def __eq__(self, other) -> bool:
        """Check if two versions are equal."""
        if not isinstance(other, Version):
            return False
        return self.is_equal(other)

    def __lt__(self, other) -> bool:
        """Check if this version is older than another version."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.is_older_than(other)

    def __le__(self, other) -> bool:
        """Check if this version is equal to or older than another version."""
        if not isinstance(other, Version):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other) -> bool:
        """Check if this version is newer than another version."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.is_newer_than(other)

    def __ge__(self, other) -> bool:
        """Check if this version is equal to or newer than another version."""
        if not isinstance(other, Version):
            return NotImplemented
        return self == other or self > other


def _check_pre_release(value) -> PreRelease:
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionFieldError(f"pre_release must be a PreRelease, got {type(value).__name__}")
    try:
        return PreRelease(value)
    except ValueError as e:
        raise VersionFieldError(f"Unknown pre_release stage: {value}") from e
