"""This module defines the pre-release stages a version can be tagged with."""
from enum import IntEnum
from typing import Optional


class PreRelease(IntEnum):
    """Enum representing the pre-release stage of a version.

    Members are ordered by stage, a higher value is a later stage. ``NONE``
    is the lowest value, so an untagged version ranks below a tagged one.
    """

    NONE = 0
    DEVELOPMENT = 1
    ALPHA = 2
    BETHA = 3
    RELEASE_CANDIDATE = 4

    @property
    def tag(self) -> str:
        """Return the canonical string token for the stage ("" for NONE)."""

        return {
            PreRelease.DEVELOPMENT: "dev",
            PreRelease.ALPHA: "alpha",
            PreRelease.BETHA: "betha",
            PreRelease.RELEASE_CANDIDATE: "rc",
        }.get(self, "")

    @classmethod
    def from_tag(cls, tag: str) -> Optional["PreRelease"]:
        """Return the stage for an exact, case-sensitive tag, or None if unknown."""

        for member in cls:
            if member is not cls.NONE and member.tag == tag:
                return member
        return None
