"""Conversion between Version values and their canonical string form.

The canonical form is::

    MAJOR "." MINOR "." PATCH [ "-" TAG [ "." PRERELEASE_VERSION ] ]

where ``TAG`` is one of ``dev``, ``alpha``, ``betha`` or ``rc``.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from .buffer import BUFFER_SIZE, PRE_RELEASE_BUFFER_SIZE, CharBuffer
from .enums import PreRelease
from .error_handling import check_field
from .version import FIELD_MAX, Version

logger = logging.getLogger(__name__)

__all__ = [
    "BUFFER_SIZE",
    "PRE_RELEASE_BUFFER_SIZE",
    "TAG_MAX_LENGTH",
    "FIELD_MAX",
    "pre_release_suffix",
    "required_capacity",
    "to_string",
    "from_string",
]

# longest pre-release tag read by the parser, longer tags are cut to this
TAG_MAX_LENGTH = 5

_NUMBER = re.compile(r"[ \t\n\r\f\v]*([+-]?)([0-9]+)")
_TAG = re.compile(r"[^.]{1,%d}" % TAG_MAX_LENGTH)

TextInput = Union[str, bytes, bytearray, CharBuffer]


def pre_release_suffix(kind: PreRelease, version: int = 0) -> str:
    """Return the "-tag[.n]" suffix for a pre-release stage.

    NONE always renders as "" and ignores ``version``. A ``version`` of 0 is
    not rendered.

    Raises:
        VersionFieldError: If ``version`` is not an int within [0, FIELD_MAX]
    """
    return _suffix(PreRelease(kind), check_field("pre_release_version", version, FIELD_MAX))


def _suffix(kind: PreRelease, version: int) -> str:
    if kind is PreRelease.NONE:
        return ""
    if version > 0:
        return f"-{kind.tag}.{version}"
    return f"-{kind.tag}"


def _render(version: Version) -> str:
    return f"{version.major}.{version.minor}.{version.patch}" + _suffix(
        PreRelease(version.pre_release), version.pre_release_version)


def required_capacity(version: Version) -> int:
    """Return the smallest buffer capacity that holds ``version`` untruncated."""
    return len(_render(version)) + 1


def to_string(version: Version, buffer: Optional[CharBuffer] = None) -> str:
    """Format a version into a character buffer.

    Args:
        version (Version): The version to format
        buffer (CharBuffer): Caller-owned destination. A new buffer of
            BUFFER_SIZE is used when omitted.

    Returns:
        str: The text held in the buffer after the write, which is truncated
             when the buffer is too small
    """
    if buffer is None:
        buffer = CharBuffer(BUFFER_SIZE)
    buffer.write(_render(version))
    return buffer.value


def _decode(text: TextInput) -> str:
    if isinstance(text, CharBuffer):
        return text.value
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("ascii", errors="replace")
    elif not isinstance(text, str):
        raise TypeError(f"Version text must be str, bytes or CharBuffer, got {type(text).__name__}")
    # input ends at the first terminator, like a C string
    return text.split("\0", 1)[0]


def _narrow(name: str, match: re.Match) -> int:
    sign, digits = match.groups()
    # 10**16 is a multiple of 2**16, so the last 16 digits fix the low 16 bits
    value = int(digits[-16:])
    if sign == "-":
        value = -value
    value &= FIELD_MAX
    if sign == "-" or len(digits.lstrip("0")) > 5 or int(digits[-5:]) > FIELD_MAX:
        logger.debug("Narrowing %s=%s%s to 16 bits (%d)", name, sign, digits, value)
    return value


def from_string(text: TextInput) -> Version:
    """Parse a version string leniently.

    Scanning stops at the first element that does not match the canonical
    form. Fields reached before that keep their parsed values, the rest are
    left at 0 / NONE. Malformed content never raises.

    The pre-release tag is read up to the next "." and cut to TAG_MAX_LENGTH
    characters before being matched exactly against the tag vocabulary, so
    "1.0.0-alphabet" reads as an alpha while "1.0.0-devel" has no tag.

    Raises:
        TypeError: If ``text`` is not str, bytes or a CharBuffer
    """
    source = _decode(text)
    fields = {"major": 0, "minor": 0, "patch": 0, "pre_release_version": 0}
    kind = PreRelease.NONE
    pos = 0
    matched = 0

    for index, name in enumerate(("major", "minor", "patch")):
        if index > 0:
            if not source.startswith(".", pos):
                break
            pos += 1
        match = _NUMBER.match(source, pos)
        if match is None:
            break
        fields[name] = _narrow(name, match)
        pos = match.end()
        matched += 1
    else:
        if source.startswith("-", pos):
            match = _TAG.match(source, pos + 1)
            if match is not None:
                token = match.group(0)
                kind = PreRelease.from_tag(token) or PreRelease.NONE
                if kind is PreRelease.NONE:
                    logger.debug("Unknown pre-release tag %r in %r", token, source)
                pos = match.end()
                matched += 1
                if source.startswith(".", pos):
                    match = _NUMBER.match(source, pos + 1)
                    if match is not None:
                        fields["pre_release_version"] = _narrow("pre_release_version", match)
                        matched += 1

    if matched < 3:
        logger.debug("Parsed only %d field(s) from %r", matched, source)

    return Version(fields["major"], fields["minor"], fields["patch"], kind, fields["pre_release_version"])
