# SPDX-License-Identifier: MIT
"""Semantic version parsing and mutation.

Supports MAJOR.MINOR.PATCH format with an optional single pre-release label
and counter, and an optional single build metadata label and counter:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1
- Build metadata: +build, +build.123
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_PRERELEASE_LABEL = "alpha"
DEFAULT_METADATA_LABEL = "build"

_DIGITS = frozenset("0123456789")
_LABEL_CHARS = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-")


class VersionParseError(Exception):
    """Raised when a version string does not follow the version grammar."""

    def __init__(self, version: str, message: str = "", position: Optional[int] = None):
        self.version = version
        self.position = position
        self.message = message or f"Unable to parse version string: {version!r}"
        super().__init__(self.message)


class BumpKind(str, Enum):
    """Component advanced by :meth:`Version.bump`."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"
    BUILD = "build"


@dataclass(eq=False)
class Version:
    """A mutable version identifier.

    A fresh ``Version()`` is ``0.0.1``. Note the patch default of 1, not 0.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release label (e.g. "alpha", "rc"), None when absent
        prerelease_count: Pre-release counter, meaningful only with a label
        metadata: Build metadata label (e.g. "build"), None when absent
        metadata_count: Build metadata counter, meaningful only with a label
    """

    major: int = 0
    minor: int = 0
    patch: int = 1
    prerelease: Optional[str] = None
    prerelease_count: int = 0
    metadata: Optional[str] = None
    metadata_count: int = 0

    @classmethod
    def parse(cls, version_string: str, strict: bool = True) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, strict=strict)

    def reset(self) -> "Version":
        """Restore the default version 0.0.1 with no pre-release or metadata."""
        self.major = 0
        self.minor = 0
        self.patch = 1
        self.prerelease = None
        self.prerelease_count = 0
        self.metadata = None
        self.metadata_count = 0
        return self

    def copy(self) -> "Version":
        return replace(self)

    # -- mutation -----------------------------------------------------------

    def bump(self, kind: Union[BumpKind, str]) -> "Version":
        """Advance one component of the version in place.

        Args:
            kind: A BumpKind member or its value ("major", "minor", "patch",
                "prerelease", "build")

        Returns:
            This version, for chaining

        Raises:
            ValueError: If the kind is unknown
        """
        kind = BumpKind(kind)
        if kind is BumpKind.MAJOR:
            self.major += 1
            self.minor = 0
            self.patch = 0
        elif kind is BumpKind.MINOR:
            self.minor += 1
            self.patch = 0
        elif kind is BumpKind.PATCH:
            self.patch += 1
        elif kind is BumpKind.PRERELEASE:
            if not self.prerelease:
                self.set_prerelease(DEFAULT_PRERELEASE_LABEL)
            self.prerelease_count += 1
        else:
            # Always relabels, then counts on top of the seeded 1.
            self.set_metadata(DEFAULT_METADATA_LABEL)
            self.metadata_count += 1
        return self

    def bump_major(self) -> "Version":
        return self.bump(BumpKind.MAJOR)

    def bump_minor(self) -> "Version":
        return self.bump(BumpKind.MINOR)

    def bump_patch(self) -> "Version":
        return self.bump(BumpKind.PATCH)

    def bump_prerelease(self) -> "Version":
        """Bump the pre-release counter, defaulting the label to "alpha".

        On a version without a pre-release the label is seeded with counter 1
        and then bumped, so ``1.0.0`` becomes ``1.0.0-alpha.2``.
        """
        return self.bump(BumpKind.PRERELEASE)

    def bump_build(self) -> "Version":
        """Set the metadata label to "build" and bump its counter."""
        return self.bump(BumpKind.BUILD)

    def set_prerelease(self, label: str = "") -> "Version":
        """Set the pre-release label, defaulting to "alpha" when empty.

        An unset (zero) counter is initialised to 1; an existing counter is kept.
        """
        self.prerelease = label or DEFAULT_PRERELEASE_LABEL
        if self.prerelease_count == 0:
            self.prerelease_count = 1
        return self

    def set_metadata(self, label: str = "") -> "Version":
        """Set the build metadata label, defaulting to "build" when empty.

        An unset (zero) counter is initialised to 1; an existing counter is kept.
        """
        self.metadata = label or DEFAULT_METADATA_LABEL
        if self.metadata_count == 0:
            self.metadata_count = 1
        return self

    # -- rendering ----------------------------------------------------------

    def format(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}.{self.prerelease_count}"
        if self.metadata:
            version += f"+{self.metadata}.{self.metadata_count}"
        return version

    def __str__(self) -> str:
        return self.format()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def has_metadata(self) -> bool:
        return bool(self.metadata)

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # -- ordering (release precedence, metadata ignored) --------------------

    def _compare(self, other: object) -> Optional[int]:
        if not isinstance(other, Version):
            return None
        from .compare import compare_versions

        return compare_versions(self, other)

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result != 0

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    # Mutable, so not hashable. Use compare.version_key() instead.
    __hash__ = None  # type: ignore[assignment]


# =============================================================================
# Scanner
# =============================================================================


class _Scanner:
    """Single-pass scanner over a version string.

    Grammar::

        version  = number "." number "." number [ "-" label [ "." counter ] ]
                   [ "+" label [ "." counter ] ]
        number   = digit { digit }
        label    = labelchar { labelchar }       ; [0-9A-Za-z-]
        counter  = number                        ; strict
                 | label                         ; lenient, non-numeric -> 0
    """

    def __init__(self, text: str, strict: bool):
        self.text = text
        self.strict = strict
        self.pos = 0

    def fail(self, message: str) -> VersionParseError:
        return VersionParseError(
            self.text,
            f"Unable to parse version string {self.text!r}: {message} at position {self.pos}",
            position=self.pos,
        )

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.at_end() else self.text[self.pos]

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.fail(f"expected {char!r}")
        self.pos += 1

    def take(self, allowed: frozenset[str]) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in allowed:
            self.pos += 1
        return self.text[start : self.pos]

    def number(self, what: str) -> int:
        start = self.pos
        digits = self.take(_DIGITS)
        if not digits:
            raise self.fail(f"expected {what} number")
        return self.decode(digits, start, what)

    def decode(self, digits: str, start: int, what: str) -> int:
        try:
            return int(digits)
        except ValueError:
            # Runs past the interpreter's int string conversion limit.
            self.pos = start
            raise self.fail(f"{what} number too long") from None

    def label(self, what: str) -> str:
        label = self.take(_LABEL_CHARS)
        if not label:
            raise self.fail(f"expected {what} label")
        return label

    def counter(self, what: str) -> int:
        if self.strict:
            return self.number(f"{what} counter")
        start = self.pos
        token = self.label(f"{what} counter")
        if all(c in _DIGITS for c in token):
            return self.decode(token, start, f"{what} counter")
        return 0

    def labelled(self, what: str) -> tuple[str, Optional[int]]:
        label = self.label(what)
        count = None
        if self.peek() == ".":
            self.pos += 1
            count = self.counter(what)
        return label, count

    def scan(self) -> Version:
        major = self.number("major")
        self.expect(".")
        minor = self.number("minor")
        self.expect(".")
        patch = self.number("patch")

        version = Version(major=major, minor=minor, patch=patch)

        if self.peek() == "-":
            self.pos += 1
            label, count = self.labelled("pre-release")
            version.set_prerelease(label)
            if count is not None:
                version.prerelease_count = count

        if self.peek() == "+":
            self.pos += 1
            label, count = self.labelled("metadata")
            version.set_metadata(label)
            if count is not None:
                version.metadata_count = count

        if not self.at_end():
            raise self.fail(f"unexpected character {self.peek()!r}")
        return version


def parse_version(version_string: str, strict: bool = True) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string in MAJOR.MINOR.PATCH[-label[.n]][+label[.n]] form
        strict: When False, non-numeric counters (e.g. "1.0.0-alpha.x") are
            accepted and decoded as 0 instead of failing

    Returns:
        A new Version. A pre-release or metadata label given without a counter
        gets counter 1.

    Raises:
        VersionParseError: If the string does not match the whole grammar

    Examples:
        >>> str(parse_version("1.0.0-alpha.1+build.1"))
        '1.0.0-alpha.1+build.1'
        >>> parse_version("1.0.0-rc").prerelease_count
        1
    """
    if not isinstance(version_string, str):
        raise VersionParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise VersionParseError(version_string, "Version string cannot be empty", position=0)

    try:
        return _Scanner(version_string, strict).scan()
    except VersionParseError as e:
        logger.debug("Rejected version %r: %s", version_string, e.message)
        raise


def is_valid_semver(version_string: str, strict: bool = True) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_semver("1.0.0-beta.2")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(version_string, strict=strict)
    except VersionParseError:
        return False
    return True
