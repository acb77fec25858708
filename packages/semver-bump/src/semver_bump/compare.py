# SPDX-License-Identifier: MIT
"""Version comparison.

Precedence, high to low: major, minor, patch, then pre-release. A release
outranks any pre-release of the same triple (1.0.0-rc.1 < 1.0.0); two
pre-release labels compare as plain strings, ties broken by counter.

Two policies are supported:
- RELEASE (default): build metadata never affects ordering or equality.
- METADATA: ties at the pre-release level fall through to build metadata.
  A version without metadata sorts below one with metadata, then labels
  compare as strings and counters numerically.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

from .semver import Version, parse_version


class ComparisonPolicy(str, Enum):
    """Which fields take part in ordering and equality."""

    RELEASE = "release"
    METADATA = "metadata"


VersionLike = Union[str, Version]
PolicyLike = Union[ComparisonPolicy, str]

DEFAULT_POLICY = ComparisonPolicy.RELEASE


def _prerelease_key(v: Version) -> tuple:
    # Presence is checked before the label so that "" never sorts below "alpha".
    if not v.prerelease:
        return (1,)
    return (0, v.prerelease, v.prerelease_count)


def _metadata_key(v: Version) -> tuple:
    if not v.metadata:
        return (0,)
    return (1, v.metadata, v.metadata_count)


def version_key(version: VersionLike, policy: PolicyLike = DEFAULT_POLICY) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object
        policy: Comparison policy the key follows

    Returns:
        A tuple ordered the same way compare_versions orders versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha.1"], key=version_key)
        ['1.0.0-alpha.1', '1.0.0', '2.0.0']
    """
    policy = ComparisonPolicy(policy)
    v = parse_version(version) if isinstance(version, str) else version

    key: tuple = (v.major, v.minor, v.patch, _prerelease_key(v))
    if policy is ComparisonPolicy.METADATA:
        key += (_metadata_key(v),)
    return key


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    policy: PolicyLike = DEFAULT_POLICY,
) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        policy: ComparisonPolicy or its value ("release", "metadata")

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionParseError: If either version string is invalid
        ValueError: If the policy is unknown

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0+build.1")
        0
        >>> compare_versions("1.0.0", "1.0.0+build.1", policy="metadata")
        -1
    """
    key1 = version_key(version1, policy)
    key2 = version_key(version2, policy)

    # Tuple comparison short-circuits on the first differing field.
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def less_than(a: VersionLike, b: VersionLike, policy: PolicyLike = DEFAULT_POLICY) -> bool:
    """Return True if ``a`` orders strictly before ``b``."""
    return compare_versions(a, b, policy) < 0


def equals(a: VersionLike, b: VersionLike, policy: PolicyLike = DEFAULT_POLICY) -> bool:
    return compare_versions(a, b, policy) == 0


def greater_than(a: VersionLike, b: VersionLike, policy: PolicyLike = DEFAULT_POLICY) -> bool:
    """Return True if ``a`` is neither less than nor equal to ``b``."""
    return not less_than(a, b, policy) and not equals(a, b, policy)


def sort_versions(
    versions: Iterable[VersionLike],
    policy: PolicyLike = DEFAULT_POLICY,
    reverse: bool = False,
) -> list[VersionLike]:
    """Sort versions (strings or Version objects), preserving their type."""
    policy = ComparisonPolicy(policy)
    return sorted(versions, key=lambda v: version_key(v, policy), reverse=reverse)


def max_version(versions: Iterable[VersionLike], policy: PolicyLike = DEFAULT_POLICY) -> VersionLike:
    """Return the highest version.

    Raises:
        ValueError: If no versions are given
    """
    policy = ComparisonPolicy(policy)
    candidates = list(versions)
    if not candidates:
        raise ValueError("max_version() requires at least one version")
    return max(candidates, key=lambda v: version_key(v, policy))
