# SPDX-License-Identifier: MIT
"""Version parsing, bumping, and comparison.

This package provides a mutable version type with a single pre-release
label+counter and a single build metadata label+counter, bump rules for each
component, canonical rendering, and release-precedence ordering.

Example:
    >>> from semver_bump import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.0.0")
    >>> str(version.bump_prerelease())
    '1.0.0-alpha.2'
    >>>
    >>> compare_versions("1.0.0-alpha.1", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    DEFAULT_METADATA_LABEL,
    DEFAULT_PRERELEASE_LABEL,
    BumpKind,
    Version,
    VersionParseError,
    is_valid_semver,
    parse_version,
)
from .compare import (
    DEFAULT_POLICY,
    ComparisonPolicy,
    compare_versions,
    equals,
    greater_than,
    less_than,
    max_version,
    sort_versions,
    version_key,
)
from .config import (
    VersionConfig,
    VersionConfigError,
)

__all__ = [
    # Version parsing and mutation
    "Version",
    "BumpKind",
    "parse_version",
    "is_valid_semver",
    "VersionParseError",
    "DEFAULT_PRERELEASE_LABEL",
    "DEFAULT_METADATA_LABEL",
    # Version comparison
    "ComparisonPolicy",
    "DEFAULT_POLICY",
    "compare_versions",
    "less_than",
    "greater_than",
    "equals",
    "version_key",
    "sort_versions",
    "max_version",
    # Configuration
    "VersionConfig",
    "VersionConfigError",
]
