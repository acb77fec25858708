# SPDX-License-Identifier: MIT
"""Version handling configuration.

Settings are read from the ``[tool.semver-bump]`` table of a pyproject.toml:

    [tool.semver-bump]
    comparison = "release"   # or "metadata"
    strict = true            # false accepts non-numeric counters as 0
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .compare import DEFAULT_POLICY, ComparisonPolicy, VersionLike, compare_versions, sort_versions
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-bump"


class VersionConfigError(Exception):
    """Raised when version configuration is invalid."""

    pass


@dataclass
class VersionConfig:
    """Configuration for parsing and comparing versions.

    Attributes:
        comparison: Comparison policy (metadata-blind RELEASE by default)
        strict: Reject non-numeric pre-release/metadata counters when True
    """

    comparison: ComparisonPolicy = DEFAULT_POLICY
    strict: bool = True

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "VersionConfig":
        """Create a VersionConfig from a pyproject.toml file.

        Raises:
            VersionConfigError: If the file or its settings are invalid
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise VersionConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "VersionConfig":
        """Create a VersionConfig from a parsed pyproject.toml dictionary.

        A missing ``[tool.semver-bump]`` table yields the defaults.
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise VersionConfigError("[tool] must be a table")

        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise VersionConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        unknown = sorted(set(table) - {"comparison", "strict"})
        if unknown:
            raise VersionConfigError(f"Unknown [tool.{TOOL_TABLE}] keys: {', '.join(unknown)}")

        comparison = table.get("comparison", DEFAULT_POLICY.value)
        try:
            policy = ComparisonPolicy(comparison)
        except ValueError:
            choices = ", ".join(p.value for p in ComparisonPolicy)
            raise VersionConfigError(
                f"Invalid comparison policy {comparison!r}, expected one of: {choices}"
            ) from None

        strict = table.get("strict", True)
        if not isinstance(strict, bool):
            raise VersionConfigError(f"strict must be a boolean, got {type(strict).__name__}")

        config = cls(comparison=policy, strict=strict)
        logger.debug("Loaded version config: comparison=%s strict=%s", policy.value, strict)
        return config

    def parse(self, version_string: str) -> Version:
        return parse_version(version_string, strict=self.strict)

    def compare(self, version1: VersionLike, version2: VersionLike) -> int:
        """Compare two versions under this configuration's policy.

        Strings are parsed with this configuration's strictness.
        """
        return compare_versions(self._coerce(version1), self._coerce(version2), self.comparison)

    def sort(self, versions: Iterable[VersionLike], reverse: bool = False) -> list[VersionLike]:
        """Sort versions under this policy; strings come back as parsed Versions."""
        return sort_versions(
            [self._coerce(v) for v in versions], self.comparison, reverse=reverse
        )

    def _coerce(self, version: VersionLike) -> Version:
        return self.parse(version) if isinstance(version, str) else version
