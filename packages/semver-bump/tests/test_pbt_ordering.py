# SPDX-License-Identifier: MIT
"""Property-based tests for version rendering and ordering.

Property 1: Canonical round-trip
Property 2: Strict ordering
Property 3: Comparison inverses
Property 4: Bump monotonicity

These tests verify that:
- Canonical strings survive parse then format unchanged
- less_than is irreflexive and antisymmetric, and agrees with sorting keys
- greater_than is exactly "neither less than nor equal"
- Core bumps always move a version forward
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_bump import (
    ComparisonPolicy,
    Version,
    compare_versions,
    equals,
    greater_than,
    less_than,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=500)
counters = st.integers(min_value=0, max_value=50)
labels = st.one_of(
    st.sampled_from(["alpha", "beta", "rc", "build", "ci", "Beta"]),
    st.from_regex(r"[0-9A-Za-z-]{1,8}", fullmatch=True),
)
policies = st.sampled_from(list(ComparisonPolicy))


@st.composite
def versions(draw):
    """Generate a Version with optional pre-release and metadata."""
    version = Version(major=draw(numbers), minor=draw(numbers), patch=draw(numbers))
    if draw(st.booleans()):
        version.prerelease = draw(labels)
        version.prerelease_count = draw(counters)
    if draw(st.booleans()):
        version.metadata = draw(labels)
        version.metadata_count = draw(counters)
    return version


@st.composite
def small_versions(draw):
    """Generate versions from a small space so that ties are frequent."""
    version = Version(
        major=draw(st.integers(0, 1)),
        minor=draw(st.integers(0, 1)),
        patch=draw(st.integers(0, 1)),
    )
    if draw(st.booleans()):
        version.set_prerelease(draw(st.sampled_from(["alpha", "beta"])))
        version.prerelease_count = draw(st.integers(1, 2))
    if draw(st.booleans()):
        version.set_metadata(draw(st.sampled_from(["build", "ci"])))
        version.metadata_count = draw(st.integers(1, 2))
    return version


# =============================================================================
# Property 1: Canonical round-trip
# =============================================================================


class TestRoundTrip:
    """For any version, parsing its canonical form reproduces it exactly."""

    @given(version=versions())
    @settings(max_examples=200)
    def test_format_parse_format(self, version):
        text = version.format()
        parsed = parse_version(text)
        assert parsed.format() == text
        assert equals(parsed, version, ComparisonPolicy.METADATA)


# =============================================================================
# Property 2: Strict ordering
# =============================================================================


class TestStrictOrdering:
    """less_than is a strict order consistent with version_key."""

    @given(version=versions(), policy=policies)
    def test_irreflexive(self, version, policy):
        assert less_than(version, version, policy) is False
        assert greater_than(version, version, policy) is False

    @given(a=small_versions(), b=small_versions(), policy=policies)
    def test_antisymmetric(self, a, b, policy):
        assert not (less_than(a, b, policy) and less_than(b, a, policy))

    @given(a=small_versions(), b=small_versions(), c=small_versions(), policy=policies)
    def test_transitive(self, a, b, c, policy):
        if less_than(a, b, policy) and less_than(b, c, policy):
            assert less_than(a, c, policy)

    @given(a=versions(), b=versions(), policy=policies)
    def test_agrees_with_key(self, a, b, policy):
        assert less_than(a, b, policy) == (version_key(a, policy) < version_key(b, policy))

    @given(a=small_versions(), b=small_versions())
    def test_release_policy_ignores_metadata(self, a, b):
        a_bare = a.copy()
        a_bare.metadata = None
        assert compare_versions(a, b) == compare_versions(a_bare, b)


# =============================================================================
# Property 3: Comparison inverses
# =============================================================================


class TestComparisonInverses:
    """Exactly one of less_than, equals, greater_than holds for any pair."""

    @given(a=small_versions(), b=small_versions(), policy=policies)
    def test_trichotomy(self, a, b, policy):
        outcomes = [less_than(a, b, policy), equals(a, b, policy), greater_than(a, b, policy)]
        assert outcomes.count(True) == 1

    @given(a=small_versions(), b=small_versions(), policy=policies)
    def test_greater_is_swapped_less(self, a, b, policy):
        assert greater_than(a, b, policy) == less_than(b, a, policy)


# =============================================================================
# Property 4: Bump monotonicity
# =============================================================================


class TestBumpMonotonicity:
    """Bumping major, minor, or patch always yields a greater version."""

    @given(version=versions(), kind=st.sampled_from(["major", "minor", "patch"]))
    def test_core_bump_increases(self, version, kind):
        bumped = version.copy().bump(kind)
        assert greater_than(bumped.base_version, version.base_version)

    @given(version=versions())
    def test_prerelease_bump_keeps_label_and_counts_up(self, version):
        bumped = version.copy().bump_prerelease()
        if version.prerelease:
            assert bumped.prerelease == version.prerelease
            assert bumped.prerelease_count == version.prerelease_count + 1
        else:
            assert bumped.prerelease == "alpha"
            assert bumped.prerelease_count == 2
