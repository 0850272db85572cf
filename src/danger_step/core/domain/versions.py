"""Review tool version handling."""

from __future__ import annotations

import re

from packaging.version import Version

# Danger releases before this one expect GIT_REPOSITORY_URL without a scheme.
SCHEME_TRIM_BELOW = Version("8.0.5")

# Character set removed from the left of the URL, not a literal prefix.
SCHEME_TRIM_CHARS = "https://"

_SEMVER = re.compile(
    r"^v?(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+))?(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def parse_version(raw: str) -> Version | None:
    """Parse a semantic version, defaulting missing components to zero.

    Accepts ``MAJOR[.MINOR[.PATCH]]`` with an optional leading ``v`` and
    optional ``-prerelease`` / ``+build`` suffixes. RubyGems-style forms such
    as ``8.0.0.beta1`` or ``8.0.4.1`` are rejected.

    Returns the numeric core as a Version, or None when ``raw`` is not a
    semantic version.
    """
    match = _SEMVER.match(raw.strip())
    if match is None:
        return None
    major, minor, patch = match.group("major", "minor", "patch")
    return Version(f"{major}.{minor or 0}.{patch or 0}")


def is_prerelease(raw: str) -> bool:
    match = _SEMVER.match(raw.strip())
    return match is not None and match.group("prerelease") is not None


def should_trim_scheme(raw_version: str) -> bool:
    """True iff ``raw_version`` is a release version lower than 8.0.5.

    Prereleases never satisfy the range, and build metadata is ignored.
    """
    version = parse_version(raw_version)
    if version is None or is_prerelease(raw_version):
        return False
    return version < SCHEME_TRIM_BELOW


def trim_scheme(url: str) -> str:
    # Kept as a character-class left trim for compatibility with older step
    # releases: "http://x" and "ssh://x" lose leading chars from {h,t,p,s,:,/}.
    return url.lstrip(SCHEME_TRIM_CHARS)
