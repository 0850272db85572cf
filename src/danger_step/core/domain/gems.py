"""RubyGems / Bundler text formats."""

from __future__ import annotations

import re

from .exceptions import InstallError
from .models import GemVersion

_BUNDLED_WITH = re.compile(r"^BUNDLED WITH[ \t\r]*$", re.MULTILINE)

# Gem::Version::VERSION_PATTERN
_GEM_VERSION = re.compile(r"^[0-9]+(?:\.[0-9a-zA-Z]+)*(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$")


def parse_bundler_version(lockfile_content: str) -> GemVersion:
    """Extract the Bundler version from a Gemfile.lock ``BUNDLED WITH`` section.

    Returns an unconstrained GemVersion when the section is absent or empty.

    Raises:
        InstallError: the section holds something that is not a gem version
    """
    match = _BUNDLED_WITH.search(lockfile_content)
    if match is None:
        return GemVersion()

    for line in lockfile_content[match.end():].splitlines():
        version = line.strip()
        if not version:
            continue
        if _GEM_VERSION.match(version) is None:
            raise InstallError(
                f"Could not determine required bundler version, error: invalid version {version!r} in BUNDLED WITH"
            )
        return GemVersion(version=version, found=True)
    return GemVersion()


def find_gem_in_list(gem_list: str, gem: str, version: str = "") -> bool:
    """Check ``gem list`` output for a gem, optionally at an exact version.

    Lines look like ``bundler (2.4.10, default: 2.3.26)``.
    """
    pattern = re.compile(rf"^{re.escape(gem)} \((.+)\)\s*$")

    for line in gem_list.splitlines():
        match = pattern.match(line.strip())
        if match is None:
            continue
        if not version:
            return True

        for entry in match.group(1).split(","):
            entry = entry.strip()
            if entry.startswith("default:"):
                entry = entry[len("default:"):].strip()
            # platform suffixes: "1.15.4 x86_64-linux"
            if entry.split(" ")[0] == version:
                return True
    return False


def install_gem_args(gem_bin: str, gem: str, version: GemVersion) -> list[str]:
    args = [gem_bin, "install", gem, "--force", "--no-document"]
    if version.found:
        args += ["-v", version.version]
    return args
