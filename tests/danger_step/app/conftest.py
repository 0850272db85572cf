"""Fake danger / gem / bundle executables for end-to-end CLI runs."""
import stat
import sys
from pathlib import Path

import pytest


def _write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


class FakeToolchain:
    def __init__(self, root: Path):
        self.root = root
        self.record = root / "bundle_calls.txt"
        self.danger = _write_script(
            root / "danger",
            'echo "${FAKE_DANGER_VERSION:-9.4.3}"\n',
        )
        self.gem = _write_script(
            root / "gem",
            'if [ "$1" = "list" ]; then echo "bundler (${FAKE_BUNDLER_VERSION:-2.4.10})"; fi\n',
        )
        self.bundle = _write_script(
            root / "bundle",
            f'echo "args: $*" >> "{self.record}"\n'
            f'echo "GIT_REPOSITORY_URL=$GIT_REPOSITORY_URL" >> "{self.record}"\n'
            f'echo "DANGER_GITHUB_API_TOKEN=$DANGER_GITHUB_API_TOKEN" >> "{self.record}"\n'
            f'echo "DANGER_GITLAB_HOST=$DANGER_GITLAB_HOST" >> "{self.record}"\n'
            'if [ "$1" = "$FAKE_BUNDLE_FAIL_ON" ]; then exit 7; fi\n',
        )
        self.lockfile = root / "Gemfile.lock"

    def calls(self) -> list[str]:
        if not self.record.exists():
            return []
        return self.record.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def toolchain(tmp_path, clean_env):
    if sys.platform == "win32":
        pytest.skip("fake toolchain uses POSIX shell scripts")

    tools = FakeToolchain(tmp_path)
    clean_env.setenv("DANGER_STEP_DANGER_BIN", str(tools.danger))
    clean_env.setenv("DANGER_STEP_GEM_BIN", str(tools.gem))
    clean_env.setenv("DANGER_STEP_BUNDLE_BIN", str(tools.bundle))
    clean_env.setenv("DANGER_STEP_GEMFILE_LOCK", str(tools.lockfile))
    return tools
