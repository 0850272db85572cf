import sys
from pathlib import Path
import pytest
from helpers import mark_by_dir


INPUT_VARS = (
    "repository_url",
    "additional_options",
    "github_api_token",
    "github_host",
    "github_api_base_url",
    "gitlab_api_token",
    "gitlab_host",
    "gitlab_api_base_url",
)


@pytest.fixture(autouse=True)
def _ensure_src_on_syspath():
    # Add project src/ to sys.path for src-layout imports
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove step inputs and DANGER_STEP_* settings inherited from the CI host."""
    import os

    for name in INPUT_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.upper(), raising=False)
    for name in list(os.environ):
        if name.upper().startswith("DANGER_STEP_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


TESTS = Path(__file__).parent

def pytest_collection_modifyitems(config, items):
    # Mark tests by directory structure
    mark_by_dir(items, TESTS / "danger_step" / "core", pytest.mark.unit)
    mark_by_dir(items, TESTS / "danger_step" / "infra", pytest.mark.integration)
    mark_by_dir(items, TESTS / "danger_step" / "app", pytest.mark.e2e)
