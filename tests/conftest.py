import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'layerdeps' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.cache_utils import reset_layerdeps_caches


@pytest.fixture(autouse=True)
def _reset_layerdeps_state(monkeypatch):
    """Fresh caches, logging and LAYERDEPS_* environment for every test.

    Developer machines may export LAYERDEPS_* overrides; tests must not see them.
    """
    for key in list(os.environ):
        if key.startswith("LAYERDEPS_"):
            monkeypatch.delenv(key, raising=False)
    reset_layerdeps_caches()
    yield
    reset_layerdeps_caches()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """
    Isolated host project for tests.

    The project root is ``tmp_path/project`` (with an empty root manifest) and
    the user config directory is ``tmp_path/home/.layerdeps`` so a developer's
    real ``~/.layerdeps`` never leaks into a test.
    """
    project = tmp_path / "project"
    project.mkdir()
    (project / "package.json").write_text('{"dependencies": {}}\n', encoding="utf-8")

    user_dir = tmp_path / "home" / ".layerdeps"
    user_dir.mkdir(parents=True)

    monkeypatch.setenv("LAYERDEPS_PROJECT_ROOT", str(project))
    monkeypatch.setenv("LAYERDEPS_paths__user_config_dir", str(user_dir))
    monkeypatch.chdir(project)
    reset_layerdeps_caches()
    return project
