from __future__ import annotations

import sys

from layerdeps.core.utils.subprocess import format_argv, run_inherited


def test_format_argv_quotes():
    assert format_argv(["bun", "add", "a b@1.0.0"]) == "bun add 'a b@1.0.0'"


def test_run_inherited_returns_exit_code(tmp_path):
    code = run_inherited([sys.executable, "-c", "import sys; sys.exit(4)"], tmp_path)

    assert code == 4
