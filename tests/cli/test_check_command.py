"""CLI tests for `layerdeps check`."""
from __future__ import annotations

import json

from helpers.project import make_layer, write_manifest
from layerdeps.cli._dispatcher import main
from layerdeps.core.deps import report


def test_check_text(isolated_project_env, capsys):
    layer = make_layer(isolated_project_env, "base", {"zod": "^3.22.0"})

    assert main(["check", "--layer", str(layer)]) == 0

    out = capsys.readouterr().out
    assert report.HEADER in out
    assert "zod@^3.22.0" in out


def test_check_json(isolated_project_env, capsys):
    project = isolated_project_env
    write_manifest(project, {"lodash": "^4.17.0"})
    layer = make_layer(project, "base", {"lodash": "^5.0.0", "zod": "^3.22.0"})

    assert main(["check", "--json", "--layer", str(layer)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "pending"
    assert data["plan"] == ["lodash@5.0.0", "zod@3.22.0"]
    assert [d["status"] for d in data["decisions"]] == ["MAJOR", None]
    assert [d["new"] for d in data["decisions"]] == [False, True]


def test_check_exit_code(isolated_project_env, capsys):
    layer = make_layer(isolated_project_env, "base", {"zod": "^3.22.0"})

    assert main(["check", "--exit-code", "--layer", str(layer)]) == 1


def test_check_noop_exit_code(isolated_project_env, capsys):
    assert main(["check", "--exit-code", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "noop"
    assert data["plan"] == []


def test_check_json_error(isolated_project_env, capsys):
    layer = make_layer(isolated_project_env, "base")
    (layer / "package.json").write_text("[]", encoding="utf-8")

    assert main(["check", "--json", "--layer", str(layer)]) == 1

    err = json.loads(capsys.readouterr().err)
    assert err["error"] == "check_error"
    assert err["code"] == "ManifestParseError"
    assert err["context"]["path"] == str(layer.resolve() / "package.json")


def test_missing_project_root_env(isolated_project_env, tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("LAYERDEPS_PROJECT_ROOT", str(tmp_path / "gone"))

    assert main(["check"]) == 1
    assert "points at missing path" in capsys.readouterr().err
