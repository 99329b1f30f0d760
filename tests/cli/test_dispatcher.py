"""Tests for command discovery and global flags."""
from __future__ import annotations

import logging

import pytest

from layerdeps import __version__
from layerdeps.cli._dispatcher import build_parser, discover_commands, discover_domains, discover_root_commands, main


def test_discovers_root_commands():
    assert {"install", "check"} <= set(discover_root_commands())


def test_discovers_domains():
    domains = discover_domains()

    assert {"layers", "config"} <= set(domains)
    assert "commands" not in domains
    assert "list" in discover_commands("layers")
    assert "show" in discover_commands("config")


def test_command_metadata():
    info = discover_root_commands()["install"]

    assert info["summary"] == "Install dependencies declared by managed layers"
    assert callable(info["main"])
    assert callable(info["register_args"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: layerdeps" in capsys.readouterr().out


def test_domain_without_command_prints_domain_help(capsys):
    assert main(["layers"]) == 0
    assert "list" in capsys.readouterr().out


def test_log_file_flag(isolated_project_env, tmp_path, capsys):
    log_file = tmp_path / "run.log"

    assert main(["--log-level", "INFO", "--log-file", str(log_file), "check"]) == 0
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "root project declares 0 dependencies" in log_file.read_text(encoding="utf-8")


def test_log_level_from_config(isolated_project_env, capsys, monkeypatch):
    monkeypatch.setenv("LAYERDEPS_logging__level", "debug")

    assert main(["check"]) == 0

    assert logging.getLogger().level == logging.DEBUG
