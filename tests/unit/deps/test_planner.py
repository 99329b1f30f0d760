"""Tests for turning decisions into installer arguments."""
from __future__ import annotations

from layerdeps.core.deps import InstallDecision, InstallPlan, Package, Scope, plan
from layerdeps.core.deps.planner import install_spec


def _decision(name, version, can_install=True):
    return InstallDecision(can_install=can_install, package=Package(Scope.LAYER, name, version))


def test_strips_single_leading_caret():
    assert install_spec(_decision("zod", "^3.22.0")) == "zod@3.22.0"


def test_other_operators_are_kept():
    assert install_spec(_decision("a", "~1.2.0")) == "a@~1.2.0"
    assert install_spec(_decision("b", ">=2.0.0")) == "b@>=2.0.0"
    assert install_spec(_decision("c", "1.0.0")) == "c@1.0.0"


def test_only_first_caret_is_removed():
    assert install_spec(_decision("odd", "^^1.0.0")) == "odd@^1.0.0"


def test_scoped_package_names():
    assert install_spec(_decision("@nuxt/kit", "^3.10.0")) == "@nuxt/kit@3.10.0"


def test_plan_keeps_order_and_filters_non_installable():
    decisions = [
        _decision("a", "^1.0.0"),
        _decision("skip", "^1.0.0", can_install=False),
        _decision("b", "2.0.0"),
    ]

    result = plan(decisions)

    assert result.args == ["a@1.0.0", "b@2.0.0"]
    assert [d.package.name for d in result.decisions] == ["a", "b"]
    assert len(result) == 2


def test_empty_decisions_is_noop():
    result = plan([])

    assert result.is_noop
    assert result == InstallPlan()
    assert list(result) == []
