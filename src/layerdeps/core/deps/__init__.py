"""Dependency reconciliation between a root project and its layers.

Stages (each a plain function over immutable values):
- collector:  root + layer manifests → ProjectDependencySet / LayerDependencySet
- reconciler: sets → InstallDecision list
- planner:    decisions → InstallPlan
- installer:  InstallPlan → one package-manager process
"""
from .collector import collect_layers, collect_root
from .installer import install
from .manifest import read_manifest
from .models import (
    InstallDecision,
    InstallPlan,
    LayerDependencySet,
    Package,
    ProjectDependencySet,
    Scope,
    VersionStatus,
)
from .pipeline import PlanResult, RunSettings, build_plan, run
from .planner import plan
from .reconciler import PER_FIELD, PRECEDENCE, reconcile

__all__ = [
    "InstallDecision",
    "InstallPlan",
    "LayerDependencySet",
    "PER_FIELD",
    "PRECEDENCE",
    "Package",
    "PlanResult",
    "ProjectDependencySet",
    "RunSettings",
    "Scope",
    "VersionStatus",
    "build_plan",
    "collect_layers",
    "collect_root",
    "install",
    "plan",
    "read_manifest",
    "reconcile",
    "run",
]
