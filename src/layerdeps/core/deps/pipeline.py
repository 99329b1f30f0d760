"""End-to-end reconciliation run.

    layer enumeration → manifest reads (root, then each managed layer)
      → collection → reconciliation → planning → one installer call

``build_plan`` stops before any side effect; ``run`` adds reporting and the
installer invocation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from layerdeps.core.config.domains import InstallerConfig, LayersConfig, ManifestConfig, ReconcileConfig
from layerdeps.core.layers import LayerDir, enumerate_layers, manifest_layer_dirs
from layerdeps.core.utils.subprocess import Runner, run_inherited

from . import report
from .collector import collect_layers, collect_root
from .installer import install
from .models import InstallDecision, InstallPlan, LayerDependencySet, ProjectDependencySet
from .planner import plan as make_plan
from .reconciler import PER_FIELD, reconcile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSettings:
    manifest_filename: str = "package.json"
    marker: str = ".c12"
    comparison: str = PER_FIELD
    command: str = "bun"
    subcommand: str = "add"
    extra_args: Tuple[str, ...] = ("--ignore-scripts",)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any], **overrides: Any) -> "RunSettings":
        """Build settings from a merged config mapping; ``None`` overrides are ignored."""
        installer = InstallerConfig(config=cfg)
        values = {
            "manifest_filename": ManifestConfig(config=cfg).filename,
            "marker": LayersConfig(config=cfg).marker,
            "comparison": ReconcileConfig(config=cfg).comparison,
            "command": installer.command,
            "subcommand": installer.subcommand,
            "extra_args": installer.extra_args,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass(frozen=True)
class PlanResult:
    root_dir: Path
    layers: Tuple[LayerDir, ...]
    root: ProjectDependencySet
    layer_dependencies: LayerDependencySet
    decisions: Tuple[InstallDecision, ...]
    plan: InstallPlan


def build_plan(
    root_dir: Path,
    layer_dirs: Iterable[Path],
    *,
    settings: Optional[RunSettings] = None,
) -> PlanResult:
    """Compute the install plan without side effects beyond manifest reads."""
    settings = settings or RunSettings()
    root_dir = Path(root_dir).resolve()

    layers = enumerate_layers(layer_dirs, marker=settings.marker)
    scanned = manifest_layer_dirs(layers)
    logger.info("%d layers enumerated, %d managed", len(layers), len(scanned))

    root = collect_root(root_dir, filename=settings.manifest_filename)
    layer_dependencies = collect_layers(scanned, filename=settings.manifest_filename)
    decisions = tuple(reconcile(root, layer_dependencies, comparison=settings.comparison))
    plan = make_plan(decisions)

    return PlanResult(
        root_dir=root_dir,
        layers=layers,
        root=root,
        layer_dependencies=layer_dependencies,
        decisions=decisions,
        plan=plan,
    )


def run(
    root_dir: Path,
    layer_dirs: Iterable[Path],
    *,
    settings: Optional[RunSettings] = None,
    dry_run: bool = False,
    emit: Callable[[str], None] = print,
    runner: Runner = run_inherited,
) -> PlanResult:
    """Reconcile and install.

    The installer is never called for an empty plan or a dry run. Errors from
    any stage propagate unchanged; nothing is retried or rolled back.
    """
    settings = settings or RunSettings()
    result = build_plan(root_dir, layer_dirs, settings=settings)

    if result.plan.is_noop:
        emit(report.render_noop())
        return result

    emit(report.render_summary(result.decisions))
    if dry_run:
        logger.info("dry run: skipping installer")
        return result

    emit(report.INSTALLING_MESSAGE)
    install(
        result.plan,
        command=settings.command,
        subcommand=settings.subcommand,
        extra_args=settings.extra_args,
        cwd=result.root_dir,
        runner=runner,
    )
    emit(report.SUCCESS_MESSAGE)
    return result


def plan_to_dict(result: PlanResult) -> dict:
    """JSON-friendly view of a plan result (used by ``check --json``)."""
    decisions: List[dict] = []
    for d in result.decisions:
        decisions.append(
            {
                "name": d.package.name,
                "version": d.package.version,
                "scope": d.package.scope.value,
                "source": str(d.package.source) if d.package.source else None,
                "can_install": d.can_install,
                "new": d.is_new,
                "status": d.status.value if d.status else None,
                "root_version": d.root_version,
            }
        )
    return {
        "root": str(result.root_dir),
        "layers": [{"path": str(l.path), "managed": l.managed} for l in result.layers],
        "decisions": decisions,
        "plan": result.plan.args,
    }


__all__ = ["PlanResult", "RunSettings", "build_plan", "plan_to_dict", "run"]
