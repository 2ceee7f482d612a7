# pipeline.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .dag import DependencyGraph, compute_build_order, missing_dependencies
from .diagnostics import DiagnosticBag
from .errors import CycleError
from .loader import find_build_files, load_all
from .model import BuildGraph


@dataclass(frozen=True)
class BuildResult:
    """
    Outcome of one resolution run.

    `order` is empty whenever `ok` is False: a run with a file error or a
    cycle never hands a build order to the planner.
    """
    graph: Optional[BuildGraph] = None
    order: Tuple[str, ...] = field(default_factory=tuple)
    ok: bool = False


def resolve(
    roots: Sequence[str | Path],
    diagnostics: DiagnosticBag,
    max_workers: int | None = None,
) -> BuildResult:
    """
    Scan -> load (parallel) -> missing-dependency warnings -> cycle gate -> order.

    Everything worth telling the user ends up on `diagnostics`.
    """
    build_files = find_build_files(roots, diagnostics)
    if not build_files:
        diagnostics.error("No .build files found")
        return BuildResult()

    diagnostics.info(f"Found {len(build_files)} build files")
    graph = load_all(build_files, diagnostics, max_workers=max_workers)
    if diagnostics.has_errors:
        return BuildResult(graph=graph)

    diagnostics.info(f"Loaded {len(graph)} modules")

    deps = DependencyGraph.from_descriptors(graph)
    for missing, users in missing_dependencies(graph, deps).items():
        for user in users:
            diagnostics.warning(f"Module '{user}' depends on unknown module '{missing}'")

    try:
        order = compute_build_order(graph)
    except CycleError as e:
        diagnostics.report(e)
        return BuildResult(graph=graph)

    diagnostics.info(f"Resolved build order for {len(order)} modules")
    return BuildResult(graph=graph, order=tuple(order), ok=True)
