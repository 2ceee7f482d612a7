# cli.py
from __future__ import annotations

import shutil
import sys
from pathlib import Path

import click

from dotbuild import paths, settings
from dotbuild.dag import DependencyGraph
from dotbuild.diagnostics import DiagnosticBag, Severity
from dotbuild.pipeline import BuildResult, resolve
from dotbuild.ui.console import Console, set_console, get_console


def root_option(fn):
    return click.option(
        "--root",
        "roots",
        multiple=True,
        default=tuple(settings.DEFAULT_ROOTS),
        show_default=True,
        help="Directory to scan for .build files (repeatable)",
    )(fn)


def workers_option(fn):
    return click.option(
        "--workers",
        default=settings.DEFAULT_WORKERS,
        type=click.IntRange(min=1),
        help="Number of parallel parse workers",
    )(fn)


def _run(roots, workers) -> tuple[BuildResult, DiagnosticBag]:
    console = get_console()
    diagnostics = DiagnosticBag()
    console.print_debug(f"Scanning roots: {', '.join(roots)}")
    result = resolve(list(roots), diagnostics, max_workers=workers)
    console.print_debug(f"Resolution finished (ok={result.ok})")
    return result, diagnostics


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
def cli(debug):
    """dotbuild: parse .build modules, check the dependency graph, print build order."""
    console = Console(debug=debug)
    set_console(console)


@cli.command()
@root_option
@workers_option
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default=settings.DEFAULT_FORMAT,
    show_default=True,
    help="Output format for the build order",
)
def order(roots, workers, fmt):
    """Print the dependency-first build order."""
    console = get_console()

    try:
        result, diagnostics = _run(roots, workers)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    if fmt == "json":
        modules = {}
        if result.ok and result.graph is not None:
            modules = {name: result.graph.get(name).to_dict() for name in result.graph.names()}
        console.print_json({
            "ok": result.ok,
            "order": list(result.order),
            "modules": modules,
            "diagnostics": [str(d) for d in diagnostics.all()],
        })
    else:
        console.print_diagnostics(diagnostics.all())
        if result.ok:
            console.print_header("BUILD ORDER")
            console.print_order(result.order)

    if not result.ok:
        sys.exit(1)


@cli.command()
@root_option
@workers_option
def check(roots, workers):
    """Parse every .build file and validate the dependency graph."""
    console = get_console()

    try:
        result, diagnostics = _run(roots, workers)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    all_diags = diagnostics.all()
    console.print_diagnostics(all_diags)
    console.print_summary(
        modules=len(result.graph) if result.graph is not None else 0,
        errors=sum(1 for d in all_diags if d.severity is Severity.ERROR),
        warnings=sum(1 for d in all_diags if d.severity is Severity.WARNING),
    )

    if not result.ok:
        sys.exit(1)


@cli.command()
@click.argument("name")
@root_option
@workers_option
def deps(name, roots, workers):
    """Show what a module depends on and what depends on it."""
    console = get_console()

    try:
        result, diagnostics = _run(roots, workers)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    console.print_diagnostics(diagnostics.all())
    if diagnostics.has_errors or result.graph is None:
        sys.exit(1)

    graph = DependencyGraph.from_descriptors(result.graph)
    if name not in graph:
        console.print_error(
            "Unknown module",
            f"No module named '{name}' was found.",
            details=[f"Known modules: {', '.join(result.graph.names()) or '(none)'}"],
        )
        sys.exit(1)

    console.print_dependencies(name, graph.dependencies_of(name), graph.dependents_of(name))


@cli.command()
@click.option("--root", default=".", show_default=True, help="Project root containing build outputs")
def clean(root):
    """Delete the Intermediate/ and Binaries/ output directories."""
    console = get_console()
    diagnostics = DiagnosticBag()
    deleted = 0

    for sub in (paths.INTERMEDIATE_DIR, paths.BINARIES_DIR):
        target = Path(paths.combine(root, sub))
        if not target.is_dir():
            continue
        try:
            shutil.rmtree(target)
            diagnostics.info(f"Deleted {target}")
            deleted += 1
        except OSError as e:
            diagnostics.error(f"Failed to delete {target}: {e}")

    if deleted == 0 and not diagnostics.has_errors:
        diagnostics.info("Nothing to clean")

    console.print_diagnostics(diagnostics.all())
    if diagnostics.has_errors:
        sys.exit(1)


if __name__ == "__main__":
    cli()
