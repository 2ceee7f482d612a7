# loader.py
from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from . import paths
from .diagnostics import DiagnosticBag
from .errors import BuildError, DuplicateModuleError
from .model import BuildGraph, ModuleDescriptor
from .parsing import parse_build_file


# ----------------------------------------------------------------------
# Discovery
# ----------------------------------------------------------------------

def find_build_files(roots: Sequence[str | Path], diagnostics: DiagnosticBag) -> List[str]:
    """
    Recursively find *.build files under each root.

    Files in a directory come before its subdirectories; both are sorted
    so the same tree always yields the same list.
    """
    results: List[str] = []
    for root in roots:
        root_p = Path(root)
        if not root_p.is_dir():
            diagnostics.warning(f"Directory not found: {root}")
            continue
        _scan_directory(root_p, results, diagnostics)
    return results


def _scan_directory(directory: Path, results: List[str], diagnostics: DiagnosticBag) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except PermissionError:
        diagnostics.warning(f"Access denied: {directory}")
        return
    except OSError as e:
        diagnostics.warning(f"IO error scanning {directory}: {e}")
        return

    subdirs: List[Path] = []
    for entry in entries:
        if entry.is_dir():
            subdirs.append(entry)
        elif entry.is_file() and entry.name.lower().endswith(paths.BUILD_FILE_EXTENSION):
            results.append(paths.normalize(str(entry)))

    for sub in subdirs:
        _scan_directory(sub, results, diagnostics)


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------

def load_module(build_file: str, diagnostics: DiagnosticBag) -> Optional[ModuleDescriptor]:
    """
    Read and parse one .build file.

    Failures are recorded on `diagnostics` (with file position when there is
    one) and None is returned; nothing is raised for bad input.
    """
    name = paths.module_name(build_file)
    directory = paths.module_directory(build_file)

    try:
        source = Path(build_file).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        diagnostics.error(f"Failed to read {build_file}: {e}")
        return None

    try:
        return parse_build_file(name, directory, source)
    except BuildError as e:
        diagnostics.report(e.with_path(build_file))
        return None


def load_all(
    build_files: Iterable[str],
    diagnostics: DiagnosticBag,
    max_workers: int | None = None,
) -> BuildGraph:
    """
    Parse files in parallel, then merge on the calling thread.

    Fan-out: one task per file, each returning a descriptor or None.
    Fan-in: results are merged in input order by this thread only, so the
    name -> descriptor map has a single writer. A second file producing an
    already-used name is reported and dropped; the first one wins.
    """
    files = list(build_files)
    if max_workers is None:
        c = os.cpu_count() or 2
        max_workers = max(1, c - 1)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(load_module, f, diagnostics) for f in files]
        loaded = [fut.result() for fut in futures]

    modules: Dict[str, ModuleDescriptor] = {}
    origin: Dict[str, str] = {}
    for build_file, module in zip(files, loaded):
        if module is None:
            continue
        if module.name in modules:
            diagnostics.report(
                DuplicateModuleError(
                    message=f"Duplicate module: {module.name} (first defined in {origin[module.name]})",
                    path=build_file,
                    module=module.name,
                    first_path=origin[module.name],
                )
            )
            continue
        modules[module.name] = module
        origin[module.name] = build_file

    return BuildGraph(modules)
