from __future__ import annotations
import os

DEFAULT_ROOTS = [r for r in os.environ.get("DOTBUILD_ROOTS", ".").split(os.pathsep) if r]
_workers = os.environ.get("DOTBUILD_WORKERS")
DEFAULT_WORKERS = int(_workers) if _workers else None
DEFAULT_FORMAT = os.environ.get("DOTBUILD_FORMAT", "text")
