# paths.py
from __future__ import annotations

BUILD_FILE_EXTENSION = ".build"
INTERMEDIATE_DIR = "Intermediate"
BINARIES_DIR = "Binaries"


def normalize(path: str) -> str:
    """Forward slashes only."""
    return path.replace("\\", "/") if path else path


def module_name(build_file: str) -> str:
    """`Engine/Core/Core.build` -> `Core` (suffix match is case-insensitive)."""
    base = normalize(build_file).rsplit("/", 1)[-1]
    if base.lower().endswith(BUILD_FILE_EXTENSION):
        base = base[: -len(BUILD_FILE_EXTENSION)]
    return base


def module_directory(build_file: str) -> str:
    """Directory part of a build file path; "." when there is none."""
    path = normalize(build_file)
    idx = path.rfind("/")
    return path[:idx] if idx > 0 else "."


def combine(base: str, rel: str) -> str:
    if not rel:
        return base
    if not base:
        return rel
    sep = "" if base[-1] in "/\\" else "/"
    return normalize(base + sep + rel)
