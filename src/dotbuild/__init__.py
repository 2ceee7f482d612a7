from .parsing import parse_build_file
from .dag import DependencyGraph, CycleDetector, TopologicalSorter, compute_build_order
from .diagnostics import Diagnostic, DiagnosticBag, Severity
from .errors import BuildError, LexError, ParseError, UnterminatedString, UnterminatedComment, DuplicateModuleError, CycleError
from .loader import find_build_files, load_all, load_module
from .model import ModuleType, ModuleDescriptor, BuildGraph
from .pipeline import resolve, BuildResult

__all__ = [
    "parse_build_file",
    "DependencyGraph", "CycleDetector", "TopologicalSorter", "compute_build_order",
    "Diagnostic", "DiagnosticBag", "Severity",
    "BuildError", "LexError", "ParseError", "UnterminatedString", "UnterminatedComment",
    "DuplicateModuleError", "CycleError",
    "find_build_files", "load_all", "load_module",
    "ModuleType", "ModuleDescriptor", "BuildGraph",
    "resolve", "BuildResult",
]
