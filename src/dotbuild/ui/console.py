"""Console output formatting utilities for dotbuild."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, List, Optional, Sequence

from ..diagnostics import Diagnostic, Severity


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_header(self, title: str) -> None:
        """Print a section header."""
        print(f"\n{title}")
        print("-" * len(title))

    def print_diagnostics(self, diagnostics: Sequence[Diagnostic]) -> None:
        """Errors go to stderr, everything else to stdout."""
        for diag in diagnostics:
            stream = sys.stderr if diag.severity is Severity.ERROR else sys.stdout
            print(str(diag), file=stream)

    def print_order(self, order: Sequence[str]) -> None:
        for name in order:
            print(name)

    def print_json(self, payload: Dict[str, Any]) -> None:
        print(json.dumps(payload, indent=2))

    def print_dependencies(self, name: str, deps: List[str], dependents: List[str]) -> None:
        self.print_header(name)
        print(f"Depends on: {', '.join(deps) if deps else '(none)'}")
        print(f"Needed by: {', '.join(dependents) if dependents else '(none)'}")

    def print_summary(self, modules: int, errors: int, warnings: int) -> None:
        status = "FAILED" if errors else "OK"
        print(f"\n{status}: {modules} module(s), {errors} error(s), {warnings} warning(s)")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
