# errors.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional


@dataclass
class BuildError(Exception):
    """
    Structured build error with enough context for:
      - clean CLI output (path(line,column): message)
      - diagnostics collected across worker threads
      - tests asserting on exact positions
    """
    message: str
    path: Optional[str] = None
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}({self.line},{self.column}): {self.message}"
        if self.line:
            return f"{self.line}:{self.column}: {self.message}"
        return self.message

    def with_path(self, path: str) -> "BuildError":
        """Return a copy of this error tagged with the file it came from."""
        return replace(self, path=path)


# ----------------------------------------------------------------------
# Per-file errors (fatal for the file, siblings keep going)
# ----------------------------------------------------------------------

@dataclass
class LexError(BuildError):
    pass


@dataclass
class UnterminatedString(LexError):
    message: str = "Unterminated string"


@dataclass
class UnterminatedComment(LexError):
    message: str = "Unterminated block comment"


@dataclass
class ParseError(BuildError):
    pass


# ----------------------------------------------------------------------
# Aggregation / graph errors
# ----------------------------------------------------------------------

@dataclass
class DuplicateModuleError(BuildError):
    module: str = ""
    first_path: Optional[str] = None


@dataclass
class CycleError(BuildError):
    cycle: List[str] = field(default_factory=list)

    @classmethod
    def from_path(cls, cycle: List[str]) -> "CycleError":
        chain = " -> ".join(cycle)
        return cls(message=f"Dependency cycle detected: {chain}", cycle=list(cycle))
