# diagnostics.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import BuildError


class Severity(Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    path: Optional[str] = None
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.path is None:
            return f"[{self.severity.value}] {self.message}"
        if not self.line:
            return f"{self.path}: [{self.severity.value}] {self.message}"
        return f"{self.path}({self.line},{self.column}): [{self.severity.value}] {self.message}"


class DiagnosticBag:
    """
    Append-only diagnostic collector shared by loader worker threads.

    Order across threads is whatever order the appends happened in.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._items: List[Diagnostic] = []

    def add(self, diag: Diagnostic) -> None:
        with self._lock:
            self._items.append(diag)

    def info(self, message: str) -> None:
        self.add(Diagnostic(Severity.INFO, message))

    def warning(self, message: str, path: Optional[str] = None, line: int = 0, column: int = 0) -> None:
        self.add(Diagnostic(Severity.WARNING, message, path, line, column))

    def error(self, message: str, path: Optional[str] = None, line: int = 0, column: int = 0) -> None:
        self.add(Diagnostic(Severity.ERROR, message, path, line, column))

    def report(self, exc: BuildError) -> None:
        """Record a BuildError as an ERROR diagnostic, keeping its position."""
        self.error(exc.message, exc.path, exc.line, exc.column)

    @property
    def has_errors(self) -> bool:
        with self._lock:
            return any(d.severity is Severity.ERROR for d in self._items)

    def all(self) -> List[Diagnostic]:
        with self._lock:
            return list(self._items)

    def errors(self) -> List[Diagnostic]:
        return [d for d in self.all() if d.severity is Severity.ERROR]

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
