# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


class ModuleType(Enum):
    EXECUTABLE = "Executable"
    STATIC_LIBRARY = "StaticLibrary"
    SHARED_LIBRARY = "SharedLibrary"

    @classmethod
    def parse(cls, text: Optional[str]) -> "ModuleType":
        """Case-insensitive; anything unrecognized (or missing) is a static library."""
        value = (text or "").lower()
        if value == "executable":
            return cls.EXECUTABLE
        if value in ("shared_library", "sharedlibrary", "shared"):
            return cls.SHARED_LIBRARY
        return cls.STATIC_LIBRARY

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ModuleDescriptor:
    """
    One buildable module, normalized from a .build file.

    `name` and `directory` come from the file path, never from the file contents.
    Paths and patterns are stored verbatim; nothing here touches the filesystem.
    """
    name: str
    directory: str
    type: ModuleType = ModuleType.STATIC_LIBRARY
    sources: Tuple[str, ...] = ()
    public_includes: Tuple[str, ...] = ()
    private_includes: Tuple[str, ...] = ()
    defines: Tuple[str, ...] = ()
    dependencies: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "directory": self.directory,
            "type": self.type.value,
            "sources": list(self.sources),
            "public_includes": list(self.public_includes),
            "private_includes": list(self.private_includes),
            "defines": list(self.defines),
            "dependencies": list(self.dependencies),
        }


@dataclass(frozen=True)
class BuildGraph:
    """
    Read-only name -> ModuleDescriptor mapping for one build invocation.

    Duplicate names are rejected by the loader before a BuildGraph exists.
    """
    _modules: Mapping[str, ModuleDescriptor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_modules", MappingProxyType(dict(self._modules)))

    @classmethod
    def from_modules(cls, modules: List[ModuleDescriptor]) -> "BuildGraph":
        by_name: Dict[str, ModuleDescriptor] = {}
        for m in modules:
            if m.name in by_name:
                raise ValueError(f"Duplicate module name: {m.name}")
            by_name[m.name] = m
        return cls(by_name)

    @property
    def modules(self) -> Mapping[str, ModuleDescriptor]:
        return self._modules

    def get(self, name: str) -> Optional[ModuleDescriptor]:
        return self._modules.get(name)

    def names(self) -> List[str]:
        return list(self._modules)

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def __iter__(self) -> Iterator[ModuleDescriptor]:
        return iter(self._modules.values())

    def __len__(self) -> int:
        return len(self._modules)
