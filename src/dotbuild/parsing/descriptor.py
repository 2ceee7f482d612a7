# descriptor.py
from __future__ import annotations

from typing import Dict, List, Optional

from ..model import ModuleDescriptor, ModuleType
from .nodes import ArrayNode, IdentifierNode, ModuleNode, StringNode, Value


# Conversion rules:
#   - keys match case-insensitively, unknown keys are ignored
#   - a later occurrence of a key replaces the earlier one
#   - values of the wrong shape are dropped without an error

_STRING_LIST_KEYS = ("sources", "public_includes", "private_includes", "defines")


def _type_of(value: Value) -> ModuleType:
    if isinstance(value, (IdentifierNode, StringNode)):
        return ModuleType.parse(value.value)
    return ModuleType.STATIC_LIBRARY


def _strings(value: Value) -> List[str]:
    """String literals only; identifiers are not collected."""
    if isinstance(value, ArrayNode):
        return [e.value for e in value.elements if isinstance(e, StringNode)]
    if isinstance(value, StringNode):
        return [value.value]
    return []


def _names(value: Value) -> List[str]:
    """Dependency names: quoted or unquoted."""
    if isinstance(value, ArrayNode):
        return [e.value for e in value.elements if isinstance(e, (IdentifierNode, StringNode))]
    if isinstance(value, (IdentifierNode, StringNode)):
        return [value.value]
    return []


def build_descriptor(name: str, directory: str, ast: ModuleNode) -> ModuleDescriptor:
    """
    Convert a parsed module block into a ModuleDescriptor.

    The module name written in the file (`module Foo {`) is not used: the
    descriptor is named after its file.
    """
    module_type: Optional[ModuleType] = None
    lists: Dict[str, List[str]] = {key: [] for key in _STRING_LIST_KEYS}
    deps: List[str] = []

    for prop in ast.properties:
        key = prop.name.lower()

        if key == "type":
            module_type = _type_of(prop.value)
        elif key in _STRING_LIST_KEYS:
            lists[key] = _strings(prop.value)
        elif key == "deps":
            deps = _names(prop.value)

    return ModuleDescriptor(
        name=name,
        directory=directory,
        type=module_type or ModuleType.STATIC_LIBRARY,
        sources=tuple(lists["sources"]),
        public_includes=tuple(lists["public_includes"]),
        private_includes=tuple(lists["private_includes"]),
        defines=tuple(lists["defines"]),
        dependencies=tuple(deps),
    )
