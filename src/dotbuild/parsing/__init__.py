from __future__ import annotations

from ..model import ModuleDescriptor
from .descriptor import build_descriptor
from .lexer import Lexer, tokenize
from .nodes import ArrayNode, IdentifierNode, ModuleNode, Node, PropertyNode, StringNode
from .parser import Parser, parse_tokens
from .tokens import Token, TokenKind


def parse_build_file(module_name: str, module_directory: str, source: str) -> ModuleDescriptor:
    """
    Single-file entry point: source text -> ModuleDescriptor.

    Pure and stateless, safe to call concurrently for different files.
    Raises LexError or ParseError (positions relative to `source`, no path set).
    """
    tokens = Lexer(source).tokenize()
    ast = Parser(tokens).parse()
    return build_descriptor(module_name, module_directory, ast)


__all__ = [
    "parse_build_file",
    "build_descriptor",
    "Lexer",
    "tokenize",
    "Parser",
    "parse_tokens",
    "Token",
    "TokenKind",
    "Node",
    "ModuleNode",
    "PropertyNode",
    "IdentifierNode",
    "StringNode",
    "ArrayNode",
]
