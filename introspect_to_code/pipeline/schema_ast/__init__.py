"""
Schema AST module.

Contains the introspect parser that populates the type registry.
"""

from __future__ import annotations

from .parser import IntrospectParser, ParsedSchema

__all__ = [
    "IntrospectParser",
    "ParsedSchema",
]
