"""
Pipeline - JSON-RPC introspect to Java model generator.

1. Phase 1 (Parser): Walk the introspect document into a type registry
2. Phase 2 (Analyzer): Resolve references, derive names and imports
3. Phase 3 (Backend): Render each namespace with Jinja2 templates
"""

from __future__ import annotations

from .analyzer import NameResolver, ReferenceResolver, TypeRegistry, collect_imports, derive_name, is_visible
from .config import CodeGeneratorConfig
from .errors import (
    CodegenError,
    DuplicateRegistrationError,
    InvalidSchemaError,
    UnknownNativeTypeError,
    UnknownTypeError,
    UseBeforeResolveError,
)
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CodegenError",
    "DuplicateRegistrationError",
    "InvalidSchemaError",
    "UnknownNativeTypeError",
    "UnknownTypeError",
    "UseBeforeResolveError",
    "NameResolver",
    "ReferenceResolver",
    "TypeRegistry",
    "collect_imports",
    "derive_name",
    "is_visible",
]
