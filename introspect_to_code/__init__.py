"""JSON-RPC Introspect to Code Generator

Builds a class graph from the types of a JSON-RPC introspect document,
resolves the references between them and renders Java model classes.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodegenError,
    CodeGeneratorConfig,
    PipelineGenerator,
    ReferenceResolver,
    TypeRegistry,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CodegenError",
    "ReferenceResolver",
    "TypeRegistry",
]
