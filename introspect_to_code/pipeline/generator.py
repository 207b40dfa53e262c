"""
Pipeline generator.

Runs the phases in order: parse the introspect document into a registry,
resolve every global type, then render one model file per namespace.
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer.imports import find_module_imports
from .analyzer.reference_resolver import ReferenceResolver
from .analyzer.type_registry import TypeRegistry
from .backends.java_backend import JavaBackend
from .config import CodeGeneratorConfig
from .model.nodes import ResolvedType
from .schema_ast.parser import IntrospectParser, ParsedSchema

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates Java model classes from a JSON-RPC introspect document."""

    def __init__(self, introspect: dict[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            introspect: The introspect document (the ``result`` member)
            config: Code generation configuration
        """
        self.introspect = introspect
        self.config = config or CodeGeneratorConfig()
        self.registry = TypeRegistry(strict=self.config.strict_registration)
        self.resolver = ReferenceResolver(self.registry)
        self.parsed: ParsedSchema | None = None

    def parse(self) -> ParsedSchema:
        if self.parsed is None:
            self.parsed = IntrospectParser(self.registry, self.config).parse(self.introspect)
        return self.parsed

    def resolve(self) -> list[ResolvedType]:
        """Resolve all global types and collect the imports of their modules."""
        parsed = self.parse()
        classes = [self.resolver.resolve(klass) for klass in parsed.global_types]
        for klass in classes:
            find_module_imports(klass)
        logger.debug("Resolved %d global types", len(classes))
        return classes

    def generate(self) -> dict[str, str]:
        """
        Generate the model files.

        Returns:
            Mapping of file name to Java code, one file per namespace that
            has something to render
        """
        classes = self.resolve()
        parsed = self.parse()
        backend = JavaBackend(self.config, self.resolver)
        comment = self._generation_comment()

        files = {}
        for namespace in parsed.namespaces:
            ns_classes = [klass for klass in classes if klass.namespace == namespace]
            ns_enums = [enum_def for enum_def in parsed.enums if enum_def.namespace == namespace]
            if not ns_enums and not any(backend.is_rendered(klass) for klass in ns_classes):
                logger.debug("Nothing to render in namespace %s", namespace.name)
                continue

            file_name = backend.file_name(namespace)
            files[file_name] = backend.generate(namespace, ns_classes, ns_enums, comment)
            logger.info("Generated %s", file_name)

        return files

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""

        from .. import __version__
        from ..cli_utils import reconstruct_command_line

        return f"// Generated by introspect_to_code v{__version__} : {reconstruct_command_line()}"
