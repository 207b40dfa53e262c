"""
Java code generation backend.

Renders the resolved classes of one namespace into a ``<Namespace>Model``
file where every class is a static nested class.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.imports import ENUM_SUPPORT_IMPORTS, collect_imports, is_visible
from ..analyzer.name_resolver import NameResolver, constant_name, field_name
from ..analyzer.reference_resolver import ReferenceResolver
from ..config import CodeGeneratorConfig
from ..model.nodes import ConstructorDef, EnumDef, Namespace, ResolvedType


class JavaBackend:
    """Java code generation backend."""

    # Template directory name
    TEMPLATE_LANG = "java"

    # File extension
    FILE_EXTENSION = "java"

    def __init__(self, config: CodeGeneratorConfig, resolver: ReferenceResolver):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
            resolver: Resolver used to resolve classes before rendering them
        """
        self.config = config
        self.resolver = resolver
        self.names = NameResolver(config)
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["constant_name"] = constant_name

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.suffix_template = self.jinja_env.get_template(f"suffix.{self.FILE_EXTENSION}.jinja2")

    def file_name(self, namespace: Namespace) -> str:
        return f"{self.names.model_name(namespace)}.{self.FILE_EXTENSION}"

    def generate(
        self,
        namespace: Namespace,
        classes: list[ResolvedType],
        enums: list[EnumDef],
        generation_comment: str = "",
    ) -> str:
        """
        Generate the model file of a namespace.

        Args:
            namespace: The namespace being rendered
            classes: Global classes of the namespace
            enums: Global enums of the namespace
            generation_comment: Comment put on top of the file

        Returns:
            Generated Java code
        """
        classes = [self.resolver.resolve(klass) for klass in classes]
        classes = [klass for klass in classes if self.is_rendered(klass)]

        imports: set[str] = set()
        for klass in classes:
            imports |= collect_imports(klass)
        if enums:
            imports |= ENUM_SUPPORT_IMPORTS

        indent = self.config.indent
        content = []
        for klass in classes:
            content.append(self.render_class(klass, indent))
        for enum_def in enums:
            content.append(self.render_enum(enum_def, indent))

        prefix = self.prefix_template.render(
            generation_comment=generation_comment,
            package=self.config.package,
            required_imports=sorted(imports),
            model_name=self.names.model_name(namespace),
        )
        suffix = self.suffix_template.render()

        return prefix + "\n\n" + "\n\n".join(content) + "\n" + suffix + "\n"

    def is_rendered(self, klass: ResolvedType) -> bool:
        """Only visible classes are rendered; arrays are always referred to as lists."""
        return is_visible(klass) and not klass.is_array

    def render_class(self, klass: ResolvedType, prefix: str) -> str:
        klass = self.resolver.resolve(klass)
        return self.class_template.render(self._prepare_class_context(klass, prefix))

    def render_enum(self, enum_def: EnumDef, prefix: str) -> str:
        return self.enum_template.render(
            prefix=prefix,
            body=prefix + self.config.indent,
            enum_name=self.names.enum_name(enum_def),
            api_type=enum_def.api_type,
            values=self._enum_constants(enum_def.values),
        )

    def _prepare_class_context(self, klass: ResolvedType, prefix: str) -> dict[str, Any]:
        """
        Prepare the template context for a class.

        Args:
            klass: A resolved class
            prefix: Indentation of the class declaration

        Returns:
            Dictionary of template variables
        """
        namespace = klass.namespace
        body = prefix + self.config.indent
        members = klass.members

        extends = None
        if klass.does_extend:
            extends = self.names.class_reference(namespace, klass.parent)
        elif klass.has_parent_module:
            extends = klass.parent_module.parent_name

        interfaces = []
        module_lines = []
        for module in klass.class_modules:
            interfaces.extend(i for i in module.interfaces(klass) if i not in interfaces)
            module_lines.extend(module.render(klass, self.names, body))

        inner_classes = [self.render_class(inner, body) for inner in klass.inner_types if self.is_rendered(inner)]
        inner_enums = [self.render_enum(enum_def, body) for enum_def in klass.inner_enums]

        return {
            "prefix": prefix,
            "body": body,
            "indent": self.config.indent,
            "class_name": self.names.class_name(klass),
            "extends": extends,
            "interfaces": interfaces,
            "api_type": klass.api_type if klass.is_global else None,
            # Multitypes only hold one of their members at a time
            "field_names": [] if klass.is_multitype else [m.name for m in members],
            "members": [
                {
                    "type": self.names.member_type_name(namespace, member),
                    "field": field_name(member.name),
                    "description": member.description,
                }
                for member in members
            ],
            "module_lines": module_lines,
            # Subclasses rely on an implicit super()
            "default_constructor": bool(klass.constructors)
            or any(module.adds_constructor for module in klass.class_modules),
            "constructors": [self._prepare_constructor_context(namespace, c) for c in klass.constructors],
            "inner_classes": inner_classes,
            "inner_enums": inner_enums,
        }

    def _prepare_constructor_context(self, namespace: Namespace | None, constructor: ConstructorDef) -> dict[str, Any]:
        params = [
            {
                "type": self.names.member_type_name(namespace, param),
                "field": field_name(param.name),
            }
            for param in constructor.parameters
        ]
        return {
            "signature": ", ".join(f"{p['type']} {p['field']}" for p in params),
            "params": params,
        }

    @staticmethod
    def _enum_constants(values: tuple[str, ...]) -> list[dict[str, str]]:
        """Constant name for each enum value, unique and a valid identifier."""
        constants = []
        used: set[str] = set()
        for i, value in enumerate(values):
            constant = constant_name(str(value)) or f"VALUE_{i}"
            if constant[0].isdigit():
                constant = "_" + constant
            if constant in used:
                constant = f"{constant}_{i}"
            used.add(constant)
            constants.append({"constant": constant, "value": str(value)})
        return constants
