"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Java package of the generated model files
    package: str = "org.xbmc.android.jsonrpc.api.model"

    # Suffix of the per-namespace model class (Video -> VideoModel)
    model_suffix: str = "Model"

    # How an array is named from its element's reference
    list_type_template: str = "List<{}>"

    # API type ids to skip during ingestion
    ignore_types: list[str] = field(default_factory=list)

    # Namespace modules, by name (see modules.MODULES / modules.PARENT_MODULES)
    class_modules: list[str] = field(default_factory=list)
    parent_module: str | None = None
    inner_class_modules: list[str] = field(default_factory=list)
    inner_parent_module: str | None = None

    # Raise on duplicate type ids instead of overwriting them
    strict_registration: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Indentation unit of the generated code
    indent: str = "\t"

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package": self.package,
            "model_suffix": self.model_suffix,
            "list_type_template": self.list_type_template,
            "ignore_types": self.ignore_types,
            "class_modules": self.class_modules,
            "parent_module": self.parent_module,
            "inner_class_modules": self.inner_class_modules,
            "inner_parent_module": self.inner_parent_module,
            "strict_registration": self.strict_registration,
            "add_generation_comment": self.add_generation_comment,
            "indent": self.indent,
        }
