"""
Errors raised while building and resolving the class graph.

All of them are fatal: a generation run stops at the first one and the
message names the offending identifier.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all code generation errors."""

    pass


class UnknownTypeError(CodegenError):
    """Raised when a reference points at a type id that was never registered."""

    def __init__(self, api_type: str):
        super().__init__(f'Trying to resolve unknown type "{api_type}".')
        self.api_type = api_type


class UnknownNativeTypeError(CodegenError):
    """Raised when a native type carries a primitive kind we cannot map."""

    def __init__(self, primitive: str | None):
        super().__init__(f'Unknown native type "{primitive}".')
        self.primitive = primitive


class UseBeforeResolveError(CodegenError):
    """Raised when a reference is used as if it were a resolved type.

    Accessing anything but the API type id of a reference means the caller
    forgot to resolve it first.
    """

    def __init__(self, api_type: str, attribute: str = ""):
        detail = f" (accessed {attribute!r})" if attribute else ""
        super().__init__(f'Type "{api_type}" must be resolved before use{detail}.')
        self.api_type = api_type
        self.attribute = attribute


class DuplicateRegistrationError(CodegenError):
    """Raised in strict mode when two distinct types share one API type id."""

    def __init__(self, api_type: str):
        super().__init__(f'Type "{api_type}" is already registered.')
        self.api_type = api_type


class InvalidSchemaError(CodegenError):
    """Raised when the introspect document does not have the expected shape."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
