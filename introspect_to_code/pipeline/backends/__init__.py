"""
Code generation backends.

Contains language-specific code generators.
"""

from __future__ import annotations

from .java_backend import JavaBackend

__all__ = [
    "JavaBackend",
]
