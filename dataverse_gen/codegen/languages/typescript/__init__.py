"""
TypeScript code generator module.

Generates early-bound TypeScript types and metadata from a Dataverse schema model.
"""

from .generator import TEMPLATE_DIRECTORY, TypescriptGenerator

__all__ = [
    "TEMPLATE_DIRECTORY",
    "TypescriptGenerator",
]
