"""
Language-specific code generators.
"""

from .typescript import TypescriptGenerator

__all__ = ["TypescriptGenerator"]
