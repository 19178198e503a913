"""
Template lookup and rendering for code generation.

The generators only rely on two capabilities: looking a template up by
name (``TemplateProvider``) and rendering template text with a context
(``TemplateEngine.render_string``). Both are backed by Jinja2.
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def _create_environment(loader: BaseLoader) -> Environment:
    """Create a Jinja2 environment with code generation utilities."""
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "xml"], default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    env.filters["snake_case"] = snake_case
    env.filters["camel_case"] = camel_case
    env.filters["pascal_case"] = pascal_case
    env.filters["indent"] = indent_lines
    env.filters["comment"] = comment_lines
    return env


class TemplateProvider:
    """Looks templates up by identifier under a template root directory."""

    def __init__(self, template_root: Optional[Union[str, Path]] = None):
        """
        Initialize template provider.

        Args:
            template_root: Directory containing template files. In-memory
                templates only when not given or missing.
        """
        self.template_root = Path(template_root) if template_root else None
        if self.template_root and self.template_root.is_dir():
            loader = FileSystemLoader(str(self.template_root))
        else:
            loader = DictLoader({})
        self._env = _create_environment(loader)

    @property
    def environment(self) -> Environment:
        return self._env

    def get_template(self, template_id: str) -> Optional[str]:
        """
        Return the source text of a template.

        Args:
            template_id: Template file name relative to the template root

        Returns:
            Template text, or None if no such template exists
        """
        try:
            source, _, _ = self._env.loader.get_source(self._env, template_id)
        except TemplateNotFound:
            return None
        return source

    def template_exists(self, template_id: str) -> bool:
        return self.get_template(template_id) is not None

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template, shadowing any file of the same name.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = _OverlayLoader(self._env.loader)
        self._env.loader.mapping[name] = content


class _OverlayLoader(DictLoader):
    """In-memory templates layered over a file system loader."""

    def __init__(self, fallback: BaseLoader):
        super().__init__({})
        self._fallback = fallback

    def get_source(self, environment, template):
        if template in self.mapping:
            return super().get_source(environment, template)
        return self._fallback.get_source(environment, template)


class TemplateEngine:
    """Renders template text with a context."""

    def __init__(self, environment: Optional[Environment] = None):
        self._env = environment or _create_environment(DictLoader({}))

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content

        Raises:
            TemplateError: Carrying the underlying error message
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(str(e)) from e


# Template filters for code generation


def snake_case(value: str) -> str:
    """Convert string to snake_case."""
    s1 = re.sub("([a-z0-9])([A-Z])", r"\1_\2", str(value))
    s2 = re.sub(r"[-\s]+", "_", s1)
    return s2.lower()


def camel_case(value: str) -> str:
    """Convert string to camelCase."""
    parts = snake_case(value).split("_")
    if not parts:
        return str(value)
    return parts[0].lower() + "".join(p.capitalize() for p in parts[1:])


def pascal_case(value: str) -> str:
    """Convert string to PascalCase."""
    return "".join(p.capitalize() for p in snake_case(value).split("_") if p)


def indent_lines(value: str, spaces: int = 4) -> str:
    """Indent all non-blank lines in a string."""
    indent = " " * spaces
    lines = str(value).split("\n")
    return "\n".join(indent + line if line.strip() else line for line in lines)


def comment_lines(value: str, style: str = "//") -> str:
    """Add comment markers to each line."""
    lines = str(value).split("\n")
    return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)


def create_template_engine(template_root: Optional[Union[str, Path]] = None):
    """
    Create a provider/engine pair sharing one Jinja2 environment.

    Returns:
        Tuple of (TemplateProvider, TemplateEngine)
    """
    provider = TemplateProvider(template_root)
    return provider, TemplateEngine(provider.environment)
