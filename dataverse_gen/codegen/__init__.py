"""
Dataverse code generation module.

Renders schema models through templates into one file per item plus
aggregate typings, metadata and index files.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult
from .core.schema import SchemaModel, load_schema_model
from .core.config import ConfigError, GeneratorConfig, load_config


def generate_from_schema(
    schema, language="typescript", config=None, logger_callback=None
) -> GenerationResult:
    """
    Generate all files for a schema model.

    Args:
        schema: SchemaModel or its JSON dict form
        language: Target language name
        config: GeneratorConfig or dict of option overrides
        logger_callback: Sink for progress lines

    Returns:
        GenerationResult describing what was written
    """
    model = schema if isinstance(schema, SchemaModel) else SchemaModel.from_dict(schema)
    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)

    generator = get_generator(language, model, config, logger_callback)
    return generator.generate()


__all__ = [
    "CodeGenerator",
    "ConfigError",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorRegistry",
    "RegistryError",
    "SchemaModel",
    "generate_from_schema",
    "get_generator",
    "get_language_info",
    "get_registry",
    "list_supported_languages",
    "load_config",
    "load_schema_model",
]
