"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    EmitOutcome,
    EmitStatus,
    GenerationResult,
    build_context,
)
from .schema import (
    Action,
    ComplexType,
    EntityType,
    EnumType,
    Function,
    Property,
    SchemaError,
    SchemaModel,
    load_schema_model,
)
from .naming import (
    name_key,
    normalize_import_location,
    output_file_path,
    schema_name_key,
)
from .config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    OutputConfig,
    load_config,
    merge_options,
)
from .templates import (
    TemplateEngine,
    TemplateError,
    TemplateProvider,
    create_template_engine,
)
from .writer import CodeWriter

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "EmitOutcome",
    "EmitStatus",
    "GenerationResult",
    "build_context",
    # Schema model
    "Action",
    "ComplexType",
    "EntityType",
    "EnumType",
    "Function",
    "Property",
    "SchemaError",
    "SchemaModel",
    "load_schema_model",
    # Naming utilities
    "name_key",
    "normalize_import_location",
    "output_file_path",
    "schema_name_key",
    # Configuration system
    "ConfigError",
    "ConfigManager",
    "GeneratorConfig",
    "OutputConfig",
    "load_config",
    "merge_options",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "TemplateProvider",
    "create_template_engine",
    # Output
    "CodeWriter",
]
