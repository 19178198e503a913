"""dataverse_gen: template-driven TypeScript generation from Dataverse schema models."""

from .codegen import generate_from_schema, load_config, load_schema_model

__version__ = "0.1.0"

__all__ = ["generate_from_schema", "load_config", "load_schema_model", "__version__"]
