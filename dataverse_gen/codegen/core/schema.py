"""
Schema model consumed by the generators.

Wraps the raw JSON schema description (entity types, enum types, actions,
functions and complex types) in read-only dataclasses. The raw fields of each
item are kept so templates see exactly what the schema file provided.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class SchemaError(Exception):
    """Exception raised when a schema document has the wrong shape."""

    pass


def _require_mapping(raw: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise SchemaError(f"{kind} must be a JSON object, got {type(raw).__name__}")
    return raw


@dataclass(frozen=True)
class SchemaItem:
    """A named schema item whose other fields are opaque to the generator."""

    name: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SchemaItem":
        raw = _require_mapping(raw, cls.__name__)
        return cls(name=raw.get("Name"), raw=dict(raw))

    def to_context(self) -> Dict[str, Any]:
        """Return the item's fields under their original keys."""
        context = dict(self.raw)
        context["Name"] = self.name
        return context


@dataclass(frozen=True)
class Property:
    """An entity attribute."""

    name: str
    typescript_type: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Property":
        raw = _require_mapping(raw, "Property")
        return cls(
            name=raw.get("Name"),
            typescript_type=raw.get("TypescriptType"),
            raw=dict(raw),
        )

    @property
    def import_location(self) -> Optional[str]:
        if not self.typescript_type:
            return None
        return self.typescript_type.get("importLocation")

    def to_context(self) -> Dict[str, Any]:
        return dict(self.raw)


@dataclass(frozen=True)
class EntityType(SchemaItem):
    """Entity type; files are named after ``schema_name``."""

    schema_name: Optional[str] = None
    properties: Tuple[Property, ...] = ()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "EntityType":
        raw = _require_mapping(raw, "EntityType")
        properties = tuple(
            Property.from_dict(prop) for prop in raw.get("Properties") or []
        )
        return cls(
            name=raw.get("Name"),
            raw=dict(raw),
            schema_name=raw.get("SchemaName"),
            properties=properties,
        )

    def to_context(self) -> Dict[str, Any]:
        context = super().to_context()
        context["SchemaName"] = self.schema_name
        context["Properties"] = [prop.to_context() for prop in self.properties]
        return context


@dataclass(frozen=True)
class EnumType(SchemaItem):
    """Option set / enumeration."""

    members: Tuple[Dict[str, Any], ...] = ()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "EnumType":
        raw = _require_mapping(raw, "EnumType")
        return cls(
            name=raw.get("Name"),
            raw=dict(raw),
            members=tuple(raw.get("Members") or []),
        )

    def to_context(self) -> Dict[str, Any]:
        context = super().to_context()
        context["Members"] = list(self.members)
        return context


class Action(SchemaItem):
    """Custom API action."""


class Function(SchemaItem):
    """Custom API function."""


class ComplexType(SchemaItem):
    """Complex type returned by actions and functions."""


@dataclass(frozen=True)
class SchemaModel:
    """Immutable snapshot of everything a generation run renders.

    Collection order is generation order and is preserved in every output.
    """

    entity_types: Tuple[EntityType, ...] = ()
    enum_types: Tuple[EnumType, ...] = ()
    actions: Tuple[Action, ...] = ()
    functions: Tuple[Function, ...] = ()
    complex_types: Tuple[ComplexType, ...] = ()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SchemaModel":
        """
        Build a model from its JSON form.

        Args:
            raw: Mapping with optional ``EntityTypes``, ``EnumTypes``,
                ``Actions``, ``Functions`` and ``ComplexTypes`` lists

        Returns:
            SchemaModel with missing collections left empty

        Raises:
            SchemaError: If the document or one of its items is not an object
        """
        raw = _require_mapping(raw, "Schema model")
        return cls(
            entity_types=tuple(
                EntityType.from_dict(item) for item in raw.get("EntityTypes") or []
            ),
            enum_types=tuple(
                EnumType.from_dict(item) for item in raw.get("EnumTypes") or []
            ),
            actions=tuple(Action.from_dict(item) for item in raw.get("Actions") or []),
            functions=tuple(
                Function.from_dict(item) for item in raw.get("Functions") or []
            ),
            complex_types=tuple(
                ComplexType.from_dict(item) for item in raw.get("ComplexTypes") or []
            ),
        )

    def to_context(self) -> Dict[str, Any]:
        """Return the model as a template context with the original keys."""
        return {
            "EntityTypes": [item.to_context() for item in self.entity_types],
            "EnumTypes": [item.to_context() for item in self.enum_types],
            "Actions": [item.to_context() for item in self.actions],
            "Functions": [item.to_context() for item in self.functions],
            "ComplexTypes": [item.to_context() for item in self.complex_types],
        }

    def summary(self) -> Dict[str, int]:
        return {
            "entities": len(self.entity_types),
            "enums": len(self.enum_types),
            "actions": len(self.actions),
            "functions": len(self.functions),
            "complextypes": len(self.complex_types),
        }


def load_schema_model(file_path=None, url=None) -> SchemaModel:
    """Load and parse a schema model from a JSON file or URL."""
    from ...utils import load_json

    _, data = load_json(file_path=file_path, url=url)
    return SchemaModel.from_dict(data)
