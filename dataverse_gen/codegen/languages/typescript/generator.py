"""
TypeScript code generator implementation.

Renders one file per entity, enum, action, function and complex type,
plus the consolidated attribute typings, metadata and index files.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.generator import (
    CodeGenerator,
    EmitOutcome,
    EmitStatus,
    GenerationResult,
)
from ...core.naming import name_key, normalize_import_location, schema_name_key

logger = get_logger(__name__)

ATTRIBUTE_TYPES_TEMPLATE = "allAttributeTypes.d.ts.j2"
ATTRIBUTE_TYPES_FILE = "./typings/attributeTypes.d.ts"

ENTITY_TEMPLATE = "entity.ts.j2"
ENUM_TEMPLATE = "enum.ts.j2"
ACTION_TEMPLATE = "action.ts.j2"
FUNCTION_TEMPLATE = "function.ts.j2"
COMPLEX_TYPE_TEMPLATE = "complextype.ts.j2"
METADATA_TEMPLATE = "metadata.ts.j2"
INDEX_TEMPLATE = "index.ts.j2"

TEMPLATE_DIRECTORY = Path(__file__).parent / "templates"


class TypescriptGenerator(CodeGenerator):
    """Code generator for TypeScript early-bound types and metadata."""

    @property
    def language_name(self) -> str:
        return "typescript"

    def generate(self) -> GenerationResult:
        """
        Regenerate every artifact for the model.

        Order is fixed: attribute typings, entities, enums, actions,
        functions, complex types, metadata, then the index when enabled.

        Returns:
            GenerationResult whose ``file_names`` is the run's ledger

        Raises:
            ConfigError: If templateRoot or outputRoot is not configured
        """
        self.check_required_options()

        ledger: List[str] = []
        outcomes: List[EmitOutcome] = []

        aggregate = self.output_all_attribute_types()
        if aggregate is not None:
            outcomes.append(aggregate)

        outcomes += self.output_entities(ledger)
        outcomes += self.output_enums(ledger)
        outcomes += self.output_actions(ledger)
        outcomes += self.output_functions(ledger)
        outcomes += self.output_complex_types(ledger)

        model_context = {**self.model.to_context(), **self.config.to_context()}
        outcomes += self.output_files(
            METADATA_TEMPLATE, ".", [model_context], lambda _: "metadata"
        )

        if self.config.generate_index:
            index_context = {**model_context, "FileNames": list(ledger)}
            outcomes += self.output_files(
                INDEX_TEMPLATE, ".", [index_context], lambda _: "index"
            )

        result = GenerationResult(
            file_names=ledger,
            outcomes=outcomes,
            metadata={
                "language": self.language_name,
                "output_root": self.config.output.output_root,
                **self.model.summary(),
            },
        )
        logger.info(
            "Generation finished: %d generated, %d failed, %d skipped",
            len(result.generated),
            len(result.failed),
            len(result.skipped),
        )
        return result

    def output_all_attribute_types(self) -> Optional[EmitOutcome]:
        """
        Write the consolidated attribute declarations for all entities and enums.

        Always a single file, even for an empty model. Writes nothing when
        the template is missing; writes an empty file when rendering fails.
        The file is never added to the ledger.
        """
        out_file = ATTRIBUTE_TYPES_FILE
        self.log("Generating: " + out_file)

        template = self.template_provider.get_template(ATTRIBUTE_TYPES_TEMPLATE)
        if template is None:
            self.log(f"Skipping - no template found '{ATTRIBUTE_TYPES_TEMPLATE}'")
            return None

        context = {
            "entities": self._project_entities(),
            "enums": self._project_enums(),
        }
        try:
            output = self.render(template, context)
            outcome = EmitOutcome(out_file, EmitStatus.GENERATED)
        except Exception as e:
            logger.error("Error rendering template %s: %s", ATTRIBUTE_TYPES_TEMPLATE, e)
            output = ""
            outcome = EmitOutcome(out_file, EmitStatus.FAILED, str(e))

        self.code_writer.write(out_file, output)
        return outcome

    def _project_entities(self) -> List[Dict[str, Any]]:
        return [
            {
                "Name": entity.name,
                "entityName": entity.name,
                "properties": [
                    {
                        **prop.to_context(),
                        "importLocation": normalize_import_location(
                            prop.import_location
                        ),
                    }
                    for prop in entity.properties
                ],
            }
            for entity in self.model.entity_types
        ]

    def _project_enums(self) -> List[Dict[str, Any]]:
        return [
            {
                "Name": enum_type.name,
                "enumName": enum_type.name,
                "members": list(enum_type.members),
            }
            for enum_type in self.model.enum_types
        ]

    def output_entities(self, ledger: List[str]) -> List[EmitOutcome]:
        return self.output_files(
            ENTITY_TEMPLATE, "entities", self.model.entity_types, schema_name_key, ledger
        )

    def output_enums(self, ledger: List[str]) -> List[EmitOutcome]:
        return self.output_files(
            ENUM_TEMPLATE, "enums", self.model.enum_types, name_key, ledger
        )

    def output_actions(self, ledger: List[str]) -> List[EmitOutcome]:
        return self.output_files(
            ACTION_TEMPLATE, "actions", self.model.actions, name_key, ledger
        )

    def output_functions(self, ledger: List[str]) -> List[EmitOutcome]:
        return self.output_files(
            FUNCTION_TEMPLATE, "functions", self.model.functions, name_key, ledger
        )

    def output_complex_types(self, ledger: List[str]) -> List[EmitOutcome]:
        return self.output_files(
            COMPLEX_TYPE_TEMPLATE,
            "complextypes",
            self.model.complex_types,
            name_key,
            ledger,
        )
