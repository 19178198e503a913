"""
Base generator interface for all code generation targets.

Holds the per-collection emitter shared by every language: one template,
one output sub-directory, one file per schema item, with rendering failures
contained to the item that caused them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ...logging_config import get_logger
from .config import ConfigError, GeneratorConfig
from .naming import output_file_path
from .schema import SchemaModel
from .templates import TemplateEngine, TemplateProvider
from .writer import CodeWriter

logger = get_logger(__name__)

LogCallback = Callable[[str], None]
Renderer = Callable[[str, Dict[str, Any]], str]


class EmitStatus(Enum):
    """What happened to one attempted artifact."""

    GENERATED = "generated"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class EmitOutcome:
    """Result of attempting to produce one artifact."""

    path: str
    status: EmitStatus
    message: Optional[str] = None


def build_context(options: Dict[str, Any], item: Any) -> Dict[str, Any]:
    """
    Merge global options with an item's own fields.

    Right-biased: on a key collision the item's value wins.
    """
    item_context = item.to_context() if hasattr(item, "to_context") else dict(item)
    return {**options, **item_context}


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(
        self,
        model: SchemaModel,
        code_writer: CodeWriter,
        template_provider: TemplateProvider,
        config: GeneratorConfig,
        logger_callback: Optional[LogCallback] = None,
        renderer: Optional[Renderer] = None,
    ):
        """
        Initialize generator.

        Args:
            model: Schema model to generate from
            code_writer: Persists generated files
            template_provider: Looks templates up by identifier
            config: Resolved generation options
            logger_callback: Sink for progress lines; package logger by default
            renderer: ``(template_text, context) -> text``; Jinja2 by default
        """
        self.model = model
        self.code_writer = code_writer
        self.template_provider = template_provider
        self.config = config
        self.log = logger_callback or logger.info
        if renderer is None:
            environment = getattr(template_provider, "environment", None)
            renderer = TemplateEngine(environment).render_string
        self.render = renderer

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @abstractmethod
    def generate(self) -> "GenerationResult":
        """
        Run the full generation pass.

        Returns:
            GenerationResult listing what was produced
        """
        pass

    def check_required_options(self):
        """Raise ConfigError unless both root paths are configured."""
        if not self.config.output.template_root:
            raise ConfigError("Missing templateRoot in config")
        if not self.config.output.output_root:
            raise ConfigError("Missing outputRoot in config")

    def output_files(
        self,
        template_id: str,
        output_dir: str,
        items: Sequence[Any],
        name_of: Callable[[Any], str],
        ledger: Optional[List[str]] = None,
    ) -> List[EmitOutcome]:
        """
        Emit one file per item from a single template.

        Args:
            template_id: Template looked up for every item
            output_dir: Sub-directory of the output root
            items: Items to render, in generation order
            name_of: Gives the file name (without suffix) for an item
            ledger: Receives the path of every successful render, in order.
                Nothing is recorded when None.

        Returns:
            One EmitOutcome per attempted file
        """
        if len(items) == 0:
            self.log(f"Skipping {output_dir} due to zero items")
            return []

        self.code_writer.create_sub_folder(output_dir)

        options = self.config.to_context()
        outcomes = []
        for item in items:
            out_file = output_file_path(
                output_dir, name_of(item), self.config.output.file_suffix
            )
            self.log("Generating: " + out_file)

            template = self.template_provider.get_template(template_id)
            if template is None:
                self.log(f"Skipping - no template found '{template_id}'")
                self.code_writer.write(out_file, "")
                outcomes.append(EmitOutcome(out_file, EmitStatus.SKIPPED))
                continue

            try:
                output = self.render(template, build_context(options, item))
            except Exception as e:
                message = str(e)
                logger.error("Error rendering %s: %s", out_file, message)
                self.code_writer.write(out_file, message)
                outcomes.append(EmitOutcome(out_file, EmitStatus.FAILED, message))
                continue

            if ledger is not None:
                ledger.append(out_file)
            self.code_writer.write(out_file, output)
            outcomes.append(EmitOutcome(out_file, EmitStatus.GENERATED))

        return outcomes


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        file_names: Optional[List[str]] = None,
        outcomes: Optional[Iterable[EmitOutcome]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            file_names: The ledger of successfully rendered per-item files
            outcomes: Every attempted artifact, aggregates included
            metadata: Additional metadata about generation
        """
        self.file_names = list(file_names or [])
        self.outcomes = list(outcomes or [])
        self.metadata = metadata or {}

    def _paths(self, status: EmitStatus) -> List[str]:
        return [outcome.path for outcome in self.outcomes if outcome.status == status]

    @property
    def generated(self) -> List[str]:
        return self._paths(EmitStatus.GENERATED)

    @property
    def failed(self) -> List[str]:
        return self._paths(EmitStatus.FAILED)

    @property
    def skipped(self) -> List[str]:
        return self._paths(EmitStatus.SKIPPED)

    @property
    def success(self) -> bool:
        return not self.failed
