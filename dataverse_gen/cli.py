"""
Command-line interface for dataverse_gen.

Usage:
  dataverse-gen generate schema.json --output-root ./src/dataverse-gen
  dataverse-gen generate --url https://host/schema.json --config dataverse-gen.json
  dataverse-gen languages
"""

from __future__ import annotations

import argparse
from typing import Sequence

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .codegen import (
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
    load_config,
    load_schema_model,
)
from .codegen.core.generator import EmitStatus
from .codegen.core.schema import SchemaError
from .codegen.languages.typescript import TEMPLATE_DIRECTORY
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dataverse-gen",
        description="Generate TypeScript files from a Dataverse schema model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dataverse-gen generate schema.json --output-root ./src/dataverse-gen
  dataverse-gen generate schema.json --config dataverse-gen.json --no-index
  dataverse-gen languages
        """.strip(),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for diagnostic output (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate", help="Generate code from a schema model"
    )
    input_group = generate.add_mutually_exclusive_group(required=True)
    input_group.add_argument("schema", nargs="?", help="Schema model JSON file")
    input_group.add_argument("--url", help="URL to fetch the schema model from")

    generate.add_argument("--config", help="Configuration file path (JSON)")
    generate.add_argument(
        "--language",
        "-l",
        default="typescript",
        help="Target language (default: typescript)",
    )
    generate.add_argument(
        "--template-root",
        help="Template directory (default: bundled templates for the language)",
    )
    generate.add_argument("--output-root", "-o", help="Directory to generate into")
    generate.add_argument("--file-suffix", help="Suffix for per-item files")
    generate.add_argument(
        "--no-index", action="store_true", help="Don't generate the index file"
    )
    generate.add_argument(
        "--quiet", "-q", action="store_true", help="Don't print progress lines"
    )
    generate.add_argument(
        "--verbose", action="store_true", help="Show generation metadata"
    )
    generate.set_defaults(func=_handle_generate)

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``dataverse-gen`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _handle_languages(args: argparse.Namespace) -> int:
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {info['name']}", info["class"], aliases)

    console.print(table)
    return 0


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {
        "output": {
            "templateRoot": args.template_root,
            "outputRoot": args.output_root,
            "fileSuffix": args.file_suffix,
        }
    }
    if args.no_index:
        overrides["generateIndex"] = False

    try:
        config = load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}")

    if not config.output.template_root and args.language.lower() in ("typescript", "ts"):
        config.output.template_root = str(TEMPLATE_DIRECTORY)
    return config


def _handle_generate(args: argparse.Namespace) -> int:
    config = _build_config(args)

    try:
        model = load_schema_model(file_path=args.schema, url=args.url)
    except (JSONLoaderError, SchemaError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load schema: {e}")

    logger.info(
        "Loaded schema: %s", ", ".join(f"{k}={v}" for k, v in model.summary().items())
    )
    log_callback = (lambda message: None) if args.quiet else _print_progress

    try:
        generator = get_generator(args.language, model, config, log_callback)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(
                f"[green]Generating {generator.language_name} code...", total=None
            )
            result = generator.generate()
    except (ConfigError, RegistryError) as e:
        raise CLIError(str(e))

    _print_summary(result, verbose=args.verbose)
    return 0 if result.success else 1


def _print_progress(message: str):
    console.print(f"[dim]{message}[/dim]")


def _print_summary(result: GenerationResult, verbose: bool = False):
    table = Table(
        title="📊 Generation Summary",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("File", style="bold")
    table.add_column("Status")

    styles = {
        EmitStatus.GENERATED: "[green]generated[/green]",
        EmitStatus.FAILED: "[red]failed[/red]",
        EmitStatus.SKIPPED: "[yellow]no template[/yellow]",
    }
    for outcome in result.outcomes:
        table.add_row(outcome.path, styles[outcome.status])

    console.print()
    console.print(table)

    if verbose and result.metadata:
        for key, value in result.metadata.items():
            console.print(f"  [bold]{key.replace('_', ' ').title()}:[/bold] {value}")

    if result.failed:
        console.print(
            f"\n[red]✗ {len(result.failed)} file(s) failed to render; "
            "their content is the error message[/red]"
        )
    else:
        console.print(f"\n[green]✓[/green] Generated {len(result.generated)} file(s)")
