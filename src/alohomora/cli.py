"""CLI interface for alohomora using Typer framework."""

import asyncio
import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from alohomora import __description__, __version__
from alohomora.config import AlohomoraConfig, LogLevel, load_config
from alohomora.core.errors import AlohomoraError
from alohomora.core.registry import TypeRegistry
from alohomora.core.types import ValidationResult
from alohomora.inspection import inspect_type, list_all_types
from alohomora.validation import AsyncSchemaValidator, SchemaValidator, TypeCompatibility

app = typer.Typer(
    name="alohomora",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

VALID_FORMATS = ["table", "json"]

TypesOption = Annotated[
    Optional[Path],
    typer.Option("--types", "-t", help="Type definitions file (default: registry.typesFile from config)")
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file path (default: search for .alohomora.json)")
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json (default: table)")
]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"alohomora version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """alohomora - Runtime schema validation and type compatibility checks."""


def _configure_logging(config: AlohomoraConfig) -> None:
    root = logging.getLogger("alohomora")
    root.setLevel(_LOG_LEVELS.get(config.logging.level, logging.WARNING))
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _load_context(types_file: Path | None, config_path: Path | None) -> tuple[AlohomoraConfig, TypeRegistry]:
    """Load configuration and the type registry, exiting with code 1 on failure."""
    try:
        config = load_config(config_path)
        _configure_logging(config)

        types_path = types_file or (Path(config.registry.types_file) if config.registry.types_file else None)
        if types_path is None:
            registry = TypeRegistry(include_builtins=config.registry.include_builtins)
        else:
            registry = TypeRegistry.from_file(types_path, include_builtins=config.registry.include_builtins)
    except (AlohomoraError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.debug(f"Registry loaded with {len(registry)} types")
    return config, registry


def _check_format(format: str) -> None:
    if format not in VALID_FORMATS:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(VALID_FORMATS)}")
        raise typer.Exit(1)


def _run_validation(config: AlohomoraConfig, value: Any, schema) -> ValidationResult:
    max_depth = config.validation.max_depth
    if config.validation.async_validators:
        return asyncio.run(AsyncSchemaValidator(max_depth=max_depth).validate(value, schema))
    return SchemaValidator(max_depth=max_depth).validate(value, schema)


@app.command("types")
def types_command(
    types_file: TypesOption = None,
    config: ConfigOption = None,
) -> None:
    """List registered types."""
    _, registry = _load_context(types_file, config)
    list_all_types(registry, console)


@app.command("inspect")
def inspect_command(
    name: Annotated[str, typer.Argument(help="Registered type name")],
    types_file: TypesOption = None,
    config: ConfigOption = None,
) -> None:
    """Show a registered type's description and schema."""
    _, registry = _load_context(types_file, config)
    if not inspect_type(registry, name, console):
        raise typer.Exit(1)


@app.command()
def validate(
    type_name: Annotated[str, typer.Argument(help="Registered type name to validate against")],
    value_file: Annotated[Path, typer.Argument(help="JSON file holding the value")],
    types_file: TypesOption = None,
    config: ConfigOption = None,
    format: FormatOption = "table",
) -> None:
    """Validate a JSON value against a registered type."""
    _check_format(format)
    alohomora_config, registry = _load_context(types_file, config)

    definition = registry.get_type(type_name)
    if definition is None:
        console.print(f"[red]Error:[/red] Unknown type: {escape(type_name)}")
        raise typer.Exit(1)

    try:
        with open(value_file, encoding="utf-8") as f:
            value = jsonlib.load(f)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] Value file not found: {value_file}")
        raise typer.Exit(1)
    except jsonlib.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {value_file}: {e}")
        raise typer.Exit(1)

    try:
        result = _run_validation(alohomora_config, value, definition.schema)
    except AlohomoraError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if format == "json":
        typer.echo(jsonlib.dumps(result.to_dict(), indent=2))
    elif result.is_valid:
        console.print(f"[green]Valid:[/green] value conforms to type '{escape(type_name)}'")
    else:
        console.print(f"[red]Invalid:[/red] {len(result.errors)} error(s) for type '{escape(type_name)}'")
        errors_table = Table()
        errors_table.add_column("#", style="dim", justify="right")
        errors_table.add_column("Error", style="white")
        for index, error in enumerate(result.errors, 1):
            errors_table.add_row(str(index), escape(error))
        console.print(errors_table)

    raise typer.Exit(0 if result.is_valid else 1)


@app.command()
def compat(
    source: Annotated[str, typer.Argument(help="Source type name")],
    target: Annotated[str, typer.Argument(help="Target type name")],
    types_file: TypesOption = None,
    config: ConfigOption = None,
    format: FormatOption = "table",
) -> None:
    """Check whether a source type is compatible with a target type."""
    _check_format(format)
    alohomora_config, registry = _load_context(types_file, config)

    checker = TypeCompatibility(registry, max_depth=alohomora_config.validation.max_depth)
    try:
        result = checker.check_compatibility(source, target)
    except AlohomoraError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if format == "json":
        typer.echo(jsonlib.dumps(result.to_dict(), indent=2))
    elif result.is_compatible:
        console.print(f"[green]Compatible:[/green] {escape(source)} -> {escape(target)}")
    else:
        console.print(f"[red]Incompatible:[/red] {escape(result.reason)}")

    raise typer.Exit(0 if result.is_compatible else 1)
