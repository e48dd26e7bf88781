"""Console inspection of registered types."""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.registry import TypeRegistry
from .core.types import CustomSchema, schema_to_dict


def inspect_type(registry: TypeRegistry, type_name: str, console: Console | None = None) -> bool:
    """Print a type's description and schema. Returns False if the type is unknown."""
    console = console or Console()
    definition = registry.get_type(type_name)
    if definition is None:
        console.print(f"[yellow]Type '{escape(type_name)}' not found[/yellow]")
        return False

    console.print(f"[bold]=== Type: {escape(type_name)} ===[/bold]")
    console.print(f"Description: {escape(definition.description or 'No description')}")
    console.print("Schema:")
    console.print_json(json.dumps(schema_to_dict(definition.schema)))
    if isinstance(definition.schema, CustomSchema) and definition.schema.validator is not None:
        console.print("[dim]Custom validator: attached[/dim]")
    return True


def list_all_types(registry: TypeRegistry, console: Console | None = None) -> None:
    """Print a table of all registered types."""
    console = console or Console()

    table = Table(title="Registered Types")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="white")
    table.add_column("Description", style="dim")

    for name, definition in registry.get_all_types().items():
        table.add_row(escape(name), definition.schema.kind, escape(definition.description or "No description"))

    console.print(table)
