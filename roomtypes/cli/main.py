"""Room types CLI commands.

Inspect the registered room kinds and evaluate access decisions against
rooms stored as JSON files.

Commands:
- roomtypes types
- roomtypes sections
- roomtypes read-only <room_id> [--user NAME] [--grant PERMISSION]
- roomtypes route <type> [--name NAME] [--rid RID]
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from roomtypes import __logo__
from roomtypes.config.loader import load_config
from roomtypes.errors import MissingReferenceType
from roomtypes.models.room import RoomUser
from roomtypes.models.room_type import RoomTypeConfig
from roomtypes.rooms.service import RoomTypes
from roomtypes.stores.json_store import JsonRoomStore
from roomtypes.stores.memory import (
    InMemorySubscriptionStore,
    RecordingRouter,
    StaticPermissionEngine,
)
from roomtypes.utils.logging import configure_logging

console = Console()

app = typer.Typer(
    name="roomtypes",
    help=f"{__logo__} roomtypes - room type registry and access policy",
    no_args_is_help=True,
)


def _build_room_types(
    config_path: Optional[Path],
    rooms_dir: Optional[Path],
    grants: Optional[List[str]] = None,
) -> RoomTypes:
    """Create a bootstrapped RoomTypes wired to the JSON room store."""
    config = load_config(config_path)
    configure_logging(config.logging)

    room_types = RoomTypes(
        rooms=JsonRoomStore(rooms_dir or config.storage.rooms_path),
        subscriptions=InMemorySubscriptionStore(),
        permissions=StaticPermissionEngine(global_grants=grants or []),
        router=RecordingRouter(),
        config=config,
    )
    try:
        room_types.bootstrap()
    except MissingReferenceType as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)
    return room_types


def _route_name(config: RoomTypeConfig) -> str:
    return config.route.name if config.route else "-"


@app.command("types")
def list_types(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """List enabled room types in display order."""
    room_types = _build_room_types(config_path, None)

    table = Table(title=f"{__logo__} Room Types")
    table.add_column("Type", style="cyan")
    table.add_column("Order", justify="right")
    table.add_column("Route", style="green")
    table.add_column("Label")

    for config in room_types.get_types():
        table.add_row(config.identifier, str(config.order), _route_name(config), config.label)

    console.print(table)


@app.command("sections")
def show_sections(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """Show room types before, inside and after the standard section."""
    room_types = _build_room_types(config_path, None)

    sections = room_types.classify_by_section()

    for title, configs in (
        ("Before", sections.before),
        ("Standard", sections.standard),
        ("After", sections.after),
    ):
        identifiers = ", ".join(c.identifier for c in configs) or "[dim]none[/dim]"
        console.print(f"[bold blue]{title}:[/bold blue] {identifiers}")


@app.command("read-only")
def check_read_only(
    room_id: str,
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Acting username (anonymous if omitted)"),
    grant: Optional[List[str]] = typer.Option(None, "--grant", "-g", help="Permission held by the user"),
    rooms_dir: Optional[Path] = typer.Option(None, "--rooms-dir", "-r", help="Directory of room JSON files"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """Resolve whether a room is read-only for a user."""
    room_types = _build_room_types(config_path, rooms_dir, grant)
    acting = RoomUser(username=user) if user else None

    result = room_types.resolve_read_only(room_id, acting)
    who = user or "anonymous"

    if result is None:
        console.print(f"[red]✗[/red] Room '{room_id}' not found")
        raise typer.Exit(1)
    if result:
        console.print(f"[yellow]read-only[/yellow] {room_id} for {who}")
    else:
        console.print(f"[green]writable[/green] {room_id} for {who}")


@app.command("route")
def show_route(
    room_type: str,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Subscription room name"),
    rid: Optional[str] = typer.Option(None, "--rid", help="Subscription room id"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """Resolve the route target for a room type."""
    room_types = _build_room_types(config_path, None)

    sub_data = {key: value for key, value in (("name", name), ("rid", rid)) if value}
    target = room_types.resolve_route(room_type, sub_data)
    if target is None:
        console.print(f"[red]✗[/red] Unknown room type '{room_type}'")
        raise typer.Exit(1)

    console.print(f"[bold blue]Route:[/bold blue] {target.name or '-'}")
    console.print(f"[bold blue]Params:[/bold blue] {target.params}")
    link = room_types.get_route_link(room_type, sub_data)
    if link:
        console.print(f"[bold blue]Link:[/bold blue] {link}")


if __name__ == "__main__":
    app()
