"""Command-line interface for ns-tools.

Commands:
    - format-permission: Render an octal permission mask as ``rwx`` text
    - format-date: Render epoch milliseconds the way the namespace shell does
    - wire-options: Show the wire listing options for a load metadata policy
"""

from datetime import timezone
from typing import Annotated, Optional

import typer

from . import __version__
from .attributes import convert_ms_to_date, format_permission
from .core.exceptions import ValidationError
from .options import ListingOptions
from .schemas import LoadMetadataType

app = typer.Typer(
    name="ns-tools",
    help="Helpers for namespace listing options and path attributes.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"ns-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    NS-Tools: listing options and attribute helpers for namespace clients.
    """
    pass


def parse_permission(mode: str) -> int:
    """Parse an octal permission string such as ``755`` or ``0o644``.

    Raises:
        ValidationError: If mode is not an octal number
    """
    digits = mode.lower()
    if digits.startswith("0o"):
        digits = digits[2:]
    try:
        return int(digits, 8)
    except ValueError:
        raise ValidationError(f"Invalid octal permission: {mode}")


@app.command("format-permission")
def format_permission_cmd(
    mode: Annotated[str, typer.Argument(help="Octal permission mask, e.g. 755")],
    directory: Annotated[
        bool, typer.Option("--dir", "-d", help="Format the mask for a directory")
    ] = False,
) -> None:
    """
    Render a permission mask as a ten character string.

    Examples:
        ns-tools format-permission 755 --dir
    """
    try:
        typer.echo(format_permission(parse_permission(mode), directory))
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("format-date")
def format_date_cmd(
    millis: Annotated[int, typer.Argument(help="Milliseconds since the epoch")],
    utc: Annotated[
        bool, typer.Option("--utc", help="Render in UTC instead of local time")
    ] = False,
) -> None:
    """
    Render epoch milliseconds as MM-dd-yyyy HH:mm:ss:SSS.
    """
    try:
        typer.echo(convert_ms_to_date(millis, timezone.utc if utc else None))
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("wire-options")
def wire_options_cmd(
    policy: Annotated[
        LoadMetadataType,
        typer.Option("--policy", "-p", help="Load metadata policy", case_sensitive=False),
    ] = LoadMetadataType.once,
) -> None:
    """
    Show the wire listing options sent for a load metadata policy.
    """
    options = ListingOptions.defaults()
    options.metadata_load_policy = policy
    typer.echo(options.to_wire_options().model_dump_json())


if __name__ == "__main__":
    app()
