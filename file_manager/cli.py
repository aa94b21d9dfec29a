"""CLI interface for the File Manager tools."""

import locale
import logging
import sys
from typing import Dict, Tuple

import click

from .settings import settings
from .tools import FileManagerTools

# Configure logging
logging.basicConfig(
    level=settings.server.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

try:
    # Listing timestamps use the user's date format
    locale.setlocale(locale.LC_TIME, "")
except locale.Error as e:
    logger.warning(f"Locale konnte nicht gesetzt werden: {e}")


def parse_arguments(pairs: Tuple[str, ...]) -> Dict[str, object]:
    """
    Parse ``key=value`` pairs into a tool argument mapping.

    Values that look like integers become ints ("limit=5"), everything else
    stays a string.

    Raises:
        click.BadParameter: If a pair has no '='
    """
    arguments: Dict[str, object] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Expected key=value, got: {pair}", param_hint="--arg")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise click.BadParameter(f"Empty argument name in: {pair}", param_hint="--arg")
        arguments[key] = int(value) if value.lstrip("-").isdigit() else value
    return arguments


def _emit(result) -> None:
    if result.is_error:
        click.echo(f"❌ {result.text}", err=True)
        sys.exit(1)
    click.echo(result.text)


@click.group()
def cli():
    """File Manager - organize Downloads and Documents from the command line."""
    pass


@cli.command("tools")
def list_tools():
    """List all available tools."""
    for tool in FileManagerTools().list_tools():
        schema = tool["inputSchema"]
        required = set(schema["required"])
        params = ", ".join(
            name if name in required else f"[{name}]"
            for name in schema["properties"]
        )
        click.echo(f"{tool['name']}({params})")
        click.echo(f"    {tool['description']}")


@cli.command()
@click.argument("name")
@click.option(
    "-a", "--arg",
    "pairs",
    multiple=True,
    help="Tool argument as key=value (repeatable)",
)
def call(name, pairs):
    """Call a tool by NAME.

    Beispiel:
        python -m file_manager.cli call move_file -a filename=report.pdf -a destination_folder=Reports
    """
    _emit(FileManagerTools().call(name, parse_arguments(pairs)))


@cli.command()
@click.argument("directory", default="downloads")
@click.option(
    "-t", "--type",
    "file_type",
    default="",
    help="Only show files with this extension (e.g. zip, pdf, svg)",
)
@click.option(
    "-n", "--limit",
    default=None,
    type=int,
    help="Maximum number of files to show",
)
def ls(directory, file_type, limit):
    """List files in DIRECTORY, newest first (defaults to downloads)."""
    arguments = {"directory": directory, "file_type": file_type}
    if limit is not None:
        arguments["limit"] = limit
    _emit(FileManagerTools().call("list_files", arguments))


@cli.command()
def health():
    """Check that the Downloads and Documents directories exist."""
    roots = settings.roots
    ok = True
    for name, path in (("Downloads", roots.downloads), ("Documents", roots.documents)):
        if path.is_dir():
            click.echo(f"✅ {name}: {path}")
        else:
            click.echo(f"❌ {name} not found: {path}", err=True)
            ok = False

    sys.exit(0 if ok else 1)


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind the server to",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to run the server on",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload for development",
)
def serve(host, port, reload):
    """Start the HTTP tool server."""
    host = host or settings.server.host
    port = port or settings.server.port

    click.echo("🚀 Starting File Manager Tool Server...")
    click.echo(f"   Host: {host}")
    click.echo(f"   Port: {port}")
    click.echo(f"   OpenAPI Docs: http://{host}:{port}/docs")
    click.echo()

    try:
        from .api import run_server
        run_server(host=host, port=port, reload=reload)
    except ImportError as e:
        click.echo(f"❌ API dependencies missing: {e}", err=True)
        click.echo("   Install with: pip install fastapi uvicorn", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
