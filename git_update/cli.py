"""
Command-line interface for git-update
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from git_update import __version__
from git_update.core.config import get_settings
from git_update.core.exceptions import GitUpdateError
from git_update.host import GitUpdate, JsonInventory, UpdateTransient
from git_update.storage.error_log import ErrorLog
from git_update.storage.options import JsonFileOptionStore

console = Console()

BODY_PREVIEW_CHARS = 200


def _error_log() -> ErrorLog:
    settings = get_settings()
    return ErrorLog(JsonFileOptionStore(settings.options_file), capacity=settings.error_log_capacity)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """git-update - updates for themes and plugins hosted on GitHub"""
    try:
        level = "DEBUG" if verbose else get_settings().log_level.upper()
    except GitUpdateError as e:
        raise click.ClickException(str(e))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@main.command()
@click.argument("plugins", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--themes",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON inventory of installed themes",
)
def check(plugins: Path, themes: Path | None) -> None:
    """Check extensions listed in a JSON inventory for newer tags"""
    plugin_inventory = JsonInventory(plugins)
    theme_inventory = JsonInventory(themes) if themes else None

    try:
        updater = GitUpdate.from_settings(plugins=plugin_inventory, themes=theme_inventory)
        newest_error = updater.engine.error_log.load()[:1]
        try:
            # Act as the host: mark every listed extension as already checked
            checked = {}
            for inventory in filter(None, (plugin_inventory, theme_inventory)):
                for identifier, headers in inventory.list_extensions().items():
                    checked[identifier] = str(headers.get("Version", ""))

            transient = UpdateTransient(checked=checked)
            updater.check_plugins(transient)
            updater.check_themes(transient)
        finally:
            updater.close()
    except GitUpdateError as e:
        raise click.ClickException(str(e))

    if not transient.response:
        console.print("[green]No updates available.[/green]")
    else:
        table = Table(title="Available Updates", show_header=True, header_style="bold cyan")
        table.add_column("Extension", style="white")
        table.add_column("Installed", style="dim")
        table.add_column("Available", style="green")
        table.add_column("Package", style="dim")

        for identifier, decision in sorted(transient.response.items()):
            table.add_row(identifier, checked.get(identifier, ""), decision.new_version, decision.package)

        console.print(table)

    if updater.engine.error_log.load()[:1] != newest_error:
        console.print("[yellow]Some checks failed. Run 'git-update log' for details.[/yellow]")


@main.command()
@click.option("--body", is_flag=True, help="Show the full response body")
def log(body: bool) -> None:
    """Show the most recent failed remote checks"""
    entries = _error_log().load()
    if not entries:
        console.print("No logs found.")
        return

    table = Table(title="Git Update Error Logs", show_header=True, header_style="bold cyan")
    table.add_column("Extension", style="white")
    table.add_column("Time", style="dim")
    table.add_column("Failure", style="red")
    table.add_column("Response", style="dim")

    for entry in entries:
        response = str(entry.body or "")
        if not body and len(response) > BODY_PREVIEW_CHARS:
            response = response[:BODY_PREVIEW_CHARS] + "..."
        table.add_row(entry.item, entry.time.strftime("%a, %d %b %Y %H:%M:%S %z"), entry.detail, response)

    console.print(table)


@main.command("clear-log")
def clear_log() -> None:
    """Delete all recorded failures"""
    _error_log().clear()
    console.print("[green]Error log cleared.[/green]")


if __name__ == "__main__":
    main()
