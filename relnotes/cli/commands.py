"""
CLI commands for the Release Notes Viewer.

All Click commands are defined here. Every command loads the changelog
fresh, either from the configured URL or from --file.
"""

import sys

import click
from rich.markup import escape

from ..config import AppConfig, ConfigError, load_config
from ..core.fetcher import ChangelogFetchError
from ..core.parser import to_markdown
from ..core.store import FAILURE_MESSAGE, ReleaseStore
from ..ui import (
    console, print_header, print_stats, print_releases_list,
    print_release_detail, print_search_results, run_web_server
)


def load_config_safe(config_path: str) -> dict:
    """
    Load configuration with user-friendly error handling.

    Args:
        config_path: Path to config file, or None for defaults

    Returns:
        Configuration dict
    """
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def load_store(ctx) -> ReleaseStore:
    """Create a store and load the changelog, exiting on failure."""
    config = load_config_safe(ctx.obj['config_path'])
    store = ReleaseStore(config)

    try:
        if ctx.obj.get('changelog_file'):
            store.load_file(ctx.obj['changelog_file'])
        else:
            store.refresh()
    except ChangelogFetchError as e:
        console.print(f"[red]{FAILURE_MESSAGE}[/red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        sys.exit(1)

    return store


@click.group()
@click.option('--config', '-c', default=None, help='Path to config file')
@click.option('--file', '-f', 'changelog_file', default=None,
              type=click.Path(dir_okay=False),
              help='Read a local changelog instead of fetching it')
@click.pass_context
def cli(ctx, config, changelog_file):
    """Release Notes Viewer - searchable, categorized changelog history."""
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['changelog_file'] = changelog_file


@cli.command('list')
@click.option('--limit', '-n', type=int, default=None, help='Show only the newest N releases')
@click.pass_context
def list_releases(ctx, limit):
    """List all releases with category counts."""
    print_header()
    store = load_store(ctx)
    releases = store.releases

    if not releases:
        console.print("[yellow]No versions found.[/yellow]")
        return

    print_releases_list(releases, limit=limit)


@cli.command()
@click.argument('version')
@click.pass_context
def show(ctx, version):
    """Show the categorized changes of one release."""
    store = load_store(ctx)
    release = store.get_release(version)

    if not release:
        console.print(f"[red]Release {escape(version)} not found.[/red]")
        sys.exit(1)

    print_release_detail(release)


@cli.command()
@click.argument('query')
@click.pass_context
def search(ctx, query):
    """Search versions and change text (case-insensitive)."""
    store = load_store(ctx)
    print_search_results(store.search(query), query)


@cli.command()
@click.pass_context
def stats(ctx):
    """Show changelog statistics."""
    print_header()
    store = load_store(ctx)
    print_stats(store)


@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None,
              help='Write to a file instead of stdout')
@click.pass_context
def export(ctx, output):
    """Export the parsed version/bullet skeleton as markdown."""
    store = load_store(ctx)
    markdown = to_markdown(store.releases)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(markdown)
        console.print(f"[green]Wrote {len(store.releases)} releases to {escape(output)}[/green]")
    else:
        click.echo(markdown, nl=False)


@cli.command()
@click.option('--host', '-H', default=None, help='Host to bind to')
@click.option('--port', '-p', type=int, default=None, help='Port to run server on')
@click.pass_context
def serve(ctx, host, port):
    """Start the web interface."""
    print_header()
    config = load_config_safe(ctx.obj['config_path'])
    app_config = AppConfig.from_dict(config)
    store = ReleaseStore(config)

    # The page shows the failure message if the first load fails
    try:
        if ctx.obj.get('changelog_file'):
            store.load_file(ctx.obj['changelog_file'])
        else:
            store.refresh()
        console.print(f"[blue]Loaded {len(store.releases)} releases.[/blue]")
    except ChangelogFetchError as e:
        console.print(f"[yellow]Warning: {escape(str(e))}[/yellow]")

    run_web_server(
        store,
        config,
        host=host or app_config.web.host,
        port=port or app_config.web.port
    )
