"""
Terminal UI for the Release Notes Viewer.
Provides Rich output for the CLI and the web server launcher.
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .core.classifier import NEW_FEATURES, IMPROVEMENTS, BUG_FIXES, BREAKING_CHANGES
from .core.models import Release
from .core.store import ReleaseStore


# Terminal UI using Rich
console = Console()

CATEGORY_STYLES = {
    NEW_FEATURES: "green",
    IMPROVEMENTS: "blue",
    BUG_FIXES: "yellow",
    BREAKING_CHANGES: "red",
}


def print_header():
    """Print application header."""
    console.print(Panel.fit(
        "[bold blue]Release Notes Viewer[/bold blue]\n"
        "[dim]Searchable, categorized changelog history[/dim]",
        border_style="blue"
    ))


def print_stats(store: ReleaseStore):
    """Print summary statistics."""
    stats = store.stats()

    table = Table(title="Changelog Statistics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Releases", str(stats['total_releases']))
    table.add_row("Changes", str(stats['total_changes']))
    table.add_row("Latest version", escape(stats['latest_version'] or "-"))
    if store.refreshed_at:
        table.add_row("Loaded at", store.refreshed_at.strftime("%Y-%m-%d %H:%M:%S"))

    for category, count in stats['categories'].items():
        style = CATEGORY_STYLES.get(category, "white")
        table.add_row(f"[{style}]{category.title()}[/{style}]", str(count))

    console.print(table)


def print_releases_list(releases: List[Release], limit: Optional[int] = None):
    """Print a table of releases with per-category entry counts."""
    shown = releases[:limit] if limit else releases

    table = Table(title="Releases")
    table.add_column("Version", style="cyan")
    table.add_column("New", justify="right", style=CATEGORY_STYLES[NEW_FEATURES])
    table.add_column("Improved", justify="right", style=CATEGORY_STYLES[IMPROVEMENTS])
    table.add_column("Fixed", justify="right", style=CATEGORY_STYLES[BUG_FIXES])
    table.add_column("Breaking", justify="right", style=CATEGORY_STYLES[BREAKING_CHANGES])
    table.add_column("Total", justify="right", style="bold")

    for release in shown:
        counts = release.category_counts()
        table.add_row(
            escape(release.version),
            str(counts[NEW_FEATURES] or "-"),
            str(counts[IMPROVEMENTS] or "-"),
            str(counts[BUG_FIXES] or "-"),
            str(counts[BREAKING_CHANGES] or "-"),
            str(release.change_count),
        )

    console.print(table)

    if len(shown) < len(releases):
        console.print(f"[dim]... {len(releases) - len(shown)} older releases not shown[/dim]")


def render_release(release: Release, query: Optional[str] = None) -> Text:
    """Build the categorized body of a release, highlighting query matches."""
    body = Text()

    if not release.categorized_changes:
        body.append("No changes listed.", style="dim")
        return body

    for category, items in release.categorized_changes.items():
        if body:
            body.append("\n")
        body.append(f"{category}\n", style=f"bold {CATEGORY_STYLES.get(category, 'white')}")

        for item in items:
            line = Text(f"  • {item}")
            if query:
                line.highlight_words([query], style="reverse", case_sensitive=False)
            body.append(line)
            body.append("\n")

    body.rstrip()
    return body


def print_release_detail(release: Release, query: Optional[str] = None):
    """Print one release with its categorized changes."""
    console.print(Panel(
        render_release(release, query),
        title=Text(release.version, style="bold cyan"),
        title_align="left",
        border_style="blue"
    ))


def print_search_results(releases: List[Release], query: str):
    """Print every release matching a search query."""
    if not releases:
        console.print(f"[yellow]No releases found for '{escape(query)}'.[/yellow]")
        return

    console.print(f"\n[bold green]Found {len(releases)} matching releases:[/bold green]\n")

    for release in releases:
        print_release_detail(release, query)


def run_web_server(store: ReleaseStore, config: dict, host: str = "127.0.0.1", port: int = 8080):
    """Run the web server."""
    from .api.app import create_app

    app = create_app(config, store)
    console.print(f"[green]Starting web server at http://{host}:{port}[/green]")
    app.run(host=host, port=port, debug=False, threaded=True)
