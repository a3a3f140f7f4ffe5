"""Main CLI entry point for Lyrics Link."""

import asyncio
import logging

import click
from rich.console import Console
from rich.table import Table

from lyrics_link import __version__
from lyrics_link.core.config import get_settings
from lyrics_link.core.exceptions import LyricsLinkError
from lyrics_link.core.models import MatchTrace
from lyrics_link.matching.resolver import LyricsResolver
from lyrics_link.services.genius import GeniusClient
from lyrics_link.services.youtube import YouTubeMetadataClient

console = Console()

# Lazy-loaded resolver
_resolver: LyricsResolver | None = None


def get_resolver() -> LyricsResolver:
    """Get or create the lyrics resolver."""
    global _resolver
    if _resolver is None:
        settings = get_settings()
        _resolver = LyricsResolver(
            GeniusClient(settings),
            strategy=settings.match_strategy,
            cache_size=settings.match_cache_size,
        )
    return _resolver


def print_trace(trace: MatchTrace) -> None:
    """Render a match trace as one table per query."""
    console.print(f"\n[bold]Reason:[/bold] {trace.reason}  [dim](strategy: {trace.strategy})[/dim]")
    if trace.base_title:
        console.print(f"[bold]Base title:[/bold] {trace.base_title}")
    if trace.cover_detected:
        console.print("[yellow]Cover marker detected[/yellow]")

    for step in trace.steps:
        table = Table(title=f"{step.query.label}: {step.query.text}", title_justify="left")
        table.add_column("ID", style="dim")
        table.add_column("Title", style="green")
        table.add_column("Artist", style="cyan")
        table.add_column("Decision", style="magenta")
        for decision in step.examined:
            table.add_row(str(decision.id), decision.title, decision.artist, decision.outcome)
        if step.error:
            console.print(f"[red]{step.query.label}: {step.error}[/red]")
        console.print(table)


async def _resolve(title: str, artist: str, want_trace: bool):
    resolver = get_resolver()
    try:
        return await resolver.resolve(title, artist, want_trace=want_trace)
    finally:
        await resolver.search_client.close()


@click.group()
@click.version_option(version=__version__, prog_name="lyrics-link")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Lyrics Link - Find the Genius lyrics page for a music video."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )


@cli.command()
@click.argument("title")
@click.option("--artist", "-a", default="", help="Artist as displayed on the video")
@click.option("--trace", "show_trace", is_flag=True, help="Show every query and candidate decision")
def resolve(title: str, artist: str, show_trace: bool) -> None:
    """Find the lyrics page for TITLE."""
    if not get_settings().has_genius_token:
        console.print("[red]GENIUS_ACCESS_TOKEN is not set[/red]")
        raise SystemExit(1)

    with console.status(f"Searching lyrics for '{title}'..."):
        result = asyncio.run(_resolve(title, artist, show_trace))

    if result.url:
        console.print(f"[green]{result.url}[/green]")
    else:
        console.print("[yellow]No lyrics page found[/yellow]")

    if show_trace and result.trace:
        print_trace(result.trace)


@cli.command()
@click.argument("title")
@click.option("--artist", "-a", default="", help="Artist as displayed on the video")
def plan(title: str, artist: str) -> None:
    """Show the search queries that would be issued for TITLE."""
    queries = get_resolver().plan(title, artist)

    table = Table(title=f"Search plan: {title}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Label", style="cyan")
    table.add_column("Query", style="green")
    table.add_column("Artist check", justify="center")

    for i, query in enumerate(queries, 1):
        table.add_row(str(i), query.label, query.text, "yes" if query.require_artist_match else "no")

    console.print(table)


@cli.command()
@click.argument("title")
@click.option("--artist", "-a", default="", help="Artist as displayed on the video")
def variants(title: str, artist: str) -> None:
    """Show the canonical forms generated for TITLE."""
    result = get_resolver().variants(title, artist)
    parsed = result.parsed

    console.print(f"\n[bold]Base:[/bold] {parsed.base_text or '-'}")
    if parsed.feature_tail:
        console.print(f"[bold]Feature:[/bold] {' '.join(parsed.feature_tail)}")
    if parsed.fragments:
        console.print(f"[bold]Fragments:[/bold] {' / '.join(parsed.fragments)}")
    if parsed.cover_detected:
        console.print("[yellow]Cover marker detected[/yellow]")

    if parsed.parens:
        table = Table(title="Parentheticals")
        table.add_column("Text", style="green")
        table.add_column("Role", style="cyan")
        for paren in parsed.parens:
            table.add_row(paren.inner_text, paren.role.value)
        console.print(table)

    console.print("\n[bold]Forms[/bold]")
    for form in result.sorted_forms():
        marker = " [dim](romanization)[/dim]" if form in result.romanizations else ""
        console.print(f"  {form}{marker}")


@cli.command()
@click.argument("video_id")
@click.option("--trace", "show_trace", is_flag=True, help="Show every query and candidate decision")
def track(video_id: str, show_trace: bool) -> None:
    """Look up the song card of VIDEO_ID and its lyrics page."""
    youtube = YouTubeMetadataClient()
    try:
        with console.status(f"Fetching video info for {video_id}..."):
            metadata = asyncio.run(youtube.get_video_metadata(video_id))
    except LyricsLinkError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if metadata is None:
        console.print("[yellow]Not a music video (no song card)[/yellow]")
        return

    console.print(f"[bold]Title:[/bold]  {metadata.title}")
    console.print(f"[bold]Artist:[/bold] {metadata.artist}")
    if metadata.thumbnail_url:
        console.print(f"[dim]{metadata.thumbnail_url}[/dim]")

    with console.status("Searching lyrics..."):
        result = asyncio.run(_resolve(metadata.title, metadata.artist, show_trace))

    if result.url:
        console.print(f"[green]{result.url}[/green]")
    else:
        console.print("[yellow]No lyrics page found[/yellow]")

    if show_trace and result.trace:
        print_trace(result.trace)


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to API_HOST)")
@click.option("--port", default=None, type=int, help="Port (defaults to API_PORT)")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("backend.main:app", host=host or settings.api_host, port=port or settings.api_port)


if __name__ == "__main__":
    cli()
