"""Command-line interface for complexity-radar."""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from complexity_radar import __version__
from complexity_radar.async_client import AsyncRadarClient
from complexity_radar.exceptions import RadarError
from complexity_radar.logging import configure_logging
from complexity_radar.radar import DEFAULT_MAX_CONCURRENCY
from complexity_radar.report import print_report
from complexity_radar.types.files import RankedResult

DEFAULT_BASE_URL = "https://api.github.com"

app = typer.Typer(
    name="complexity-radar",
    help="List the files of a repository changed most often in the last year.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"complexity-radar {__version__}")
        raise typer.Exit()


async def _fetch_top_files(
    token: str,
    base_url: str,
    concurrency: int,
    num_rows: int,
    owner: str,
    repo: str,
) -> RankedResult:
    async with AsyncRadarClient(
        token=token, base_url=base_url, max_concurrency=concurrency
    ) as client:
        return await client.get_top_changed_files(num_rows, owner, repo)


@app.command()
def main(
    github_user: str = typer.Option(
        ...,
        "--github-user",
        "-u",
        help="Owner (user or organization) of the repository",
    ),
    github_repo: str = typer.Option(
        ...,
        "--github-repo",
        "-r",
        help="Repository name",
    ),
    num_rows: int = typer.Option(
        5,
        "--num-rows",
        "-n",
        help="Number of files to list",
        min=1,
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        "-t",
        envvar="GITHUB_TOKEN",
        show_envvar=False,
        help="API token [env: GITHUB_TOKEN]",
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL,
        "--base-url",
        "-b",
        envvar="GITHUB_API_URL",
        help="API base URL, for self-hosted forges",
    ),
    concurrency: int = typer.Option(
        DEFAULT_MAX_CONCURRENCY,
        "--concurrency",
        "-c",
        help="Maximum number of commits fetched in parallel",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Rank files by the number of commits that touched them in the last 365 days."""
    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        handler=RichHandler(console=err_console, show_path=False),
        format_string="%(message)s",
    )

    if not token:
        err_console.print(
            "[red]Error:[/red] no API token; pass --token or set GITHUB_TOKEN"
        )
        raise typer.Exit(code=1)

    try:
        top_files = asyncio.run(
            _fetch_top_files(
                token, base_url, concurrency, num_rows, github_user, github_repo
            )
        )
    except RadarError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    print_report(top_files, console=console, title=f"{github_user}/{github_repo}")


if __name__ == "__main__":
    app()
