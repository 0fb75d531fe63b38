# ABOUTME: CLI for building and running LinkedIn searches using Typer.
# ABOUTME: Provides configure, payload, search, parameters and lists commands.

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any
from uuid import UUID

import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.syntax import Syntax

from linkedin_search.auth import ApiKeyStore
from linkedin_search.config import Settings, get_settings
from linkedin_search.database import DatabaseService
from linkedin_search.display import (
    ResultTable,
    display_api_error,
    display_api_key_help,
    render_lists_table,
)
from linkedin_search.linkedin.client import SearchApiClient
from linkedin_search.linkedin.exceptions import SearchApiError
from linkedin_search.logging import configure_logging
from linkedin_search.models.results import SearchParametersResponse, SearchResponse
from linkedin_search.search.dispatcher import SearchDispatcher, build_search_request
from linkedin_search.search.orchestrator import SearchOrchestrator
from linkedin_search.search.payloads import Category, Platform

app = typer.Typer(
    name="linkedin-search",
    help="Build and run LinkedIn classic and Sales Navigator searches.",
    add_completion=False,
)

console = Console()

FiltersFileOption = Annotated[
    Path | None,
    typer.Option(
        "--filters",
        "-f",
        help="JSON file holding the filter state.",
        exists=True,
        dir_okay=False,
    ),
]
KeywordsOption = Annotated[
    str | None, typer.Option("--keywords", "-k", help="Keyword search terms.")
]
LocationOption = Annotated[
    list[str] | None,
    typer.Option("--location", "-l", help="Location id; repeat for several."),
]
UrlOption = Annotated[
    str | None, typer.Option("--url", help="LinkedIn search URL; overrides every filter.")
]
PlatformOption = Annotated[
    Platform, typer.Option("--platform", "-p", help="Search API family.")
]
CategoryOption = Annotated[
    Category, typer.Option("--category", "-c", help="Search people or companies.")
]


def _load_filters(
    filters_file: Path | None,
    keywords: str | None,
    location: list[str] | None,
) -> dict[str, Any]:
    """Build a filter state from a JSON file and command-line options.

    Options override keys from the file.

    Raises:
        typer.BadParameter: If the file is not a JSON object.
    """
    filters: dict[str, Any] = {}
    if filters_file is not None:
        try:
            loaded = json.loads(filters_file.read_text())
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"Invalid JSON in {filters_file}: {e}") from None
        if not isinstance(loaded, dict):
            raise typer.BadParameter(f"{filters_file} must contain a JSON object.")
        filters.update(loaded)

    if keywords is not None:
        filters["keywords"] = keywords
    if location:
        filters["location"] = location
    return filters


def _search_input(filters: dict[str, Any], url: str | None) -> dict[str, Any]:
    return {"url": url} if url else filters


def _create_client(settings: Settings) -> SearchApiClient:
    """Create an API client, exiting with help if no key is configured."""
    api_key = ApiKeyStore().resolve_key(settings)
    if not api_key:
        console.print("[red]Error: No API key configured.[/red]")
        console.print()
        console.print(display_api_key_help())
        raise typer.Exit(code=1)
    return SearchApiClient(settings, api_key=api_key)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """LinkedIn search CLI tool.

    Turn filter states into classic or Sales Navigator search requests,
    run them, and save results into lists.
    """
    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)
    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def configure() -> None:
    """Store the search API key in the OS keyring."""
    key_store = ApiKeyStore()
    key = Prompt.ask("[bold]Paste your API key[/bold]", password=True)

    if not key_store.validate_key_format(key):
        console.print("[red]Error: Invalid API key format.[/red]")
        console.print("[dim]The key should be at least 10 characters long.[/dim]")
        raise typer.Exit(code=1)

    key_store.store_key(key)
    console.print("[green]Success! API key stored in the keyring.[/green]")


@app.command()
def payload(
    platform: PlatformOption = Platform.CLASSIC,
    category: CategoryOption = Category.PEOPLE,
    filters_file: FiltersFileOption = None,
    keywords: KeywordsOption = None,
    location: LocationOption = None,
    url: UrlOption = None,
) -> None:
    """Print the request body a search would send, without sending it."""
    filters = _load_filters(filters_file, keywords, location)
    request = build_search_request(_search_input(filters, url), platform, category)
    body = json.dumps(request.to_wire(), indent=2)
    console.print(Syntax(body, "json", theme="ansi_dark", background_color="default"))


async def _run_search(
    settings: Settings,
    account_id: str,
    search_input: dict[str, Any],
    platform: Platform,
    category: Category,
    cursor: str | None,
    limit: int | None,
    save_to_list: UUID | None,
) -> tuple[SearchResponse, int | None]:
    async with _create_client(settings) as client:
        dispatcher = SearchDispatcher(client, default_limit=settings.default_limit)
        if save_to_list is None:
            response = await dispatcher.search(
                account_id, search_input, platform, category, cursor=cursor, limit=limit
            )
            return response, None

        db_service = DatabaseService(db_path=settings.db_path)
        db_service.init_db()
        orchestrator = SearchOrchestrator(dispatcher, db_service)
        return await orchestrator.search_and_save(
            account_id,
            search_input,
            save_to_list,
            platform=platform,
            category=category,
            cursor=cursor,
            limit=limit,
        )


@app.command()
def search(
    account_id: Annotated[
        str, typer.Option("--account-id", "-a", help="Provider account to search with.")
    ],
    platform: PlatformOption = Platform.CLASSIC,
    category: CategoryOption = Category.PEOPLE,
    filters_file: FiltersFileOption = None,
    keywords: KeywordsOption = None,
    location: LocationOption = None,
    url: UrlOption = None,
    cursor: Annotated[
        str | None, typer.Option("--cursor", help="Cursor printed by the previous page.")
    ] = None,
    limit: Annotated[
        int | None, typer.Option("--limit", min=1, max=100, help="Results per page.")
    ] = None,
    save_to_list: Annotated[
        UUID | None, typer.Option("--save-to-list", help="List ID to save the results into.")
    ] = None,
) -> None:
    """Run one page of a people or company search.

    Results are displayed in a table; the cursor for the next page is
    printed when there is one.
    """
    settings = get_settings()
    filters = _load_filters(filters_file, keywords, location)

    try:
        response, saved = asyncio.run(
            _run_search(
                settings,
                account_id,
                _search_input(filters, url),
                platform,
                category,
                cursor,
                limit,
                save_to_list,
            )
        )
    except SearchApiError as e:
        console.print(display_api_error(e))
        raise typer.Exit(code=1) from None

    if response.items:
        table = ResultTable().render(
            response.items,
            category=category,
            title="Search Results",
            start=response.paging.start,
        )
        console.print(table)
        console.print()
        console.print(
            f"[green]Showing {len(response.items)} of {response.paging.total_count} "
            "result(s).[/green]"
        )
    else:
        console.print("[yellow]No results found.[/yellow]")

    if saved is not None:
        console.print(f"[green]Saved {saved} new result(s) to list {save_to_list}.[/green]")
    if response.cursor:
        console.print(f"[dim]Next page: --cursor {response.cursor}[/dim]")


async def _run_parameters(
    settings: Settings, account_id: str, filter_name: str, query: str | None
) -> SearchParametersResponse:
    async with _create_client(settings) as client:
        dispatcher = SearchDispatcher(client, default_limit=settings.default_limit)
        return await dispatcher.lookup_parameters(account_id, filter_name, query)


@app.command()
def parameters(
    filter_name: Annotated[str, typer.Argument(help="Filter to look up, e.g. location.")],
    account_id: Annotated[
        str, typer.Option("--account-id", "-a", help="Provider account to search with.")
    ],
    query: Annotated[
        str | None, typer.Option("--query", "-q", help="Text to match options against.")
    ] = None,
) -> None:
    """Look up autocomplete options (ids) for a filter."""
    settings = get_settings()
    try:
        result = asyncio.run(_run_parameters(settings, account_id, filter_name, query))
    except SearchApiError as e:
        console.print(display_api_error(e))
        raise typer.Exit(code=1) from None

    if not result.items:
        console.print("[yellow]No options found.[/yellow]")
        return
    for item in result.items:
        console.print(f"[cyan]{item.id}[/cyan]  {item.title}")


@app.command()
def lists(
    account_id: Annotated[
        str, typer.Option("--account-id", "-a", help="Provider account owning the lists.")
    ],
    create: Annotated[
        str | None, typer.Option("--create", help="Create a list with this name first.")
    ] = None,
) -> None:
    """Show the lists of an account, optionally creating one."""
    settings = get_settings()
    db_service = DatabaseService(db_path=settings.db_path)
    db_service.init_db()

    if create:
        crm_list = db_service.create_list(create, account_id)
        console.print(f"[green]Created list '{crm_list.name}' ({crm_list.id}).[/green]")

    account_lists = db_service.get_crm_lists(account_id)
    if not account_lists:
        console.print("[dim]No lists yet. Use --create to add one.[/dim]")
        return
    console.print(render_lists_table(account_lists))


if __name__ == "__main__":
    app()
