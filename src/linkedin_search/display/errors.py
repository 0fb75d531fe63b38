# ABOUTME: Error display helpers for formatting error messages with Rich.
# ABOUTME: Provides user-friendly error panels for API key problems, forbidden features and network errors.

from rich.panel import Panel
from rich.text import Text

from linkedin_search.linkedin.exceptions import (
    SearchApiAuthError,
    SearchApiConnectionError,
    SearchApiError,
    SearchApiForbiddenError,
    SearchApiRateLimitError,
)


def display_api_key_help() -> Panel:
    """Display help for configuring the search API key.

    Returns:
        A Rich Panel explaining the two ways to provide the key.
    """
    help_text = """[bold cyan]The search API rejected the request key.[/bold cyan]

Provide a valid key in one of two ways:

1. Store it in the OS keyring:  [bold]linkedin-search configure[/bold]
2. Export [bold yellow]LINKEDIN_SEARCH_API_KEY[/bold yellow] (takes precedence over the keyring)"""

    return Panel(
        Text.from_markup(help_text),
        title="API Key Help",
        border_style="cyan",
        padding=(1, 2),
    )


def display_network_error(error: Exception) -> Panel:
    """Display a user-friendly message for network errors.

    Args:
        error: The network-related exception.

    Returns:
        A Rich Panel with suggestions.
    """
    message = Text()
    message.append("Network Error\n\n", style="bold red")
    message.append(f"{error}\n\n", style="red")
    message.append("Suggestions:\n", style="bold")
    message.append("• Check your internet connection\n", style="dim")
    message.append("• Check LINKEDIN_SEARCH_BASE_URL\n", style="dim")
    message.append("• The search API may be temporarily unavailable", style="dim")

    return Panel(
        message,
        title="Connection Error",
        border_style="red",
        padding=(1, 2),
    )


def display_api_error(error: SearchApiError) -> Panel:
    """Pick the panel matching a search API error.

    Forbidden responses show the raw body, since it names the feature the
    account is missing (e.g. a Sales Navigator subscription).
    """
    if isinstance(error, SearchApiAuthError):
        return display_api_key_help()
    if isinstance(error, SearchApiConnectionError):
        return display_network_error(error)

    message = Text()
    if isinstance(error, SearchApiForbiddenError):
        message.append("The account is not allowed to run this search.\n\n", style="bold red")
        message.append(error.body or str(error), style="yellow")
        title = "Forbidden"
    elif isinstance(error, SearchApiRateLimitError):
        message.append("The provider rate limit was reached.\n\n", style="bold red")
        message.append("Wait a few minutes and try again.", style="dim")
        title = "Rate Limited"
    else:
        message.append(str(error), style="red")
        title = "Search API Error"

    return Panel(message, title=title, border_style="red", padding=(1, 2))
