# ABOUTME: Rich table rendering for search results and lists.
# ABOUTME: Provides ResultTable for people and company results and a list overview table.

from rich.table import Table

from linkedin_search.models.lists import CrmList
from linkedin_search.models.results import SearchResult
from linkedin_search.search.payloads import Category


class ResultTable:
    """Renders SearchResult data as Rich tables.

    People and companies get different columns; long text is truncated
    and rows are numbered from the page start.
    """

    MAX_HEADLINE_LENGTH = 40
    MAX_LOCATION_LENGTH = 20
    MAX_INDUSTRY_LENGTH = 25

    DISTANCE_COLORS: dict[str, str] = {
        "DISTANCE_1": "green",
        "DISTANCE_2": "yellow",
        "DISTANCE_3": "red",
        "OUT_OF_NETWORK": "red",
    }

    def _truncate(self, text: str | None, max_length: int) -> str:
        """Truncate text to max length with ellipsis.

        Args:
            text: The text to truncate, or None.
            max_length: Maximum length before truncation.

        Returns:
            Truncated text with ellipsis, or empty string if None.
        """
        if text is None:
            return ""
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."

    def _get_distance_styled(self, distance: str | None) -> str:
        """Get the network distance with color styling."""
        if not distance:
            return ""
        color = self.DISTANCE_COLORS.get(distance, "white")
        label = distance.removeprefix("DISTANCE_")
        return f"[{color}]{label}[/{color}]"

    def render(
        self,
        results: list[SearchResult],
        category: Category | str = Category.PEOPLE,
        title: str | None = None,
        start: int = 0,
    ) -> Table:
        """Render search results as a Rich Table.

        Args:
            results: Results of one page.
            category: Chooses people or company columns.
            title: Optional title for the table.
            start: Offset of the page, used for row numbers.

        Returns:
            Rich Table with formatted result data.
        """
        table = Table(title=title, show_lines=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("Name", style="cyan", no_wrap=True)

        if Category(category) is Category.COMPANIES:
            table.add_column("Industry", style="white", max_width=self.MAX_INDUSTRY_LENGTH)
            table.add_column("Location", style="green", max_width=self.MAX_LOCATION_LENGTH)
            table.add_column("Followers", style="yellow", justify="right")
            for idx, result in enumerate(results, start + 1):
                followers = "" if result.followers_count is None else f"{result.followers_count:,}"
                table.add_row(
                    str(idx),
                    result.name or "",
                    self._truncate(result.industry, self.MAX_INDUSTRY_LENGTH),
                    self._truncate(result.location, self.MAX_LOCATION_LENGTH),
                    followers,
                )
            return table

        table.add_column("Headline", style="white", max_width=self.MAX_HEADLINE_LENGTH)
        table.add_column("Location", style="green", max_width=self.MAX_LOCATION_LENGTH)
        table.add_column("Degree", style="yellow", width=6)
        for idx, result in enumerate(results, start + 1):
            table.add_row(
                str(idx),
                result.name or "",
                self._truncate(result.headline, self.MAX_HEADLINE_LENGTH),
                self._truncate(result.location, self.MAX_LOCATION_LENGTH),
                self._get_distance_styled(result.network_distance),
            )
        return table


def render_lists_table(lists: list[CrmList]) -> Table:
    """Render an account's lists with their IDs."""
    table = Table(title="Lists", show_lines=False)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Created", style="green")
    for crm_list in lists:
        table.add_row(str(crm_list.id), crm_list.name, crm_list.created_at.strftime("%Y-%m-%d"))
    return table
