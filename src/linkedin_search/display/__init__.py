# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports ResultTable and error panels for the CLI.

from linkedin_search.display.errors import (
    display_api_error,
    display_api_key_help,
    display_network_error,
)
from linkedin_search.display.tables import ResultTable, render_lists_table

__all__ = [
    "ResultTable",
    "display_api_error",
    "display_api_key_help",
    "display_network_error",
    "render_lists_table",
]
