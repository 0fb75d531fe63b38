# ABOUTME: Database package for list persistence.
# ABOUTME: Provides the ListStore contract and DatabaseService, its SQLite implementation.

from linkedin_search.database.service import DatabaseService
from linkedin_search.database.store import ListStore

__all__ = ["DatabaseService", "ListStore"]
