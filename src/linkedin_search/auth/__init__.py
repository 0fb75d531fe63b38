# ABOUTME: Authentication package for API key storage.
# ABOUTME: Exports ApiKeyStore for keeping the search API key in the OS keyring.

from linkedin_search.auth.key_store import ApiKeyStore

__all__ = ["ApiKeyStore"]
