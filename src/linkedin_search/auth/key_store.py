# ABOUTME: API key store backed by the OS keyring.
# ABOUTME: Keeps the X-API-KEY token out of config files; settings override it when set.

import keyring

from linkedin_search.config import Settings


class ApiKeyStore:
    """Service for storing the search API key in the OS keyring."""

    SERVICE_NAME = "linkedin-search"
    USERNAME = "api-key"
    MIN_KEY_LENGTH = 10

    def validate_key_format(self, key: str) -> bool:
        """Validate the format of an API key.

        Performs basic validation: checks for non-empty, reasonable length.

        Args:
            key: The key string to validate.

        Returns:
            True if the key format appears valid, False otherwise.
        """
        if not key or not key.strip():
            return False
        return len(key.strip()) >= self.MIN_KEY_LENGTH

    def store_key(self, key: str) -> None:
        """Store the API key in the OS keyring."""
        keyring.set_password(self.SERVICE_NAME, self.USERNAME, key.strip())

    def get_key(self) -> str | None:
        """Retrieve the API key from the OS keyring, or None if none is stored."""
        return keyring.get_password(self.SERVICE_NAME, self.USERNAME)

    def delete_key(self) -> None:
        """Delete the stored API key."""
        keyring.delete_password(self.SERVICE_NAME, self.USERNAME)

    def resolve_key(self, settings: Settings) -> str | None:
        """Return the key from settings, falling back to the keyring.

        Args:
            settings: Application settings; a configured api_key wins.

        Returns:
            The API key to use, or None if none is configured anywhere.
        """
        if settings.api_key:
            return settings.api_key
        return self.get_key()
