# ABOUTME: Custom exceptions for search API operations.
# ABOUTME: Provides specific error types for auth failures, forbidden features, rate limits and transport errors.

from linkedin_search.errors import LinkedInSearchError


class SearchApiError(LinkedInSearchError):
    """Base exception for all search API errors.

    Attributes:
        status_code: HTTP status of the failed response, if there was one.
        body: Raw response text, kept verbatim for callers that inspect it.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SearchApiAuthError(SearchApiError):
    """Exception raised when the API key is missing, invalid or revoked."""

    pass


class SearchApiForbiddenError(SearchApiError):
    """Exception raised on 403, e.g. a Sales Navigator feature the account lacks."""

    pass


class SearchApiRateLimitError(SearchApiError):
    """Exception raised when the provider's rate limiting is triggered."""

    pass


class SearchApiConnectionError(SearchApiError):
    """Exception raised when the request never produced a response."""

    pass
