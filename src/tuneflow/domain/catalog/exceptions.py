"""YouTube-specific exceptions for error handling.

These never escape the search gateway; they classify failures before it
falls back to demo results.
"""


class YouTubeError(Exception):
    """Base exception for YouTube operations."""

    pass


class YouTubeRequestError(YouTubeError):
    """Raised when a Data API request fails at the transport or HTTP level."""

    def __init__(self, endpoint: str, status_code: int | None = None, message: str | None = None):
        self.endpoint = endpoint
        self.status_code = status_code
        detail = f"HTTP {status_code}" if status_code is not None else "transport error"
        super().__init__(message or f"YouTube {endpoint} request failed ({detail})")


class YouTubeResponseError(YouTubeError):
    """Raised when a Data API response does not have the expected shape."""

    pass
