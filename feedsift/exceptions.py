"""Exception hierarchy for feedsift."""

from typing import Any


class FeedsiftError(Exception):
    """Base exception for all feedsift errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize feedsift error.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_message": str(self),
            "context": self.context,
        }


class ParseFailure(FeedsiftError):
    """Unexpected fault while extracting a feed from its document."""

    def __init__(self, cause: BaseException):
        super().__init__(
            f"Failed to parse RSS XML: {cause}",
            context={"cause_type": type(cause).__name__},
        )
        self.cause = cause


class TransportFailure(FeedsiftError):
    """The feed document could not be retrieved."""

    def __init__(self, message: str, feed_url: str | None = None, **kwargs):
        context = kwargs.pop("context", {})
        if feed_url:
            context["feed_url"] = feed_url
        super().__init__(message, context=context)
        self.feed_url = feed_url


class HttpStatusError(TransportFailure):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status_code: int, feed_url: str | None = None):
        super().__init__(
            f"HTTP {status_code}: Failed to fetch RSS feed",
            feed_url=feed_url,
            context={"status_code": status_code},
        )
        self.status_code = status_code


class BodyReadError(TransportFailure):
    """The response body could not be read or decoded."""
