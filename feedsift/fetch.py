"""Feed download collaborator: HTTP GET, decode, parse."""

import requests

from .config import Config, FetchConfig
from .exceptions import BodyReadError, HttpStatusError, TransportFailure
from .logging_config import create_execution_logger
from .models import Feed
from .parser import FeedParser


class FeedFetcher:
    """Downloads feed documents and hands them to the parser."""

    def __init__(
        self, config: FetchConfig | None = None, execution_id: str | None = None
    ):
        """Initialize FeedFetcher with configuration.

        Args:
            config: Fetch configuration, defaults to the environment-driven Config
            execution_id: Execution ID for logging context
        """
        self.config = config or Config().get_fetch_config()
        self.logger = create_execution_logger("feed_fetcher", execution_id)
        self.parser = FeedParser(execution_id=self.logger.execution_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

        self.logger.info("FeedFetcher initialized", timeout=self.config.timeout)

    def fetch(self, feed_url: str) -> Feed:
        """Download and parse a single feed.

        Args:
            feed_url: URL of the RSS/Atom feed

        Returns:
            The parsed Feed

        Raises:
            HttpStatusError: If the server answers with an error status
            BodyReadError: If the response body cannot be read or decoded
            TransportFailure: If the request itself fails
            ParseFailure: If the downloaded document cannot be parsed
        """
        xml_text = self.download(feed_url)
        feed = self.parser.parse(xml_text)
        self.logger.info(
            "Successfully fetched feed",
            feed_url=feed_url,
            items_count=len(feed.items),
        )
        return feed

    def download(self, feed_url: str) -> str:
        """Fetch the complete feed document as text."""
        self.logger.info("Downloading feed content", feed_url=feed_url)
        try:
            with self.session.get(
                feed_url, timeout=self.config.timeout, stream=True
            ) as response:
                try:
                    response.raise_for_status()
                    http_error = None
                except requests.HTTPError as e:
                    http_error = e

                # Only 2xx is success; a final 3xx is a failed fetch
                if http_error or not 200 <= response.status_code < 300:
                    self.logger.error(
                        f"Feed request failed with HTTP {response.status_code}",
                        feed_url=feed_url,
                        status_code=response.status_code,
                    )
                    raise HttpStatusError(
                        response.status_code, feed_url=feed_url
                    ) from http_error

                try:
                    content = response.content
                    xml_text = response.text
                except (requests.RequestException, UnicodeDecodeError, LookupError) as e:
                    self.logger.error(
                        f"Failed to read feed body {feed_url}: {e}",
                        feed_url=feed_url,
                        error=str(e),
                    )
                    raise BodyReadError(
                        f"Failed to read RSS feed body: {e}", feed_url=feed_url
                    ) from e
        except requests.RequestException as e:
            self.logger.error(
                f"Failed to download feed {feed_url}: {e}",
                feed_url=feed_url,
                error=str(e),
            )
            raise TransportFailure(
                f"Failed to download RSS feed: {e}", feed_url=feed_url
            ) from e

        self.logger.info(
            "Feed downloaded successfully",
            feed_url=feed_url,
            status_code=response.status_code,
            content_length=len(content),
        )
        return xml_text


def fetch_and_parse_rss(url: str, config: FetchConfig | None = None) -> Feed:
    """Fetch and parse an RSS feed from a URL."""
    return FeedFetcher(config=config).fetch(url)


def fetch_rss_data(url: str) -> Feed:
    """Entry point for data-fetching layers: logs failures and re-raises them."""
    logger = create_execution_logger("feed_fetcher")
    try:
        return fetch_and_parse_rss(url)
    except Exception as e:
        logger.error(f"RSS fetch error: {e}", feed_url=url, error=str(e))
        raise
