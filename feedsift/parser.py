"""Feed assembly: turns a raw RSS document into a Feed."""

from .exceptions import ParseFailure
from .extract import (
    extract_images,
    extract_media_thumbnail,
    get_all_items,
    get_text_between_tags,
    unescape_markup,
)
from .logging_config import create_execution_logger
from .models import Feed, FeedItem
from .sanitize import clean_html_content

DEFAULT_FEED_TITLE = "Unknown Feed"
DEFAULT_ITEM_TITLE = "No Title"

# Body fields in order of preference
CONTENT_TAGS = ("content:encoded", "content", "description")
DATE_TAGS = ("pubDate", "published")


class FeedParser:
    """Builds Feed objects from RSS/Atom-like XML text."""

    def __init__(self, execution_id: str | None = None):
        """Initialize FeedParser.

        Args:
            execution_id: Execution ID for logging context
        """
        self.logger = create_execution_logger("feed_parser", execution_id)

    def parse(self, xml_text: str) -> Feed:
        """Parse a feed document.

        Channel fields are taken from the first matching tags in the whole
        document, so a channel without its own ``<title>`` reports the
        title of its first item.

        Args:
            xml_text: Complete feed document

        Returns:
            The parsed Feed

        Raises:
            ParseFailure: If extraction fails for any reason
        """
        try:
            self.logger.debug("Parsing feed document", document_length=len(xml_text))

            title = get_text_between_tags(xml_text, "title") or DEFAULT_FEED_TITLE
            description = get_text_between_tags(xml_text, "description")
            link = get_text_between_tags(xml_text, "link")

            items = tuple(
                self.normalize_item(item_xml) for item_xml in get_all_items(xml_text)
            )

            feed = Feed(
                title=title,
                description=clean_html_content(unescape_markup(description)),
                link=link,
                items=items,
            )
        except Exception as e:
            self.logger.error(f"Failed to parse feed: {e}", error=str(e))
            raise ParseFailure(e) from e

        self.logger.log_feed_parsed(len(feed.items))
        return feed

    def normalize_item(self, item_xml: str) -> FeedItem:
        """Build a FeedItem from the inner XML of one ``<item>``.

        The richest available body feeds ``clean_content`` and image
        extraction, while ``description`` is always the cleaned summary.

        Args:
            item_xml: Inner text of an ``<item>`` element

        Returns:
            Normalized FeedItem
        """
        raw_description = unescape_markup(get_text_between_tags(item_xml, "description"))
        rich_content = raw_description
        for tag in CONTENT_TAGS:
            value = get_text_between_tags(item_xml, tag)
            if value:
                rich_content = unescape_markup(value)
                break

        images = extract_images(rich_content)
        thumbnail = extract_media_thumbnail(item_xml)
        if thumbnail:
            images.insert(0, thumbnail)

        pub_date = ""
        for tag in DATE_TAGS:
            pub_date = get_text_between_tags(item_xml, tag)
            if pub_date:
                break

        return FeedItem(
            title=get_text_between_tags(item_xml, "title") or DEFAULT_ITEM_TITLE,
            description=clean_html_content(raw_description),
            clean_content=clean_html_content(rich_content),
            link=get_text_between_tags(item_xml, "link"),
            pub_date=pub_date,
            guid=get_text_between_tags(item_xml, "guid") or None,
            featured_image=images[0] if images else None,
            images=tuple(images) if images else None,
        )


def parse_rss_xml(xml_text: str, execution_id: str | None = None) -> Feed:
    """Parse an RSS XML string into a Feed.

    Raises:
        ParseFailure: If extraction fails for any reason
    """
    return FeedParser(execution_id=execution_id).parse(xml_text)
