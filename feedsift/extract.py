"""Pattern-based extraction of tags, items and images from feed documents.

Matching is deliberately lightweight: first match wins, tag names are
case-insensitive, bodies are matched non-greedily and may span lines.
"""

import re
from functools import lru_cache

CDATA_PATTERN = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.IGNORECASE | re.DOTALL)
ITEM_PATTERN = re.compile(r"<item[^>]*>(.*?)</item>", re.IGNORECASE | re.DOTALL)
IMG_SRC_PATTERN = re.compile(r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*>", re.IGNORECASE)
MEDIA_THUMBNAIL_PATTERN = re.compile(
    r"<media:thumbnail[^>]+url=[\"']([^\"']+)[\"'][^>]*>", re.IGNORECASE
)
DIMENSIONS_PATTERN = re.compile(r"(\d+)x(\d+)")

# Case-sensitive infixes of tracking pixels, counters and ad images
IMAGE_BLOCKLIST = ("feedburner", "pixel", "1x1", "tracking")
MIN_IMAGE_WIDTH = 100

# Escaped opening, closing or declaration tag such as &lt;p or &lt;/p
ESCAPED_TAG_PATTERN = re.compile(r"&lt;[/!]?[A-Za-z]")
XML_ENTITY_PATTERN = re.compile(r"&(lt|gt|amp|quot|apos|#39);")
XML_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
    "#39": "'",
}


@lru_cache(maxsize=64)
def _tag_pattern(tag: str) -> re.Pattern:
    name = re.escape(tag)
    return re.compile(rf"<{name}[^>]*>(.*?)</{name}>", re.IGNORECASE | re.DOTALL)


def get_text_between_tags(xml: str, tag: str) -> str:
    """Return the trimmed text of the first ``tag`` element in ``xml``.

    Attributes on the opening tag are ignored. When the body holds a CDATA
    section, its payload replaces the body and any text around the CDATA
    markers is dropped.

    Args:
        xml: Document or fragment to search
        tag: Tag name, optionally prefixed (e.g. ``content:encoded``)

    Returns:
        The element text, or an empty string when the tag is absent
    """
    match = _tag_pattern(tag).search(xml)
    if not match:
        return ""

    content = match.group(1).strip()

    cdata = CDATA_PATTERN.search(content)
    if cdata:
        content = cdata.group(1).strip()

    return content


def get_all_items(xml: str) -> list[str]:
    """Return the inner XML of every ``<item>`` element in document order."""
    return [match.group(1) for match in ITEM_PATTERN.finditer(xml)]


def is_content_image(src: str) -> bool:
    """Decide whether an inline image URL is real content.

    A URL that encodes ``WxH`` dimensions is kept only when the width exceeds
    100 pixels, whatever else it contains. Otherwise it is kept unless it
    contains one of the tracking/ad markers.
    """
    if not src:
        return False

    dimensions = DIMENSIONS_PATTERN.search(src)
    if dimensions:
        return int(dimensions.group(1)) > MIN_IMAGE_WIDTH

    return not any(marker in src for marker in IMAGE_BLOCKLIST)


def extract_images(html: str) -> list[str]:
    """Return the ``src`` of every content ``<img>`` tag in order.

    No deduplication or normalization is applied.
    """
    if not html:
        return []

    return [
        match.group(1)
        for match in IMG_SRC_PATTERN.finditer(html)
        if is_content_image(match.group(1))
    ]


def extract_media_thumbnail(item_xml: str) -> str | None:
    """Return the ``url`` of the item's ``<media:thumbnail>``, if any."""
    match = MEDIA_THUMBNAIL_PATTERN.search(item_xml)
    return match.group(1) if match else None


def unescape_markup(text: str) -> str:
    """Undo one level of XML escaping on entity-encoded HTML.

    Feeds often ship HTML bodies as escaped text (``&lt;p&gt;``) instead of
    CDATA. Text that already contains a literal ``<`` is real markup and is
    returned untouched, as is escaped text that holds no tag at all
    (``5 &lt; 6``).
    """
    if not text or "<" in text or not ESCAPED_TAG_PATTERN.search(text):
        return text

    return XML_ENTITY_PATTERN.sub(lambda m: XML_ENTITIES[m.group(1)], text)
