"""Property-based tests for tag, item and image extraction."""

from hypothesis import given
from hypothesis import strategies as st

from feedsift.extract import get_all_items, get_text_between_tags
from feedsift.parser import parse_rss_xml

# Text that cannot open or close tags or CDATA sections
plain_text = st.text(
    alphabet=st.characters(exclude_characters="<>[]&", exclude_categories=("Cs",)),
    max_size=200,
)
url_path = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-_/", min_size=1, max_size=30)


class TestExtractProperties:
    """Property-based tests for the extraction helpers."""

    @given(plain_text, plain_text, plain_text)
    def test_cdata_payload_is_trimmed_property(self, payload, before, after):
        """
        For all tags wrapping <![CDATA[X]]>, the extracted text is X trimmed,
        whatever surrounds the CDATA section inside the tag.
        """
        xml = f"<title>{before}<![CDATA[{payload}]]>{after}</title>"
        assert get_text_between_tags(xml, "title") == payload.strip()

    @given(plain_text)
    def test_plain_text_is_trimmed_property(self, text):
        assert get_text_between_tags(f"<link>{text}</link>", "link") == text.strip()

    @given(st.lists(plain_text, max_size=5))
    def test_documents_without_items_property(self, titles):
        """For all documents without <item> elements, no fragments are returned."""
        body = "".join(f"<entry><title>{t}</title></entry>" for t in titles)
        assert get_all_items(f"<feed>{body}</feed>") == []

    @given(st.lists(plain_text, min_size=1, max_size=10))
    def test_item_count_and_order_property(self, titles):
        body = "".join(f"<item><title>{t}</title></item>" for t in titles)
        items = get_all_items(f"<rss><channel>{body}</channel></rss>")
        assert items == [f"<title>{t}</title>" for t in titles]

    @given(url_path, st.lists(url_path, max_size=5))
    def test_thumbnail_precedes_inline_images_property(self, thumb, inline):
        """The media thumbnail always comes ahead of inline images."""
        thumb_url = f"https://cdn.example.com/{thumb}.jpg"
        inline_urls = [f"https://img.example.com/{p}.jpg" for p in inline]
        content = "".join(f'<img src="{u}">' for u in inline_urls)
        xml = (
            "<rss><channel><title>Feed</title><item><title>Story</title>"
            f"<description>{content}</description>"
            f'<media:thumbnail url="{thumb_url}"/>'
            "</item></channel></rss>"
        )

        item = parse_rss_xml(xml).items[0]

        assert item.featured_image == thumb_url
        assert item.images[0] == thumb_url
        assert list(item.images[1:]) == [
            u
            for u in inline_urls
            if not any(m in u for m in ("feedburner", "pixel", "1x1", "tracking"))
        ]
