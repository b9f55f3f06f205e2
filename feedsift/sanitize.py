"""HTML to plain text conversion that keeps paragraph and list structure."""

import re

_FLAGS = re.IGNORECASE | re.DOTALL

# (pattern, replacement) pairs applied in order; each step sees the output of the previous one
MARKUP_RULES = (
    (re.compile(r"<script[^>]*>.*?</script>", _FLAGS), ""),
    (re.compile(r"<style[^>]*>.*?</style>", _FLAGS), ""),
    (re.compile(r"<!--.*?-->", re.DOTALL), ""),
    # Images are collected separately by extract_images
    (re.compile(r"<img[^>]*>", re.IGNORECASE), ""),
    (re.compile(r"<(video|audio|iframe|embed|object)[^>]*>.*?</\1>", _FLAGS), ""),
    (
        re.compile(
            r"</?(div|p|br|h[1-6]|article|section|header|footer|nav|main)[^>]*>",
            re.IGNORECASE,
        ),
        "\n",
    ),
    (re.compile(r"</?(ul|ol)[^>]*>", re.IGNORECASE), "\n"),
    (re.compile(r"<li[^>]*>", re.IGNORECASE), "\n• "),
    (re.compile(r"</li>", re.IGNORECASE), ""),
    (re.compile(r"<strong[^>]*>|<b[^>]*>", re.IGNORECASE), ""),
    (re.compile(r"</strong>|</b>", re.IGNORECASE), ""),
    (re.compile(r"<em[^>]*>|<i[^>]*>", re.IGNORECASE), ""),
    (re.compile(r"</em>|</i>", re.IGNORECASE), ""),
    (re.compile(r"<[^>]*>"), ""),
)

# Decoded one entity at a time, in this order
ENTITY_TABLE = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&#x27;", "'"),
    ("&#x2F;", "/"),
    ("&apos;", "'"),
    ("&rsquo;", "'"),
    ("&lsquo;", "'"),
    ("&rdquo;", '"'),
    ("&ldquo;", '"'),
    ("&mdash;", "—"),
    ("&ndash;", "–"),
    ("&hellip;", "…"),
)
NUMERIC_ENTITY_PATTERN = re.compile(r"&#\d+;")
# &amp; is left for last so it cannot produce new entities for the steps above
NAMED_ENTITY_PATTERN = re.compile(r"&(?!amp;)[a-zA-Z]+;")

BLANK_LINES_PATTERN = re.compile(r"\n\s*\n")
EXCESS_NEWLINES_PATTERN = re.compile(r"\n{3,}")
HORIZONTAL_SPACE_PATTERN = re.compile(r"[ \t]+")
LEADING_BLANK_PATTERN = re.compile(r"^\s*\n")


def _strip_markup(html: str) -> str:
    for pattern, replacement in MARKUP_RULES:
        html = pattern.sub(replacement, html)
    return html


def _decode_entities(text: str) -> str:
    for entity, char in ENTITY_TABLE:
        text = text.replace(entity, char)
    text = NUMERIC_ENTITY_PATTERN.sub(" ", text)
    text = NAMED_ENTITY_PATTERN.sub(" ", text)
    return text.replace("&amp;", "&")


def _normalize_whitespace(text: str) -> str:
    text = BLANK_LINES_PATTERN.sub("\n\n", text)
    text = EXCESS_NEWLINES_PATTERN.sub("\n\n", text)
    text = HORIZONTAL_SPACE_PATTERN.sub(" ", text)
    text = LEADING_BLANK_PATTERN.sub("", text, count=1)
    return text.strip()


def clean_html_content(html: str | None) -> str:
    """Convert HTML to plain text while preserving its structure.

    Block elements become line breaks, list items become bullet lines and
    media, scripts and styles are dropped entirely. Common entities are
    decoded; any other entity becomes a single space. Runs of blank lines
    collapse to one blank line.

    Args:
        html: HTML fragment, possibly empty

    Returns:
        Clean text content, trimmed
    """
    if not html:
        return ""

    text = _strip_markup(html)
    text = _decode_entities(text)
    return _normalize_whitespace(text)


def strip_html(html: str | None) -> str:
    """Legacy alias for clean_html_content."""
    return clean_html_content(html)
