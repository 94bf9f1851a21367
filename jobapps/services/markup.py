"""Helpers for the HTML and clipboard text pasted into the tracker."""

import re
from typing import Optional, Tuple

# The browser extension copies "HTML: <markup>\n'mf-URL: <url>".
_BLOB_PREFIX = re.compile(r'^\s*HTML:\s*', re.IGNORECASE)
_BLOB_URL = re.compile(r"^\s*'?mf-URL:\s*(\S+)\s*$", re.MULTILINE)

_TAG = re.compile(r'<[^>]*>')
_MARKUP_HINT = re.compile(r'<\s*/?\s*[a-zA-Z][^>]*>')

_ENTITIES = {
    '&nbsp;': ' ',
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&quot;': '"',
    '&#39;': "'",
    '&#x27;': "'",
    '&middot;': '·',
}


def split_clipboard_blob(text: str) -> Tuple[str, Optional[str]]:
    """Separate the page body from the source URL the extension appends.

    Text without the extension's markers comes back unchanged with no URL.
    """
    url = None
    match = _BLOB_URL.search(text)
    if match:
        url = match.group(1).strip()
        text = text[:match.start()] + text[match.end():]
    text = _BLOB_PREFIX.sub('', text, count=1)
    return text, url


def looks_like_markup(text: str) -> bool:
    return bool(_MARKUP_HINT.search(text))


def decode_entities(text: str) -> str:
    for entity, char in _ENTITIES.items():
        text = text.replace(entity, char)
    return text


def clean_html_tags(fragment: str) -> str:
    """Remove tags from a single fragment and decode common entities."""
    cleaned = _TAG.sub(' ', fragment)
    cleaned = decode_entities(cleaned)
    return re.sub(r'\s+', ' ', cleaned).strip()


def html_to_text(html: str) -> str:
    """Convert HTML to plain text, one block element per line."""
    # Remove script and style tags
    text = re.sub(r'<script[^>]*>.*?</script>', '', html, flags=re.DOTALL | re.IGNORECASE)
    text = re.sub(r'<style[^>]*>.*?</style>', '', text, flags=re.DOTALL | re.IGNORECASE)
    text = re.sub(r'<!--.*?-->', '', text, flags=re.DOTALL)

    # Replace common block elements with newlines
    text = re.sub(r'<br\s*/?>', '\n', text, flags=re.IGNORECASE)
    text = re.sub(
        r'</?(?:p|div|tr|li|ul|ol|section|article|header|footer|h[1-6])(?:\s[^>]*)?>',
        '\n', text, flags=re.IGNORECASE,
    )

    # Remove remaining HTML tags
    text = _TAG.sub(' ', text)
    text = decode_entities(text)

    # Clean up whitespace
    text = re.sub(r'[ \t]+', ' ', text)
    text = re.sub(r' *\n *', '\n', text)
    text = re.sub(r'\n{2,}', '\n', text)

    return text.strip()
