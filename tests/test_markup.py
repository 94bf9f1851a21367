"""
Tests for clipboard blob splitting and HTML flattening
"""
from jobapps.services.markup import clean_html_tags, html_to_text, looks_like_markup, split_clipboard_blob


class TestSplitClipboardBlob:
    def test_extension_blob(self):
        text, url = split_clipboard_blob("HTML: <div>Acme</div>\n'mf-URL: https://example.com/jobs/1")

        assert text.strip() == "<div>Acme</div>"
        assert url == "https://example.com/jobs/1"

    def test_plain_text_unchanged(self):
        text, url = split_clipboard_blob("Company: Acme")

        assert text == "Company: Acme"
        assert url is None


class TestHtmlToText:
    def test_block_elements_become_lines(self):
        html = "<div>Acme</div><p>Staff Engineer</p><script>var x = 1;</script><li>Remote</li>"
        assert html_to_text(html).splitlines() == ["Acme", "Staff Engineer", "Remote"]

    def test_entities_and_breaks(self):
        assert html_to_text("Acme &amp; Sons<br>New York") == "Acme & Sons\nNew York"

    def test_clean_fragment(self):
        assert clean_html_tags("<a href='/x'>Acme</a>&nbsp; Corp") == "Acme Corp"

    def test_looks_like_markup(self):
        assert looks_like_markup("<div>x</div>")
        assert not looks_like_markup("salary < 100 and > 50")
