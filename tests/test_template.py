"""Tests for the HTML document template and title extraction."""

from pathlib import Path

import pytest

from mdpaper.formats import FORMAT_CONFIGS
from mdpaper.template import compose_html, extract_title


# =========================================================================
# 1. compose_html
# =========================================================================


class TestComposeHtml:
    @pytest.mark.parametrize("name", list(FORMAT_CONFIGS))
    def test_page_directive_matches_format(self, name):
        cfg = FORMAT_CONFIGS[name]
        html = compose_html("<p>x</p>", cfg)
        assert f"size: {name} portrait;" in html
        assert f"margin: {cfg.margin};" in html
        assert f"font-size: {cfg.font_size};" in html

    def test_page_directive_is_distinct_per_format(self):
        directives = set()
        for cfg in FORMAT_CONFIGS.values():
            html = compose_html("", cfg)
            page_rule = html.split("@page {", 1)[1].split("}", 1)[0]
            directives.add(" ".join(page_rule.split()))
        assert len(directives) == len(FORMAT_CONFIGS)

    def test_deterministic(self):
        cfg = FORMAT_CONFIGS["A3"]
        assert compose_html("<p>x</p>", cfg, "T") == compose_html("<p>x</p>", cfg, "T")

    def test_body_is_embedded_verbatim(self):
        body = "<h1>Title</h1>\n<p>Hello <code>x</code></p>"
        html = compose_html(body, FORMAT_CONFIGS["A4"])
        assert f"<body>\n{body}\n</body>" in html

    def test_page_break_rules(self):
        html = compose_html("", FORMAT_CONFIGS["A4"])
        assert "h1, h2, h3, h4, h5, h6 {\n            page-break-after: avoid;" in html
        assert "h1 {\n            page-break-before: always;" in html
        assert "h1:first-child {\n            page-break-before: avoid;" in html
        assert "pre, blockquote, table, img {\n            page-break-inside: avoid;" in html

    def test_compact_format_uses_smaller_code_and_tables(self):
        compact = compose_html("", FORMAT_CONFIGS["A5"])
        standard = compose_html("", FORMAT_CONFIGS["A4"])
        assert "padding: 8px 10px;" in compact
        assert "padding: 12px 15px;" in standard
        assert "font-size: 10px;" in compact
        assert "font-size: 10px;" not in standard

    def test_title_is_escaped(self):
        html = compose_html("", FORMAT_CONFIGS["A4"], "Tom & <Jerry>")
        assert "<title>Tom &amp; &lt;Jerry&gt;</title>" in html


# =========================================================================
# 2. extract_title
# =========================================================================


class TestExtractTitle:
    def test_atx_heading(self):
        assert extract_title(Path("x.md"), "intro\n## Sub\n# Main Title\n") == "Main Title"

    def test_setext_heading(self):
        assert extract_title(Path("x.md"), "Big Title\n=========\n\ntext") == "Big Title"

    def test_falls_back_to_filename(self):
        assert extract_title(Path("release_notes-v2.md"), "no headings here") == "Release Notes V2"
