"""Tests for the Markdown converter."""
import threading

import pytest

from converters import BlockKind, MarkdownConverter, MarkdownDocument, to_html


class TestMarkdownDocument:
    """Test MarkdownDocument."""

    def test_fragments_concatenate_in_order(self):
        document = MarkdownDocument()
        document.add("<p>", "a", "</p>")
        document.add("<p>b</p>")
        assert document.get() == "<p>a</p><p>b</p>"

    def test_empty_document(self):
        assert MarkdownDocument().get() == ""


class TestToHtml:
    """Test to_html."""

    @pytest.mark.parametrize(
        "text, html",
        [
            ("# Title", "<h1>Title</h1>"),
            ("###### Deepest", "<h6>Deepest</h6>"),
            ("", "<p></p>"),
            ("**a** and __b__", "<p><strong>a</strong> and <i>b</i></p>"),
            ("---", "<hr></hr>"),
            ("- item", "<li>item</li>"),
            ("# A\n\nparagraph", "<h1>A</h1><p></p><p>paragraph</p>"),
            ("# ", "<h1></h1>"),
            ("#", "<p>#</p>"),
        ],
    )
    def test_examples(self, text, html):
        assert to_html(text) == html

    def test_consecutive_bullets_have_no_list_container(self):
        html = to_html("- one\n- two")
        assert html == "<li>one</li><li>two</li>"
        assert "<ul>" not in html
        assert "<ol>" not in html

    def test_carriage_return_stays_in_line(self):
        assert to_html("# A\r\nb") == "<h1>A\r</h1><p>b</p>"

    def test_content_is_not_escaped(self):
        assert to_html("a < b & c") == "<p>a < b & c</p>"

    def test_headers_in_body_are_not_merged(self):
        assert to_html("# a\n# b") == "<h1>a</h1><h1>b</h1>"

    def test_trailing_newline_adds_empty_paragraph(self):
        assert to_html("text\n") == "<p>text</p><p></p>"


class TestMarkdownConverter:
    """Test MarkdownConverter."""

    @pytest.fixture
    def converter(self):
        return MarkdownConverter()

    def test_one_kind_per_line(self, converter):
        text = "# a\n- b\n\n---\nc"
        result = converter.convert(text)
        assert result.line_count == len(text.split("\n"))
        assert list(result.kinds) == [
            BlockKind.HEADER1,
            BlockKind.BULLET,
            BlockKind.PARAGRAPH,
            BlockKind.HORIZONTAL_RULE,
            BlockKind.PARAGRAPH,
        ]

    def test_block_counts(self, converter):
        result = converter.convert("- a\n- b\nc")
        assert result.block_counts() == {"bullet": 2, "paragraph": 1}
        assert result.as_dict()["line_count"] == 3

    def test_calls_do_not_share_state(self, converter):
        assert converter.to_html("# a") == "<h1>a</h1>"
        assert converter.to_html("b") == "<p>b</p>"

    def test_concurrent_calls(self, converter):
        results = {}

        def worker(index):
            results[index] = converter.to_html(f"# {index}\n- item {index}")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for index in range(8):
            assert results[index] == f"<h1>{index}</h1><li>item {index}</li>"
