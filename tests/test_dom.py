"""Tests for the parser adapter and both document backends."""

from unittest.mock import patch

import pytest

from accessfix.dom import (
    SoupDocument,
    TextDocument,
    generate_selector,
    parse_document,
)
from accessfix.utils.logging_helper import ParseError

PAGE = """<html lang="en">
<body>
<div id="main">
  <p>First</p>
  <p class="note">Second &amp; last</p>
</div>
<ul><li>a</li><li>b</li></ul>
</body>
</html>"""


def test_find_all_returns_document_order(backend: str):
    doc = parse_document(PAGE, backend)
    paragraphs = doc.find_all("p")
    assert [p.text.strip() for p in paragraphs] == ["First", "Second & last"]


def test_find_all_accepts_several_names(backend: str):
    doc = parse_document(PAGE, backend)
    assert [node.tag for node in doc.find_all(["li", "p"])] == ["p", "p", "li", "li"]


def test_line_numbers_are_one_based(backend: str):
    doc = parse_document(PAGE, backend)
    assert doc.find_all("html")[0].line_number == 1
    assert doc.find_all("p")[1].line_number == 5


def test_position_counts_same_tag_siblings(backend: str):
    doc = parse_document(PAGE, backend)
    assert [p.position for p in doc.find_all("p")] == [1, 2]
    assert [li.position for li in doc.find_all("li")] == [1, 2]
    assert doc.find_all("ul")[0].position == 1


def test_lookup_by_id_and_attribute(backend: str):
    doc = parse_document(PAGE, backend)
    assert doc.get_by_id("main").tag == "div"
    assert doc.get_by_id("missing") is None
    assert len(doc.find_by_attr("class")) == 1
    assert len(doc.find_by_attr("class", "note", tag="p")) == 1
    assert doc.find_by_attr("class", "other") == []


def test_hierarchy_traversal(backend: str):
    doc = parse_document(PAGE, backend)
    div = doc.get_by_id("main")
    first_p = doc.find_all("p")[0]
    assert len(div.find_all("p")) == 2
    assert first_p.has_ancestor("div")
    assert first_p.has_ancestor("body")
    assert not first_p.has_ancestor("ul")


def test_names_are_lowercased(backend: str):
    doc = parse_document('<DIV ID="Box" Data-Role="x">Hi</DIV>', backend)
    node = doc.find_all("div")[0]
    assert node.tag == "div"
    assert node.get("id") == "Box"
    assert node.get("DATA-ROLE") == "x"


def test_start_tag_rendering(backend: str):
    doc = parse_document(PAGE, backend)
    assert doc.get_by_id("main").start_tag == '<div id="main">'


def test_render_with_replaced_text(backend: str):
    doc = parse_document('<button class="b"></button>', backend)
    rendered = doc.find_all("button")[0].render(text="Go")
    assert rendered == '<button class="b">Go</button>'


@pytest.mark.parametrize(
    "html, name, outer, start",
    [
        ("<img src='x.png'>", "img", "<img src='x.png'>", "<img src='x.png'>"),
        ("<p>A <input type=email></p>", "input", "<input type=email>", "<input type=email>"),
        ("<br/>", "br", "<br/>", "<br/>"),
        (
            "<HTML><body></body></HTML>",
            "html",
            "<HTML><body></body></HTML>",
            "<HTML>",
        ),
        (
            "<div>\n  <a HREF='/x' class=nav>Go &amp; see</a>\n</div>",
            "a",
            "<a HREF='/x' class=nav>Go &amp; see</a>",
            "<a HREF='/x' class=nav>",
        ),
        (
            "<ul><li>one<ul><li>two</li></ul></li></ul>",
            "ul",
            "<ul><li>one<ul><li>two</li></ul></li></ul>",
            "<ul>",
        ),
    ],
)
def test_markup_is_sliced_from_the_source(html: str, name: str, outer: str, start: str, backend: str):
    node = parse_document(html, backend).find_all(name)[0]
    assert node.outer_html == outer
    assert node.start_tag == start
    assert node.outer_html in html


def test_render_with_text_keeps_source_start_tag(backend: str):
    doc = parse_document("<a href='/x' class=nav></a>", backend)
    rendered = doc.find_all("a")[0].render(text="Home")
    assert rendered == "<a href='/x' class=nav>Home</a>"


def test_duplicate_attributes_keep_the_first_value(backend: str):
    doc = parse_document('<img alt="first" alt="second" src="x.png">', backend)
    img = doc.find_all("img")[0]
    assert img.get("alt") == "first"
    assert img.get("src") == "x.png"


def test_render_does_not_modify_document(backend: str):
    doc = parse_document('<img src="x.png">', backend)
    img = doc.find_all("img")[0]
    rendered = img.render(attrs={"alt": "A cat", "src": "x.png"})
    assert 'alt="A cat"' in rendered
    assert not img.has_attr("alt")


def test_unclosed_tags_are_recovered(backend: str):
    doc = parse_document("<div><p>one<p>two</div><span>three", backend)
    assert len(doc.find_all("p")) == 2
    assert doc.find_all("span")[0].text == "three"


def test_comments_and_scripts_are_not_markup(backend: str):
    html = (
        '<!-- <img src="a.png"> -->'
        "<script>var s = '<img src=\"b.png\">';</script>"
        '<img src="c.png" alt="c">'
    )
    doc = parse_document(html, backend)
    assert [img.get("src") for img in doc.find_all("img")] == ["c.png"]


def test_selector_prefers_id():
    doc = parse_document(PAGE)
    assert generate_selector(doc.get_by_id("main")) == "#main"
    assert generate_selector(doc.find_all("p")[1]) == "p:nth-of-type(2)"


def test_selector_ignores_blank_id():
    doc = parse_document('<p>a</p><p id=" ">b</p>')
    assert generate_selector(doc.find_all("p")[1]) == "p:nth-of-type(2)"


def test_default_backend_is_tree():
    assert isinstance(parse_document(PAGE), SoupDocument)
    assert isinstance(parse_document(PAGE, "text"), TextDocument)


def test_bytes_are_decoded_as_utf8():
    doc = parse_document("<p>café</p>".encode("utf-8"))
    assert doc.find_all("p")[0].text == "café"


def test_undecodable_bytes_raise_parse_error():
    with pytest.raises(ParseError):
        parse_document(b"<p>\xff\xfe</p>")


def test_non_text_content_raises_parse_error():
    with pytest.raises(ParseError):
        parse_document(12345)


def test_unknown_backend_raises_parse_error():
    with pytest.raises(ParseError, match="Unknown parser backend"):
        parse_document(PAGE, "lxml")


@patch("accessfix.dom.SoupDocument", side_effect=RuntimeError("boom"))
def test_tree_failure_falls_back_to_text(mock_soup):
    doc = parse_document(PAGE)
    assert isinstance(doc, TextDocument)
    assert len(doc.find_all("p")) == 2


@patch("accessfix.dom.TextDocument", side_effect=RuntimeError("boom"))
@patch("accessfix.dom.SoupDocument", side_effect=RuntimeError("boom"))
def test_parse_error_when_no_backend_succeeds(mock_soup, mock_text):
    with pytest.raises(ParseError, match="could not be interpreted"):
        parse_document(PAGE)
