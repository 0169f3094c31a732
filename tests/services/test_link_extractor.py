from unittest.mock import Mock

from bs4 import BeautifulSoup

from linkprobe.services.link_extractor import HtmlLinkExtractor


def test_resolves_relative_links_against_page_url():
    html = '<a href="about.html">About</a><a href="/root">Root</a><a href="https://other.org/x">X</a>'
    links = HtmlLinkExtractor().extract(html, "http://example.com/docs/index.html")
    assert links == [
        "http://example.com/docs/about.html",
        "http://example.com/root",
        "https://other.org/x",
    ]


def test_collects_non_anchor_attributes():
    html = """
    <html>
      <head>
        <link rel="stylesheet" href="style.css">
        <script src="app.js"></script>
      </head>
      <body background="bg.png">
        <img src="logo.png" srcset="logo-1x.png 1x, logo-2x.png 2x">
        <iframe src="frame.html"></iframe>
        <video poster="poster.jpg"><source src="movie.mp4"></video>
        <blockquote cite="quote.html">q</blockquote>
      </body>
    </html>
    """
    links = HtmlLinkExtractor().extract(html, "http://example.com/")
    assert set(links) == {
        "http://example.com/style.css",
        "http://example.com/app.js",
        "http://example.com/bg.png",
        "http://example.com/logo.png",
        "http://example.com/logo-1x.png",
        "http://example.com/logo-2x.png",
        "http://example.com/frame.html",
        "http://example.com/poster.jpg",
        "http://example.com/movie.mp4",
        "http://example.com/quote.html",
    }


def test_links_are_deduplicated_in_document_order():
    html = '<a href="b">b</a><a href="a">a</a><a href="b">b again</a><a href="a#section">a frag</a>'
    links = HtmlLinkExtractor().extract(html, "http://example.com/")
    assert links == ["http://example.com/b", "http://example.com/a"]


def test_fragments_are_dropped():
    links = HtmlLinkExtractor().extract('<a href="page.html#top">x</a>', "http://example.com/")
    assert links == ["http://example.com/page.html"]


def test_same_page_fragment_resolves_to_page():
    links = HtmlLinkExtractor().extract('<a href="#top">x</a>', "http://example.com/page.html")
    assert links == ["http://example.com/page.html"]


def test_empty_and_missing_values_are_ignored():
    html = '<a href="">empty</a><a>none</a><img src="  ">'
    assert HtmlLinkExtractor().extract(html, "http://example.com/") == []


def test_base_href_is_honoured():
    html = '<head><base href="/static/"></head><a href="page.html">x</a>'
    links = HtmlLinkExtractor().extract(html, "http://example.com/docs/index.html")
    assert links == ["http://example.com/static/page.html"]


def test_mailto_links_are_returned_for_the_skip_policy():
    links = HtmlLinkExtractor().extract('<a href="mailto:me@example.com">mail</a>', "http://example.com/")
    assert links == ["mailto:me@example.com"]


def test_empty_body_returns_no_links():
    assert HtmlLinkExtractor().extract("", "http://example.com/") == []


def test_soup_factory_is_injectable():
    factory = Mock(side_effect=lambda html: BeautifulSoup(html, "html.parser"))
    HtmlLinkExtractor(soup_factory=factory).extract('<a href="x">x</a>', "http://example.com/")
    factory.assert_called_once()
