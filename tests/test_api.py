"""Tests for the top-level API: tokenize, layout_tokens and Page."""

import pytest

from puszta import (
    DEFAULT_TITLE,
    Canvas,
    DisplayList,
    Element,
    FontLookupError,
    FontMetrics,
    Page,
    Text,
    TokenStream,
    layout_tokens,
    tokenize,
)
from puszta.profiling import profiled_layout

FONTS = {"regular": "rubik", "italic": "rubik_italic"}


def make_renderer() -> DisplayList:
    return DisplayList(
        {
            "rubik": FontMetrics(advance=40.0, ascent=40.0),
            "rubik_italic": FontMetrics(advance=40.0, ascent=30.0),
        }
    )


class TestTokenize:
    def test_returns_stream(self) -> None:
        stream = tokenize("<b>hi</b> there")
        assert isinstance(stream, TokenStream)
        assert stream.tokens == (
            Element("b"),
            Text("hi"),
            Element("b", is_closing=True),
            Text("there"),
        )

    def test_title(self) -> None:
        assert tokenize("<title>Home</title>x").title == "Home"

    def test_no_title(self) -> None:
        assert tokenize("x").title == ""

    def test_stream_helpers(self) -> None:
        stream = tokenize("<p>a <b>b</b></p>")
        assert len(stream) == 6
        assert stream
        assert stream.texts() == ["a", "b"]
        assert [e.name for e in stream.elements()] == ["p", "b", "b", "p"]
        assert list(stream) == list(stream.tokens)

    def test_empty_stream_is_falsy(self) -> None:
        assert not tokenize("<!-- nothing -->")

    def test_records_profiling(self) -> None:
        with profiled_layout() as acc:
            tokenize("<p>x</p>")
        assert acc.tokenize_calls == 1
        assert acc.source_length == len("<p>x</p>")
        assert acc.token_count == 3


class TestLayoutTokens:
    def test_single_pass(self) -> None:
        renderer = make_renderer()
        result = layout_tokens(tokenize("Hello <b>World</b>").tokens, renderer, FONTS, Canvas(800, 600))
        assert [s.text for s in result.segments] == ["Hello", "World"]
        assert renderer.texts() == ["Hello", "World"]

    def test_start_position(self) -> None:
        result = layout_tokens(
            [Text("x")], make_renderer(), FONTS, Canvas(800, 600), start_x=0.0, start_y=5.0
        )
        assert result.segments[0].x == 0.0
        assert result.segments[0].y == pytest.approx(15.0)

    def test_bad_fonts(self) -> None:
        with pytest.raises(FontLookupError):
            layout_tokens([], make_renderer(), {"regular": "missing"}, Canvas(800, 600))


class TestPage:
    def test_default_title(self) -> None:
        page = Page(make_renderer(), FONTS)
        assert page.title == DEFAULT_TITLE == "New Page"
        assert not page.has_tokens
        assert page.tokens == ()

    def test_load(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("<title>Home</title><p>Hello</p>")
        assert page.title == "Home"
        assert page.has_tokens
        assert Text("Hello") in page.tokens

    def test_load_replaces_document(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("<title>One</title>first")
        page.load("second")
        assert page.title == "New Page"
        assert page.tokens == (Text("second"),)

    def test_blank_title_uses_default(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("<title> </title>x")
        assert page.title == "New Page"

    def test_render(self) -> None:
        renderer = make_renderer()
        page = Page(renderer, FONTS)
        page.load("<p>Hello <i>World</i></p>")
        result = page.render(800, 600)
        assert [(s.text, s.font_id) for s in result.segments] == [
            ("Hello", "rubik"),
            ("World", "rubik_italic"),
        ]
        assert result.lines == 1

    def test_render_twice_is_identical(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("<h1>T</h1><p>a <b>b</b> <i>c</i></p>")
        assert page.render(400, 300) == page.render(400, 300)

    def test_render_without_document(self) -> None:
        page = Page(make_renderer(), FONTS)
        result = page.render(800, 600)
        assert result.segments == ()
        assert result.lines == 0

    def test_set_cursor_scrolls(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("x")
        before = page.render(800, 600).segments[0]
        page.set_cursor(y=-30.0)
        after = page.render(800, 600).segments[0]
        assert after.y == pytest.approx(before.y - 30.0)
        assert after.x == before.x

    def test_dpi_scale(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("x")
        assert page.render(800, 600, dpi_scale=2.0).segments[0].scale == pytest.approx(0.5)

    def test_zero_dpi_scale_renders(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load("x")
        assert page.render(800, 600, dpi_scale=0.0).segments[0].scale == pytest.approx(0.2)

    def test_engine_exposed(self) -> None:
        page = Page(make_renderer(), FONTS, start_x=10.0)
        assert page.engine.start_x == 10.0

    def test_missing_regular_font(self) -> None:
        with pytest.raises(FontLookupError):
            Page(make_renderer(), {"italic": "rubik_italic"})

    def test_malformed_document_never_raises(self) -> None:
        page = Page(make_renderer(), FONTS)
        page.load('<a href="x<b>>>< <!-- <p </b')
        page.render(800, 600)
