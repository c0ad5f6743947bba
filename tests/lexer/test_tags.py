"""Tests for tag text parsing."""

import pytest

from puszta.lexer import parse_tag


class TestTagName:
    def test_empty(self) -> None:
        assert parse_tag("") == ("", {}, False)

    def test_opening(self) -> None:
        assert parse_tag("p") == ("p", {}, False)

    def test_closing(self) -> None:
        assert parse_tag("/p") == ("p", {}, True)

    def test_name_lowercased(self) -> None:
        assert parse_tag("DIV")[0] == "div"

    def test_leading_whitespace_skipped(self) -> None:
        assert parse_tag("  b") == ("b", {}, False)

    def test_closing_with_space(self) -> None:
        assert parse_tag("/ b") == ("b", {}, True)

    @pytest.mark.parametrize("raw", ["br/", "br /", "br/ "])
    def test_self_closing_slash_dropped(self, raw: str) -> None:
        assert parse_tag(raw) == ("br", {}, False)

    def test_whitespace_only(self) -> None:
        assert parse_tag("   ") == ("", {}, False)


class TestAttributes:
    def test_double_quoted(self) -> None:
        _, attrs, _ = parse_tag('a href="/Home"')
        assert attrs == {"href": "/Home"}

    def test_single_quoted(self) -> None:
        _, attrs, _ = parse_tag("img src='x.png' /")
        assert attrs == {"src": "x.png"}

    def test_unquoted(self) -> None:
        _, attrs, _ = parse_tag("a target=_blank")
        assert attrs == {"target": "_blank"}

    def test_name_lowercased_value_kept(self) -> None:
        assert parse_tag("DIV Class=Foo") == ("div", {"class": "Foo"}, False)

    def test_quoted_value_keeps_whitespace(self) -> None:
        _, attrs, _ = parse_tag('a title="Hello World"')
        assert attrs == {"title": "Hello World"}

    def test_boolean_attribute(self) -> None:
        _, attrs, _ = parse_tag("input disabled")
        assert attrs == {"disabled": ""}

    def test_spaces_around_equals(self) -> None:
        _, attrs, _ = parse_tag("a x = 1")
        assert attrs == {"x": "1"}

    def test_equals_without_value(self) -> None:
        _, attrs, _ = parse_tag("a x= ")
        assert attrs == {"x": ""}

    def test_slash_inside_attribute_name_kept(self) -> None:
        assert parse_tag("a x/y=1") == ("a", {"x/y": "1"}, False)

    def test_slash_before_attribute_skipped(self) -> None:
        assert parse_tag("a /x=1 /") == ("a", {"x": "1"}, False)

    def test_last_duplicate_wins(self) -> None:
        _, attrs, _ = parse_tag('a href="x" HREF="y"')
        assert attrs == {"href": "y"}

    def test_dangling_quote_takes_rest(self) -> None:
        _, attrs, _ = parse_tag('a title="unterminated value')
        assert attrs == {"title": "unterminated value"}

    def test_empty_name_dropped(self) -> None:
        _, attrs, _ = parse_tag("a =x")
        assert attrs == {}

    def test_multiple(self) -> None:
        name, attrs, closing = parse_tag('a href="/" id=main hidden')
        assert name == "a"
        assert attrs == {"href": "/", "id": "main", "hidden": ""}
        assert closing is False

    def test_closing_tag_attributes_still_parsed(self) -> None:
        assert parse_tag("/a x=1") == ("a", {"x": "1"}, True)
