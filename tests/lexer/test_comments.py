"""Tests for comment elision."""

from puszta.lexer import strip_comments


class TestStripComments:
    def test_no_comments(self) -> None:
        assert strip_comments("<p>x</p>") == "<p>x</p>"

    def test_single_comment(self) -> None:
        assert strip_comments("a<!-- x -->b") == "ab"

    def test_multiple_comments(self) -> None:
        assert strip_comments("<!--1-->a<!--2-->b<!--3-->") == "ab"

    def test_comment_containing_tags(self) -> None:
        assert strip_comments("<!-- <b>hidden</b> -->shown") == "shown"

    def test_unterminated_comment_swallows_rest(self) -> None:
        assert strip_comments("keep<!-- never closed <p>x</p>") == "keep"

    def test_close_marker_without_open(self) -> None:
        assert strip_comments("a --> b") == "a --> b"

    def test_empty(self) -> None:
        assert strip_comments("") == ""

    def test_comment_is_first_close(self) -> None:
        assert strip_comments("<!-- a --> b -->c") == " b -->c"
