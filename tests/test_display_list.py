"""Tests for the in-memory DisplayList renderer."""

import logging

import pytest

from puszta.renderers import DisplayList, DrawCommand, FontMetrics, TextRenderer

BLACK = (0.0, 0.0, 0.0)


def make_list(**kwargs) -> DisplayList:
    return DisplayList(
        {
            "mono": FontMetrics(advance=10.0, ascent=8.0),
            "prop": FontMetrics(advance=10.0, widths={"i": 4.0, " ": 5.0}),
            "var": FontMetrics(variable=True),
        },
        **kwargs,
    )


class TestMeasure:
    def test_sums_advances(self) -> None:
        assert make_list().measure("mono", "abc", 1.0) == 30.0

    def test_scaled(self) -> None:
        assert make_list().measure("mono", "abc", 0.5) == 15.0

    def test_per_character_widths(self) -> None:
        assert make_list().measure("prop", "ii", 1.0) == 8.0

    def test_tab_is_eight_spaces(self) -> None:
        renderer = make_list()
        assert renderer.measure("prop", "\t", 1.0) == 8 * renderer.measure("prop", " ", 1.0)

    def test_control_characters_ignored(self) -> None:
        assert make_list().measure("mono", "a\nb\x07", 1.0) == 20.0

    def test_empty(self) -> None:
        assert make_list().measure("mono", "", 1.0) == 0.0

    def test_unknown_font(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="puszta"):
            assert make_list().measure("ghost", "abc", 1.0) == 0.0
        assert "ghost" in caplog.text


class TestFonts:
    def test_has_font(self) -> None:
        renderer = make_list()
        assert renderer.has_font("mono")
        assert not renderer.has_font("ghost")

    def test_ascent(self) -> None:
        renderer = make_list()
        assert renderer.ascent("mono") == 8.0
        assert renderer.ascent("ghost") == 0.0

    def test_variable_weight(self) -> None:
        renderer = make_list()
        assert renderer.is_variable("var")
        assert renderer.set_weight("var", 700.0)
        assert renderer.font("var").weight == 700.0

    def test_static_font_rejects_weight(self) -> None:
        renderer = make_list()
        assert not renderer.is_variable("mono")
        assert not renderer.set_weight("mono", 700.0)
        assert renderer.font("mono").weight == 400.0

    def test_unknown_font_weight(self) -> None:
        renderer = make_list()
        assert not renderer.is_variable("ghost")
        assert not renderer.set_weight("ghost", 700.0)
        assert renderer.font("ghost") is None

    def test_satisfies_protocol(self) -> None:
        renderer: TextRenderer = make_list()
        assert renderer.has_font("mono")


class TestRender:
    def test_records_commands(self) -> None:
        renderer = make_list()
        renderer.render("mono", "abc", 50.0, 20.0, 0.5, BLACK)
        assert renderer.commands == [DrawCommand("mono", "abc", 50.0, 20.0, 0.5, BLACK, 400.0)]
        assert renderer.texts() == ["abc"]

    def test_records_current_weight(self) -> None:
        renderer = make_list()
        renderer.set_weight("var", 650.0)
        renderer.render("var", "x", 0.0, 0.0, 1.0, BLACK)
        assert renderer.commands[0].weight == 650.0

    def test_unknown_font_not_recorded(self) -> None:
        renderer = make_list()
        renderer.render("ghost", "x", 0.0, 0.0, 1.0, BLACK)
        assert renderer.commands == []

    def test_clear(self) -> None:
        renderer = make_list(viewport_height=10.0)
        renderer.render("mono", "a", 0.0, 0.0, 1.0, BLACK)
        renderer.render("mono", "b", 0.0, 50.0, 1.0, BLACK)
        renderer.clear()
        assert renderer.commands == []
        assert renderer.culled == 0


class TestCulling:
    @pytest.mark.parametrize("y", [-0.1, 100.1, -500.0])
    def test_outside_viewport_culled(self, y: float) -> None:
        renderer = make_list(viewport_height=100.0)
        renderer.render("mono", "x", 0.0, y, 1.0, BLACK)
        assert renderer.commands == []
        assert renderer.culled == 1

    @pytest.mark.parametrize("y", [0.0, 50.0, 100.0])
    def test_inside_viewport_drawn(self, y: float) -> None:
        renderer = make_list(viewport_height=100.0)
        renderer.render("mono", "x", 0.0, y, 1.0, BLACK)
        assert renderer.texts() == ["x"]

    def test_margin_extends_viewport(self) -> None:
        renderer = make_list(viewport_height=100.0, cull_margin=20.0)
        renderer.render("mono", "a", 0.0, -15.0, 1.0, BLACK)
        renderer.render("mono", "b", 0.0, 115.0, 1.0, BLACK)
        renderer.render("mono", "c", 0.0, 125.0, 1.0, BLACK)
        assert renderer.texts() == ["a", "b"]
        assert renderer.culled == 1

    def test_no_viewport_draws_everything(self) -> None:
        renderer = make_list()
        renderer.render("mono", "x", 0.0, 1e9, 1.0, BLACK)
        assert renderer.culled == 0
        assert renderer.texts() == ["x"]
