"""
Tests for shorthand expansion and serialization.
"""

import logging

import pytest

from chart_layout.style.normalizer import (
    format_style, format_value, normalize_style, serialize_style, split_tokens, to_css_name,
)


@pytest.mark.parametrize("name", ["marginTop", "margin_top", "margin-top", " MarginTop "])
def test_to_css_name(name):
    assert to_css_name(name) == "margin-top"


def test_to_css_name_keeps_custom_properties():
    assert to_css_name("--chartColor") == "--chartColor"


def test_split_tokens_keeps_functions_together():
    assert split_tokens("solid 1px rgb(0, 0, 0)") == ["solid", "1px", "rgb(0, 0, 0)"]


def test_format_value():
    assert format_value("margin-top", 8) == "8px"
    assert format_value("margin-top", 8.0) == "8px"
    assert format_value("margin-top", "8") == "8px"
    assert format_value("opacity", 0.5) == "0.5"
    assert format_value("border-top-width", "thin") == "1px"
    assert format_value("color", "  red ") == "red"
    assert format_value("color", None) is None


def test_margin_number_expands_to_four_sides():
    assert normalize_style({"margin": 8}) == {
        "margin-top": "8px",
        "margin-right": "8px",
        "margin-bottom": "8px",
        "margin-left": "8px",
    }


def test_two_values_mirror_top_and_right():
    result = normalize_style({"padding": "1px 2px"})
    assert result == {
        "padding-top": "1px",
        "padding-right": "2px",
        "padding-bottom": "1px",
        "padding-left": "2px",
    }


def test_three_values_reuse_right_for_left():
    result = normalize_style({"margin": "1px 2px 3px"})
    assert [result[f"margin-{side}"] for side in ("top", "right", "bottom", "left")] == \
        ["1px", "2px", "3px", "2px"]


def test_side_after_shorthand_overrides_it():
    result = normalize_style({"margin": 8, "marginTop": 2})
    assert result["margin-top"] == "2px"
    assert result["margin-bottom"] == "8px"


def test_shorthand_after_side_overrides_it():
    result = normalize_style({"marginTop": 2, "margin": 8})
    assert result["margin-top"] == "8px"


def test_border_shorthand():
    result = normalize_style({"border": "solid 1px #999"})
    for side in ("top", "right", "bottom", "left"):
        assert result[f"border-{side}-width"] == "1px"
        assert result[f"border-{side}-style"] == "solid"
        assert result[f"border-{side}-color"] == "#999"


def test_border_without_width_is_medium():
    result = normalize_style({"border": "dashed red"})
    assert result["border-left-width"] == "3px"
    assert result["border-left-color"] == "red"


def test_border_none_has_no_width():
    result = normalize_style({"border": "none"})
    assert result["border-top-width"] == "0px"
    assert result["border-top-style"] == "none"


def test_border_keeps_explicit_width():
    assert normalize_style({"border": "2px"})["border-left-width"] == "2px"
    assert normalize_style({"border": "none 4px"})["border-top-width"] == "4px"
    assert normalize_style({"borderTop": "2px red"})["border-top-width"] == "2px"


def test_single_side_border():
    result = normalize_style({"borderBottom": "solid thick"})
    assert result == {
        "border-bottom-width": "5px",
        "border-bottom-style": "solid",
        "border-bottom-color": "currentcolor",
    }


def test_border_radius_uses_horizontal_radii():
    result = normalize_style({"borderRadius": "4px / 2px"})
    assert result["border-top-left-radius"] == "4px"
    assert result["border-bottom-left-radius"] == "4px"


def test_font_shorthand():
    result = normalize_style({"font": "bold 16px Montserrat,sans-serif"})
    assert result["font-weight"] == "bold"
    assert result["font-size"] == "16px"
    assert result["font-family"] == "Montserrat,sans-serif"
    assert result["line-height"] == "normal"


def test_font_shorthand_with_line_height():
    result = normalize_style({"font": "italic 12px/1.5 serif"})
    assert result["font-style"] == "italic"
    assert result["line-height"] == "1.5"
    assert result["font-family"] == "serif"


def test_font_without_size_is_kept(caplog):
    with caplog.at_level(logging.WARNING):
        result = normalize_style({"font": "bold"})
    assert result == {"font": "bold"}
    assert "font size" in caplog.text


def test_too_many_values_are_kept(caplog):
    with caplog.at_level(logging.WARNING):
        result = normalize_style({"margin": "1px 2px 3px 4px 5px"})
    assert result == {"margin": "1px 2px 3px 4px 5px"}
    assert "Could not expand" in caplog.text


def test_unknown_properties_pass_through():
    assert normalize_style({"fooBar": "baz"}) == {"foo-bar": "baz"}


def test_unset_values_are_dropped():
    assert normalize_style({"margin": None, "color": "red"}) == {"color": "red"}


def test_text_declarations():
    result = normalize_style("margin: 8px; color: red; ; nonsense")
    assert result["margin-left"] == "8px"
    assert result["color"] == "red"
    assert "nonsense" not in result


def test_empty_declarations():
    assert normalize_style(None) == {}
    assert normalize_style({}) == {}
    assert normalize_style("") == {}


def test_input_is_not_modified():
    style = {"margin": 8}
    normalize_style(style)
    assert style == {"margin": 8}


def test_serialize_style():
    assert serialize_style({"margin-top": "8px", "color": "red"}) == "margin-top: 8px; color: red"


def test_format_style():
    assert format_style({"padding": 4}) == (
        "padding-top: 4px; padding-right: 4px; padding-bottom: 4px; padding-left: 4px"
    )
