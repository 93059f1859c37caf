"""
Tests for chart configuration.
"""

import json

import pytest

from chart_layout.errors import ConfigurationError
from chart_layout.layout.chart import layout_chart
from chart_layout.style.resolver import resolve_style
from chart_layout.utils.config import DEFAULT_OPTIONS, ChartConfig


def test_defaults(config):
    for name, value in DEFAULT_OPTIONS.items():
        assert config.option(name) == value
    chart = config.style("chart")
    assert chart["font-size"] == "12px"
    assert chart["padding-top"] == chart["padding-left"] == "8px"
    assert config.style("unknown") == {}


def test_options_override_defaults():
    config = ChartConfig(options={"variant": "line", "max_columns": 2})
    assert config.option("variant") == "line"
    assert config.max_columns == 2
    assert config.option("orientation") == "vertical"


def test_style_override_shorthand_replaces_default_sides():
    config = ChartConfig(styles={"drill_up_button": {"margin": 2}})
    style = resolve_style(config.style("drill_up_button"))
    assert style.margin.right == 2


def test_style_override_side_keeps_other_defaults():
    config = ChartConfig(styles={"y_axis": {"marginLeft": 0}})
    style = resolve_style(config.style("y_axis"))
    assert style.margin.left == 0
    assert style.margin.right == 8
    assert style.font.size == 12


def test_dotted_keys(config):
    config.set("options.category_axis_sort", "asc")
    assert config.get("options.category_axis_sort") == "asc"
    assert config.get("options.missing", "fallback") == "fallback"
    assert config.get("nothing.here") is None
    assert config.remove("options.category_axis_sort")
    assert not config.remove("options.category_axis_sort")
    assert config.option("category_axis_sort") == "firstSeries"


def test_get_all_is_a_copy(config):
    everything = config.get_all()
    everything["options"]["variant"] = "area"
    assert config.option("variant") == "bar"


@pytest.mark.parametrize("value", [0, -1, 1.5, "2", True])
def test_invalid_max_columns(value):
    config = ChartConfig(options={"max_columns": value})
    with pytest.raises(ConfigurationError):
        config.max_columns


def test_label_count_accepts_whole_floats():
    config = ChartConfig(options={"category_axis_max_label_count": 3.0})
    assert config.category_axis_max_label_count == 3


def test_save_and_load(tmp_path):
    path = tmp_path / "charts" / "config.json"
    config = ChartConfig(
        options={"variant": "stackedArea"},
        styles={"chart_title": {"fontSize": 20}},
        config_path=str(path),
    )
    config.save()

    loaded = ChartConfig(config_path=str(path))
    assert loaded.option("variant") == "stackedArea"
    assert loaded.style("chart_title")["font-size"] == "20px"


def test_arguments_override_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"options": {"variant": "line", "max_columns": 3}}))

    config = ChartConfig(options={"variant": "area"}, config_path=str(path))
    assert config.option("variant") == "area"
    assert config.max_columns == 3


def test_missing_file_uses_defaults(tmp_path):
    config = ChartConfig(config_path=str(tmp_path / "missing.json"))
    assert config.option("variant") == "bar"


def test_invalid_file_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        ChartConfig(config_path=str(path))


def test_save_without_path(config):
    with pytest.raises(ConfigurationError):
        config.save()


def test_css_text_styles():
    config = ChartConfig(styles={"chart": "padding: 4px; margin-top: 2px"})
    chart = config.style("chart")
    assert chart["padding-bottom"] == "4px"
    assert chart["margin-top"] == "2px"
    assert chart["font-size"] == "12px"


def test_css_text_styles_from_file(tmp_path, three_series, measurer):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"styles": {"chart": "padding: 4px", "cell": "padding: 0"}}))

    config = ChartConfig(config_path=str(path))
    geometry = layout_chart(400, 300, three_series, config, measurer=measurer)

    assert geometry.layout.inner_x == 4
    assert geometry.layout.inner_width == 392
    cell = geometry.cells[0].layout
    assert (cell.inner_x, cell.inner_width) == (cell.x, cell.width)
    assert len(geometry.plots) == 3


@pytest.mark.parametrize("content", ["[1, 2]", '"bar"', '{"options": null}', '{"styles": ["padding"]}'])
def test_non_object_sections_raise(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        ChartConfig(config_path=str(path))
