"""
Tests for laying out whole charts.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from chart_layout.layout.chart import layout_chart
from chart_layout.utils.config import ChartConfig


def test_one_cell_per_series(three_series, measurer):
    config = ChartConfig(options={"max_columns": 2})
    chart = layout_chart(400, 300, three_series, config, measurer=measurer)

    layout = chart.layout
    assert (layout.inner_x, layout.inner_y, layout.inner_width, layout.inner_height) == (8, 8, 384, 284)
    assert len(chart.cells) == 3
    assert [(cell.layout.x, cell.layout.y) for cell in chart.cells] == [(8, 8), (200, 8), (8, 150)]
    assert [cell.series["label"] for cell in chart.cells] == ["North", "South", "West"]
    assert len(chart.plots) == 3


def test_cell_title_and_plot(three_series, measurer):
    config = ChartConfig(options={"max_columns": 2})
    first = layout_chart(400, 300, three_series, config, measurer=measurer).cells[0]

    assert (first.layout.inner_x, first.layout.inner_y) == (12, 12)
    title = first.heading.title
    assert (title.x, title.y, title.width, title.height) == (12, 12, 184, 14)
    assert first.heading.layout.inner_y == 12 + 18

    grid = first.plot.grid
    assert (grid.x, grid.y, grid.width, grid.height) == (33, 36, 162, 116 - 21 - 6)


def test_chart_title_and_drill_up_button(three_series, measurer):
    chart = layout_chart(400, 300, three_series, title="Sales", drill_up=True, measurer=measurer)

    assert chart.heading.title is not None
    assert chart.heading.button is not None
    assert chart.heading.layout.inner_y == 8 + 32
    assert all(cell.layout.y == 40 for cell in chart.cells)


def test_drill_up_button_is_optional(three_series, measurer):
    chart = layout_chart(400, 300, three_series, title="Sales", measurer=measurer)
    assert chart.heading.button is None


def test_stacked_variant_uses_a_single_cell(three_series, measurer):
    config = ChartConfig(options={"variant": "stackedBar"})
    chart = layout_chart(400, 300, three_series, config, measurer=measurer)

    assert len(chart.cells) == 1
    cell = chart.cells[0]
    assert cell.heading.title is None
    assert cell.heading.layout is cell.layout
    assert cell.plot.values == [5, 12, 12, 3]


def test_shared_scales(three_series, measurer):
    config = ChartConfig(options={
        "category_axis_scale": "shared",
        "value_axis_scale": "shared",
        "category_axis_sort": "desc",
    })
    chart = layout_chart(600, 300, three_series, config, measurer=measurer)

    for plot in chart.plots:
        assert plot.categories == ["Q4", "Q3", "Q2", "Q1"]
        assert plot.max_value == 12
        assert plot.value_axis_max == 12


def test_separate_scales(three_series, measurer):
    chart = layout_chart(600, 300, three_series, measurer=measurer)
    assert [plot.categories for plot in chart.plots] == [["Q1", "Q2"], ["Q2", "Q3"], ["Q1", "Q4"]]
    assert [plot.max_value for plot in chart.plots] == [7, 12, 3]


def test_no_data_overlay(measurer):
    series = [
        {"label": "Empty", "data": []},
        {"label": "Full", "data": [{"name": "Q1", "value": 1}]},
    ]
    config = ChartConfig(options={"no_data_text": "No data"})
    chart = layout_chart(400, 300, series, config, measurer=measurer)

    empty, full = chart.cells
    assert empty.plot is None
    assert empty.overlay.text == "No data"
    assert empty.overlay.region == empty.heading.layout.inner_rect()
    assert full.overlay is None
    assert full.plot is not None


def test_empty_series_without_overlay_still_lays_out(measurer):
    chart = layout_chart(400, 300, [{"label": "Empty", "data": []}], measurer=measurer)
    plot = chart.cells[0].plot

    assert plot.categories == []
    assert plot.max_value is None
    assert plot.y_axis.width == 16


def test_no_series_gives_one_empty_cell(measurer):
    chart = layout_chart(400, 300, [], measurer=measurer)
    assert len(chart.cells) == 1


def test_tiny_chart_is_degenerate_not_an_error(three_series, measurer):
    chart = layout_chart(20, 20, three_series, measurer=measurer)
    assert all(plot.grid.width < 0 for plot in chart.plots)


def test_layout_is_timed(caplog, three_series, measurer):
    with caplog.at_level(logging.DEBUG, logger="chart_layout"):
        layout_chart(400, 300, three_series, measurer=measurer)
    assert "chart layout took" in caplog.text


def test_concurrent_layouts_time_independently(caplog, three_series, measurer):
    config = ChartConfig(options={"max_columns": 2})

    def run(_):
        return layout_chart(400, 300, three_series, config, measurer=measurer)

    with caplog.at_level(logging.DEBUG, logger="chart_layout"):
        with ThreadPoolExecutor(max_workers=4) as executor:
            charts = list(executor.map(run, range(8)))

    assert "No start time found" not in caplog.text
    assert caplog.text.count("chart layout took") == 8
    first = [cell.layout for cell in charts[0].cells]
    assert all([cell.layout for cell in chart.cells] == first for chart in charts)
