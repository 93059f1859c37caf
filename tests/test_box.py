"""
Tests for the Layout record and inner box computation.
"""

import logging

import pytest

from chart_layout.layout.box import Layout, compute_inner_box
from chart_layout.style.resolver import BoxEdges, resolve_style


def test_inner_box_subtracts_border_and_padding():
    layout = Layout.from_rect(0, 0, 100, 50)
    inner = compute_inner_box(layout, {"padding": 10, "border": "solid 2px #000"})

    assert (inner.x, inner.y, inner.width, inner.height) == (0, 0, 100, 50)
    assert (inner.inner_x, inner.inner_y) == (12, 12)
    assert (inner.inner_width, inner.inner_height) == (76, 26)
    assert inner.border == BoxEdges(2, 2, 2, 2)


def test_margin_does_not_affect_inner_box():
    layout = Layout.from_rect(10, 20, 100, 50)
    inner = compute_inner_box(layout, {"margin": 30})
    assert inner == layout


def test_percentages_resolve_against_the_layout():
    layout = Layout.from_rect(0, 0, 200, 100)
    inner = compute_inner_box(layout, {"padding": "10%"})
    assert inner.inner_x == pytest.approx(20)
    assert inner.inner_y == pytest.approx(10)
    assert inner.inner_width == pytest.approx(160)
    assert inner.inner_height == pytest.approx(80)


def test_explicit_context():
    layout = Layout.from_rect(0, 0, 200, 100)
    inner = compute_inner_box(layout, {"paddingTop": "10%"}, context={"width": 1000, "height": 1000})
    assert inner.inner_y == pytest.approx(100)


def test_resolved_style_is_used_as_is():
    style = resolve_style({"paddingLeft": "50%"}, {"width": 10})
    inner = compute_inner_box(Layout.from_rect(0, 0, 200, 100), style)
    assert inner.inner_x == 5


def test_over_constrained_inner_box_is_negative(caplog):
    layout = Layout.from_rect(0, 0, 100, 100)
    with caplog.at_level(logging.DEBUG, logger="chart_layout"):
        inner = compute_inner_box(layout, {"padding": 60})

    assert inner.inner_width == -20
    assert inner.inner_height == -20
    assert inner.is_degenerate
    assert "empty or negative" in caplog.text


def test_layout_defaults_inner_box_to_outer():
    layout = Layout(5, 6, 7, 8)
    assert (layout.inner_x, layout.inner_y, layout.inner_width, layout.inner_height) == (5, 6, 7, 8)
    assert layout.border == BoxEdges()
    assert not layout.is_degenerate


def test_replace_returns_a_new_layout():
    layout = Layout.from_rect(0, 0, 100, 100)
    changed = layout.replace(inner_height=40)
    assert changed.inner_height == 40
    assert layout.inner_height == 100


def test_replace_rejects_unknown_fields():
    with pytest.raises(TypeError):
        Layout.from_rect(0, 0, 1, 1).replace(depth=3)


def test_shrink():
    layout = Layout.from_rect(0, 0, 100, 100).shrink(top=10, right=5, bottom=20, left=15)
    assert (layout.inner_x, layout.inner_y, layout.inner_width, layout.inner_height) == (15, 10, 80, 70)
    assert (layout.x, layout.y, layout.width, layout.height) == (0, 0, 100, 100)


def test_inner_rect():
    layout = Layout.from_rect(0, 0, 100, 100).shrink(top=10, left=10)
    assert layout.inner_rect() == Layout.from_rect(10, 10, 90, 90)


def test_as_dict():
    inner = compute_inner_box(Layout.from_rect(0, 0, 10, 10), {"borderLeft": "solid 1px red"})
    record = inner.as_dict()
    assert record["border_left_width"] == 1
    assert record["border_top_width"] == 0
    assert record["inner_x"] == 1
    assert record["inner_width"] == 9
