"""Tests for geometry primitives and path helpers."""

from __future__ import annotations

import unittest
from dataclasses import fields

from deviceframe.errors import InvalidScreenSizeError
from deviceframe.geometry import (
    AddRoundRect,
    CornerRadius,
    EdgeInsets,
    FillRule,
    Offset,
    Path,
    PathBuilder,
    Rect,
    Size,
    validate_screen_size,
)


class RectTests(unittest.TestCase):
    def test_from_offset_size(self) -> None:
        rect = Rect.from_offset_size(Offset(10.0, 20.0), Size(30.0, 40.0))
        self.assertEqual(rect, Rect(10.0, 20.0, 40.0, 60.0))
        self.assertEqual(rect.size, Size(30.0, 40.0))
        self.assertEqual(rect.center, Offset(25.0, 40.0))

    def test_deflate_shrinks_each_edge(self) -> None:
        rect = Rect(0.0, 0.0, 100.0, 200.0).deflate(EdgeInsets(left=1, top=2, right=3, bottom=4))
        self.assertEqual(rect, Rect(1.0, 2.0, 97.0, 196.0))

    def test_contains_rect(self) -> None:
        outer = Rect(0.0, 0.0, 100.0, 100.0)
        self.assertTrue(outer.contains_rect(Rect(0.0, 0.0, 100.0, 100.0)))
        self.assertFalse(outer.contains_rect(Rect(-1.0, 0.0, 50.0, 50.0)))


class EdgeInsetsTests(unittest.TestCase):
    def test_negative_inset_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            EdgeInsets(left=-1.0)

    def test_all_and_totals(self) -> None:
        insets = EdgeInsets.all(6.0)
        self.assertEqual(insets.horizontal, 12.0)
        self.assertEqual(insets.vertical, 12.0)

    def test_zero_is_a_shared_class_constant(self) -> None:
        self.assertEqual(EdgeInsets.ZERO, EdgeInsets())
        self.assertNotIn("ZERO", {f.name for f in fields(EdgeInsets)})


class PathTests(unittest.TestCase):
    def test_round_rect_bounds(self) -> None:
        path = Path.round_rect(Rect(21.0, 86.0, 381.0, 886.0), CornerRadius(10.0))
        self.assertEqual(path.bounds(), Rect(21.0, 86.0, 381.0, 886.0))
        self.assertIsInstance(path.commands[0], AddRoundRect)

    def test_cubic_bounds_include_curve_extrema(self) -> None:
        path = Path.from_commands(
            (
                ("M", 0, 0),
                ("C", 0, 100, 100, 100, 100, 0),
                ("Z",),
            )
        )
        bounds = path.bounds()
        self.assertEqual(bounds.left, 0.0)
        self.assertEqual(bounds.right, 100.0)
        self.assertAlmostEqual(bounds.bottom, 75.0)

    def test_from_commands_rejects_unknown_operator(self) -> None:
        with self.assertRaises(ValueError):
            Path.from_commands((("Q", 1, 2, 3, 4),))

    def test_translate_moves_every_command(self) -> None:
        path = (
            PathBuilder(fill_rule=FillRule.EVEN_ODD)
            .move_to(0, 0)
            .line_to(10, 0)
            .add_oval(Rect(0.0, 0.0, 4.0, 4.0))
            .close()
            .build()
        )
        moved = path.translate(5.0, 7.0)
        self.assertEqual(moved.bounds(), Rect(5.0, 7.0, 15.0, 11.0))
        self.assertIs(moved.fill_rule, FillRule.EVEN_ODD)

    def test_svg_path_data(self) -> None:
        path = Path.from_commands((("M", 0, 0), ("L", 10.5, 0), ("Z",)))
        self.assertEqual(path.to_svg_path_data(), "M0 0 L10.5 0 Z")

    def test_empty_path_bounds(self) -> None:
        self.assertTrue(Path().is_empty)
        self.assertEqual(Path().bounds(), Rect(0.0, 0.0, 0.0, 0.0))


class ScreenSizeValidationTests(unittest.TestCase):
    def test_zero_dimension_is_rejected(self) -> None:
        with self.assertRaises(InvalidScreenSizeError):
            validate_screen_size(Size(0.0, 800.0))

    def test_negative_dimension_is_rejected(self) -> None:
        with self.assertRaises(InvalidScreenSizeError):
            validate_screen_size(Size(360.0, -1.0))

    def test_valid_size_is_returned(self) -> None:
        self.assertEqual(validate_screen_size(Size(1.0, 1.0)), Size(1.0, 1.0))
