# SPDX-License-Identifier: Apache-2.0
"""Tests for geometry models."""

from __future__ import annotations

from typofit.core.models import BBox, as_bbox


class TestBBox:
    """Tests for BBox."""

    def test_dimensions(self) -> None:
        bbox = BBox(10, 20, 110, 70)
        assert bbox.width == 100
        assert bbox.height == 50

    def test_dict_round_trip(self) -> None:
        bbox = BBox(1.0, 2.0, 3.0, 4.0)
        assert bbox.to_dict() == {"x0": 1.0, "y0": 2.0, "x1": 3.0, "y1": 4.0}
        assert BBox.from_dict(bbox.to_dict()) == bbox

    def test_from_size(self) -> None:
        assert BBox.from_size(30, 40) == BBox(0.0, 0.0, 30.0, 40.0)


class TestFromPoints:
    """Tests for BBox.from_points."""

    def test_enclosing_box(self) -> None:
        bbox = BBox.from_points([(5, 1), (-2, 8), (3, -4)])
        assert bbox == BBox(-2.0, -4.0, 5.0, 8.0)
        assert bbox.width == 7.0
        assert bbox.height == 12.0

    def test_empty(self) -> None:
        bbox = BBox.from_points([])
        assert bbox.width == 0.0
        assert bbox.height == 0.0

    def test_single_point(self) -> None:
        bbox = BBox.from_points([(3, 4)])
        assert (bbox.width, bbox.height) == (0.0, 0.0)

    def test_collinear_points(self) -> None:
        bbox = BBox.from_points([(0, 2), (10, 2), (5, 2)])
        assert bbox.width == 10.0
        assert bbox.height == 0.0

    def test_generator_and_extra_coordinates(self) -> None:
        """Any iterable works and z coordinates are ignored."""
        bbox = BBox.from_points((x, x * 2, 99) for x in range(4))
        assert bbox == BBox(0.0, 0.0, 3.0, 6.0)


class TestAsBBox:
    """Tests for as_bbox."""

    def test_passthrough(self) -> None:
        bbox = BBox(0, 0, 1, 1)
        assert as_bbox(bbox) is bbox

    def test_points(self) -> None:
        assert as_bbox([[0, 0], [2, 3]]) == BBox(0.0, 0.0, 2.0, 3.0)
