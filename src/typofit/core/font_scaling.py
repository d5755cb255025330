# SPDX-License-Identifier: Apache-2.0
"""Font size scaling utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ZeroExtentError, ZeroThresholdError
from .models import BoxLike, as_bbox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoxFontScaler:
    """Scale a font size with the height (or width) of a box.

    Attributes:
        reference_extent: Height or width of the reference box.
        base_size: Font size at the reference extent.
        by_height: Measure boxes by height instead of width.
    """

    reference_extent: float
    base_size: float
    by_height: bool = True

    def __call__(self, box: BoxLike) -> float:
        """Return the font size for a new box.

        Args:
            box: BBox or group of points.

        Returns:
            Font size scaled by the box's extent relative to the reference.
        """
        bbox = as_bbox(box)
        extent = bbox.height if self.by_height else bbox.width
        return self.base_size * (extent / self.reference_extent)


@dataclass(frozen=True)
class ThresholdFontScaler:
    """Scale a font size by how a value compares with a threshold.

    Attributes:
        threshold: Value at which the default size is kept.
        direction: Negative only shrinks, positive only grows, zero is
            unclamped.
    """

    threshold: float
    direction: float = 0

    def __call__(self, default_size: float, value: float) -> float:
        """Return the font size for a value.

        Args:
            default_size: Font size to base on.
            value: Value to compare with the threshold.

        Returns:
            ``default_size * value / threshold``, clamped per direction.
        """
        size = default_size * value / self.threshold
        if self.direction < 0:
            return min(size, default_size)
        if self.direction > 0:
            return max(size, default_size)
        return size


def font_size_to_box(
    box: BoxLike,
    ratio: float = 1.0,
    by_height: bool = True,
) -> BoxFontScaler:
    """Get a function to scale font size proportionally to box size changes.

    Args:
        box: Initial box, as a BBox or a group of points.
        ratio: Font size change ratio. The font size at the initial box is
            ``ratio * extent``.
        by_height: Scale by height; width when False.

    Returns:
        BoxFontScaler taking a new box and returning the new font size.

    Raises:
        ZeroExtentError: If the initial box has no extent in the chosen
            dimension.
    """
    bbox = as_bbox(box)
    extent = bbox.height if by_height else bbox.width
    if extent == 0:
        dimension = "height" if by_height else "width"
        raise ZeroExtentError(
            f"Reference box has zero {dimension}: {bbox}",
            operation="font_size_to_box",
        )

    logger.debug("Box font scaler: extent=%.2f ratio=%.2f", extent, ratio)
    return BoxFontScaler(
        reference_extent=extent,
        base_size=ratio * extent,
        by_height=by_height,
    )


def font_size_to_threshold(
    threshold: float,
    direction: float = 0,
) -> ThresholdFontScaler:
    """Get a function to scale font size based on a threshold value.

    Args:
        threshold: Threshold value.
        direction: If negative, sizes never exceed the default size; if
            positive, they never fall below it. Zero scales without limits.

    Returns:
        ThresholdFontScaler taking (default_size, value).

    Raises:
        ZeroThresholdError: If threshold is zero.
    """
    if threshold == 0:
        raise ZeroThresholdError(
            "Threshold must be non-zero", operation="font_size_to_threshold"
        )
    return ThresholdFontScaler(threshold=threshold, direction=direction)
