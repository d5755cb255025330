# SPDX-License-Identifier: Apache-2.0
"""Typography layout heuristics: width estimation, truncation and font scaling."""

from typofit.core import (
    BBox,
    BoxFontScaler,
    TextWidthEstimator,
    ThresholdFontScaler,
    TypographyError,
    font_size_to_box,
    font_size_to_threshold,
    text_width_estimator,
    truncate,
)

__version__ = "0.1.0"

__all__ = [
    "BBox",
    "BoxFontScaler",
    "TextWidthEstimator",
    "ThresholdFontScaler",
    "TypographyError",
    "font_size_to_box",
    "font_size_to_threshold",
    "text_width_estimator",
    "truncate",
]
