# SPDX-License-Identifier: Apache-2.0
"""Core typography heuristics."""

from .errors import (
    FontLoadError,
    InvalidWidthError,
    MeasurerClosedError,
    SampleMismatchError,
    TypographyError,
    UnknownBackendError,
    ZeroExtentError,
    ZeroThresholdError,
)
from .estimator import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_SAMPLES,
    TextWidthEstimator,
    text_width_estimator,
)
from .font_scaling import (
    BoxFontScaler,
    ThresholdFontScaler,
    font_size_to_box,
    font_size_to_threshold,
)
from .measure import (
    MeasureConfig,
    PdfiumTextMeasurer,
    PillowTextMeasurer,
    create_measurer,
)
from .models import BBox, Point, as_bbox
from .truncate import truncate

__all__ = [
    "BBox",
    "BoxFontScaler",
    "DEFAULT_DISTRIBUTION",
    "DEFAULT_SAMPLES",
    "FontLoadError",
    "InvalidWidthError",
    "MeasureConfig",
    "MeasurerClosedError",
    "PdfiumTextMeasurer",
    "PillowTextMeasurer",
    "Point",
    "SampleMismatchError",
    "TextWidthEstimator",
    "ThresholdFontScaler",
    "TypographyError",
    "UnknownBackendError",
    "ZeroExtentError",
    "ZeroThresholdError",
    "as_bbox",
    "create_measurer",
    "font_size_to_box",
    "font_size_to_threshold",
    "text_width_estimator",
    "truncate",
]
