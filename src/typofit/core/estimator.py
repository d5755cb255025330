# SPDX-License-Identifier: Apache-2.0
"""Heuristic text width estimation.

An accurate measurer (font metrics, canvas API) is sampled once on a few
reference glyphs. The weighted sample widths give an average character
width, and any later text is estimated as ``len(text) * average``. This is
a monospace approximation: fast, but rough for proportional fonts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .errors import SampleMismatchError

logger = logging.getLogger(__name__)

# Wide, typical and narrow glyphs with their assumed frequency in running text
DEFAULT_SAMPLES: tuple[str, ...] = ("M", "n", ".")
DEFAULT_DISTRIBUTION: tuple[float, ...] = (0.06, 0.8, 0.14)


@dataclass(frozen=True)
class TextWidthEstimator:
    """Calibrated width estimator.

    Attributes:
        average_char_width: Weighted average width of one character.
    """

    average_char_width: float

    def __call__(self, text: str) -> float:
        return len(text) * self.average_char_width


def text_width_estimator(
    measure: Callable[[str], float],
    samples: Sequence[str] = DEFAULT_SAMPLES,
    distribution: Sequence[float] = DEFAULT_DISTRIBUTION,
) -> TextWidthEstimator:
    """Create a heuristic text width estimator.

    The distribution is not normalized; the average is the dot product of
    the distribution and the measured sample widths.

    Args:
        measure: Function that measures text width accurately. Called once
            per sample, never afterwards.
        samples: Sample strings.
        distribution: Weight of each sample, in the same order as samples.

    Returns:
        Estimator returning ``len(text) * average_char_width``.

    Raises:
        SampleMismatchError: If samples and distribution differ in length.
    """
    if len(samples) != len(distribution):
        raise SampleMismatchError(
            f"Got {len(samples)} samples but {len(distribution)} weights",
            operation="text_width_estimator",
        )

    measured = [measure(sample) for sample in samples]
    average = sum(
        weight * width for weight, width in zip(distribution, measured)
    )
    logger.debug(
        "Calibrated width estimator: samples=%s widths=%s average=%.4f",
        list(samples),
        measured,
        average,
    )
    return TextWidthEstimator(average_char_width=average)
