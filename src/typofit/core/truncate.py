# SPDX-License-Identifier: Apache-2.0
"""Single-pass text truncation."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from .errors import InvalidWidthError

logger = logging.getLogger(__name__)


def truncate(
    measure: Callable[[str], float],
    text: str,
    width: float,
    tail: str = "",
) -> tuple[str, int]:
    """Truncate text to fit a width.

    The cut point is extrapolated linearly from one measurement of the full
    text, so it is exact only when ``measure`` is linear in text length
    (as with a TextWidthEstimator). The result is not re-measured.

    Args:
        measure: Function that measures text width.
        text: Text to truncate.
        width: Width to fit.
        tail: Overflow marker such as "...". Its characters are taken from
            the kept text, not added on top.

    Returns:
        Tuple of (resulting text, number of characters kept from the
        original text). The count never includes the tail.

    Raises:
        InvalidWidthError: If width is negative.
    """
    if width < 0:
        raise InvalidWidthError(
            f"Width must be non-negative, got {width}", operation="truncate"
        )

    full_width = measure(text)
    if full_width <= width:
        return text, len(text)

    trim = math.floor(len(text) * min(1.0, width / full_width))
    if trim >= len(text):
        return text, len(text)

    trim = max(0, trim - len(tail))
    logger.debug(
        "Truncated %d chars to %d (measured %.2f > %.2f)",
        len(text),
        trim,
        full_width,
        width,
    )
    return text[:trim] + tail, trim
