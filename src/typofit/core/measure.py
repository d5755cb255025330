# SPDX-License-Identifier: Apache-2.0
"""Accurate text measurers.

These are plain callables ``(text) -> width`` that can be passed as the
``measure`` argument of text_width_estimator() and truncate().
"""

from __future__ import annotations

import ctypes
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pypdfium2 as pdfium  # type: ignore[import-untyped]
from PIL import ImageFont

from .errors import FontLoadError, MeasurerClosedError, UnknownBackendError

logger = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 12.0

# PDF standard 14 fonts, always available to PDFium without embedding
STANDARD_FONTS: frozenset[str] = frozenset(
    {
        "Courier",
        "Courier-Bold",
        "Courier-BoldOblique",
        "Courier-Oblique",
        "Helvetica",
        "Helvetica-Bold",
        "Helvetica-BoldOblique",
        "Helvetica-Oblique",
        "Times-Roman",
        "Times-Bold",
        "Times-BoldItalic",
        "Times-Italic",
        "Symbol",
        "ZapfDingbats",
    }
)


def _check_font_size(font_size: float, operation: str) -> None:
    if font_size <= 0:
        raise FontLoadError(
            f"Font size must be positive, got {font_size}", operation=operation
        )


@dataclass
class MeasureConfig:
    """Text measurer configuration."""

    backend: str = "pdfium"  # "pdfium" or "pillow"
    font_name: str = DEFAULT_FONT_NAME
    font_size: float = DEFAULT_FONT_SIZE
    font_path: Path | None = None  # pillow only; None = Pillow default font


class PdfiumTextMeasurer:
    """Measure text with PDFium glyph widths of a standard PDF font."""

    def __init__(
        self,
        font_size: float = DEFAULT_FONT_SIZE,
        font_name: str = DEFAULT_FONT_NAME,
    ) -> None:
        """Initialize PdfiumTextMeasurer.

        Args:
            font_size: Font size in points.
            font_name: One of the PDF standard 14 font names.

        Raises:
            FontLoadError: If the font size is not positive, the font is not
                a standard font or PDFium fails to load it.
        """
        _check_font_size(font_size, "PdfiumTextMeasurer")
        if font_name not in STANDARD_FONTS:
            raise FontLoadError(
                f"Not a standard PDF font: {font_name}",
                operation="PdfiumTextMeasurer",
            )

        self._font_size = float(font_size)
        self._font_name = font_name
        self._doc = pdfium.PdfDocument.new()
        self._font = pdfium.raw.FPDFText_LoadStandardFont(
            self._doc.raw, font_name.encode("ascii")
        )
        if not self._font:
            self._doc.close()
            raise FontLoadError(
                f"PDFium could not load font: {font_name}",
                operation="PdfiumTextMeasurer",
            )
        logger.debug("Loaded standard font %s at %.1fpt", font_name, font_size)

    @property
    def font_size(self) -> float:
        return self._font_size

    @property
    def font_name(self) -> str:
        return self._font_name

    def __call__(self, text: str) -> float:
        """Calculate the width of text in points.

        Args:
            text: Text to measure.

        Returns:
            Sum of glyph advance widths. Glyphs PDFium cannot size count as 0.

        Raises:
            MeasurerClosedError: If close() was called.
        """
        if self._font is None:
            raise MeasurerClosedError(
                "Measurer is closed", operation="PdfiumTextMeasurer"
            )
        if not text:
            return 0.0

        total_width = 0.0
        width_out = ctypes.c_float()

        for char in text:
            result = pdfium.raw.FPDFFont_GetGlyphWidth(
                self._font,
                ord(char),
                ctypes.c_float(self._font_size),
                ctypes.byref(width_out),
            )
            if result:
                total_width += width_out.value

        return total_width

    def close(self) -> None:
        """Release the PDFium font and document."""
        if self._font:
            pdfium.raw.FPDFFont_Close(self._font)
            self._font = None
        self._doc.close()

    def __enter__(self) -> PdfiumTextMeasurer:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class PillowTextMeasurer:
    """Measure text with a Pillow font's advance length."""

    def __init__(
        self,
        font: Any | None = None,
        font_path: Path | str | None = None,
        font_size: float = DEFAULT_FONT_SIZE,
    ) -> None:
        """Initialize PillowTextMeasurer.

        Args:
            font: Already loaded Pillow font. Takes precedence over font_path.
            font_path: TrueType/OpenType file to load at font_size.
            font_size: Font size in pixels.

        Raises:
            FontLoadError: If font_size is not positive or font_path cannot
                be loaded.
        """
        if font is not None:
            self._font = font
        elif font_path is not None:
            _check_font_size(font_size, "PillowTextMeasurer")
            try:
                self._font = ImageFont.truetype(str(font_path), font_size)
            except (OSError, ValueError) as e:
                raise FontLoadError(
                    f"Could not load font file: {font_path}",
                    operation="PillowTextMeasurer",
                    cause=e,
                ) from e
        else:
            _check_font_size(font_size, "PillowTextMeasurer")
            self._font = ImageFont.load_default(size=font_size)

    @property
    def font(self) -> Any:
        return self._font

    def __call__(self, text: str) -> float:
        if not text:
            return 0.0
        return float(self._font.getlength(text))

    def close(self) -> None:
        """Pillow fonts hold no native handles; nothing to release."""

    def __enter__(self) -> PillowTextMeasurer:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_measurer(
    config: MeasureConfig | None = None,
) -> PdfiumTextMeasurer | PillowTextMeasurer:
    """Build a measurer for a configuration.

    Args:
        config: Measurer configuration. Defaults to PDFium Helvetica 12pt.

    Returns:
        PdfiumTextMeasurer or PillowTextMeasurer.

    Raises:
        UnknownBackendError: If the backend is unknown.
    """
    config = config or MeasureConfig()
    if config.backend == "pdfium":
        return PdfiumTextMeasurer(font_size=config.font_size, font_name=config.font_name)
    if config.backend == "pillow":
        return PillowTextMeasurer(font_path=config.font_path, font_size=config.font_size)
    raise UnknownBackendError(
        f"Unknown measurer backend: {config.backend}", operation="create_measurer"
    )
