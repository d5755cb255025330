# SPDX-License-Identifier: Apache-2.0
"""Typography error definitions."""

from __future__ import annotations


class TypographyError(ValueError):
    """Base exception for invalid typography inputs."""

    def __init__(
        self,
        message: str,
        operation: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.cause = cause


class SampleMismatchError(TypographyError):
    """Sample set and distribution lengths differ."""


class InvalidWidthError(TypographyError):
    """Target width is negative."""


class ZeroExtentError(TypographyError):
    """Reference box has no extent in the scaled dimension."""


class ZeroThresholdError(TypographyError):
    """Threshold of zero."""


class FontLoadError(TypographyError):
    """Font for a measurer could not be loaded."""


class MeasurerClosedError(TypographyError):
    """Measurer used after close()."""


class UnknownBackendError(TypographyError):
    """Measurer backend name not recognized."""
