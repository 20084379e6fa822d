# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Exception types raised across Tonekit."""

from __future__ import annotations


class TonekitError(Exception):
    """Base class for all Tonekit errors."""


class InvalidHexError(TonekitError, ValueError):
    """A string could not be parsed as a 6-digit RGB hex color."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r} (expected #RRGGBB)")


class ExtractionError(TonekitError):
    """Seed colors could not be extracted from an image."""


class ExtractionCancelled(ExtractionError):
    """Extraction was aborted by the caller before producing a result."""


class BridgeError(TonekitError):
    """A design-tool host rejected a variable write.

    Writes that succeeded before the failure are kept; ``applied`` tells
    how many there were.
    """

    def __init__(self, message: str, applied: int = 0) -> None:
        self.applied = applied
        super().__init__(message)
