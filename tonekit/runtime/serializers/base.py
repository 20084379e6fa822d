# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Whitespace style for JSON-producing serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


class ExportFormat(Enum):
    """Export targets understood by ``serialize``."""

    CSV = "csv"
    CSS = "css"
    TAILWIND = "tailwind"
    JSON = "json"

    @property
    def extension(self) -> str:
        return {
            ExportFormat.CSV: "csv",
            ExportFormat.CSS: "css",
            ExportFormat.TAILWIND: "js",
            ExportFormat.JSON: "json",
        }[self]
