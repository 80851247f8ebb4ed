# PySeedLink/__init__.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

from .seedlink import (
    SeedLinkConnection,
    CRNL,
    HELLO_COMMAND,
    CAT_COMMAND,
    CAT_NOT_IMPLEMENTED,
)

__all__ = [
    "SeedLinkConnection",
    "CRNL",
    "HELLO_COMMAND",
    "CAT_COMMAND",
    "CAT_NOT_IMPLEMENTED",
]
