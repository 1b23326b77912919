"""Shared constants for the guide bundle and the project output layout."""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

BUNDLE_DIR_NAME = "guides"
OUTPUT_DIR_NAME = ".agent_guidance"
MANIFEST_FILENAME = "guidance_list.md"

GUIDE_SUFFIX = ".md"
GUIDE_MARKER = "_guide_"

__all__ = [
    "BUNDLE_DIR_NAME",
    "DEFAULT_LANGUAGE",
    "GUIDE_MARKER",
    "GUIDE_SUFFIX",
    "MANIFEST_FILENAME",
    "OUTPUT_DIR_NAME",
]
