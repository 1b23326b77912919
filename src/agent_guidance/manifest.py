"""Rendering of the ``guidance_list.md`` overview file."""

from __future__ import annotations

from typing import Iterable

from agent_guidance.core.constants import DEFAULT_LANGUAGE, GUIDE_MARKER, GUIDE_SUFFIX

MANIFEST_HEADER = (
    "# Agent Guidance\n"
    "\n"
    "This directory contains guidance documentation for your agent.\n"
    "Use the `agent-guidance add <query>` command to add more guides.\n"
    "\n"
    "## Available Guides\n"
    "\n"
)

EMPTY_BUNDLE_NOTICE = "No guides found in the bundled library.\n"


def display_name(filename: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Derive a short display name from a guide filename.

    ``vercel_guide_en.md`` -> ``vercel``.  Only the first occurrence of the
    ``_guide_<lang>`` marker is removed.
    """
    stem = filename[: -len(GUIDE_SUFFIX)] if filename.endswith(GUIDE_SUFFIX) else filename
    return stem.replace(f"{GUIDE_MARKER}{language}", "", 1)


def render_manifest(guides: Iterable[str], language: str = DEFAULT_LANGUAGE) -> str:
    """Return the full manifest text for ``guides``."""
    lines = [f"- **{display_name(guide, language)}**: {guide}\n" for guide in guides]
    if not lines:
        return MANIFEST_HEADER + EMPTY_BUNDLE_NOTICE
    return MANIFEST_HEADER + "".join(lines)


__all__ = ["MANIFEST_HEADER", "EMPTY_BUNDLE_NOTICE", "display_name", "render_manifest"]
