"""Install bundled guides into a project's ``.agent_guidance`` directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from agent_guidance.core.config import GuidanceConfig
from agent_guidance.core.constants import DEFAULT_LANGUAGE
from agent_guidance.errors import AmbiguousGuideError, GuideNotFoundError
from agent_guidance.manifest import render_manifest
from agent_guidance.runtime.resolver import GuideResolver

logger = logging.getLogger(__name__)


class AddStatus(Enum):
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class AddResult:
    filename: str
    language: str
    destination: Path
    status: AddStatus
    fell_back: bool = False


@dataclass(frozen=True)
class InitResult:
    manifest_path: Path
    guides: tuple[str, ...]


def _ensure_output_dir(output_dir: Path) -> None:
    if not output_dir.is_dir():
        logger.debug("Creating output directory %s", output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


def add_guide(
    query: str,
    language: str | None,
    config: GuidanceConfig,
    resolver: GuideResolver | None = None,
) -> AddResult:
    """Copy the single guide matching ``query`` into the output directory.

    An existing destination file is left untouched and reported as
    ``AddStatus.ALREADY_EXISTS``.

    Raises:
        GuideNotFoundError: No guide matches, even after language fallback.
        AmbiguousGuideError: More than one guide matches; nothing is copied.
        OSError: The output directory or the copy could not be written.
    """
    resolver = resolver or GuideResolver(config.bundle_root)
    match = resolver.find_guide(query, language or DEFAULT_LANGUAGE)

    if not match.matches:
        raise GuideNotFoundError(query, match)
    if not match.is_unique:
        raise AmbiguousGuideError(query, match.matches, match)

    filename = match.matches[0]
    source = resolver.source_path(filename, match.language)

    _ensure_output_dir(config.output_dir)
    destination = config.output_dir / filename

    if destination.exists():
        logger.debug("Guide %s already present at %s", filename, destination)
        status = AddStatus.ALREADY_EXISTS
    else:
        shutil.copyfile(source, destination)
        logger.debug("Copied %s -> %s", source, destination)
        status = AddStatus.ADDED

    return AddResult(
        filename=filename,
        language=match.language,
        destination=destination,
        status=status,
        fell_back=match.fell_back,
    )


def init_guidance(
    config: GuidanceConfig,
    resolver: GuideResolver | None = None,
) -> InitResult:
    """Create the output directory and regenerate the guide manifest.

    The manifest always lists the default-language collection and is
    overwritten on every call.  Previously added guides are not touched.
    """
    resolver = resolver or GuideResolver(config.bundle_root)
    _ensure_output_dir(config.output_dir)

    guides = resolver.list_guides(DEFAULT_LANGUAGE)
    manifest_path = config.manifest_path
    manifest_path.write_text(render_manifest(guides, DEFAULT_LANGUAGE), encoding="utf-8")
    logger.debug("Wrote manifest with %d guide(s) to %s", len(guides), manifest_path)

    return InitResult(manifest_path=manifest_path, guides=tuple(guides))


__all__ = ["AddResult", "AddStatus", "InitResult", "add_guide", "init_guidance"]
