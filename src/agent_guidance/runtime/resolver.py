"""Guide resolution: query + language -> bundled guide file.

Guides live in one collection per language under the bundle root.  A
query selects guides whose filename starts with it (raw, case-sensitive
prefix).  When nothing matches in a non-default language the lookup is
retried once against the default language collection; the fallback is
never chained further.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from agent_guidance.core.constants import DEFAULT_LANGUAGE, GUIDE_SUFFIX

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GuideMatch:
    """Filenames matching a query, with the collection they came from."""

    matches: tuple[str, ...]
    language: str
    fell_back: bool = False

    @property
    def is_unique(self) -> bool:
        return len(self.matches) == 1


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

class GuideResolver:
    """List and filter the guides of a bundle rooted at ``bundle_root``."""

    def __init__(self, bundle_root: Path):
        self.bundle_root = bundle_root

    def collection_dir(self, language: str) -> Path:
        return self.bundle_root / language

    def source_path(self, filename: str, language: str) -> Path:
        """Return the bundle path of ``filename`` in the ``language`` collection."""
        return self.collection_dir(language) / filename

    def list_guides(self, language: str = DEFAULT_LANGUAGE) -> list[str]:
        """Return the guide filenames available in ``language``.

        A language without a collection yields an empty list.  Any other
        filesystem error (e.g. permission denied) propagates.
        """
        lang_dir = self.collection_dir(language)
        if not lang_dir.is_dir():
            logger.debug("No guide collection for language %r at %s", language, lang_dir)
            return []

        guides = sorted(
            entry.name
            for entry in lang_dir.iterdir()
            if entry.name.endswith(GUIDE_SUFFIX) and entry.is_file()
        )
        logger.debug("Found %d guide(s) in %s", len(guides), lang_dir)
        return guides

    def _matching(self, query: str, language: str) -> tuple[str, ...]:
        return tuple(name for name in self.list_guides(language) if name.startswith(query))

    def find_guide(self, query: str, language: str | None = DEFAULT_LANGUAGE) -> GuideMatch:
        """Return the guides in ``language`` whose filename starts with ``query``.

        Falls back to the default language exactly once when ``language``
        has no match; the returned ``GuideMatch.language`` always names the
        collection the matches were taken from.

        Raises:
            ValueError: If ``query`` is empty.
        """
        if not query:
            raise ValueError("Guide query must be a non-empty string.")

        language = language or DEFAULT_LANGUAGE
        matches = self._matching(query, language)
        if matches or language == DEFAULT_LANGUAGE:
            return GuideMatch(matches=matches, language=language)

        logger.info(
            "No matches for %r in %r; falling back to %r",
            query,
            language,
            DEFAULT_LANGUAGE,
        )
        return GuideMatch(
            matches=self._matching(query, DEFAULT_LANGUAGE),
            language=DEFAULT_LANGUAGE,
            fell_back=True,
        )


__all__ = ["GuideMatch", "GuideResolver"]
