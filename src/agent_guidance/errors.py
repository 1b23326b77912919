"""Exception hierarchy for guide lookup failures."""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from agent_guidance.runtime.resolver import GuideMatch


class GuidanceError(Exception):
    """Base exception for agent-guidance errors."""
    pass


class GuideNotFoundError(GuidanceError):
    """No bundled guide matches the query, even after language fallback."""

    def __init__(self, query: str, match: "GuideMatch | None" = None):
        self.query = query
        self.match = match
        super().__init__(f"No guides found matching '{query}'.")


class AmbiguousGuideError(GuidanceError):
    """The query matches more than one bundled guide.

    ``matches`` holds the raw filenames so the user can pick a longer
    prefix that selects exactly one of them.
    """

    def __init__(
        self,
        query: str,
        matches: Sequence[str],
        match: "GuideMatch | None" = None,
    ):
        self.query = query
        self.matches = list(matches)
        self.match = match
        listing = ", ".join(self.matches)
        super().__init__(
            f"Multiple matches found for '{query}': {listing}. Please be more specific."
        )
