"""Bundle discovery and guide resolution."""

from .home import get_bundle_root
from .resolver import GuideMatch, GuideResolver

__all__ = ["GuideMatch", "GuideResolver", "get_bundle_root"]
