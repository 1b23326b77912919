"""Core configuration and constants for agent-guidance."""

from .config import GuidanceConfig
from .constants import DEFAULT_LANGUAGE, MANIFEST_FILENAME, OUTPUT_DIR_NAME

__all__ = ["GuidanceConfig", "DEFAULT_LANGUAGE", "MANIFEST_FILENAME", "OUTPUT_DIR_NAME"]
