"""Package asset discovery for the bundled guide library.

The bundle ships inside the ``agent_guidance`` package as ``guides/``,
one subdirectory per language code::

    guides/
        en/vercel_guide_en.md
        zh/vercel_guide_zh.md
"""

from __future__ import annotations

import importlib.resources
from pathlib import Path

from agent_guidance.core.constants import BUNDLE_DIR_NAME


def get_bundle_root() -> Path:
    """Return the path to the package's bundled guide library.

    Returns:
        Path: Absolute path to the ``guides`` directory in the package.

    Raises:
        FileNotFoundError: If the bundle cannot be located (broken install).
    """
    pkg_root = importlib.resources.files("agent_guidance")
    bundle_root = Path(str(pkg_root)) / BUNDLE_DIR_NAME
    if bundle_root.is_dir():
        return bundle_root

    raise FileNotFoundError(
        f"Cannot locate bundled guides at {bundle_root}. Reinstall agent-guidance."
    )
