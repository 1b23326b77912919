"""Path configuration passed into the resolver and the guide operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from agent_guidance.core.constants import MANIFEST_FILENAME, OUTPUT_DIR_NAME
from agent_guidance.runtime.home import get_bundle_root


@dataclass(frozen=True)
class GuidanceConfig:
    """Where guides are read from and where they are written to."""

    bundle_root: Path
    output_dir: Path

    @classmethod
    def default(cls, cwd: Path | None = None) -> "GuidanceConfig":
        """Build the configuration for a CLI invocation.

        Args:
            cwd: Project directory; defaults to the process working directory.
        """
        project_dir = cwd if cwd is not None else Path.cwd()
        return cls(bundle_root=get_bundle_root(), output_dir=project_dir / OUTPUT_DIR_NAME)

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / MANIFEST_FILENAME
