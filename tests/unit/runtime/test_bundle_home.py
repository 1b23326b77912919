"""Tests for locating the bundled guide library."""

from __future__ import annotations

from pathlib import Path

from agent_guidance.core.config import GuidanceConfig
from agent_guidance.runtime.home import get_bundle_root
from agent_guidance.runtime.resolver import GuideResolver


def test_bundle_root_is_packaged_guides_dir() -> None:
    root = get_bundle_root()
    assert root.is_dir()
    assert root.name == "guides"


def test_bundle_ships_english_collection() -> None:
    guides = GuideResolver(get_bundle_root()).list_guides("en")
    assert "vercel_guide_en.md" in guides
    assert "supabase_guide_en.md" in guides


def test_bundle_guides_follow_naming_scheme() -> None:
    root = get_bundle_root()
    for lang_dir in (p for p in root.iterdir() if p.is_dir()):
        for guide in GuideResolver(root).list_guides(lang_dir.name):
            assert guide.endswith(f"_guide_{lang_dir.name}.md")


def test_default_config_targets_cwd(tmp_path: Path) -> None:
    config = GuidanceConfig.default(cwd=tmp_path)
    assert config.output_dir == tmp_path / ".agent_guidance"
    assert config.manifest_path == tmp_path / ".agent_guidance" / "guidance_list.md"
    assert config.bundle_root == get_bundle_root()
