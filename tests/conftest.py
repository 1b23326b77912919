from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from agent_guidance.core.config import GuidanceConfig

BundleFactory = Callable[[dict[str, dict[str, str]]], Path]


@pytest.fixture()
def make_bundle(tmp_path: Path) -> BundleFactory:
    """Build a guide bundle under tmp_path from ``{lang: {filename: content}}``."""

    def _make(collections: dict[str, dict[str, str]]) -> Path:
        root = tmp_path / "bundle"
        root.mkdir(exist_ok=True)
        for language, files in collections.items():
            lang_dir = root / language
            lang_dir.mkdir(exist_ok=True)
            for name, content in files.items():
                (lang_dir / name).write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture()
def bundle(make_bundle: BundleFactory) -> Path:
    return make_bundle(
        {
            "en": {
                "vercel_guide_en.md": "# Vercel\n",
                "supabase_guide_en.md": "# Supabase\n",
                "stripe_guide_en.md": "# Stripe\n",
                "notes.txt": "not a guide",
            },
            "zh": {
                "vercel_guide_zh.md": "# Vercel (zh)\n",
            },
        }
    )


@pytest.fixture()
def guidance_config(bundle: Path, tmp_path: Path) -> GuidanceConfig:
    return GuidanceConfig(bundle_root=bundle, output_dir=tmp_path / "project" / ".agent_guidance")
