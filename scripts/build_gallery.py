#!/usr/bin/env python3
"""
Manual script: run one retrieval cycle and print the enriched gallery.

Usage:
    python scripts/build_gallery.py [github_user] [filter]

Example:
    python scripts/build_gallery.py georgekalf
    python scripts/build_gallery.py georgekalf "Machine Learning"
"""

import sys
import os
import json

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings
from gallery import ALL_FILTER, ProjectCatalog
from gateway import GitHubGateway
from render import render_gallery
from tasks import refresh_catalog


def build_gallery(user: str | None, filter_key: str):
    settings = Settings.from_env()
    if user:
        settings = settings.model_copy(update={"github_user": user})

    print(f"\n{'='*60}")
    print(f"Gallery for: {settings.github_user} (filter={filter_key})")
    print(f"{'='*60}\n")

    catalog = ProjectCatalog()
    live = refresh_catalog(catalog, GitHubGateway.from_settings(settings), settings)
    if not live:
        print("❌ Repo listing failed, showing fallback projects\n")

    visible, filter_values = catalog.view(filter_key)
    view = render_gallery(visible, filter_values, filter_key)
    print(f"Filters: {[f['key'] for f in view['filters']]}\n")
    print(f"Projects ({len(view['projects'])}):")
    print(json.dumps(view["projects"], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    user = sys.argv[1] if len(sys.argv) > 1 else None
    filter_key = sys.argv[2] if len(sys.argv) > 2 else ALL_FILTER
    build_gallery(user, filter_key)
