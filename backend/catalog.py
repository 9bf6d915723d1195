#!/usr/bin/env python3
"""
catalog.py — The TuneAtLife asset catalog: (category, name) -> stored asset id.

The catalog lives in assets/catalog.json and is read and written through the
json module only. The upload scripts are the only writers; renderers treat it
as read-only. A lookup miss is not an error: it logs a warning and returns
None so callers can degrade to an empty URL.
"""
from __future__ import annotations

import copy
import json
import logging
import shutil
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Tuple

log = logging.getLogger(__name__)

BACKUP_NAME = "catalog.json.bak"


class AssetCategory(str, Enum):
    LOGO = "logo"
    EXPERTS = "experts"
    ICONS = "icons"
    TESTIMONIALS = "testimonials"
    HERO = "hero"
    FEATURES = "features"
    SOCIAL = "social"


CATEGORY_NAMES = [c.value for c in AssetCategory]

# Known brand assets, used when no catalog file has been written yet
DEFAULT_CATALOG: Dict[str, Dict[str, str]] = {
    "logo": {
        "main": "logo/tuneatlife-logo-main",
        "white": "logo/tuneatlife-logo-white",
        "icon": "logo/tuneatlife-icon",
        "favicon": "logo/tuneatlife-favicon",
    },
    "experts": {
        "alexRivera": "experts/alex-rivera-fitness-coach",
        "mayaChen": "experts/maya-chen-nutritionist",
        "sarahKim": "experts/sarah-kim-mindfulness",
        "jamesWilson": "experts/james-wilson-sleep",
        "lisaPark": "experts/lisa-park-supplements",
    },
    "icons": {
        "ai": "icons/ai-brain",
        "culturalIntelligence": "icons/cultural-globe",
        "foodAnalysis": "icons/camera-food",
        "progress": "icons/chart-progress",
        "goals": "icons/target-goals",
        "notification": "icons/bell-notification",
        "health": "icons/heart-health",
        "fitness": "icons/dumbbell-fitness",
        "nutrition": "icons/apple-nutrition",
        "sleep": "icons/moon-sleep",
        "mindfulness": "icons/meditation-brain",
        "supplements": "icons/pills-supplements",
    },
    "testimonials": {
        "sarahM": "testimonials/sarah-m-working-mom",
        "davidL": "testimonials/david-l-ceo",
        "mariaG": "testimonials/maria-g-fitness",
        "jamesK": "testimonials/james-k-executive",
        "lisaP": "testimonials/lisa-p-new-mom",
    },
    "hero": {
        "main": "hero/wellness-transformation-hero",
        "mobile": "hero/mobile-app-hero",
        "dashboard": "hero/dashboard-preview",
        "success": "hero/success-stories-bg",
    },
    "features": {
        "foodPhotoAnalysis": "features/food-photo-analysis-demo",
        "aiChat": "features/ai-chat-interface",
        "progressTracking": "features/progress-charts",
        "culturalMeals": "features/cultural-meals-collage",
    },
    "social": {
        "userStats": "social/user-statistics-graphic",
        "ratings": "social/five-star-ratings",
        "transformations": "social/before-after-collage",
    },
}

# Named transform presets shared by the front end and the report generator
IMAGE_PRESETS: Dict[str, Dict] = {
    "avatar": {"width": 150, "height": 150, "crop": "thumb", "gravity": "face"},
    "heroMobile": {"width": 400, "height": 600, "crop": "fill"},
    "heroDesktop": {"width": 1200, "height": 800, "crop": "fill"},
    "icon": {"width": 64, "height": 64, "crop": "fit"},
    "iconLarge": {"width": 128, "height": 128, "crop": "fit"},
    "cardImage": {"width": 400, "height": 250, "crop": "fill"},
    "thumbnail": {"width": 200, "height": 150, "crop": "fill"},
    "background": {"width": 1920, "height": 1080, "crop": "fill", "quality": "80"},
}


def _category(category: str) -> str:
    value = category.value if isinstance(category, AssetCategory) else str(category)
    if value not in CATEGORY_NAMES:
        raise ValueError(f"Unknown asset category: {value!r} "
                         f"(expected one of {', '.join(CATEGORY_NAMES)})")
    return value


class Catalog:
    def __init__(self, entries: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._entries: Dict[str, Dict[str, str]] = {name: {} for name in CATEGORY_NAMES}
        for category, names in (entries or {}).items():
            self.merge(category, names)

    @classmethod
    def default(cls) -> "Catalog":
        return cls(copy.deepcopy(DEFAULT_CATALOG))

    @classmethod
    def load(cls, path: Path) -> "Catalog":
        """Read a catalog file. A missing file yields the default catalog."""
        path = Path(path)
        if not path.exists():
            log.info("No catalog at %s, using built-in defaults", path)
            return cls.default()
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Catalog file {path} must contain a JSON object")
        return cls(data)

    def lookup(self, category: str, name: str) -> Optional[str]:
        key = category.value if isinstance(category, AssetCategory) else category
        asset_id = self._entries.get(key, {}).get(name)
        if not asset_id:
            log.warning("Image not found: %s.%s", key, name)
            return None
        return asset_id

    def set(self, category: str, name: str, asset_id: str) -> None:
        self._entries[_category(category)][name] = asset_id

    def merge(self, category: str, entries: Mapping[str, str]) -> int:
        """Overwrite entries in one category. Returns how many were written."""
        bucket = self._entries[_category(category)]
        for name, asset_id in entries.items():
            bucket[name] = asset_id
        return len(entries)

    def category(self, category: str) -> Dict[str, str]:
        return dict(self._entries[_category(category)])

    def items(self) -> Iterator[Tuple[str, str, str]]:
        for category in CATEGORY_NAMES:
            for name in sorted(self._entries[category]):
                yield category, name, self._entries[category][name]

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            category: {name: self._entries[category][name]
                       for name in sorted(self._entries[category])}
            for category in CATEGORY_NAMES
        }

    def save(self, path: Path, backup_dir: Optional[Path] = None) -> Optional[Path]:
        """Write the catalog as JSON, backing up the previous file first.

        Only one backup generation is kept. Returns the backup path, if any.
        """
        path = Path(path)
        backup_path = None
        if backup_dir is not None and path.exists():
            backup_dir = Path(backup_dir)
            backup_dir.mkdir(parents=True, exist_ok=True)
            backup_path = backup_dir / BACKUP_NAME
            shutil.copyfile(path, backup_path)

        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with open(tmp_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
            f.write("\n")
        tmp_path.replace(path)
        return backup_path

    def __len__(self) -> int:
        return sum(len(names) for names in self._entries.values())

    def __contains__(self, key: Tuple[str, str]) -> bool:
        category, name = key
        return name in self._entries.get(category, {})
