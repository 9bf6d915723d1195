#!/usr/bin/env python3
"""
config.py — Environment-driven configuration for the TuneAtLife asset scripts.

Every script builds one AppConfig via load_config() and passes it (or the
parts it needs) down explicitly. Values come from the process environment
after .env.local and .env are loaded; the front end's REACT_APP_ prefixed
names are accepted as fallbacks so both sides can share one env file.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent.parent
GENERATED_DIR = PROJECT_ROOT / "generated-assets"
CATALOG_PATH = PROJECT_ROOT / "assets" / "catalog.json"

DEFAULT_CLOUD_NAME = "dgel7rbdd"
DEFAULT_BASE_URL = "https://res.cloudinary.com"
DEFAULT_FOLDER = "tuneatlife"
DEFAULT_ENVIRONMENT = "development"


@dataclass(frozen=True)
class BrandGuidelines:
    palette: Dict[str, str] = field(default_factory=lambda: {
        "primary": "#667eea",
        "secondary": "#764ba2",
        "accent": "#4ade80",
        "neutral": "#f8fafc",
        "text": "#1e293b",
    })
    style: str = "modern, clean, professional, wellness-focused, diverse, inclusive"
    tone: str = "encouraging, supportive, non-judgmental, empowering"
    visual_themes: str = "health, wellness, AI technology, cultural diversity, personal growth"

    def as_dict(self) -> Dict:
        return {
            "color_palette": dict(self.palette),
            "style": self.style,
            "tone": self.tone,
            "visual_themes": self.visual_themes,
        }


@dataclass(frozen=True)
class CloudinaryConfig:
    cloud_name: str = DEFAULT_CLOUD_NAME
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    folder: str = DEFAULT_FOLDER

    def missing_credentials(self) -> List[str]:
        """Names of the credentials an upload needs but that are not set."""
        missing = []
        if not self.cloud_name:
            missing.append("CLOUDINARY_CLOUD_NAME")
        if not self.api_key:
            missing.append("CLOUDINARY_API_KEY")
        if not self.api_secret:
            missing.append("CLOUDINARY_API_SECRET")
        return missing


@dataclass(frozen=True)
class AppConfig:
    cloudinary: CloudinaryConfig = field(default_factory=CloudinaryConfig)
    environment: str = DEFAULT_ENVIRONMENT
    sentry_dsn: Optional[str] = None
    gemini_api_key: Optional[str] = None
    brand: BrandGuidelines = field(default_factory=BrandGuidelines)
    project_root: Path = PROJECT_ROOT
    generated_dir: Path = GENERATED_DIR
    catalog_path: Path = CATALOG_PATH


def env_value(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read NAME, falling back to REACT_APP_NAME. Blank values count as unset."""
    for key in (name, f"REACT_APP_{name}"):
        value = os.environ.get(key)
        if value is not None and value.strip():
            return value.strip()
    return default


def load_env_files(root: Path = PROJECT_ROOT) -> None:
    # Already-exported variables win over file contents
    for name in (".env.local", ".env"):
        path = root / name
        if path.exists():
            load_dotenv(path, override=False)


def load_config(root: Optional[Path] = None, load_files: bool = True) -> AppConfig:
    root = root or PROJECT_ROOT
    if load_files:
        load_env_files(root)

    cloudinary = CloudinaryConfig(
        cloud_name=env_value("CLOUDINARY_CLOUD_NAME", DEFAULT_CLOUD_NAME),
        api_key=env_value("CLOUDINARY_API_KEY"),
        api_secret=env_value("CLOUDINARY_API_SECRET"),
    )
    generated_dir = root / "generated-assets"
    return AppConfig(
        cloudinary=cloudinary,
        environment=env_value("ENVIRONMENT", DEFAULT_ENVIRONMENT),
        sentry_dsn=env_value("SENTRY_DSN"),
        gemini_api_key=env_value("GEMINI_API_KEY"),
        project_root=root,
        generated_dir=generated_dir,
        catalog_path=root / "assets" / "catalog.json",
    )
